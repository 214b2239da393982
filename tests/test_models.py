from __future__ import annotations

import pytest

from espn_ff.domain.player import Player
from espn_ff.domain.positions import default_position, pro_team_abbreviation, slot_position
from espn_ff.domain.slotted_player import SlottedPlayer
from espn_ff.domain.team import Team


def test_team_from_server(context):
    team = Team.build_from_server(
        {
            "teamId": 3,
            "teamLocation": "Gridiron",
            "teamNickname": "Ghosts",
            "teamAbbrev": "GG",
            "division": {"divisionId": 1, "divisionName": "West"},
            "record": {"overallWins": 4, "overallLosses": 2, "overallTies": 1,
                       "pointsFor": 700.5, "pointsAgainst": 650.0},
        },
        context,
        league_id=1,
        season_id=2018,
    )

    assert team.name == "Gridiron Ghosts"
    assert (team.wins, team.losses, team.ties) == (4, 2, 1)
    assert team.division_name == "West"
    assert team.points_for == 700.5
    assert team.cache_id == "3-1-2018"


def test_empty_team_has_blank_name_and_no_cache_id():
    team = Team(league_id=1, season_id=2018)
    assert team.name == ""
    assert team.cache_id is None


def test_team_cache_id_needs_all_ids():
    assert Team.get_cache_id({"team_id": 1, "league_id": 2, "season_id": 3}) == "1-2-3"
    assert Team.get_cache_id({"team_id": 1, "league_id": 2}) is None


def test_player_from_server(context):
    player = Player.build_from_server(
        {"playerId": 2330, "firstName": "Tom", "lastName": "Brady", "jersey": 12,
         "proTeamId": 17, "defaultPositionId": 1, "percentOwned": 99.4},
        context,
        season_id=2018,
    )

    assert player.full_name == "Tom Brady"
    assert player.jersey == "12"
    assert player.pro_team == "NE"
    assert player.default_position == "QB"
    assert player.percent_owned == 99.4
    assert context.caches.for_model(Player).get("2330-2018") is player


def test_player_with_unknown_lookups(context):
    player = Player.build_from_server({"playerId": 1, "proTeamId": 99, "jersey": " "}, context)
    assert player.pro_team is None
    assert player.default_position is None
    assert player.jersey is None
    assert player.cache_id is None


def test_slotted_player_resolves_player_through_cache(context):
    ids = dict(league_id=1, season_id=2018, team_id=3, scoring_period_id=5)
    slot = {"slotCategoryId": 23, "isKeeper": True, "player": {"playerId": 42, "firstName": "A"}}

    first = SlottedPlayer.build_from_server(slot, context, **ids)
    second = SlottedPlayer.build_from_server(slot, context, **{**ids, "scoring_period_id": 6})

    assert first.position == "RB/WR/TE"
    assert first.is_keeper is True
    assert first.is_locked is False
    assert first.cache_id == "42-3-1-2018-5"
    assert second.player is first.player


def test_slotted_player_without_player(context):
    slotted = SlottedPlayer.build_from_server({"slotCategoryId": 20, "isKeeper": None}, context)
    assert slotted.player is None
    assert slotted.is_keeper is False
    assert slotted.position == "Bench"
    assert slotted.cache_id is None


@pytest.mark.parametrize(
    "lookup, raw, expected",
    [
        (slot_position, 20, "Bench"),
        (slot_position, "0", "QB"),
        (slot_position, 22, None),
        (default_position, 16, "D/ST"),
        (pro_team_abbreviation, 0, "FA"),
        (pro_team_abbreviation, None, None),
        (pro_team_abbreviation, True, None),
        (pro_team_abbreviation, "abc", None),
    ],
)
def test_position_lookups(lookup, raw, expected):
    assert lookup(raw) == expected
