from __future__ import annotations

import logging
from typing import Any, ClassVar, Dict, List, Mapping, Optional

from pydantic import Field

from espn_ff.domain.base import BaseAPIObject, FieldMapping, composite_key, dig
from espn_ff.domain.slotted_player import SlottedPlayer
from espn_ff.domain.team import Team
from espn_ff.errors import MissingParameterError


logger = logging.getLogger(__name__)


def _team_entry(raw: Any, roster: "Roster") -> Optional[Mapping[str, Any]]:
    """The element of the leagueRosters.teams array that belongs to this roster."""
    if roster.team_id is None or not raw or not isinstance(raw, list):
        return None
    for entry in raw:
        if isinstance(entry, Mapping) and entry.get("teamId") == roster.team_id:
            return entry
    return None


def parse_roster_team(raw: Any, roster: "Roster", context) -> Team:
    entry = _team_entry(raw, roster)
    if entry is None:
        logger.debug("Roster %s: no team entry, using an empty Team", roster.team_id)
        return Team(league_id=roster.league_id, season_id=roster.season_id)

    cache_id = Team.get_cache_id(
        {"team_id": roster.team_id, "league_id": roster.league_id, "season_id": roster.season_id}
    )
    return Team.lookup_or_build(
        cache_id,
        entry.get("team") or {},
        context,
        team_id=roster.team_id,
        league_id=roster.league_id,
        season_id=roster.season_id,
    )


def parse_roster_players(raw: Any, roster: "Roster", context) -> List[SlottedPlayer]:
    entry = _team_entry(raw, roster)
    if entry is None:
        return []

    slots = entry.get("slots") or []
    if not isinstance(slots, list):
        logger.debug("Roster %s: slots is %s, not a list", roster.team_id, type(slots).__name__)
        return []

    ids = {
        "league_id": roster.league_id,
        "season_id": roster.season_id,
        "team_id": roster.team_id,
        "scoring_period_id": roster.scoring_period_id,
    }

    players: List[SlottedPlayer] = []
    for slot in slots:
        if not isinstance(slot, Mapping):
            continue
        player_id = dig(slot, "player.playerId")
        cache_id = SlottedPlayer.get_cache_id(
            {**ids, "player_id": player_id if isinstance(player_id, int) else None}
        )
        players.append(SlottedPlayer.lookup_or_build(cache_id, slot, context, **ids))
    return players


class Roster(BaseAPIObject):
    display_name: ClassVar[str] = "Roster"
    route: ClassVar[Optional[str]] = "rosterInfo"
    response_key: ClassVar[Optional[str]] = "leagueRosters"

    league_id: Optional[int] = None
    season_id: Optional[int] = None
    team_id: Optional[int] = None
    scoring_period_id: Optional[int] = None

    team: Optional[Team] = None
    players: List[SlottedPlayer] = Field(default_factory=list)

    response_map: ClassVar[Dict[str, FieldMapping]] = {
        "team": FieldMapping("teams", parse=parse_roster_team),
        "players": FieldMapping("teams", parse=parse_roster_players),
    }

    @classmethod
    def get_cache_id(cls, params: Optional[Mapping[str, Any]] = None) -> Optional[str]:
        return composite_key(params, "team_id", "league_id", "season_id", "scoring_period_id")

    @classmethod
    def read(
        cls,
        context,
        *,
        model: Optional["Roster"] = None,
        route: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
        reload: bool = True,
    ):
        params = params or {}
        if params.get("leagueId") is None:
            raise MissingParameterError(cls.display_name, "static read", "leagueId")
        if params.get("seasonId") is None:
            raise MissingParameterError(cls.display_name, "static read", "seasonId")
        if params.get("teamId") is None and params.get("teamIds") is None:
            raise MissingParameterError(cls.display_name, "static read", "teamId")

        return super().read(context, model=model, route=route, params=params, reload=reload)

    def refresh(
        self,
        context,
        *,
        params: Optional[Dict[str, Any]] = None,
        route: Optional[str] = None,
        reload: Optional[bool] = None,
    ):
        request_params = dict(params or {})
        for wire_name, value in (
            ("leagueId", self.league_id),
            ("seasonId", self.season_id),
            ("teamIds", self.team_id),
            ("scoringPeriodId", self.scoring_period_id),
        ):
            if value is not None:
                request_params[wire_name] = value

        return super().refresh(
            context,
            params=request_params,
            route=route or self.route,
            reload=True if reload is None else reload,
        )
