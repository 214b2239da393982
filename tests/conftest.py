from __future__ import annotations

import copy
from unittest.mock import MagicMock

import pytest

from espn_ff.domain.context import ModelContext


LEAGUE_ID = 336358
SEASON_ID = 2018

_ROSTER_RESPONSE = {
    "leagueRosters": {
        "teams": [
            {
                "teamId": 4,
                "team": {
                    "teamId": 4,
                    "teamLocation": "Gridiron",
                    "teamNickname": "Ghosts",
                    "teamAbbrev": "GG",
                    "division": {"divisionId": 0, "divisionName": "East"},
                    "record": {
                        "overallWins": 5,
                        "overallLosses": 6,
                        "overallTies": 0,
                        "pointsFor": 1201.4,
                        "pointsAgainst": 1180.2,
                    },
                },
                "slots": [
                    {
                        "slotCategoryId": 2,
                        "isKeeper": False,
                        "isLocked": False,
                        "player": {"playerId": 3043078, "firstName": "Derrick", "lastName": "Henry",
                                   "jersey": "22", "proTeamId": 10, "defaultPositionId": 2},
                    },
                ],
            },
            {
                "teamId": 9,
                "team": {
                    "teamId": 9,
                    "teamLocation": "Sunday",
                    "teamNickname": "Scaries",
                    "teamAbbrev": "SS",
                    "logoUrl": "https://example.com/logo.png",
                    "division": {"divisionId": 1, "divisionName": "West"},
                    "record": {
                        "overallWins": 8,
                        "overallLosses": 3,
                        "overallTies": 0,
                        "pointsFor": 1312.8,
                        "pointsAgainst": 1090.5,
                    },
                },
                "slots": [
                    {
                        "slotCategoryId": 0,
                        "isKeeper": True,
                        "isLocked": True,
                        "player": {"playerId": 2330, "firstName": "Tom", "lastName": "Brady",
                                   "jersey": "12", "proTeamId": 17, "defaultPositionId": 1,
                                   "percentOwned": 99.4},
                    },
                    {
                        "slotCategoryId": 4,
                        "isKeeper": False,
                        "isLocked": False,
                        "player": {"playerId": 15795, "firstName": "DeAndre", "lastName": "Hopkins",
                                   "jersey": 10, "proTeamId": 34, "defaultPositionId": 3},
                    },
                    {
                        "slotCategoryId": 20,
                        "isKeeper": False,
                        "isLocked": False,
                        "player": {"playerId": 3116385, "firstName": "Joe", "lastName": "Mixon",
                                   "jersey": "28", "proTeamId": 4, "defaultPositionId": 2},
                    },
                    {"slotCategoryId": 21, "isKeeper": False},
                ],
            },
        ],
    },
}

_LEAGUE_RESPONSE = {
    "leagueSettings": {
        "name": "Sunday Scaries League",
        "size": 2,
        "isPublic": False,
        "firstScoringPeriodId": 1,
        "finalScoringPeriodId": 16,
        "regularSeasonMatchupPeriodCount": 13,
        "playoffTeamCount": 4,
        "teams": {
            "9": {"teamId": 9, "teamLocation": "Sunday", "teamNickname": "Scaries", "teamAbbrev": "SS"},
            "4": {"teamId": 4, "teamLocation": "Gridiron", "teamNickname": "Ghosts", "teamAbbrev": "GG"},
        },
    },
}


@pytest.fixture
def client():
    return MagicMock()


@pytest.fixture
def context(client):
    return ModelContext(client=client)


@pytest.fixture
def roster_response():
    return copy.deepcopy(_ROSTER_RESPONSE)


@pytest.fixture
def league_response():
    return copy.deepcopy(_LEAGUE_RESPONSE)
