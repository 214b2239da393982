from __future__ import annotations

from typing import Any, ClassVar, Dict, Mapping, Optional

from espn_ff.domain.base import BaseAPIObject, FieldMapping, composite_key


class Team(BaseAPIObject):
    display_name: ClassVar[str] = "Team"

    team_id: Optional[int] = None
    league_id: Optional[int] = None
    season_id: Optional[int] = None

    location: Optional[str] = None
    nickname: Optional[str] = None
    abbreviation: Optional[str] = None
    logo_url: Optional[str] = None

    division_id: Optional[int] = None
    division_name: Optional[str] = None

    wins: Optional[int] = None
    losses: Optional[int] = None
    ties: Optional[int] = None
    points_for: Optional[float] = None
    points_against: Optional[float] = None

    response_map: ClassVar[Dict[str, FieldMapping]] = {
        "team_id": FieldMapping("teamId"),
        "location": FieldMapping("teamLocation"),
        "nickname": FieldMapping("teamNickname"),
        "abbreviation": FieldMapping("teamAbbrev"),
        "logo_url": FieldMapping("logoUrl"),
        "division_id": FieldMapping("division.divisionId"),
        "division_name": FieldMapping("division.divisionName"),
        "wins": FieldMapping("record.overallWins"),
        "losses": FieldMapping("record.overallLosses"),
        "ties": FieldMapping("record.overallTies"),
        "points_for": FieldMapping("record.pointsFor"),
        "points_against": FieldMapping("record.pointsAgainst"),
    }

    @classmethod
    def get_cache_id(cls, params: Optional[Mapping[str, Any]] = None) -> Optional[str]:
        return composite_key(params, "team_id", "league_id", "season_id")

    @property
    def name(self) -> str:
        return " ".join(p for p in (self.location, self.nickname) if p)
