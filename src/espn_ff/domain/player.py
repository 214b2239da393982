from __future__ import annotations

from typing import Any, ClassVar, Dict, Mapping, Optional

from espn_ff.domain.base import BaseAPIObject, FieldMapping, composite_key
from espn_ff.domain.positions import default_position, pro_team_abbreviation


def _optional_str(raw: Any, player: "Player", context: Any) -> Optional[str]:
    if raw is None:
        return None
    s = str(raw).strip()
    return s or None


class Player(BaseAPIObject):
    display_name: ClassVar[str] = "Player"

    player_id: Optional[int] = None
    season_id: Optional[int] = None

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    jersey: Optional[str] = None

    pro_team_id: Optional[int] = None
    pro_team: Optional[str] = None
    default_position_id: Optional[int] = None
    default_position: Optional[str] = None

    health_status: Optional[int] = None
    percent_owned: Optional[float] = None
    percent_started: Optional[float] = None

    response_map: ClassVar[Dict[str, FieldMapping]] = {
        "player_id": FieldMapping("playerId"),
        "first_name": FieldMapping("firstName"),
        "last_name": FieldMapping("lastName"),
        "jersey": FieldMapping("jersey", parse=_optional_str),
        "pro_team_id": FieldMapping("proTeamId"),
        "pro_team": FieldMapping(
            "proTeamId", parse=lambda raw, player, context: pro_team_abbreviation(raw)
        ),
        "default_position_id": FieldMapping("defaultPositionId"),
        "default_position": FieldMapping(
            "defaultPositionId", parse=lambda raw, player, context: default_position(raw)
        ),
        "health_status": FieldMapping("healthStatus"),
        "percent_owned": FieldMapping("percentOwned"),
        "percent_started": FieldMapping("percentStarted"),
    }

    @classmethod
    def get_cache_id(cls, params: Optional[Mapping[str, Any]] = None) -> Optional[str]:
        return composite_key(params, "player_id", "season_id")

    @property
    def full_name(self) -> str:
        return " ".join(p for p in (self.first_name, self.last_name) if p)
