from __future__ import annotations

import logging
from typing import Any, ClassVar, Dict, Mapping, Optional

from espn_ff.domain.base import BaseAPIObject, FieldMapping, composite_key
from espn_ff.domain.player import Player
from espn_ff.domain.positions import slot_position


logger = logging.getLogger(__name__)


def parse_slot_player(raw: Any, slotted: "SlottedPlayer", context) -> Optional[Player]:
    if not isinstance(raw, Mapping):
        logger.debug("Empty slot for team %s", slotted.team_id)
        return None
    cache_id = Player.get_cache_id(
        {"player_id": raw.get("playerId"), "season_id": slotted.season_id}
    )
    return Player.lookup_or_build(cache_id, raw, context, season_id=slotted.season_id)


class SlottedPlayer(BaseAPIObject):
    """A player sitting in one roster slot for a team and scoring period."""

    display_name: ClassVar[str] = "SlottedPlayer"

    league_id: Optional[int] = None
    season_id: Optional[int] = None
    team_id: Optional[int] = None
    scoring_period_id: Optional[int] = None

    player: Optional[Player] = None
    is_keeper: bool = False
    is_locked: bool = False
    slot_category_id: Optional[int] = None
    position: Optional[str] = None

    response_map: ClassVar[Dict[str, FieldMapping]] = {
        "player": FieldMapping("player", parse=parse_slot_player),
        "is_keeper": FieldMapping("isKeeper", parse=lambda raw, slotted, context: bool(raw)),
        "is_locked": FieldMapping("isLocked", parse=lambda raw, slotted, context: bool(raw)),
        "slot_category_id": FieldMapping("slotCategoryId"),
        "position": FieldMapping(
            "slotCategoryId", parse=lambda raw, slotted, context: slot_position(raw)
        ),
    }

    @classmethod
    def get_cache_id(cls, params: Optional[Mapping[str, Any]] = None) -> Optional[str]:
        return composite_key(
            params, "player_id", "team_id", "league_id", "season_id", "scoring_period_id"
        )

    def cache_params(self) -> Dict[str, Any]:
        params = super().cache_params()
        params["player_id"] = self.player.player_id if self.player is not None else None
        return params
