from __future__ import annotations

from typing import Any, Dict, Optional


SLOT_CATEGORY_POSITIONS: Dict[int, str] = {
    0: "QB",
    1: "TQB",
    2: "RB",
    3: "RB/WR",
    4: "WR",
    5: "WR/TE",
    6: "TE",
    7: "OP",
    8: "DT",
    9: "DE",
    10: "LB",
    11: "DL",
    12: "CB",
    13: "S",
    14: "DB",
    15: "DP",
    16: "D/ST",
    17: "K",
    18: "P",
    19: "HC",
    20: "Bench",
    21: "IR",
    23: "RB/WR/TE",
    24: "ER",
}

DEFAULT_POSITIONS: Dict[int, str] = {
    1: "QB",
    2: "RB",
    3: "WR",
    4: "TE",
    5: "K",
    7: "P",
    9: "DT",
    10: "DE",
    11: "LB",
    12: "CB",
    13: "S",
    14: "HC",
    16: "D/ST",
}

PRO_TEAM_ABBREVIATIONS: Dict[int, str] = {
    0: "FA",
    1: "ATL",
    2: "BUF",
    3: "CHI",
    4: "CIN",
    5: "CLE",
    6: "DAL",
    7: "DEN",
    8: "DET",
    9: "GB",
    10: "TEN",
    11: "IND",
    12: "KC",
    13: "OAK",
    14: "LAR",
    15: "MIA",
    16: "MIN",
    17: "NE",
    18: "NO",
    19: "NYG",
    20: "NYJ",
    21: "PHI",
    22: "ARI",
    23: "PIT",
    24: "LAC",
    25: "SF",
    26: "SEA",
    27: "TB",
    28: "WSH",
    29: "CAR",
    30: "JAX",
    33: "BAL",
    34: "HOU",
}


def _lookup(table: Dict[int, str], raw: Any) -> Optional[str]:
    if raw is None or isinstance(raw, bool):
        return None
    try:
        return table.get(int(raw))
    except (TypeError, ValueError):
        return None


def slot_position(slot_category_id: Any) -> Optional[str]:
    return _lookup(SLOT_CATEGORY_POSITIONS, slot_category_id)


def default_position(position_id: Any) -> Optional[str]:
    return _lookup(DEFAULT_POSITIONS, position_id)


def pro_team_abbreviation(pro_team_id: Any) -> Optional[str]:
    return _lookup(PRO_TEAM_ABBREVIATIONS, pro_team_id)
