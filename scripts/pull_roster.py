from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from espn_ff.domain.context import ModelContext
from espn_ff.domain.roster import Roster
from espn_ff.espn_client import EspnClient
from espn_ff.settings import Settings


def _roster_summary(roster: Roster) -> dict:
    return {
        "cache_id": roster.cache_id,
        "team": roster.team.model_dump() if roster.team is not None else None,
        "players": [
            {
                "position": sp.position,
                "is_keeper": sp.is_keeper,
                "is_locked": sp.is_locked,
                "player": sp.player.model_dump() if sp.player is not None else None,
            }
            for sp in roster.players
        ],
    }


def main(argv: Optional[List[str]] = None) -> None:
    ap = argparse.ArgumentParser(description="Read one team's roster for a scoring period.")
    ap.add_argument("--league-id", type=int, default=None)
    ap.add_argument("--season-id", type=int, default=None)
    ap.add_argument("--team-id", type=int, required=True)
    ap.add_argument("--scoring-period-id", type=int, default=None)
    ap.add_argument("--out", default=None, help="Optional path for a JSON dump of the roster")
    args = ap.parse_args(argv)

    settings = Settings.from_local_config()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    league_id = args.league_id if args.league_id is not None else settings.league_id
    season_id = args.season_id if args.season_id is not None else settings.season_id

    context = ModelContext(client=EspnClient.from_settings(settings))
    roster = Roster(
        league_id=league_id,
        season_id=season_id,
        team_id=args.team_id,
        scoring_period_id=args.scoring_period_id,
    )
    roster.refresh(context)

    team = roster.team
    print(f"{team.name or '?'} ({team.abbreviation or '?'}) | {len(roster.players)} slotted players")
    for sp in roster.players:
        p = sp.player
        name = p.full_name if p is not None and p.full_name else "(empty)"
        pro = (p.pro_team if p is not None else None) or "?"
        keeper = " | keeper" if sp.is_keeper else ""
        print(f"- {sp.position or '?'}: {name} ({pro}){keeper}")

    if args.out:
        out_path = Path(args.out)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(json.dumps(_roster_summary(roster), indent=2), encoding="utf-8")
        print(f"Saved -> {out_path}")


if __name__ == "__main__":
    main()
