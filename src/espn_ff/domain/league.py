from __future__ import annotations

from typing import Any, ClassVar, Dict, List, Mapping, Optional

from pydantic import Field

from espn_ff.domain.base import BaseAPIObject, FieldMapping, composite_key
from espn_ff.domain.team import Team
from espn_ff.errors import MissingParameterError


def parse_league_teams(raw: Any, league: "League", context) -> List[Team]:
    # leagueSettings.teams is an object keyed by team id, not an array.
    if not isinstance(raw, Mapping):
        return []

    teams: List[Team] = []
    for key, payload in raw.items():
        if not isinstance(payload, Mapping):
            continue
        team_id = payload.get("teamId")
        if team_id is None and str(key).isdigit():
            team_id = int(key)

        cache_id = Team.get_cache_id(
            {"team_id": team_id, "league_id": league.league_id, "season_id": league.season_id}
        )
        teams.append(
            Team.lookup_or_build(
                cache_id,
                payload,
                context,
                team_id=team_id,
                league_id=league.league_id,
                season_id=league.season_id,
            )
        )

    teams.sort(key=lambda t: (t.team_id is None, t.team_id or 0))
    return teams


class League(BaseAPIObject):
    display_name: ClassVar[str] = "League"
    route: ClassVar[Optional[str]] = "leagueSettings"
    response_key: ClassVar[Optional[str]] = "leagueSettings"

    league_id: Optional[int] = None
    season_id: Optional[int] = None

    name: Optional[str] = None
    size: Optional[int] = None
    is_public: Optional[bool] = None

    first_scoring_period_id: Optional[int] = None
    final_scoring_period_id: Optional[int] = None
    regular_season_matchup_period_count: Optional[int] = None
    playoff_team_count: Optional[int] = None

    teams: List[Team] = Field(default_factory=list)

    response_map: ClassVar[Dict[str, FieldMapping]] = {
        "name": FieldMapping("name"),
        "size": FieldMapping("size"),
        "is_public": FieldMapping("isPublic"),
        "first_scoring_period_id": FieldMapping("firstScoringPeriodId"),
        "final_scoring_period_id": FieldMapping("finalScoringPeriodId"),
        "regular_season_matchup_period_count": FieldMapping("regularSeasonMatchupPeriodCount"),
        "playoff_team_count": FieldMapping("playoffTeamCount"),
        "teams": FieldMapping("teams", parse=parse_league_teams),
    }

    @classmethod
    def get_cache_id(cls, params: Optional[Mapping[str, Any]] = None) -> Optional[str]:
        return composite_key(params, "league_id", "season_id")

    @classmethod
    def read(
        cls,
        context,
        *,
        model: Optional["League"] = None,
        route: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
        reload: bool = True,
    ):
        params = params or {}
        if params.get("leagueId") is None:
            raise MissingParameterError(cls.display_name, "static read", "leagueId")
        if params.get("seasonId") is None:
            raise MissingParameterError(cls.display_name, "static read", "seasonId")

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
        if self.league_id is not None:
            request_params["leagueId"] = self.league_id
        if self.season_id is not None:
            request_params["seasonId"] = self.season_id

        return super().refresh(
            context,
            params=request_params,
            route=route or self.route,
            reload=True if reload is None else reload,
        )

    def team(self, team_id: int) -> Optional[Team]:
        return next((t for t in self.teams if t.team_id == team_id), None)
