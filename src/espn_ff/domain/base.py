from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, ValidationError

from espn_ff.errors import ConfigurationError

if TYPE_CHECKING:
    from espn_ff.domain.context import ModelContext


logger = logging.getLogger(__name__)

FieldParser = Callable[[Any, "BaseAPIObject", "ModelContext"], Any]

# Query param name on the wire -> model field it identifies.
# teamId wins over teamIds when both are present.
PARAM_FIELDS = (
    ("leagueId", "league_id"),
    ("seasonId", "season_id"),
    ("teamId", "team_id"),
    ("teamIds", "team_id"),
    ("scoringPeriodId", "scoring_period_id"),
    ("playerId", "player_id"),
)

_MISSING = object()


@dataclass(frozen=True)
class FieldMapping:
    """
    Where a model field comes from in a server payload.

    key: dotted path into the payload ("record.overallWins").
    parse: optional (raw, model, context) -> value. When set it is always
        called, with raw=None if the key is absent.
    """

    key: str
    parse: Optional[FieldParser] = None


def dig(data: Any, path: str) -> Any:
    cur = data
    for part in path.split("."):
        if not isinstance(cur, Mapping) or part not in cur:
            return _MISSING
        cur = cur[part]
    return cur


def ids_from_params(params: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    ids: Dict[str, Any] = {}
    if not params:
        return ids
    for wire_name, field_name in PARAM_FIELDS:
        value = params.get(wire_name)
        if value is not None and field_name not in ids:
            ids[field_name] = value
    return ids


def composite_key(params: Optional[Mapping[str, Any]], *fields: str) -> Optional[str]:
    """
    "-"-joined values of fields, or None if any is missing.

    Accepts model field names (team_id) or wire param names (teamId, teamIds);
    model field names win when both are given.
    """
    if not params:
        return None
    params = {**ids_from_params(params), **params}
    values = [params.get(f) for f in fields]
    if any(v is None for v in values):
        return None
    return "-".join(str(v) for v in values)


class BaseAPIObject(BaseModel):
    """
    Typed model hydrated from ESPN JSON.

    Subclasses declare pydantic fields plus a response_map saying where each
    field lives in the payload. Instances with a defined cache_id are shared
    through the context's CacheRegistry.
    """

    model_config = ConfigDict(validate_assignment=True)

    display_name: ClassVar[str] = "BaseAPIObject"
    route: ClassVar[Optional[str]] = None
    response_key: ClassVar[Optional[str]] = None
    response_map: ClassVar[Dict[str, FieldMapping]] = {}

    @classmethod
    def get_cache_id(cls, params: Optional[Mapping[str, Any]] = None) -> Optional[str]:
        return None

    def cache_params(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in type(self).model_fields}

    @property
    def cache_id(self) -> Optional[str]:
        return type(self).get_cache_id(self.cache_params())

    def populate_from_server(self, data: Any, context: "ModelContext") -> "BaseAPIObject":
        for field_name, mapping in self.response_map.items():
            raw = dig(data, mapping.key)
            if mapping.parse is not None:
                value = mapping.parse(None if raw is _MISSING else raw, self, context)
            elif raw is not _MISSING:
                value = raw
            else:
                continue

            try:
                setattr(self, field_name, value)
            except ValidationError as e:
                # malformed leaf: keep the current value
                logger.debug(
                    "%s: ignoring %s=%r from %s: %s",
                    self.display_name, field_name, value, mapping.key, e.errors()[0]["msg"],
                )
        return self

    @classmethod
    def build_from_server(cls, data: Any, context: "ModelContext", **constructor_params: Any):
        instance = cls(**constructor_params)
        instance.populate_from_server(data, context)

        cache_id = instance.cache_id
        if cache_id is not None:
            context.caches.for_model(cls).put(cache_id, instance)
        return instance

    @classmethod
    def lookup_or_build(
        cls,
        cache_id: Optional[str],
        data: Any,
        context: "ModelContext",
        **constructor_params: Any,
    ):
        return context.caches.for_model(cls).get_or_build(
            cache_id,
            lambda: cls.build_from_server(data, context, **constructor_params),
        )

    @classmethod
    def read(
        cls,
        context: "ModelContext",
        *,
        model: Optional["BaseAPIObject"] = None,
        route: Optional[str] = None,
        params: Optional[Dict[str, Any]] = None,
        reload: bool = True,
    ):
        route = route or cls.route
        if not route:
            raise ConfigurationError(f"{cls.display_name}: read: no route configured")

        params = dict(params or {})
        ids = ids_from_params(params)
        cache_id = cls.get_cache_id(ids)

        if not reload:
            cached = context.caches.for_model(cls).get(cache_id)
            if cached is not None:
                logger.debug("%s: read: serving cached %s", cls.display_name, cache_id)
                return cached

        payload = context.client.get(route, params=params)
        if cls.response_key:
            data = payload.get(cls.response_key) if isinstance(payload, Mapping) else None
        else:
            data = payload
        if not isinstance(data, Mapping):
            logger.debug("%s: read: %s returned no object body", cls.display_name, route)

        if model is None:
            return cls.build_from_server(data, context, **ids)

        model.populate_from_server(data, context)
        if model.cache_id is not None:
            context.caches.for_model(cls).put(model.cache_id, model)
        return model

    def refresh(
        self,
        context: "ModelContext",
        *,
        params: Optional[Dict[str, Any]] = None,
        route: Optional[str] = None,
        reload: bool = True,
    ):
        """Re-read this instance from the server, populating it in place."""
        return type(self).read(
            context,
            model=self,
            route=route or self.route,
            params=params,
            reload=reload,
        )
