from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol

from espn_ff.domain.cache import CacheRegistry
from espn_ff.espn_client import EspnClient


class ReadClient(Protocol):
    def get(self, route: str, *, params: Optional[dict] = None) -> Dict[str, Any]:
        ...


@dataclass
class ModelContext:
    """Transport and identity caches shared by every parse and read in a session."""

    client: ReadClient
    caches: CacheRegistry = field(default_factory=CacheRegistry)

    @classmethod
    def from_local_config(cls) -> "ModelContext":
        return cls(client=EspnClient.from_local_config())
