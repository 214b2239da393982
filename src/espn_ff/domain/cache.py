from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional


logger = logging.getLogger(__name__)


@dataclass
class IdentityCache:
    """
    Composite-key -> instance map for one model class.

    Instances are stored by reference, so every lookup of a key returns the
    same object until it is evicted or the cache is cleared.
    """

    name: str
    _items: Dict[str, Any] = field(default_factory=dict, repr=False)

    def get(self, key: Optional[str]) -> Optional[Any]:
        if key is None:
            return None
        return self._items.get(key)

    def put(self, key: str, instance: Any) -> Any:
        self._items[key] = instance
        return instance

    def get_or_build(self, key: Optional[str], build: Callable[[], Any]) -> Any:
        # None keys are never cached; every call builds a new instance.
        if key is not None and key in self._items:
            logger.debug("%s cache hit: %s", self.name, key)
            return self._items[key]

        logger.debug("%s cache miss: %s", self.name, key)
        instance = build()
        if key is not None:
            self._items[key] = instance
        return instance

    def evict(self, key: str) -> Optional[Any]:
        return self._items.pop(key, None)

    def clear(self) -> None:
        self._items.clear()

    def keys(self) -> List[str]:
        return list(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __len__(self) -> int:
        return len(self._items)


@dataclass
class CacheRegistry:
    """One IdentityCache per model class, created on first use."""

    _caches: Dict[type, IdentityCache] = field(default_factory=dict, repr=False)

    def for_model(self, model_cls: type) -> IdentityCache:
        cache = self._caches.get(model_cls)
        if cache is None:
            cache = IdentityCache(name=model_cls.__name__)
            self._caches[model_cls] = cache
        return cache

    def evict(self, model_cls: type, key: str) -> Optional[Any]:
        return self.for_model(model_cls).evict(key)

    def clear(self, model_cls: Optional[type] = None) -> None:
        if model_cls is not None:
            self.for_model(model_cls).clear()
            return
        for cache in self._caches.values():
            cache.clear()
