"""Cache contract and in-memory TTL cache with hit/miss metrics."""

from __future__ import annotations

import logging
import re
import time
from typing import Any, Callable, Protocol

log = logging.getLogger(__name__)

DEFAULT_MAX_SIZE = 1000


class Cache(Protocol):
    """Async storage contract used by the read-through datasource.

    ``get`` returns ``None`` when the key is absent or expired. Only a
    storage-level failure may raise.
    """

    async def get(self, key: str) -> Any | None: ...

    async def set(self, key: str, value: Any, ttl: float) -> None: ...

    async def delete(self, pattern: str) -> None: ...

    async def clear(self) -> None: ...


class CacheMetrics:
    """Process-lifetime lookup counters."""

    def __init__(self) -> None:
        self.hits = 0
        self.misses = 0
        self.sets = 0

    @property
    def hit_rate(self) -> str:
        total = self.hits + self.misses
        if total == 0:
            return "0%"
        return f"{self.hits / total * 100:.1f}%"

    def snapshot(self) -> dict[str, Any]:
        return {
            "hits": self.hits,
            "misses": self.misses,
            "sets": self.sets,
            "hit_rate": self.hit_rate,
        }


def compile_pattern(pattern: str) -> re.Pattern[str]:
    """Translate a glob where only ``*`` is special into a regex; use with fullmatch."""
    parts = (re.escape(part) for part in pattern.split("*"))
    return re.compile(".*".join(parts), re.DOTALL)


class MemoryCache:
    """In-memory cache with per-key TTL (seconds).

    When the store grows past ``max_size`` an insert first sweeps expired
    entries. Live entries are never evicted for capacity.
    """

    def __init__(
        self,
        max_size: int = DEFAULT_MAX_SIZE,
        clock: Callable[[], float] | None = None,
    ) -> None:
        self.max_size = max_size
        self._clock = clock or time.monotonic
        self._store: dict[str, tuple[Any, float]] = {}
        self.metrics = CacheMetrics()

    @property
    def size(self) -> int:
        return len(self._store)

    async def get(self, key: str) -> Any | None:
        entry = self._store.get(key)
        if entry is None:
            self.metrics.misses += 1
            return None
        value, expires_at = entry
        if self._clock() >= expires_at:
            del self._store[key]
            self.metrics.misses += 1
            return None
        self.metrics.hits += 1
        return value

    async def set(self, key: str, value: Any, ttl: float) -> None:
        if len(self._store) > self.max_size:
            self._cleanup_expired()
        self._store[key] = (value, self._clock() + ttl)
        self.metrics.sets += 1

    async def delete(self, pattern: str) -> None:
        matcher = compile_pattern(pattern)
        doomed = [key for key in self._store if matcher.fullmatch(key)]
        for key in doomed:
            del self._store[key]
        log.debug("Deleted %d cache entries matching %r", len(doomed), pattern)

    async def clear(self) -> None:
        self._store.clear()

    def get_metrics(self) -> dict[str, Any]:
        return self.metrics.snapshot()

    def _cleanup_expired(self) -> None:
        now = self._clock()
        expired = [k for k, (_, expires_at) in self._store.items() if now >= expires_at]
        for key in expired:
            del self._store[key]
        log.debug(
            "Swept %d expired entries (%d remain, max_size=%d)",
            len(expired), len(self._store), self.max_size,
        )
