"""Read-through cache in front of a LiveDatasource, TTL chosen per data class."""

from __future__ import annotations

import logging
from enum import IntEnum
from typing import Awaitable, Callable, TypeVar

from lolesports.api.models import (
    EventDetailsResponse,
    LeaguesResponse,
    LiveResponse,
    ScheduleResponse,
)
from lolesports.services.cache import Cache
from lolesports.services.datasource import DEFAULT_LANGUAGE, LiveDatasource

log = logging.getLogger(__name__)

T = TypeVar("T")

MINUTE = 60
DAY = 24 * 60 * MINUTE


class CacheTTL(IntEnum):
    """Seconds an entry stays fresh, by how fast the data changes."""

    STATIC = DAY  # league catalog
    DYNAMIC = 5 * MINUTE  # schedule
    LIVE = 30  # in-progress matches
    HISTORICAL = 7 * DAY  # event details


class CachedLiveDatasource:
    """Wraps a LiveDatasource; a hit never reaches the wrapped source.

    Upstream failures propagate unchanged and are not cached. Concurrent
    misses on the same key each fetch; the last write wins.
    """

    def __init__(self, datasource: LiveDatasource, cache: Cache) -> None:
        self.datasource = datasource
        self.cache = cache

    async def _read_through(
        self, key: str, ttl: CacheTTL, fetch: Callable[[], Awaitable[T]]
    ) -> T:
        cached = await self.cache.get(key)
        if cached is not None:
            log.debug("Cache hit: %s", key)
            return cached
        log.debug("Cache miss: %s", key)
        result = await fetch()
        await self.cache.set(key, result, ttl=int(ttl))
        return result

    async def get_schedule(
        self, language: str = DEFAULT_LANGUAGE, league_id: str | None = None
    ) -> ScheduleResponse:
        """Keyed ``schedule:{language}:{league_id}``; no league maps to "all".

        A literal league id of "all" therefore shares the unfiltered entry.
        """
        return await self._read_through(
            f"schedule:{language}:{league_id or 'all'}",
            CacheTTL.DYNAMIC,
            lambda: self.datasource.get_schedule(language, league_id),
        )

    async def get_live(self, language: str = DEFAULT_LANGUAGE) -> LiveResponse:
        return await self._read_through(
            f"live:{language}",
            CacheTTL.LIVE,
            lambda: self.datasource.get_live(language),
        )

    async def get_event_details(
        self, event_id: str, language: str = DEFAULT_LANGUAGE
    ) -> EventDetailsResponse:
        return await self._read_through(
            f"event:{event_id}:{language}",
            CacheTTL.HISTORICAL,
            lambda: self.datasource.get_event_details(event_id, language),
        )

    async def get_leagues(self, language: str = DEFAULT_LANGUAGE) -> LeaguesResponse:
        return await self._read_through(
            f"leagues:{language}",
            CacheTTL.STATIC,
            lambda: self.datasource.get_leagues(language),
        )
