"""Use cases over the cached LoL Esports datasource."""

from __future__ import annotations

import logging
from typing import Any

from lolesports.api.client import EsportsAPIClient
from lolesports.api.errors import EventNotFoundError
from lolesports.api.models import VOD, Event, EventDetails, LeagueDetails, Schedule
from lolesports.config import Settings
from lolesports.services.cache import Cache, MemoryCache
from lolesports.services.cached_datasource import CachedLiveDatasource
from lolesports.services.datasource import APILiveDatasource, LiveDatasource

log = logging.getLogger(__name__)

LEAGUE_STATUSES = ("force_selected", "selected", "not_selected", "hidden")


class LiveService:
    """Wires client, cache and datasource; exposes the read operations.

    The cache is owned by this instance (or injected) and shared by every
    operation; keys are namespaced per operation.
    """

    def __init__(
        self,
        settings: Settings,
        client: EsportsAPIClient | None = None,
        cache: Cache | None = None,
        datasource: LiveDatasource | None = None,
    ) -> None:
        self.settings = settings
        self.language = settings.default_language
        self.client = client
        if datasource is None:
            if self.client is None:
                self.client = EsportsAPIClient(
                    settings.api_key,
                    base_url=settings.api_base_url,
                    timeout=settings.http_timeout,
                )
            datasource = APILiveDatasource(self.client)
        self.cache = cache or MemoryCache(max_size=settings.cache_max_size)
        self.datasource = CachedLiveDatasource(datasource, self.cache)

    async def close(self) -> None:
        if self.client is not None:
            await self.client.close()

    # ── Schedule ──

    async def get_schedule(
        self, language: str | None = None, league_id: str | None = None
    ) -> Schedule:
        response = await self.datasource.get_schedule(language or self.language, league_id)
        return response.data.schedule

    async def get_upcoming_matches(
        self, language: str | None = None, limit: int = 10
    ) -> list[Event]:
        """Unstarted events, soonest first."""
        schedule = await self.get_schedule(language)
        upcoming = [e for e in schedule.events if e.is_upcoming()]
        upcoming.sort(key=lambda e: e.start_time)
        return upcoming[:limit]

    async def get_matches_for_league(
        self, league_slug: str, language: str | None = None
    ) -> list[Event]:
        schedule = await self.get_schedule(language)
        return [e for e in schedule.events if e.is_league_match(league_slug)]

    async def get_upcoming_for_league(
        self, league_slug: str, language: str | None = None
    ) -> list[Event]:
        matches = await self.get_matches_for_league(league_slug, language)
        return [e for e in matches if e.is_upcoming()]

    async def get_live_for_league(
        self, league_slug: str, language: str | None = None
    ) -> list[Event]:
        matches = await self.get_matches_for_league(league_slug, language)
        return [e for e in matches if e.is_live()]

    async def get_completed_for_league(
        self, league_slug: str, language: str | None = None
    ) -> list[Event]:
        matches = await self.get_matches_for_league(league_slug, language)
        return [e for e in matches if e.is_completed()]

    # ── Live ──

    async def get_live_matches(self, language: str | None = None) -> list[Event]:
        """Events the gateway reports that are actually in progress."""
        response = await self.datasource.get_live(language or self.language)
        return [e for e in response.data.schedule.events if e.is_live()]

    async def check_live_matches(self, language: str | None = None) -> bool:
        return len(await self.get_live_matches(language)) > 0

    async def get_live_match_count(self, language: str | None = None) -> int:
        return len(await self.get_live_matches(language))

    async def get_live_match_score(
        self, team_name: str, language: str | None = None
    ) -> list[dict[str, str]]:
        """Live scores for matches involving a team (name or code)."""
        results = []
        for event in await self.get_live_matches(language):
            if event.match is None or event.match.team_by_name(team_name) is None:
                continue
            results.append({
                "event_id": event.match.id,
                "title": event.match.title,
                "score": event.match.live_score(),
            })
        return results

    # ── Leagues ──

    async def get_leagues(self, language: str | None = None) -> list[LeagueDetails]:
        response = await self.datasource.get_leagues(language or self.language)
        return response.data.leagues

    async def get_leagues_by_region(
        self, region: str, language: str | None = None
    ) -> list[LeagueDetails]:
        return [lg for lg in await self.get_leagues(language) if lg.region == region]

    async def get_leagues_by_status(
        self, status: str, language: str | None = None
    ) -> list[LeagueDetails]:
        if status not in LEAGUE_STATUSES:
            raise ValueError(f"Unknown league status: {status!r}")
        leagues = await self.get_leagues(language)
        return [lg for lg in leagues if lg.display_priority.status == status]

    async def get_available_regions(self, language: str | None = None) -> list[str]:
        """Distinct regions in catalog order."""
        regions: dict[str, None] = {}
        for league in await self.get_leagues(language):
            regions.setdefault(league.region)
        return list(regions)

    async def get_visible_leagues(self, language: str | None = None) -> list[LeagueDetails]:
        return [lg for lg in await self.get_leagues(language) if lg.is_visible()]

    async def get_selected_leagues(self, language: str | None = None) -> list[LeagueDetails]:
        return [lg for lg in await self.get_leagues(language) if lg.is_selected()]

    # ── Event details / VODs ──

    async def get_event_details(
        self, event_id: str, language: str | None = None
    ) -> EventDetails:
        response = await self.datasource.get_event_details(
            event_id, language or self.language
        )
        if response.data.event is None:
            raise EventNotFoundError(event_id)
        return response.data.event

    async def get_match_vods(self, event_id: str, language: str | None = None) -> list[VOD]:
        details = await self.get_event_details(event_id, language)
        return details.vods()

    async def has_vods(self, event_id: str, language: str | None = None) -> bool:
        return len(await self.get_match_vods(event_id, language)) > 0

    async def get_vods_by_locale(
        self, event_id: str, locale: str, language: str | None = None
    ) -> list[VOD]:
        vods = await self.get_match_vods(event_id, language)
        return [v for v in vods if v.locale == locale]

    # ── Cache ──

    def cache_metrics(self) -> dict[str, Any] | None:
        """Metrics snapshot, or None when the backend is not a MemoryCache."""
        if isinstance(self.cache, MemoryCache):
            return self.cache.get_metrics()
        return None

    async def invalidate(self, pattern: str) -> None:
        """Drop cached entries by key pattern, e.g. "schedule:*"."""
        log.info("Invalidating cache entries matching %r", pattern)
        await self.cache.delete(pattern)

    async def clear_cache(self) -> None:
        await self.cache.clear()
