"""Raw datasource: the upstream source of truth behind the cache."""

from __future__ import annotations

from typing import Protocol

from lolesports.api import endpoints
from lolesports.api.client import EsportsAPIClient
from lolesports.api.models import (
    EventDetailsResponse,
    LeaguesResponse,
    LiveResponse,
    ScheduleResponse,
)

DEFAULT_LANGUAGE = "en-US"


class LiveDatasource(Protocol):
    async def get_schedule(
        self, language: str = DEFAULT_LANGUAGE, league_id: str | None = None
    ) -> ScheduleResponse: ...

    async def get_live(self, language: str = DEFAULT_LANGUAGE) -> LiveResponse: ...

    async def get_event_details(
        self, event_id: str, language: str = DEFAULT_LANGUAGE
    ) -> EventDetailsResponse: ...

    async def get_leagues(self, language: str = DEFAULT_LANGUAGE) -> LeaguesResponse: ...


class APILiveDatasource:
    """Fetches every operation straight from the API."""

    def __init__(self, client: EsportsAPIClient) -> None:
        self.client = client

    async def get_schedule(
        self, language: str = DEFAULT_LANGUAGE, league_id: str | None = None
    ) -> ScheduleResponse:
        return await endpoints.get_schedule(self.client, language, league_id)

    async def get_live(self, language: str = DEFAULT_LANGUAGE) -> LiveResponse:
        return await endpoints.get_live(self.client, language)

    async def get_event_details(
        self, event_id: str, language: str = DEFAULT_LANGUAGE
    ) -> EventDetailsResponse:
        return await endpoints.get_event_details(self.client, event_id, language)

    async def get_leagues(self, language: str = DEFAULT_LANGUAGE) -> LeaguesResponse:
        return await endpoints.get_leagues(self.client, language)
