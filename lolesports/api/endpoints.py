"""Typed fetch functions for the LoL Esports persisted gateway."""

from __future__ import annotations

from lolesports.api.client import EsportsAPIClient
from lolesports.api.models import (
    EventDetailsResponse,
    LeaguesResponse,
    LiveResponse,
    ScheduleResponse,
)

GATEWAY = "/persisted/gw"


async def get_schedule(
    client: EsportsAPIClient,
    language: str,
    league_id: str | None = None,
) -> ScheduleResponse:
    """Fetch the schedule, optionally filtered to one league."""
    params = {"hl": language}
    if league_id:
        params["leagueId"] = league_id
    data = await client.get(f"{GATEWAY}/getSchedule", params=params)
    return ScheduleResponse.model_validate(data)


async def get_live(client: EsportsAPIClient, language: str) -> LiveResponse:
    """Fetch events currently flagged live by the gateway."""
    data = await client.get(f"{GATEWAY}/getLive", params={"hl": language})
    return LiveResponse.model_validate(data)


async def get_event_details(
    client: EsportsAPIClient,
    event_id: str,
    language: str,
) -> EventDetailsResponse:
    data = await client.get(
        f"{GATEWAY}/getEventDetails", params={"hl": language, "id": event_id}
    )
    return EventDetailsResponse.model_validate(data)


async def get_leagues(client: EsportsAPIClient, language: str) -> LeaguesResponse:
    data = await client.get(f"{GATEWAY}/getLeagues", params={"hl": language})
    return LeaguesResponse.model_validate(data)
