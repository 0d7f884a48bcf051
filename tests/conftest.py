"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from lolesports.api.models import (
    EventDetailsResponse,
    LeaguesResponse,
    LiveResponse,
    ScheduleResponse,
)


class FakeClock:
    """Manually advanced monotonic clock (seconds)."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


def make_event(
    state: str = "unstarted",
    start_time: str = "2026-03-01T09:00:00Z",
    league_slug: str = "lck",
    match_id: str = "m1",
    teams: tuple[str, str] = ("T1", "Gen.G"),
    codes: tuple[str, str] = ("T1", "GEN"),
    wins: tuple[int, int] = (0, 0),
    outcomes: tuple[str | None, str | None] = (None, None),
    flags: list[str] | None = None,
) -> dict:
    return {
        "startTime": start_time,
        "state": state,
        "type": "match",
        "blockName": "Week 1",
        "league": {"name": league_slug.upper(), "slug": league_slug},
        "match": {
            "id": match_id,
            "flags": flags or ["hasVod"],
            "teams": [
                {
                    "name": name,
                    "code": code,
                    "image": f"https://img.example/{code}.png",
                    "result": {"outcome": outcome, "gameWins": w},
                    "record": {"wins": 3, "losses": 1},
                }
                for name, code, w, outcome in zip(teams, codes, wins, outcomes)
            ],
            "strategy": {"type": "bestOf", "count": 3},
        },
    }


def make_show(state: str = "inProgress") -> dict:
    return {
        "startTime": "2026-03-01T08:00:00Z",
        "state": state,
        "type": "show",
        "blockName": "Pre-show",
        "league": {"name": "LCK", "slug": "lck"},
    }


@pytest.fixture
def schedule_payload() -> dict:
    return {
        "data": {
            "schedule": {
                "pages": {"older": "b2xkZXI=", "newer": None},
                "events": [
                    make_event("completed", "2026-02-28T09:00:00Z", match_id="m0",
                               wins=(2, 1), outcomes=("win", "loss")),
                    make_event("unstarted", "2026-03-02T09:00:00Z", match_id="m2"),
                    make_event("inProgress", "2026-03-01T09:00:00Z", match_id="m1", wins=(1, 0)),
                    make_event("unstarted", "2026-03-01T12:00:00Z", match_id="m3",
                               league_slug="lec", teams=("G2 Esports", "Fnatic"),
                               codes=("G2", "FNC")),
                ],
            }
        }
    }


@pytest.fixture
def schedule_response(schedule_payload) -> ScheduleResponse:
    return ScheduleResponse.model_validate(schedule_payload)


@pytest.fixture
def live_payload() -> dict:
    return {
        "data": {
            "schedule": {
                "events": [
                    make_event("inProgress", match_id="m1", wins=(1, 0)),
                    make_event("unstarted", match_id="m9"),
                    make_show(),
                ]
            }
        }
    }


@pytest.fixture
def live_response(live_payload) -> LiveResponse:
    return LiveResponse.model_validate(live_payload)


@pytest.fixture
def leagues_payload() -> dict:
    def league(id_, slug, name, region, status):
        return {
            "id": id_,
            "slug": slug,
            "name": name,
            "region": region,
            "image": f"https://img.example/{slug}.png",
            "priority": 1,
            "displayPriority": {"position": 1, "status": status},
        }

    return {
        "data": {
            "leagues": [
                league("98767991310872058", "lck", "LCK", "KOREA", "force_selected"),
                league("98767991302996019", "lec", "LEC", "EMEA", "selected"),
                league("98767991299243165", "lcs", "LCS", "NORTH AMERICA", "not_selected"),
                league("98767975604431411", "worlds", "Worlds", "INTERNATIONAL", "selected"),
                league("105266103462388553", "la_liga", "LVP SL", "EMEA", "hidden"),
            ]
        }
    }


@pytest.fixture
def leagues_response(leagues_payload) -> LeaguesResponse:
    return LeaguesResponse.model_validate(leagues_payload)


def make_vod(vod_id: str, locale: str) -> dict:
    return {
        "id": vod_id,
        "parameter": f"yt-{vod_id}",
        "locale": locale,
        "mediaLocale": {"locale": locale, "englishName": "English", "translatedName": "English"},
        "provider": "youtube",
        "offset": 0,
        "firstFrameTime": "2026-02-28T09:10:00Z",
        "startMillis": None,
        "endMillis": 2_400_000,
    }


@pytest.fixture
def event_details_payload() -> dict:
    return {
        "data": {
            "event": {
                "id": "m0",
                "type": "match",
                "tournament": {"id": "113503303283457977"},
                "league": {"id": "98767991310872058", "slug": "lck", "image": "", "name": "LCK"},
                "match": {
                    "strategy": {"count": 3},
                    "teams": [
                        {"id": "t1", "name": "T1", "code": "T1", "image": "", "result": {"gameWins": 2}},
                        {"id": "gen", "name": "Gen.G", "code": "GEN", "image": "", "result": {"gameWins": 1}},
                    ],
                    "games": [
                        {
                            "number": 1, "id": "g1", "state": "completed",
                            "teams": [{"id": "t1", "side": "blue"}, {"id": "gen", "side": "red"}],
                            "vods": [make_vod("v1", "en-US"), make_vod("v2", "ko-KR")],
                        },
                        {
                            "number": 2, "id": "g2", "state": "completed",
                            "teams": [{"id": "gen", "side": "blue"}, {"id": "t1", "side": "red"}],
                            "vods": [make_vod("v3", "en-US")],
                        },
                        {
                            "number": 3, "id": "g3", "state": "unstarted",
                            "teams": [], "vods": [],
                        },
                    ],
                },
                "streams": [],
            }
        }
    }


@pytest.fixture
def event_details_response(event_details_payload) -> EventDetailsResponse:
    return EventDetailsResponse.model_validate(event_details_payload)


@pytest.fixture
def raw_source(schedule_response, live_response, event_details_response, leagues_response):
    """Datasource double answering every operation from the sample payloads."""
    source = AsyncMock()
    source.get_schedule.return_value = schedule_response
    source.get_live.return_value = live_response
    source.get_event_details.return_value = event_details_response
    source.get_leagues.return_value = leagues_response
    return source
