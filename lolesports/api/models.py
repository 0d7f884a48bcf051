"""Pydantic models for LoL Esports API responses."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

REGIONAL_LEAGUES = ("LCS", "LEC", "LCK", "LPL")
INTERNATIONAL_LEAGUES = ("MSI", "WORLDS", "WCS")
REGION_CODES = {
    "AMERICAS": "NA",
    "EMEA": "EU",
    "ASIA": "AS",
    "NORTH_AMERICA": "NA",
    "EUROPE": "EU",
    "KOREA": "KR",
    "CHINA": "CN",
}


class APIModel(BaseModel):
    """Accepts the API's camelCase keys and snake_case field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# ── Schedule / live ──


class TeamResult(APIModel):
    outcome: str | None = None  # win, loss or None while in progress
    game_wins: int = 0


class TeamRecord(APIModel):
    wins: int = 0
    losses: int = 0


class Team(APIModel):
    name: str
    code: str = ""
    image: str = ""
    result: TeamResult = Field(default_factory=TeamResult)
    record: TeamRecord | None = None

    def has_won(self) -> bool:
        return self.result.outcome == "win"

    def has_lost(self) -> bool:
        return self.result.outcome == "loss"

    def is_match_completed(self) -> bool:
        return self.result.outcome is not None

    @property
    def games_played(self) -> int:
        if self.record is None:
            return 0
        return self.record.wins + self.record.losses

    def win_rate(self) -> float:
        total = self.games_played
        return self.record.wins / total if total else 0.0

    def win_rate_pct(self) -> str:
        return f"{self.win_rate() * 100:.1f}%"


class MatchStrategy(APIModel):
    type: str = "bestOf"
    count: int = 1


class Match(APIModel):
    id: str
    flags: list[str] = Field(default_factory=list)
    teams: list[Team] = Field(default_factory=list)
    strategy: MatchStrategy = Field(default_factory=MatchStrategy)

    def is_completed(self) -> bool:
        return any(t.is_match_completed() for t in self.teams)

    def winner(self) -> Team | None:
        return next((t for t in self.teams if t.has_won()), None)

    def loser(self) -> Team | None:
        return next((t for t in self.teams if t.has_lost()), None)

    def is_best_of_series(self) -> bool:
        return self.strategy.count > 1

    @property
    def series_type(self) -> str:
        return f"Best of {self.strategy.count}"

    def _wins(self) -> tuple[int, int]:
        first = self.teams[0].result.game_wins if len(self.teams) > 0 else 0
        second = self.teams[1].result.game_wins if len(self.teams) > 1 else 0
        return first, second

    def current_score(self) -> str:
        """Final series score, "0-0" until a result is recorded."""
        if not self.is_completed():
            return "0-0"
        return "%d-%d" % self._wins()

    def live_score(self) -> str:
        """Series score from game wins so far."""
        return "%d-%d" % self._wins()

    @property
    def title(self) -> str:
        first = self.teams[0].name if len(self.teams) > 0 else "TBD"
        second = self.teams[1].name if len(self.teams) > 1 else "TBD"
        return f"{first} vs {second} - {self.series_type}"

    def has_flag(self, flag: str) -> bool:
        return flag in self.flags

    def is_playoff_match(self) -> bool:
        return self.has_flag("playoff") or self.has_flag("playoffs")

    def team_by_name(self, name: str) -> Team | None:
        needle = name.lower()
        for team in self.teams:
            if team.name.lower() == needle or team.code.lower() == needle:
                return team
        return None


class EventLeague(APIModel):
    name: str
    slug: str


class Event(APIModel):
    start_time: datetime
    state: str  # completed, unstarted, inProgress
    type: str = "match"  # match or show
    block_name: str = ""
    league: EventLeague
    match: Match | None = None

    def is_live(self) -> bool:
        return self.state == "inProgress"

    def is_upcoming(self) -> bool:
        return self.state == "unstarted"

    def is_completed(self) -> bool:
        return self.state == "completed"

    def has_started(self, now: datetime | None = None) -> bool:
        return self.start_time <= (now or datetime.now(timezone.utc))

    def minutes_until_start(self, now: datetime | None = None) -> int:
        delta = self.start_time - (now or datetime.now(timezone.utc))
        return int(delta.total_seconds() // 60)

    def is_starting_soon(self, threshold: int = 30, now: datetime | None = None) -> bool:
        if not self.is_upcoming():
            return False
        return 0 <= self.minutes_until_start(now) <= threshold

    def is_league_match(self, slug: str) -> bool:
        return self.league.slug.lower() == slug.lower()

    @property
    def match_id(self) -> str | None:
        return self.match.id if self.match else None

    def team_names(self) -> list[str]:
        return [t.name for t in self.match.teams] if self.match else []

    def team_codes(self) -> list[str]:
        return [t.code for t in self.match.teams] if self.match else []


class SchedulePages(APIModel):
    older: str | None = None
    newer: str | None = None


class Schedule(APIModel):
    pages: SchedulePages = Field(default_factory=SchedulePages)
    events: list[Event] = Field(default_factory=list)


class ScheduleData(APIModel):
    schedule: Schedule


class ScheduleResponse(APIModel):
    data: ScheduleData


class LiveSchedule(APIModel):
    events: list[Event] = Field(default_factory=list)


class LiveData(APIModel):
    schedule: LiveSchedule = Field(default_factory=LiveSchedule)


class LiveResponse(APIModel):
    data: LiveData


# ── Leagues ──


class DisplayPriority(APIModel):
    position: int = 0
    status: str = "not_selected"  # force_selected, selected, not_selected, hidden


class LeagueDetails(APIModel):
    id: str
    slug: str
    name: str
    region: str = ""
    image: str = ""
    priority: int = 0
    display_priority: DisplayPriority = Field(default_factory=DisplayPriority)

    def is_visible(self) -> bool:
        return self.display_priority.status != "hidden"

    def is_selected(self) -> bool:
        return self.display_priority.status in ("force_selected", "selected")

    def is_regional_league(self) -> bool:
        return self.slug.upper() in REGIONAL_LEAGUES

    def is_international_league(self) -> bool:
        slug = self.slug.upper()
        return any(name in slug for name in INTERNATIONAL_LEAGUES)

    @property
    def region_code(self) -> str:
        return REGION_CODES.get(self.region.upper(), self.region)


class LeaguesData(APIModel):
    leagues: list[LeagueDetails] = Field(default_factory=list)


class LeaguesResponse(APIModel):
    data: LeaguesData


# ── Event details / VODs ──


class MediaLocale(APIModel):
    locale: str
    english_name: str = ""
    translated_name: str = ""


class VOD(APIModel):
    id: str
    parameter: str
    locale: str
    media_locale: MediaLocale | None = None
    provider: str
    offset: int = 0
    first_frame_time: str | None = None
    start_millis: int | None = None
    end_millis: int | None = None


class GameTeam(APIModel):
    id: str
    side: str  # blue or red


class Game(APIModel):
    number: int
    id: str
    state: str
    teams: list[GameTeam] = Field(default_factory=list)
    vods: list[VOD] = Field(default_factory=list)


class DetailTeamResult(APIModel):
    game_wins: int = 0


class DetailTeam(APIModel):
    id: str
    name: str
    code: str = ""
    image: str = ""
    result: DetailTeamResult | None = None


class DetailStrategy(APIModel):
    count: int = 1


class EventMatch(APIModel):
    strategy: DetailStrategy = Field(default_factory=DetailStrategy)
    teams: list[DetailTeam] = Field(default_factory=list)
    games: list[Game] = Field(default_factory=list)


class Tournament(APIModel):
    id: str


class DetailLeague(APIModel):
    id: str
    slug: str
    image: str = ""
    name: str


class EventDetails(APIModel):
    id: str
    type: str
    tournament: Tournament | None = None
    league: DetailLeague
    match: EventMatch | None = None
    streams: list[Any] = Field(default_factory=list)

    def vods(self) -> list[VOD]:
        """All VODs across every game of the match, in game order."""
        if self.match is None:
            return []
        return [vod for game in self.match.games for vod in game.vods]


class EventDetailsData(APIModel):
    event: EventDetails | None = None


class EventDetailsResponse(APIModel):
    data: EventDetailsData
