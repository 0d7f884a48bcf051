"""Entry point: query LoL Esports schedules, live matches, leagues and VODs."""

from __future__ import annotations

import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable, Optional

import typer

from lolesports.api.errors import EsportsAPIError
from lolesports.api.models import VOD, Event, EventDetails, LeagueDetails
from lolesports.config import load_settings
from lolesports.services.live_service import LiveService

log = logging.getLogger(__name__)

app = typer.Typer(help="LoL Esports schedules, live matches, leagues and VODs")

Action = Callable[[LiveService], Awaitable[None]]


class LeagueStatus(str, Enum):
    force_selected = "force_selected"
    selected = "selected"
    not_selected = "not_selected"
    hidden = "hidden"


def format_event(event: Event) -> str:
    when = event.start_time.strftime("%Y-%m-%d %H:%M UTC")
    title = event.match.title if event.match else event.block_name
    return f"[{event.league.name}] {when}  {title}"


def format_league(league: LeagueDetails) -> str:
    return (
        f"{league.name} ({league.slug})  region={league.region_code}  "
        f"id={league.id}  status={league.display_priority.status}"
    )


def format_vod(vod: VOD) -> str:
    return f"{vod.locale}  {vod.provider}  {vod.parameter}"


def format_event_details(details: EventDetails) -> list[str]:
    lines = [f"{details.league.name} event {details.id} ({details.type})"]
    if details.match is None:
        return lines
    teams = " vs ".join(t.name for t in details.match.teams) or "TBD"
    wins = "-".join(str(t.result.game_wins if t.result else 0) for t in details.match.teams)
    lines.append(f"{teams}  Best of {details.match.strategy.count}  ({wins or '0-0'})")
    for game in details.match.games:
        lines.append(f"  Game {game.number}: {game.state}  vods={len(game.vods)}")
    return lines


def build_service() -> LiveService:
    settings = load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    if not settings.api_key:
        log.warning("No API key! Add LOL_API_KEY to .env")
    return LiveService(settings)


async def run_with_service(service: LiveService, action: Action) -> None:
    """Run one action, then close the service."""
    try:
        await action(service)
        log.debug("Cache metrics: %s", service.cache_metrics())
    finally:
        await service.close()


def _execute(action: Action) -> None:
    try:
        asyncio.run(run_with_service(build_service(), action))
    except EsportsAPIError as exc:
        log.error("%s", exc)
        typer.echo(str(exc), err=True)
        raise typer.Exit(1)


@app.callback(invoke_without_command=True)
def overview(
    ctx: typer.Context,
    language: Optional[str] = typer.Option(None, "--language", help="Locale, e.g. en-US"),
) -> None:
    """Without a command, print live and upcoming matches."""
    if ctx.invoked_subcommand is not None:
        return

    async def action(service: LiveService) -> None:
        live = await service.get_live_matches(language)
        typer.echo(f"Live matches: {len(live)}")
        for event in live:
            score = event.match.live_score() if event.match else "-"
            typer.echo(f"  {format_event(event)}  ({score})")

        upcoming = await service.get_upcoming_matches(language, limit=10)
        typer.echo(f"Upcoming matches: {len(upcoming)}")
        for event in upcoming:
            typer.echo(f"  {format_event(event)}")

    _execute(action)


@app.command("schedule")
def schedule_cmd(
    league_id: Optional[str] = typer.Option(None, "--league-id", help="Filter by league id"),
    language: Optional[str] = typer.Option(None, "--language", help="Locale, e.g. en-US"),
) -> None:
    """Full schedule."""
    async def action(service: LiveService) -> None:
        schedule = await service.get_schedule(language, league_id)
        for event in schedule.events:
            typer.echo(f"{format_event(event)}  {event.state}")

    _execute(action)


@app.command("live")
def live_cmd(
    language: Optional[str] = typer.Option(None, "--language", help="Locale, e.g. en-US"),
) -> None:
    """Matches in progress."""
    async def action(service: LiveService) -> None:
        live = await service.get_live_matches(language)
        if not live:
            typer.echo("No live matches")
        for event in live:
            score = event.match.live_score() if event.match else "-"
            typer.echo(f"{format_event(event)}  ({score})")

    _execute(action)


@app.command("leagues")
def leagues_cmd(
    region: Optional[str] = typer.Option(None, "--region", help="Only leagues in this region"),
    status: Optional[LeagueStatus] = typer.Option(None, "--status", help="Only leagues with this display status"),
    language: Optional[str] = typer.Option(None, "--language", help="Locale, e.g. en-US"),
) -> None:
    """League catalog."""
    async def action(service: LiveService) -> None:
        if region:
            leagues = await service.get_leagues_by_region(region, language)
        elif status:
            leagues = await service.get_leagues_by_status(status.value, language)
        else:
            leagues = await service.get_leagues(language)
        for league in leagues:
            typer.echo(format_league(league))

    _execute(action)


@app.command("event")
def event_cmd(
    event_id: str = typer.Argument(..., help="Event id"),
    language: Optional[str] = typer.Option(None, "--language", help="Locale, e.g. en-US"),
) -> None:
    """Event details."""
    async def action(service: LiveService) -> None:
        details = await service.get_event_details(event_id, language)
        for line in format_event_details(details):
            typer.echo(line)

    _execute(action)


@app.command("vods")
def vods_cmd(
    event_id: str = typer.Argument(..., help="Event id"),
    locale: Optional[str] = typer.Option(None, "--locale", help="Only VODs in this locale"),
    language: Optional[str] = typer.Option(None, "--language", help="Locale, e.g. en-US"),
) -> None:
    """VODs for every game of an event."""
    async def action(service: LiveService) -> None:
        if locale:
            vods = await service.get_vods_by_locale(event_id, locale, language)
        else:
            vods = await service.get_match_vods(event_id, language)
        if not vods:
            typer.echo(f"No VODs for event {event_id}")
        for vod in vods:
            typer.echo(format_vod(vod))

    _execute(action)


@app.command("upcoming")
def upcoming_cmd(
    limit: int = typer.Option(10, "--limit"),
    league: Optional[str] = typer.Option(None, "--league", help="League slug, e.g. lck"),
    language: Optional[str] = typer.Option(None, "--language", help="Locale, e.g. en-US"),
) -> None:
    """Next unstarted matches."""
    async def action(service: LiveService) -> None:
        if league:
            events = (await service.get_upcoming_for_league(league, language))[:limit]
        else:
            events = await service.get_upcoming_matches(language, limit=limit)
        for event in events:
            typer.echo(format_event(event))

    _execute(action)


@app.command("score")
def score_cmd(
    team: str = typer.Argument(..., help="Team name or code"),
    language: Optional[str] = typer.Option(None, "--language", help="Locale, e.g. en-US"),
) -> None:
    """Live score for a team."""
    async def action(service: LiveService) -> None:
        scores = await service.get_live_match_score(team, language)
        if not scores:
            typer.echo(f"No live match for {team}")
        for entry in scores:
            typer.echo(f"{entry['title']}  {entry['score']}  (event {entry['event_id']})")

    _execute(action)


@app.command("cache-stats")
def cache_stats_cmd() -> None:
    """Cache hit/miss counters."""
    async def action(service: LiveService) -> None:
        metrics = service.cache_metrics()
        if metrics is None:
            typer.echo("Cache backend keeps no metrics")
            return
        typer.echo(
            f"hits={metrics['hits']}  misses={metrics['misses']}  "
            f"sets={metrics['sets']}  hit_rate={metrics['hit_rate']}"
        )

    _execute(action)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
