from __future__ import annotations

import asyncio

import typer

from football_feed.cli.common import feed_scope
from football_feed.domain.leagues import LEAGUES, League, get_league
from football_feed.domain.models import FetchResult, Match, StandingRow

app = typer.Typer(help="Fetch fixtures and tables for a league.")

LeagueOption = typer.Option("PL", "--league", "-l", help="League code (PL, PD, SA, BL1, FL1).")


def _resolve_league(code: str) -> League:
    try:
        return get_league(code)
    except KeyError as e:
        raise typer.BadParameter(str(e.args[0]), param_hint="--league") from e


def _match_line(match: Match) -> str:
    if match.home_score is not None and match.away_score is not None:
        score = f"{match.home_score}-{match.away_score}"
    else:
        score = "vs"
    return (
        f"{match.kickoff.isoformat()} {match.status.value:<9} "
        f"{match.home_team_name} {score} {match.away_team_name}"
    )


def _standing_line(row: StandingRow) -> str:
    return (
        f"{row.position:>2} {row.team_name:<28} P{row.played:>3} W{row.won:>3} "
        f"D{row.draw:>3} L{row.lost:>3} GD{row.goal_difference:>4} Pts{row.points:>4}"
    )


def _provenance_line(label: str, result: FetchResult) -> str:
    kind = "live" if result.live else "synthetic"
    return f"{label}: {len(result.items)} from {result.source} ({kind})"


@app.command("leagues")
def leagues_cmd() -> None:
    """List the supported leagues."""

    for league in LEAGUES:
        typer.echo(f"{league.id:<4} {league.display_name} ({league.country})")


@app.command("matches")
def matches_cmd(league: str = LeagueOption) -> None:
    """Fetch fixtures for a league (falls back to demo fixtures)."""

    selected = _resolve_league(league)

    async def run() -> FetchResult[Match]:
        async with feed_scope() as feed:
            return await feed.matches.fetch(selected)

    result = asyncio.run(run())
    for match in result.items:
        typer.echo(_match_line(match))
    typer.echo(_provenance_line("Matches", result))


@app.command("standings")
def standings_cmd(league: str = LeagueOption) -> None:
    """Fetch the league table (falls back to a demo table)."""

    selected = _resolve_league(league)

    async def run() -> FetchResult[StandingRow]:
        async with feed_scope() as feed:
            return await feed.standings.fetch(selected)

    result = asyncio.run(run())
    for row in result.items:
        typer.echo(_standing_line(row))
    typer.echo(_provenance_line("Standings", result))


@app.command("snapshot")
def snapshot_cmd(league: str = LeagueOption) -> None:
    """Run one full fetch cycle and print fixtures, table and demo-mode flag."""

    selected = _resolve_league(league)

    async def run():
        async with feed_scope() as feed:
            return await feed.orchestrator.select_league(selected)

    snapshot = asyncio.run(run())
    if snapshot is None:
        raise typer.Exit(code=1)

    typer.echo(f"{snapshot.league.display_name} ({snapshot.league.country})")
    typer.echo(f"Matches [{snapshot.matches_source}]:")
    for match in snapshot.matches:
        typer.echo(f"  {_match_line(match)}")
    typer.echo(f"Standings [{snapshot.standings_source}]:")
    for row in snapshot.standings:
        typer.echo(f"  {_standing_line(row)}")
    typer.echo(f"demo_mode={snapshot.demo_mode}")
