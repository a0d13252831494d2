from __future__ import annotations

import asyncio
import random

import pytest

from football_feed.domain.leagues import League, get_league
from football_feed.domain.models import DatasetProvenance, FetchResult, Match, StandingRow
from football_feed.fetchers.synthetic import SyntheticDataGenerator
from football_feed.orchestrator import DashboardSnapshot, FetchOrchestrator

from conftest import NOW

GENERATOR = SyntheticDataGenerator(rng=random.Random(0), now=lambda: NOW)


class FakeFetcher:
    """Returns live or synthetic data per league; can be held open with an Event."""

    def __init__(self, kind: str, *, live: bool = True) -> None:
        self.kind = kind
        self.live = live
        self.gates: dict[str, asyncio.Event] = {}
        self.calls: list[str] = []
        self.error: Exception | None = None

    async def fetch(self, league: League) -> FetchResult:
        self.calls.append(league.id)
        gate = self.gates.get(league.id)
        if gate is not None:
            await gate.wait()
        if self.error is not None:
            raise self.error
        items = GENERATOR.matches(league) if self.kind == "matches" else GENERATOR.standings(league)
        if self.kind == "standings" and self.live:
            items = [StandingRow(1, f"{league.id} leader", 5, 5, 0, 0, 15, 10)]
        source = f"live:{league.id}" if self.live else "synthetic"
        return FetchResult(items=tuple(items), live=self.live, source=source)


def _orchestrator(matches_live: bool = True, standings_live: bool = True):
    matches = FakeFetcher("matches", live=matches_live)
    standings = FakeFetcher("standings", live=standings_live)
    orchestrator = FetchOrchestrator(
        matches_fetcher=matches, standings_fetcher=standings, generator=GENERATOR
    )
    return orchestrator, matches, standings


@pytest.mark.parametrize(
    ("matches_live", "standings_live", "demo_mode"),
    [(True, True, False), (True, False, False), (False, True, False), (False, False, True)],
)
def test_demo_mode_truth_table(matches_live: bool, standings_live: bool, demo_mode: bool) -> None:
    provenance = DatasetProvenance(matches_live=matches_live, standings_live=standings_live)
    assert provenance.demo_mode is demo_mode


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("matches_live", "standings_live", "demo_mode"),
    [(True, True, False), (True, False, False), (False, True, False), (False, False, True)],
)
async def test_cycle_publishes_demo_mode_after_both_fetchers(
    matches_live: bool, standings_live: bool, demo_mode: bool
) -> None:
    orchestrator, _, _ = _orchestrator(matches_live, standings_live)

    snapshot = await orchestrator.select_league(get_league("PD"))

    assert snapshot is not None
    assert snapshot is orchestrator.snapshot
    assert snapshot.demo_mode is demo_mode
    assert snapshot.provenance.matches_live is matches_live
    assert snapshot.provenance.standings_live is standings_live
    assert snapshot.loading is False
    assert snapshot.league.id == "PD"
    assert snapshot.matches and snapshot.standings


@pytest.mark.asyncio
async def test_cycle_start_resets_provenance_and_waits_for_slow_fetcher() -> None:
    orchestrator, _, standings = _orchestrator()
    await orchestrator.select_league(get_league("PL"))
    assert orchestrator.snapshot.demo_mode is False

    published: list[DashboardSnapshot] = []
    orchestrator.subscribe(published.append)
    standings.gates["SA"] = asyncio.Event()

    task = asyncio.create_task(orchestrator.select_league(get_league("SA")))
    for _ in range(5):
        await asyncio.sleep(0)

    # Matches are done, standings are not: nothing but the loading state is visible.
    assert len(published) == 1
    loading = published[0]
    assert loading.loading is True
    assert loading.demo_mode is True
    assert loading.matches == () and loading.standings == ()

    standings.gates["SA"].set()
    final = await task

    assert final is not None
    assert [s.loading for s in published] == [True, False]
    assert final.demo_mode is False
    assert final.standings[0].team_name == "SA leader"


@pytest.mark.asyncio
async def test_stale_cycle_does_not_overwrite_newer_league() -> None:
    orchestrator, matches, _ = _orchestrator()
    matches.gates["PL"] = asyncio.Event()

    stale = asyncio.create_task(orchestrator.select_league(get_league("PL")))
    await asyncio.sleep(0)
    fresh = await orchestrator.select_league(get_league("BL1"))

    matches.gates["PL"].set()
    stale_result = await stale

    assert stale_result is None
    assert fresh is not None
    assert orchestrator.snapshot == fresh
    assert orchestrator.snapshot.league.id == "BL1"
    assert orchestrator.snapshot.standings[0].team_name == "BL1 leader"
    assert orchestrator.snapshot.matches_source == "live:BL1"


@pytest.mark.asyncio
async def test_crashing_fetcher_does_not_abort_the_other() -> None:
    orchestrator, matches, _ = _orchestrator(standings_live=True)
    matches.error = RuntimeError("bug")

    snapshot = await orchestrator.select_league(get_league("FL1"))

    assert snapshot is not None
    assert snapshot.provenance.standings_live is True
    assert snapshot.provenance.matches_live is False
    assert snapshot.matches_source == "synthetic"
    assert len(snapshot.matches) == 5
    assert snapshot.demo_mode is False


@pytest.mark.asyncio
async def test_refresh_keeps_current_data_while_loading() -> None:
    orchestrator, matches, _ = _orchestrator()
    first = await orchestrator.select_league(get_league("PL"))
    assert first is not None

    published: list[DashboardSnapshot] = []
    unsubscribe = orchestrator.subscribe(published.append)
    refreshed = await orchestrator.refresh()
    unsubscribe()

    assert published[0].refreshing is True
    assert published[0].loading is True
    assert published[0].matches == first.matches
    assert published[0].demo_mode is True
    assert refreshed is not None
    assert refreshed.refreshing is False
    assert refreshed.generation == first.generation + 1
    assert matches.calls == ["PL", "PL"]

    await orchestrator.refresh()
    assert len(published) == 2
