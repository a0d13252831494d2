from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Protocol, TypeVar

from football_feed.domain.leagues import DEFAULT_LEAGUE, League
from football_feed.domain.models import DatasetProvenance, FetchResult, Match, StandingRow
from football_feed.fetchers.synthetic import SyntheticDataGenerator

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MatchesSource(Protocol):
    async def fetch(self, league: League) -> FetchResult[Match]: ...


class TableSource(Protocol):
    async def fetch(self, league: League) -> FetchResult[StandingRow]: ...


@dataclass(frozen=True)
class DashboardSnapshot:
    """Everything the presentation layer needs, as of one point in a fetch cycle."""

    league: League
    matches: tuple[Match, ...] = ()
    standings: tuple[StandingRow, ...] = ()
    provenance: DatasetProvenance = DatasetProvenance()
    loading: bool = False
    refreshing: bool = False
    generation: int = 0
    matches_source: str | None = None
    standings_source: str | None = None

    @property
    def demo_mode(self) -> bool:
        return self.provenance.demo_mode


Listener = Callable[[DashboardSnapshot], None]


class FetchOrchestrator:
    """
    Owns the dashboard state and runs one fetch cycle per league selection or refresh.

    Each cycle gets a generation number; a cycle that finishes after a newer
    one has started is discarded instead of published.
    """

    def __init__(
        self,
        *,
        matches_fetcher: MatchesSource,
        standings_fetcher: TableSource,
        generator: SyntheticDataGenerator | None = None,
        league: League = DEFAULT_LEAGUE,
    ) -> None:
        self.matches_fetcher = matches_fetcher
        self.standings_fetcher = standings_fetcher
        self.generator = generator or SyntheticDataGenerator()
        self._generation = 0
        self._snapshot = DashboardSnapshot(league=league)
        self._listeners: list[Listener] = []

    @property
    def snapshot(self) -> DashboardSnapshot:
        return self._snapshot

    @property
    def selected_league(self) -> League:
        return self._snapshot.league

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self, snapshot: DashboardSnapshot) -> None:
        self._snapshot = snapshot
        for listener in list(self._listeners):
            listener(snapshot)

    async def select_league(self, league: League) -> DashboardSnapshot | None:
        """Switch to `league` and load it; previous league's data is cleared at once."""

        return await self._run_cycle(league, refreshing=False)

    async def refresh(self) -> DashboardSnapshot | None:
        """Reload the selected league, keeping current data on screen meanwhile."""

        return await self._run_cycle(self.selected_league, refreshing=True)

    async def _run_cycle(self, league: League, *, refreshing: bool) -> DashboardSnapshot | None:
        self._generation += 1
        generation = self._generation

        start = DashboardSnapshot(league=league, loading=True, generation=generation)
        if refreshing:
            start = replace(
                start,
                matches=self._snapshot.matches,
                standings=self._snapshot.standings,
                refreshing=True,
            )
        self._publish(start)

        logger.info("Fetch cycle %d started for %s", generation, league.provider_code)
        matches_outcome, standings_outcome = await asyncio.gather(
            self.matches_fetcher.fetch(league),
            self.standings_fetcher.fetch(league),
            return_exceptions=True,
        )

        if generation != self._generation:
            logger.info(
                "Discarding fetch cycle %d for %s (superseded by cycle %d)",
                generation,
                league.provider_code,
                self._generation,
            )
            return None

        matches = self._settle(matches_outcome, "matches", lambda: self.generator.matches(league))
        standings = self._settle(
            standings_outcome, "standings", lambda: self.generator.standings(league)
        )

        final = DashboardSnapshot(
            league=league,
            matches=matches.items,
            standings=standings.items,
            provenance=DatasetProvenance(
                matches_live=matches.live, standings_live=standings.live
            ),
            generation=generation,
            matches_source=matches.source,
            standings_source=standings.source,
        )
        self._publish(final)
        logger.info(
            "Fetch cycle %d for %s done: matches=%s standings=%s demo_mode=%s",
            generation,
            league.provider_code,
            matches.source,
            standings.source,
            final.demo_mode,
        )
        return final

    @staticmethod
    def _settle(
        outcome: FetchResult[T] | BaseException,
        dataset: str,
        fallback: Callable[[], list[T]],
    ) -> FetchResult[T]:
        if isinstance(outcome, BaseException):
            if not isinstance(outcome, Exception):
                raise outcome
            logger.error("%s fetcher crashed; using synthetic data", dataset, exc_info=outcome)
            return FetchResult(items=tuple(fallback()), live=False, source="synthetic")
        return outcome
