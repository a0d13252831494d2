from __future__ import annotations

import logging
from datetime import date
from typing import Callable

from football_feed.core.config import settings
from football_feed.domain.dates import fixture_window, utc_today
from football_feed.domain.enums import DatasetKind
from football_feed.domain.leagues import League
from football_feed.domain.models import FetchResult, Match
from football_feed.fetchers.synthetic import SyntheticDataGenerator
from football_feed.fetchers.tiers import Tier, first_non_empty
from football_feed.ingestion.providers.football_data.client import FootballDataClient
from football_feed.ingestion.providers.football_data.parser import parse_matches

logger = logging.getLogger(__name__)

SOURCE_WINDOW = "football-data:competition-window"
SOURCE_COMPETITION = "football-data:competition"
SOURCE_GLOBAL = "football-data:matches"
SOURCE_SYNTHETIC = "synthetic"


class MatchesFetcher:
    """
    Fixtures for a league, from three football-data.org endpoint variants in turn:

    1. competition fixtures within [today - window, today + window]
    2. competition fixtures without the date restriction
    3. global fixtures filtered by competition (re-filtered client-side)

    Falls back to synthetic fixtures when every tier fails or comes back empty.
    """

    def __init__(
        self,
        *,
        client: FootballDataClient,
        generator: SyntheticDataGenerator,
        window_days: int | None = None,
        limit: int | None = None,
        today: Callable[[], date] = utc_today,
    ) -> None:
        self.client = client
        self.generator = generator
        self.window_days = settings.fixture_window_days if window_days is None else window_days
        self.limit = settings.fixture_limit if limit is None else limit
        self._today = today

    def tiers(self, league: League) -> list[Tier[Match]]:
        code = league.provider_code

        async def windowed() -> list[Match]:
            date_from, date_to = fixture_window(self._today(), self.window_days)
            payload = await self.client.get_competition_matches(
                code, date_from=date_from, date_to=date_to, limit=self.limit
            )
            return parse_matches(payload)

        async def unrestricted() -> list[Match]:
            payload = await self.client.get_competition_matches(code, limit=self.limit)
            return parse_matches(payload)

        async def global_filtered() -> list[Match]:
            payload = await self.client.get_matches(competitions=[code], limit=self.limit)
            return [m for m in parse_matches(payload) if m.competition_code == code]

        return [
            (SOURCE_WINDOW, windowed),
            (SOURCE_COMPETITION, unrestricted),
            (SOURCE_GLOBAL, global_filtered),
        ]

    async def fetch(self, league: League) -> FetchResult[Match]:
        logger.info("Fetching matches for %s (%s)", league.provider_code, league.display_name)

        found = await first_non_empty(self.tiers(league), dataset=DatasetKind.MATCHES.value)
        if found is not None:
            source, items = found
            return FetchResult(items=tuple(items), live=True, source=source)

        logger.warning(
            "All match endpoints failed for %s; using synthetic fixtures", league.provider_code
        )
        return FetchResult(
            items=tuple(self.generator.matches(league)), live=False, source=SOURCE_SYNTHETIC
        )
