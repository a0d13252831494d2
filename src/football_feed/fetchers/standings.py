from __future__ import annotations

import logging

from football_feed.domain.enums import DatasetKind
from football_feed.domain.leagues import League
from football_feed.domain.models import FetchResult, StandingRow
from football_feed.fetchers.synthetic import SyntheticDataGenerator
from football_feed.fetchers.tiers import Tier, first_non_empty
from football_feed.ingestion.providers.base.registry import StandingsSourceRegistry
from football_feed.ingestion.providers.football_data.client import FootballDataClient
from football_feed.ingestion.providers.football_data.parser import parse_standings

logger = logging.getLogger(__name__)

SOURCE_PRIMARY = "football-data:standings"
SOURCE_SYNTHETIC = "synthetic"


class StandingsFetcher:
    """
    League table from football-data.org, then (for leagues with a registered
    secondary source) from that source, then synthetic.
    """

    def __init__(
        self,
        *,
        client: FootballDataClient,
        generator: SyntheticDataGenerator,
        secondary: StandingsSourceRegistry | None = None,
    ) -> None:
        self.client = client
        self.generator = generator
        self.secondary = secondary or StandingsSourceRegistry()

    def tiers(self, league: League) -> list[Tier[StandingRow]]:
        async def primary() -> list[StandingRow]:
            payload = await self.client.get_standings(league.provider_code)
            return parse_standings(payload)

        tiers: list[Tier[StandingRow]] = [(SOURCE_PRIMARY, primary)]

        source = self.secondary.get(league.provider_code)
        if source is not None:
            tiers.append((source.provider_key, lambda: source.fetch_table(league)))

        return tiers

    async def fetch(self, league: League) -> FetchResult[StandingRow]:
        logger.info("Fetching standings for %s (%s)", league.provider_code, league.display_name)

        found = await first_non_empty(self.tiers(league), dataset=DatasetKind.STANDINGS.value)
        if found is not None:
            source, rows = found
            return FetchResult(items=tuple(rows), live=True, source=source)

        logger.warning(
            "All standings sources failed for %s; using synthetic table", league.provider_code
        )
        return FetchResult(
            items=tuple(self.generator.standings(league)), live=False, source=SOURCE_SYNTHETIC
        )
