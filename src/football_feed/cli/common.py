from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import dataclass

from football_feed.core.config import Settings, settings
from football_feed.fetchers.matches import MatchesFetcher
from football_feed.fetchers.standings import StandingsFetcher
from football_feed.fetchers.synthetic import SyntheticDataGenerator
from football_feed.ingestion.providers.base.client import BaseHttpClient
from football_feed.ingestion.providers.base.registry import StandingsSourceRegistry
from football_feed.ingestion.providers.football_data.client import FootballDataClient
from football_feed.ingestion.providers.openligadb.client import OpenLigaDbClient
from football_feed.orchestrator import FetchOrchestrator


@dataclass(frozen=True)
class Feed:
    matches: MatchesFetcher
    standings: StandingsFetcher
    orchestrator: FetchOrchestrator


@asynccontextmanager
async def feed_scope(config: Settings = settings) -> AsyncIterator[Feed]:
    """
    Context-managed fetchers + orchestrator for CLI commands.
    Ensures both provider HTTP clients are closed.
    """
    football_data_http = BaseHttpClient(
        base_url=config.football_data_base_url,
        timeout_s=config.http_timeout_s,
        connect_timeout_s=config.http_connect_timeout_s,
    )
    openligadb_http = BaseHttpClient(
        base_url=config.openligadb_base_url,
        timeout_s=config.http_timeout_s,
        connect_timeout_s=config.http_connect_timeout_s,
    )
    try:
        client = FootballDataClient(http=football_data_http, api_token=config.football_data_token)
        generator = SyntheticDataGenerator()

        secondary = StandingsSourceRegistry()
        secondary.register(
            config.dual_provider_league, lambda: OpenLigaDbClient(http=openligadb_http)
        )

        matches = MatchesFetcher(
            client=client,
            generator=generator,
            window_days=config.fixture_window_days,
            limit=config.fixture_limit,
        )
        standings = StandingsFetcher(client=client, generator=generator, secondary=secondary)
        yield Feed(
            matches=matches,
            standings=standings,
            orchestrator=FetchOrchestrator(
                matches_fetcher=matches, standings_fetcher=standings, generator=generator
            ),
        )
    finally:
        await football_data_http.aclose()
        await openligadb_http.aclose()
