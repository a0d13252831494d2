from __future__ import annotations

from datetime import date
from typing import Any, Callable

from football_feed.domain.dates import season_label, utc_today
from football_feed.domain.leagues import League
from football_feed.domain.models import StandingRow
from football_feed.ingestion.providers.base.client import BaseHttpClient
from football_feed.ingestion.providers.base.errors import ProviderMappingError
from football_feed.ingestion.providers.openligadb.parser import parse_table

ApiItem = dict[str, Any]


class OpenLigaDbClient:
    """OpenLigaDB table endpoint (no auth)."""

    provider_key = "openligadb"

    def __init__(
        self,
        *,
        http: BaseHttpClient,
        today: Callable[[], date] = utc_today,
    ) -> None:
        self.http = http
        self._today = today

    async def get_table(self, season: str) -> list[ApiItem]:
        """GET /getbltable/{season}; the response must be a JSON array."""

        value = await self.http.get_json_value(f"/getbltable/{season}")
        if not isinstance(value, list):
            raise ProviderMappingError(
                f"Expected list response, got {type(value).__name__}", context={"season": season}
            )
        return [v for v in value if isinstance(v, dict)]

    async def fetch_table(self, league: League) -> list[StandingRow]:
        season = season_label(self._today().year)
        items = await self.get_table(season)
        return parse_table(items)
