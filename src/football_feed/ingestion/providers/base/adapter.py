from __future__ import annotations

from typing import Protocol

from football_feed.domain.leagues import League
from football_feed.domain.models import StandingRow


class StandingsSource(Protocol):
    """
    A secondary provider able to produce a league table.

    The standings fetcher depends on this, not on any HTTP client.
    """

    provider_key: str

    async def fetch_table(self, league: League) -> list[StandingRow]:
        """
        Fetch + normalize the provider's table for `league`.
        Raises ProviderError subclasses on failure.
        """
        ...
