from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from football_feed.domain.enums import MatchStatus
from football_feed.ingestion.providers.base.client import BaseHttpClient

logger = logging.getLogger(__name__)

ApiItem = dict[str, Any]

DEFAULT_STATUSES: tuple[MatchStatus, ...] = (
    MatchStatus.SCHEDULED,
    MatchStatus.LIVE,
    MatchStatus.FINISHED,
)


class FootballDataClient:
    """football-data.org v4 endpoints used for fixtures and standings."""

    def __init__(self, *, http: BaseHttpClient, api_token: str | None = None) -> None:
        self.http = http
        self.api_token = api_token
        if not api_token:
            logger.warning(
                "FOOTBALL_DATA_TOKEN is not set; football-data.org requests will be unauthenticated."
            )

    def _headers(self) -> dict[str, str]:
        if not self.api_token:
            return {}
        return {"X-Auth-Token": self.api_token}

    async def get_competition_matches(
        self,
        code: str,
        *,
        date_from: str | None = None,
        date_to: str | None = None,
        statuses: Sequence[str] = DEFAULT_STATUSES,
        limit: int = 30,
    ) -> ApiItem:
        """Fixtures of one competition, optionally restricted to [date_from, date_to]."""

        params: dict[str, str] = {}
        if date_from is not None:
            params["dateFrom"] = date_from
        if date_to is not None:
            params["dateTo"] = date_to
        params["status"] = ",".join(str(s) for s in statuses)
        params["limit"] = str(limit)

        return await self.http.get_json(
            f"/v4/competitions/{code}/matches", params=params, headers=self._headers()
        )

    async def get_matches(
        self,
        *,
        competitions: Sequence[str],
        statuses: Sequence[str] = DEFAULT_STATUSES,
        limit: int = 30,
    ) -> ApiItem:
        """Global fixtures endpoint, filtered server-side by competition codes."""

        params = {
            "competitions": ",".join(competitions),
            "status": ",".join(str(s) for s in statuses),
            "limit": str(limit),
        }
        return await self.http.get_json("/v4/matches", params=params, headers=self._headers())

    async def get_standings(self, code: str) -> ApiItem:
        return await self.http.get_json(
            f"/v4/competitions/{code}/standings", headers=self._headers()
        )
