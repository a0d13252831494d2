from __future__ import annotations

from collections.abc import Callable
from datetime import UTC, date, datetime
from typing import Any

import httpx
import pytest

from football_feed.ingestion.providers.base.client import BaseHttpClient

TODAY = date(2026, 10, 19)
NOW = datetime(2026, 10, 19, 12, 0, tzinfo=UTC)

Handler = Callable[[httpx.Request], httpx.Response]


def make_http(handler: Handler, base_url: str = "https://api.football-data.org") -> BaseHttpClient:
    return BaseHttpClient(base_url=base_url, transport=httpx.MockTransport(handler))


def match_item(
    match_id: int,
    home: str,
    away: str,
    *,
    status: str = "FINISHED",
    code: str = "PL",
    home_score: int | None = 2,
    away_score: int | None = 1,
    utc_date: str = "2026-10-18T14:00:00Z",
) -> dict[str, Any]:
    return {
        "id": match_id,
        "homeTeam": {"name": home},
        "awayTeam": {"name": away},
        "score": {"fullTime": {"home": home_score, "away": away_score}},
        "status": status,
        "utcDate": utc_date,
        "competition": {"code": code},
    }


def standings_payload(rows: list[tuple[int, str, int]]) -> dict[str, Any]:
    return {
        "standings": [
            {
                "table": [
                    {
                        "position": position,
                        "team": {"name": name},
                        "playedGames": 8,
                        "won": 5,
                        "draw": 2,
                        "lost": 1,
                        "points": points,
                        "goalDifference": 7,
                    }
                    for position, name, points in rows
                ]
            }
        ]
    }


class RecordingRouter:
    """MockTransport handler that answers by path and records every request."""

    def __init__(self, routes: dict[str, Any]) -> None:
        self.routes = routes
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = request.url.path
        if request.url.params.get("dateFrom"):
            key += "?window"
        response = self.routes.get(key)
        if response is None:
            return httpx.Response(404, json={"message": "not found"})
        if isinstance(response, Exception):
            raise response
        if callable(response):
            return response(request)
        return response

    @property
    def paths(self) -> list[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def today() -> date:
    return TODAY
