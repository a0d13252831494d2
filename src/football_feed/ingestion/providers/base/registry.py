from __future__ import annotations

from typing import Callable

from .adapter import StandingsSource

SourceFactory = Callable[[], StandingsSource]


class StandingsSourceRegistry:
    """Secondary standings sources, keyed by league provider code."""

    def __init__(self) -> None:
        self._factories: dict[str, SourceFactory] = {}

    def register(self, league_code: str, factory: SourceFactory) -> None:
        key = league_code.upper()
        if key in self._factories:
            raise ValueError(f"Duplicate standings source registration: {key}")
        self._factories[key] = factory

    def get(self, league_code: str) -> StandingsSource | None:
        factory = self._factories.get(league_code.upper())
        if factory is None:
            return None
        return factory()
