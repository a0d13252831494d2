from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Generic, TypeVar

from football_feed.domain.enums import MatchStatus

T = TypeVar("T")


@dataclass(frozen=True)
class Match:
    id: int | str
    home_team_name: str
    away_team_name: str
    status: MatchStatus
    kickoff: datetime
    home_score: int | None = None
    away_score: int | None = None
    competition_code: str | None = None


@dataclass(frozen=True)
class StandingRow:
    position: int
    team_name: str
    played: int
    won: int
    draw: int
    lost: int
    points: int
    goal_difference: int


@dataclass(frozen=True)
class FetchResult(Generic[T]):
    """
    Outcome of one fetcher run.

    `live` is the provenance flag; `source` names the tier that produced `items`.
    """

    items: tuple[T, ...]
    live: bool
    source: str


@dataclass(frozen=True)
class DatasetProvenance:
    matches_live: bool = False
    standings_live: bool = False

    @property
    def demo_mode(self) -> bool:
        # Demo only when *both* datasets are synthetic.
        return not self.matches_live and not self.standings_live
