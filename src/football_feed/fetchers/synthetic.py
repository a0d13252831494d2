from __future__ import annotations

import random
from datetime import datetime, timedelta
from typing import Callable

from football_feed.domain.dates import utc_now
from football_feed.domain.enums import MatchStatus
from football_feed.domain.leagues import DEFAULT_LEAGUE, League
from football_feed.domain.models import Match, StandingRow

SYNTHETIC_TABLE_SIZE = 15
SYNTHETIC_PLAYED = 20

# Curated, ordered club names per league provider code.
CURATED_TEAMS: dict[str, tuple[str, ...]] = {
    "PL": (
        "Manchester City", "Arsenal", "Liverpool", "Chelsea", "Tottenham",
        "Newcastle", "Brighton", "Aston Villa", "West Ham", "Crystal Palace",
        "Fulham", "Everton", "Wolves", "Brentford", "Nottingham Forest",
    ),
    "PD": (
        "Barcelona", "Real Madrid", "Atletico Madrid", "Sevilla", "Real Sociedad",
        "Villarreal", "Valencia", "Athletic Bilbao", "Real Betis", "Osasuna",
        "Getafe", "Mallorca", "Celta Vigo", "Rayo Vallecano", "Girona",
    ),
    "SA": (
        "Juventus", "AC Milan", "Inter Milan", "Napoli", "Roma",
        "Lazio", "Atalanta", "Fiorentina", "Torino", "Bologna",
        "Udinese", "Sassuolo", "Genoa", "Lecce", "Verona",
    ),
    "BL1": (
        "Bayern Munich", "Borussia Dortmund", "RB Leipzig", "Bayer Leverkusen",
        "Eintracht Frankfurt", "Wolfsburg", "Borussia Mönchengladbach", "Union Berlin",
        "Freiburg", "Hoffenheim", "Mainz", "Augsburg", "Werder Bremen", "Stuttgart", "Bochum",
    ),
    "FL1": (
        "PSG", "Marseille", "Lyon", "Monaco", "Nice",
        "Lille", "Lens", "Rennes", "Toulouse", "Montpellier",
        "Nantes", "Strasbourg", "Reims", "Brest", "Lorient",
    ),
}

# One headline fixture per top league, shown whatever league is selected.
DEMO_PAIRINGS: tuple[tuple[str, str], ...] = (
    ("Arsenal", "Chelsea"),
    ("Manchester City", "Liverpool"),
    ("Barcelona", "Real Madrid"),
    ("Bayern Munich", "Borussia Dortmund"),
    ("PSG", "Marseille"),
)

_STATUS_CYCLE = (MatchStatus.FINISHED, MatchStatus.LIVE, MatchStatus.SCHEDULED)


def synthetic_standing_row(index: int, team_name: str) -> StandingRow:
    """Row `index` (0-based) of a synthetic table."""

    won = max(1, 15 - index)
    draw = 3 + (index % 3)
    return StandingRow(
        position=index + 1,
        team_name=team_name,
        played=SYNTHETIC_PLAYED,
        won=won,
        draw=draw,
        lost=max(0, index - 2),
        points=won * 3 + draw,
        goal_difference=25 - 2 * index,
    )


class SyntheticDataGenerator:
    """
    Offline demo data so the app always has something to show.

    Standings are fully deterministic. Fixtures are deterministic apart from
    the scores of finished matches, drawn from `rng`.
    """

    def __init__(
        self,
        *,
        rng: random.Random | None = None,
        now: Callable[[], datetime] = utc_now,
    ) -> None:
        self._rng = rng or random.Random()
        self._now = now

    def standings(self, league: League) -> list[StandingRow]:
        teams = CURATED_TEAMS.get(league.provider_code) or CURATED_TEAMS[
            DEFAULT_LEAGUE.provider_code
        ]
        return [
            synthetic_standing_row(i, name)
            for i, name in enumerate(teams[:SYNTHETIC_TABLE_SIZE])
        ]

    def matches(self, league: League) -> list[Match]:
        # TODO: curate per-league pairings; the same cross-league set is used for every league.
        now = self._now()
        matches: list[Match] = []
        for index, (home, away) in enumerate(DEMO_PAIRINGS):
            status = _STATUS_CYCLE[index % 3]
            home_score: int | None = None
            away_score: int | None = None
            if status is MatchStatus.FINISHED:
                home_score = self._rng.randrange(4)
                away_score = self._rng.randrange(4)

            matches.append(
                Match(
                    id=index + 1,
                    home_team_name=home,
                    away_team_name=away,
                    status=status,
                    kickoff=now + timedelta(days=index - 2),
                    home_score=home_score,
                    away_score=away_score,
                )
            )
        return matches
