from __future__ import annotations

import logging
from typing import Any

from football_feed.domain.dates import parse_utc_datetime
from football_feed.domain.enums import MatchStatus
from football_feed.domain.models import Match, StandingRow
from football_feed.ingestion.providers.base.errors import ProviderMappingError

logger = logging.getLogger(__name__)

ApiItem = dict[str, Any]

# football-data.org reports finer-grained states than the three the app shows.
_STATUS_ALIASES: dict[str, MatchStatus] = {
    "SCHEDULED": MatchStatus.SCHEDULED,
    "TIMED": MatchStatus.SCHEDULED,
    "LIVE": MatchStatus.LIVE,
    "IN_PLAY": MatchStatus.LIVE,
    "PAUSED": MatchStatus.LIVE,
    "EXTRA_TIME": MatchStatus.LIVE,
    "PENALTY_SHOOTOUT": MatchStatus.LIVE,
    "FINISHED": MatchStatus.FINISHED,
    "AWARDED": MatchStatus.FINISHED,
}


def map_status(value: Any) -> MatchStatus | None:
    if not isinstance(value, str):
        return None
    return _STATUS_ALIASES.get(value.strip().upper())


def _nested_str(item: ApiItem, *keys: str) -> str | None:
    value: Any = item
    for key in keys:
        if not isinstance(value, dict):
            return None
        value = value.get(key)
    return value if isinstance(value, str) else None


def _optional_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    return None


def _required_int(row: ApiItem, key: str) -> int:
    value = row.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        raise ProviderMappingError(
            f"Standings row field {key!r} is not an integer", context={"value": value}
        )
    return value


def parse_match(item: ApiItem) -> Match | None:
    """
    Parse one football-data.org match item.

    Returns None for matches in a state the app does not display (postponed,
    cancelled, ...). Raises ProviderMappingError when a required field is missing.
    """
    status = map_status(item.get("status"))
    if status is None:
        logger.debug("Skipping match id=%s with status=%r", item.get("id"), item.get("status"))
        return None

    match_id = item.get("id")
    home = _nested_str(item, "homeTeam", "name")
    away = _nested_str(item, "awayTeam", "name")
    if match_id is None or home is None or away is None:
        raise ProviderMappingError(
            "Match item missing id or team names", context={"id": match_id}
        )

    try:
        kickoff = parse_utc_datetime(item.get("utcDate"))
    except ValueError as e:
        raise ProviderMappingError(str(e), context={"id": match_id}) from e

    home_score: int | None = None
    away_score: int | None = None
    if status is not MatchStatus.SCHEDULED:
        score = item.get("score")
        full_time = score.get("fullTime") if isinstance(score, dict) else None
        if isinstance(full_time, dict):
            home_score = _optional_int(full_time.get("home"))
            away_score = _optional_int(full_time.get("away"))

    return Match(
        id=match_id,
        home_team_name=home,
        away_team_name=away,
        status=status,
        kickoff=kickoff,
        home_score=home_score,
        away_score=away_score,
        competition_code=_nested_str(item, "competition", "code"),
    )


def parse_matches(payload: ApiItem) -> list[Match]:
    items = payload.get("matches")
    if not isinstance(items, list):
        raise ProviderMappingError(
            "Expected 'matches' list", context={"type": type(items).__name__}
        )

    parsed: list[Match] = []
    for item in items:
        if not isinstance(item, dict):
            continue
        match = parse_match(item)
        if match is not None:
            parsed.append(match)
    return parsed


def parse_standing_row(row: ApiItem) -> StandingRow:
    team_name = _nested_str(row, "team", "name")
    if team_name is None:
        raise ProviderMappingError("Standings row missing team.name", context={"row": row})

    return StandingRow(
        position=_required_int(row, "position"),
        team_name=team_name,
        played=_required_int(row, "playedGames"),
        won=_required_int(row, "won"),
        draw=_required_int(row, "draw"),
        lost=_required_int(row, "lost"),
        points=_required_int(row, "points"),
        goal_difference=_required_int(row, "goalDifference"),
    )


def parse_standings(payload: ApiItem) -> list[StandingRow]:
    """
    Rows of the first standings table, in provider order.

    Positions are kept as given (they may skip after points deductions).
    """
    standings = payload.get("standings")
    if not isinstance(standings, list):
        raise ProviderMappingError(
            "Expected 'standings' list", context={"type": type(standings).__name__}
        )
    if not standings:
        return []

    first = standings[0]
    table = first.get("table") if isinstance(first, dict) else None
    if not isinstance(table, list):
        raise ProviderMappingError("Expected 'standings[0].table' list")

    return [parse_standing_row(row) for row in table if isinstance(row, dict)]
