from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import replace
from typing import Any

from football_feed.domain.models import StandingRow

ApiItem = dict[str, Any]

# Accepted source field names per StandingRow attribute, tried in order.
# Dotted names reach into nested objects.
STANDING_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "position": ("rank", "position"),
    "team_name": ("teamName", "team.name"),
    "played": ("matches", "playedGames"),
    "won": ("wins", "won"),
    "draw": ("draws", "draw"),
    "lost": ("losses", "lost"),
    "points": ("points",),
    "goal_difference": ("goalDiff", "goalDifference"),
}


def _lookup(entry: Mapping[str, Any], dotted: str) -> Any:
    value: Any = entry
    for part in dotted.split("."):
        if not isinstance(value, Mapping):
            return None
        value = value.get(part)
    return value


def first_present(entry: Mapping[str, Any], names: tuple[str, ...]) -> Any:
    """Value of the first name in `names` that is present and not null."""

    for name in names:
        value = _lookup(entry, name)
        if value is not None:
            return value
    return None


def _as_int(value: Any) -> int:
    if isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return 0
    return 0


def reconcile_standing(entry: Mapping[str, Any]) -> StandingRow:
    """
    Normalize one table entry, whichever naming convention it uses.

    Missing numeric attributes default to 0; a missing team name to "".
    """
    values: dict[str, Any] = {}
    for attr, names in STANDING_FIELD_ALIASES.items():
        raw = first_present(entry, names)
        if attr == "team_name":
            values[attr] = raw if isinstance(raw, str) else ""
        else:
            values[attr] = _as_int(raw)
    return StandingRow(**values)


def parse_table(items: list[ApiItem]) -> list[StandingRow]:
    """Reconcile every entry; entries with no position take their 1-based provider order."""

    rows: list[StandingRow] = []
    for index, item in enumerate(items, start=1):
        row = reconcile_standing(item)
        if row.position <= 0:
            row = replace(row, position=index)
        rows.append(row)
    return rows
