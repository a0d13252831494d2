from __future__ import annotations

from enum import StrEnum


class MatchStatus(StrEnum):
    SCHEDULED = "SCHEDULED"
    LIVE = "LIVE"
    FINISHED = "FINISHED"


class DatasetKind(StrEnum):
    MATCHES = "matches"
    STANDINGS = "standings"
