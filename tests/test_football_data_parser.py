from __future__ import annotations

from datetime import UTC, datetime

import pytest

from football_feed.domain.enums import MatchStatus
from football_feed.ingestion.providers.base.errors import ProviderMappingError
from football_feed.ingestion.providers.football_data.parser import (
    parse_matches,
    parse_standings,
)

from conftest import match_item, standings_payload


def test_parse_matches_maps_fields_and_status_aliases() -> None:
    payload = {
        "matches": [
            match_item(1, "Arsenal", "Chelsea", status="FINISHED", home_score=3, away_score=0),
            match_item(2, "Fulham", "Everton", status="IN_PLAY", home_score=1, away_score=None),
            match_item(3, "Wolves", "Brentford", status="TIMED", home_score=None, away_score=None),
            match_item(4, "Leeds", "Burnley", status="POSTPONED"),
        ]
    }

    matches = parse_matches(payload)

    assert [m.id for m in matches] == [1, 2, 3]
    first = matches[0]
    assert first.home_team_name == "Arsenal"
    assert first.away_team_name == "Chelsea"
    assert (first.home_score, first.away_score) == (3, 0)
    assert first.status is MatchStatus.FINISHED
    assert first.kickoff == datetime(2026, 10, 18, 14, 0, tzinfo=UTC)
    assert first.competition_code == "PL"

    assert matches[1].status is MatchStatus.LIVE
    assert (matches[1].home_score, matches[1].away_score) == (1, None)
    assert matches[2].status is MatchStatus.SCHEDULED


def test_scheduled_match_never_carries_a_score() -> None:
    item = match_item(9, "A", "B", status="SCHEDULED", home_score=0, away_score=0)
    (match,) = parse_matches({"matches": [item]})
    assert match.home_score is None
    assert match.away_score is None


def test_parse_matches_rejects_unexpected_shapes() -> None:
    with pytest.raises(ProviderMappingError):
        parse_matches({"matches": None})
    with pytest.raises(ProviderMappingError):
        parse_matches({"matches": [{"id": 1, "status": "FINISHED", "utcDate": "2026-10-18T14:00:00Z"}]})
    with pytest.raises(ProviderMappingError):
        parse_matches({"matches": [match_item(1, "A", "B", utc_date="")]})


def test_parse_standings_uses_first_table_in_provider_order() -> None:
    payload = standings_payload([(1, "Arsenal", 20), (2, "Liverpool", 18), (4, "Chelsea", 15)])
    payload["standings"].append({"table": [{"position": 1, "team": {"name": "Home table"}}]})

    rows = parse_standings(payload)

    assert [r.team_name for r in rows] == ["Arsenal", "Liverpool", "Chelsea"]
    # Gaps (e.g. after a points deduction) are preserved, not re-ranked.
    assert [r.position for r in rows] == [1, 2, 4]
    assert rows[0].played == 8
    assert rows[0].goal_difference == 7


def test_parse_standings_empty_and_malformed() -> None:
    assert parse_standings({"standings": []}) == []
    assert parse_standings({"standings": [{"table": []}]}) == []
    with pytest.raises(ProviderMappingError):
        parse_standings({"errorCode": 403})
    with pytest.raises(ProviderMappingError):
        parse_standings({"standings": [{"table": [{"position": 1}]}]})
