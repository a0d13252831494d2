from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class League:
    id: str
    display_name: str
    country: str
    provider_code: str


LEAGUES: tuple[League, ...] = (
    League(id="PL", display_name="Premier League", country="England", provider_code="PL"),
    League(id="PD", display_name="La Liga", country="Spain", provider_code="PD"),
    League(id="SA", display_name="Serie A", country="Italy", provider_code="SA"),
    League(id="BL1", display_name="Bundesliga", country="Germany", provider_code="BL1"),
    League(id="FL1", display_name="Ligue 1", country="France", provider_code="FL1"),
)

DEFAULT_LEAGUE = LEAGUES[0]


def get_league(code: str) -> League:
    """Resolve a league by id or provider code (case-insensitive)."""

    key = code.strip().upper()
    for league in LEAGUES:
        if key in (league.id.upper(), league.provider_code.upper()):
            return league
    known = ", ".join(league.id for league in LEAGUES)
    raise KeyError(f"Unknown league {code!r} (known: {known})")
