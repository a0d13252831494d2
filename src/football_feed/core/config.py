from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # football-data.org
    football_data_token: str | None = Field(
        default=None,
        validation_alias="FOOTBALL_DATA_TOKEN",
        repr=False,
    )
    football_data_base_url: str = "https://api.football-data.org"

    # openligadb (secondary standings provider)
    openligadb_base_url: str = "https://api.openligadb.net"
    dual_provider_league: str = "BL1"

    # HTTP
    http_timeout_s: float = 15.0
    http_connect_timeout_s: float = 5.0

    # Fixtures query
    fixture_window_days: int = 7
    fixture_limit: int = 30

    log_level: str = "INFO"


settings = Settings()
