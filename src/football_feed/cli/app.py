from __future__ import annotations

import typer

from football_feed.cli.fetch import app as fetch_app
from football_feed.core.config import settings
from football_feed.core.logging import configure_logging

app = typer.Typer(no_args_is_help=True)
app.add_typer(fetch_app, name="fetch")


@app.callback()
def main(
    log_level: str = typer.Option(
        settings.log_level, "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    """Football fixtures and league tables with demo-data fallback."""

    configure_logging(log_level)
