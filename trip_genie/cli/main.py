# trip_genie/cli/main.py

from __future__ import annotations

import logging

import typer

from trip_genie.cli import plan_cli, segment_cli
from trip_genie.config.settings import settings

app = typer.Typer(help="TripGenie: generate travel plans and split them into sections.")

app.command("segment")(segment_cli.segment)
app.command("plan")(plan_cli.plan)


@app.callback()
def main(
    log_level: str = typer.Option(
        settings.LOG_LEVEL,
        "--log-level",
        help="Logging level (DEBUG, INFO, WARNING, ...).",
    ),
) -> None:
    logging.basicConfig(
        level=getattr(logging, log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


if __name__ == "__main__":
    app()
