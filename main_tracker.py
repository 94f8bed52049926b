"""Mini README: Entry point CLI for the interactive budget tracker.

This script exposes a Typer CLI that asks for a budget limit and then runs
the numbered expense menu. File locations and the logging level come from
``BUDGETTRACKER_*`` settings unless overridden on the command line.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from budgettracker.configuration import BudgetTrackerSettings, get_settings
from budgettracker.interface import ConsoleSession
from budgettracker.ledger import Ledger
from budgettracker.logging_utils import configure_root_logger

cli = typer.Typer(help="Track expenses against a budget limit from the terminal.")


@cli.command()
def run(
    limit: Optional[float] = typer.Option(None, help="Budget limit; prompts when omitted."),
    export_path: Optional[Path] = typer.Option(None, help="CSV file written by the export option."),
    report_path: Optional[Path] = typer.Option(None, help="Text file written by the report option."),
    debug: bool = typer.Option(False, help="Enable debug logging."),
) -> None:
    """Start an interactive tracking session."""

    settings = get_settings()
    overrides = {}
    if export_path is not None:
        overrides["export_path"] = export_path
    if report_path is not None:
        overrides["report_path"] = report_path
    if overrides:
        # Rebuild rather than copy so path validators run on CLI values too.
        settings = BudgetTrackerSettings(**{**settings.model_dump(), **overrides})
    configure_root_logger("DEBUG" if debug else settings.log_level)

    session = ConsoleSession(Ledger(), settings=settings)
    effective_limit = limit if limit is not None else settings.default_limit
    if effective_limit is None:
        if session.prompt_limit() is None:
            return
    else:
        session.ledger.set_limit(effective_limit)
    session.run()


if __name__ == "__main__":
    cli()
