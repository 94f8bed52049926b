"""Mini README: Centralised configuration for the budget tracker.

Structure:
    * BudgetTrackerSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Values come from ``BUDGETTRACKER_*`` environment variables or a ``.env``
    file. CLI options take precedence over anything configured here.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings


class BudgetTrackerSettings(BaseSettings):
    """Runtime configuration for an interactive tracking session."""

    export_path: Path = Field(
        Path("expenses.csv"),
        description="Destination of the CSV export written by menu option 6.",
    )
    report_path: Path = Field(
        Path("financial_report.txt"),
        description="Destination of the plain-text financial report.",
    )
    log_level: str = Field(
        "WARNING",
        description="Root logging level; keep above INFO so logs do not interleave with the menu.",
    )
    default_limit: Optional[float] = Field(
        None,
        description="Budget limit used instead of prompting at start-up.",
    )

    class Config:
        env_prefix = "BUDGETTRACKER_"
        env_file = ".env"
        case_sensitive = False

    @validator("export_path", "report_path", pre=True)
    def _expand_path(cls, value: str | Path) -> Path:
        """Expand user directories in configured file paths."""

        return Path(value).expanduser()

    @validator("log_level")
    def _validate_level(cls, value: str) -> str:
        """Reject level names the logging module does not know."""

        normalised = value.strip().upper()
        if not isinstance(logging.getLevelName(normalised), int):
            raise ValueError(f"Unknown logging level: {value}")
        return normalised


@lru_cache()
def get_settings() -> BudgetTrackerSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return BudgetTrackerSettings()
