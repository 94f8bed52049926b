"""Mini README: Core package initializer for the budget tracker.

The package is split into ``ledger`` (in-memory expenses and totals),
``export`` (CSV and report serialisers) and ``interface`` (the interactive
menu). This module only re-exports the logging helper so importing the
package stays cheap.
"""

from .logging_utils import get_logger

__version__ = "1.0.0"

__all__ = ["get_logger"]
