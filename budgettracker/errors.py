"""Mini README: Exceptions raised by the ledger and serialisers.

The console layer catches ``BudgetTrackerError`` per command so a failing
operation never ends the interactive session.
"""


class BudgetTrackerError(Exception):
    """Base class for recoverable budget tracker failures."""


class EmptyLedgerError(BudgetTrackerError, LookupError):
    """Raised when an operation needs at least one recorded expense."""

    def __init__(self, message: str = "No expenses found.") -> None:
        super().__init__(message)


class ImportFailedError(BudgetTrackerError, IOError):
    """Raised when an import file cannot be opened, decoded, or parsed."""
