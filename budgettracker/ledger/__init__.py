"""Mini README: Expense ledger for the budget tracker.

The ledger is an in-memory, insertion-ordered record of expenses alongside a
budget limit. It has no knowledge of files or the console; serialisation
lives in ``budgettracker.export``.
"""

from .ledger import DATE_FORMAT, Expense, Ledger

__all__ = ["DATE_FORMAT", "Expense", "Ledger"]
