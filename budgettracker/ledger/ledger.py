"""Mini README: In-memory expense ledger with a budget limit.

Structure:
    * DATE_FORMAT - timestamp layout shared by the console, reports, and CSV.
    * Expense - immutable record of a single spend.
    * Ledger - ordered expense collection with totals and filtering.

Expenses keep insertion order for display, reporting, and export. Nothing is
ever removed or edited in place, and the limit is informational only: an
expense is always recorded even when it pushes the remaining budget below
zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, List, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True, slots=True)
class Expense:
    """A recorded spend with second-precision timestamp."""

    name: str
    price: float
    category: str
    date: datetime

    @property
    def formatted_date(self) -> str:
        """Return the timestamp as ``YYYY-MM-DD HH:MM:SS``."""

        return self.date.strftime(DATE_FORMAT)


def _truncate_to_seconds(moment: datetime) -> datetime:
    return moment.replace(microsecond=0)


class Ledger:
    """Hold the budget limit and the ordered sequence of expenses."""

    def __init__(self, limit: float = 0.0) -> None:
        self._limit = float(limit)
        self._expenses: List[Expense] = []
        LOGGER.debug("Ledger initialised with limit=%.2f", self._limit)

    @property
    def limit(self) -> float:
        return self._limit

    def set_limit(self, value: float) -> None:
        """Store the budget limit without range validation."""

        self._limit = float(value)
        LOGGER.info("Budget limit set to %.2f", self._limit)

    def add_expense(
        self,
        name: str,
        price: float,
        category: str,
        date: Optional[datetime] = None,
    ) -> Expense:
        """Append a new expense, defaulting its timestamp to now."""

        moment = _truncate_to_seconds(date if date is not None else datetime.now())
        expense = Expense(name=name, price=float(price), category=category, date=moment)
        self._expenses.append(expense)
        LOGGER.info("Recorded expense %r in %r for %.2f", name, category, expense.price)
        return expense

    def extend(self, expenses: Iterable[Expense]) -> int:
        """Append already-built expenses in order and return how many were added."""

        added = 0
        for expense in expenses:
            self._expenses.append(expense)
            added += 1
        LOGGER.info("Appended %s expenses to the ledger", added)
        return added

    def list_all(self) -> List[Expense]:
        """Return a copy of the expenses in insertion order."""

        return list(self._expenses)

    def filter_by_category(self, category: str) -> List[Expense]:
        """Return expenses whose category matches exactly, preserving order."""

        return [expense for expense in self._expenses if expense.category == category]

    def total_spent(self) -> float:
        """Sum prices left to right so float rounding is reproducible."""

        total = 0.0
        for expense in self._expenses:
            total += expense.price
        return total

    def remaining(self) -> float:
        """Limit minus total spend; negative once the budget is exceeded."""

        return self._limit - self.total_spent()

    def is_empty(self) -> bool:
        return not self._expenses

    def __len__(self) -> int:
        return len(self._expenses)
