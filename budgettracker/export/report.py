"""Mini README: Plain-text financial report for the ledger.

Structure:
    * format_expense_line - one ``- name: $price (category) [date]`` line.
    * to_report_text - full report with limit, totals, and expenses.
    * write_report - writes the report to disk.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from ..errors import EmptyLedgerError
from ..ledger import Expense, Ledger
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


def format_expense_line(expense: Expense) -> str:
    """Format an expense the way the console and report list it."""

    return f"- {expense.name}: ${expense.price:.2f} ({expense.category}) [{expense.formatted_date}]"


def to_report_text(ledger: Ledger) -> str:
    """Build the report text, raising ``EmptyLedgerError`` without expenses."""

    if ledger.is_empty():
        raise EmptyLedgerError()

    total = ledger.total_spent()
    lines: List[str] = [
        "Financial Report",
        "",
        f"Budget Limit: ${ledger.limit:.2f}",
        f"Total Expenses: ${total:.2f}",
        f"Remaining Budget: ${ledger.limit - total:.2f}",
        "",
        "Expenses:",
    ]
    lines.extend(format_expense_line(expense) for expense in ledger.list_all())
    return "\n".join(lines) + "\n"


def write_report(ledger: Ledger, destination: Path) -> Path:
    """Write the report; the empty check runs before the file is opened."""

    text = to_report_text(ledger)
    LOGGER.info("Writing financial report for %s expenses to %s", len(ledger), destination)
    with destination.open("w", encoding="utf-8") as report_file:
        report_file.write(text)
    return destination
