"""Mini README: Tests for the plain-text financial report."""

from __future__ import annotations

from datetime import datetime

import pytest

from budgettracker.errors import EmptyLedgerError
from budgettracker.export import format_expense_line, to_report_text, write_report
from budgettracker.ledger import Ledger


def test_report_text_layout() -> None:
    """The report lists limit, totals, and every expense line."""

    ledger = Ledger(limit=50.0)
    ledger.add_expense("Cinema", 12.5, "Fun", datetime(2024, 7, 4, 20, 0, 0))
    ledger.add_expense("Dinner", 45.0, "Food", datetime(2024, 7, 4, 22, 30, 5))

    assert to_report_text(ledger) == (
        "Financial Report\n"
        "\n"
        "Budget Limit: $50.00\n"
        "Total Expenses: $57.50\n"
        "Remaining Budget: $-7.50\n"
        "\n"
        "Expenses:\n"
        "- Cinema: $12.50 (Fun) [2024-07-04 20:00:00]\n"
        "- Dinner: $45.00 (Food) [2024-07-04 22:30:05]\n"
    )


def test_format_expense_line() -> None:
    """Expense lines round the price to two decimals."""

    ledger = Ledger()
    expense = ledger.add_expense("Pen", 1.005, "Office", datetime(2024, 1, 1, 9, 5, 0))
    assert format_expense_line(expense) == f"- Pen: ${1.005:.2f} (Office) [2024-01-01 09:05:00]"


def test_report_requires_expenses(tmp_path) -> None:
    """No report text or file is produced for an empty ledger."""

    destination = tmp_path / "financial_report.txt"
    with pytest.raises(EmptyLedgerError):
        to_report_text(Ledger(limit=10.0))
    with pytest.raises(EmptyLedgerError):
        write_report(Ledger(limit=10.0), destination)
    assert not destination.exists()


def test_write_report_creates_file(tmp_path) -> None:
    """The written file holds exactly the report text."""

    ledger = Ledger(limit=20.0)
    ledger.add_expense("Soap", 4.0, "Home", datetime(2024, 8, 8, 8, 8, 8))

    destination = write_report(ledger, tmp_path / "financial_report.txt")
    assert destination.read_text(encoding="utf-8") == to_report_text(ledger)
