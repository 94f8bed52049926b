"""Mini README: Tests covering the in-memory expense ledger.

Structure:
    * ordering, totals, and filtering behaviour of ``Ledger``.
    * timestamp truncation and limit handling.
"""

from __future__ import annotations

from datetime import datetime

import pytest

from budgettracker.ledger import Expense, Ledger


def _ledger() -> Ledger:
    ledger = Ledger(limit=100.0)
    ledger.add_expense("Coffee", 3.5, "Food", datetime(2024, 5, 1, 8, 30, 0))
    ledger.add_expense("Train", 12.0, "Transport", datetime(2024, 5, 1, 9, 0, 0))
    ledger.add_expense("Lunch", 9.25, "Food", datetime(2024, 5, 1, 12, 15, 0))
    return ledger


def test_list_all_preserves_insertion_order() -> None:
    """Expenses should come back in the order they were added."""

    ledger = _ledger()
    assert [expense.name for expense in ledger.list_all()] == ["Coffee", "Train", "Lunch"]


def test_list_all_returns_copy() -> None:
    """Mutating the returned list must not touch the ledger."""

    ledger = _ledger()
    ledger.list_all().clear()
    assert len(ledger) == 3


def test_totals_and_remaining() -> None:
    """Totals sum every price and remaining subtracts from the limit."""

    ledger = _ledger()
    assert ledger.total_spent() == pytest.approx(24.75)
    assert ledger.remaining() == pytest.approx(75.25)


def test_remaining_goes_negative_without_blocking() -> None:
    """Exceeding the limit is recorded rather than rejected."""

    ledger = Ledger(limit=10.0)
    ledger.add_expense("Rent", 800.0, "Housing")
    assert len(ledger) == 1
    assert ledger.remaining() == pytest.approx(-790.0)


def test_total_accumulates_in_insertion_order() -> None:
    """Float accumulation should match a left-to-right sum exactly."""

    prices = [0.1, 0.2, 0.3, 1e16, -1e16]
    ledger = Ledger()
    for index, price in enumerate(prices):
        ledger.add_expense(f"item {index}", price, "Misc")

    expected = 0.0
    for price in prices:
        expected += price
    assert ledger.total_spent() == expected


def test_filter_by_category_is_case_sensitive() -> None:
    """Filtering matches categories exactly and keeps original order."""

    ledger = _ledger()
    ledger.add_expense("Snack", 2.0, "food", datetime(2024, 5, 2))

    assert [expense.name for expense in ledger.filter_by_category("Food")] == ["Coffee", "Lunch"]
    assert [expense.name for expense in ledger.filter_by_category("food")] == ["Snack"]
    assert ledger.filter_by_category("Travel") == []


def test_empty_ledger_state() -> None:
    """A fresh ledger is empty with zero spend."""

    ledger = Ledger(limit=50.0)
    assert ledger.is_empty()
    assert ledger.list_all() == []
    assert ledger.total_spent() == 0.0
    assert ledger.remaining() == pytest.approx(50.0)


def test_add_expense_truncates_to_seconds() -> None:
    """Timestamps are stored with second precision."""

    ledger = Ledger()
    expense = ledger.add_expense("Tea", 1.0, "Food", datetime(2024, 1, 2, 3, 4, 5, 678901))
    assert expense.date == datetime(2024, 1, 2, 3, 4, 5)

    defaulted = ledger.add_expense("Tea", 1.0, "Food")
    assert defaulted.date.microsecond == 0


def test_set_limit_and_extend() -> None:
    """The limit can be reset and prebuilt expenses appended in order."""

    ledger = Ledger()
    ledger.set_limit(-5)
    added = ledger.extend(
        [
            Expense("A", 1.0, "X", datetime(2024, 1, 1)),
            Expense("B", 2.0, "Y", datetime(2024, 1, 2)),
        ]
    )
    assert added == 2
    assert ledger.limit == -5.0
    assert ledger.remaining() == pytest.approx(-8.0)
    assert [expense.name for expense in ledger.list_all()] == ["A", "B"]

