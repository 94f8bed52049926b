"""Mini README: CSV export and import for ledger expenses.

Structure:
    * CSV_HEADER - column layout ``Name,Price,Category,Date``.
    * ImportIssue / ImportResult - per-field warnings collected during import.
    * parse_price / parse_date - best-effort and strict field parsers.
    * to_csv / from_csv - pure text conversions.
    * write_csv / read_csv - file wrappers used by the console.

Imports follow a partial-success policy: a bad price becomes ``0.0`` and the
row is kept, a bad date drops only that row, and every other row is still
processed. Issues are returned to the caller instead of printed so the
ledger stays independent of the console.
"""

from __future__ import annotations

import csv
import io
import re
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterable, List, Optional

from ..errors import EmptyLedgerError, ImportFailedError
from ..ledger import DATE_FORMAT, Expense, Ledger
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

CSV_HEADER = ["Name", "Price", "Category", "Date"]

# strptime alone accepts unpadded fields such as "2024-1-5 9:03:00".
_DATE_PATTERN = re.compile(r"\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2}")


@dataclass(slots=True)
class ImportIssue:
    """A non-fatal problem found in one CSV row."""

    row_number: int
    column: str
    value: str
    message: str
    skipped: bool

    def describe(self) -> str:
        outcome = "row skipped" if self.skipped else "value treated as 0.00"
        return f"Row {self.row_number}: invalid {self.column} {self.value!r} ({self.message}); {outcome}"


@dataclass(slots=True)
class ImportResult:
    """Expenses parsed from CSV plus any issues encountered."""

    expenses: List[Expense] = field(default_factory=list)
    issues: List[ImportIssue] = field(default_factory=list)

    @property
    def skipped_rows(self) -> int:
        return sum(1 for issue in self.issues if issue.skipped)


def _try_parse_price(raw: str) -> Optional[float]:
    cleaned = raw.replace(",", "").strip()
    # float() also accepts digit-grouping underscores such as "1_000".
    if "_" in cleaned:
        return None
    try:
        return float(cleaned)
    except ValueError:
        return None


def parse_price(raw: str) -> float:
    """Parse a price, dropping thousands separators and falling back to zero."""

    value = _try_parse_price(raw)
    if value is None:
        LOGGER.warning("Could not parse price %r; using 0.00", raw)
        return 0.0
    return value


def parse_date(raw: str) -> datetime:
    """Parse ``YYYY-MM-DD HH:MM:SS`` strictly, raising ``ValueError`` otherwise."""

    if not _DATE_PATTERN.fullmatch(raw):
        raise ValueError(f"date {raw!r} does not match YYYY-MM-DD HH:MM:SS")
    return datetime.strptime(raw, DATE_FORMAT)


def to_csv(expenses: Iterable[Expense]) -> str:
    """Render expenses as CSV text with a header row."""

    buffer = io.StringIO()
    # Fields holding a bare "\r" are only quoted when it is part of the terminator.
    writer = csv.writer(buffer, quoting=csv.QUOTE_MINIMAL, lineterminator="\r\n")
    writer.writerow(CSV_HEADER)
    for expense in expenses:
        writer.writerow(
            [expense.name, f"{expense.price:.2f}", expense.category, expense.formatted_date]
        )
    return buffer.getvalue()


def from_csv(text: str) -> ImportResult:
    """Build expenses from positional CSV columns, collecting row issues."""

    result = ImportResult()
    reader = csv.reader(io.StringIO(text.removeprefix("\ufeff")))
    for row_number, row in enumerate(reader, start=1):
        if not row:
            continue
        if row_number == 1 and [cell.strip() for cell in row] == CSV_HEADER:
            continue
        if len(row) < len(CSV_HEADER):
            LOGGER.debug("Row %s has %s columns; skipping", row_number, len(row))
            result.issues.append(
                ImportIssue(
                    row_number=row_number,
                    column="row",
                    value=",".join(row),
                    message=f"expected {len(CSV_HEADER)} columns, found {len(row)}",
                    skipped=True,
                )
            )
            continue

        name, raw_price, category, raw_date = row[0], row[1], row[2], row[3]
        try:
            date = parse_date(raw_date)
        except ValueError as error:
            LOGGER.debug("Row %s has an invalid date; skipping: %s", row_number, error)
            result.issues.append(
                ImportIssue(
                    row_number=row_number,
                    column="date",
                    value=raw_date,
                    message=str(error),
                    skipped=True,
                )
            )
            continue

        price = _try_parse_price(raw_price)
        if price is None:
            LOGGER.debug("Row %s has an invalid price %r; using 0.00", row_number, raw_price)
            result.issues.append(
                ImportIssue(
                    row_number=row_number,
                    column="price",
                    value=raw_price,
                    message="not a number",
                    skipped=False,
                )
            )
            price = 0.0

        result.expenses.append(Expense(name=name, price=price, category=category, date=date))

    LOGGER.debug(
        "Parsed %s expenses from CSV with %s issues", len(result.expenses), len(result.issues)
    )
    return result


def write_csv(ledger: Ledger, destination: Path) -> Path:
    """Export the ledger to ``destination``; nothing is written when it is empty."""

    if ledger.is_empty():
        raise EmptyLedgerError()
    LOGGER.info("Exporting %s expenses to %s", len(ledger), destination)
    with destination.open("w", encoding="utf-8", newline="") as csv_file:
        csv_file.write(to_csv(ledger.list_all()))
    return destination


def read_csv(source: Path) -> ImportResult:
    """Read and parse ``source``, wrapping I/O and format failures."""

    LOGGER.info("Importing expenses from %s", source)
    try:
        with source.open("r", encoding="utf-8-sig", newline="") as csv_file:
            text = csv_file.read()
    except (OSError, UnicodeDecodeError) as error:
        raise ImportFailedError(f"Error opening CSV file: {error}") from error
    try:
        return from_csv(text)
    except csv.Error as error:
        raise ImportFailedError(f"Error reading CSV file: {error}") from error
