"""Mini README: Serialisers turning the ledger into files and back.

``csv_codec`` handles the ``Name,Price,Category,Date`` exchange format and
``report`` renders the plain-text financial report.
"""

from .csv_codec import (
    CSV_HEADER,
    ImportIssue,
    ImportResult,
    from_csv,
    parse_date,
    parse_price,
    read_csv,
    to_csv,
    write_csv,
)
from .report import format_expense_line, to_report_text, write_report

__all__ = [
    "CSV_HEADER",
    "ImportIssue",
    "ImportResult",
    "format_expense_line",
    "from_csv",
    "parse_date",
    "parse_price",
    "read_csv",
    "to_csv",
    "to_report_text",
    "write_csv",
    "write_report",
]
