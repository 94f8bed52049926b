"""Mini README: Interactive menu session driving the ledger.

Structure:
    * MenuCommand - enum of the eight numbered menu entries.
    * ConsoleSession - owns the ledger and maps each command to a handler.

Prompting and output go through injectable callables that default to
``typer.prompt`` and ``typer.echo`` so tests can script a session. Each
handler isolates its own failures: a broken import or an unwritable export
file prints a message and the menu carries on.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional

import typer

from ..configuration import BudgetTrackerSettings, get_settings
from ..errors import BudgetTrackerError
from ..export import format_expense_line, parse_price, read_csv, write_csv, write_report
from ..ledger import Expense, Ledger
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

PromptFunc = Callable[[str], str]
EchoFunc = Callable[[str], None]


class MenuCommand(str, Enum):
    """Numbered menu entries."""

    ADD = "1"
    VIEW = "2"
    FILTER = "3"
    REMAINING = "4"
    REPORT = "5"
    EXPORT = "6"
    IMPORT = "7"
    EXIT = "8"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_str(cls, value: str) -> "MenuCommand":
        """Resolve user input such as ``" 3 "`` into a command."""

        try:
            return cls(value.strip())
        except (ValueError, AttributeError) as error:
            raise ValueError(f"Unsupported menu choice: {value}") from error


_LABELS: Dict[MenuCommand, str] = {
    MenuCommand.ADD: "Add an expense",
    MenuCommand.VIEW: "View expenses",
    MenuCommand.FILTER: "Filter expenses by category",
    MenuCommand.REMAINING: "View remaining budget",
    MenuCommand.REPORT: "Generate financial report",
    MenuCommand.EXPORT: "Export expenses to CSV",
    MenuCommand.IMPORT: "Import expenses from CSV",
    MenuCommand.EXIT: "Exit",
}


def _typer_prompt(text: str) -> str:
    # Empty answers are allowed, matching plain line reads.
    return typer.prompt(text, default="", show_default=False)


class ConsoleSession:
    """Run the numbered menu against a single ledger."""

    def __init__(
        self,
        ledger: Optional[Ledger] = None,
        *,
        settings: Optional[BudgetTrackerSettings] = None,
        prompt: PromptFunc = _typer_prompt,
        echo: EchoFunc = typer.echo,
    ) -> None:
        self.ledger = ledger if ledger is not None else Ledger()
        self.settings = settings or get_settings()
        self._prompt = prompt
        self._echo = echo
        self._handlers: Dict[MenuCommand, Callable[[], bool]] = {
            MenuCommand.ADD: self.add_expense,
            MenuCommand.VIEW: self.view_expenses,
            MenuCommand.FILTER: self.filter_expenses,
            MenuCommand.REMAINING: self.view_remaining,
            MenuCommand.REPORT: self.generate_report,
            MenuCommand.EXPORT: self.export_csv,
            MenuCommand.IMPORT: self.import_csv,
            MenuCommand.EXIT: self.exit,
        }

    def prompt_limit(self) -> Optional[float]:
        """Ask for the budget limit and store it; ``None`` when input ends first."""

        try:
            raw = self._prompt("Enter your budget limit")
        except (typer.Abort, EOFError):
            self._echo("\nExiting...")
            return None
        limit = parse_price(raw)
        self.ledger.set_limit(limit)
        return limit

    def run(self) -> None:
        """Loop over the menu until the user exits or input ends."""

        while True:
            self._echo("")
            for command in MenuCommand:
                self._echo(f"{command.value}. {command.label}")
            try:
                choice = self._prompt("\nEnter your choice")
                if not self.dispatch(choice):
                    return
            except (typer.Abort, EOFError):
                self._echo("\nExiting...")
                return

    def dispatch(self, choice: str) -> bool:
        """Run the handler for ``choice``; return ``False`` once the session should stop."""

        try:
            command = MenuCommand.from_str(choice)
        except ValueError:
            self._echo("Invalid choice. Please try again.")
            return True
        LOGGER.debug("Dispatching menu command %s", command.name)
        return self._handlers[command]()

    def _show(self, title: str, expenses: List[Expense]) -> None:
        self._echo(f"\n{title}:")
        for expense in expenses:
            self._echo(format_expense_line(expense))

    def add_expense(self) -> bool:
        name = self._prompt("\nEnter expense name")
        price = parse_price(self._prompt("Enter expense amount"))
        category = self._prompt("Enter expense category")
        self.ledger.add_expense(name, price, category)
        self._echo("Expense added successfully!")
        return True

    def view_expenses(self) -> bool:
        if self.ledger.is_empty():
            self._echo("No expenses found.")
            return True
        self._show("Expenses", self.ledger.list_all())
        return True

    def filter_expenses(self) -> bool:
        if self.ledger.is_empty():
            self._echo("No expenses found.")
            return True
        category = self._prompt("Enter category to filter expenses")
        matches = self.ledger.filter_by_category(category)
        if not matches:
            self._echo("No expenses found in the specified category.")
            return True
        self._show("Filtered Expenses", matches)
        return True

    def view_remaining(self) -> bool:
        self._echo(f"\nRemaining Budget: ${self.ledger.remaining():.2f}")
        return True

    def generate_report(self) -> bool:
        try:
            write_report(self.ledger, self.settings.report_path)
        except BudgetTrackerError as error:
            self._echo(str(error))
        except OSError as error:
            LOGGER.error("Report write failed: %s", error)
            self._echo(f"Error writing financial report: {error}")
        else:
            self._echo("Financial report generated successfully!")
        return True

    def export_csv(self) -> bool:
        try:
            write_csv(self.ledger, self.settings.export_path)
        except BudgetTrackerError as error:
            self._echo(str(error))
        except OSError as error:
            LOGGER.error("CSV export failed: %s", error)
            self._echo(f"Error writing CSV file: {error}")
        else:
            self._echo("Expenses exported to CSV successfully!")
        return True

    def import_csv(self) -> bool:
        path = Path(self._prompt("Enter the path of the CSV file").strip()).expanduser()
        try:
            result = read_csv(path)
        except BudgetTrackerError as error:
            LOGGER.error("CSV import failed: %s", error)
            self._echo(str(error))
            return True
        for issue in result.issues:
            self._echo(issue.describe())
        added = self.ledger.extend(result.expenses)
        if result.skipped_rows:
            self._echo(f"Imported {added} expenses; skipped {result.skipped_rows} rows.")
        self._echo("Expenses imported from CSV successfully!")
        return True

    def exit(self) -> bool:
        self._echo("Exiting...")
        return False
