"""Mini README: Console interface for the budget tracker."""

from .console import ConsoleSession, MenuCommand

__all__ = ["ConsoleSession", "MenuCommand"]
