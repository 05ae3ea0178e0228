"""CLI console helpers with optional Rich support.

Rich is imported lazily so that bootstrap paths (``--help``,
``--version``) keep working even when it is not installed.

Boat names are user data and may contain square brackets; pass them
through :func:`escape` before embedding them in markup.
"""

from __future__ import annotations

import re
from typing import Any

from marina_ledger.exceptions import DependencyError, MarinaLedgerError

_MARKUP = re.compile(r"(?<!\\)\[/?[a-z ]+\]")


def _load_rich_console_class() -> type[Any]:
    """Return ``rich.console.Console`` class or raise ``DependencyError``."""
    try:
        from rich.console import Console
    except ModuleNotFoundError as exc:
        raise DependencyError(
            "rich is not installed. Install with: pip install rich",
        ) from exc
    return Console


def get_rich_console() -> Any:
    """Create a Rich console instance targeting stdout."""
    console_class = _load_rich_console_class()
    return console_class()


def escape(text: str) -> str:
    """Escape *text* so Rich prints it literally.

    Without Rich nothing interprets markup, so *text* is returned as is.
    """
    try:
        from rich.markup import escape as rich_escape
    except ModuleNotFoundError:
        return text
    return rich_escape(text)


def strip_markup(text: str) -> str:
    """Turn Rich markup into plain text for the fallback path."""
    return _MARKUP.sub("", text).replace("\\[", "[")


class _ConsoleProxy:
    """Minimal ``print``-compatible proxy with Rich fallback."""

    def print(self, *objects: object) -> None:
        """Render with Rich when available, else plain stdout print."""
        try:
            rich_console = get_rich_console()
        except DependencyError:
            print(*(strip_markup(o) if isinstance(o, str) else o for o in objects))
            return
        rich_console.print(*objects)

    def error(self, exc: MarinaLedgerError) -> None:
        """Render a domain error and its hint, if any."""
        self.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            self.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")


console = _ConsoleProxy()
