"""Inventory listing for the CLI layer.

Renders the boats as a Rich table, or as fixed-width plain text rows
when Rich is unavailable.  Display only — no sorting or mutation
happens here.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from marina_ledger.cli.console import console
from marina_ledger.core.models import (
    Boat,
    LandLocation,
    SlipLocation,
    StorageLocation,
    TrailerLocation,
)


def _import_rich_table() -> tuple[type[Any], type[Any]] | None:
    """Return ``(Table, Text)`` from Rich, or ``None`` when not installed."""
    try:
        from rich.table import Table
        from rich.text import Text
    except ModuleNotFoundError:
        return None
    return Table, Text


# ---------------------------------------------------------------------------
# Presentation helpers (pure transforms, no I/O themselves)
# ---------------------------------------------------------------------------

def _format_location(boat: Boat) -> str:
    """Render the place-specific detail: ``"# 14"``, ``"C"``, a tag, or ``""``."""
    location = boat.location
    if isinstance(location, (SlipLocation, StorageLocation)):
        return f"# {location.number}"
    if isinstance(location, LandLocation):
        return location.bay
    if isinstance(location, TrailerLocation):
        return location.tag
    return ""


def _format_owed(boat: Boat) -> str:
    return f"${boat.amount_owed:.2f}"


def _format_plain_row(boat: Boat) -> str:
    """Single fixed-width line.

    Format: ``"Sea Breeze             28'    slip      # 14       Owes $ 350.00"``
    """
    location = _format_location(boat)
    return (
        f"{boat.name:<20} {boat.length:>4}'    {boat.place.value:<8}"
        f"  {location:<8}"
        f"   Owes ${boat.amount_owed:>7.2f}"
    )


# ---------------------------------------------------------------------------
# Public render function
# ---------------------------------------------------------------------------

def render_inventory(boats: Sequence[Boat]) -> None:
    """Print *boats* in the order given."""
    if not boats:
        console.print("[dim]No boats in inventory.[/dim]")
        return

    rich_classes = _import_rich_table()
    if rich_classes is None:
        for boat in boats:
            print(_format_plain_row(boat))
        return

    table_class, text_class = rich_classes
    table = table_class(
        title="Boat Inventory",
        show_header=True,
        header_style="bold magenta",
        border_style="dim",
    )
    table.add_column("Name", justify="left", min_width=20)
    table.add_column("Length", justify="right", min_width=6)
    table.add_column("Place", justify="left", min_width=8)
    table.add_column("Location", justify="left", min_width=8)
    table.add_column("Owes", justify="right", min_width=10)

    for boat in boats:
        table.add_row(
            text_class(boat.name),
            f"{boat.length}'",
            boat.place.value,
            text_class(_format_location(boat)),
            _format_owed(boat),
        )

    console.print()
    console.print(table)
    console.print()
