"""Interactive menu loop.

This module is responsible for:

* Prompting for the next action via a questionary selector with
  single-letter shortcuts.
* Collecting the text each action needs (a record, a name, an amount).
* Reporting results and domain errors, then returning to the menu.

All work is delegated to :class:`~marina_ledger.core.inventory.Inventory`;
no business rules live here.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from marina_ledger.cli import exit_codes
from marina_ledger.cli.console import console, escape
from marina_ledger.cli.inventory_table import render_inventory
from marina_ledger.core.inventory import Inventory
from marina_ledger.core.protocols import LineSink
from marina_ledger.exceptions import (
    BoatNotFoundError,
    DependencyError,
    InventoryIOError,
    MarinaLedgerError,
)
from marina_ledger.utils.money import parse_money_strict

INVENTORY = "i"
ADD = "a"
REMOVE = "r"
PAYMENT = "p"
MONTH = "m"
EXIT = "x"

MENU_CHOICES: tuple[tuple[str, str], ...] = (
    (INVENTORY, "(I)nventory"),
    (ADD, "(A)dd"),
    (REMOVE, "(R)emove"),
    (PAYMENT, "(P)ayment"),
    (MONTH, "(M)onth"),
    (EXIT, "e(X)it"),
)


def _import_questionary() -> Any:
    """Import questionary lazily for interactive prompts."""
    try:
        import questionary
    except ModuleNotFoundError as exc:
        raise DependencyError(
            "questionary is not installed. Install with: pip install questionary",
        ) from exc
    return questionary


# ---------------------------------------------------------------------------
# Prompts
# ---------------------------------------------------------------------------

def _validate_amount(text: str) -> bool | str:
    """questionary validator: ``True`` or an error message."""
    if parse_money_strict(text) is None:
        return "Enter an amount such as 125.50"
    return True


def _ask_action(questionary: Any) -> str:
    choices = [
        questionary.Choice(title=label, value=key, shortcut_key=key)
        for key, label in MENU_CHOICES
    ]
    action: str | None = questionary.select(
        "Choose an action:",
        choices=choices,
        use_shortcuts=True,
    ).ask()  # Returns None on Ctrl+C
    if action is None:
        raise KeyboardInterrupt
    return action


def _ask_text(questionary: Any, message: str) -> str | None:
    """Prompt for free text; ``None`` when cancelled or left blank."""
    answer: str | None = questionary.text(message).ask()
    if answer is None or not answer.strip():
        return None
    return answer.strip()


# ---------------------------------------------------------------------------
# Actions
# ---------------------------------------------------------------------------

def _show_inventory(inventory: Inventory, questionary: Any) -> None:
    inventory.sort_by_name()
    render_inventory(inventory.boats)


def _add_boat(inventory: Inventory, questionary: Any) -> None:
    record = _ask_text(questionary, "Enter boat data (CSV):")
    if record is None:
        return
    boat = inventory.add_from_csv(record)
    console.print(f"[green]Added[/green] {escape(boat.name)}.")


def _remove_boat(inventory: Inventory, questionary: Any) -> None:
    name = _ask_text(questionary, "Enter boat name to remove:")
    if name is None:
        return
    boat = inventory.remove(name)
    console.print(f"[green]Removed[/green] {escape(boat.name)}.")


def _take_payment(inventory: Inventory, questionary: Any) -> None:
    name = _ask_text(questionary, "Enter boat name for payment:")
    if name is None:
        return
    if inventory.find(name) is None:
        raise BoatNotFoundError(name)
    answer: str | None = questionary.text(
        "Enter payment amount:",
        validate=_validate_amount,
    ).ask()
    if answer is None:
        return
    amount = parse_money_strict(answer)
    if amount is None:
        return
    inventory.pay(name, amount)
    console.print(f"[green]Payment of ${amount:.2f} accepted.[/green]")


def _charge_month(inventory: Inventory, questionary: Any) -> None:
    total = inventory.apply_monthly_charges()
    console.print(f"Monthly charges applied. [dim](total ${total:.2f})[/dim]")


ACTIONS: dict[str, Callable[[Inventory, Any], None]] = {
    INVENTORY: _show_inventory,
    ADD: _add_boat,
    REMOVE: _remove_boat,
    PAYMENT: _take_payment,
    MONTH: _charge_month,
}


# ---------------------------------------------------------------------------
# Public loop
# ---------------------------------------------------------------------------

def run_menu(inventory: Inventory, data_file: LineSink) -> int:
    """Run the menu until the user exits and *inventory* is saved.

    Domain errors raised by an action are reported and the loop
    continues.  Saving happens only on an explicit exit; if the save
    fails the error is reported and the menu is shown again so the user
    can retry or abort with Ctrl+C.

    Returns
    -------
    int
        :data:`exit_codes.SUCCESS` after a successful save.

    Raises
    ------
    KeyboardInterrupt
        If the user presses Ctrl+C at the menu.  Nothing is saved.
    """
    questionary = _import_questionary()

    while True:
        action = _ask_action(questionary)
        if action == EXIT:
            try:
                inventory.save(data_file)
            except InventoryIOError as exc:
                console.error(exc)
                continue
            console.print("Exiting the Boat Management System...")
            return exit_codes.SUCCESS
        try:
            ACTIONS[action](inventory, questionary)
        except MarinaLedgerError as exc:
            console.error(exc)
