"""CLI application entry point for marina-ledger.

This module is the **sole error boundary** for the entire application.
It catches :class:`~marina_ledger.exceptions.MarinaLedgerError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No business logic lives here — all work is delegated to the core
  inventory and the infrastructure file adapter.
* This module is the only place that translates between the domain
  world and the OS process exit code.
"""

from __future__ import annotations

import argparse
import sys

from marina_ledger.cli import exit_codes
from marina_ledger.cli.console import console, escape
from marina_ledger.config import Settings
from marina_ledger.exceptions import MarinaLedgerError
from marina_ledger.log import configure_logging, get_logger
from marina_ledger.version import __version__

log = get_logger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    The CLI supports:
    * ``marina-ledger <datafile>`` — open the interactive menu
    * ``marina-ledger --version``
    """
    parser = argparse.ArgumentParser(
        prog="marina-ledger",
        description="Inventory and billing for marina boat storage.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "datafile",
        nargs="?",
        default=None,
        help="Boat data file (name,length,place,extra,amountOwed per line).",
    )
    parser.add_argument(
        "--capacity",
        type=int,
        default=None,
        help="Maximum number of boats (default: $MARINA_LEDGER_CAPACITY or 120).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log more detail to stderr (-v info, -vv debug).",
    )
    return parser


def _resolve_settings(args: argparse.Namespace) -> Settings:
    """Layer CLI options over environment-derived settings."""
    settings = Settings.from_env()
    if args.capacity is not None:
        settings = settings.with_capacity(args.capacity)
    if args.verbose >= 2:
        settings = settings.with_log_level("DEBUG", source="-vv")
    elif args.verbose == 1:
        settings = settings.with_log_level("INFO", source="-v")
    return settings


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_session(datafile: str, settings: Settings) -> int:
    """Load the inventory, run the interactive menu, save on exit.

    Flow:
    1. Confirm the data file can be opened for reading.
    2. Load boats (up to the configured capacity).
    3. Run the menu; the menu saves back to the same file on exit.
    """
    from marina_ledger.cli.menu import run_menu
    from marina_ledger.core.inventory import Inventory
    from marina_ledger.infra.flat_file import FlatFile

    data_file = FlatFile(datafile)
    data_file.ensure_readable()

    inventory = Inventory.load(data_file, capacity=settings.capacity)
    log.debug("session.started", datafile=datafile, capacity=settings.capacity)

    console.print(
        "\n[bold]Welcome to the Boat Management System[/bold]\n"
        "-------------------------------------\n"
        f"[dim]{len(inventory)} boats loaded from {escape(datafile)}[/dim]"
    )
    return run_menu(inventory, data_file)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the marina-ledger CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.datafile is None:
        parser.print_usage(sys.stderr)
        return exit_codes.GENERAL_ERROR

    settings = _resolve_settings(args)
    configure_logging(settings.log_level)

    return _handle_session(args.datafile, settings)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except MarinaLedgerError as exc:
        console.error(exc)
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user. Changes were not saved.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
