"""Custom exception hierarchy for marina-ledger.

Every error that crosses a layer boundary must inherit from
:class:`MarinaLedgerError`.  Raw ``OSError`` and parsing exceptions
must NEVER escape the core or infrastructure layers — they are caught
there and re-raised as a typed subclass defined here.

Hierarchy
---------
MarinaLedgerError
├── InvalidRecordError
├── CapacityExceededError
├── BoatNotFoundError
├── PaymentError
│   ├── InvalidPaymentError
│   └── PaymentExceedsOwedError
├── InventoryIOError
│   └── DataFileError
├── ConfigError
└── DependencyError
"""

from __future__ import annotations

from decimal import Decimal

RECORD_FORMAT_HINT: str = (
    "Enter data in the format: Name,Length,Place,Extra,AmountOwed\n"
    "    e.g. Sea Breeze,28,slip,14,0.00"
)


class MarinaLedgerError(Exception):
    """Base exception for all marina-ledger errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI can render a clean message without
    leaking stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Records ---------------------------------------------------------------

class InvalidRecordError(MarinaLedgerError):
    """Raised when a boat record fails strict parsing or validation."""

    def __init__(self, message: str, *, hint: str | None = RECORD_FORMAT_HINT) -> None:
        super().__init__(message, hint=hint)


# --- Inventory -------------------------------------------------------------

class CapacityExceededError(MarinaLedgerError):
    """Raised when adding a boat to an inventory that is already full."""

    def __init__(self, capacity: int) -> None:
        super().__init__(
            f"Maximum number of boats reached ({capacity}).",
            hint="Remove a boat before adding another one.",
        )
        self.capacity: int = capacity


class BoatNotFoundError(MarinaLedgerError):
    """Raised when no boat matches the requested name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"No boat with that name: {name!r}")
        self.name: str = name


# --- Payments --------------------------------------------------------------

class PaymentError(MarinaLedgerError):
    """Base class for rejected payments."""


class InvalidPaymentError(PaymentError):
    """Raised when a payment amount is negative."""


class PaymentExceedsOwedError(PaymentError):
    """Raised when a payment is larger than the boat's balance."""

    def __init__(self, amount: Decimal, owed: Decimal) -> None:
        super().__init__(
            f"That is more than the amount owed, ${owed:.2f}. Payment rejected.",
        )
        self.amount: Decimal = amount
        self.owed: Decimal = owed
        """Balance at the time of the rejected payment."""


# --- Persistence -----------------------------------------------------------

class InventoryIOError(MarinaLedgerError):
    """Raised when the inventory file cannot be read or written."""


class DataFileError(InventoryIOError):
    """Raised when the data file given at startup cannot be opened."""


# --- Configuration ---------------------------------------------------------

class ConfigError(MarinaLedgerError):
    """Raised when an environment variable or CLI option is invalid."""


class DependencyError(MarinaLedgerError):
    """Raised when an optional runtime dependency is not installed."""
