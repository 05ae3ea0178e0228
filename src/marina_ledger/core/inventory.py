"""The boat inventory — an ordered, capacity-bounded collection.

:class:`Inventory` is the object the CLI owns for the lifetime of a
session.  It exposes every mutating operation (add, remove, pay, monthly
charge, sort) and knows how to load itself from a
:class:`~marina_ledger.core.protocols.LineSource` and save itself to a
:class:`~marina_ledger.core.protocols.LineSink` through the line codec.

Guarantees
----------
* No ``print()``, no direct filesystem access.
* Only :class:`~marina_ledger.exceptions.MarinaLedgerError` subclasses
  escape.
* Lookups by name are case-insensitive and always pick the first match.
"""

from __future__ import annotations

from collections.abc import Iterator
from decimal import Decimal

from marina_ledger.core.billing import apply_monthly_charge
from marina_ledger.core.codec import decode_line, encode_boat, parse_boat_csv
from marina_ledger.core.models import Boat
from marina_ledger.core.protocols import LineSink, LineSource
from marina_ledger.exceptions import (
    BoatNotFoundError,
    CapacityExceededError,
    InvalidPaymentError,
    InventoryIOError,
    PaymentExceedsOwedError,
)
from marina_ledger.log import get_logger
from marina_ledger.utils.money import ZERO, to_money

DEFAULT_CAPACITY: int = 120

log = get_logger(__name__)


class Inventory:
    """Ordered collection of :class:`Boat` entries.

    Parameters
    ----------
    capacity:
        Maximum number of boats the inventory accepts.
    """

    def __init__(self, *, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self._capacity: int = capacity
        self._boats: list[Boat] = []

    # ------------------------------------------------------------------
    # Collection protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._boats)

    def __iter__(self) -> Iterator[Boat]:
        return iter(self._boats)

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def boats(self) -> tuple[Boat, ...]:
        """Snapshot of the boats in current order."""
        return tuple(self._boats)

    @property
    def is_full(self) -> bool:
        return len(self._boats) >= self._capacity

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    @classmethod
    def load(cls, source: LineSource, *, capacity: int = DEFAULT_CAPACITY) -> Inventory:
        """Build an inventory from *source*, best effort.

        Blank lines are skipped.  Lines beyond *capacity* are ignored.
        A source that cannot be read yields an empty inventory.
        """
        inventory = cls(capacity=capacity)
        ignored = 0
        try:
            for line in source.read_lines():
                if not line.strip():
                    continue
                if inventory.is_full:
                    ignored += 1
                    continue
                inventory._boats.append(decode_line(line))
        except InventoryIOError as exc:
            log.warning("inventory.load_failed", error=str(exc))
            return cls(capacity=capacity)

        if ignored:
            log.warning(
                "inventory.capacity_reached",
                capacity=capacity,
                ignored_lines=ignored,
            )
        log.info("inventory.loaded", boats=len(inventory))
        return inventory

    def save(self, sink: LineSink) -> None:
        """Write every boat to *sink*, one line each, in current order.

        Raises
        ------
        InventoryIOError
            When the sink cannot be written.  In-memory state is unchanged.
        """
        sink.write_lines(encode_boat(boat) for boat in self._boats)
        log.info("inventory.saved", boats=len(self._boats))

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find(self, name: str) -> Boat | None:
        """Return the first boat named *name* (any case), or ``None``."""
        return next((boat for boat in self._boats if boat.matches(name)), None)

    def _require(self, name: str) -> Boat:
        boat = self.find(name)
        if boat is None:
            raise BoatNotFoundError(name)
        return boat

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def add(self, boat: Boat) -> Boat:
        """Append *boat* at the end of the inventory.

        Raises
        ------
        CapacityExceededError
            When the inventory already holds :attr:`capacity` boats.
        """
        if self.is_full:
            raise CapacityExceededError(self._capacity)
        self._boats.append(boat)
        log.info("boat.added", name=boat.name, place=boat.place.value)
        return boat

    def add_from_csv(self, text: str) -> Boat:
        """Parse a user-entered record and append it.

        Raises
        ------
        CapacityExceededError
            When the inventory is full (checked before parsing).
        InvalidRecordError
            When *text* is not a complete, valid record.
        """
        if self.is_full:
            raise CapacityExceededError(self._capacity)
        return self.add(parse_boat_csv(text))

    def remove(self, name: str) -> Boat:
        """Remove and return the first boat named *name* (any case).

        Raises
        ------
        BoatNotFoundError
            When no boat matches.  The inventory is left unchanged.
        """
        index = next((i for i, boat in enumerate(self._boats) if boat.matches(name)), None)
        if index is None:
            raise BoatNotFoundError(name)
        boat = self._boats.pop(index)
        log.info("boat.removed", name=boat.name)
        return boat

    def pay(self, name: str, amount: Decimal) -> Boat:
        """Apply a payment of *amount* to the first boat named *name*.

        Raises
        ------
        BoatNotFoundError
            When no boat matches.
        InvalidPaymentError
            When *amount* is negative.  A zero payment changes nothing.
        PaymentExceedsOwedError
            When *amount* is larger than the balance.  Nothing changes.
        """
        boat = self._require(name)
        amount = to_money(amount)
        if amount < ZERO:
            raise InvalidPaymentError(
                f"Payment cannot be negative, got ${amount:.2f}.",
            )
        if amount > boat.amount_owed:
            raise PaymentExceedsOwedError(amount, boat.amount_owed)
        boat.amount_owed -= amount
        log.info("boat.paid", name=boat.name, amount=str(amount), owed=str(boat.amount_owed))
        return boat

    def apply_monthly_charges(self) -> Decimal:
        """Charge every boat one month of storage; return the total added."""
        total = apply_monthly_charge(self._boats)
        log.info("inventory.charged", boats=len(self._boats), total=str(total))
        return total

    def sort_by_name(self) -> None:
        """Sort boats by name, ignoring case.  Ties keep their order."""
        self._boats.sort(key=lambda boat: boat.name.lower())
