"""Monthly storage charges.

Rates are fixed per foot of boat length and depend only on the kind of
place the boat occupies.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from decimal import Decimal
from types import MappingProxyType

from marina_ledger.core.models import Boat, PlaceKind
from marina_ledger.utils.money import ZERO, to_money

MONTHLY_RATES: Mapping[PlaceKind, Decimal] = MappingProxyType(
    {
        PlaceKind.SLIP: Decimal("12.50"),
        PlaceKind.LAND: Decimal("14.00"),
        PlaceKind.TRAILER: Decimal("25.00"),
        PlaceKind.STORAGE: Decimal("11.20"),
        PlaceKind.UNKNOWN: ZERO,
    }
)
"""Per-foot monthly rate for each place kind."""


def monthly_charge(boat: Boat) -> Decimal:
    """Return one month's charge for *boat* (``length × rate``)."""
    return to_money(boat.length * MONTHLY_RATES[boat.place])


def apply_monthly_charge(boats: Iterable[Boat]) -> Decimal:
    """Add one month's charge to every boat in place; return the total."""
    total = ZERO
    for boat in boats:
        charge = monthly_charge(boat)
        boat.amount_owed += charge
        total += charge
    return total
