"""Core / service layer — record model, codec, billing, and the inventory.

Rules
-----
* No ``print()`` calls.
* No filesystem I/O — persistence goes through ``protocols``.
* No imports from ``cli`` or ``infra``.
"""

from marina_ledger.core.billing import MONTHLY_RATES, monthly_charge
from marina_ledger.core.codec import decode_line, encode_boat, parse_boat_csv
from marina_ledger.core.inventory import DEFAULT_CAPACITY, Inventory
from marina_ledger.core.models import (
    Boat,
    LandLocation,
    Location,
    NoLocation,
    PlaceKind,
    SlipLocation,
    StorageLocation,
    TrailerLocation,
)
from marina_ledger.core.protocols import LineSink, LineSource

__all__: list[str] = [
    "DEFAULT_CAPACITY",
    "MONTHLY_RATES",
    "Boat",
    "Inventory",
    "LandLocation",
    "LineSink",
    "LineSource",
    "Location",
    "NoLocation",
    "PlaceKind",
    "SlipLocation",
    "StorageLocation",
    "TrailerLocation",
    "decode_line",
    "encode_boat",
    "monthly_charge",
    "parse_boat_csv",
]
