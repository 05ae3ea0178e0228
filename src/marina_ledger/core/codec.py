"""Line codec for boat records.

One boat is one line of five comma-separated fields::

    name,length,place,extra,amountOwed

Two decoders share the same field layout:

* :func:`decode_line` is **tolerant** — used when loading the data
  file.  It never rejects a row; unreadable numbers become zero and an
  unknown place becomes :attr:`PlaceKind.UNKNOWN`.
* :func:`parse_boat_csv` is **strict** — used for interactive adds.
  Every field must be present and well-formed or
  :class:`~marina_ledger.exceptions.InvalidRecordError` is raised.

Every function in this module is pure: no I/O, no logging.
"""

from __future__ import annotations

import re

from marina_ledger.core.models import (
    MAX_NAME_LENGTH,
    MAX_TRAILER_TAG_LENGTH,
    Boat,
    LandLocation,
    Location,
    NoLocation,
    PlaceKind,
    SlipLocation,
    StorageLocation,
    TrailerLocation,
)
from marina_ledger.exceptions import InvalidRecordError
from marina_ledger.utils.money import (
    ZERO,
    format_money,
    parse_money_lenient,
    parse_money_strict,
)

FIELD_COUNT: int = 5
SEPARATOR: str = ","

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_STRICT_INT = re.compile(r"[+-]?\d+")


# ---------------------------------------------------------------------------
# Field helpers
# ---------------------------------------------------------------------------

def _split_fields(line: str) -> list[str]:
    """Split on the first four separators; the remainder is the amount."""
    return line.rstrip("\r\n").split(SEPARATOR, FIELD_COUNT - 1)


def _leading_int(text: str) -> int:
    """Read the leading integer of *text* like ``atoi``; junk yields ``0``."""
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _strict_int(text: str) -> int | None:
    stripped = text.strip()
    return int(stripped) if _STRICT_INT.fullmatch(stripped) else None


def _lenient_location(place: PlaceKind, extra: str) -> Location:
    if place is PlaceKind.SLIP:
        return SlipLocation(number=_leading_int(extra))
    if place is PlaceKind.LAND:
        return LandLocation(bay=extra.strip()[:1])
    if place is PlaceKind.TRAILER:
        return TrailerLocation(tag=extra.strip()[:MAX_TRAILER_TAG_LENGTH])
    if place is PlaceKind.STORAGE:
        return StorageLocation(number=_leading_int(extra))
    return NoLocation()


def _strict_location(place: PlaceKind, extra: str) -> Location:
    if place is PlaceKind.LAND:
        if len(extra) != 1 or not extra.isalpha():
            raise InvalidRecordError(
                f"Invalid bay letter for 'land': {extra!r}",
                hint="A land bay is a single letter, e.g. C.",
            )
        return LandLocation(bay=extra)
    if place is PlaceKind.TRAILER:
        return TrailerLocation(tag=extra[:MAX_TRAILER_TAG_LENGTH])
    if place in (PlaceKind.SLIP, PlaceKind.STORAGE):
        number = _strict_int(extra)
        if number is None:
            raise InvalidRecordError(
                f"Invalid {place.value} number: {extra!r}",
                hint=f"A {place.value} location is a whole number, e.g. 14.",
            )
        if place is PlaceKind.SLIP:
            return SlipLocation(number=number)
        return StorageLocation(number=number)
    raise InvalidRecordError(
        "Invalid place type.",
        hint="Place must be one of: slip, land, trailor, storage.",
    )


def _extra_text(boat: Boat) -> str:
    location = boat.location
    if isinstance(location, (SlipLocation, StorageLocation)):
        return str(location.number)
    if isinstance(location, LandLocation):
        return location.bay
    if isinstance(location, TrailerLocation):
        return location.tag
    return ""


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def decode_line(line: str) -> Boat:
    """Decode one data-file line, best effort.

    Missing trailing fields are treated as empty.  The name is kept
    verbatim (minus the line terminator) and truncated to
    :data:`MAX_NAME_LENGTH` characters.
    """
    fields = _split_fields(line)
    fields.extend([""] * (FIELD_COUNT - len(fields)))
    name, length, place_text, extra, amount = fields

    place = PlaceKind.parse(place_text)
    return Boat(
        name=name[:MAX_NAME_LENGTH],
        length=_leading_int(length),
        location=_lenient_location(place, extra),
        amount_owed=parse_money_lenient(amount),
    )


def parse_boat_csv(text: str) -> Boat:
    """Parse and validate a user-entered record.

    Raises
    ------
    InvalidRecordError
        When a field is missing or empty, the length is not a positive
        integer, the amount is not a non-negative number, the place is
        not recognised, or the location detail does not suit the place.
    """
    fields = [field.strip() for field in _split_fields(text)]
    if len(fields) < FIELD_COUNT or not all(fields):
        raise InvalidRecordError("Invalid input format.")
    name, length_text, place_text, extra, amount_text = fields

    length = _strict_int(length_text)
    if length is None or length <= 0:
        raise InvalidRecordError(f"Length must be a positive whole number of feet: {length_text!r}")

    amount = parse_money_strict(amount_text)
    if amount is None or amount < ZERO:
        raise InvalidRecordError(f"Amount owed must be a non-negative number: {amount_text!r}")

    place = PlaceKind.parse(place_text)
    return Boat(
        name=name[:MAX_NAME_LENGTH],
        length=length,
        location=_strict_location(place, extra),
        amount_owed=amount,
    )


def encode_boat(boat: Boat) -> str:
    """Encode *boat* as one data-file line, without the trailing newline."""
    return SEPARATOR.join(
        (
            boat.name,
            str(boat.length),
            boat.place.value,
            _extra_text(boat),
            format_money(boat.amount_owed),
        )
    )
