"""Domain models for marina-ledger.

Location details are **frozen** dataclasses — one per kind of place a
boat can occupy.  Together they form a tagged union: every variant
carries its :class:`PlaceKind` as a class attribute, and a
:class:`Boat` derives its ``place`` from its location, so a boat whose
place and location disagree cannot be built.

:class:`Boat` itself is mutable: payments and monthly charges update
its balance in place.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar, Union

MAX_NAME_LENGTH: int = 127
MAX_TRAILER_TAG_LENGTH: int = 15


# ---------------------------------------------------------------------------
# Place kinds
# ---------------------------------------------------------------------------

class PlaceKind(enum.Enum):
    """Category of storage a boat occupies.

    Member values are the literals written to the data file.
    ``trailor`` is the historical spelling and is kept so existing files
    stay readable.
    """

    SLIP = "slip"
    LAND = "land"
    TRAILER = "trailor"
    STORAGE = "storage"
    UNKNOWN = "no_place"

    @classmethod
    def parse(cls, text: str) -> PlaceKind:
        """Case-insensitive lookup; unrecognised text yields ``UNKNOWN``."""
        wanted = text.strip().lower()
        for member in cls:
            if member is not cls.UNKNOWN and member.value == wanted:
                return member
        return cls.UNKNOWN


# ---------------------------------------------------------------------------
# Location variants
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class SlipLocation:
    """A numbered slip on the docks."""

    kind: ClassVar[PlaceKind] = PlaceKind.SLIP

    number: int


@dataclass(frozen=True, slots=True)
class LandLocation:
    """A lettered bay in the land yard."""

    kind: ClassVar[PlaceKind] = PlaceKind.LAND

    bay: str
    """Single bay letter (may be empty for records loaded from a damaged file)."""


@dataclass(frozen=True, slots=True)
class TrailerLocation:
    """A trailer identified by its licence tag."""

    kind: ClassVar[PlaceKind] = PlaceKind.TRAILER

    tag: str
    """Trailer tag, at most :data:`MAX_TRAILER_TAG_LENGTH` characters."""


@dataclass(frozen=True, slots=True)
class StorageLocation:
    """A numbered indoor storage unit."""

    kind: ClassVar[PlaceKind] = PlaceKind.STORAGE

    number: int


@dataclass(frozen=True, slots=True)
class NoLocation:
    """Placeholder for records whose place could not be recognised."""

    kind: ClassVar[PlaceKind] = PlaceKind.UNKNOWN


Location = Union[SlipLocation, LandLocation, TrailerLocation, StorageLocation, NoLocation]


# ---------------------------------------------------------------------------
# Boat
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Boat:
    """One inventory entry."""

    name: str
    """Display name; matched case-insensitively by lookups."""

    length: int
    """Length in whole feet."""

    location: Location
    """Where the boat is kept.  Determines :attr:`place`."""

    amount_owed: Decimal
    """Outstanding balance, held at two decimal places."""

    @property
    def place(self) -> PlaceKind:
        return self.location.kind

    def matches(self, name: str) -> bool:
        """Return ``True`` when *name* equals this boat's name, ignoring case."""
        return self.name.lower() == name.lower()
