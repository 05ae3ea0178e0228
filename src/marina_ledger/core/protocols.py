"""Protocols (interfaces) consumed by the core layer.

These define the contracts that storage adapters must satisfy.  The
inventory depends ONLY on these protocols — never on a concrete file
implementation — so it can be loaded from and saved to anything that
yields or accepts lines of text.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Protocol


class LineSource(Protocol):
    """Contract for record sources read at load time."""

    def read_lines(self) -> Iterator[str]:
        """Yield raw record lines in file order.

        Implementations must map backend failures to
        :class:`~marina_ledger.exceptions.InventoryIOError` and release
        any open handle once iteration ends.

        Raises
        ------
        InventoryIOError
            When the source cannot be opened or read.
        """
        ...  # pragma: no cover


class LineSink(Protocol):
    """Contract for record destinations written at save time."""

    def write_lines(self, lines: Iterable[str]) -> None:
        """Replace the destination's content with *lines*.

        Each line is given without a terminator; the sink adds one.

        Raises
        ------
        InventoryIOError
            When the destination cannot be written.
        """
        ...  # pragma: no cover
