"""Flat-file implementation of the inventory line protocols.

:class:`FlatFile` satisfies both
:class:`~marina_ledger.core.protocols.LineSource` and
:class:`~marina_ledger.core.protocols.LineSink` structurally.  Every
``OSError`` is caught here and re-raised as
:class:`~marina_ledger.exceptions.InventoryIOError` — nothing raw
escapes the infrastructure boundary.

Saving writes to a temporary file next to the destination and then
replaces it in one step, so a failed save never leaves a half-written
data file behind.
"""

from __future__ import annotations

import os
import tempfile
from collections.abc import Iterable, Iterator
from pathlib import Path

from marina_ledger.exceptions import DataFileError, InventoryIOError

ENCODING: str = "utf-8"
# Undecodable bytes load as lone surrogates and are written back unchanged.
ERRORS: str = "surrogateescape"


class FlatFile:
    """A newline-delimited record file on disk.

    Usage::

        data = FlatFile("boats.csv")
        inventory = Inventory.load(data)
        ...
        inventory.save(data)
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path: Path = Path(path)

    def __repr__(self) -> str:
        return f"FlatFile({str(self.path)!r})"

    # ------------------------------------------------------------------
    # Startup check
    # ------------------------------------------------------------------

    def ensure_readable(self) -> None:
        """Open and close the file to prove it can be read.

        Raises
        ------
        DataFileError
            When the file is missing or cannot be opened for reading.
        """
        try:
            with self.path.open("r", encoding=ENCODING):
                pass
        except OSError as exc:
            raise DataFileError(
                f"Unable to open file '{self.path}'.",
                hint="Please ensure the file exists and try again.",
            ) from exc

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def read_lines(self) -> Iterator[str]:
        """Yield each line of the file without its terminator."""
        try:
            with self.path.open("r", encoding=ENCODING, errors=ERRORS, newline="") as handle:
                for line in handle:
                    yield line.rstrip("\r\n")
        except OSError as exc:
            raise InventoryIOError(
                f"Error opening file for reading: {self.path}",
            ) from exc

    def write_lines(self, lines: Iterable[str]) -> None:
        """Atomically replace the file with *lines*, one per row."""
        directory = self.path.parent
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                dir=directory,
            )
        except OSError as exc:
            raise InventoryIOError(
                f"Error opening file for writing: {self.path}",
                hint=f"Check that {directory} exists and is writable.",
            ) from exc

        tmp_path = Path(tmp_name)
        try:
            with os.fdopen(fd, "w", encoding=ENCODING, errors=ERRORS, newline="\n") as handle:
                for line in lines:
                    handle.write(f"{line}\n")
            os.replace(tmp_path, self.path)
        except OSError as exc:
            tmp_path.unlink(missing_ok=True)
            raise InventoryIOError(
                f"Error writing file: {self.path}",
            ) from exc
