"""Shared pytest fixtures and configuration for the marina-ledger test suite.

Guidelines
----------
* Core tests must be pure — persistence goes through in-memory lines.
* File tests use ``tmp_path`` only.
* questionary is always mocked; no test reads from the terminal.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

import pytest

from marina_ledger.exceptions import InventoryIOError
from marina_ledger.log import configure_logging


class MemoryLines:
    """In-memory :class:`LineSource` / :class:`LineSink` for core tests."""

    def __init__(self, lines: Iterable[str] = ()) -> None:
        self.lines: list[str] = list(lines)
        self.writes: int = 0

    def read_lines(self) -> Iterator[str]:
        yield from self.lines

    def write_lines(self, lines: Iterable[str]) -> None:
        self.lines = list(lines)
        self.writes += 1


class BrokenLines:
    """Source and sink that always fail."""

    def read_lines(self) -> Iterator[str]:
        raise InventoryIOError("Error opening file for reading: broken")
        yield  # pragma: no cover

    def write_lines(self, lines: Iterable[str]) -> None:
        raise InventoryIOError("Error opening file for writing: broken")


@pytest.fixture(autouse=True)
def _quiet_logging() -> None:
    """Route structlog through stdlib logging at WARNING for every test."""
    configure_logging("WARNING")


@pytest.fixture
def memory_lines() -> MemoryLines:
    return MemoryLines()
