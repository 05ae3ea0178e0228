"""Tests for the inventory store (core/inventory.py).

Persistence goes through the in-memory ``MemoryLines`` helper; file
behaviour is covered in ``test_flat_file.py``.

Coverage:
* load — tolerant decoding, blank lines, capacity cut-off, read failure.
* save — order, failure leaves state intact.
* add / add_from_csv — capacity and validation.
* remove — first case-insensitive match only.
* pay — exact, partial, over, zero, negative, missing.
* apply_monthly_charges — repeated application.
* sort_by_name — case-insensitive and stable.
"""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from conftest import BrokenLines, MemoryLines
from marina_ledger.core.inventory import DEFAULT_CAPACITY, Inventory
from marina_ledger.core.models import Boat, LandLocation, SlipLocation
from marina_ledger.exceptions import (
    BoatNotFoundError,
    CapacityExceededError,
    InvalidPaymentError,
    InvalidRecordError,
    InventoryIOError,
    PaymentExceedsOwedError,
)


def _boat(name: str = "Sea Breeze", **overrides: object) -> Boat:
    defaults: dict[str, object] = {
        "name": name,
        "length": 28,
        "location": SlipLocation(number=14),
        "amount_owed": Decimal("0.00"),
    }
    defaults.update(overrides)
    return Boat(**defaults)  # type: ignore[arg-type]


def _inventory(*names: str, capacity: int = DEFAULT_CAPACITY) -> Inventory:
    inventory = Inventory(capacity=capacity)
    for name in names:
        inventory.add(_boat(name))
    return inventory


def _names(inventory: Inventory) -> list[str]:
    return [boat.name for boat in inventory]


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    def test_empty(self) -> None:
        inventory = Inventory()
        assert len(inventory) == 0
        assert inventory.capacity == 120
        assert not inventory.is_full

    def test_rejects_non_positive_capacity(self) -> None:
        with pytest.raises(ValueError):
            Inventory(capacity=0)

    def test_boats_is_a_snapshot(self) -> None:
        inventory = _inventory("A", "B")
        snapshot = inventory.boats
        inventory.remove("A")
        assert [boat.name for boat in snapshot] == ["A", "B"]


# ---------------------------------------------------------------------------
# Load / save
# ---------------------------------------------------------------------------

class TestLoad:
    def test_loads_in_order(self) -> None:
        source = MemoryLines(["Zeta,10,slip,1,0.00", "alpha,20,land,B,5.00"])
        inventory = Inventory.load(source)
        assert _names(inventory) == ["Zeta", "alpha"]
        assert inventory.boats[1].location == LandLocation(bay="B")

    def test_skips_blank_lines(self) -> None:
        source = MemoryLines(["A,10,slip,1,0.00", "", "   ", "B,10,slip,2,0.00"])
        assert _names(Inventory.load(source)) == ["A", "B"]

    def test_tolerates_malformed_rows(self) -> None:
        inventory = Inventory.load(MemoryLines(["Junk,abc,dock,?,xyz"]))
        assert len(inventory) == 1
        assert inventory.boats[0].length == 0

    def test_stops_at_capacity(self) -> None:
        lines = [f"Boat{i:03d},20,slip,{i},0.00" for i in range(130)]
        inventory = Inventory.load(MemoryLines(lines))
        assert len(inventory) == 120
        assert inventory.boats[-1].name == "Boat119"
        assert inventory.is_full

    def test_custom_capacity(self) -> None:
        lines = [f"Boat{i},20,slip,{i},0.00" for i in range(5)]
        assert len(Inventory.load(MemoryLines(lines), capacity=3)) == 3

    def test_capacity_warning_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        caplog.set_level(logging.WARNING)
        lines = [f"Boat{i},20,slip,{i},0.00" for i in range(4)]
        Inventory.load(MemoryLines(lines), capacity=2)
        assert "inventory.capacity_reached" in caplog.text

    def test_unreadable_source_gives_empty_inventory(self) -> None:
        inventory = Inventory.load(BrokenLines(), capacity=7)
        assert len(inventory) == 0
        assert inventory.capacity == 7


class TestSave:
    def test_writes_current_order(self, memory_lines: MemoryLines) -> None:
        inventory = _inventory("Zeta", "alpha")
        inventory.save(memory_lines)
        assert memory_lines.lines == [
            "Zeta,28,slip,14,0.00",
            "alpha,28,slip,14,0.00",
        ]

    def test_save_then_load_round_trip(self, memory_lines: MemoryLines) -> None:
        inventory = _inventory("Zeta", "alpha", "Beta")
        inventory.boats[1].amount_owed = Decimal("12.34")
        inventory.save(memory_lines)
        reloaded = Inventory.load(memory_lines)
        assert reloaded.boats == inventory.boats

    def test_failure_propagates_and_keeps_state(self) -> None:
        inventory = _inventory("A", "B")
        with pytest.raises(InventoryIOError):
            inventory.save(BrokenLines())
        assert _names(inventory) == ["A", "B"]


# ---------------------------------------------------------------------------
# Add
# ---------------------------------------------------------------------------

class TestAdd:
    def test_appends(self) -> None:
        inventory = _inventory("B", "A")
        inventory.add(_boat("C"))
        assert _names(inventory) == ["B", "A", "C"]

    def test_add_after_sort_appends_at_tail(self) -> None:
        inventory = _inventory("B", "A")
        inventory.sort_by_name()
        inventory.add(_boat("Aardvark"))
        assert _names(inventory) == ["A", "B", "Aardvark"]

    def test_duplicates_allowed(self) -> None:
        inventory = _inventory("A", "a")
        assert len(inventory) == 2

    def test_full_raises(self) -> None:
        inventory = _inventory("A", "B", capacity=2)
        with pytest.raises(CapacityExceededError) as exc_info:
            inventory.add(_boat("C"))
        assert exc_info.value.capacity == 2
        assert len(inventory) == 2

    def test_from_csv(self) -> None:
        inventory = Inventory()
        boat = inventory.add_from_csv("Big Blue,40,land,C,120.50")
        assert inventory.boats == (boat,)
        assert boat.amount_owed == Decimal("120.50")

    @pytest.mark.parametrize(
        "record",
        [
            ",40,land,C,0",
            "Big Blue,0,land,C,0",
            "Big Blue,40,land,C,-1",
            "Big Blue,40,land,CC,0",
            "Big Blue,40,dock,C,0",
        ],
    )
    def test_from_csv_rejects_invalid(self, record: str) -> None:
        inventory = _inventory("A")
        with pytest.raises(InvalidRecordError):
            inventory.add_from_csv(record)
        assert _names(inventory) == ["A"]

    def test_from_csv_full_raises_before_parsing(self) -> None:
        inventory = _inventory(*[f"B{i}" for i in range(120)])
        with pytest.raises(CapacityExceededError):
            inventory.add_from_csv("not even a record")


# ---------------------------------------------------------------------------
# Remove
# ---------------------------------------------------------------------------

class TestRemove:
    def test_removes_case_insensitively(self) -> None:
        inventory = _inventory("Alpha", "Beta", "Gamma")
        removed = inventory.remove("bETA")
        assert removed.name == "Beta"
        assert _names(inventory) == ["Alpha", "Gamma"]

    def test_removes_first_match_only(self) -> None:
        inventory = Inventory()
        inventory.add(_boat("Twin", length=10))
        inventory.add(_boat("Other"))
        inventory.add(_boat("TWIN", length=20))
        removed = inventory.remove("twin")
        assert removed.length == 10
        assert _names(inventory) == ["Other", "TWIN"]

    def test_missing_raises_and_keeps_inventory(self) -> None:
        inventory = _inventory("Alpha", "Beta")
        with pytest.raises(BoatNotFoundError) as exc_info:
            inventory.remove("Delta")
        assert exc_info.value.name == "Delta"
        assert _names(inventory) == ["Alpha", "Beta"]


# ---------------------------------------------------------------------------
# Find
# ---------------------------------------------------------------------------

class TestFind:
    def test_first_match(self) -> None:
        inventory = Inventory()
        first = inventory.add(_boat("Twin", length=10))
        inventory.add(_boat("twin", length=20))
        assert inventory.find("TWIN") is first

    def test_missing(self) -> None:
        assert _inventory("A").find("B") is None


# ---------------------------------------------------------------------------
# Pay
# ---------------------------------------------------------------------------

class TestPay:
    def _owing(self, owed: str) -> Inventory:
        inventory = Inventory()
        inventory.add(_boat("Sea Breeze", amount_owed=Decimal(owed)))
        return inventory

    def test_exact_amount_clears_balance(self) -> None:
        inventory = self._owing("350.00")
        boat = inventory.pay("sea breeze", Decimal("350.00"))
        assert boat.amount_owed == Decimal("0.00")

    def test_partial_payment(self) -> None:
        inventory = self._owing("350.00")
        inventory.pay("Sea Breeze", Decimal("100.25"))
        assert inventory.boats[0].amount_owed == Decimal("249.75")

    def test_over_payment_rejected_without_change(self) -> None:
        inventory = self._owing("50.00")
        with pytest.raises(PaymentExceedsOwedError) as exc_info:
            inventory.pay("Sea Breeze", Decimal("50.01"))
        assert exc_info.value.owed == Decimal("50.00")
        assert "$50.00" in str(exc_info.value)
        assert inventory.boats[0].amount_owed == Decimal("50.00")

    @pytest.mark.parametrize("amount", ["-0.01", "-5.00"])
    def test_negative_rejected(self, amount: str) -> None:
        inventory = self._owing("50.00")
        with pytest.raises(InvalidPaymentError):
            inventory.pay("Sea Breeze", Decimal(amount))
        assert inventory.boats[0].amount_owed == Decimal("50.00")

    @pytest.mark.parametrize("owed", ["50.00", "0.00"])
    def test_zero_payment_is_a_no_op(self, owed: str) -> None:
        inventory = self._owing(owed)
        boat = inventory.pay("Sea Breeze", Decimal("0"))
        assert boat.amount_owed == Decimal(owed)

    def test_missing_boat(self) -> None:
        with pytest.raises(BoatNotFoundError):
            self._owing("50.00").pay("Nobody", Decimal("1"))

    def test_pays_first_match(self) -> None:
        inventory = Inventory()
        inventory.add(_boat("Twin", amount_owed=Decimal("10.00")))
        inventory.add(_boat("twin", amount_owed=Decimal("20.00")))
        inventory.pay("TWIN", Decimal("5.00"))
        assert [b.amount_owed for b in inventory] == [Decimal("5.00"), Decimal("20.00")]


# ---------------------------------------------------------------------------
# Monthly charges
# ---------------------------------------------------------------------------

class TestMonthlyCharges:
    def test_slip_30_feet(self) -> None:
        inventory = Inventory()
        boat = inventory.add(_boat(length=30))
        total = inventory.apply_monthly_charges()
        assert boat.amount_owed == Decimal("375.00")
        assert total == Decimal("375.00")

    def test_charges_again_each_call(self) -> None:
        inventory = Inventory()
        boat = inventory.add(_boat(length=30))
        inventory.apply_monthly_charges()
        inventory.apply_monthly_charges()
        assert boat.amount_owed == Decimal("750.00")


# ---------------------------------------------------------------------------
# Sort
# ---------------------------------------------------------------------------

class TestSortByName:
    def test_case_insensitive(self) -> None:
        inventory = _inventory("Zeta", "alpha", "Beta")
        inventory.sort_by_name()
        assert _names(inventory) == ["alpha", "Beta", "Zeta"]

    def test_stable_for_equal_names(self) -> None:
        inventory = Inventory()
        inventory.add(_boat("Twin", length=1))
        inventory.add(_boat("Alpha"))
        inventory.add(_boat("TWIN", length=2))
        inventory.add(_boat("twin", length=3))
        inventory.sort_by_name()
        assert [(b.name, b.length) for b in inventory] == [
            ("Alpha", 28),
            ("Twin", 1),
            ("TWIN", 2),
            ("twin", 3),
        ]
