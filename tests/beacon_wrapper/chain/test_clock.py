"""Tests for the SlotClock time-to-slot converter."""

import pytest

from beacon_wrapper.chain import SECONDS_PER_SLOT, Slot, SlotClock
from beacon_wrapper.exceptions import InvalidSlotError
from beacon_wrapper.types import Uint64

GENESIS = Uint64(1600000000)


def clock_at(seconds_after_genesis: int) -> SlotClock:
    """A clock frozen at the given offset from genesis."""
    return SlotClock(
        genesis_time=GENESIS,
        time_fn=lambda: float(int(GENESIS) + seconds_after_genesis),
    )


class TestCurrentSlot:
    """Tests for current_slot()."""

    def test_at_genesis(self) -> None:
        """Slot is 0 at exactly genesis time."""
        assert clock_at(0).current_slot() == Slot(0)

    def test_before_genesis(self) -> None:
        """Slot is 0 before genesis."""
        assert clock_at(-100).current_slot() == Slot(0)

    def test_progression(self) -> None:
        """Slot increments every SECONDS_PER_SLOT seconds."""
        for expected_slot in range(5):
            clock = clock_at(expected_slot * int(SECONDS_PER_SLOT))
            assert clock.current_slot() == Slot(expected_slot)

    def test_truncates_within_slot(self) -> None:
        """The last second of a slot still belongs to it."""
        assert clock_at(2 * int(SECONDS_PER_SLOT) - 1).current_slot() == Slot(1)

    def test_truncates_fractional_time(self) -> None:
        """Sub-second wall-clock time is dropped."""
        clock = SlotClock(genesis_time=GENESIS, time_fn=lambda: float(GENESIS) + 11.999)
        assert clock.current_slot() == Slot(0)

    def test_returns_slot_type(self) -> None:
        """current_slot() returns a Slot."""
        assert isinstance(clock_at(1200).current_slot(), Slot)


class TestSlotAge:
    """Tests for slot_age()."""

    def test_age_is_distance_to_current_slot(self) -> None:
        """100 slots elapsed: slot 0 is 100 old, slot 10 is 90 old."""
        clock = clock_at(1200)
        assert clock.slot_age(Slot(0)) == Uint64(100)
        assert clock.slot_age(Slot(10)) == Uint64(90)

    def test_current_slot_has_age_zero(self) -> None:
        """The current slot is not in the future."""
        assert clock_at(1200).slot_age(Slot(100)) == Uint64(0)

    def test_future_slot_raises(self) -> None:
        """A slot after the current one is invalid."""
        with pytest.raises(InvalidSlotError) as exc_info:
            clock_at(1200).slot_age(Slot(101))
        assert exc_info.value.slot == 101
        assert exc_info.value.current_slot == 100

    def test_before_genesis_only_slot_zero_is_valid(self) -> None:
        """Before genesis the clock sits at slot 0."""
        clock = clock_at(-1)
        assert clock.slot_age(Slot(0)) == Uint64(0)
        with pytest.raises(InvalidSlotError):
            clock.slot_age(Slot(1))
