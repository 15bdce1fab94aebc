"""
Slot Clock
==========

Time-to-slot conversion anchored at the upstream node's genesis time.

The retention check needs to know how old a requested slot is. Age is
measured in whole slots between the requested slot and the slot that
contains the current wall-clock time.
"""

from dataclasses import dataclass
from time import time as wall_time
from typing import Callable

from beacon_wrapper.exceptions import InvalidSlotError
from beacon_wrapper.types import Uint64

from .config import SECONDS_PER_SLOT
from .slot import Slot


@dataclass(frozen=True, slots=True)
class SlotClock:
    """
    Converts wall-clock time to slots.

    All time values are in seconds (Unix timestamps).
    """

    genesis_time: Uint64
    """Unix timestamp (seconds) when slot 0 began."""

    time_fn: Callable[[], float] = wall_time
    """Time source function (injectable for testing)."""

    def current_time(self) -> Uint64:
        """Get current wall-clock time as Uint64 (Unix timestamp in seconds)."""
        return Uint64(int(self.time_fn()))

    def _seconds_since_genesis(self) -> Uint64:
        """Seconds elapsed since genesis (0 if before genesis)."""
        now = self.current_time()
        if now < self.genesis_time:
            return Uint64(0)
        return now - self.genesis_time

    def current_slot(self) -> Slot:
        """Get the current slot number (0 if before genesis)."""
        return Slot(self._seconds_since_genesis() // SECONDS_PER_SLOT)

    def slot_age(self, slot: Slot) -> Uint64:
        """
        Number of whole slots between `slot` and the current slot.

        Args:
            slot: The requested slot.

        Returns:
            `current_slot - slot`; 0 when `slot` is the current slot.

        Raises:
            InvalidSlotError: If `slot` is after the current slot.
        """
        current = self.current_slot()
        if slot > current:
            raise InvalidSlotError(int(slot), int(current))
        return Uint64(current - slot)
