"""Slot type."""

from __future__ import annotations

from beacon_wrapper.types import Uint64


class Slot(Uint64):
    """Represents a slot number as a 64-bit unsigned integer."""
