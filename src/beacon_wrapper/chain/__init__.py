"""Slot clock and chain time parameters."""

from .clock import SlotClock
from .config import (
    MAX_RETENTION_EPOCHS,
    MIN_EPOCHS_FOR_BLOB_SIDECARS_REQUESTS,
    SECONDS_PER_SLOT,
    SLOTS_PER_EPOCH,
)
from .slot import Slot

__all__ = [
    "MAX_RETENTION_EPOCHS",
    "MIN_EPOCHS_FOR_BLOB_SIDECARS_REQUESTS",
    "SECONDS_PER_SLOT",
    "SLOTS_PER_EPOCH",
    "Slot",
    "SlotClock",
]
