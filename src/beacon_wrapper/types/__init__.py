"""Reusable type definitions for the beacon wrapper."""

from .base import BeaconApiModel
from .uint import Uint64

__all__ = [
    "BeaconApiModel",
    "Uint64",
]
