"""
Chain Time Configuration

Slot and epoch parameters of the mainnet preset. The wrapper derives every
slot from these constants and the genesis time reported by the upstream node.
"""

from typing_extensions import Final

from beacon_wrapper.types import Uint64

SECONDS_PER_SLOT: Final = Uint64(12)
"""The fixed duration of a single slot in seconds."""

SLOTS_PER_EPOCH: Final = Uint64(32)
"""The number of slots in an epoch."""

MIN_EPOCHS_FOR_BLOB_SIDECARS_REQUESTS: Final = 4096
"""
The minimum number of epochs a node must serve blob sidecars for.

Nodes prune blobs older than this, roughly 18 days on mainnet. Used as the
default retention window.
"""

MAX_RETENTION_EPOCHS: Final = (2**64 - 1) // int(SLOTS_PER_EPOCH)
"""The widest retention window whose slot count still fits in a Uint64."""
