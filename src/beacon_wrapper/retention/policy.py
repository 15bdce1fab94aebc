"""
Blob retention policy.

Beacon nodes prune blob sidecars once they fall out of the retention window.
A pruned block still exists, so the node answers `200` with an empty list
rather than `404`. The policy reproduces that answer for slots older than
the configured window and lets everything else through to the real node.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

from beacon_wrapper.chain import MAX_RETENTION_EPOCHS, SLOTS_PER_EPOCH, SlotClock
from beacon_wrapper.exceptions import UnsupportedBlockIdError
from beacon_wrapper.types import Uint64

from .identifier import (
    BlockIdentifier,
    HashIdentifier,
    SymbolicIdentifier,
    classify_block_id,
)

logger = logging.getLogger(__name__)


class RetentionDecision(Enum):
    """What to do with a blob sidecars request."""

    PROXY = "proxy"
    """Forward the request to the upstream node."""

    EMPTY_LIST = "empty_list"
    """Answer with an empty sidecar list, as a pruning node would."""


@dataclass(frozen=True, slots=True)
class RetentionPolicy:
    """Decides whether a block's blobs are still within the retention window."""

    clock: SlotClock
    """Slot clock anchored at the upstream genesis time."""

    retention_epochs: int
    """Size of the retention window in epochs."""

    def __post_init__(self) -> None:
        if not 0 <= self.retention_epochs <= MAX_RETENTION_EPOCHS:
            raise ValueError(
                f"retention_epochs must be in [0, {MAX_RETENTION_EPOCHS}], "
                f"got {self.retention_epochs}"
            )

    @property
    def window_slots(self) -> Uint64:
        """Size of the retention window in slots."""
        return Uint64(self.retention_epochs) * SLOTS_PER_EPOCH

    def decide(self, identifier: BlockIdentifier) -> RetentionDecision:
        """
        Decide how to answer a request for the given block.

        A slot exactly `window_slots` old is still retained. Only strictly
        older slots get the empty list.

        Raises:
            UnsupportedBlockIdError: For block roots and named blocks.
            InvalidSlotError: If the slot is in the future.
        """
        if isinstance(identifier, HashIdentifier):
            raise UnsupportedBlockIdError("Block hash is not supported yet")
        if isinstance(identifier, SymbolicIdentifier):
            raise UnsupportedBlockIdError(f"{identifier.tag.value} is not supported yet")

        age = self.clock.slot_age(identifier.slot)
        if age > self.window_slots:
            logger.debug("Slot %s is %s slots old, outside the window", identifier.slot, age)
            return RetentionDecision.EMPTY_LIST
        return RetentionDecision.PROXY

    def decide_raw(self, block_id: str) -> RetentionDecision:
        """Classify a raw path parameter and decide on it."""
        return self.decide(classify_block_id(block_id))
