"""Exception hierarchy for the beacon wrapper."""

from __future__ import annotations


class BeaconWrapperError(Exception):
    """
    Base exception for all wrapper errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class GenesisFetchError(BeaconWrapperError):
    """
    Raised when the genesis time cannot be obtained from the upstream node.

    This is fatal: the wrapper must not start serving without a genesis anchor.
    """


class BlockIdError(BeaconWrapperError):
    """Base class for errors tied to a single block identifier in a request."""


class MalformedBlockIdError(BlockIdError):
    """
    Raised when a block identifier is neither a hash, a known tag, nor a slot.

    Attributes:
        block_id: The raw identifier taken from the request path.
    """

    def __init__(self, block_id: str) -> None:
        self.block_id = block_id
        super().__init__(f"Malformed block ID: {block_id!r}")


class InvalidSlotError(BlockIdError):
    """
    Raised when a requested slot lies in the future.

    Attributes:
        slot: The requested slot.
        current_slot: The current slot at the time of the request.
    """

    def __init__(self, slot: int, current_slot: int) -> None:
        self.slot = slot
        self.current_slot = current_slot
        super().__init__(f"Slot {slot} is after the current slot {current_slot}")


class UnsupportedBlockIdError(BlockIdError):
    """Raised for identifiers that the retention check cannot resolve to a slot."""
