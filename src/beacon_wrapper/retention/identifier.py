"""
Block identifier classification.

The Beacon API accepts a block identifier in the path of block-scoped
endpoints. It is one of:

- A block root: `0x` followed by 64 hex digits
- A named block: `genesis`, `finalized` or `head`
- A slot number in base 10

Classification checks the first two forms before attempting to parse a slot.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Final

from beacon_wrapper.chain import Slot
from beacon_wrapper.exceptions import MalformedBlockIdError

BLOCK_ROOT_PREFIX: Final = "0x"
"""Literal prefix of a hex-encoded block root."""

BLOCK_ROOT_LENGTH: Final = 66
"""Length of a hex-encoded 32-byte block root including the prefix."""

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]{64}")
_DECIMAL_DIGITS = re.compile(r"[0-9]+")


class BlockTag(Enum):
    """Named block identifiers defined by the Beacon API."""

    GENESIS = "genesis"
    FINALIZED = "finalized"
    HEAD = "head"


@dataclass(frozen=True, slots=True)
class SlotIdentifier:
    """A block addressed by its slot number."""

    slot: Slot


@dataclass(frozen=True, slots=True)
class HashIdentifier:
    """A block addressed by its 0x-prefixed root."""

    root: str


@dataclass(frozen=True, slots=True)
class SymbolicIdentifier:
    """A block addressed by one of the named tags."""

    tag: BlockTag


BlockIdentifier = SlotIdentifier | HashIdentifier | SymbolicIdentifier
"""Any classified block identifier."""


def is_block_root(block_id: str) -> bool:
    """Check whether `block_id` is a 0x-prefixed, 32-byte hex root."""
    return (
        len(block_id) == BLOCK_ROOT_LENGTH
        and block_id.startswith(BLOCK_ROOT_PREFIX)
        and _HEX_DIGITS.fullmatch(block_id, len(BLOCK_ROOT_PREFIX)) is not None
    )


def parse_block_tag(block_id: str) -> BlockTag | None:
    """Return the tag named by `block_id` (case-sensitive), or None."""
    try:
        return BlockTag(block_id)
    except ValueError:
        return None


def parse_slot(block_id: str) -> Slot:
    """
    Parse a base-10 slot number.

    Only ASCII digits are accepted. Signs, whitespace and digit separators
    that `int()` would tolerate are rejected.

    Raises:
        MalformedBlockIdError: If `block_id` is not a valid uint64 in base 10.
    """
    if _DECIMAL_DIGITS.fullmatch(block_id) is None:
        raise MalformedBlockIdError(block_id)
    try:
        return Slot(int(block_id))
    except OverflowError as e:
        raise MalformedBlockIdError(block_id) from e


def classify_block_id(block_id: str) -> BlockIdentifier:
    """
    Classify a raw path parameter into a block identifier.

    Args:
        block_id: The identifier as it appears in the request path.

    Returns:
        The matching identifier variant.

    Raises:
        MalformedBlockIdError: If the value is not a root, a tag, or a slot.
    """
    if is_block_root(block_id):
        return HashIdentifier(root=block_id)

    tag = parse_block_tag(block_id)
    if tag is not None:
        return SymbolicIdentifier(tag=tag)

    return SlotIdentifier(slot=parse_slot(block_id))
