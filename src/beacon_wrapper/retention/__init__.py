"""Block identifier classification and the blob retention policy."""

from .identifier import (
    BlockIdentifier,
    BlockTag,
    HashIdentifier,
    SlotIdentifier,
    SymbolicIdentifier,
    classify_block_id,
)
from .policy import RetentionDecision, RetentionPolicy

__all__ = [
    "BlockIdentifier",
    "BlockTag",
    "HashIdentifier",
    "RetentionDecision",
    "RetentionPolicy",
    "SlotIdentifier",
    "SymbolicIdentifier",
    "classify_block_id",
]
