"""API endpoint handlers."""

from . import blob_sidecars, passthrough

__all__ = [
    "blob_sidecars",
    "passthrough",
]
