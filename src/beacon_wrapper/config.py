"""
Process-wide configuration for the beacon wrapper.

Built once from the command line and never mutated afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Final
from urllib.parse import urlsplit

from beacon_wrapper.chain import MAX_RETENTION_EPOCHS, MIN_EPOCHS_FOR_BLOB_SIDECARS_REQUESTS

DEFAULT_HOST: Final = "0.0.0.0"
"""Bind to all interfaces by default."""

DEFAULT_PORT: Final = 3600
"""Local port the wrapper listens on."""

DEFAULT_BEACON_ENDPOINT: Final = "http://localhost:3500"
"""Base URL of the upstream beacon node API."""

DEFAULT_RETENTION_EPOCHS: Final = MIN_EPOCHS_FOR_BLOB_SIDECARS_REQUESTS
"""Retention window in epochs, matching the protocol minimum."""


@dataclass(frozen=True, slots=True)
class WrapperConfig:
    """Configuration for the wrapper process."""

    host: str = DEFAULT_HOST
    """Host address to bind to."""

    port: int = DEFAULT_PORT
    """Port to listen on."""

    beacon_endpoint: str = DEFAULT_BEACON_ENDPOINT
    """Base URL of the upstream beacon node, e.g. http://localhost:3500."""

    retention_epochs: int = DEFAULT_RETENTION_EPOCHS
    """Epochs of blob history the emulated node retains."""

    upstream_timeout: float | None = None
    """Timeout for upstream requests in seconds. None waits indefinitely."""

    def __post_init__(self) -> None:
        if not 0 <= self.port <= 65535:
            raise ValueError(f"port must be in [0, 65535], got {self.port}")
        # The window in slots must fit in a Uint64.
        if not 0 <= self.retention_epochs <= MAX_RETENTION_EPOCHS:
            raise ValueError(
                f"retention_epochs must be in [0, {MAX_RETENTION_EPOCHS}], "
                f"got {self.retention_epochs}"
            )
        if self.upstream_timeout is not None and self.upstream_timeout <= 0:
            raise ValueError(f"upstream_timeout must be positive, got {self.upstream_timeout}")

        url = urlsplit(self.beacon_endpoint)
        if url.scheme not in ("http", "https") or not url.netloc:
            raise ValueError(f"beacon_endpoint must be an http(s) URL, got {self.beacon_endpoint!r}")

    @property
    def upstream_base_url(self) -> str:
        """The beacon endpoint without a trailing slash."""
        return self.beacon_endpoint.rstrip("/")
