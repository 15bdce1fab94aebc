"""
Genesis bootstrap client.

The wrapper converts requested slots to ages using the upstream node's
genesis time. It is fetched once, before the listener opens, so every
retention decision uses the same anchor. Any failure here aborts startup.
"""

from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError, field_validator

from beacon_wrapper.exceptions import GenesisFetchError
from beacon_wrapper.types import BeaconApiModel, Uint64

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0
"""HTTP request timeout in seconds for the genesis request."""

GENESIS_ENDPOINT = "/eth/v1/beacon/genesis"
"""Beacon API endpoint that reports the genesis time."""


class GenesisData(BeaconApiModel):
    """The `data` object of the genesis response."""

    genesis_time: Uint64
    """Unix timestamp of slot 0, sent as a decimal string."""

    @field_validator("genesis_time", mode="before")
    @classmethod
    def _parse_decimal_string(cls, value: object) -> int:
        """Accept only a decimal string, as the Beacon API encodes uint64 values."""
        if not isinstance(value, str) or not value.isascii() or not value.isdigit():
            raise ValueError(f"genesis_time must be a decimal string, got {value!r}")
        return int(value)


class GenesisResponse(BeaconApiModel):
    """Body of `GET /eth/v1/beacon/genesis`."""

    data: GenesisData


async def fetch_genesis_time(url: str, timeout: float | None = DEFAULT_TIMEOUT) -> Uint64:
    """
    Fetch the genesis time from a beacon node.

    Args:
        url: Base URL of the beacon node API (e.g., "http://localhost:3500").
        timeout: Request timeout in seconds.

    Returns:
        The genesis time as a Unix timestamp.

    Raises:
        GenesisFetchError: If the request fails or the body is not a valid
            genesis response.
    """
    full_url = f"{url.rstrip('/')}{GENESIS_ENDPOINT}"
    logger.info(f"Fetching genesis time from {full_url}")

    try:
        async with httpx.AsyncClient(timeout=timeout) as client:
            response = await client.get(full_url, headers={"Accept": "application/json"})
            response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise GenesisFetchError(
            f"HTTP error {exc.response.status_code}: {exc.response.text[:200]}"
        ) from exc
    except httpx.HTTPError as exc:
        raise GenesisFetchError(f"Network error while connecting to {full_url}: {exc}") from exc

    try:
        genesis = GenesisResponse.model_validate_json(response.content)
    except ValidationError as exc:
        raise GenesisFetchError(f"Malformed genesis response: {exc}") from exc

    logger.info(f"Genesis time is {genesis.data.genesis_time}")
    return genesis.data.genesis_time
