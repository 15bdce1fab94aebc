"""Tests for the wrapper configuration."""

import dataclasses

import pytest

from beacon_wrapper.chain import MAX_RETENTION_EPOCHS, SLOTS_PER_EPOCH
from beacon_wrapper.config import WrapperConfig


class TestWrapperConfig:
    """Tests for WrapperConfig defaults and validation."""

    def test_defaults(self) -> None:
        """Defaults bind all interfaces on 3600 with the protocol retention."""
        config = WrapperConfig()

        assert config.host == "0.0.0.0"
        assert config.port == 3600
        assert config.beacon_endpoint == "http://localhost:3500"
        assert config.retention_epochs == 4096
        assert config.upstream_timeout is None

    def test_is_immutable(self) -> None:
        """Configuration cannot change after startup."""
        config = WrapperConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            config.port = 1  # type: ignore[misc]

    def test_upstream_base_url_strips_trailing_slash(self) -> None:
        """Request paths are appended to a slash-free base."""
        assert WrapperConfig(beacon_endpoint="http://node:5052/").upstream_base_url == (
            "http://node:5052"
        )

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"retention_epochs": -1},
            {"retention_epochs": 2**60},
            {"retention_epochs": 2**64 - 1},
            {"port": -1},
            {"port": 65536},
            {"upstream_timeout": 0.0},
            {"beacon_endpoint": "localhost:3500"},
            {"beacon_endpoint": "ftp://node"},
            {"beacon_endpoint": "http://"},
        ],
    )
    def test_invalid_values_rejected(self, kwargs: dict) -> None:
        """Out-of-range or non-http values raise ValueError."""
        with pytest.raises(ValueError):
            WrapperConfig(**kwargs)

    def test_widest_retention_window_accepted(self) -> None:
        """The largest window whose slot count fits in a Uint64 is valid."""
        config = WrapperConfig(retention_epochs=MAX_RETENTION_EPOCHS)
        assert config.retention_epochs * int(SLOTS_PER_EPOCH) <= 2**64 - 1

    def test_retention_window_one_past_limit_rejected(self) -> None:
        """One epoch more would overflow the window in slots."""
        with pytest.raises(ValueError, match="retention_epochs"):
            WrapperConfig(retention_epochs=MAX_RETENTION_EPOCHS + 1)
