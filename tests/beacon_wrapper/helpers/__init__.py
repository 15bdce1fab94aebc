"""Test helpers for beacon wrapper tests."""

from .fake_node import FakeBeaconNode, RecordedRequest
from .wrapper import SCENARIO_GENESIS_TIME, fixed_time, running_wrapper

__all__ = [
    "FakeBeaconNode",
    "RecordedRequest",
    "SCENARIO_GENESIS_TIME",
    "fixed_time",
    "running_wrapper",
]
