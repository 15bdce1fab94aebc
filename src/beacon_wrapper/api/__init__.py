"""
API module for the beacon wrapper.

Provides the HTTP server that forwards Beacon API requests to a real node
and emulates blob pruning on the blob sidecars endpoint.

Also provides the bootstrap client:
- fetch_genesis_time: Read the genesis time from the upstream node
"""

from .client import fetch_genesis_time
from .proxy import UpstreamProxy
from .server import WrapperServer, create_app

__all__ = [
    "UpstreamProxy",
    "WrapperServer",
    "create_app",
    "fetch_genesis_time",
]
