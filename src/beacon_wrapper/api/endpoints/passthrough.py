"""Handler for endpoints forwarded to the upstream node unconditionally."""

from __future__ import annotations

import logging

from aiohttp import web

from ..keys import UPSTREAM_PROXY

logger = logging.getLogger(__name__)


async def handle(request: web.Request) -> web.StreamResponse:
    """
    Forward the request to the upstream beacon node.

    Status Codes:
        Whatever the upstream returns.
        502 Bad Gateway: Upstream unreachable.
    """
    logger.info(f"Received request for {request.path}")
    return await request.app[UPSTREAM_PROXY].forward(request)
