"""Blob sidecars endpoint handler."""

from __future__ import annotations

import json
import logging
from typing import Final

from aiohttp import web

from beacon_wrapper.exceptions import BlockIdError, UnsupportedBlockIdError
from beacon_wrapper.retention import RetentionDecision

from ..keys import RETENTION_POLICY, UPSTREAM_PROXY

logger = logging.getLogger(__name__)

EMPTY_SIDECAR_LIST: Final = json.dumps({"data": []}, separators=(",", ":")).encode()
"""Body a pruning node returns for a block whose blobs are gone."""


async def handle(request: web.Request) -> web.StreamResponse:
    """
    Handle a blob sidecars request for `{block_id}`.

    Blobs of slots older than the retention window are reported as an
    empty list. Everything else is forwarded to the upstream node.

    Response: JSON object with field:
        - data (array): Always empty when synthesized locally.

    Status Codes:
        200 OK: Empty list for pruned slots, or the upstream response.
        400 Bad Request: Malformed block ID or a future slot.
        500 Internal Server Error: Block roots and named blocks.
    """
    logger.info(f"Received request for {request.path}")

    block_id = request.match_info["block_id"]
    try:
        decision = request.app[RETENTION_POLICY].decide_raw(block_id)
    except UnsupportedBlockIdError as e:
        raise web.HTTPInternalServerError(text=e.message) from e
    except BlockIdError as e:
        logger.debug(f"Rejecting block ID {block_id!r}: {e.message}")
        raise web.HTTPBadRequest(text="Invalid block ID") from e

    if decision is RetentionDecision.EMPTY_LIST:
        return web.Response(body=EMPTY_SIDECAR_LIST, content_type="application/json")

    return await request.app[UPSTREAM_PROXY].forward(request)
