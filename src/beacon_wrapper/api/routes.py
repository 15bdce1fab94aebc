"""API route definitions."""

from collections.abc import Awaitable, Callable

from aiohttp import web

from .endpoints import blob_sidecars, passthrough

ROUTES: dict[str, Callable[[web.Request], Awaitable[web.StreamResponse]]] = {
    "/eth/v1/node/version": passthrough.handle,
    "/eth/v1/config/spec": passthrough.handle,
    "/eth/v1/beacon/genesis": passthrough.handle,
    "/eth/v1/beacon/blob_sidecars/{block_id}": blob_sidecars.handle,
}
"""All API routes mapped to their handlers. Every HTTP method is accepted."""
