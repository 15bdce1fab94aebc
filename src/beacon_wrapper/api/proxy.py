"""
Reverse proxy to the upstream beacon node.

Requests are replayed against the upstream with the same method, path,
query string, headers and body. The upstream status, headers and raw body
bytes are streamed back unchanged; compressed bodies are not decoded.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Final

import httpx
from aiohttp import web
from multidict import CIMultiDict

logger = logging.getLogger(__name__)

HOP_BY_HOP_HEADERS: Final = frozenset(
    {
        "connection",
        "keep-alive",
        "proxy-authenticate",
        "proxy-authorization",
        "proxy-connection",
        "te",
        "trailer",
        "transfer-encoding",
        "upgrade",
    }
)
"""Headers scoped to a single connection (RFC 9110 section 7.6.1)."""

CLIENT_DEFAULT_HEADERS: Final = ("Accept", "Accept-Encoding", "User-Agent")
"""Headers httpx adds to every request unless removed from the client."""

UPSTREAM_LIMITS: Final = httpx.Limits(max_connections=None, max_keepalive_connections=20)
"""No cap on concurrent upstream connections; a stalled request never blocks others."""


def _connection_tokens(values: Iterable[str]) -> set[str]:
    """Header names listed in `Connection` values, which are also hop-by-hop."""
    tokens = (token.strip().lower() for value in values for token in value.split(","))
    return {token for token in tokens if token}


def filter_request_headers(request: web.Request) -> list[tuple[str, str]]:
    """
    Headers to send upstream.

    Drops hop-by-hop headers and `Host` (httpx sets it from the target URL),
    and appends the client address to `X-Forwarded-For`.
    """
    connection = _connection_tokens(request.headers.getall("Connection", ()))
    dropped = HOP_BY_HOP_HEADERS | connection | {"host"}
    headers = [(k, v) for k, v in request.headers.items() if k.lower() not in dropped]

    if request.remote:
        prior = [v for k, v in headers if k.lower() == "x-forwarded-for"]
        headers = [(k, v) for k, v in headers if k.lower() != "x-forwarded-for"]
        headers.append(("X-Forwarded-For", ", ".join([*prior, request.remote])))

    return headers


def filter_response_headers(response: httpx.Response) -> CIMultiDict[str]:
    """Headers to return to the client, minus hop-by-hop headers."""
    dropped = HOP_BY_HOP_HEADERS | _connection_tokens(response.headers.get_list("Connection"))
    return CIMultiDict(
        (k, v) for k, v in response.headers.multi_items() if k.lower() not in dropped
    )


@dataclass(slots=True)
class UpstreamProxy:
    """
    Forwards requests to a single upstream host.

    One pooled client is shared by all in-flight requests. It is opened by
    `start()` and must be closed with `close()`.
    """

    base_url: str
    """Upstream base URL without a trailing slash."""

    timeout: float | None = None
    """Per-request timeout in seconds. None disables timeouts."""

    _client: httpx.AsyncClient | None = field(default=None, init=False)
    """The pooled HTTP client."""

    async def start(self) -> None:
        """Open the pooled HTTP client."""
        if self._client is None:
            client = httpx.AsyncClient(timeout=self.timeout, limits=UPSTREAM_LIMITS)
            # Only the caller's headers go upstream.
            for name in CLIENT_DEFAULT_HEADERS:
                client.headers.pop(name, None)
            self._client = client

    async def close(self) -> None:
        """Close the pooled HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    def target_url(self, request: web.Request) -> str:
        """Upstream URL for `request`: base URL plus the raw path and query."""
        return f"{self.base_url}{request.raw_path}"

    async def forward(self, request: web.Request) -> web.StreamResponse:
        """
        Replay `request` against the upstream and stream back its response.

        Raises:
            web.HTTPBadGateway: If the upstream cannot be reached or fails
                before sending a response.
        """
        if self._client is None:
            raise RuntimeError("UpstreamProxy.start() must be called before forwarding")

        body = await request.read()
        upstream_request = self._client.build_request(
            request.method,
            self.target_url(request),
            headers=filter_request_headers(request),
            content=body or None,
        )

        try:
            upstream = await self._client.send(upstream_request, stream=True)
        except httpx.HTTPError as e:
            logger.warning(f"Upstream request to {upstream_request.url} failed: {e!r}")
            raise web.HTTPBadGateway(text="Upstream request failed") from e

        try:
            response = web.StreamResponse(
                status=upstream.status_code,
                reason=upstream.reason_phrase or None,
                headers=filter_response_headers(upstream),
            )
            await response.prepare(request)
            async for chunk in upstream.aiter_raw():
                await response.write(chunk)
            await response.write_eof()
            return response
        finally:
            await upstream.aclose()
