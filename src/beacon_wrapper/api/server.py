"""
HTTP server for the beacon wrapper.

Serves the subset of the Beacon API that blob archivers use:
- /eth/v1/node/version - Forwarded upstream
- /eth/v1/config/spec - Forwarded upstream
- /eth/v1/beacon/genesis - Forwarded upstream
- /eth/v1/beacon/blob_sidecars/{block_id} - Forwarded, or an empty list
  for slots outside the retention window
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field

from aiohttp import web

from beacon_wrapper.config import WrapperConfig
from beacon_wrapper.retention import RetentionPolicy

from .keys import RETENTION_POLICY, UPSTREAM_PROXY
from .proxy import UpstreamProxy
from .routes import ROUTES

logger = logging.getLogger(__name__)


def create_app(proxy: UpstreamProxy, policy: RetentionPolicy) -> web.Application:
    """Build the aiohttp application with all routes and shared state."""
    app = web.Application()
    app[UPSTREAM_PROXY] = proxy
    app[RETENTION_POLICY] = policy
    app.add_routes([web.route("*", path, handler) for path, handler in ROUTES.items()])

    async def _close_proxy(app: web.Application) -> None:
        await app[UPSTREAM_PROXY].close()

    app.on_cleanup.append(_close_proxy)
    return app


@dataclass(slots=True)
class WrapperServer:
    """
    HTTP server that fronts the upstream beacon node.

    Uses aiohttp to handle HTTP protocol details. Each request runs in its
    own task; the configuration and policy are shared read-only.
    """

    config: WrapperConfig
    """Process configuration."""

    policy: RetentionPolicy
    """Retention policy anchored at the upstream genesis time."""

    _runner: web.AppRunner | None = field(default=None, init=False)
    """The aiohttp application runner."""

    _site: web.TCPSite | None = field(default=None, init=False)
    """The TCP site for the server."""

    @property
    def port(self) -> int:
        """The port actually bound, useful when configured with port 0."""
        if self._runner is None or not self._runner.addresses:
            raise RuntimeError("Server is not running")
        return self._runner.addresses[0][1]

    async def start(self) -> None:
        """
        Start serving in the background.

        Raises:
            OSError: If the listening socket cannot be bound.
        """
        proxy = UpstreamProxy(
            base_url=self.config.upstream_base_url,
            timeout=self.config.upstream_timeout,
        )
        await proxy.start()

        self._runner = web.AppRunner(create_app(proxy, self.policy), access_log=None)
        await self._runner.setup()

        self._site = web.TCPSite(self._runner, self.config.host, self.config.port)
        try:
            await self._site.start()
        except OSError:
            await self.stop()
            raise

        logger.info(f"Beacon API wrapper started on {self.config.host}:{self.port}")

    async def run(self, stop_event: asyncio.Event) -> None:
        """Start the server and serve until `stop_event` is set."""
        await self.start()
        try:
            await stop_event.wait()
        finally:
            await self.stop()

    async def stop(self) -> None:
        """Stop accepting connections and wait for in-flight requests."""
        if self._runner is not None:
            logger.info("Shutting down server...")
            await self._runner.cleanup()
            self._runner = None
            self._site = None
            logger.info("Server stopped")
