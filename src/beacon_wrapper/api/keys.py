"""Typed keys for state shared through the aiohttp application."""

from aiohttp import web

from beacon_wrapper.retention import RetentionPolicy

from .proxy import UpstreamProxy

UPSTREAM_PROXY = web.AppKey("upstream_proxy", UpstreamProxy)
"""Proxy to the upstream beacon node."""

RETENTION_POLICY = web.AppKey("retention_policy", RetentionPolicy)
"""Retention policy used by the blob sidecars endpoint."""
