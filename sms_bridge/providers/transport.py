"""Credential and shared HTTP client setup for gateway providers."""

from __future__ import annotations

import base64

import httpx

DEFAULT_TIMEOUT_SECONDS = 10.0


def basic_auth_header(key: str, secret: str) -> str:
    """Build a ``Basic`` Authorization header value from a key/secret pair."""
    token = base64.b64encode(f"{key}:{secret}".encode("utf-8")).decode("ascii")
    return f"Basic {token}"


def create_client(
    base_url: str,
    key: str,
    secret: str,
    *,
    timeout: float = DEFAULT_TIMEOUT_SECONDS,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create the pooled client a provider reuses for its whole lifetime.

    The Authorization header is attached once here and sent with every
    request.
    """
    return httpx.AsyncClient(
        base_url=base_url,
        headers={"Authorization": basic_auth_header(key, secret)},
        timeout=timeout,
        transport=transport,
    )
