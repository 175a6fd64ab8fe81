from __future__ import annotations

import httpx

from weatherapp.core.config import Settings


USER_AGENT = "weatherapp/0.1"


def create_http_client(settings: Settings) -> httpx.AsyncClient:
    """Build a client for a single outbound call.

    Callers own the client and must close it, normally with ``async with``.
    """
    timeout = httpx.Timeout(settings.http_timeout_seconds)
    return httpx.AsyncClient(
        timeout=timeout,
        headers={"User-Agent": USER_AGENT, "Accept": "application/json"},
        follow_redirects=True,
    )
