"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts and headers for every Plaid call.
- Eases testing: respx intercepts the clients built here.
"""

from __future__ import annotations

import httpx

from plaid_client.core.config import AppSettings


def build_client(settings: AppSettings | None = None) -> httpx.Client:
    """Create an `httpx.Client` with the library defaults.

    Why a builder:
    - All endpoints share the same timeout, User-Agent and JSON headers.
    - Callers use it as a context manager so no connection outlives a call.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=False,
        headers=headers,
    )
