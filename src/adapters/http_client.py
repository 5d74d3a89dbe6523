"""httpx wrapper.

Why a wrapper:
- Standardizes timeouts, headers and the network event log.
- Eases testing: a `MockTransport` can be injected instead of the real one.
"""

from __future__ import annotations

import logging

import httpx

from core.config import AppSettings

logger = logging.getLogger(__name__)

REDACTED_HEADERS = frozenset({"authorization", "cookie", "set-cookie"})


def redact_headers(headers: httpx.Headers) -> dict[str, str]:
    """Header map safe for logs (credentials replaced)."""

    return {k: ("***" if k.lower() in REDACTED_HEADERS else v) for k, v in headers.items()}


async def _log_request(request: httpx.Request) -> None:
    logger.info("--> %s %s", request.method, request.url)
    logger.debug("    headers: %s", redact_headers(request.headers))


async def _log_response(response: httpx.Response) -> None:
    request = response.request
    logger.info("<-- %s %s %s", response.status_code, request.method, request.url)


def build_async_client(
    settings: AppSettings | None = None,
    *,
    extra_headers: dict[str, str] | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> httpx.AsyncClient:
    """Create an `httpx.AsyncClient` with safe defaults.

    Why a builder:
    - Centralizes timeouts/headers so every session behaves the same.
    - Request/response hooks form the network event log; Authorization
      values never reach the log.
    """

    settings = settings or AppSettings()
    headers: dict[str, str] = {
        "User-Agent": settings.user_agent,
        "Accept": "application/json",
    }
    if extra_headers:
        headers.update(extra_headers)
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=headers,
        transport=transport,
        event_hooks={"request": [_log_request], "response": [_log_response]},
    )
