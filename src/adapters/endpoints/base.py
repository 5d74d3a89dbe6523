"""Endpoint descriptor base.

Each REST operation is one frozen dataclass holding its typed payload.
Subclasses declare `method` and `path`; they override `query_params()` or
`body()` only when the operation carries them. `as_request()` turns a
descriptor into an `httpx.Request` without any I/O.
"""

from __future__ import annotations

import json
from typing import Any, ClassVar, Mapping

import httpx

from core.domain.errors import MalformedRequestError

JSON_CONTENT_TYPE = "application/json"
DEFAULT_PAGE_SIZE = 10
NEWEST_FIRST = "createdAt,desc"


def normalize_host(host: str) -> str:
    """Validate `scheme://host[:port]` and strip the trailing slash."""

    try:
        url = httpx.URL((host or "").strip())
    except (httpx.InvalidURL, TypeError, ValueError) as exc:
        raise MalformedRequestError(f"Invalid API host: {host!r}") from exc
    if url.scheme not in ("http", "https") or not url.host:
        raise MalformedRequestError(f"Invalid API host: {host!r}")
    return str(url).rstrip("/")


def paging(page: int, size: int, *, sort: str | None = None) -> dict[str, Any]:
    params: dict[str, Any] = {"page": page, "size": size}
    if sort:
        params["sort"] = sort
    return params


class ApiEndpoint:
    """Shared conversion logic for every descriptor."""

    method: ClassVar[str] = "GET"
    requires_auth: ClassVar[bool] = True

    @property
    def path(self) -> str:
        raise NotImplementedError

    def query_params(self) -> dict[str, Any]:
        return {}

    def body(self) -> dict[str, Any] | None:
        return None

    def as_request(self, host: str, *, headers: Mapping[str, str] | None = None) -> httpx.Request:
        url = normalize_host(host) + self.path

        request_headers = {"Content-Type": JSON_CONTENT_TYPE}
        if headers:
            request_headers.update(headers)

        payload = self.body()
        content = None
        if payload is not None:
            content = json.dumps(payload, ensure_ascii=False).encode("utf-8")

        params = {k: v for k, v in self.query_params().items() if v is not None}
        try:
            return httpx.Request(
                self.method,
                url,
                params=params or None,
                content=content,
                headers=request_headers,
            )
        except (httpx.InvalidURL, ValueError) as exc:
            raise MalformedRequestError(f"Cannot build {self.method} {url}: {exc}") from exc

    def describe(self) -> str:
        return f"{self.method} {self.path}"
