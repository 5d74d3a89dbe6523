"""Scripted fake API and server payload builders shared by the tests."""

from __future__ import annotations

import json
from typing import Any, Awaitable, Callable

import httpx

API_HOST = "http://api.test"

Handler = Callable[[httpx.Request], "httpx.Response | Awaitable[httpx.Response]"]


def ok(data: Any = None, message: str = "") -> dict[str, Any]:
    """Success envelope as the server sends it."""

    return {"data": data, "success": True, "message": message}


def fail(code: int | None, message: str) -> dict[str, Any]:
    return {"code": code, "success": False, "message": message}


def expired() -> httpx.Response:
    return httpx.Response(401, json=fail(3002, "invalid access token"))


class FakeApi:
    """Routes requests by `(method, path)` and records every call."""

    def __init__(self) -> None:
        self.routes: dict[tuple[str, str], Handler] = {}
        self.requests: list[httpx.Request] = []

    def on(self, method: str, path: str, handler: Handler | httpx.Response | dict[str, Any]) -> None:
        if isinstance(handler, httpx.Response):
            response = handler
            handler = lambda request: response  # noqa: E731
        elif isinstance(handler, dict):
            body = handler
            handler = lambda request: httpx.Response(200, json=body)  # noqa: E731
        self.routes[(method, path)] = handler

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json=fail(None, f"no route for {request.method} {request.url.path}"))
        response = handler(request)
        if not isinstance(response, httpx.Response):
            response = await response
        return response

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    @staticmethod
    def json_body(request: httpx.Request) -> Any:
        return json.loads(request.content)
