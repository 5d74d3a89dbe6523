"""Network session: one endpoint in, one typed envelope out.

Why a session object:
- Owns the single `httpx.AsyncClient` (base headers, timeout, event log).
- Turns every transport or server outcome into a `Success`/`Failure`, so
  the authenticated pipeline can inspect failures before deciding to reissue.

Rules:
- Exactly one HTTP call per `request`/`execute`; no retries here.
- A descriptor that cannot be turned into a request raises
  `MalformedRequestError` immediately (programmer error).
- A factory in place of a descriptor is called once per `request`/`execute`,
  so a replay through the authenticated pipeline rebuilds the body.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, TypeVar

import httpx
from pydantic import ValidationError

from adapters.dto.common import FailResponse, NetworkResponse
from adapters.http_client import build_async_client
from core.config import AppSettings
from core.domain.envelope import Failure, ResponseEnvelope, Success
from core.domain.errors import DecodingError, NetworkError, ServerError
from core.interfaces.session import Endpoint, EndpointSource, resolve_endpoint

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _json_or_none(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def server_error_from(response: httpx.Response, payload: Any) -> ServerError:
    """Build a `ServerError` from a failure body, or from the status line."""

    failure: FailResponse | None = None
    if isinstance(payload, dict):
        try:
            failure = FailResponse.model_validate(payload)
        except ValidationError:
            failure = None

    code = failure.code if failure else None
    message = failure.message if failure and failure.message else ""
    if not message:
        message = response.reason_phrase or f"HTTP {response.status_code}"
    return ServerError(code=code, message=message, status_code=response.status_code)


def decode_response(response: httpx.Response, response_type: type[T] | None) -> ResponseEnvelope[T]:
    """Map an HTTP response onto a result.

    `response_type=None` means the caller only needs the outcome (no data).
    """

    payload = _json_or_none(response)

    if not response.is_success:
        return Failure(server_error_from(response, payload))
    if isinstance(payload, dict) and payload.get("success") is False:
        return Failure(server_error_from(response, payload))

    if response_type is None:
        message = payload.get("message") if isinstance(payload, dict) else None
        return Success(None, message=str(message or ""))

    if payload is None:
        return Failure(DecodingError(f"Expected a JSON body, got {response.headers.get('content-type')!r}"))
    try:
        envelope = NetworkResponse[response_type].model_validate(payload)  # type: ignore[valid-type]
    except ValidationError as exc:
        name = getattr(response_type, "__name__", str(response_type))
        return Failure(DecodingError(f"Cannot decode {name}: {exc.error_count()} error(s)"))
    return Success(envelope.data, message=envelope.message)


class HttpxNetworkSession:
    """`NetworkSession` backed by httpx."""

    def __init__(
        self,
        settings: AppSettings | None = None,
        *,
        client: httpx.AsyncClient | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.settings = settings or AppSettings()
        self.host = self.settings.api_host
        self._owns_client = client is None
        self._client = client or build_async_client(self.settings, transport=transport)

    async def _send(
        self,
        endpoint: Endpoint,
        headers: Mapping[str, str] | None,
    ) -> httpx.Response | Failure:
        built = endpoint.as_request(self.host, headers=headers)
        # Re-build through the client so its base headers and timeout apply.
        request = self._client.build_request(
            built.method,
            built.url,
            content=built.content,
            headers=built.headers,
        )
        try:
            return await self._client.send(request)
        except httpx.RequestError as exc:
            logger.warning("Transport failure for %s %s: %s", request.method, request.url, exc)
            return Failure(NetworkError(f"{type(exc).__name__}: {exc}"))

    async def request(
        self,
        endpoint: EndpointSource,
        response_type: type[T],
        *,
        headers: Mapping[str, str] | None = None,
    ) -> ResponseEnvelope[T]:
        endpoint = resolve_endpoint(endpoint)
        sent = await self._send(endpoint, headers)
        if isinstance(sent, Failure):
            return sent
        result = decode_response(sent, response_type)
        if isinstance(result, Failure):
            logger.info("%s %s failed: %r", endpoint.method, endpoint.path, result.error)
        return result

    async def execute(
        self,
        endpoint: EndpointSource,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> ResponseEnvelope[None]:
        endpoint = resolve_endpoint(endpoint)
        sent = await self._send(endpoint, headers)
        if isinstance(sent, Failure):
            return sent
        result = decode_response(sent, None)
        if isinstance(result, Failure):
            logger.info("%s %s failed: %r", endpoint.method, endpoint.path, result.error)
        return result

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> "HttpxNetworkSession":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
