"""Networking contracts.

Why Protocol:
- Structural typing: the pipeline and the facades accept any session or
  store with the right shape (real httpx session, test doubles, mocks).
- Callers that are generic over "some endpoint" only rely on `Endpoint`.
"""

from __future__ import annotations

from typing import Any, Callable, Mapping, Protocol, TypeVar, Union, runtime_checkable

import httpx

from core.domain.envelope import ResponseEnvelope
from core.domain.models import TokenPair

T = TypeVar("T")


@runtime_checkable
class Endpoint(Protocol):
    """A single REST operation convertible to a concrete HTTP request.

    Design rules:
    - Immutable once constructed.
    - No network I/O while building the request.
    """

    @property
    def method(self) -> str: ...

    @property
    def path(self) -> str: ...

    def query_params(self) -> dict[str, Any]: ...

    def body(self) -> dict[str, Any] | None: ...

    def as_request(self, host: str, *, headers: Mapping[str, str] | None = None) -> httpx.Request: ...


# An endpoint, or a factory called once per attempt (bodies that read the token store).
EndpointSource = Union[Endpoint, Callable[[], Endpoint]]


def resolve_endpoint(source: EndpointSource) -> Endpoint:
    return source() if callable(source) else source


@runtime_checkable
class NetworkSession(Protocol):
    """Executes one request and decodes it into a typed envelope.

    Exactly one HTTP call per invocation. Failures are returned, never raised.
    """

    async def request(
        self,
        endpoint: EndpointSource,
        response_type: type[T],
        *,
        headers: Mapping[str, str] | None = None,
    ) -> ResponseEnvelope[T]: ...

    async def execute(
        self,
        endpoint: EndpointSource,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> ResponseEnvelope[None]: ...


@runtime_checkable
class TokenStore(Protocol):
    """Single source of truth for the current `TokenPair`."""

    def get_access_token(self) -> str | None: ...

    def get_refresh_token(self) -> str | None: ...

    def get_tokens(self) -> TokenPair | None: ...

    def save(self, pair: TokenPair) -> None: ...

    def clear(self) -> None: ...


@runtime_checkable
class TokenBackend(Protocol):
    """Durable storage behind the token store."""

    def load(self) -> TokenPair | None: ...

    def store(self, pair: TokenPair) -> None: ...

    def delete(self) -> None: ...
