"""Authenticated request pipeline.

Per call: attach the access token, send, and on an expired-authorization
failure reissue the token pair once and replay the original request once.

Why a separate layer:
- `HttpxNetworkSession` stays a plain one-call-per-request executor.
- The pipeline has the same `request`/`execute` shape, so facades do not
  know whether they talk to an authenticated or a plain session.

Concurrency:
- Calls that hit an expired token at the same time share one in-flight
  reissue (`TokenReissuer`). A waiter being cancelled never cancels it.
- A caller whose stale token was already rotated by someone else replays
  with the current token instead of reissuing again.
- Endpoint factories are called again for the replay, so bodies that carry
  the refresh token pick up the rotated one.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Mapping, TypeVar

from adapters.dto.auth import LoginResponse
from adapters.dto.requests import RefreshTokenRequest
from adapters.endpoints.auth import TokenReissue
from core.domain.envelope import Failure, ResponseEnvelope
from core.domain.errors import (
    DecodingError,
    ReauthenticationRequired,
    SessionExpiredError,
    UnauthenticatedError,
)
from core.domain.models import TokenPair
from core.interfaces.session import EndpointSource, NetworkSession, TokenStore

logger = logging.getLogger(__name__)

T = TypeVar("T")

AUTHORIZATION_HEADER = "Authorization"


def bearer(token: str) -> str:
    return f"Bearer {token}"


class TokenReissuer:
    """Exchanges the stored refresh token for a new pair, one flight at a time.

    `reissue()` raises `UnauthenticatedError` when no refresh token is stored
    and `SessionExpiredError` (after clearing the store) when the exchange
    fails.
    """

    def __init__(self, session: NetworkSession, token_store: TokenStore) -> None:
        self._session = session
        self._store = token_store
        self._inflight: asyncio.Task[TokenPair] | None = None

    @property
    def in_flight(self) -> bool:
        return self._inflight is not None and not self._inflight.done()

    async def reissue(self) -> TokenPair:
        task = self._inflight
        if task is None or task.done():
            task = asyncio.get_running_loop().create_task(self._reissue_once())
            task.add_done_callback(self._forget)
            self._inflight = task
        else:
            logger.debug("Joining in-flight token reissue")
        return await asyncio.shield(task)

    def _forget(self, task: asyncio.Task[TokenPair]) -> None:
        if self._inflight is task:
            self._inflight = None
        # Mark the outcome as retrieved even if every waiter was cancelled.
        if not task.cancelled():
            task.exception()

    async def _reissue_once(self) -> TokenPair:
        refresh_token = self._store.get_refresh_token()
        if not refresh_token:
            raise UnauthenticatedError("No refresh token stored")

        logger.info("Reissuing token pair")
        endpoint = TokenReissue(RefreshTokenRequest(refresh_token=refresh_token))
        result = await self._session.request(endpoint, LoginResponse)
        if isinstance(result, Failure):
            self._store.clear()
            logger.warning("Token reissue failed: %r", result.error)
            raise SessionExpiredError(f"Token reissue failed: {result.error}") from result.error

        try:
            pair = result.data.to_domain(fallback_refresh_token=refresh_token)
        except DecodingError as exc:
            self._store.clear()
            raise SessionExpiredError(f"Token reissue failed: {exc}") from exc

        self._store.save(pair)
        return pair


class AuthenticatedSession:
    """`NetworkSession` that attaches the access token and reissues on expiry.

    Never more than one reissue per call, never a loop: a replay that is
    rejected as expired again clears the store and ends in
    `SessionExpiredError`.
    """

    def __init__(
        self,
        session: NetworkSession,
        token_store: TokenStore,
        *,
        reissuer: TokenReissuer | None = None,
    ) -> None:
        self._session = session
        self._store = token_store
        self._reissuer = reissuer or TokenReissuer(session, token_store)

    @property
    def reissuer(self) -> TokenReissuer:
        return self._reissuer

    async def request(
        self,
        endpoint: EndpointSource,
        response_type: type[T],
        *,
        headers: Mapping[str, str] | None = None,
    ) -> ResponseEnvelope[T]:
        async def send(auth_headers: dict[str, str]) -> ResponseEnvelope[T]:
            return await self._session.request(endpoint, response_type, headers=auth_headers)

        return await self._run(send, headers)

    async def execute(
        self,
        endpoint: EndpointSource,
        *,
        headers: Mapping[str, str] | None = None,
    ) -> ResponseEnvelope[None]:
        async def send(auth_headers: dict[str, str]) -> ResponseEnvelope[None]:
            return await self._session.execute(endpoint, headers=auth_headers)

        return await self._run(send, headers)

    async def _run(
        self,
        send: Callable[[dict[str, str]], Awaitable[ResponseEnvelope[T]]],
        headers: Mapping[str, str] | None,
    ) -> ResponseEnvelope[T]:
        access_token = self._store.get_access_token()
        if not access_token:
            return Failure(UnauthenticatedError("No access token stored"))

        result = await send(self._attach(headers, access_token))
        if not (isinstance(result, Failure) and result.is_expired_authorization):
            return result

        current = self._store.get_access_token()
        if current and current != access_token:
            logger.debug("Access token already rotated; replaying without reissue")
            fresh_token = current
        else:
            try:
                fresh_token = (await self._reissuer.reissue()).access_token
            except ReauthenticationRequired as exc:
                return Failure(exc)

        replay = await send(self._attach(headers, fresh_token))
        if isinstance(replay, Failure) and replay.is_expired_authorization:
            self._store.clear()
            logger.warning("Access token rejected after reissue; session expired")
            return Failure(SessionExpiredError("Access token rejected after reissue"))
        return replay

    @staticmethod
    def _attach(headers: Mapping[str, str] | None, token: str) -> dict[str, str]:
        merged = dict(headers or {})
        merged[AUTHORIZATION_HEADER] = bearer(token)
        return merged
