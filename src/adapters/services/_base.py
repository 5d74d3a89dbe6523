"""Shared plumbing for network-backed facades."""

from __future__ import annotations

from typing import TypeVar

from core.interfaces.session import EndpointSource, NetworkSession

T = TypeVar("T")


class SessionFacade:
    """Sends descriptors through a session and unwraps the envelope.

    Failures are raised as the `UpError` they carry.
    """

    def __init__(self, session: NetworkSession) -> None:
        self._session = session

    async def _fetch(self, endpoint: EndpointSource, response_type: type[T]) -> T:
        result = await self._session.request(endpoint, response_type)
        return result.unwrap()

    async def _execute(self, endpoint: EndpointSource) -> None:
        result = await self._session.execute(endpoint)
        result.unwrap()
