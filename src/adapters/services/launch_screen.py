"""Launch-screen facade: refresh the session at start-up."""

from __future__ import annotations

from adapters.auth_pipeline import TokenReissuer
from core.domain.models import TokenPair

MOCK_TOKEN_PAIR = TokenPair(access_token="mock-access-token", refresh_token="mock-refresh-token")


class DefaultLaunchScreenService:
    def __init__(self, reissuer: TokenReissuer) -> None:
        self._reissuer = reissuer

    async def token_reissue(self) -> TokenPair:
        """Exchange the stored refresh token for a new pair and store it.

        Raises `UnauthenticatedError` (no network call) when no refresh token
        is stored, `SessionExpiredError` when the server refuses it.
        """

        return await self._reissuer.reissue()


class MockLaunchScreenService:
    async def token_reissue(self) -> TokenPair:
        return MOCK_TOKEN_PAIR
