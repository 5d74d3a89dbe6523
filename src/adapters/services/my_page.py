"""My-page facade (profile edit, report, resign, sign-out)."""

from __future__ import annotations

import logging
from typing import Callable, Sequence

from adapters.dto.requests import EditUserRequest, RefreshTokenRequest, ReportRequest
from adapters.endpoints.my_page import EditUser, Report, Resign, SignOut
from adapters.services._base import SessionFacade
from core.domain.enums import ReportCategory
from core.domain.errors import UnauthenticatedError
from core.interfaces.session import Endpoint, NetworkSession, TokenStore

logger = logging.getLogger(__name__)


class DefaultMyPageService(SessionFacade):
    """Resign and sign-out send the refresh token and clear the store on success.

    Their bodies are built per attempt: a replay after a reissue carries the
    rotated refresh token, not the one it replaced.
    """

    def __init__(self, session: NetworkSession, token_store: TokenStore) -> None:
        super().__init__(session)
        self._store = token_store

    async def edit_user(self, nickname: str, main_region_id: int, interested_region_ids: Sequence[int]) -> None:
        payload = EditUserRequest(
            main_region_id=main_region_id,
            interested_region_ids=list(interested_region_ids),
            nickname=nickname,
        )
        await self._execute(EditUser(payload))

    async def report(self, reporter: str, target: str, category: ReportCategory, description: str) -> None:
        """Bug reports carry no target; the category travels as its label."""

        category = ReportCategory(category)
        payload = ReportRequest(
            reporter_name=reporter,
            target_name="" if category is ReportCategory.BUG else target,
            report_type=category.label(),
            description=description,
        )
        await self._execute(Report(payload))

    async def resign(self) -> None:
        await self._execute(self._with_refresh_token(Resign))
        self._store.clear()
        logger.info("Account resigned")

    async def sign_out(self) -> None:
        await self._execute(self._with_refresh_token(SignOut))
        self._store.clear()
        logger.info("Signed out")

    def _with_refresh_token(
        self, endpoint_type: Callable[[RefreshTokenRequest], Endpoint]
    ) -> Callable[[], Endpoint]:
        """Fail now when signed out; read the token again on every attempt."""

        self._refresh_payload()
        return lambda: endpoint_type(self._refresh_payload())

    def _refresh_payload(self) -> RefreshTokenRequest:
        refresh_token = self._store.get_refresh_token()
        if not refresh_token:
            raise UnauthenticatedError("No refresh token stored")
        return RefreshTokenRequest(refresh_token=refresh_token)


class MockMyPageService:
    """Every operation succeeds without side effects."""

    async def edit_user(self, nickname: str, main_region_id: int, interested_region_ids: Sequence[int]) -> None:
        return None

    async def report(self, reporter: str, target: str, category: ReportCategory, description: str) -> None:
        return None

    async def resign(self) -> None:
        return None

    async def sign_out(self) -> None:
        return None
