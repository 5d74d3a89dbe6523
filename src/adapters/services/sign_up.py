"""Sign-up facade. Runs on the plain (unauthenticated) session."""

from __future__ import annotations

import logging
from typing import Sequence

from adapters.dto.auth import (
    LegalDistrictDTO,
    LegalDistrictsBody,
    LoginResponse,
    TermDTO,
    TermsListResponse,
)
from adapters.dto.requests import LoginRequest, SignUpRequest, VerifyNicknameRequest
from adapters.endpoints.auth import FetchTerms, Login, SearchLegalDistricts, SignUp, VerifyNickname
from adapters.services._base import SessionFacade
from core.domain.enums import OAuthProvider
from core.domain.envelope import Failure
from core.domain.errors import ServerError
from core.domain.models import District, OAuthResult, Page, TermsData, TokenPair, VerifyResult
from core.interfaces.session import NetworkSession, TokenStore

logger = logging.getLogger(__name__)


class DefaultSignUpService(SessionFacade):
    def __init__(self, session: NetworkSession, token_store: TokenStore) -> None:
        super().__init__(session)
        self._store = token_store

    async def fetch_terms(self) -> list[TermsData]:
        return (await self._fetch(FetchTerms(), TermsListResponse)).to_domain()

    async def verify_nickname(self, nickname: str) -> VerifyResult:
        """A server rejection is a result (`is_success=False`), not an error.

        Transport and decoding failures still raise.
        """

        result = await self._session.execute(VerifyNickname(VerifyNicknameRequest(nickname=nickname)))
        if isinstance(result, Failure):
            if not isinstance(result.error, ServerError):
                raise result.error
            return VerifyResult(is_success=False, message=result.error.message)
        return VerifyResult(is_success=True, message=result.message)

    async def sign_up(
        self,
        oauth: OAuthResult,
        main_region_id: int,
        interested_region_ids: Sequence[int],
        nickname: str,
        agreements: Sequence[str],
    ) -> None:
        payload = SignUpRequest(
            oauth_token=oauth.token,
            oauth_provider=oauth.provider,
            main_region_id=main_region_id,
            interested_region_ids=list(interested_region_ids),
            nickname=nickname,
            agreements=list(agreements),
        )
        await self._execute(SignUp(payload))

    async def login(
        self,
        oauth_token: str,
        provider: OAuthProvider,
        authorization_code: str | None = None,
    ) -> TokenPair:
        payload = LoginRequest(
            oauth_token=oauth_token,
            oauth_provider=OAuthProvider(provider),
            authorization_code=authorization_code,
        )
        pair = (await self._fetch(Login(payload), LoginResponse)).to_domain()
        self._store.save(pair)
        logger.info("Logged in with %s", payload.oauth_provider.value)
        return pair

    async def search_districts(self, keyword: str, page: int = 1) -> Page[District]:
        return (await self._fetch(SearchLegalDistricts(keyword, page), LegalDistrictsBody)).to_domain()


MOCK_TERMS = TermsListResponse(
    terms=[
        TermDTO(term="[필수] 서비스 이용 약관", url="", code="serviceUse", required=True),
        TermDTO(term="[필수] 개인정보 수집 및 이용 동의", url="", code="privacy", required=True),
        TermDTO(term="[필수] 위치기반 서비스 동의", url="", code="location", required=True),
    ]
)

MOCK_DISTRICTS = LegalDistrictsBody(
    legal_districts=[LegalDistrictDTO(id=0, name="서울시 강북구 수유동")],
    has_next=False,
    current_page=1,
)

MOCK_LOGIN = LoginResponse(access_token="mock-access-token", refresh_token="mock-refresh-token")


class MockSignUpService:
    """Three required terms, every nickname accepted, one district (수유동)."""

    async def fetch_terms(self) -> list[TermsData]:
        return MOCK_TERMS.to_domain()

    async def verify_nickname(self, nickname: str) -> VerifyResult:
        return VerifyResult(is_success=True, message="성공")

    async def sign_up(
        self,
        oauth: OAuthResult,
        main_region_id: int,
        interested_region_ids: Sequence[int],
        nickname: str,
        agreements: Sequence[str],
    ) -> None:
        return None

    async def login(
        self,
        oauth_token: str,
        provider: OAuthProvider,
        authorization_code: str | None = None,
    ) -> TokenPair:
        return MOCK_LOGIN.to_domain()

    async def search_districts(self, keyword: str, page: int = 1) -> Page[District]:
        return MOCK_DISTRICTS.to_domain()
