"""Feature facade contracts.

Each facade has a `Default*Service` (network-backed) and a `Mock*Service`
(fixed sample data) in `adapters.services`. Callers only see these
protocols.
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from core.domain.enums import OAuthProvider, ReportCategory, SearchTheme
from core.domain.models import (
    ActivityReview,
    Comment,
    Company,
    District,
    FollowedCompany,
    HomeReview,
    InteractionCounts,
    OAuthResult,
    Page,
    ProposedCompany,
    Reply,
    Review,
    SearchedCompany,
    TermsData,
    TokenPair,
    User,
    VerifyResult,
)


@runtime_checkable
class CompanyService(Protocol):
    async def fetch_company(self, company_id: int) -> Company: ...

    async def fetch_reviews(self, company_id: int, page: int = 1) -> Page[Review]: ...

    async def follow_company(self, company_id: int) -> None: ...

    async def unfollow_company(self, company_id: int) -> None: ...


@runtime_checkable
class ReviewService(Protocol):
    async def fetch_comments(self, review_id: int, page: int = 1) -> Page[Comment]: ...

    async def fetch_replies(self, comment_id: int, page: int = 1) -> Page[Reply]: ...

    async def create_comment(self, review_id: int, content: str, is_secret: bool = False) -> Comment: ...

    async def create_reply(self, comment_id: int, content: str, is_secret: bool = False) -> Reply: ...

    async def like_review(self, review_id: int) -> None: ...

    async def unlike_review(self, review_id: int) -> None: ...


@runtime_checkable
class HomeService(Protocol):
    async def fetch_user(self) -> User: ...

    async def fetch_popular_reviews(self, latitude: float, longitude: float, page: int = 1) -> Page[HomeReview]: ...

    async def fetch_main_region_reviews(self, latitude: float, longitude: float, page: int = 1) -> Page[HomeReview]: ...

    async def fetch_interested_region_reviews(self, latitude: float, longitude: float, page: int = 1) -> Page[HomeReview]: ...

    async def fetch_my_reviews(self, page: int = 1) -> Page[ActivityReview]: ...

    async def fetch_interacted_reviews(self, page: int = 1) -> Page[ActivityReview]: ...

    async def fetch_followed_companies(self, page: int = 1) -> Page[FollowedCompany]: ...

    async def fetch_interaction_counts(self) -> InteractionCounts: ...


@runtime_checkable
class MyPageService(Protocol):
    async def edit_user(self, nickname: str, main_region_id: int, interested_region_ids: Sequence[int]) -> None: ...

    async def report(self, reporter: str, target: str, category: ReportCategory, description: str) -> None: ...

    async def resign(self) -> None: ...

    async def sign_out(self) -> None: ...


@runtime_checkable
class LaunchScreenService(Protocol):
    async def token_reissue(self) -> TokenPair: ...


@runtime_checkable
class SignUpService(Protocol):
    async def fetch_terms(self) -> list[TermsData]: ...

    async def verify_nickname(self, nickname: str) -> VerifyResult: ...

    async def sign_up(
        self,
        oauth: OAuthResult,
        main_region_id: int,
        interested_region_ids: Sequence[int],
        nickname: str,
        agreements: Sequence[str],
    ) -> None: ...

    async def login(
        self,
        oauth_token: str,
        provider: OAuthProvider,
        authorization_code: str | None = None,
    ) -> TokenPair: ...

    async def search_districts(self, keyword: str, page: int = 1) -> Page[District]: ...


@runtime_checkable
class SearchService(Protocol):
    async def fetch_searched_companies(
        self,
        theme: SearchTheme,
        keyword: str,
        latitude: float,
        longitude: float,
        page: int = 1,
    ) -> Page[SearchedCompany]: ...

    async def fetch_proposed_companies(
        self,
        keyword: str,
        latitude: float,
        longitude: float,
    ) -> Page[ProposedCompany]: ...
