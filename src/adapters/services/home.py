"""Home feed facade."""

from __future__ import annotations

from adapters.dto.company import RatingDTO, ReviewDTO
from adapters.dto.home import (
    ActivityReviewDTO,
    ActivityReviewsBody,
    FollowedCompaniesBody,
    FollowedCompanyDTO,
    HomeReviewDTO,
    HomeReviewsBody,
    InteractionCountsDTO,
    RegionDTO,
    UserDTO,
)
from adapters.dto.search import SearchedCompanyDTO
from adapters.endpoints.base import DEFAULT_PAGE_SIZE
from adapters.endpoints.home import (
    FetchFollowedCompanies,
    FetchInteractedReviews,
    FetchInteractionCounts,
    FetchInterestedRegionReviews,
    FetchMainRegionReviews,
    FetchMyReviews,
    FetchPopularReviews,
    FetchUser,
)
from adapters.services._base import SessionFacade
from core.domain.models import (
    ActivityReview,
    FollowedCompany,
    HomeReview,
    InteractionCounts,
    Page,
    User,
)
from core.interfaces.session import NetworkSession


class DefaultHomeService(SessionFacade):
    def __init__(self, session: NetworkSession, *, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        super().__init__(session)
        self.page_size = page_size

    async def fetch_user(self) -> User:
        return (await self._fetch(FetchUser(), UserDTO)).to_domain()

    async def fetch_popular_reviews(self, latitude: float, longitude: float, page: int = 1) -> Page[HomeReview]:
        endpoint = FetchPopularReviews(latitude, longitude, page, self.page_size)
        return (await self._fetch(endpoint, HomeReviewsBody)).to_domain()

    async def fetch_main_region_reviews(self, latitude: float, longitude: float, page: int = 1) -> Page[HomeReview]:
        endpoint = FetchMainRegionReviews(latitude, longitude, page, self.page_size)
        return (await self._fetch(endpoint, HomeReviewsBody)).to_domain()

    async def fetch_interested_region_reviews(
        self, latitude: float, longitude: float, page: int = 1
    ) -> Page[HomeReview]:
        endpoint = FetchInterestedRegionReviews(latitude, longitude, page, self.page_size)
        return (await self._fetch(endpoint, HomeReviewsBody)).to_domain()

    async def fetch_my_reviews(self, page: int = 1) -> Page[ActivityReview]:
        return (await self._fetch(FetchMyReviews(page, self.page_size), ActivityReviewsBody)).to_domain()

    async def fetch_interacted_reviews(self, page: int = 1) -> Page[ActivityReview]:
        return (await self._fetch(FetchInteractedReviews(page, self.page_size), ActivityReviewsBody)).to_domain()

    async def fetch_followed_companies(self, page: int = 1) -> Page[FollowedCompany]:
        return (await self._fetch(FetchFollowedCompanies(page, self.page_size), FollowedCompaniesBody)).to_domain()

    async def fetch_interaction_counts(self) -> InteractionCounts:
        return (await self._fetch(FetchInteractionCounts(), InteractionCountsDTO)).to_domain()


_TEST_TEXT = "이건 테스트에요" * 7

MOCK_USER = UserDTO(
    nickname="테스트2",
    main_region_id=1618,
    main_region_address="서울특별시 마포구 공덕동",
    interested_regions=[
        RegionDTO(id=1288, address="서울특별시 성동구 마장동"),
        RegionDTO(id=1436, address="서울특별시 관악구 신림동"),
        RegionDTO(id=1437, address="서울특별시 관악구 남현동"),
    ],
)


def _home_review(
    company_id: int,
    company_name: str,
    address: str,
    distance: float,
    review_id: int,
    title: str,
    rating: RatingDTO,
    created_at: str,
) -> HomeReviewDTO:
    return HomeReviewDTO(
        company=SearchedCompanyDTO(
            id=company_id,
            name=company_name,
            address=address,
            total_rating=2.04,
            is_followed=False,
            distance=distance,
            review_title=title,
        ),
        review=ReviewDTO(
            id=review_id,
            rating=rating,
            reviewer="test@test.com",
            title=title,
            advantage_point=_TEST_TEXT,
            disadvantage_point=_TEST_TEXT,
            management_feedback=_TEST_TEXT,
            job="개발자",
            employment_period="1년미만",
            created_at=created_at,
            like_count=0,
            comment_count=0,
            is_liked=False,
        ),
    )


_WOW = _home_review(
    88599,
    "와우",
    "서울특별시 관악구 신림동 1536-14 승도",
    11.484579605217508,
    13,
    "반복적인 테스트 진행",
    RatingDTO(work_life_balance=2.0, welfare=3.0, salary=1.0, company_culture=1.0, management=2.0),
    "2025-07-09T15:45:03.782472",
)

MOCK_POPULAR_REVIEWS = HomeReviewsBody(
    reviews=[
        _WOW,
        _home_review(
            17949,
            "골목집 식당",
            "서울특별시 성동구 마장동 510-20번지",
            5.401944239509436,
            12,
            "반복되는 테스트 문구",
            RatingDTO(work_life_balance=3.0, welfare=3.0, salary=1.0, company_culture=2.0, management=2.0),
            "2025-07-09T15:42:25.849885",
        ),
    ],
    has_next=False,
    current_page=1,
)

MOCK_MAIN_REGION_REVIEWS = HomeReviewsBody(
    reviews=[
        _home_review(
            54664,
            "마포유가궁중족발",
            "서울특별시 마포구 공덕동 256-10 공덕시장",
            3.244408117031724,
            14,
            "반복적인 테스트 진행",
            RatingDTO(work_life_balance=3.0, welfare=3.0, salary=1.0, company_culture=1.0, management=2.0),
            "2025-07-09T17:22:47.866104",
        )
    ],
    has_next=False,
    current_page=1,
)

MOCK_INTERESTED_REGION_REVIEWS = HomeReviewsBody(reviews=[_WOW], has_next=False, current_page=1)

MOCK_ACTIVITY_REVIEWS = ActivityReviewsBody(
    reviews=[
        ActivityReviewDTO(
            id=1564,
            total_rating=3.5,
            title="예약이 많아 포트폴리오 쌓기엔 좋지만, 예약 사이 간격이 촘촘해 쉬는 시간이 부족해요",
            company_id=4444,
            company_name="네일샵 석촌점",
            company_address="",
            job="네일아티스트",
            created_at="2025-05-15T22:35:53.276281",
            like_count=8,
            comment_count=13,
        ),
        ActivityReviewDTO(
            id=1563,
            total_rating=4.0,
            title="점심시간에 손님이 몰려도 동료들과 호흡이 잘 맞고 사장님이 잘 챙겨줘서 일하기 편해요",
            company_id=4445,
            company_name="분식집 석촌 김밥왕",
            company_address="",
            job="서빙",
            created_at="2025-03-15T22:35:53.276281",
            like_count=5,
            comment_count=2,
        ),
    ],
    has_next=False,
    current_page=1,
)

MOCK_FOLLOWED_COMPANIES = FollowedCompaniesBody(
    companies=[
        FollowedCompanyDTO(
            id=209,
            name="정일正一 한우",
            address="서울특별시 종로구 당주동 100 세종빌딩, 세종아파트",
            total_rating=2.04,
            review_title="반복적인 테스트 진행",
        )
    ],
    has_next=False,
    current_page=1,
)

MOCK_INTERACTION_COUNTS = InteractionCountsDTO(
    my_review_count=2,
    interacted_review_count=2,
    followed_company_count=3,
)


class MockHomeService:
    """Fixed home feed: user "테스트2", two activity reviews, one followed company."""

    async def fetch_user(self) -> User:
        return MOCK_USER.to_domain()

    async def fetch_popular_reviews(self, latitude: float, longitude: float, page: int = 1) -> Page[HomeReview]:
        return MOCK_POPULAR_REVIEWS.to_domain()

    async def fetch_main_region_reviews(self, latitude: float, longitude: float, page: int = 1) -> Page[HomeReview]:
        return MOCK_MAIN_REGION_REVIEWS.to_domain()

    async def fetch_interested_region_reviews(
        self, latitude: float, longitude: float, page: int = 1
    ) -> Page[HomeReview]:
        return MOCK_INTERESTED_REGION_REVIEWS.to_domain()

    async def fetch_my_reviews(self, page: int = 1) -> Page[ActivityReview]:
        return MOCK_ACTIVITY_REVIEWS.to_domain()

    async def fetch_interacted_reviews(self, page: int = 1) -> Page[ActivityReview]:
        return MOCK_ACTIVITY_REVIEWS.to_domain()

    async def fetch_followed_companies(self, page: int = 1) -> Page[FollowedCompany]:
        return MOCK_FOLLOWED_COMPANIES.to_domain()

    async def fetch_interaction_counts(self) -> InteractionCounts:
        return MOCK_INTERACTION_COUNTS.to_domain()
