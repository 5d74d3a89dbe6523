"""Company search facade."""

from __future__ import annotations

from adapters.dto.search import (
    ProposedCompaniesBody,
    ProposedCompanyDTO,
    SearchedCompaniesBody,
    SearchedCompanyDTO,
)
from adapters.endpoints.base import DEFAULT_PAGE_SIZE
from adapters.endpoints.search import FetchProposedCompanies, searched_companies_endpoint
from adapters.services._base import SessionFacade
from core.domain.enums import SearchTheme
from core.domain.models import Page, ProposedCompany, SearchedCompany
from core.interfaces.session import NetworkSession


class DefaultSearchService(SessionFacade):
    def __init__(self, session: NetworkSession, *, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        super().__init__(session)
        self.page_size = page_size

    async def fetch_searched_companies(
        self,
        theme: SearchTheme,
        keyword: str,
        latitude: float,
        longitude: float,
        page: int = 1,
    ) -> Page[SearchedCompany]:
        endpoint = searched_companies_endpoint(theme, keyword, latitude, longitude, page, self.page_size)
        return (await self._fetch(endpoint, SearchedCompaniesBody)).to_domain()

    async def fetch_proposed_companies(
        self,
        keyword: str,
        latitude: float,
        longitude: float,
    ) -> Page[ProposedCompany]:
        endpoint = FetchProposedCompanies(keyword, latitude, longitude)
        return (await self._fetch(endpoint, ProposedCompaniesBody)).to_domain()


# (id, name, address, total rating, distance in km)
_BURGER_SHOPS = [
    (7540, "바스버거 광화문점", "서울특별시 중구 무교동 11 광일빌딩 지하1층", 3.3, 0.23416418140220643),
    (12681, "브루클린더버거조인트 청계천점", "서울특별시 중구 무교동 77", 0.0, 0.2649729031981153),
    (3650, "침스버거", "서울특별시 종로구 종로1가 24 르메이에르종로타운1", 0.0, 0.4694415423917943),
    (4018, "브루클린 더 버거 조인트 광화문 디타워점", "서울특별시 종로구 청진동 246 D타워 123,124,125호", 0.0, 0.5146869003560908),
    (8085, "경성함바그&버거스캔들 명동점", "서울특별시 중구 을지로2가 199-52 2층", 0.0, 0.5577430254969458),
    (8887, "바스버거 서소문시청역점", "서울특별시 중구 서소문동 120-28", 0.0, 0.5953119049246598),
    (4019, "주식회사 티시스 엘꾸비또, 버거링맨", "서울특별시 종로구 신문로1가 226 흥국생명빌딩 지하2층", 0.0, 0.6183172035135013),
    (2721, "버거킹 종로구청점", "서울특별시 종로구 수송동 68-1 호수빌딩 101호,201호", 0.0, 0.7100229153818288),
    (7295, "피크버거&스테이크", "서울특별시 중구 저동1가 114 대신파이낸스센터(Daishin Finance Center)", 0.0, 0.8098895610288),
    (12101, "버거운 녀석들", "서울특별시 중구 남대문로5가 21-1", 0.0, 0.880889544495731),
]

MOCK_SEARCHED_COMPANIES = SearchedCompaniesBody(
    companies=[
        SearchedCompanyDTO(
            id=company_id,
            name=name,
            address=address,
            total_rating=rating,
            is_followed=company_id == 7540,
            distance=distance,
            review_title="리뷰 제목" if company_id == 7540 else None,
        )
        for company_id, name, address, rating, distance in _BURGER_SHOPS
    ],
    has_next=True,
    current_page=1,
    total_count=2513,
)

MOCK_PROPOSED_COMPANIES = ProposedCompaniesBody(
    companies=[
        ProposedCompanyDTO(id=company_id, name=name, address=address, total_rating=rating)
        for company_id, name, address, rating, _ in _BURGER_SHOPS
    ],
    has_next=True,
    current_page=1,
)


class MockSearchService:
    """Ten burger shops around Gwanghwamun (2513 results in total)."""

    async def fetch_searched_companies(
        self,
        theme: SearchTheme,
        keyword: str,
        latitude: float,
        longitude: float,
        page: int = 1,
    ) -> Page[SearchedCompany]:
        return MOCK_SEARCHED_COMPANIES.to_domain()

    async def fetch_proposed_companies(
        self,
        keyword: str,
        latitude: float,
        longitude: float,
    ) -> Page[ProposedCompany]:
        return MOCK_PROPOSED_COMPANIES.to_domain()
