"""Mock facades return fixed, protocol-conforming sample data."""

from __future__ import annotations

import pytest

from adapters.services import (
    DefaultCompanyService,
    MockCompanyService,
    MockHomeService,
    MockLaunchScreenService,
    MockMyPageService,
    MockReviewService,
    MockSearchService,
    MockSignUpService,
)
from core.domain.enums import OAuthProvider, ReportCategory, SearchTheme
from core.domain.models import OAuthResult
from core.interfaces.services import (
    CompanyService,
    HomeService,
    LaunchScreenService,
    MyPageService,
    ReviewService,
    SearchService,
    SignUpService,
)


class TestProtocols:
    """Mocks are drop-in replacements for the network facades."""

    @pytest.mark.parametrize(
        ("mock", "protocol"),
        [
            (MockCompanyService(), CompanyService),
            (MockReviewService(), ReviewService),
            (MockHomeService(), HomeService),
            (MockMyPageService(), MyPageService),
            (MockLaunchScreenService(), LaunchScreenService),
            (MockSignUpService(), SignUpService),
            (MockSearchService(), SearchService),
        ],
    )
    def test_conforms(self, mock, protocol):
        assert isinstance(mock, protocol)

    def test_default_service_conforms(self):
        assert isinstance(DefaultCompanyService(None), CompanyService)


class TestCompanyAndReviewMocks:
    """Sample company and its review thread."""

    @pytest.mark.asyncio
    async def test_company(self):
        company = await MockCompanyService().fetch_company(999)

        assert company.id == 1
        assert company.name == "포레스트병원"
        assert company.coordinate.latitude == 37.5765

    @pytest.mark.asyncio
    async def test_reviews(self):
        page = await MockCompanyService().fetch_reviews(1)

        assert [r.id for r in page.items] == [2, 3, 4]
        assert [r.reviewer for r in page.items] == ["alice", "bob", "charlie"]
        assert page.has_next is False
        assert page.current_page == 1

    @pytest.mark.asyncio
    async def test_comments_and_replies(self):
        service = MockReviewService()

        comments = await service.fetch_comments(3)
        replies = await service.fetch_replies(5)

        assert [c.id for c in comments.items] == [4, 5, 6]
        assert [r.id for r in replies.items] == [29, 30]

    @pytest.mark.asyncio
    async def test_created_comment_echoes_input(self):
        comment = await MockReviewService().create_comment(3, "새 댓글", is_secret=True)

        assert comment.id == 35
        assert comment.commenter == "alice"
        assert comment.content == "새 댓글"
        assert comment.is_secret is True

    @pytest.mark.asyncio
    async def test_created_reply(self):
        reply = await MockReviewService().create_reply(5, "답글")

        assert reply.id == 36
        assert reply.replier == "bob"
        assert reply.is_visible is True

    @pytest.mark.asyncio
    async def test_mutations_succeed(self):
        assert await MockCompanyService().follow_company(1) is None
        assert await MockReviewService().like_review(2) is None


class TestHomeMocks:
    """Sample home feed."""

    @pytest.mark.asyncio
    async def test_user(self):
        user = await MockHomeService().fetch_user()

        assert user.nickname == "테스트2"
        assert user.main_region.id == 1618
        assert len(user.interested_regions) == 3

    @pytest.mark.asyncio
    async def test_feeds(self):
        service = MockHomeService()

        popular = await service.fetch_popular_reviews(37.5, 126.9)
        main = await service.fetch_main_region_reviews(37.5, 126.9)
        interested = await service.fetch_interested_region_reviews(37.5, 126.9)

        assert [r.company.id for r in popular.items] == [88599, 17949]
        assert [r.company.id for r in main.items] == [54664]
        assert [r.company.id for r in interested.items] == [88599]

    @pytest.mark.asyncio
    async def test_activity(self):
        service = MockHomeService()

        mine = await service.fetch_my_reviews()
        followed = await service.fetch_followed_companies()
        counts = await service.fetch_interaction_counts()

        assert [r.id for r in mine.items] == [1564, 1563]
        assert [c.id for c in followed.items] == [209]
        assert (counts.my_review_count, counts.interacted_review_count, counts.followed_company_count) == (2, 2, 3)


class TestSearchMocks:
    """Ten burger shops around Gwanghwamun."""

    @pytest.mark.asyncio
    async def test_searched_companies(self):
        page = await MockSearchService().fetch_searched_companies(SearchTheme.KEYWORD, "버거", 37.5, 126.9)

        assert len(page.items) == 10
        assert page.has_next is True
        assert page.total_count == 2513
        first = page.items[0]
        assert first.id == 7540
        assert first.is_followed is True
        assert first.title == "리뷰 제목"
        assert first.distance == "234m"

    @pytest.mark.asyncio
    async def test_proposed_companies(self):
        page = await MockSearchService().fetch_proposed_companies("버거", 37.5, 126.9)

        assert len(page.items) == 10
        assert page.items[0].name == "바스버거 광화문점"


class TestAccountMocks:
    """Sign-up, launch screen and my-page mocks."""

    @pytest.mark.asyncio
    async def test_terms(self):
        terms = await MockSignUpService().fetch_terms()

        assert [t.id for t in terms] == ["serviceUse", "privacy", "location"]
        assert all(t.is_required for t in terms)

    @pytest.mark.asyncio
    async def test_nickname_always_available(self):
        result = await MockSignUpService().verify_nickname("anything")

        assert result.is_success is True
        assert result.message == "성공"

    @pytest.mark.asyncio
    async def test_districts(self):
        page = await MockSignUpService().search_districts("수유")

        assert page.items[0].button_name == "수유동"

    @pytest.mark.asyncio
    async def test_login_and_sign_up(self):
        service = MockSignUpService()

        pair = await service.login("t", OAuthProvider.KAKAO)
        result = await service.sign_up(OAuthResult(token="t"), 1, [], "up", [])

        assert pair.access_token == "mock-access-token"
        assert result is None

    @pytest.mark.asyncio
    async def test_launch_screen(self):
        pair = await MockLaunchScreenService().token_reissue()

        assert pair.refresh_token == "mock-refresh-token"

    @pytest.mark.asyncio
    async def test_my_page(self):
        service = MockMyPageService()

        assert await service.report("a", "b", ReportCategory.PERSONAL, "d") is None
        assert await service.sign_out() is None
