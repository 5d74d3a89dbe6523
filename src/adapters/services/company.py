"""Company and review facades."""

from __future__ import annotations

from adapters.dto.company import (
    CommentDTO,
    CommentsBody,
    CompanyDTO,
    RatingDTO,
    RepliesBody,
    ReplyDTO,
    ReviewDTO,
    ReviewsBody,
)
from adapters.dto.requests import CommentRequest
from adapters.endpoints.base import DEFAULT_PAGE_SIZE
from adapters.endpoints.company import (
    FetchCompany,
    FetchCompanyReviews,
    FollowCompany,
    UnfollowCompany,
)
from adapters.endpoints.review import (
    CreateComment,
    CreateReply,
    FetchComments,
    FetchReplies,
    LikeReview,
    UnlikeReview,
)
from adapters.services._base import SessionFacade
from core.domain.models import Comment, Company, Page, Reply, Review
from core.interfaces.session import NetworkSession


class DefaultCompanyService(SessionFacade):
    def __init__(self, session: NetworkSession, *, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        super().__init__(session)
        self.page_size = page_size

    async def fetch_company(self, company_id: int) -> Company:
        dto = await self._fetch(FetchCompany(company_id), CompanyDTO)
        return dto.to_domain()

    async def fetch_reviews(self, company_id: int, page: int = 1) -> Page[Review]:
        body = await self._fetch(FetchCompanyReviews(company_id, page, self.page_size), ReviewsBody)
        return body.to_domain()

    async def follow_company(self, company_id: int) -> None:
        await self._execute(FollowCompany(company_id))

    async def unfollow_company(self, company_id: int) -> None:
        await self._execute(UnfollowCompany(company_id))


class DefaultReviewService(SessionFacade):
    def __init__(self, session: NetworkSession, *, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        super().__init__(session)
        self.page_size = page_size

    async def fetch_comments(self, review_id: int, page: int = 1) -> Page[Comment]:
        body = await self._fetch(FetchComments(review_id, page, self.page_size), CommentsBody)
        return body.to_domain()

    async def fetch_replies(self, comment_id: int, page: int = 1) -> Page[Reply]:
        body = await self._fetch(FetchReplies(comment_id, page, self.page_size), RepliesBody)
        return body.to_domain()

    async def create_comment(self, review_id: int, content: str, is_secret: bool = False) -> Comment:
        payload = CommentRequest(comment=content, secret=is_secret)
        dto = await self._fetch(CreateComment(review_id, payload), CommentDTO)
        return dto.to_domain()

    async def create_reply(self, comment_id: int, content: str, is_secret: bool = False) -> Reply:
        payload = CommentRequest(comment=content, secret=is_secret)
        dto = await self._fetch(CreateReply(comment_id, payload), ReplyDTO)
        return dto.to_domain()

    async def like_review(self, review_id: int) -> None:
        await self._execute(LikeReview(review_id))

    async def unlike_review(self, review_id: int) -> None:
        await self._execute(UnlikeReview(review_id))


MOCK_COMPANY = CompanyDTO(
    id=1,
    name="포레스트병원",
    permitted_at="2025-02-28T00:00:00",
    lot_number_address="서울특별시 종로구 원남동 177-1",
    road_name_address="서울특별시 종로구 율곡로 164, 지하1,2층,1층일부,2~8층 (원남동)",
    total_rating=3.3,
    is_followed=False,
    latitude=37.5765,
    longitude=126.9972,
)

MOCK_REVIEWS = ReviewsBody(
    reviews=[
        ReviewDTO(
            id=2,
            rating=RatingDTO(work_life_balance=2.5, welfare=3.0, salary=4.0, company_culture=2.5, management=2.0),
            reviewer="alice",
            title="좋은 회사입니다.",
            advantage_point="복지가 좋아요.",
            disadvantage_point="야근이 많아요.",
            management_feedback="소통이 필요합니다.",
            job="백엔드 개발자",
            employment_period="1년 이상",
            created_at="2025-05-23T17:40:33",
            like_count=3,
            comment_count=19,
            is_liked=True,
        ),
        ReviewDTO(
            id=3,
            rating=RatingDTO(work_life_balance=3.5, welfare=3.5, salary=3.0, company_culture=4.0, management=3.0),
            reviewer="bob",
            title="별로였어요.",
            advantage_point="연봉이 높아요.",
            disadvantage_point="상사가 별로예요.",
            management_feedback="리더십이 부족해요.",
            job="프론트엔드 개발자",
            employment_period="1년 미만",
            created_at="2025-05-23T17:40:33",
            like_count=3,
            comment_count=3,
            is_liked=True,
        ),
        ReviewDTO(
            id=4,
            rating=RatingDTO(work_life_balance=4.0, welfare=4.5, salary=3.5, company_culture=4.0, management=3.0),
            reviewer="charlie",
            title="그럭저럭 괜찮아요.",
            advantage_point="동료들",
            disadvantage_point="동료들...",
            management_feedback="교육 기회가 부족해요.",
            job="디자이너",
            employment_period="2년 이상",
            created_at="2025-05-23T17:40:33",
            like_count=3,
            comment_count=6,
            is_liked=True,
        ),
    ],
    has_next=False,
    current_page=1,
)

MOCK_COMMENTS = CommentsBody(
    comments=[
        CommentDTO(
            id=4,
            content="리뷰3 - 첫 번째 댓글입니다.",
            commenter="alice",
            created_at="2025-05-23T17:43:51",
            reply_count=0,
            is_secret=True,
            is_visible=True,
        ),
        CommentDTO(
            id=5,
            content="리뷰3 - 두 번째 댓글입니다.",
            commenter="bob",
            created_at="2025-05-23T17:43:51",
            reply_count=2,
            is_secret=False,
            is_visible=True,
        ),
        CommentDTO(
            id=6,
            content="리뷰3 - 세 번째 댓글입니다.",
            commenter="charlie",
            created_at="2025-05-23T17:43:51",
            reply_count=0,
            is_secret=True,
            is_visible=True,
        ),
    ],
    has_next=False,
    current_page=1,
)

MOCK_REPLIES = RepliesBody(
    replies=[
        ReplyDTO(
            id=29,
            content="답글입니다 하이요~",
            replier="alice",
            created_at="2025-05-29T15:10:28",
            is_secret=False,
            is_visible=True,
        ),
        ReplyDTO(
            id=30,
            content="답글입니다 하이요~",
            replier="alice",
            created_at="2025-05-29T15:12:22",
            is_secret=False,
            is_visible=True,
        ),
    ],
    has_next=False,
    current_page=1,
)


class MockCompanyService:
    """Fixed sample company (id 1) with three reviews; ids are ignored."""

    async def fetch_company(self, company_id: int) -> Company:
        return MOCK_COMPANY.to_domain()

    async def fetch_reviews(self, company_id: int, page: int = 1) -> Page[Review]:
        return MOCK_REVIEWS.to_domain()

    async def follow_company(self, company_id: int) -> None:
        return None

    async def unfollow_company(self, company_id: int) -> None:
        return None


class MockReviewService:
    """Three comments (ids 4-6), two replies (ids 29-30).

    Created comments get id 35 (author "alice"), created replies id 36
    (author "bob"); content and secrecy echo the arguments.
    """

    async def fetch_comments(self, review_id: int, page: int = 1) -> Page[Comment]:
        return MOCK_COMMENTS.to_domain()

    async def fetch_replies(self, comment_id: int, page: int = 1) -> Page[Reply]:
        return MOCK_REPLIES.to_domain()

    async def create_comment(self, review_id: int, content: str, is_secret: bool = False) -> Comment:
        return CommentDTO(
            id=35,
            content=content,
            commenter="alice",
            created_at="2025-05-29T15:19:25.036526",
            reply_count=0,
            is_secret=is_secret,
            is_visible=True,
        ).to_domain()

    async def create_reply(self, comment_id: int, content: str, is_secret: bool = False) -> Reply:
        return ReplyDTO(
            id=36,
            content=content,
            replier="bob",
            created_at="2025-05-29T16:23:30.353742",
            is_secret=is_secret,
            is_visible=True,
        ).to_domain()

    async def like_review(self, review_id: int) -> None:
        return None

    async def unlike_review(self, review_id: int) -> None:
        return None
