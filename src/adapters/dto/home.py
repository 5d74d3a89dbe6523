"""Home feed and "my activity" DTOs."""

from __future__ import annotations

from pydantic import Field

from adapters.dto.common import PagedBody, WireModel, page_meta, parse_server_datetime
from adapters.dto.company import ReviewDTO
from adapters.dto.search import SearchedCompanyDTO
from core.domain.models import (
    ActivityReview,
    FollowedCompany,
    HomeReview,
    InteractionCounts,
    Page,
    Region,
    User,
)


class RegionDTO(WireModel):
    id: int | None = None
    address: str | None = None

    def to_domain(self) -> Region:
        return Region(id=self.id if self.id is not None else -1, address=self.address or "")


class UserDTO(WireModel):
    nickname: str | None = None
    main_region_id: int | None = None
    main_region_address: str | None = None
    interested_regions: list[RegionDTO] | None = None

    def to_domain(self) -> User:
        return User(
            nickname=self.nickname or "",
            main_region=Region(
                id=self.main_region_id if self.main_region_id is not None else -1,
                address=self.main_region_address or "",
            ),
            interested_regions=[r.to_domain() for r in self.interested_regions or []],
        )


class HomeReviewDTO(WireModel):
    company: SearchedCompanyDTO = Field(default_factory=SearchedCompanyDTO)
    review: ReviewDTO = Field(default_factory=ReviewDTO, alias="companyReview")

    def to_domain(self) -> HomeReview:
        return HomeReview(company=self.company.to_domain(), review=self.review.to_domain())


class HomeReviewsBody(PagedBody):
    reviews: list[HomeReviewDTO] = Field(default_factory=list)

    def to_domain(self) -> Page[HomeReview]:
        return Page[HomeReview](items=[r.to_domain() for r in self.reviews], **page_meta(self))


class ActivityReviewDTO(WireModel):
    id: int | None = None
    total_rating: float | None = None
    title: str | None = None
    company_id: int | None = None
    company_name: str | None = None
    company_address: str | None = None
    job: str | None = Field(default=None, alias="jobRole")
    created_at: str | None = None
    like_count: int | None = None
    comment_count: int | None = None

    def to_domain(self) -> ActivityReview:
        return ActivityReview(
            id=self.id if self.id is not None else -1,
            total_rating=self.total_rating or 0.0,
            title=self.title or "",
            company_id=self.company_id if self.company_id is not None else -1,
            company_name=self.company_name or "",
            company_address=self.company_address or "",
            job=self.job or "",
            creation_date=parse_server_datetime(self.created_at),
            like_count=self.like_count or 0,
            comment_count=self.comment_count or 0,
        )


class ActivityReviewsBody(PagedBody):
    reviews: list[ActivityReviewDTO] = Field(default_factory=list)

    def to_domain(self) -> Page[ActivityReview]:
        return Page[ActivityReview](items=[r.to_domain() for r in self.reviews], **page_meta(self))


class FollowedCompanyDTO(WireModel):
    id: int | None = None
    name: str | None = Field(default=None, alias="companyName")
    address: str | None = Field(default=None, alias="companyAddress")
    total_rating: float | None = None
    review_title: str | None = None

    def to_domain(self) -> FollowedCompany:
        return FollowedCompany(
            id=self.id if self.id is not None else -1,
            name=self.name or "",
            address=self.address or "",
            total_rating=self.total_rating or 0.0,
            review_title=self.review_title,
        )


class FollowedCompaniesBody(PagedBody):
    companies: list[FollowedCompanyDTO] = Field(default_factory=list)

    def to_domain(self) -> Page[FollowedCompany]:
        return Page[FollowedCompany](items=[c.to_domain() for c in self.companies], **page_meta(self))


class InteractionCountsDTO(WireModel):
    my_review_count: int | None = None
    interacted_review_count: int | None = Field(default=None, alias="likeOrCommentReviewCount")
    followed_company_count: int | None = Field(default=None, alias="followCompanyCount")

    def to_domain(self) -> InteractionCounts:
        return InteractionCounts(
            my_review_count=self.my_review_count or 0,
            interacted_review_count=self.interacted_review_count or 0,
            followed_company_count=self.followed_company_count or 0,
        )
