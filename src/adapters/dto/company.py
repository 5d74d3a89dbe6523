"""Company, review, comment and reply DTOs."""

from __future__ import annotations

from pydantic import Field

from adapters.dto.common import PagedBody, WireModel, page_meta, parse_server_datetime
from core.domain.models import (
    SEOUL_CITY_HALL,
    Address,
    Comment,
    Company,
    Coordinate,
    Page,
    Rating,
    Reply,
    Review,
)


class CompanyDTO(WireModel):
    id: int | None = None
    name: str | None = Field(default=None, alias="companyName")
    permitted_at: str | None = Field(default=None, alias="permissionDate")
    lot_number_address: str | None = Field(default=None, alias="siteFullAddress")
    road_name_address: str | None = None
    total_rating: float | None = None
    is_followed: bool | None = Field(default=None, alias="following")
    latitude: float | None = None
    longitude: float | None = None

    def to_domain(self) -> Company:
        return Company(
            id=self.id if self.id is not None else -1,
            name=self.name or "",
            permission_date=parse_server_datetime(self.permitted_at),
            address=Address(
                lot_number_address=self.lot_number_address or "",
                road_name_address=self.road_name_address or "",
            ),
            total_rating=self.total_rating or 0.0,
            is_followed=bool(self.is_followed),
            coordinate=Coordinate(
                latitude=self.latitude if self.latitude is not None else SEOUL_CITY_HALL.latitude,
                longitude=self.longitude if self.longitude is not None else SEOUL_CITY_HALL.longitude,
            ),
        )


class RatingDTO(WireModel):
    work_life_balance: float | None = None
    welfare: float | None = None
    salary: float | None = None
    company_culture: float | None = None
    management: float | None = None

    def to_domain(self) -> Rating:
        return Rating(
            work_life_balance=self.work_life_balance or 0.0,
            welfare=self.welfare or 0.0,
            salary=self.salary or 0.0,
            company_culture=self.company_culture or 0.0,
            management=self.management or 0.0,
        )


class ReviewDTO(WireModel):
    id: int | None = None
    rating: RatingDTO | None = Field(default=None, alias="ratings")
    reviewer: str | None = Field(default=None, alias="author")
    title: str | None = None
    advantage_point: str | None = None
    disadvantage_point: str | None = None
    management_feedback: str | None = None
    job: str | None = Field(default=None, alias="jobRole")
    employment_period: str | None = None
    created_at: str | None = None
    like_count: int | None = None
    comment_count: int | None = None
    is_liked: bool | None = None

    def to_domain(self) -> Review:
        return Review(
            id=self.id if self.id is not None else -1,
            rating=(self.rating or RatingDTO()).to_domain(),
            reviewer=self.reviewer or "",
            title=self.title or "",
            advantage_point=self.advantage_point or "",
            disadvantage_point=self.disadvantage_point or "",
            management_feedback=self.management_feedback or "",
            job=self.job or "",
            employment_period=self.employment_period or "",
            creation_date=parse_server_datetime(self.created_at),
            like_count=self.like_count or 0,
            comment_count=self.comment_count or 0,
            is_liked=bool(self.is_liked),
        )


class ReviewsBody(PagedBody):
    reviews: list[ReviewDTO] = Field(default_factory=list)

    def to_domain(self) -> Page[Review]:
        return Page[Review](items=[r.to_domain() for r in self.reviews], **page_meta(self))


class CommentDTO(WireModel):
    id: int | None = None
    content: str | None = Field(default=None, alias="comment")
    commenter: str | None = Field(default=None, alias="authorName")
    created_at: str | None = None
    reply_count: int | None = None
    is_secret: bool | None = Field(default=None, alias="secret")
    is_visible: bool | None = Field(default=None, alias="visible")

    def to_domain(self) -> Comment:
        return Comment(
            id=self.id if self.id is not None else -1,
            content=self.content or "",
            commenter=self.commenter or "",
            creation_date=parse_server_datetime(self.created_at),
            reply_count=self.reply_count or 0,
            is_secret=bool(self.is_secret),
            is_visible=True if self.is_visible is None else self.is_visible,
        )


class CommentsBody(PagedBody):
    comments: list[CommentDTO] = Field(default_factory=list)

    def to_domain(self) -> Page[Comment]:
        return Page[Comment](items=[c.to_domain() for c in self.comments], **page_meta(self))


class ReplyDTO(WireModel):
    id: int | None = None
    content: str | None = Field(default=None, alias="comment")
    replier: str | None = Field(default=None, alias="authorName")
    created_at: str | None = None
    is_secret: bool | None = Field(default=None, alias="secret")
    is_visible: bool | None = Field(default=None, alias="visible")

    def to_domain(self) -> Reply:
        # Missing flags hide the reply rather than expose it.
        return Reply(
            id=self.id if self.id is not None else -1,
            content=self.content or "",
            replier=self.replier or "",
            creation_date=parse_server_datetime(self.created_at),
            is_secret=True if self.is_secret is None else self.is_secret,
            is_visible=False if self.is_visible is None else self.is_visible,
        )


class RepliesBody(PagedBody):
    replies: list[ReplyDTO] = Field(default_factory=list)

    def to_domain(self) -> Page[Reply]:
        return Page[Reply](items=[r.to_domain() for r in self.replies], **page_meta(self))
