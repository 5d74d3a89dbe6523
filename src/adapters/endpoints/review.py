"""Review, comment and reply endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from adapters.dto.requests import CommentRequest
from adapters.endpoints.base import DEFAULT_PAGE_SIZE, NEWEST_FIRST, ApiEndpoint, paging


class ReviewEndpoint(ApiEndpoint):
    pass


@dataclass(frozen=True)
class FetchComments(ReviewEndpoint):
    review_id: int
    page: int = 1
    size: int = DEFAULT_PAGE_SIZE

    @property
    def path(self) -> str:
        return f"/api/reviews/{self.review_id}/comments"

    def query_params(self) -> dict[str, Any]:
        return paging(self.page, self.size, sort=NEWEST_FIRST)


@dataclass(frozen=True)
class CreateComment(ReviewEndpoint):
    review_id: int
    payload: CommentRequest
    method: ClassVar[str] = "POST"

    @property
    def path(self) -> str:
        return f"/api/reviews/{self.review_id}/comments"

    def body(self) -> dict[str, Any]:
        return self.payload.to_wire()


@dataclass(frozen=True)
class FetchReplies(ReviewEndpoint):
    comment_id: int
    page: int = 1
    size: int = DEFAULT_PAGE_SIZE

    @property
    def path(self) -> str:
        return f"/api/comments/{self.comment_id}/replies"

    def query_params(self) -> dict[str, Any]:
        return paging(self.page, self.size, sort=NEWEST_FIRST)


@dataclass(frozen=True)
class CreateReply(ReviewEndpoint):
    comment_id: int
    payload: CommentRequest
    method: ClassVar[str] = "POST"

    @property
    def path(self) -> str:
        return f"/api/comments/{self.comment_id}/replies"

    def body(self) -> dict[str, Any]:
        return self.payload.to_wire()


@dataclass(frozen=True)
class LikeReview(ReviewEndpoint):
    review_id: int
    method: ClassVar[str] = "POST"

    @property
    def path(self) -> str:
        return f"/api/reviews/{self.review_id}/likes"


@dataclass(frozen=True)
class UnlikeReview(LikeReview):
    method: ClassVar[str] = "DELETE"
