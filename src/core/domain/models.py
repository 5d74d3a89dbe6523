"""Domain value objects (Pydantic v2).

Why Pydantic in the domain:
- Frozen models give immutable snapshots that callers own once returned.
- Validation and `model_dump` come for free for the local stores and the CLI.

Note:
- These models describe *what* the data is. Wire shapes (camelCase keys,
  optional fields) live in `adapters.dto` and are mapped here.
"""

from __future__ import annotations

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from core.domain.enums import OAuthProvider

T = TypeVar("T")


class DomainModel(BaseModel):
    model_config = ConfigDict(frozen=True)


class TokenPair(DomainModel):
    """Access/refresh token pair owned by the token store."""

    access_token: str = Field(..., min_length=1, description="Bearer access token.")
    refresh_token: str = Field(..., min_length=1, description="Token used to reissue the pair.")

    def __repr__(self) -> str:
        return "TokenPair(access_token='***', refresh_token='***')"


class Page(DomainModel, Generic[T]):
    """One page of a paginated collection.

    `current_page` is 1-based; `has_next=False` marks the last page.
    """

    items: list[T] = Field(default_factory=list)
    has_next: bool = False
    current_page: int = 1
    total_count: int | None = None

    @property
    def next_page(self) -> int | None:
        return self.current_page + 1 if self.has_next else None


class Address(DomainModel):
    lot_number_address: str = ""
    road_name_address: str = ""

    @property
    def display_text(self) -> str:
        return self.road_name_address if not self.lot_number_address else self.lot_number_address


class Coordinate(DomainModel):
    latitude: float
    longitude: float


SEOUL_CITY_HALL = Coordinate(latitude=37.5665, longitude=126.9780)


class Company(DomainModel):
    id: int
    name: str
    permission_date: datetime | None = None
    address: Address
    total_rating: float = 0.0
    is_followed: bool = False
    coordinate: Coordinate = SEOUL_CITY_HALL


class Rating(DomainModel):
    work_life_balance: float = 0.0
    welfare: float = 0.0
    salary: float = 0.0
    company_culture: float = 0.0
    management: float = 0.0

    @property
    def total(self) -> float:
        values = (
            self.work_life_balance,
            self.welfare,
            self.salary,
            self.company_culture,
            self.management,
        )
        return sum(values) / len(values)

    @property
    def display_text(self) -> str:
        return str(round(self.total, 1))


class Review(DomainModel):
    id: int
    rating: Rating = Field(default_factory=Rating)
    reviewer: str = ""
    title: str = ""
    advantage_point: str = ""
    disadvantage_point: str = ""
    management_feedback: str = ""
    job: str = ""
    employment_period: str = ""
    creation_date: datetime | None = None
    like_count: int = 0
    comment_count: int = 0
    is_liked: bool = False


class Comment(DomainModel):
    id: int
    content: str = ""
    commenter: str = ""
    creation_date: datetime | None = None
    reply_count: int = 0
    is_secret: bool = False
    is_visible: bool = True


class Reply(DomainModel):
    id: int
    content: str = ""
    replier: str = ""
    creation_date: datetime | None = None
    is_secret: bool = True
    is_visible: bool = False


class Region(DomainModel):
    id: int
    address: str = ""


class User(DomainModel):
    nickname: str = ""
    main_region: Region
    interested_regions: list[Region] = Field(default_factory=list)


class SearchedCompany(DomainModel):
    id: int
    name: str = ""
    address: str = ""
    total_rating: float = 0.0
    is_followed: bool = False
    distance: str = ""
    title: str = ""


class ProposedCompany(DomainModel):
    id: int
    name: str = ""
    address: str = ""
    total_rating: float = 0.0


class HomeReview(DomainModel):
    company: SearchedCompany
    review: Review


class ActivityReview(DomainModel):
    id: int
    total_rating: float = 0.0
    title: str = ""
    company_id: int = -1
    company_name: str = ""
    company_address: str = ""
    job: str = ""
    creation_date: datetime | None = None
    like_count: int = 0
    comment_count: int = 0


class FollowedCompany(DomainModel):
    id: int
    name: str = ""
    address: str = ""
    total_rating: float = 0.0
    review_title: str | None = None


class InteractionCounts(DomainModel):
    my_review_count: int = 0
    interacted_review_count: int = 0
    followed_company_count: int = 0


class District(DomainModel):
    """Legal district (법정동) picked during sign-up."""

    id: int = 0
    name: str = ""

    @property
    def button_name(self) -> str:
        parts = self.name.split(" ")
        return parts[-1] if parts else self.name


class TermsData(DomainModel):
    term: str
    url: str = ""
    code: str
    is_required: bool = False

    @property
    def id(self) -> str:
        return self.code


class VerifyResult(DomainModel):
    is_success: bool
    message: str = ""


class OAuthResult(DomainModel):
    """Credentials returned by a social login SDK."""

    token: str
    provider: OAuthProvider = OAuthProvider.NONE
    authorization_code: str | None = None


class RecentSearchTerm(DomainModel):
    search_term: str = Field(..., min_length=1)
    searched_at: datetime = Field(default_factory=datetime.now)

    @property
    def key(self) -> str:
        return self.search_term


class SavedCompany(DomainModel):
    id: int
    name: str = ""
    address: str = ""
    saved_at: datetime = Field(default_factory=datetime.now)

    @property
    def key(self) -> int:
        return self.id
