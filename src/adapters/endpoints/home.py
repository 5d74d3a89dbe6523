"""Home feed endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from adapters.endpoints.base import DEFAULT_PAGE_SIZE, NEWEST_FIRST, ApiEndpoint, paging


class HomeEndpoint(ApiEndpoint):
    pass


@dataclass(frozen=True)
class FetchUser(HomeEndpoint):
    @property
    def path(self) -> str:
        return "/api/users/me"


@dataclass(frozen=True)
class _LocatedPage(HomeEndpoint):
    latitude: float
    longitude: float
    page: int = 1
    size: int = DEFAULT_PAGE_SIZE

    sort: str | None = None

    def query_params(self) -> dict[str, Any]:
        return {
            "latitude": self.latitude,
            "longitude": self.longitude,
            **paging(self.page, self.size, sort=self.sort),
        }


@dataclass(frozen=True)
class FetchPopularReviews(_LocatedPage):
    @property
    def path(self) -> str:
        return "/api/reviews/popular"


@dataclass(frozen=True)
class FetchMainRegionReviews(_LocatedPage):
    sort: str | None = NEWEST_FIRST

    @property
    def path(self) -> str:
        return "/api/reviews/main-region"


@dataclass(frozen=True)
class FetchInterestedRegionReviews(_LocatedPage):
    sort: str | None = NEWEST_FIRST

    @property
    def path(self) -> str:
        return "/api/reviews/interested-region"


@dataclass(frozen=True)
class _ActivityPage(HomeEndpoint):
    page: int = 1
    size: int = DEFAULT_PAGE_SIZE

    def query_params(self) -> dict[str, Any]:
        return paging(self.page, self.size, sort=NEWEST_FIRST)


@dataclass(frozen=True)
class FetchMyReviews(_ActivityPage):
    @property
    def path(self) -> str:
        return "/api/users/me/reviews"


@dataclass(frozen=True)
class FetchInteractedReviews(_ActivityPage):
    @property
    def path(self) -> str:
        return "/api/users/me/interacted-reviews"


@dataclass(frozen=True)
class FetchFollowedCompanies(_ActivityPage):
    @property
    def path(self) -> str:
        return "/api/users/me/followed-companies"


@dataclass(frozen=True)
class FetchInteractionCounts(HomeEndpoint):
    @property
    def path(self) -> str:
        return "/api/users/me/interaction-counts"
