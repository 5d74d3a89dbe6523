"""Company search endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from adapters.endpoints.base import DEFAULT_PAGE_SIZE, ApiEndpoint, paging
from core.domain.enums import SearchTheme


class SearchEndpoint(ApiEndpoint):
    pass


@dataclass(frozen=True)
class SearchCompanies(SearchEndpoint):
    keyword: str
    latitude: float
    longitude: float
    page: int = 1
    size: int = DEFAULT_PAGE_SIZE

    @property
    def path(self) -> str:
        return "/api/companies/search"

    def query_params(self) -> dict[str, Any]:
        return {
            "keyword": self.keyword,
            "latitude": self.latitude,
            "longitude": self.longitude,
            **paging(self.page, self.size),
        }


@dataclass(frozen=True)
class _AreaCompanies(SearchEndpoint):
    latitude: float
    longitude: float
    page: int = 1
    size: int = DEFAULT_PAGE_SIZE

    def query_params(self) -> dict[str, Any]:
        return {"latitude": self.latitude, "longitude": self.longitude, **paging(self.page, self.size)}


@dataclass(frozen=True)
class FetchNearbyCompanies(_AreaCompanies):
    @property
    def path(self) -> str:
        return "/api/companies/nearby"


@dataclass(frozen=True)
class FetchMainRegionCompanies(_AreaCompanies):
    @property
    def path(self) -> str:
        return "/api/companies/main-region"


@dataclass(frozen=True)
class FetchInterestedRegionCompanies(_AreaCompanies):
    @property
    def path(self) -> str:
        return "/api/companies/interested-region"


@dataclass(frozen=True)
class FetchProposedCompanies(SearchEndpoint):
    keyword: str
    latitude: float
    longitude: float

    @property
    def path(self) -> str:
        return "/api/companies/suggestions"

    def query_params(self) -> dict[str, Any]:
        return {"keyword": self.keyword, "latitude": self.latitude, "longitude": self.longitude}


def searched_companies_endpoint(
    theme: SearchTheme,
    keyword: str,
    latitude: float,
    longitude: float,
    page: int = 1,
    size: int = DEFAULT_PAGE_SIZE,
) -> SearchEndpoint:
    """Pick the endpoint serving a search theme."""

    theme = SearchTheme(theme)
    if theme is SearchTheme.KEYWORD:
        return SearchCompanies(keyword, latitude, longitude, page, size)
    if theme is SearchTheme.NEAR:
        return FetchNearbyCompanies(latitude, longitude, page, size)
    if theme is SearchTheme.NEIGHBORHOOD:
        return FetchMainRegionCompanies(latitude, longitude, page, size)
    if theme is SearchTheme.INTEREST:
        return FetchInterestedRegionCompanies(latitude, longitude, page, size)
    raise ValueError(f"Unsupported search theme: {theme!r}")
