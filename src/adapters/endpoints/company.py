"""Company endpoints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from adapters.endpoints.base import DEFAULT_PAGE_SIZE, ApiEndpoint, paging


class CompanyEndpoint(ApiEndpoint):
    pass


@dataclass(frozen=True)
class FetchCompany(CompanyEndpoint):
    company_id: int

    @property
    def path(self) -> str:
        return f"/api/companies/{self.company_id}"


@dataclass(frozen=True)
class FetchCompanyReviews(CompanyEndpoint):
    company_id: int
    page: int = 1
    size: int = DEFAULT_PAGE_SIZE

    @property
    def path(self) -> str:
        return f"/api/companies/{self.company_id}/reviews"

    def query_params(self) -> dict[str, Any]:
        return paging(self.page, self.size)


@dataclass(frozen=True)
class FollowCompany(CompanyEndpoint):
    company_id: int
    method: ClassVar[str] = "POST"

    @property
    def path(self) -> str:
        return f"/api/companies/{self.company_id}/follows"


@dataclass(frozen=True)
class UnfollowCompany(FollowCompany):
    method: ClassVar[str] = "DELETE"
