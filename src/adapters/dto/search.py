"""Search result DTOs."""

from __future__ import annotations

from pydantic import Field

from adapters.dto.common import PagedBody, WireModel, page_meta
from core.domain.models import Page, ProposedCompany, SearchedCompany


def format_distance(kilometres: float | None) -> str:
    """Human distance: metres under 1 km, one decimal in km otherwise."""

    if kilometres is None or kilometres < 0:
        return ""
    if kilometres < 1:
        return f"{round(kilometres * 1000)}m"
    return f"{kilometres:.1f}km"


class SearchedCompanyDTO(WireModel):
    id: int | None = None
    name: str | None = Field(default=None, alias="companyName")
    address: str | None = Field(default=None, alias="companyAddress")
    total_rating: float | None = None
    is_followed: bool | None = Field(default=None, alias="following")
    distance: float | None = None
    review_title: str | None = None

    def to_domain(self) -> SearchedCompany:
        return SearchedCompany(
            id=self.id if self.id is not None else -1,
            name=self.name or "",
            address=self.address or "",
            total_rating=self.total_rating or 0.0,
            is_followed=bool(self.is_followed),
            distance=format_distance(self.distance),
            title=self.review_title or "",
        )


class SearchedCompaniesBody(PagedBody):
    companies: list[SearchedCompanyDTO] = Field(default_factory=list)
    total_count: int | None = None

    def to_domain(self) -> Page[SearchedCompany]:
        return Page[SearchedCompany](
            items=[c.to_domain() for c in self.companies],
            total_count=self.total_count or 0,
            **page_meta(self),
        )


class ProposedCompanyDTO(WireModel):
    id: int | None = None
    name: str | None = Field(default=None, alias="companyName")
    address: str | None = Field(default=None, alias="companyAddress")
    total_rating: float | None = None

    def to_domain(self) -> ProposedCompany:
        return ProposedCompany(
            id=self.id if self.id is not None else -1,
            name=self.name or "",
            address=self.address or "",
            total_rating=self.total_rating or 0.0,
        )


class ProposedCompaniesBody(PagedBody):
    companies: list[ProposedCompanyDTO] = Field(default_factory=list)

    def to_domain(self) -> Page[ProposedCompany]:
        return Page[ProposedCompany](items=[c.to_domain() for c in self.companies], **page_meta(self))
