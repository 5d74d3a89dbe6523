"""Sign-up, login and legal-district DTOs."""

from __future__ import annotations

from pydantic import Field

from adapters.dto.common import PagedBody, WireModel, page_meta
from core.domain.errors import DecodingError
from core.domain.models import District, Page, TermsData, TokenPair


class LoginResponse(WireModel):
    """Body returned by login and reissue.

    Reissue may omit `refreshToken`; the caller keeps the current one then.
    """

    access_token: str
    refresh_token: str | None = None

    def to_domain(self, *, fallback_refresh_token: str | None = None) -> TokenPair:
        refresh_token = self.refresh_token or fallback_refresh_token
        if not self.access_token or not refresh_token:
            raise DecodingError("Token response is missing a token")
        return TokenPair(access_token=self.access_token, refresh_token=refresh_token)


class TermDTO(WireModel):
    term: str | None = None
    url: str | None = None
    code: str | None = None
    required: bool | None = None

    def to_domain(self) -> TermsData:
        return TermsData(
            term=self.term or "",
            url=self.url or "",
            code=self.code or "",
            is_required=bool(self.required),
        )


class TermsListResponse(WireModel):
    terms: list[TermDTO] = Field(default_factory=list)

    def to_domain(self) -> list[TermsData]:
        return [t.to_domain() for t in self.terms]


class LegalDistrictDTO(WireModel):
    id: int | None = None
    name: str | None = None

    def to_domain(self) -> District:
        return District(id=self.id if self.id is not None else -1, name=self.name or "")


class LegalDistrictsBody(PagedBody):
    legal_districts: list[LegalDistrictDTO] = Field(default_factory=list)

    def to_domain(self) -> Page[District]:
        return Page[District](items=[d.to_domain() for d in self.legal_districts], **page_meta(self))
