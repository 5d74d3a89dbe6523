"""Request payloads carried by endpoint descriptors."""

from __future__ import annotations

from pydantic import Field

from adapters.dto.common import WireModel
from core.domain.enums import OAuthProvider


class RefreshTokenRequest(WireModel):
    """Body of reissue, sign-out and resign."""

    refresh_token: str


class LoginRequest(WireModel):
    oauth_token: str
    oauth_provider: OAuthProvider
    authorization_code: str | None = None


class SignUpRequest(WireModel):
    oauth_token: str
    oauth_provider: OAuthProvider
    main_region_id: int
    interested_region_ids: list[int] = Field(default_factory=list)
    nickname: str
    agreements: list[str] = Field(default_factory=list)


class VerifyNicknameRequest(WireModel):
    nickname: str


class EditUserRequest(WireModel):
    main_region_id: int
    interested_region_ids: list[int] = Field(default_factory=list)
    nickname: str


class ReportRequest(WireModel):
    reporter_name: str
    target_name: str
    report_type: str
    description: str


class CommentRequest(WireModel):
    """Body of comment and reply creation."""

    comment: str
    secret: bool = False
