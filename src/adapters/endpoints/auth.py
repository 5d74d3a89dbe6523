"""Sign-up / auth endpoints. None of them carries an access token."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from adapters.dto.requests import (
    LoginRequest,
    RefreshTokenRequest,
    SignUpRequest,
    VerifyNicknameRequest,
)
from adapters.endpoints.base import ApiEndpoint


class SignUpEndpoint(ApiEndpoint):
    requires_auth: ClassVar[bool] = False


@dataclass(frozen=True)
class TokenReissue(SignUpEndpoint):
    payload: RefreshTokenRequest
    method: ClassVar[str] = "POST"

    @property
    def path(self) -> str:
        return "/api/auth/reissue"

    def body(self) -> dict[str, Any]:
        return self.payload.to_wire()


@dataclass(frozen=True)
class Login(SignUpEndpoint):
    payload: LoginRequest
    method: ClassVar[str] = "POST"

    @property
    def path(self) -> str:
        return "/api/auth/login"

    def body(self) -> dict[str, Any]:
        return self.payload.to_wire()


@dataclass(frozen=True)
class SignUp(SignUpEndpoint):
    payload: SignUpRequest
    method: ClassVar[str] = "POST"

    @property
    def path(self) -> str:
        return "/api/auth/signup"

    def body(self) -> dict[str, Any]:
        return self.payload.to_wire()


@dataclass(frozen=True)
class FetchTerms(SignUpEndpoint):
    @property
    def path(self) -> str:
        return "/api/auth/terms"


@dataclass(frozen=True)
class VerifyNickname(SignUpEndpoint):
    payload: VerifyNicknameRequest
    method: ClassVar[str] = "POST"

    @property
    def path(self) -> str:
        return "/api/users/nickname-verify"

    def body(self) -> dict[str, Any]:
        return self.payload.to_wire()


@dataclass(frozen=True)
class SearchLegalDistricts(SignUpEndpoint):
    keyword: str
    page: int = 1

    @property
    def path(self) -> str:
        return "/api/legal-districts"

    def query_params(self) -> dict[str, Any]:
        return {"keyword": self.keyword, "page": self.page}
