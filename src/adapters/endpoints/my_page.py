"""My-page endpoints (profile edit, report, resign, sign-out)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar

from adapters.dto.requests import EditUserRequest, RefreshTokenRequest, ReportRequest
from adapters.endpoints.base import ApiEndpoint


class MyPageEndpoint(ApiEndpoint):
    pass


@dataclass(frozen=True)
class EditUser(MyPageEndpoint):
    payload: EditUserRequest
    method: ClassVar[str] = "PUT"

    @property
    def path(self) -> str:
        return "/api/users/me"

    def body(self) -> dict[str, Any]:
        return self.payload.to_wire()


@dataclass(frozen=True)
class Report(MyPageEndpoint):
    payload: ReportRequest
    method: ClassVar[str] = "POST"

    @property
    def path(self) -> str:
        return "/api/reports"

    def body(self) -> dict[str, Any]:
        return self.payload.to_wire()


@dataclass(frozen=True)
class Resign(MyPageEndpoint):
    payload: RefreshTokenRequest
    method: ClassVar[str] = "DELETE"

    @property
    def path(self) -> str:
        return "/api/users/me"

    def body(self) -> dict[str, Any]:
        return self.payload.to_wire()


@dataclass(frozen=True)
class SignOut(MyPageEndpoint):
    payload: RefreshTokenRequest
    method: ClassVar[str] = "POST"

    @property
    def path(self) -> str:
        return "/api/auth/logout"

    def body(self) -> dict[str, Any]:
        return self.payload.to_wire()
