"""Shared wire shapes: response envelopes, paged bodies and date parsing.

Why pydantic for DTOs:
- Aliases map the server's camelCase keys onto snake_case fields.
- Every optional field is `None` by default; `to_domain()` decides the
  fallback, so a missing field never fails decoding.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")

SERVER_TZ = timezone(timedelta(hours=9), "KST")
SERVER_DATE_FORMATS = ("%Y-%m-%dT%H:%M:%S.%f", "%Y-%m-%dT%H:%M:%S")


class WireModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
        frozen=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """JSON-ready dict keyed by the server's field names."""

        return self.model_dump(mode="json", by_alias=True)


class NetworkResponse(WireModel, Generic[T]):
    """Success envelope: `{"data": T, "success": true, "message": str}`."""

    data: T
    success: bool = True
    message: str = ""


class FailResponse(WireModel):
    """Failure envelope: `{"code": int, "success": false, "message": str}`."""

    code: int | None = None
    success: bool = False
    message: str | None = None


class PagedBody(WireModel):
    """Pagination metadata shared by every collection body."""

    has_next: bool = False
    current_page: int = 1


def parse_server_datetime(raw: str | None) -> datetime | None:
    """Parse the server's local timestamp (with or without fractions).

    Returns None when the value is missing or unparseable.
    """

    if not raw:
        return None
    for fmt in SERVER_DATE_FORMATS:
        try:
            return datetime.strptime(raw, fmt).replace(tzinfo=SERVER_TZ)
        except ValueError:
            continue
    return None


def format_server_datetime(value: datetime) -> str:
    return value.astimezone(SERVER_TZ).strftime("%Y-%m-%dT%H:%M:%S")


def page_meta(body: PagedBody) -> dict[str, Any]:
    return {"has_next": body.has_next, "current_page": body.current_page}
