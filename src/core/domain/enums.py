"""Closed value sets shared by the domain and the wire layer."""

from __future__ import annotations

from enum import Enum, IntEnum


class ResponseCode(IntEnum):
    """Business error codes carried in server failure bodies."""

    USER_NOT_FOUND = 2010
    NICKNAME_EXIST = 2011
    NEED_AUTHORIZATION = 3000
    NOT_MEMBER = 3001
    INVALID_ACCESS_TOKEN = 3002
    INVALID_REFRESH_TOKEN = 3003
    NO_PERMISSION = 3004
    INVALID_SOCIAL_TOKEN = 3101
    NOT_SUPPORTED_SOCIAL_LOGIN_PROVIDER = 3102
    NOT_EXIST_COMPANY = 4001
    NOT_EXIST_REGION = 4002
    NOT_EXIST_REVIEW = 4101
    ALREADY_BEEN_LIKED = 4102
    DID_NOT_LIKED = 4103
    NO_EXIST_COMMENT = 4201
    UNABLE_TO_REPLY = 4202
    ALREADY_BEEN_FOLLOWED = 4301
    DID_NOT_FOLLOWED = 4302
    INVALID_REQUEST = 4400
    INTERNAL_SERVER_ERROR = 5000


class OAuthProvider(str, Enum):
    """Social login providers accepted by the auth endpoints."""

    APPLE = "apple"
    KAKAO = "kakao"
    NONE = "none"

    @classmethod
    def parse(cls, raw: str | None) -> "OAuthProvider":
        """Map an arbitrary provider string, falling back to `NONE`."""

        try:
            return cls((raw or "").strip().lower())
        except ValueError:
            return cls.NONE


class SearchTheme(str, Enum):
    """How a company search is scoped."""

    KEYWORD = "keyword"
    NEAR = "near"
    NEIGHBORHOOD = "neighborhood"
    INTEREST = "interest"

    def label(self) -> str:
        return {
            SearchTheme.KEYWORD: "",
            SearchTheme.NEAR: "Companies near me",
            SearchTheme.NEIGHBORHOOD: "Companies in my neighborhood",
            SearchTheme.INTEREST: "Companies in my interested regions",
        }[self]


class ReportCategory(IntEnum):
    VIOLATIONAL = 0
    PROMOTIONAL = 1
    CRITICAL = 2
    PERSONAL = 3
    BUG = 4

    def label(self) -> str:
        return {
            ReportCategory.VIOLATIONAL: "Obscene / illegal / harmful to minors",
            ReportCategory.PROMOTIONAL: "Promotional",
            ReportCategory.CRITICAL: "Slander / insults / profanity",
            ReportCategory.PERSONAL: "Personal information exposure",
            ReportCategory.BUG: "Bug found",
        }[self]


class EmploymentPeriod(IntEnum):
    LESS_THAN_ONE_YEAR = 0
    ONE_YEAR_OR_MORE = 1
    TWO_YEARS_OR_MORE = 2
    THREE_YEARS_OR_MORE = 3
    FOUR_YEARS_OR_MORE = 4
    FIVE_YEARS_OR_MORE = 5

    def label(self) -> str:
        if self is EmploymentPeriod.LESS_THAN_ONE_YEAR:
            return "Less than 1 year"
        return f"{int(self)}+ years"
