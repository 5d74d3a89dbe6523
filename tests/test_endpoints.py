"""Endpoint descriptor tests: method/path table, query params, bodies, hosts."""

from __future__ import annotations

import json

import pytest

from adapters.dto.requests import (
    CommentRequest,
    EditUserRequest,
    LoginRequest,
    RefreshTokenRequest,
    ReportRequest,
    SignUpRequest,
    VerifyNicknameRequest,
)
from adapters.endpoints import (
    CreateComment,
    CreateReply,
    EditUser,
    FetchComments,
    FetchCompany,
    FetchCompanyReviews,
    FetchFollowedCompanies,
    FetchInteractedReviews,
    FetchInteractionCounts,
    FetchInterestedRegionCompanies,
    FetchInterestedRegionReviews,
    FetchMainRegionCompanies,
    FetchMainRegionReviews,
    FetchMyReviews,
    FetchNearbyCompanies,
    FetchPopularReviews,
    FetchProposedCompanies,
    FetchReplies,
    FetchTerms,
    FetchUser,
    FollowCompany,
    LikeReview,
    Login,
    Report,
    Resign,
    SearchCompanies,
    SearchLegalDistricts,
    SignOut,
    SignUp,
    TokenReissue,
    UnfollowCompany,
    UnlikeReview,
    VerifyNickname,
    searched_companies_endpoint,
)
from adapters.endpoints.base import normalize_host
from core.domain.enums import OAuthProvider, SearchTheme
from core.domain.errors import MalformedRequestError

HOST = "https://api.example.com"
REFRESH = RefreshTokenRequest(refresh_token="r")
COMMENT = CommentRequest(comment="hello", secret=True)


ENDPOINT_TABLE = [
    (FetchCompany(7), "GET", "/api/companies/7"),
    (FetchCompanyReviews(7), "GET", "/api/companies/7/reviews"),
    (FollowCompany(7), "POST", "/api/companies/7/follows"),
    (UnfollowCompany(7), "DELETE", "/api/companies/7/follows"),
    (FetchComments(3), "GET", "/api/reviews/3/comments"),
    (CreateComment(3, COMMENT), "POST", "/api/reviews/3/comments"),
    (FetchReplies(5), "GET", "/api/comments/5/replies"),
    (CreateReply(5, COMMENT), "POST", "/api/comments/5/replies"),
    (LikeReview(3), "POST", "/api/reviews/3/likes"),
    (UnlikeReview(3), "DELETE", "/api/reviews/3/likes"),
    (FetchUser(), "GET", "/api/users/me"),
    (FetchPopularReviews(37.5, 127.0), "GET", "/api/reviews/popular"),
    (FetchMainRegionReviews(37.5, 127.0), "GET", "/api/reviews/main-region"),
    (FetchInterestedRegionReviews(37.5, 127.0), "GET", "/api/reviews/interested-region"),
    (FetchMyReviews(), "GET", "/api/users/me/reviews"),
    (FetchInteractedReviews(), "GET", "/api/users/me/interacted-reviews"),
    (FetchFollowedCompanies(), "GET", "/api/users/me/followed-companies"),
    (FetchInteractionCounts(), "GET", "/api/users/me/interaction-counts"),
    (SearchCompanies("burger", 37.5, 127.0), "GET", "/api/companies/search"),
    (FetchNearbyCompanies(37.5, 127.0), "GET", "/api/companies/nearby"),
    (FetchMainRegionCompanies(37.5, 127.0), "GET", "/api/companies/main-region"),
    (FetchInterestedRegionCompanies(37.5, 127.0), "GET", "/api/companies/interested-region"),
    (FetchProposedCompanies("bur", 37.5, 127.0), "GET", "/api/companies/suggestions"),
    (TokenReissue(REFRESH), "POST", "/api/auth/reissue"),
    (Login(LoginRequest(oauth_token="t", oauth_provider=OAuthProvider.KAKAO)), "POST", "/api/auth/login"),
    (
        SignUp(
            SignUpRequest(
                oauth_token="t",
                oauth_provider=OAuthProvider.APPLE,
                main_region_id=1,
                nickname="n",
            )
        ),
        "POST",
        "/api/auth/signup",
    ),
    (FetchTerms(), "GET", "/api/auth/terms"),
    (VerifyNickname(VerifyNicknameRequest(nickname="n")), "POST", "/api/users/nickname-verify"),
    (SearchLegalDistricts("수유"), "GET", "/api/legal-districts"),
    (EditUser(EditUserRequest(main_region_id=1, nickname="n")), "PUT", "/api/users/me"),
    (
        Report(ReportRequest(reporter_name="a", target_name="b", report_type="c", description="d")),
        "POST",
        "/api/reports",
    ),
    (Resign(REFRESH), "DELETE", "/api/users/me"),
    (SignOut(REFRESH), "POST", "/api/auth/logout"),
]


class TestEndpointTable:
    """Every descriptor maps to its documented method and path."""

    @pytest.mark.parametrize(("endpoint", "method", "path"), ENDPOINT_TABLE)
    def test_method_and_path(self, endpoint, method, path):
        request = endpoint.as_request(HOST)

        assert request.method == method
        assert request.url.path == path
        assert str(request.url).startswith(HOST + path)

    def test_auth_endpoints_do_not_require_a_token(self):
        assert TokenReissue(REFRESH).requires_auth is False
        assert FetchTerms().requires_auth is False
        assert FetchCompany(1).requires_auth is True


class TestRequestShape:
    """Headers, bodies and query parameters."""

    def test_get_carries_json_content_type_and_no_body(self):
        request = FetchCompany(1).as_request(HOST)

        assert request.headers["Content-Type"] == "application/json"
        assert request.content == b""

    def test_extra_headers_are_merged(self):
        request = FetchCompany(1).as_request(HOST, headers={"Authorization": "Bearer abc"})

        assert request.headers["Authorization"] == "Bearer abc"
        assert request.headers["Content-Type"] == "application/json"

    def test_comment_body_uses_wire_keys(self):
        request = CreateComment(42, CommentRequest(comment="좋아요", secret=True)).as_request(HOST)

        assert json.loads(request.content) == {"comment": "좋아요", "secret": True}

    def test_reissue_body_is_camel_case(self):
        request = TokenReissue(RefreshTokenRequest(refresh_token="r-1")).as_request(HOST)

        assert json.loads(request.content) == {"refreshToken": "r-1"}

    def test_login_body_serializes_provider(self):
        payload = LoginRequest(oauth_token="t", oauth_provider=OAuthProvider.KAKAO, authorization_code="code")
        body = json.loads(Login(payload).as_request(HOST).content)

        assert body == {"oauthToken": "t", "oauthProvider": "kakao", "authorizationCode": "code"}

    def test_resign_sends_refresh_token_in_delete_body(self):
        request = Resign(RefreshTokenRequest(refresh_token="r-9")).as_request(HOST)

        assert request.method == "DELETE"
        assert json.loads(request.content) == {"refreshToken": "r-9"}

    def test_comments_are_sorted_newest_first(self):
        request = FetchComments(42, page=2, size=5).as_request(HOST)

        assert dict(request.url.params) == {"page": "2", "size": "5", "sort": "createdAt,desc"}

    def test_company_reviews_carry_paging_only(self):
        request = FetchCompanyReviews(7).as_request(HOST)

        assert dict(request.url.params) == {"page": "1", "size": "10"}

    def test_popular_reviews_have_no_sort(self):
        params = FetchPopularReviews(37.5, 127.0).as_request(HOST).url.params

        assert "sort" not in params
        assert params["latitude"] == "37.5"
        assert params["longitude"] == "127.0"

    def test_main_region_reviews_are_sorted(self):
        params = FetchMainRegionReviews(37.5, 127.0).as_request(HOST).url.params

        assert params["sort"] == "createdAt,desc"

    def test_keyword_is_url_encoded(self):
        request = SearchCompanies("버거 킹", 37.5, 127.0).as_request(HOST)

        assert request.url.params["keyword"] == "버거 킹"
        assert "버거" not in request.url.raw_path.decode("ascii")

    def test_legal_district_query(self):
        params = SearchLegalDistricts("수유", page=3).as_request(HOST).url.params

        assert params["keyword"] == "수유"
        assert params["page"] == "3"


class TestSearchThemeRouting:
    """A search theme picks the endpoint that serves it."""

    @pytest.mark.parametrize(
        ("theme", "path"),
        [
            (SearchTheme.KEYWORD, "/api/companies/search"),
            (SearchTheme.NEAR, "/api/companies/nearby"),
            (SearchTheme.NEIGHBORHOOD, "/api/companies/main-region"),
            (SearchTheme.INTEREST, "/api/companies/interested-region"),
        ],
    )
    def test_theme_path(self, theme, path):
        endpoint = searched_companies_endpoint(theme, "burger", 37.5, 127.0)

        assert endpoint.path == path

    def test_accepts_raw_theme_value(self):
        endpoint = searched_companies_endpoint("near", "", 37.5, 127.0, page=2)

        assert isinstance(endpoint, FetchNearbyCompanies)
        assert endpoint.page == 2

    def test_unknown_theme_is_rejected(self):
        with pytest.raises(ValueError):
            searched_companies_endpoint("elsewhere", "", 37.5, 127.0)


class TestHosts:
    """Host validation happens before any request exists."""

    def test_trailing_slash_is_stripped(self):
        assert normalize_host("http://localhost:8080/") == "http://localhost:8080"

    @pytest.mark.parametrize("host", ["", "not a url", "ftp://example.com", "localhost:8080"])
    def test_malformed_host(self, host):
        with pytest.raises(MalformedRequestError):
            FetchCompany(1).as_request(host)
