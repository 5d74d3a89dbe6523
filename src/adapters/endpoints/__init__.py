"""Endpoint descriptors, one module per feature."""

from adapters.endpoints.auth import (
    FetchTerms,
    Login,
    SearchLegalDistricts,
    SignUp,
    SignUpEndpoint,
    TokenReissue,
    VerifyNickname,
)
from adapters.endpoints.base import ApiEndpoint, normalize_host
from adapters.endpoints.company import (
    CompanyEndpoint,
    FetchCompany,
    FetchCompanyReviews,
    FollowCompany,
    UnfollowCompany,
)
from adapters.endpoints.home import (
    FetchFollowedCompanies,
    FetchInteractedReviews,
    FetchInteractionCounts,
    FetchInterestedRegionReviews,
    FetchMainRegionReviews,
    FetchMyReviews,
    FetchPopularReviews,
    FetchUser,
    HomeEndpoint,
)
from adapters.endpoints.my_page import EditUser, MyPageEndpoint, Report, Resign, SignOut
from adapters.endpoints.review import (
    CreateComment,
    CreateReply,
    FetchComments,
    FetchReplies,
    LikeReview,
    ReviewEndpoint,
    UnlikeReview,
)
from adapters.endpoints.search import (
    FetchInterestedRegionCompanies,
    FetchMainRegionCompanies,
    FetchNearbyCompanies,
    FetchProposedCompanies,
    SearchCompanies,
    SearchEndpoint,
    searched_companies_endpoint,
)

__all__ = [
    "ApiEndpoint",
    "CompanyEndpoint",
    "CreateComment",
    "CreateReply",
    "EditUser",
    "FetchComments",
    "FetchCompany",
    "FetchCompanyReviews",
    "FetchFollowedCompanies",
    "FetchInteractedReviews",
    "FetchInteractionCounts",
    "FetchInterestedRegionCompanies",
    "FetchInterestedRegionReviews",
    "FetchMainRegionCompanies",
    "FetchMainRegionReviews",
    "FetchMyReviews",
    "FetchNearbyCompanies",
    "FetchPopularReviews",
    "FetchProposedCompanies",
    "FetchReplies",
    "FetchTerms",
    "FetchUser",
    "FollowCompany",
    "HomeEndpoint",
    "LikeReview",
    "Login",
    "MyPageEndpoint",
    "Report",
    "Resign",
    "ReviewEndpoint",
    "SearchCompanies",
    "SearchEndpoint",
    "SearchLegalDistricts",
    "SignOut",
    "SignUp",
    "SignUpEndpoint",
    "TokenReissue",
    "UnfollowCompany",
    "UnlikeReview",
    "VerifyNickname",
    "normalize_host",
    "searched_companies_endpoint",
]
