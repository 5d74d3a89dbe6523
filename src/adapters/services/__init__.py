"""Feature facades: network-backed `Default*Service` and fixed-data `Mock*Service`."""

from adapters.services.company import (
    DefaultCompanyService,
    DefaultReviewService,
    MockCompanyService,
    MockReviewService,
)
from adapters.services.home import DefaultHomeService, MockHomeService
from adapters.services.launch_screen import DefaultLaunchScreenService, MockLaunchScreenService
from adapters.services.my_page import DefaultMyPageService, MockMyPageService
from adapters.services.search import DefaultSearchService, MockSearchService
from adapters.services.sign_up import DefaultSignUpService, MockSignUpService

__all__ = [
    "DefaultCompanyService",
    "DefaultHomeService",
    "DefaultLaunchScreenService",
    "DefaultMyPageService",
    "DefaultReviewService",
    "DefaultSearchService",
    "DefaultSignUpService",
    "MockCompanyService",
    "MockHomeService",
    "MockLaunchScreenService",
    "MockMyPageService",
    "MockReviewService",
    "MockSearchService",
    "MockSignUpService",
]
