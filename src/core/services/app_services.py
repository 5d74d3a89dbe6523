"""Composition root.

Builds every collaborator exactly once and wires them by constructor
injection: one token store, one plain session, one authenticated session
sharing one reissuer, and the feature facades on top.

Why here:
- Entry points (CLI, tests, future APIs) get a ready object graph without
  knowing how adapters are assembled.
- `mock=True` swaps every facade for its fixed-data variant; nothing else
  changes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from adapters.auth_pipeline import AuthenticatedSession, TokenReissuer
from adapters.local_store import RecentSearchStore, SavedCompanyStore
from adapters.network_session import HttpxNetworkSession
from adapters.services import (
    DefaultCompanyService,
    DefaultHomeService,
    DefaultLaunchScreenService,
    DefaultMyPageService,
    DefaultReviewService,
    DefaultSearchService,
    DefaultSignUpService,
    MockCompanyService,
    MockHomeService,
    MockLaunchScreenService,
    MockMyPageService,
    MockReviewService,
    MockSearchService,
    MockSignUpService,
)
from adapters.token_store import FileTokenBackend, SecureTokenStore
from core.config import AppSettings
from core.interfaces.services import (
    CompanyService,
    HomeService,
    LaunchScreenService,
    MyPageService,
    ReviewService,
    SearchService,
    SignUpService,
)

logger = logging.getLogger(__name__)


@dataclass
class AppServices:
    settings: AppSettings
    token_store: SecureTokenStore
    session: HttpxNetworkSession
    authenticated: AuthenticatedSession
    company: CompanyService
    review: ReviewService
    home: HomeService
    my_page: MyPageService
    launch_screen: LaunchScreenService
    sign_up: SignUpService
    search: SearchService
    recent_searches: RecentSearchStore
    saved_companies: SavedCompanyStore
    mock: bool = False

    async def aclose(self) -> None:
        await self.session.aclose()

    async def __aenter__(self) -> "AppServices":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()


def build_services(
    settings: AppSettings | None = None,
    *,
    mock: bool = False,
    token_store: SecureTokenStore | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> AppServices:
    """Wire the whole client. No network I/O happens here."""

    settings = settings or AppSettings()
    store = token_store or SecureTokenStore(FileTokenBackend(settings.resolved_token_store_path()))
    session = HttpxNetworkSession(settings, transport=transport)
    reissuer = TokenReissuer(session, store)
    authenticated = AuthenticatedSession(session, store, reissuer=reissuer)

    data_dir = settings.resolved_data_dir()
    recent = RecentSearchStore(data_dir / "recent_searches.json", limit=settings.recent_search_limit)
    saved = SavedCompanyStore(data_dir / "saved_companies.json", limit=settings.recent_search_limit)

    if mock:
        logger.debug("Building mock services")
        return AppServices(
            settings=settings,
            token_store=store,
            session=session,
            authenticated=authenticated,
            company=MockCompanyService(),
            review=MockReviewService(),
            home=MockHomeService(),
            my_page=MockMyPageService(),
            launch_screen=MockLaunchScreenService(),
            sign_up=MockSignUpService(),
            search=MockSearchService(),
            recent_searches=recent,
            saved_companies=saved,
            mock=True,
        )

    page_size = settings.page_size
    return AppServices(
        settings=settings,
        token_store=store,
        session=session,
        authenticated=authenticated,
        company=DefaultCompanyService(authenticated, page_size=page_size),
        review=DefaultReviewService(authenticated, page_size=page_size),
        home=DefaultHomeService(authenticated, page_size=page_size),
        my_page=DefaultMyPageService(authenticated, store),
        launch_screen=DefaultLaunchScreenService(reissuer),
        sign_up=DefaultSignUpService(session, store),
        search=DefaultSearchService(authenticated, page_size=page_size),
        recent_searches=recent,
        saved_companies=saved,
    )
