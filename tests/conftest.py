"""Shared fixtures: isolated settings, token stores and a session over the fake API."""

from __future__ import annotations

import httpx
import pytest

from adapters.network_session import HttpxNetworkSession
from adapters.token_store import MemoryTokenBackend, SecureTokenStore
from core.config import AppSettings
from core.domain.models import TokenPair

from tests.helpers import API_HOST, FakeApi


@pytest.fixture
def settings(tmp_path) -> AppSettings:
    return AppSettings(
        _env_file=None,
        api_host=API_HOST,
        token_store_path=tmp_path / "tokens.json",
        data_dir=tmp_path / "data",
    )


@pytest.fixture
def fake_api() -> FakeApi:
    return FakeApi()


@pytest.fixture
async def session(settings, fake_api):
    async with HttpxNetworkSession(settings, transport=httpx.MockTransport(fake_api)) as s:
        yield s


@pytest.fixture
def token_store() -> SecureTokenStore:
    return SecureTokenStore(MemoryTokenBackend(TokenPair(access_token="access-1", refresh_token="refresh-1")))


@pytest.fixture
def empty_store() -> SecureTokenStore:
    return SecureTokenStore(MemoryTokenBackend())
