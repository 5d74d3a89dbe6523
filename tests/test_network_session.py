"""Network session tests: one call per request, outcome mapping."""

from __future__ import annotations

import httpx
import pytest

from adapters.dto.company import CompanyDTO
from adapters.endpoints import FetchCompany, FollowCompany
from adapters.http_client import redact_headers
from adapters.network_session import HttpxNetworkSession
from core.domain.envelope import Failure, Success
from core.domain.errors import DecodingError, MalformedRequestError, NetworkError, ServerError

from tests.helpers import API_HOST, fail, ok


class TestDecoding:
    """2xx bodies become `Success`, everything else a typed `Failure`."""

    @pytest.mark.asyncio
    async def test_success_decodes_data(self, session, fake_api):
        fake_api.on("GET", "/api/companies/1", ok({"id": 1, "companyName": "Up"}, "ok"))

        result = await session.request(FetchCompany(1), CompanyDTO)

        assert isinstance(result, Success)
        assert result.data.id == 1
        assert result.data.name == "Up"
        assert result.message == "ok"

    @pytest.mark.asyncio
    async def test_failure_body_becomes_server_error(self, session, fake_api):
        fake_api.on("GET", "/api/companies/9", httpx.Response(404, json=fail(4001, "no such company")))

        result = await session.request(FetchCompany(9), CompanyDTO)

        assert isinstance(result, Failure)
        assert isinstance(result.error, ServerError)
        assert result.error.code == 4001
        assert result.error.message == "no such company"
        assert result.error.status_code == 404

    @pytest.mark.asyncio
    async def test_error_status_without_body_uses_reason_phrase(self, session, fake_api):
        fake_api.on("GET", "/api/companies/1", httpx.Response(500))

        result = await session.request(FetchCompany(1), CompanyDTO)

        assert isinstance(result.error, ServerError)
        assert result.error.code is None
        assert result.error.message == "Internal Server Error"

    @pytest.mark.asyncio
    async def test_success_false_in_2xx_is_a_failure(self, session, fake_api):
        fake_api.on("GET", "/api/companies/1", httpx.Response(200, json=fail(4400, "bad request")))

        result = await session.request(FetchCompany(1), CompanyDTO)

        assert isinstance(result.error, ServerError)
        assert result.error.code == 4400

    @pytest.mark.asyncio
    async def test_non_json_body_is_a_decoding_error(self, session, fake_api):
        fake_api.on("GET", "/api/companies/1", httpx.Response(200, text="<html></html>"))

        result = await session.request(FetchCompany(1), CompanyDTO)

        assert isinstance(result.error, DecodingError)

    @pytest.mark.asyncio
    async def test_wrong_shape_is_a_decoding_error(self, session, fake_api):
        fake_api.on("GET", "/api/companies/1", ok({"id": "not-a-number"}))

        result = await session.request(FetchCompany(1), CompanyDTO)

        assert isinstance(result.error, DecodingError)

    @pytest.mark.asyncio
    async def test_unwrap_raises_the_carried_error(self, session, fake_api):
        fake_api.on("GET", "/api/companies/1", httpx.Response(404, json=fail(4001, "gone")))

        result = await session.request(FetchCompany(1), CompanyDTO)

        with pytest.raises(ServerError):
            result.unwrap()


class TestExecute:
    """Outcome-only calls."""

    @pytest.mark.asyncio
    async def test_empty_body_is_success(self, session, fake_api):
        fake_api.on("POST", "/api/companies/1/follows", httpx.Response(200))

        result = await session.execute(FollowCompany(1))

        assert isinstance(result, Success)
        assert result.data is None

    @pytest.mark.asyncio
    async def test_message_is_kept(self, session, fake_api):
        fake_api.on("POST", "/api/companies/1/follows", ok(None, "followed"))

        result = await session.execute(FollowCompany(1))

        assert result.message == "followed"

    @pytest.mark.asyncio
    async def test_server_rejection(self, session, fake_api):
        fake_api.on("POST", "/api/companies/1/follows", httpx.Response(409, json=fail(4301, "already")))

        result = await session.execute(FollowCompany(1))

        assert result.error.code == 4301


class TestTransport:
    """Exactly one HTTP call, no hidden retries."""

    @pytest.mark.asyncio
    async def test_one_call_per_request(self, session, fake_api):
        fake_api.on("GET", "/api/companies/1", httpx.Response(500))

        await session.request(FetchCompany(1), CompanyDTO)

        assert len(fake_api.requests) == 1

    @pytest.mark.asyncio
    async def test_client_headers_are_applied(self, session, fake_api, settings):
        fake_api.on("GET", "/api/companies/1", ok({"id": 1}))

        await session.request(FetchCompany(1), CompanyDTO, headers={"X-Trace": "t-1"})

        sent = fake_api.requests[0]
        assert sent.headers["User-Agent"] == settings.user_agent
        assert sent.headers["Content-Type"] == "application/json"
        assert sent.headers["X-Trace"] == "t-1"
        assert str(sent.url) == f"{API_HOST}/api/companies/1"

    @pytest.mark.asyncio
    async def test_connection_error_is_a_network_error(self, settings):
        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        async with HttpxNetworkSession(settings, transport=httpx.MockTransport(refuse)) as session:
            result = await session.request(FetchCompany(1), CompanyDTO)

        assert isinstance(result, Failure)
        assert isinstance(result.error, NetworkError)

    @pytest.mark.asyncio
    async def test_malformed_host_raises_before_sending(self, settings, fake_api):
        bad = settings.model_copy(update={"api_host": "ftp://nowhere"})

        async with HttpxNetworkSession(bad, transport=httpx.MockTransport(fake_api)) as session:
            with pytest.raises(MalformedRequestError):
                await session.request(FetchCompany(1), CompanyDTO)

        assert fake_api.requests == []


def test_redact_headers_hides_credentials():
    headers = httpx.Headers({"Authorization": "Bearer secret", "Accept": "application/json"})

    redacted = redact_headers(headers)

    assert redacted["authorization"] == "***"
    assert redacted["accept"] == "application/json"
