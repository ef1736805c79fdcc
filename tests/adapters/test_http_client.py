"""
Tests for the httpx client factory.
"""
import httpx
import pytest

from quran_content.adapters.http_client import (
    DEFAULT_HEADERS,
    BearerTokenAuth,
    build_async_client,
    build_default_headers,
)
from quran_content.core.config import ClientSettings


class TestDefaultHeaders:
    """build_default_headers."""

    def test_includes_json_headers_and_user_agent(self, settings):
        """Standard JSON headers plus the configured User-Agent."""
        headers = build_default_headers(settings)

        for key, value in DEFAULT_HEADERS.items():
            assert headers[key] == value
        assert headers["User-Agent"] == settings.user_agent
        assert "x-client-id" not in headers

    def test_client_id_and_extra_headers(self, clean_env):
        """Client id becomes x-client-id; extra headers win."""
        settings = ClientSettings(_env_file=None, client_id="abc")

        headers = build_default_headers(settings, {"Accept": "text/plain", "X-Trace": "1"})

        assert headers["x-client-id"] == "abc"
        assert headers["Accept"] == "text/plain"
        assert headers["X-Trace"] == "1"


class TestBuildAsyncClient:
    """build_async_client configuration."""

    @pytest.mark.asyncio
    async def test_base_url_and_timeout(self, settings, recording_transport):
        """Relative paths resolve under the versioned base URL."""
        transport = recording_transport()
        client = build_async_client(settings, transport=transport)

        async with client:
            await client.get("/chapters?language=en")

        assert str(transport.requests[0].url) == "https://api.quran.com/api/v4/chapters?language=en"
        assert client.timeout.read == 60.0
        assert client.follow_redirects is True

    @pytest.mark.asyncio
    async def test_no_authorization_without_token(self, settings, recording_transport):
        """Anonymous by default."""
        transport = recording_transport()

        async with build_async_client(settings, transport=transport) as client:
            await client.get("/juzs")

        assert "Authorization" not in transport.requests[0].headers

    @pytest.mark.asyncio
    async def test_bearer_token_from_settings(self, clean_env, recording_transport):
        """settings.api_token is sent as a Bearer token."""
        settings = ClientSettings(_env_file=None, api_token="from-settings")
        transport = recording_transport()

        async with build_async_client(settings, transport=transport) as client:
            await client.get("/juzs")

        assert transport.requests[0].headers["Authorization"] == "Bearer from-settings"

    @pytest.mark.asyncio
    async def test_explicit_token_wins(self, clean_env, recording_transport):
        """An explicit token overrides the configured one."""
        settings = ClientSettings(_env_file=None, api_token="from-settings")
        transport = recording_transport()

        async with build_async_client(settings, token="explicit", transport=transport) as client:
            await client.get("/juzs")
            await client.get("/chapters")

        assert [r.headers["Authorization"] for r in transport.requests] == [
            "Bearer explicit",
            "Bearer explicit",
        ]

    def test_bearer_auth_flow(self):
        """The auth flow sets the header on the outgoing request."""
        request = httpx.Request("GET", "https://api.quran.com/api/v4/juzs")

        flow = BearerTokenAuth("t0k").auth_flow(request)
        sent = next(flow)

        assert sent.headers["Authorization"] == "Bearer t0k"
