"""
Tests for ClientSettings and the user .env helpers.
"""
import pytest
from pydantic import ValidationError

from quran_content import __version__
from quran_content.core.config import (
    DEFAULT_API_BASE_URL,
    ClientSettings,
    _parse_env_lines,
    write_user_env_vars,
)


class TestClientSettings:
    """Defaults and environment overrides."""

    def test_defaults(self, settings):
        """Defaults match the public API and pool sizing."""
        assert settings.api_base_url == DEFAULT_API_BASE_URL
        assert settings.api_token is None
        assert settings.client_id is None
        assert settings.http_timeout_seconds == 60.0
        assert settings.max_connections == 100
        assert settings.max_keepalive_connections == 25
        assert settings.verify_tls is True
        assert settings.user_agent == f"quran-content/{__version__}"

    def test_environment_overrides(self, clean_env, monkeypatch):
        """QURAN_CONTENT_* variables override defaults."""
        monkeypatch.setenv("QURAN_CONTENT_API_TOKEN", "secret")
        monkeypatch.setenv("QURAN_CONTENT_HTTP_TIMEOUT_SECONDS", "5")
        monkeypatch.setenv("QURAN_CONTENT_CLIENT_ID", "client-1")

        settings = ClientSettings(_env_file=None)

        assert settings.api_token == "secret"
        assert settings.http_timeout_seconds == 5.0
        assert settings.client_id == "client-1"

    def test_trailing_slash_removed(self, clean_env):
        """Base URL is stored without a trailing slash."""
        settings = ClientSettings(_env_file=None, api_base_url="https://example.test/api/v4/")

        assert settings.api_base_url == "https://example.test/api/v4"

    def test_keepalive_cannot_exceed_pool(self, clean_env):
        """Keep-alive sockets are bounded by the pool size."""
        with pytest.raises(ValidationError):
            ClientSettings(_env_file=None, max_connections=10, max_keepalive_connections=20)

    @pytest.mark.parametrize("timeout", [0, -1])
    def test_timeout_must_be_positive(self, clean_env, timeout):
        """A zero or negative timeout is rejected."""
        with pytest.raises(ValidationError):
            ClientSettings(_env_file=None, http_timeout_seconds=timeout)


class TestUserEnvFile:
    """write_user_env_vars / _parse_env_lines."""

    def test_parse_skips_comments_and_quotes(self):
        """Comments, blank lines and surrounding quotes are handled."""
        text = '# header\n\nA=1\nB="two"\nbroken line\n'

        assert _parse_env_lines(text) == {"A": "1", "B": "two"}

    def test_write_creates_file(self, tmp_path):
        """Missing parent directories are created."""
        env_path = tmp_path / "nested" / ".env"

        result = write_user_env_vars({"QURAN_CONTENT_API_TOKEN": "abc"}, env_path=env_path)

        assert result == env_path
        assert "QURAN_CONTENT_API_TOKEN=abc" in env_path.read_text(encoding="utf-8")

    def test_write_keeps_existing_and_skips_none(self, tmp_path):
        """Existing keys survive; None values are not written."""
        env_path = tmp_path / ".env"
        env_path.write_text("QURAN_CONTENT_CLIENT_ID=old\n", encoding="utf-8")

        write_user_env_vars(
            {"QURAN_CONTENT_API_BASE_URL": "https://x.test", "QURAN_CONTENT_API_TOKEN": None},
            env_path=env_path,
        )

        data = _parse_env_lines(env_path.read_text(encoding="utf-8"))
        assert data == {
            "QURAN_CONTENT_API_BASE_URL": "https://x.test",
            "QURAN_CONTENT_CLIENT_ID": "old",
        }

    def test_empty_value_removes_key(self, tmp_path):
        """An empty string clears a previously saved value."""
        env_path = tmp_path / ".env"
        env_path.write_text(
            "QURAN_CONTENT_API_TOKEN=old-token\nQURAN_CONTENT_CLIENT_ID=client-1\n",
            encoding="utf-8",
        )

        write_user_env_vars({"QURAN_CONTENT_API_TOKEN": ""}, env_path=env_path)

        data = _parse_env_lines(env_path.read_text(encoding="utf-8"))
        assert data == {"QURAN_CONTENT_CLIENT_ID": "client-1"}
