"""Settings, user .env and logging setup."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from core.config import AppSettings, read_user_env_vars, write_user_env_vars
from core.logger import configure_logging, setup_logger


class TestAppSettings:
    """Environment-driven configuration."""

    def test_defaults(self):
        settings = AppSettings(_env_file=None)

        assert settings.page_size == 10
        assert settings.http_timeout_seconds == 30.0
        assert settings.log_level == "WARNING"

    def test_environment_prefix(self, monkeypatch):
        monkeypatch.setenv("UP_API_HOST", "https://api.example.com")
        monkeypatch.setenv("UP_PAGE_SIZE", "20")

        settings = AppSettings(_env_file=None)

        assert settings.api_host == "https://api.example.com"
        assert settings.page_size == 20

    def test_page_size_bounds(self):
        with pytest.raises(ValidationError):
            AppSettings(_env_file=None, page_size=0)

    def test_resolved_paths(self, tmp_path):
        settings = AppSettings(_env_file=None, token_store_path=tmp_path / "t.json", data_dir=tmp_path / "d")

        assert settings.resolved_token_store_path() == tmp_path / "t.json"
        assert settings.resolved_data_dir() == tmp_path / "d"

    def test_env_file_is_read(self, tmp_path):
        env_file = tmp_path / ".env"
        env_file.write_text("UP_USER_AGENT=custom/1.0\n", encoding="utf-8")

        assert AppSettings(_env_file=env_file).user_agent == "custom/1.0"


class TestUserEnv:
    """Persisted user configuration."""

    def test_write_and_update(self, tmp_path):
        env_path = tmp_path / "cfg" / ".env"

        write_user_env_vars({"UP_API_HOST": "https://a.example"}, env_path=env_path)
        write_user_env_vars({"UP_PAGE_SIZE": "20"}, env_path=env_path)

        lines = env_path.read_text(encoding="utf-8").splitlines()
        assert lines[0].startswith("#")
        assert "UP_API_HOST=https://a.example" in lines
        assert "UP_PAGE_SIZE=20" in lines
        assert read_user_env_vars(env_path) == {"UP_API_HOST": "https://a.example", "UP_PAGE_SIZE": "20"}

    def test_overwrite_keeps_single_entry(self, tmp_path):
        env_path = tmp_path / ".env"

        write_user_env_vars({"UP_API_HOST": "https://a.example"}, env_path=env_path)
        write_user_env_vars({"UP_API_HOST": "https://b.example"}, env_path=env_path)

        assert read_user_env_vars(env_path) == {"UP_API_HOST": "https://b.example"}

    def test_missing_file(self, tmp_path):
        assert read_user_env_vars(tmp_path / "absent.env") == {}


class TestLogging:
    """Handlers attach once per logger."""

    def test_setup_logger_is_idempotent(self):
        name = "up_client.test.idempotent"
        first = setup_logger(name, level="DEBUG")
        second = setup_logger(name, level="DEBUG")

        assert first is second
        assert len(first.handlers) == 1
        assert first.level == logging.DEBUG

    def test_log_file(self, tmp_path):
        log_file = tmp_path / "logs" / "up.log"
        logger = setup_logger("up_client.test.file", level=logging.INFO, log_file=log_file)

        logger.info("hello")
        for handler in logger.handlers:
            handler.flush()

        assert "hello" in log_file.read_text(encoding="utf-8")

    def test_configure_logging_covers_packages(self):
        configure_logging("INFO")

        for name in ("adapters", "core", "cli"):
            assert logging.getLogger(name).handlers
