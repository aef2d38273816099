"""Tests for logging configuration."""

import logging

import pytest
import structlog
from storefront.utils.logging import add_context, clear_context, configure_logging, get_log_level


@pytest.fixture()
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


class TestLogLevel:
    @pytest.mark.parametrize(
        "environment,expected",
        [("production", "INFO"), ("staging", "INFO"), ("development", "DEBUG"), ("test", "WARNING"), ("other", "INFO")],
    )
    def test_default_level_per_environment(self, monkeypatch, environment, expected):
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        monkeypatch.setenv("ENVIRONMENT", environment)
        assert get_log_level() == expected

    def test_explicit_level_wins(self, monkeypatch):
        monkeypatch.setenv("ENVIRONMENT", "production")
        monkeypatch.setenv("LOG_LEVEL", "debug")
        assert get_log_level() == "DEBUG"


class TestConfigureLogging:
    def test_creates_rotating_files(self, tmp_path, restore_root_logger):
        configure_logging(level="INFO", log_dir=str(tmp_path / "logs"), log_file_prefix="shop")

        assert (tmp_path / "logs" / "shop.log").exists()
        assert (tmp_path / "logs" / "shop_error.log").exists()
        assert len(logging.getLogger().handlers) == 3

    def test_request_context_is_bound_and_cleared(self):
        add_context(path="/api/products")
        assert structlog.contextvars.get_contextvars()["path"] == "/api/products"

        clear_context()
        assert structlog.contextvars.get_contextvars() == {}
