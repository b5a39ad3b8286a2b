"""Tests for changeset_bot.logging (setup_logging from LoggingConfig)."""

import logging

import pytest

from changeset_bot.config import LoggingConfig
from changeset_bot.logging import DEFAULT_FORMAT, LEVELS, _resolve_level, setup_logging


class TestResolveLevel:
    """_resolve_level maps level names to logging constants."""

    def test_known_levels(self) -> None:
        for name, value in LEVELS.items():
            assert _resolve_level(name) == value

    def test_lowercase_and_whitespace_normalized(self) -> None:
        assert _resolve_level("debug") == logging.DEBUG
        assert _resolve_level("  WARNING\t") == logging.WARNING

    def test_unknown_level_returns_info(self) -> None:
        assert _resolve_level("TRACE") == logging.INFO
        assert _resolve_level("") == logging.INFO


class TestSetupLogging:
    """setup_logging applies level and format to the root logger."""

    @pytest.mark.parametrize("name", ["DEBUG", "INFO", "WARNING", "ERROR"])
    def test_sets_root_level(self, name: str) -> None:
        assert setup_logging(LoggingConfig(level=name, format="%(message)s")) == LEVELS[name]
        assert logging.root.level == LEVELS[name]

    def test_applies_format(self) -> None:
        custom = "%(levelname)s || %(message)s"
        setup_logging(LoggingConfig(level="INFO", format=custom))
        formatter = logging.root.handlers[0].formatter
        assert formatter is not None
        assert formatter._fmt == custom

    def test_empty_format_uses_default(self) -> None:
        setup_logging(LoggingConfig(level="INFO", format=""))
        formatter = logging.root.handlers[0].formatter
        assert formatter is not None
        assert formatter._fmt == DEFAULT_FORMAT

    def test_http_logs_quiet_at_info(self) -> None:
        setup_logging(LoggingConfig(level="INFO"))
        assert logging.getLogger("urllib3").level == logging.WARNING

    def test_http_logs_follow_debug(self) -> None:
        setup_logging(LoggingConfig(level="DEBUG"))
        assert logging.getLogger("urllib3").level == logging.DEBUG
