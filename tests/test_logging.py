"""Tests for prcheckout.logging (CheckoutLogging, level/format from config)."""

import logging

from prcheckout.config import LoggingConfig
from prcheckout.logging import (
    DEFAULT_FORMAT,
    LEVELS,
    CheckoutLogging,
    _resolve_level,
)


class TestResolveLevel:
    """_resolve_level maps level names to logging constants."""

    def test_known_levels(self) -> None:
        for name, value in LEVELS.items():
            assert _resolve_level(name) == value

    def test_lowercase_and_whitespace_normalized(self) -> None:
        assert _resolve_level(" debug ") == logging.DEBUG

    def test_unknown_level_returns_info(self) -> None:
        """Unknown level name falls back to INFO."""
        assert _resolve_level("TRACE") == logging.INFO
        assert _resolve_level("") == logging.INFO


class TestCheckoutLogging:
    """CheckoutLogging applies LoggingConfig (level + format) to root logger."""

    def test_setup_sets_root_level_and_format(self) -> None:
        custom = "%(levelname)s || %(message)s"
        CheckoutLogging(LoggingConfig(level="WARNING", format=custom)).setup()
        root = logging.root
        assert root.level == logging.WARNING
        assert root.handlers[0].formatter is not None
        assert root.handlers[0].formatter._fmt == custom

    def test_empty_format_uses_default(self) -> None:
        CheckoutLogging(LoggingConfig(level="INFO", format="")).setup()
        fmt = logging.root.handlers[0].formatter
        assert fmt is not None
        assert fmt._fmt == DEFAULT_FORMAT

    def test_get_logger_returns_named_logger(self) -> None:
        log = CheckoutLogging(LoggingConfig()).get_logger("prcheckout.test")
        assert log.name == "prcheckout.test"
