"""Unit tests for core.logging.

Tests cover:
- Test environment detection
- Processor selection for production vs development
- Module-bound loggers
- LOG_LEVEL name resolution
"""

import logging
import sys
from unittest.mock import patch

import pytest
import structlog

from core.logging import (
    SILENT,
    _build_processors,
    _is_test_environment,
    _resolve_log_level,
    get_module_logger,
)


@pytest.mark.unit
class TestLoggingConfiguration:
    """Tests for logging configuration."""

    def test_is_test_environment_detects_pytest(self):
        assert _is_test_environment() is True

    def test_is_test_environment_without_pytest(self):
        with patch.dict(sys.modules):
            sys.modules.pop("pytest", None)
            assert _is_test_environment() is False

    def test_production_renders_json(self):
        processors = _build_processors(production=True)
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_development_renders_console(self):
        processors = _build_processors(production=False)
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)

    def test_module_logger_binds_component(self):
        log = get_module_logger()
        context = structlog.get_context(log)
        assert context["component"] == "test_logging"
        assert context["module_path"].endswith("test_logging")

    def test_production_renders_tracebacks_as_dicts(self):
        processors = _build_processors(production=True)
        assert structlog.processors.dict_tracebacks in processors
        assert structlog.processors.dict_tracebacks not in _build_processors(
            production=False
        )

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("debug", logging.DEBUG),
            ("WARNING", logging.WARNING),
            ("error", logging.ERROR),
            ("verbose", logging.INFO),
        ],
    )
    def test_resolve_log_level(self, name, expected):
        assert _resolve_log_level(name) == expected

    def test_silent_is_above_critical(self):
        assert SILENT > logging.CRITICAL
