"""Structured logging for the site messages engine.

Every module logs through structlog with a snake_case event name and keyword
context. The engine never raises on a bad lookup, so these events are how a
gap in the message files shows up:

- ``translation_key_missing`` (warning): a dotted key did not end at a leaf.
  Carries ``namespace`` and ``key``; the page renders the key itself.
- ``namespace_not_found`` and ``rich_text_tag_unknown`` (debug): a namespace
  that is absent, or a ``<tag>`` with no renderer, kept as literal text.
- ``unsupported_message_value`` (warning): a number, list or null in a message
  file, dropped at load time.
- ``loaded_messages``, ``message_parse_error`` and ``locale_not_loaded``: loader
  and catalog lifecycle.

Modules under ``infrastructure.i18n`` call ``get_module_logger()`` so each event
is tagged with the emitting component.
"""

import logging
import inspect
import sys
import structlog
from structlog.stdlib import BoundLogger
from .config import settings

# Above CRITICAL: nothing reaches the handlers.
SILENT = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """Detect if running in a test environment."""
    return "pytest" in sys.modules


def _resolve_log_level(name: str) -> int:
    """Map a LOG_LEVEL name such as "debug" to its logging constant.

    Unknown names give INFO, which keeps missing-key warnings visible.
    """
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def _build_processors(production: bool) -> list:
    processors = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
    ]
    if production:
        # exc_info becomes a structured "exception" field in the JSON output.
        processors.append(structlog.processors.dict_tracebacks)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer())
    return processors


def configure_logging() -> BoundLogger:
    """Configure structlog on top of the stdlib ``logging`` root.

    Under pytest the root level is SILENT, so the missing-key warnings that
    tests trigger on purpose print nothing. Otherwise the level comes from
    ``settings.LOG_LEVEL``; development (PREFIX set) renders to the console and
    production renders one JSON object per event.
    """
    if _is_test_environment():
        structlog.configure(
            processors=[
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(format="%(message)s", level=SILENT, force=True)
        return structlog.stdlib.get_logger()

    structlog.configure(
        processors=_build_processors(settings.is_production),
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )
    logging.basicConfig(
        format="%(message)s",
        level=_resolve_log_level(settings.LOG_LEVEL),
    )
    return structlog.stdlib.get_logger()


logger: BoundLogger = configure_logging()


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Called once at import time, e.g. ``logger = get_module_logger()`` in
    ``infrastructure/i18n/lookup.py``, whose events then carry
    ``component="lookup"`` and ``module_path="infrastructure.i18n.lookup"``.
    """
    current_frame = inspect.currentframe()
    if current_frame is None:
        return logger

    module = inspect.getmodule(current_frame.f_back)
    if module is None:
        return logger.bind(component="unknown")

    module_name = module.__name__
    return logger.bind(
        component=module_name.split(".")[-1],
        module_path=module_name,
    )
