"""Factory functions for creating i18n components.

Provides convenience functions for building the message catalog and locale
resolver from application settings.
"""

from pathlib import Path
from typing import Optional

import structlog
from core.config import settings
from infrastructure.i18n.loader import (
    JSONMessageLoader,
    MessageLoader,
    YAMLMessageLoader,
)
from infrastructure.i18n.models import Locale
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.translator import MessageCatalog

logger = structlog.get_logger()

LOADERS = {
    "json": JSONMessageLoader,
    "yaml": YAMLMessageLoader,
}


def create_loader(
    messages_dir: Path | None = None,
    messages_format: str | None = None,
    use_cache: bool = True,
) -> MessageLoader:
    """Create the file loader configured in ``settings.i18n``.

    Raises:
        ValueError: If the directory does not exist or the format is unknown.
    """
    messages_dir = Path(messages_dir or settings.i18n.MESSAGES_DIR)
    messages_format = messages_format or settings.i18n.MESSAGES_FORMAT

    loader_class = LOADERS.get(messages_format)
    if loader_class is None:
        raise ValueError(f"Unknown messages format: {messages_format}")

    return loader_class(messages_dir=messages_dir, use_cache=use_cache)


def create_catalog(
    messages_dir: Path | None = None,
    messages_format: str | None = None,
    use_cache: bool = True,
    preload: bool = True,
    loader: Optional[MessageLoader] = None,
) -> MessageCatalog:
    """Create and configure a MessageCatalog.

    Args:
        messages_dir: Directory of per-locale files (default: settings.i18n.MESSAGES_DIR)
        messages_format: "json" or "yaml" (default: settings.i18n.MESSAGES_FORMAT)
        use_cache: Whether the loader caches parsed tables
        preload: Whether to load all locales immediately
        loader: Pre-built loader; overrides the three options above

    Returns:
        MessageCatalog: Configured catalog

    Usage:
        catalog = create_catalog()
        t = catalog.translator(Locale.EN, "Home")
        t("hero.title")
    """
    if loader is None:
        loader = create_loader(messages_dir, messages_format, use_cache)

    catalog = MessageCatalog(loader=loader)

    if preload:
        catalog.load_all()
        logger.info(
            "catalog_created_with_preload",
            locale_count=len(catalog.get_available_locales()),
        )
    else:
        logger.info("catalog_created_lazy")

    return catalog


def create_locale_resolver() -> LocaleResolver:
    """Create a LocaleResolver from ``settings.i18n``.

    Raises:
        ValueError: If DEFAULT_LOCALE or a SUPPORTED_LOCALES entry is not a
            known locale, or DEFAULT_LOCALE is not among SUPPORTED_LOCALES.
    """
    supported = [Locale.from_string(value) for value in settings.i18n.SUPPORTED_LOCALES]
    default = Locale.from_string(settings.i18n.DEFAULT_LOCALE)
    if supported and default not in supported:
        raise ValueError(
            f"DEFAULT_LOCALE {default.value} is not in SUPPORTED_LOCALES"
        )
    return LocaleResolver(default_locale=default, supported_locales=supported)
