"""Translation handles for resolving site messages.

Message tables are passed explicitly: a Translator is bound to one table and
one namespace at construction, and a MessageCatalog hands out translators for
the locale a request resolved to. There is no process-wide "current
messages" state.
"""

from datetime import datetime, timezone
from typing import Dict, List, Optional

from core.logging import get_module_logger
from infrastructure.i18n.interpolation import interpolate
from infrastructure.i18n.loader import MessageLoader
from infrastructure.i18n.lookup import find_leaf, resolve_key, select_namespace
from infrastructure.i18n.models import (
    ComponentMap,
    Group,
    Locale,
    ParameterMap,
    Segment,
    TextSegment,
)
from infrastructure.i18n.rich_text import parse_rich_text

logger = get_module_logger()


class Translator:
    """Namespace-bound message resolver.

    Usage:
        t = Translator(table, "Home")
        t("hero.title")
        t("footer.copyright", {"year": 2025})
        t.rich("hero.tagline", {"b": render_bold})

    Attributes:
        namespace: Namespace this translator reads from.
        messages: The namespace subtree (empty Group if the namespace is missing).
    """

    def __init__(self, table: Group, namespace: str):
        self.namespace = namespace
        self.messages = select_namespace(table, namespace)

    def __call__(self, key: str, params: Optional[ParameterMap] = None) -> str:
        """Resolve ``key`` to plain text and interpolate ``params``.

        Args:
            key: Dotted key within the namespace.
            params: Optional placeholder values.

        Returns:
            Interpolated message, or ``key`` if it does not resolve.
        """
        message = resolve_key(self.messages, key, namespace=self.namespace)
        return interpolate(message, params)

    def rich(self, key: str, components: ComponentMap) -> List[Segment]:
        """Resolve ``key`` and render its ``<tag>`` spans with ``components``.

        Args:
            key: Dotted key within the namespace.
            components: Tag name -> renderer.

        Returns:
            Segments in document order; ``[TextSegment(key)]`` if the key does
            not resolve.
        """
        message = find_leaf(self.messages, key)
        if message is None:
            logger.warning(
                "translation_key_missing", namespace=self.namespace, key=key
            )
            return [TextSegment(key)]
        return parse_rich_text(message, components)

    def has(self, key: str) -> bool:
        """Return True if ``key`` resolves to a message in this namespace."""
        return find_leaf(self.messages, key) is not None


def resolve(
    table: Group,
    namespace: str,
    key: str,
    params: Optional[ParameterMap] = None,
) -> str:
    """Resolve one plain-text message from ``table``."""
    return Translator(table, namespace)(key, params)


def resolve_rich(
    table: Group,
    namespace: str,
    key: str,
    components: ComponentMap,
) -> List[Segment]:
    """Resolve one rich-text message from ``table``."""
    return Translator(table, namespace).rich(key, components)


class MessageCatalog:
    """Loaded message tables, one per locale.

    Each table is an immutable snapshot. Reloading replaces the snapshot;
    translators created earlier keep reading the table they were built with.

    Attributes:
        loader: MessageLoader used by load_all/load_locale/reload.
        tables: Loaded tables by locale.
        loaded_at: ISO 8601 timestamp of each table's load.
    """

    def __init__(self, loader: MessageLoader):
        self.loader = loader
        self.tables: Dict[Locale, Group] = {}
        self.loaded_at: Dict[Locale, str] = {}
        logger.info("initialized_message_catalog")

    def load_all(self) -> None:
        """Load every locale the loader can find."""
        for locale, table in self.loader.load_all().items():
            self.set_table(locale, table)
        logger.info("loaded_all_messages", locale_count=len(self.tables))

    def load_locale(self, locale: Locale) -> None:
        """Load a single locale.

        Raises:
            FileNotFoundError: If the loader has no messages for the locale.
        """
        self.set_table(locale, self.loader.load(locale))
        logger.info("loaded_locale_messages", locale=locale.value)

    def set_table(self, locale: Locale, table: Group) -> None:
        """Install ``table`` as the snapshot for ``locale``."""
        self.tables[locale] = table
        self.loaded_at[locale] = datetime.now(timezone.utc).isoformat()

    def get_table(self, locale: Locale) -> Group:
        """Return the table for ``locale``.

        Raises:
            KeyError: If the locale has not been loaded.
        """
        try:
            return self.tables[locale]
        except KeyError:
            logger.error(
                "locale_not_loaded",
                locale=locale.value,
                available_locales=[loc.value for loc in self.tables],
            )
            raise KeyError(f"Messages not loaded for locale {locale.value}") from None

    def has_locale(self, locale: Locale) -> bool:
        return locale in self.tables

    def get_available_locales(self) -> List[Locale]:
        """Get list of loaded locales."""
        return list(self.tables.keys())

    def translator(self, locale: Locale, namespace: str) -> Translator:
        """Create a Translator for ``namespace`` in ``locale``'s table.

        Raises:
            KeyError: If the locale has not been loaded.
        """
        return Translator(self.get_table(locale), namespace)

    def reload(self) -> None:
        """Drop loaded tables and load everything again from the loader."""
        self.tables.clear()
        self.loaded_at.clear()
        self.loader.clear_cache()
        self.load_all()
        logger.info("reloaded_all_messages")
