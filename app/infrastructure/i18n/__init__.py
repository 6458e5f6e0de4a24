"""i18n system - message resolution and rich-text interpolation.

Resolves dotted keys in per-locale message tables, substitutes {name}
placeholders and turns <tag>...</tag> spans into rendered segments.

Main components:
- models: Locale, Leaf, Group, TextSegment, ComponentSegment
- lookup: select_namespace and resolve_key
- interpolation: interpolate
- rich_text: parse_rich_text
- translator: Translator, resolve, resolve_rich, MessageCatalog
- loader: MessageLoader, JSONMessageLoader, YAMLMessageLoader
- resolvers: LocaleResolver for locale detection
- factory: create_catalog, create_locale_resolver
"""

from infrastructure.i18n.factory import create_catalog, create_locale_resolver
from infrastructure.i18n.interpolation import interpolate
from infrastructure.i18n.loader import (
    JSONMessageLoader,
    MessageLoader,
    YAMLMessageLoader,
)
from infrastructure.i18n.lookup import resolve_key, select_namespace
from infrastructure.i18n.models import (
    ComponentSegment,
    Group,
    Leaf,
    Locale,
    Segment,
    TextSegment,
    build_message_node,
    is_locale,
)
from infrastructure.i18n.resolvers import LocaleResolver
from infrastructure.i18n.rich_text import parse_rich_text
from infrastructure.i18n.translator import (
    MessageCatalog,
    Translator,
    resolve,
    resolve_rich,
)

__all__ = [
    "Locale",
    "Leaf",
    "Group",
    "Segment",
    "TextSegment",
    "ComponentSegment",
    "build_message_node",
    "is_locale",
    "select_namespace",
    "resolve_key",
    "interpolate",
    "parse_rich_text",
    "Translator",
    "resolve",
    "resolve_rich",
    "MessageCatalog",
    "MessageLoader",
    "JSONMessageLoader",
    "YAMLMessageLoader",
    "LocaleResolver",
    "create_catalog",
    "create_locale_resolver",
]
