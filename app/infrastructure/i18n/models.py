"""Message models for the i18n system.

Defines the locale enum, the immutable message tree (Leaf / Group) that
loaders build from per-locale files, and the segments produced by rich-text
resolution.
"""

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Union

from core.logging import get_module_logger

logger = get_module_logger()


class Locale(str, Enum):
    """Locales the site is published in.

    Values are bare ISO 639-1 language codes, matching the first path segment
    of a localized URL (e.g. ``/nl/...``).
    """

    NL = "nl"
    EN = "en"
    FR = "fr"
    DE = "de"
    ES = "es"
    IT = "it"

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert string to Locale enum.

        Args:
            locale_str: Locale string (e.g., "nl", "en").

        Returns:
            Matching Locale enum value.

        Raises:
            ValueError: If locale string is not supported.
        """
        try:
            return cls(locale_str)
        except ValueError as e:
            raise ValueError(f"Unsupported locale: {locale_str}") from e

    @property
    def language(self) -> str:
        """Language code (e.g., "en")."""
        return self.value


DEFAULT_LOCALE = Locale.NL


def is_locale(value: Any) -> bool:
    """Return True if ``value`` names a supported locale."""
    return isinstance(value, str) and value in Locale._value2member_map_


@dataclass(frozen=True)
class Leaf:
    """Final message text at the end of a key path."""

    text: str


@dataclass(frozen=True)
class Group:
    """Named children of a message subtree.

    The children mapping is wrapped read-only so a table handed to several
    renders cannot be changed underneath them.

    Attributes:
        children: Mapping of key to Leaf or nested Group.
    """

    children: Mapping[str, "MessageNode"] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "children", MappingProxyType(dict(self.children)))

    def get(self, key: str) -> "MessageNode | None":
        return self.children.get(key)

    def __contains__(self, key: object) -> bool:
        return key in self.children

    def __len__(self) -> int:
        return len(self.children)

    def to_dict(self) -> Dict[str, Any]:
        """Return a plain nested dict copy of this subtree."""
        result: Dict[str, Any] = {}
        for key, child in self.children.items():
            match child:
                case Leaf(text=text):
                    result[key] = text
                case Group():
                    result[key] = child.to_dict()
        return result


MessageNode = Union[Leaf, Group]

EMPTY_GROUP = Group()

ParameterMap = Mapping[str, Any]
Renderer = Callable[[str], Any]
ComponentMap = Mapping[str, Renderer]


def build_message_node(data: Any, path: str = "") -> MessageNode:
    """Convert deserialized message data into a MessageNode tree.

    Mappings become Groups and strings become Leafs. Any other value
    (numbers, booleans, lists, null) is not a message: it is dropped with a
    warning, so a lookup of that key falls back to the key itself.

    Args:
        data: Parsed JSON/YAML value.
        path: Dotted path of ``data`` (for logging).

    Returns:
        Leaf or Group.

    Raises:
        ValueError: If ``data`` itself is neither a mapping nor a string.
    """
    if isinstance(data, str):
        return Leaf(data)

    if not isinstance(data, Mapping):
        raise ValueError(
            f"Message data at '{path or '<root>'}' must be a mapping or string, "
            f"got {type(data).__name__}"
        )

    children: Dict[str, MessageNode] = {}
    for raw_key, value in data.items():
        key = str(raw_key)
        child_path = f"{path}.{key}" if path else key
        if isinstance(value, (str, Mapping)):
            children[key] = build_message_node(value, child_path)
        else:
            logger.warning(
                "unsupported_message_value",
                path=child_path,
                value_type=type(value).__name__,
            )
    return Group(children)


@dataclass(frozen=True)
class TextSegment:
    """Literal text in a rich-text result."""

    text: str

    @property
    def value(self) -> str:
        return self.text


@dataclass(frozen=True)
class ComponentSegment:
    """Node returned by a component renderer for a ``<tag>...</tag>`` span.

    Attributes:
        tag: Tag name the renderer was registered under.
        node: Whatever the renderer returned.
    """

    tag: str
    node: Any

    @property
    def value(self) -> Any:
        return self.node


Segment = Union[TextSegment, ComponentSegment]
