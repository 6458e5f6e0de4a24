"""Namespace selection and dotted-key resolution over a message table."""

from core.logging import get_module_logger
from infrastructure.i18n.models import EMPTY_GROUP, Group, Leaf, MessageNode

logger = get_module_logger()


def select_namespace(table: Group, namespace: str) -> Group:
    """Return the subtree stored under ``namespace``.

    A missing namespace, or one that holds a plain string, yields an empty
    Group: every key looked up in it then falls back to the key itself.
    """
    match table.get(namespace):
        case Group() as group:
            return group
        case _:
            logger.debug("namespace_not_found", namespace=namespace)
            return EMPTY_GROUP


def find_leaf(group: Group, key: str) -> str | None:
    """Walk ``key`` (dot separated) through ``group``.

    Returns:
        The leaf text, or None if any segment is missing or the path ends on
        a Group.
    """
    node: MessageNode = group
    for segment in key.split("."):
        match node:
            case Group() if segment in node:
                node = node.children[segment]
            case _:
                return None

    match node:
        case Leaf(text=text):
            return text
        case _:
            return None


def resolve_key(group: Group, key: str, namespace: str = "") -> str:
    """Resolve a dotted key to its leaf text.

    Missing keys are never an error: the key itself is returned so the gap
    shows up in the rendered page.

    Args:
        group: Namespace subtree (see select_namespace).
        key: Dotted key path (e.g., "hero.title").
        namespace: Namespace name, only used for logging.

    Returns:
        Leaf text unprocessed, or ``key`` unchanged.
    """
    text = find_leaf(group, key)
    if text is None:
        logger.warning("translation_key_missing", namespace=namespace, key=key)
        return key
    return text
