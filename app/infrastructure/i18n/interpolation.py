"""Placeholder substitution for resolved messages."""

import re
from typing import Optional

from infrastructure.i18n.models import ParameterMap

PLACEHOLDER_PATTERN = re.compile(r"\{([A-Za-z0-9_]+)\}")


def interpolate(message: str, params: Optional[ParameterMap] = None) -> str:
    """Replace ``{name}`` placeholders with values from ``params``.

    Values are converted with ``str()``. A placeholder whose name is missing
    from ``params`` (or maps to None) is left as written, braces included.
    Substituted values are not scanned again.

    Args:
        message: Resolved message text.
        params: Placeholder values. None returns ``message`` untouched.

    Returns:
        Interpolated message.
    """
    if params is None:
        return message

    def _substitute(match: re.Match) -> str:
        value = params.get(match.group(1))
        if value is None:
            return match.group(0)
        return str(value)

    return PLACEHOLDER_PATTERN.sub(_substitute, message)
