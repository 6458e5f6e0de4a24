"""Rich-text parsing of ``<tag>content</tag>`` spans in resolved messages.

Only one level of markup is recognised. A span is an opening tag, the
shortest run of content containing no line terminator (LF, CR, U+2028
or U+2029), and a closing tag with the same name; the first matching close
tag ends the span, so same-named tags do not nest. Spans are matched left
to right without overlap.

Each span whose tag has a renderer in the component map becomes a
ComponentSegment holding the renderer's return value. Unknown tags and
unclosed tags are kept as literal text. Adjacent literal text is always
merged into one TextSegment.
"""

import re
from typing import List

from core.logging import get_module_logger
from infrastructure.i18n.models import (
    ComponentMap,
    ComponentSegment,
    Segment,
    TextSegment,
)

logger = get_module_logger()

TAG_PATTERN = re.compile(r"<([A-Za-z0-9_]+)>([^\n\r\u2028\u2029]*?)</\1>")


def _append_text(segments: List[Segment], text: str) -> None:
    if not text:
        return
    if segments and isinstance(segments[-1], TextSegment):
        segments[-1] = TextSegment(segments[-1].text + text)
    else:
        segments.append(TextSegment(text))


def parse_rich_text(message: str, components: ComponentMap) -> List[Segment]:
    """Split ``message`` into text and rendered component segments.

    Args:
        message: Resolved message text.
        components: Tag name -> renderer taking the tag's inner content.

    Returns:
        Segments in document order. An empty message gives an empty list.
    """
    segments: List[Segment] = []
    last_index = 0

    for match in TAG_PATTERN.finditer(message):
        _append_text(segments, message[last_index : match.start()])

        tag, content = match.group(1), match.group(2)
        renderer = components.get(tag)
        if renderer is None:
            logger.debug("rich_text_tag_unknown", tag=tag)
            _append_text(segments, match.group(0))
        else:
            segments.append(ComponentSegment(tag=tag, node=renderer(content)))

        last_index = match.end()

    _append_text(segments, message[last_index:])
    return segments
