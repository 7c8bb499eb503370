from __future__ import annotations

import json
import re
from functools import lru_cache
from typing import Any, cast

from loguru import logger

from mcpxml.shared.ids import make_tool_use_id
from mcpxml.shared.types.segments import McpToolCall

# Same whitespace set as the streaming tag boundary, not Unicode \s.
_WS = r"[ \t\n\r]"


@lru_cache(maxsize=256)
def _tag_patterns(tool_name: str) -> tuple[re.Pattern[str], re.Pattern[str]]:
    escaped = re.escape(tool_name)
    open_pattern = re.compile(rf"^{_WS}*<{escaped}({_WS}[^>]*)?>")
    close_pattern = re.compile(rf"</{escaped}{_WS}*>{_WS}*$")
    return open_pattern, close_pattern


def try_parse_mcp_tool_call_xml(xml_text: str, tool_name: str) -> McpToolCall | None:
    """Decode a complete ``<tool_name ...>{json}</tool_name>`` span.

    Attributes on the opening tag are ignored. An empty or whitespace-only body
    decodes to an empty input. Returns None when the span is not wrapped in
    ``tool_name`` tags or the body is not a JSON object; a ``null`` body counts
    as not an object and is rejected too.
    """
    if not tool_name or not xml_text:
        return None

    open_pattern, close_pattern = _tag_patterns(tool_name)
    open_match = open_pattern.search(xml_text)
    close_match = close_pattern.search(xml_text)
    if open_match is None or close_match is None:
        return None
    if close_match.start() < open_match.end():
        return None

    inner = xml_text[open_match.end() : close_match.start()].strip()
    if not inner:
        return McpToolCall(name=tool_name, input={}, id=make_tool_use_id(tool_name))

    try:
        parsed = json.loads(inner)  # pyright: ignore[reportAny]
    except json.JSONDecodeError as e:
        logger.debug(f"Tool call body for {tool_name} is not valid JSON: {e}")
        return None

    if not isinstance(parsed, dict):
        logger.debug(f"Tool call body for {tool_name} is not a JSON object")
        return None

    return McpToolCall(
        name=tool_name,
        input=cast(dict[str, Any], parsed),
        id=make_tool_use_id(tool_name),
    )
