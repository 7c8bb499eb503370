import json

from mcpxml.shared.constants import MCP_TOOL_RESULT_TAG

# Escaped inside the JSON body so tool output can never close the element early.
_HTML_ESCAPES = {
    "<": "\\u003c",
    ">": "\\u003e",
    "&": "\\u0026",
    "\u2028": "\\u2028",
    "\u2029": "\\u2029",
}
_HTML_ESCAPE_TABLE = str.maketrans(_HTML_ESCAPES)


def build_mcp_tool_result_xml(
    tool_name: str,
    tool_use_id: str,
    result: str,
    is_error: bool,
) -> str:
    """Wrap a tool's output so it can be fed back to the model as text."""
    payload = {
        "name": tool_name,
        "tool_use_id": tool_use_id,
        "result": result,
        "is_error": is_error,
    }
    body = json.dumps(payload, ensure_ascii=False, separators=(",", ":"))
    body = body.translate(_HTML_ESCAPE_TABLE)
    return f"<{MCP_TOOL_RESULT_TAG}>{body}</{MCP_TOOL_RESULT_TAG}>"
