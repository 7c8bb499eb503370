from collections.abc import Sequence

from mcpxml.bridge.tools import is_mcp_tool_name
from mcpxml.shared.constants import MCP_TOOL_PREFIX, MCP_TOOL_RESULT_TAG
from mcpxml.shared.types.segments import McpTool


def _example_call(prefix: str) -> str:
    name = f"{prefix}server__tool"
    return f'<{name}>{{"arg":"value"}}</{name}>'


def _example_result(prefix: str) -> str:
    return (
        f"<{MCP_TOOL_RESULT_TAG}>"
        f'{{"name":"{prefix}server__tool","tool_use_id":"toolu_xxx","result":"...","is_error":false}}'
        f"</{MCP_TOOL_RESULT_TAG}>"
    )


def build_mcp_xml_system_prompt(
    mcp_tools: Sequence[McpTool],
    prefix: str = MCP_TOOL_PREFIX,
) -> str:
    """Instructions telling the model to call MCP tools as XML instead of tool_use.

    Returns an empty string when there are no tools, so callers can append the
    result to a system prompt unconditionally.
    """
    if not mcp_tools:
        return ""

    lines = [
        f"==== MCP XML tool calls (only {prefix}*) ====",
        f"When you need to call an MCP tool whose name starts with `{prefix}`:",
        "1) Do not use tool_use/function_call for it (that path fails for these tools).",
        "2) Output a single XML block directly (XML only, no explanation, no markdown).",
        "3) The root tag must be the tool name and its content must be JSON describing the tool's input.",
        "",
        "Example:",
        _example_call(prefix),
        "",
        "Once the tool has run, its result is returned to you as XML like this:",
        _example_result(prefix),
        "",
        "When is_error is true the tool failed and result holds the error message.",
        "",
        f"For tools not named `{prefix}*`, keep using the normal tool calling mechanism.",
        "",
        "Available MCP tools (name / description / input_schema):",
    ]

    for tool in mcp_tools:
        if not is_mcp_tool_name(tool.name, prefix):
            continue
        line = f"- {tool.name}"
        if tool.description:
            line += f": {tool.description}"
        lines.append(line)
        if tool.input_schema:
            lines.append(f"  input_schema: {tool.input_schema}")

    return "\n".join(lines)
