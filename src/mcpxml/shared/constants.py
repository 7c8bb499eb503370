from typing import Final

# Set to "0", "false", "no" or "off" to disable XML tool calling. Enabled by default.
MCP_XML_ENV: Final[str] = "MCPXML_ENABLED"
MCP_XML_DISABLED_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})

# Tools in this namespace are routed through XML; everything else keeps native calling.
MCP_TOOL_PREFIX: Final[str] = "mcp__"
MCP_TOOL_PREFIX_ENV: Final[str] = "MCPXML_TOOL_PREFIX"

MCP_TOOL_RESULT_TAG: Final[str] = "mcp_tool_result"

# Characters allowed directly after a tool name in an opening tag.
TAG_NAME_BOUNDARY_CHARS: Final[frozenset[str]] = frozenset({">", "/", " ", "\t", "\n", "\r"})
