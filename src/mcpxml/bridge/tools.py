from collections.abc import Iterable

from mcpxml.shared.constants import MCP_TOOL_PREFIX


def is_mcp_tool_name(name: str, prefix: str = MCP_TOOL_PREFIX) -> bool:
    return name.startswith(prefix)


def get_mcp_tool_names(names: Iterable[str], prefix: str = MCP_TOOL_PREFIX) -> list[str]:
    """Keep only the tools that should be called through XML, in their original order."""
    return [name for name in names if is_mcp_tool_name(name, prefix)]
