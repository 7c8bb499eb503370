from .prompt import build_mcp_xml_system_prompt
from .results import build_mcp_tool_result_xml
from .tools import get_mcp_tool_names, is_mcp_tool_name

__all__ = [
    "build_mcp_xml_system_prompt",
    "build_mcp_tool_result_xml",
    "get_mcp_tool_names",
    "is_mcp_tool_name",
]
