"""Tool-call parsing for streaming LLM output.

Models that cannot use native function calling for MCP tools are asked to write
each call as an XML element named after the tool, wrapping a JSON object:

    <mcp__server__tool>{"arg": "value"}</mcp__server__tool>

This package splits a live text stream into plain-text segments and decoded
tool-call segments, however the stream happens to be chunked.

Primary entrypoints:
- mcpxml.parsing.stream.XmlStreamParser
- mcpxml.parsing.stream.parse_stream
- mcpxml.parsing.decode.try_parse_mcp_tool_call_xml (already-complete spans)
"""

from .decode import try_parse_mcp_tool_call_xml
from .stream import XmlStreamParser, parse_stream

__all__ = ["XmlStreamParser", "parse_stream", "try_parse_mcp_tool_call_xml"]
