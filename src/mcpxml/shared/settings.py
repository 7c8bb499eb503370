import os

from loguru import logger
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from mcpxml.shared.constants import (
    MCP_TOOL_PREFIX,
    MCP_TOOL_PREFIX_ENV,
    MCP_XML_DISABLED_VALUES,
    MCP_XML_ENV,
)


def is_mcp_xml_enabled() -> bool:
    """Whether XML tool calling is switched on for this process.

    Unset or blank means enabled.
    """
    raw = os.environ.get(MCP_XML_ENV, "")
    if not raw.strip():
        return True
    return raw.strip().lower() not in MCP_XML_DISABLED_VALUES


class BridgeSettings(BaseModel):
    model_config = ConfigDict(
        extra="forbid",
        frozen=True,
    )

    enabled: bool = True
    tool_prefix: str = Field(default=MCP_TOOL_PREFIX, min_length=1)


def load_settings() -> BridgeSettings:
    enabled = is_mcp_xml_enabled()
    prefix = os.environ.get(MCP_TOOL_PREFIX_ENV)
    if prefix is None:
        return BridgeSettings(enabled=enabled)

    try:
        return BridgeSettings(enabled=enabled, tool_prefix=prefix)
    except ValidationError as e:
        logger.warning(f"Invalid {MCP_TOOL_PREFIX_ENV}={prefix!r}, using default: {e}")
        return BridgeSettings(enabled=enabled)
