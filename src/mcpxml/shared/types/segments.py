from typing import Annotated, Any, Literal

from pydantic import BaseModel, Field


class McpTool(BaseModel, frozen=True):
    """An MCP tool definition as advertised to the model."""

    name: str
    description: str | None = None
    # JSON text of the tool's input schema
    input_schema: str | None = None


class McpToolCall(BaseModel, frozen=True):
    """A tool call decoded from a complete ``<name>{...}</name>`` element."""

    name: str
    input: dict[str, Any]
    id: str


class TextSegment(BaseModel, frozen=True):
    type: Literal["text"] = "text"
    text: str = Field(min_length=1)


class ToolSegment(BaseModel, frozen=True):
    type: Literal["tool"] = "tool"
    name: str
    input: dict[str, Any]
    id: str = Field(min_length=1)

    @classmethod
    def from_call(cls, call: McpToolCall) -> "ToolSegment":
        return cls(name=call.name, input=call.input, id=call.id)

    def to_tool_use_block(self) -> dict[str, Any]:
        """Shape this call as a Messages API ``tool_use`` content block."""
        return {
            "type": "tool_use",
            "id": self.id,
            "name": self.name,
            "input": self.input,
        }


Segment = Annotated[TextSegment | ToolSegment, Field(discriminator="type")]
