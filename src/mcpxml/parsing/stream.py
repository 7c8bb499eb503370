from __future__ import annotations

from collections.abc import Iterable, Iterator

from loguru import logger

from mcpxml.parsing.decode import try_parse_mcp_tool_call_xml
from mcpxml.parsing.tags import (
    find_close_tag_end,
    find_next_tool_start,
    split_for_partial_tag,
)
from mcpxml.shared.types.segments import Segment, TextSegment, ToolSegment


class XmlStreamParser:
    """Stateful streaming parser for XML-wrapped tool calls.

    Feed it raw model text deltas. It emits a sequence of segments:

    * ``TextSegment`` => passthrough content, in stream order
    * ``ToolSegment`` => a complete ``<name>{json}</name>`` element for a known tool

    Anything that could still turn into a known tag is held back until more text
    arrives, so the segments do not depend on how the stream was chunked. Call
    ``flush()`` once at end of stream to release whatever is still buffered.

    One instance per stream; not safe for concurrent use.
    """

    def __init__(self, tool_names: Iterable[str]):
        names: set[str] = set()
        for name in tool_names:
            if not isinstance(name, str):  # pyright: ignore[reportUnnecessaryIsInstance]
                raise TypeError(f"Tool names must be strings, got {type(name).__name__}")
            if name:
                names.add(name)
        self.tool_names: frozenset[str] = frozenset(names)
        # Sorted so the locator breaks ties the same way on every run.
        self._ordered_names: tuple[str, ...] = tuple(sorted(names))
        self._buffer = ""

    @property
    def pending(self) -> str:
        return self._buffer

    def push(self, text: str) -> list[Segment]:
        """Process one streamed text delta and return zero or more segments."""
        out: list[Segment] = []
        if not text:
            return out
        self._buffer += text

        while True:
            index, name = find_next_tool_start(self._buffer, self._ordered_names)
            if name is None:
                emit, keep = split_for_partial_tag(self._buffer, self._ordered_names)
                if emit:
                    out.append(TextSegment(text=emit))
                self._buffer = keep
                break

            if index > 0:
                out.append(TextSegment(text=self._buffer[:index]))
                self._buffer = self._buffer[index:]

            close_end = find_close_tag_end(self._buffer, name)
            if close_end == -1:
                # Incomplete, wait for more data
                break

            xml = self._buffer[:close_end]
            self._buffer = self._buffer[close_end:]

            call = try_parse_mcp_tool_call_xml(xml, name)
            if call is None:
                logger.debug(f"Passing through undecodable {name} element as text")
                out.append(TextSegment(text=xml))
            else:
                logger.debug(f"Decoded tool call {call.id}")
                out.append(ToolSegment.from_call(call))

        return out

    def flush(self) -> list[Segment]:
        """Release any buffered text at end of stream.

        An unfinished element or a trailing partial tag comes back as plain text
        so callers don't lose output.
        """
        out: list[Segment] = []
        if self._buffer:
            out.append(TextSegment(text=self._buffer))
            self._buffer = ""
        return out


def parse_stream(
    text_deltas: Iterable[str],
    tool_names: Iterable[str],
) -> Iterator[Segment]:
    """Convenience wrapper: parse an iterable of raw text deltas with a fresh parser."""
    parser = XmlStreamParser(tool_names)
    for delta in text_deltas:
        yield from parser.push(delta)

    yield from parser.flush()
