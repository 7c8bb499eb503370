from __future__ import annotations

from collections.abc import Iterable

from mcpxml.shared.constants import TAG_NAME_BOUNDARY_CHARS


def _open_tag(name: str) -> str:
    return "<" + name


def _close_tag(name: str) -> str:
    return "</" + name


def find_open_tag(buffer: str, name: str) -> int:
    """Index of the first ``<name`` in ``buffer`` that is not a longer name, or -1.

    ``<name`` must be followed by end of buffer, ``>``, ``/`` or whitespace.
    """
    open_tag = _open_tag(name)
    idx = buffer.find(open_tag)
    while idx != -1:
        after = idx + len(open_tag)
        if after >= len(buffer) or buffer[after] in TAG_NAME_BOUNDARY_CHARS:
            return idx
        idx = buffer.find(open_tag, idx + 1)
    return -1


def find_next_tool_start(buffer: str, tool_names: Iterable[str]) -> tuple[int, str | None]:
    """Earliest opening tag of any known tool as ``(index, name)``; ``(-1, None)`` if none."""
    best = -1
    best_name: str | None = None
    for name in tool_names:
        idx = find_open_tag(buffer, name)
        if idx == -1:
            continue
        if best == -1 or idx < best:
            best = idx
            best_name = name
    return best, best_name


def find_close_tag_end(buffer: str, name: str) -> int:
    """Index just past the ``>`` of the first ``</name...>``, or -1 while incomplete."""
    needle = _close_tag(name)
    idx = buffer.find(needle)
    if idx == -1:
        return -1
    after = idx + len(needle)
    if after >= len(buffer):
        return -1
    gt = buffer.find(">", after)
    if gt == -1:
        return -1
    return gt + 1


def is_possible_tool_tag_prefix(text: str, tool_names: Iterable[str]) -> bool:
    """Whether ``text`` could still grow into an opening or closing tag of a known tool."""
    if not text.startswith("<"):
        return False
    return any(
        _open_tag(name).startswith(text) or _close_tag(name).startswith(text)
        for name in tool_names
    )


def split_for_partial_tag(buffer: str, tool_names: Iterable[str]) -> tuple[str, str]:
    """Split ``buffer`` into ``(emit, keep)``, holding back a trailing partial tag."""
    last_lt = buffer.rfind("<")
    if last_lt == -1:
        return buffer, ""
    tail = buffer[last_lt:]
    if is_possible_tool_tag_prefix(tail, tool_names):
        return buffer[:last_lt], tail
    return buffer, ""
