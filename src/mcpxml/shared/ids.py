import itertools
import threading

_tool_use_counter = itertools.count(1)
_tool_use_lock = threading.Lock()


def make_tool_use_id(name: str) -> str:
    """Mint an id for a decoded tool call, e.g. ``mcp__fs__read-7``.

    Unique within this process only; the counter restarts with the interpreter.
    """
    with _tool_use_lock:
        n = next(_tool_use_counter)
    return f"{name}-{n}"
