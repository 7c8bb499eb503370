import argparse
import sys
from collections.abc import Iterator, Sequence
from pathlib import Path
from typing import Self, TextIO

from loguru import logger
from pydantic import BaseModel, ConfigDict, PositiveInt

from mcpxml.bridge.tools import get_mcp_tool_names
from mcpxml.parsing.stream import parse_stream
from mcpxml.shared.logging import logger_cleanup, logger_setup
from mcpxml.shared.settings import BridgeSettings, load_settings
from mcpxml.shared.types.segments import Segment, TextSegment


class Args(BaseModel):
    model_config = ConfigDict(extra="forbid")

    verbosity: int = 0
    tools: list[str] = []
    all_tools: bool = False
    chunk_size: PositiveInt = 64
    log_file: Path | None = None

    @classmethod
    def parse(cls, argv: Sequence[str] | None = None) -> Self:
        parser = argparse.ArgumentParser(
            prog="mcpxml",
            description="Split a model's text output on stdin into text and XML tool-call segments (JSON lines).",
        )
        default_verbosity = 0
        parser.add_argument(
            "-q",
            "--quiet",
            action="store_const",
            const=-1,
            dest="verbosity",
            default=default_verbosity,
        )
        parser.add_argument(
            "-v",
            "--verbose",
            action="count",
            dest="verbosity",
            default=default_verbosity,
        )
        parser.add_argument(
            "-t",
            "--tool",
            action="append",
            dest="tools",
            default=[],
            help="Tool name to recognise; may be repeated.",
        )
        parser.add_argument(
            "--all-tools",
            action="store_true",
            dest="all_tools",
            help="Also recognise tools outside the MCP namespace.",
        )
        parser.add_argument(
            "--chunk-size",
            type=int,
            dest="chunk_size",
            default=64,
        )
        parser.add_argument(
            "--log-file",
            type=Path,
            dest="log_file",
            default=None,
        )

        args = parser.parse_args(argv)
        return cls(**vars(args))  # pyright: ignore[reportAny] - We are intentionally validating here, we can't do it statically


def _read_chunks(stream: TextIO, chunk_size: int) -> Iterator[str]:
    while chunk := stream.read(chunk_size):
        yield chunk


def _select_tool_names(args: Args, settings: BridgeSettings) -> list[str]:
    if args.all_tools:
        return list(args.tools)
    names = get_mcp_tool_names(args.tools, settings.tool_prefix)
    for dropped in sorted(set(args.tools) - set(names)):
        logger.warning(f"Ignoring {dropped}: not in the {settings.tool_prefix} namespace")
    return names


def run(args: Args, stdin: TextIO, stdout: TextIO) -> int:
    settings = load_settings()
    chunks = _read_chunks(stdin, args.chunk_size)

    segments: Iterator[Segment]
    if settings.enabled:
        tool_names = _select_tool_names(args, settings)
        logger.debug(f"Recognising tools: {tool_names}")
        segments = parse_stream(chunks, tool_names)
    else:
        logger.info("XML tool calling disabled, passing input through")
        segments = (TextSegment(text=chunk) for chunk in chunks)

    count = 0
    for segment in segments:
        stdout.write(segment.model_dump_json() + "\n")
        count += 1
    stdout.flush()
    logger.debug(f"Emitted {count} segments")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    args = Args.parse(argv)
    logger_setup(args.log_file, args.verbosity)
    try:
        return run(args, sys.stdin, sys.stdout)
    finally:
        logger_cleanup()


if __name__ == "__main__":
    sys.exit(main())
