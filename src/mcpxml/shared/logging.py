import logging
import sys
from pathlib import Path

from loguru import logger


class _InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord):
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno

        logger.opt(depth=3, exception=record.exc_info).log(level, record.getMessage())


def logger_setup(log_file: Path | None, verbosity: int = 0):
    """Set up logging for this process - formatting, file handles, verbosity and output"""
    logger.remove()

    # replace all stdlib loggers with _InterceptHandlers that log to loguru
    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)

    if verbosity < 0:
        level = "WARNING"
    elif verbosity == 0:
        level = "INFO"
    else:
        level = "DEBUG"
    location = " | {name}:{function}:{line} " if verbosity > 0 else ""
    logger.add(
        sys.__stderr__,  # type: ignore
        format=f"[ {{time:HH:mm:ss.SSS}} | <level>{{level: <8}}</level>{location}] <level>{{message}}</level>",
        level=level,
        colorize=True,
    )
    if log_file:
        logger.add(
            log_file,
            format="[ {time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} ] {message}",
            level="DEBUG" if verbosity > 0 else "INFO",
            colorize=False,
            enqueue=True,
            rotation="1 week",
        )


def logger_cleanup():
    """Flush all queues before shutting down so any in-flight logs are written to disk"""
    logger.complete()
