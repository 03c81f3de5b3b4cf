# logger_utils.py - logging setup and block timing

import logging
import time
from typing import Optional

from rich.logging import RichHandler

LOG_FORMAT = "%(name)s | %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

logger = logging.getLogger("glossary_browser")


def configure_logging(level: str = "WARNING") -> None:
    """
    Send glossary_browser log records to the console through Rich.
    Safe to call more than once; the handler is only installed the first time.
    """
    logger.setLevel(str(level).upper())
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(show_path=False, rich_tracebacks=True)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)


def time_block(label: str, log: Optional[logging.Logger] = None) -> "_Timer":
    """
    Helper for measuring execution time of a code block.
    To use:
        with time_block("build index") as t:
            do_some_work()
        t.elapsed_ms
    The duration is logged at INFO level when the block exits.
    """
    return _Timer(label, log or logger)


class _Timer:
    """Context manager used internally to measure time for a code block."""

    def __init__(self, label: str, log: logging.Logger):
        self.label = label
        self.log = log
        self.start = 0.0
        self.elapsed_ms = 0.0

    def __enter__(self):
        self.start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb):
        """Record how long the block took, even if it raised."""
        self.elapsed_ms = (time.perf_counter() - self.start) * 1000.0
        self.log.info("%s done in %.1fms", self.label, self.elapsed_ms)
        return False
