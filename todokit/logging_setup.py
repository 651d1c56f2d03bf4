"""Logging configuration for the todokit command line."""

import logging
import sys


class _ConsoleNoiseFilter(logging.Filter):
    """Keep todokit logs; let third-party loggers through only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name == "todokit" or record.name.startswith("todokit."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(level: str | int = logging.WARNING) -> None:
    """Configure a single stderr handler on the root logger.

    Call this once, early, from the entry point. Library code only creates
    module loggers and never configures handlers.
    """
    root = logging.getLogger()
    root.setLevel(level)

    # Remove any pre-existing handlers to avoid duplicates
    for handler in list(root.handlers):
        root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    handler.addFilter(_ConsoleNoiseFilter())
    root.addHandler(handler)

    logging.captureWarnings(True)
