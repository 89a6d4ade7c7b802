"""Process-wide logging sink, configured once by the command line entry point."""

from __future__ import annotations

import logging
import sys

from battlesnake_engine.config.types import LOG_LEVELS

LOG_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"


def configure_logging(level: str = "info") -> logging.Logger:
    """Attach a single stderr handler to the package logger and set its level.

    Calling this again replaces the previous handler rather than stacking one.
    """
    if level not in LOG_LEVELS:
        raise ValueError(f"log level must be one of {', '.join(LOG_LEVELS)}")
    root = logging.getLogger("battlesnake_engine")
    for handler in list(root.handlers):
        if getattr(handler, "_battlesnake_engine", False):
            root.removeHandler(handler)
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    handler._battlesnake_engine = True  # type: ignore[attr-defined]
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper()))
    return root
