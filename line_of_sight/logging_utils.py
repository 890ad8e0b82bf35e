"""
Logging setup shared by the whole package.
"""

import logging

from .config import LOG_FORMAT, LOG_LEVEL

# Single logger name for the package; modules log through children of it.
LOGGER_NAME = "line_of_sight"


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Return the package logger, or one of its children.

    The first call attaches a console handler to the package logger if it has
    none yet, so library users who configure logging themselves keep control.
    """
    root = logging.getLogger(LOGGER_NAME)
    if not root.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root.addHandler(handler)
        root.setLevel(LOG_LEVEL)

    if name is None:
        return root
    return root.getChild(name)


def set_level(level: int) -> None:
    """Change the package log level (the CLI uses this for --verbose)."""
    get_logger().setLevel(level)
