"""Module: logger_helper.py

Author: Michael Economou
Date: 2025-05-12

Utility functions for working with loggers in a safe and consistent way.

Functions:
get_logger(name): Returns a propagating logger with Unicode-safe logging methods.
safe_text(text): Replaces problematic Unicode characters with ASCII equivalents.
safe_log(logger_func, message): Logs a message, falling back to ASCII if needed.

DevOnlyFilter:
A logging filter that hides dev-only debug messages from the console,
while still allowing them to be stored in file logs.
"""

import logging
import re
from functools import partial

from bulkrename import config

_REPLACEMENTS = {
    "→": "->",  # right arrow
    "—": "--",  # em dash
    "–": "-",  # en dash
    "…": "...",  # ellipsis
}
_REPLACEMENT_PATTERN = re.compile("|".join(map(re.escape, _REPLACEMENTS)))


def safe_text(text: str) -> str:
    """Replace unsupported Unicode characters with ASCII-safe alternatives.

    Args:
        text (str): The original text containing Unicode symbols.

    Returns:
        str: A version of the text with replacements for problematic characters.

    """
    return _REPLACEMENT_PATTERN.sub(lambda m: _REPLACEMENTS[m.group(0)], text)


def safe_log(logger_func, message, *args, **kwargs):
    """Log through `logger_func`, retrying with ASCII-safe text on UnicodeEncodeError.

    Args:
        logger_func (Callable): A logger method like logger.info or logger.error.
        message: The message to log.

    """
    if not isinstance(message, str):
        message = repr(message)
    try:
        logger_func(message, *args, **kwargs)
    except UnicodeEncodeError:
        logger_func(safe_text(message), *args, **kwargs)


def patch_logger_safe_methods(logger: logging.Logger) -> None:
    """Replace the logger's logging methods with safe_log-wrapped versions."""
    for method_name in ("debug", "info", "warning", "error", "critical"):
        orig_func = getattr(logger, method_name)
        setattr(logger, method_name, partial(safe_log, orig_func))


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger that delegates output to the root logger.

    Logging methods are patched to avoid UnicodeEncodeError on narrow consoles.

    Args:
        name (str): Optional name for the logger.

    Returns:
        logging.Logger: Configured and patched logger instance

    """
    logger = logging.getLogger(name or "bulkrename")
    logger.propagate = True

    if not getattr(logger, "_patched_for_safe_log", False):
        patch_logger_safe_methods(logger)
        logger._patched_for_safe_log = True

    return logger


class DevOnlyFilter(logging.Filter):
    """Hide records tagged with extra={"dev_only": True} unless enabled in config."""

    def filter(self, record: logging.LogRecord) -> bool:
        if config.SHOW_DEV_ONLY_IN_CONSOLE:
            return True
        return not getattr(record, "dev_only", False)
