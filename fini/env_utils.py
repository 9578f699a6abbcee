import logging
import os


def log_level() -> int:
    """Return the logging level named by ``FINI_LOG_LEVEL`` (default WARNING)."""
    val = os.getenv("FINI_LOG_LEVEL", "WARNING").upper()
    level = logging.getLevelName(val)
    return level if isinstance(level, int) else logging.WARNING


def no_color_requested() -> bool:
    """Return True when ``NO_COLOR`` is set to a non-empty value."""
    return bool(os.getenv("NO_COLOR"))
