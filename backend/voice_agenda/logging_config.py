"""Process-wide logging setup.

configure_logging() is called once from the application entrypoint. The level
comes from LOG_LEVEL unless passed explicitly. Transcripts are user speech and
are only ever logged at DEBUG.
"""
from __future__ import annotations
import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


def resolve_level(level: str | int) -> int:
    """Map a level name or number to a logging level; unknown names fall back to INFO."""
    if isinstance(level, int):
        return level
    value = getattr(logging, str(level).strip().upper(), None)
    return value if isinstance(value, int) and not isinstance(value, bool) else logging.INFO


def configure_logging(level: str | int | None = None) -> None:
    if level is None:
        from .config import get_settings
        level = get_settings().log_level
    level = resolve_level(level)

    root = logging.getLogger()
    root.setLevel(level)
    # replace handlers so repeated calls (tests, reloads) don't duplicate output
    for h in root.handlers[:]:
        root.removeHandler(h)
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root.addHandler(handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))
