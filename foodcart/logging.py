"""
Logging setup shared by the API and the cart services.

Usage:
    from foodcart.logging import get_logger
    logger = get_logger(__name__)

LOG_LEVEL sets the level of the `foodcart` loggers. On Vercel (VERCEL=1)
records go out without timestamps since the platform adds its own.
"""

import logging
import os
import sys
from functools import cache

LOG_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"
LOG_FORMAT_VERCEL = "%(levelname)s [%(name)s] %(message)s"

# Transport loggers of the Supabase and Upstash clients
CLIENT_LOGGERS = ("httpx", "httpcore", "postgrest", "upstash_redis")

_CONTROL_ESCAPES = str.maketrans({"\n": "\\n", "\r": "\\r", "\t": "\\t", "\x00": ""})


def _level_from_env() -> int:
    name = os.environ.get("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def configure_logging() -> None:
    """Send log records to stdout unless the host already configured logging."""
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(sys.stdout)
        fmt = LOG_FORMAT_VERCEL if os.environ.get("VERCEL") == "1" else LOG_FORMAT
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)
        root.setLevel(logging.INFO)

    logging.getLogger("foodcart").setLevel(_level_from_env())
    for name in CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


configure_logging()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _sanitize(value, limit: int, suffix: str) -> str:
    if value is None or value == "":
        return "N/A"
    text = str(value).translate(_CONTROL_ESCAPES)
    return text if len(text) <= limit else text[:limit] + suffix


def sanitize_id_for_logging(id_value: str | int | None) -> str:
    """Short, single-line form of a user or record id (first 8 chars)."""
    return _sanitize(id_value, 8, "")


def sanitize_string_for_logging(value: str | None, max_length: int = 50) -> str:
    """User-supplied text with CR/LF/tabs escaped, truncated to `max_length`."""
    return _sanitize(value, max_length, "...")
