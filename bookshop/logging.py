"""
Logging setup for BookShop.

Usage:
    from bookshop.logging import get_logger
    logger = get_logger(__name__)

Session contents are visitor-controlled: pass them through
``summarize_blob`` / ``sanitize_id_for_logging`` before logging.
"""

import logging
import os
import sys
from functools import cache


def _configure_root_logger() -> None:
    """Attach a stdout handler to the root logger unless one exists."""
    root = logging.getLogger()
    if root.handlers:
        return

    level = getattr(logging, os.environ.get("LOG_LEVEL", "INFO").upper(), logging.INFO)
    root.setLevel(level)

    handler = logging.StreamHandler(sys.stdout)
    handler.setLevel(level)
    if os.environ.get("BOOKSHOP_ENV") == "production":
        # Hosting log pipelines add their own timestamps
        handler.setFormatter(logging.Formatter("%(levelname)s - %(name)s - %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    root.addHandler(handler)

    # Upstash talks REST over httpx
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)


_configure_root_logger()


@cache
def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def _escape(value: str) -> str:
    """Neutralize characters that could forge log lines (CWE-117)."""
    return (
        value.replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
        .replace("\x00", "")
    )


def sanitize_id_for_logging(id_value: str | None) -> str:
    """Session ids are secrets: log only an escaped 8-char prefix."""
    if not id_value:
        return "N/A"
    return _escape(str(id_value))[:8]


def summarize_blob(data: bytes | None, preview: int = 50) -> str:
    """
    Describe a raw session value for a log line.

    Returns the byte length plus an escaped, truncated text preview, e.g.
    ``12 bytes: '[{"Id":1,...'``. Undecodable bytes are replaced, never raised.
    """
    if data is None:
        return "no data"
    text = _escape(data.decode("utf-8", errors="replace"))
    if len(text) > preview:
        text = text[:preview] + "..."
    return f"{len(data)} bytes: {text!r}"
