from __future__ import annotations
import logging
import os

DEFAULT_PROMPT = ">>> "
DEFAULT_LOG_LEVEL = "WARNING"


def get_log_level() -> int:
    """Logging level named by RISP_LOG_LEVEL (e.g. DEBUG); unknown names fall back to WARNING."""
    raw = os.environ.get("RISP_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else logging.WARNING


def color_enabled(stream) -> bool:
    if os.environ.get("RISP_NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


def get_prompt() -> str:
    return os.environ.get("RISP_PROMPT", DEFAULT_PROMPT)
