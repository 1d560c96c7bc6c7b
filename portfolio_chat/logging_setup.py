"""Central logging setup for the service."""
from __future__ import annotations
import logging
import re
import sys


def setup_logging(level: int | str = logging.INFO) -> None:
    """
    Configure root logger with a single stdout handler.

    Args:
        level: Logging level, as an int or a level name such as "DEBUG".
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    fmt = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"
    handler.setFormatter(logging.Formatter(fmt))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


_KEY_PARAM = re.compile(r"([?&]key=)[^&\s'\"]+")


def redact_secrets(text: str) -> str:
    """Mask the value of any `key=` query parameter in a URL-bearing message."""
    return _KEY_PARAM.sub(r"\1***", text)
