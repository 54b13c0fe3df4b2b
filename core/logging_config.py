# core/logging_config.py
import logging
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: Optional[str] = None) -> None:
    """Configure the root logger with a console handler.

    Only the first call attaches a handler; later calls just adjust the level,
    so both the API factory and the CLI can call this freely.

    Args:
        level: Logging level name (e.g. "DEBUG", "INFO"), case insensitive.
               Falls back to INFO when unknown or omitted.
    """
    root = logging.getLogger()
    numeric_level = getattr(logging, (level or "INFO").upper(), logging.INFO)
    root.setLevel(numeric_level)

    if root.handlers:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)
