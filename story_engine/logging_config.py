"""Shared logging configuration for the story engine.

Library modules only create loggers; call ``configure_logging()`` once at an
entry point to emit them. The function is idempotent: if the root logger
already has handlers, it does nothing.
"""

import logging
import os
from typing import Optional

ENV_LOG_LEVEL = "STORY_ENGINE_LOG_LEVEL"


def configure_logging(level: Optional[int] = None) -> None:
    """Configure the root logger with a console handler.

    Without an explicit level, STORY_ENGINE_LOG_LEVEL is used (default INFO).
    """
    root = logging.getLogger()
    if root.handlers:
        return

    if level is None:
        level_name = os.environ.get(ENV_LOG_LEVEL, "INFO").upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            level = logging.INFO

    fmt = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(fmt))
    root.addHandler(console)
    root.setLevel(level)
