"""
Logging configuration for tabswitch.

The library only emits records through loguru's shared logger. Applications
(the demo app included) call configure_logging() once at startup to decide
where those records go.
"""

import os
import sys
from typing import Optional

from loguru import logger

from ..config import get_setting


LEVEL_ENV_VAR = "TABSWITCH_LOG_LEVEL"
FILE_ENV_VAR = "TABSWITCH_LOG_FILE"


def _resolve_level(level: Optional[str]) -> str:
    if level:
        return level.upper()
    env_level = os.environ.get(LEVEL_ENV_VAR)
    if env_level:
        return env_level.upper()
    return str(get_setting("logging", "level", "INFO")).upper()


def _resolve_log_file(log_file: Optional[str]) -> Optional[str]:
    if log_file is not None:
        return log_file or None
    env_file = os.environ.get(FILE_ENV_VAR)
    if env_file:
        return env_file
    return get_setting("logging", "log_file", "") or None


def configure_logging(
    level: Optional[str] = None,
    log_file: Optional[str] = None,
    console: Optional[bool] = None,
) -> str:
    """
    Replace loguru's default handler with tabswitch's sinks.

    Explicit arguments win over the TABSWITCH_LOG_LEVEL / TABSWITCH_LOG_FILE
    environment variables, which win over the [logging] config section.

    Returns:
        The level that was applied
    """
    resolved_level = _resolve_level(level)
    resolved_file = _resolve_log_file(log_file)
    if console is None:
        console = bool(get_setting("logging", "console", True))

    logger.remove()  # Remove default handler
    if console:
        logger.add(sys.stderr, level=resolved_level, colorize=True)
    if resolved_file:
        logger.add(
            resolved_file,
            level=resolved_level,
            rotation="10 MB",
            retention="7 days",
        )

    logger.debug(f"tabswitch logging configured: level={resolved_level}, file={resolved_file}, console={console}")
    return resolved_level
