"""Project logger for lowbar.

Helpers log through ``logging.getLogger(__name__)``; those module loggers sit
under ``"lowbar"`` and reach the single stdout handler installed here.
"""

import logging
import sys

from lowbar.core.config import Settings, settings as default_settings

__all__ = ["logger", "setup_logger", "HANDLER_NAME"]

HANDLER_NAME = "lowbar-stdout"


def setup_logger(
    name: str = "lowbar",
    level: str | None = None,
    format_string: str | None = None,
    config: Settings | None = None,
) -> logging.Logger:
    """
    Configure and return a logger instance.

    Args:
        name: Logger name, ``"lowbar"`` for the package root
        level: Log level overriding ``config.LOG_LEVEL``
        format_string: Format overriding ``config.LOG_FORMAT``
        config: Settings to read defaults from

    Returns:
        Configured logger instance
    """
    config = config or default_settings
    level = (level or config.LOG_LEVEL).upper()
    format_string = format_string or config.LOG_FORMAT

    logger = logging.getLogger(name)

    # Handlers attached by others (e.g. test capture) do not count
    if not any(h.get_name() == HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(
            logging.Formatter(fmt=format_string, datefmt="%Y-%m-%d %H:%M:%S")
        )
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, level))
        logger.propagate = False

    return logger


logger = setup_logger()
