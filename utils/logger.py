"""
utils/logger.py
---------------
Logging setup for the API process.
Application modules, uvicorn's server and access logs all go through one
stdout handler on the root logger, at the level given by LOG_LEVEL.
Modules obtain their logger with `get_logger(__name__)`.
"""

import logging
import sys

from config import LOG_LEVEL

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
HANDLER_NAME = "orders-stdout"

# uvicorn installs its own handlers on these unless told otherwise
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _configured() -> bool:
    return any(h.get_name() == HANDLER_NAME for h in logging.getLogger().handlers)


def setup_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """
    Attach the stdout handler to the root logger and route server logs to it.

    Safe to call repeatedly: the handler is added once and only the level
    changes on later calls.

    Args:
        level: Level name such as "INFO" or "DEBUG".

    Returns:
        The root logger.
    """
    root = logging.getLogger()
    root.setLevel(level)
    if not _configured():
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root.addHandler(handler)

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
    return root


def get_logger(name: str) -> logging.Logger:
    """Named logger for a module; sets up logging on first use."""
    if not _configured():
        setup_logging()
    return logging.getLogger(name)
