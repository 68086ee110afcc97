import logging
import sys

from .config import Config

NOISY_LOGGERS = ("uvicorn.access", "httpx", "httpcore")


class PlainFormatter(logging.Formatter):
    """timestamp | LEVEL | module | message"""

    def format(self, record):
        timestamp = self.formatTime(record, self.datefmt)
        short_name = record.name.split(".")[-1]
        message = record.getMessage()
        line = f"{timestamp} | {record.levelname:8} | {short_name:12} | {message}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def setup_logging(level=None) -> logging.Handler:
    """
    Install a single stdout handler on the root logger.

    Args:
        level: Level name or number (default: Config.core.LOG_LEVEL, DEBUG if Config.core.DEBUG)

    Returns:
        The installed handler
    """
    if level is None:
        level = "DEBUG" if Config.core.DEBUG else Config.core.LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(PlainFormatter(datefmt="%H:%M:%S"))

    root_logger = logging.getLogger()
    root_logger.handlers = []
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    return handler
