from typing import Any
import os
import logging

from ..core.config import Config, LOG_LEVELS

# Try to import rich, but don't fail if not available
try:
    import rich
    import rich.logging
except ImportError:
    rich = None

__all__ = 'debug', 'info', 'warning', 'error', 'logger', 'configure'


class RangeLogFormatter(logging.Formatter):
    """Formatter for the plain (non-rich) handler"""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as: [timestamp] LEVEL message"""
        if record.args:
            record.msg = record.msg % record.args
            record.args = ()
        return super().format(record)


def _create_handler(config: Config) -> logging.Handler:
    if rich and config.color_log:
        handler = rich.logging.RichHandler(
            show_time=True,
            show_level=True,
            omit_repeated_times=False,
            markup=False,
            show_path=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%Y-%m-%d %H:%M:%S]"))
    else:
        handler = logging.StreamHandler()
        handler.setFormatter(RangeLogFormatter(
            "%(asctime)s %(levelname)-7s %(message)s",
            datefmt="[%Y-%m-%d %H:%M:%S%z]")
        )
    return handler


def configure(config: Config) -> None:
    """
    Apply a configuration to the library logger, replacing its handler.

    :param config: The configuration to apply
    """
    if logger.hasHandlers():
        logger.handlers.clear()
    logger.setLevel(config.log_level)
    logger.addHandler(_create_handler(config))


# Create logger
logger = logging.getLogger("rangealgo")
configure(Config.from_env())
if os.environ.get("RANGEALGO_LOG_LEVEL", "WARNING").upper() not in LOG_LEVELS:
    logger.warning("Invalid RANGEALGO_LOG_LEVEL %r, using WARNING", os.environ["RANGEALGO_LOG_LEVEL"])


def debug(msg: str, *args: Any) -> None:
    """
    Log a debug message.

    :param msg: Message format string (%-style)
    :param args: Arguments to format the message
    """
    logger.debug(msg, *args)


def info(msg: str, *args: Any) -> None:
    """
    Log an info message.

    :param msg: Message format string (%-style)
    :param args: Arguments to format the message
    """
    logger.info(msg, *args)


def warning(msg: str, *args: Any) -> None:
    """
    Log a warning message.

    :param msg: Message format string (%-style)
    :param args: Arguments to format the message
    """
    logger.warning(msg, *args)


def error(msg: str, *args: Any) -> None:
    """
    Log an error message.

    :param msg: Message format string (%-style)
    :param args: Arguments to format the message
    """
    logger.error(msg, *args)
