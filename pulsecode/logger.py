"""
Package logger for pulsecode.

Conversions, waveform generation and PNG export report through one "pulsecode"
logger printing to stdout, each record tinted by its level.
"""

import logging
import sys


class ColorFormatter(logging.Formatter):
    """
    Formatter that wraps each record in an ANSI color chosen by its level.
    """

    GREY = "\x1b[38;20m"
    CYAN = "\x1b[36;20m"
    GREEN = "\x1b[32;20m"
    YELLOW = "\x1b[33;20m"
    RED = "\x1b[31;20m"
    BOLD_RED = "\x1b[31;1m"
    RESET = "\x1b[0m"
    FORMAT = "%(asctime)s [%(levelname)s] [%(name)s/%(filename)s] %(message)s"
    DATEFMT = "%Y-%m-%d %H:%M:%S"

    LEVEL_COLORS = {
        logging.DEBUG: CYAN,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        color = self.LEVEL_COLORS.get(record.levelno, self.GREY)
        formatter = logging.Formatter(
            f"{color}{self.FORMAT}{self.RESET}", datefmt=self.DATEFMT
        )
        return formatter.format(record)


def get_logger(name: str = "pulsecode") -> logging.Logger:
    """
    Returns a logger for pulsecode, attaching the colorized stdout handler the
    first time the logger is requested.

    Args:
        name: Name of the logger.

    Returns:
        The configured logging.Logger.
    """
    logger = logging.getLogger(name)

    if not logger.handlers:
        logger.setLevel(logging.INFO)
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(ColorFormatter())
        logger.addHandler(handler)

    return logger


logger = get_logger()


def set_log_level(level):
    """
    Sets the level of the pulsecode logger.

    Args:
        level: logging.DEBUG, logging.INFO, ... or the level name ("debug").

    Raises:
        ValueError: If a level name is not a known logging level.
    """
    if isinstance(level, str):
        name = level.upper()
        if not isinstance(logging.getLevelName(name), int):
            raise ValueError(f"Unknown log level: {level}")
        level = getattr(logging, name)
    logger.setLevel(level)
