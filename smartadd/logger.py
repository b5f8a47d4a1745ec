from __future__ import annotations

import logging
import os
import sys

from dotenv import find_dotenv, load_dotenv

VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ANSIColors:
    DEBUG = "\033[36m"  # Cyan
    INFO = "\033[32m"  # Green
    WARNING = "\033[33m"  # Yellow
    ERROR = "\033[31m"  # Red
    CRITICAL = "\033[1;31m"  # Bold Red
    RESET = "\033[0m"


class CustomFormatter(logging.Formatter):
    """Colors records by level when writing to a terminal."""

    def __init__(self, fmt: str | None = None, *, color: bool = True) -> None:
        super().__init__(fmt)
        self.color = color

    def format(self, record: logging.LogRecord) -> str:
        log_message = super().format(record)
        if not self.color:
            return log_message

        log_color = {
            logging.DEBUG: ANSIColors.DEBUG,
            logging.INFO: ANSIColors.INFO,
            logging.WARNING: ANSIColors.WARNING,
            logging.ERROR: ANSIColors.ERROR,
            logging.CRITICAL: ANSIColors.CRITICAL,
        }.get(record.levelno, ANSIColors.RESET)

        return f"{log_color}{log_message}{ANSIColors.RESET}"


def env_log_level(default: str = "INFO") -> str:
    """LOG_LEVEL from the environment (or .env); unknown values fall back to `default`."""
    load_dotenv(find_dotenv(usecwd=True))
    level = os.getenv("LOG_LEVEL", default).upper()
    if level not in VALID_LOG_LEVELS:
        return default
    return level


def configure_logging(level: str | None = None) -> None:
    """Install a stderr handler on the package logger. Scripts call this, the library does not."""

    lvl = (level or env_log_level()).upper()
    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(
        CustomFormatter("%(asctime)s - %(levelname)s - %(name)s - %(message)s", color=sys.stderr.isatty())
    )
    root = logging.getLogger("smartadd")
    root.handlers[:] = [handler]
    root.setLevel(getattr(logging, lvl, logging.INFO))


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the package namespace."""
    return logging.getLogger(name)
