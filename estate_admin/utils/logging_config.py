"""Centralized logging configuration with environment variable support."""

import os
import logging
import sys
from pythonjsonlogger import jsonlogger


class LoggingConfig:
    """Centralized logging configuration."""

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()
    LOG_FORMAT = os.environ.get("LOG_FORMAT", "json").lower()
    LOG_MASK_SENSITIVE = os.environ.get("LOG_MASK_SENSITIVE", "true").lower() == "true"
    LOG_SLOW_OPERATION_THRESHOLD_MS = int(os.environ.get("LOG_SLOW_OPERATION_THRESHOLD_MS", "500"))

    HANDLER_NAME = "estate_admin"

    # Store backends talk HTTP through these
    QUIET_LOGGERS = ("httpx", "httpcore", "supabase", "postgrest")

    @classmethod
    def build_formatter(cls) -> logging.Formatter:
        if cls.LOG_FORMAT == "json":
            return jsonlogger.JsonFormatter(
                "%(timestamp)s %(levelname)s %(name)s %(message)s",
                timestamp=True
            )
        return logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    @classmethod
    def setup_logging(cls) -> None:
        """
        Install the stdout handler on the root logger.

        Safe to call from every entry point: a handler installed by an
        earlier call is replaced, handlers added by others are left alone.
        """
        level = getattr(logging, cls.LOG_LEVEL, logging.INFO)
        root_logger = logging.getLogger()
        root_logger.setLevel(level)

        for existing in [h for h in root_logger.handlers if h.get_name() == cls.HANDLER_NAME]:
            root_logger.removeHandler(existing)

        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(cls.HANDLER_NAME)
        handler.setLevel(level)
        handler.setFormatter(cls.build_formatter())
        root_logger.addHandler(handler)

        for name in cls.QUIET_LOGGERS:
            logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name."""
    return logging.getLogger(name)
