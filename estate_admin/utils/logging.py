"""Structured logging helpers: correlation ids, operation timing and PII masking."""

import logging
import re
import time
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from functools import wraps
from typing import Any, Callable, Dict, Optional

from estate_admin.utils.logging_config import LoggingConfig, get_logger


_correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)

_EMAIL_PATTERN = re.compile(r"[A-Z0-9._%+-]+@[A-Z0-9.-]+\.[A-Z]{2,}", re.IGNORECASE)
_PHONE_PATTERN = re.compile(r"\+?\d[\d\s().-]{7,}\d")


def generate_correlation_id(prefix: str = "req") -> str:
    """Generate a unique correlation ID for one report run or request."""
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def get_correlation_id() -> Optional[str]:
    return _correlation_id_var.get()


@contextmanager
def correlation_context(correlation_id: Optional[str] = None):
    """Bind a correlation ID to every log record emitted inside the block."""
    token = _correlation_id_var.set(correlation_id or generate_correlation_id())
    try:
        yield _correlation_id_var.get()
    finally:
        _correlation_id_var.reset(token)


def mask_sensitive_data(text: Optional[str]) -> Optional[str]:
    """Redact email addresses and phone numbers (inquiry contact details)."""
    if not text or not LoggingConfig.LOG_MASK_SENSITIVE:
        return text
    text = _EMAIL_PATTERN.sub("[REDACTED_EMAIL]", text)
    return _PHONE_PATTERN.sub("[REDACTED_PHONE]", text)


class StructuredLogger:
    """
    Logger wrapper whose keyword arguments become record attributes.

    ``bind`` returns a child carrying fixed fields, so a repository can tag
    every line with its collection without repeating it at each call site.
    """

    def __init__(self, logger: logging.Logger, context: Optional[Dict[str, Any]] = None):
        self.logger = logger
        self.context = dict(context or {})

    def bind(self, **fields: Any) -> "StructuredLogger":
        return StructuredLogger(self.logger, {**self.context, **fields})

    def _log(self, level: int, message: str, exc_info: bool = False, **kwargs: Any) -> None:
        if not self.logger.isEnabledFor(level):
            return
        extra = dict(self.context)
        correlation_id = get_correlation_id()
        if correlation_id:
            extra["correlation_id"] = correlation_id
        extra.update(kwargs)
        self.logger.log(level, message, extra=extra, exc_info=exc_info)

    def debug(self, message: str, **kwargs: Any) -> None:
        self._log(logging.DEBUG, message, **kwargs)

    def info(self, message: str, **kwargs: Any) -> None:
        self._log(logging.INFO, message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._log(logging.WARNING, message, **kwargs)

    def error(self, message: str, exc_info: bool = False, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, exc_info=exc_info, **kwargs)

    def exception(self, message: str, **kwargs: Any) -> None:
        self._log(logging.ERROR, message, exc_info=True, **kwargs)


def get_structured_logger(name: str, **context: Any) -> StructuredLogger:
    return StructuredLogger(get_logger(name), context)


@contextmanager
def log_timing(operation_name: str, logger: Optional[StructuredLogger] = None, **context: Any):
    """Log how long the block took; warn above LOG_SLOW_OPERATION_THRESHOLD_MS."""
    logger = logger or get_structured_logger(__name__)
    threshold_ms = LoggingConfig.LOG_SLOW_OPERATION_THRESHOLD_MS
    start_time = time.perf_counter()
    logger.debug(f"Starting {operation_name}", operation=operation_name, **context)

    try:
        yield
    finally:
        elapsed_ms = round((time.perf_counter() - start_time) * 1000, 2)
        logger.info(
            f"Completed {operation_name}",
            operation=operation_name,
            processing_time_ms=elapsed_ms,
            **context
        )
        if elapsed_ms > threshold_ms:
            logger.warning(
                f"Slow operation: {operation_name}",
                operation=operation_name,
                processing_time_ms=elapsed_ms,
                threshold_ms=threshold_ms,
                **context
            )


def timed(operation_name: Optional[str] = None, logger: Optional[StructuredLogger] = None):
    """Wrap a coroutine function in ``log_timing``."""
    def decorator(func: Callable) -> Callable:
        name = operation_name or f"{func.__module__}.{func.__qualname__}"
        log = logger or get_structured_logger(func.__module__)

        @wraps(func)
        async def wrapper(*args, **kwargs):
            with log_timing(name, logger=log):
                return await func(*args, **kwargs)

        return wrapper

    return decorator
