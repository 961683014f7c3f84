"""Logging helpers that attach request context to error records."""

import logging
import traceback
from os import getenv
from typing import Any, Optional

logger = logging.getLogger("Wishwell")

# Seeded from APP_DEBUG; the app factory overrides it with Settings.debug
_debug = getenv("APP_DEBUG", "false").lower() == "true"


def set_debug(enabled: bool) -> None:
    global _debug
    _debug = bool(enabled)


def debug_enabled() -> bool:
    return _debug


def debug_log(message: str, *args, **kwargs) -> None:
    """
    Log a debug message only if debug mode (APP_DEBUG or Settings.debug) is on.

    Args:
        message: Log message (supports % formatting)
        *args: Positional arguments for message formatting
        **kwargs: Keyword arguments (level, exc_info, etc.)
    """
    if debug_enabled():
        level = kwargs.pop("level", logging.DEBUG)
        logger.log(level, message, *args, **kwargs)


def error_log(
    message: str,
    exc: Optional[BaseException] = None,
    context: Optional[dict] = None,
) -> None:
    """
    Log an error with optional context and exception details.

    Args:
        message: Error message
        exc: Optional exception object
        context: Optional dictionary with additional context (path, ids, ...)
    """
    parts = [message]

    if context:
        parts.append("Context: " + ", ".join(f"{k}={v}" for k, v in context.items()))

    if exc is not None:
        parts.append(f"Exception: {type(exc).__name__}: {exc}")
        if debug_enabled():
            formatted = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
            parts.append(f"Traceback:\n{formatted}")

    full_message = " | ".join(parts)
    if exc is not None:
        logger.error(full_message, exc_info=exc)
    else:
        logger.error(full_message)


def log_request_error(request: Any, exc: BaseException, message: Optional[str] = None) -> None:
    """Log ``exc`` together with the method, path and user agent of ``request``."""
    context = {}
    try:
        context["method"] = request.method
        context["path"] = request.url.path
        context["user_agent"] = request.headers.get("user-agent", "unknown")
    except AttributeError:
        pass

    error_log(message or f"Unhandled exception: {type(exc).__name__}", exc=exc, context=context)
