"""Error taxonomy and the exception handlers that render it as JSON."""

import logging

from litestar import Request, Response
from litestar.exceptions import HTTPException
from litestar.status_codes import (
    HTTP_400_BAD_REQUEST,
    HTTP_403_FORBIDDEN,
    HTTP_404_NOT_FOUND,
    HTTP_500_INTERNAL_SERVER_ERROR,
)

from app.utils.logging import log_request_error

logger = logging.getLogger("Wishwell.errors")


class WishwellError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code: int = HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal Server Error"

    def __init__(self, message: str = "") -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(WishwellError):
    """A required field is missing, empty or out of bounds."""

    status_code = HTTP_400_BAD_REQUEST
    default_message = "Invalid request"


class InvalidIdError(WishwellError):
    """The identifier is not a well-formed document id."""

    status_code = HTTP_400_BAD_REQUEST
    default_message = "Invalid ID"


class NotFoundError(WishwellError):
    status_code = HTTP_404_NOT_FOUND
    default_message = "Not found"


class FileMissingError(WishwellError):
    """A document points at an upload that is no longer on disk."""

    status_code = HTTP_404_NOT_FOUND
    default_message = "File missing"


class StorageError(WishwellError):
    """The document store rejected or failed an operation."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Storage error"


class CorsRejection(WishwellError):
    status_code = HTTP_403_FORBIDDEN
    default_message = "Not allowed by CORS"


def _error_response(message: str, status_code: int) -> Response:
    return Response(
        content={"error": message},
        status_code=status_code,
        media_type="application/json",
    )


def handle_app_error(request: Request, exc: WishwellError) -> Response:
    """Render a taxonomy error as ``{"error": message}``."""
    if exc.status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
        log_request_error(request, exc, message=f"{type(exc).__name__} while handling request")
    else:
        logger.info(f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}")
    return _error_response(exc.message, exc.status_code)


def handle_http_exception(request: Request, exc: HTTPException) -> Response:
    """Framework errors (bad JSON, unknown route, oversized body) in the same shape."""
    if exc.status_code >= HTTP_500_INTERNAL_SERVER_ERROR:
        log_request_error(request, exc)
    return _error_response(str(exc.detail), exc.status_code)


def log_exceptions(request: Request, exc: Exception) -> Response:
    log_request_error(request, exc, message="Unhandled exception occurred")
    return _error_response("Internal Server Error", HTTP_500_INTERNAL_SERVER_ERROR)


EXCEPTION_HANDLERS = {
    WishwellError: handle_app_error,
    HTTPException: handle_http_exception,
    Exception: log_exceptions,
}
