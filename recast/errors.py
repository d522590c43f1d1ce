"""Error types and their translation into HTTP responses."""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Base class for failures surfaced to clients of the proxy."""

    def __init__(self, reason: str):
        super().__init__(reason)
        self.reason = reason


class QueryParseError(AppError):
    """The ``url`` or ``delay`` query parameter is missing or malformed."""


class FeedLoadError(AppError):
    """The origin feed could not be fetched or its body could not be read."""


class FeedParseError(AppError):
    """The origin response is not a well-formed RSS feed."""


def map_error(exc: Exception) -> tuple[int, str]:
    """Translate an exception into a status code and client-visible message.

    Args:
        exc: The exception raised while handling a request

    Returns:
        A tuple of (status_code, message)
    """
    if isinstance(exc, QueryParseError):
        return 400, f"failed to parse query: {exc.reason}"
    if isinstance(exc, FeedLoadError):
        return 500, f"failed to load feed: {exc.reason}"
    if isinstance(exc, FeedParseError):
        return 500, f"failed to parse feed: {exc.reason}"

    logger.warning("unhandled error: %r", exc, exc_info=exc)
    return 500, "unknown error"


async def app_error_handler(request: Request, exc: Exception) -> PlainTextResponse:
    """FastAPI exception handler rendering errors as plain text."""
    status_code, message = map_error(exc)
    return PlainTextResponse(message, status_code=status_code)


def install_error_handlers(app: FastAPI) -> None:
    """Register the error handlers on a FastAPI application."""
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(Exception, app_error_handler)
