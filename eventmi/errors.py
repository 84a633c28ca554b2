"""Error pages.

HTTP errors raised by routes and services (404 for unknown events or an Id
mismatch on edit) are rendered as HTML with the original status code.
Validation problems are not errors: the routes re-render the form instead.
"""
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from .templating import templates

logger = logging.getLogger(__name__)

_TITLES = {
    400: "Bad Request",
    404: "Not Found",
    405: "Method Not Allowed",
    500: "Server Error",
}


def render_error(request: Request, status_code: int, detail: str | None = None, headers: dict | None = None):
    """Render error.html with the given status code."""
    return templates.TemplateResponse(
        request,
        "error.html",
        {
            "status_code": status_code,
            "title": _TITLES.get(status_code, "Error"),
            "detail": detail,
        },
        status_code=status_code,
        headers=headers
    )


async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    logger.warning(
        "%s %s failed with %s: %s",
        request.method, request.url.path, exc.status_code, exc.detail
    )
    return render_error(request, exc.status_code, exc.detail, getattr(exc, "headers", None))


async def request_validation_handler(request: Request, exc: RequestValidationError):
    # Form posts are validated by the routes themselves; what reaches this
    # handler is a malformed path parameter such as /Event/Details/abc
    logger.warning("%s %s has invalid parameters: %s", request.method, request.url.path, exc.errors())
    return render_error(request, 404, "Event not found")


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return render_error(request, 500, "Something went wrong while processing your request.")


def setup_error_handling(app: FastAPI) -> None:
    """Register the error page handlers on the application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
