"""Error Handlers — every failure leaves the API in the TaskViewError envelope.

Invariants:
    - One response shape: {"error": {code, message, category, severity, timestamp, context[, details]}}
    - Request and document problems both list details as {path, message, kind}
    - Unhandled exceptions become InternalError (500) and never leak their message

Design Decisions:
    - FastAPI request errors and stray exceptions are converted INTO domain errors,
      so a single responder serializes and logs all three cases
"""

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from taskview.core.errors import (
    ErrorSeverity,
    InternalError,
    IssueListError,
    RequestInvalidError,
    TaskViewError,
)
from taskview.schemas.base import issues_from_errors

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    app.add_exception_handler(TaskViewError, handle_taskview_error)
    app.add_exception_handler(RequestValidationError, handle_request_validation_error)
    app.add_exception_handler(Exception, handle_unexpected_error)


def respond(request: Request, exc: TaskViewError) -> JSONResponse:
    extra = {"error_code": exc.code, "path": request.url.path}
    if isinstance(exc, IssueListError):
        extra["issue_count"] = len(exc.issues)
    if exc.severity is ErrorSeverity.CRITICAL:
        logger.error(f"{exc.code} on {request.url.path}", extra=extra)
    else:
        logger.warning(f"{exc.code}: {exc.message}", extra=extra)
    return JSONResponse(status_code=exc.http_status, content=exc.to_response())


async def handle_taskview_error(request: Request, exc: TaskViewError):
    return respond(request, exc)


async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    return respond(request, RequestInvalidError(issues_from_errors(exc.errors())))


async def handle_unexpected_error(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception on {request.url.path}")
    return respond(request, InternalError())
