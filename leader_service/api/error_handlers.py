"""Error Handlers — terminal translation of failures into bare HTTP status codes.

Invariants:
    - LeaderServiceError → status from its ErrorKind, empty body
    - RequestValidationError (bad query/JSON syntax) → 400, empty body
    - Exception (catch-all) → status from the message-substring table, empty body
    - 4xx logged as warnings, 5xx logged as errors with traceback

Design Decisions:
    - Three-layer handler: domain (LeaderServiceError), validation (FastAPI), catch-all
    - Classification lives in core/error_translator.py; this module only does IO
"""

import logging

from fastapi import FastAPI, Request, Response, status
from fastapi.exceptions import RequestValidationError

from leader_service.core.error_translator import status_for_error, status_for_message
from leader_service.core.errors import LeaderServiceError

logger = logging.getLogger(__name__)


def register_error_handlers(app: FastAPI) -> None:
    """Register all global error handlers on the FastAPI app."""
    _register_leader_error_handler(app)
    _register_validation_error_handler(app)
    _register_generic_error_handler(app)


def _register_leader_error_handler(app: FastAPI) -> None:

    @app.exception_handler(LeaderServiceError)
    async def leader_error_handler(request: Request, exc: LeaderServiceError):
        """Handle all store errors."""
        status_code = status_for_error(exc)
        _log_failure(request, exc, status_code, exc.code)
        return Response(status_code=status_code)


def _register_validation_error_handler(app: FastAPI) -> None:

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(
        request: Request, exc: RequestValidationError,
    ):
        """Handle FastAPI request parsing errors."""
        logger.warning(
            f"Validation error on {request.url.path}: {exc.errors()}",
            extra={"path": request.url.path, "status_code": 400},
        )
        return Response(status_code=status.HTTP_400_BAD_REQUEST)


def _register_generic_error_handler(app: FastAPI) -> None:

    @app.exception_handler(Exception)
    async def generic_error_handler(request: Request, exc: Exception):
        """Catch-all — classified by message text, never leaks details."""
        status_code = status_for_message(str(exc))
        _log_failure(request, exc, status_code, "UNCLASSIFIED")
        return Response(status_code=status_code)


def _log_failure(
    request: Request, exc: Exception, status_code: int, code: str,
) -> None:
    extra = {
        "error_code": code, "path": request.url.path, "status_code": status_code,
    }
    if status_code >= 500:
        logger.error(
            f"Request failed on {request.url.path}: {exc}",
            extra=extra, exc_info=exc,
        )
    else:
        logger.warning(f"Request rejected: {exc}", extra=extra)
