"""
Global error handlers
Every exception leaves the service in the same JSON shape
"""
import logging
import traceback

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from dummygen.core.constants import ErrorCodes, ErrorMessages
from dummygen.core.exceptions import AppException
from dummygen.core.settings import settings

logger = logging.getLogger(__name__)


def setup_exception_handlers(app: FastAPI) -> None:
    """
    Register the global exception handlers

    Args:
        app: FastAPI application instance
    """

    @app.exception_handler(AppException)
    async def app_exception_handler(
        request: Request,
        exc: AppException
    ) -> JSONResponse:
        trace_id = getattr(request.state, "trace_id", None)

        # 4xx is a warning, 5xx an error
        log_level = logging.WARNING if exc.status_code < 500 else logging.ERROR
        logger.log(
            log_level,
            exc.code,
            extra={
                "trace_id": trace_id,
                "error_message": exc.message,
                "status_code": exc.status_code,
                "details": exc.details,
                "path": str(request.url.path),
                "method": request.method,
            }
        )

        content = {
            "code": exc.code,
            "message": exc.message,
        }

        if trace_id:
            content["trace_id"] = trace_id

        if exc.details and settings.DEBUG:
            content["details"] = exc.details

        return JSONResponse(
            status_code=exc.status_code,
            content=content
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request,
        exc: RequestValidationError
    ) -> JSONResponse:
        """
        Request parsing failures
        Form values are plain text, so this only fires on malformed bodies
        """
        trace_id = getattr(request.state, "trace_id", None)

        errors = []
        for error in exc.errors():
            field = " -> ".join(str(loc) for loc in error["loc"])
            errors.append({
                "field": field,
                "message": error["msg"],
                "type": error["type"]
            })

        logger.warning(
            "validation_error",
            extra={
                "trace_id": trace_id,
                "path": str(request.url.path),
                "errors": errors,
            }
        )

        content = {
            "code": "VALIDATION_ERROR",
            "message": ErrorMessages.INVALID_INPUT,
            "errors": errors,
        }

        if trace_id:
            content["trace_id"] = trace_id

        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content=content
        )

    @app.exception_handler(Exception)
    async def general_exception_handler(
        request: Request,
        exc: Exception
    ) -> JSONResponse:
        trace_id = getattr(request.state, "trace_id", None)

        logger.error(
            "unhandled_exception",
            extra={
                "trace_id": trace_id,
                "error_type": type(exc).__name__,
                "error_message": str(exc),
                "path": str(request.url.path),
                "method": request.method,
            },
            exc_info=exc
        )

        if settings.DEBUG:
            detail = f"{type(exc).__name__}: {str(exc)}"
            stack_trace = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
        else:
            detail = ErrorMessages.INTERNAL_ERROR
            stack_trace = None

        content = {
            "code": ErrorCodes.INTERNAL_ERROR,
            "message": detail,
        }

        if trace_id:
            content["trace_id"] = trace_id

        if stack_trace:
            content["stack_trace"] = stack_trace

        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=content
        )
