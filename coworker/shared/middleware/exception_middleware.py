# coworker/shared/middleware/exception_middleware.py

"""
Centralized exception handling.

Errors raised as CoworkerException (including every authorization
failure) are rendered by `coworker_exception_handler`; request bodies
and parameters that fail validation by `validation_exception_handler`.
Anything that escapes both is caught by AsyncExceptionMiddleware.
"""

import time
import logging
import traceback
from typing import Callable

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.base import BaseHTTPMiddleware

from coworker.adapters.configuration.config import settings
from coworker.domain.exceptions import CoworkerException

# Configure logger
logger = logging.getLogger(__name__)


async def coworker_exception_handler(request: Request, exc: CoworkerException) -> JSONResponse:
    """Render a CoworkerException as `{"detail", "code"}` with its status and headers."""
    if exc.status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.error(
            f"Server error: {exc.detail} | Code: {exc.internal_code} | "
            f"Path: {request.url.path}"
        )
        detail = "Internal server error" if settings.ENVIRONMENT == "production" else exc.detail
    else:
        logger.info(
            f"Request failed: {exc.detail} | Code: {exc.internal_code} | "
            f"Path: {request.url.path}"
        )
        detail = exc.detail

    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": detail, "code": exc.internal_code},
        headers=exc.headers,
    )


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Invalid bodies and query parameters are reported as 400."""
    errors = [
        {
            "field": ".".join(str(part) for part in error.get("loc", ())),
            "message": error.get("msg", ""),
        }
        for error in exc.errors()
    ]
    logger.warning(f"Validation error: {errors} | Path: {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Invalid input data",
            "code": "INVALID_INPUT",
            "errors": errors,
        },
    )


class AsyncExceptionMiddleware(BaseHTTPMiddleware):
    """
    Last line of exception handling.
    Captures what no exception handler took care of and formats the response.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.time()
        try:
            response = await call_next(request)
            process_time = time.time() - start_time
            response.headers["X-Process-Time"] = str(process_time)
            return response

        except SQLAlchemyError as exc:
            if settings.ENVIRONMENT == "production":
                error_message = "Internal database error"
                logger.error(
                    f"Database error: Type={type(exc).__name__} | "
                    f"Path: {request.url.path} | "
                    f"Client: {request.client.host if request.client else 'N/A'}"
                )
            else:
                error_message = str(exc)
                logger.error(
                    f"Database error: {str(exc)} | "
                    f"Path: {request.url.path} | "
                    f"Client: {request.client.host if request.client else 'N/A'}"
                )

            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": error_message,
                    "code": "DATABASE_OPERATION_ERROR"
                }
            )

        except ValueError as exc:
            logger.warning(
                f"Validation error: {str(exc)} | "
                f"Path: {request.url.path} | "
                f"Client: {request.client.host if request.client else 'N/A'}"
            )
            return JSONResponse(
                status_code=status.HTTP_400_BAD_REQUEST,
                content={
                    "detail": str(exc),
                    "code": "INVALID_INPUT"
                }
            )

        except Exception as exc:
            if settings.ENVIRONMENT == "production":
                error_message = "Internal server error"
                logger.exception(
                    f"Unhandled exception: Type={type(exc).__name__} | "
                    f"Path: {request.url.path} | "
                    f"Client: {request.client.host if request.client else 'N/A'}"
                )
            else:
                error_message = str(exc)
                logger.exception(
                    f"Unhandled exception: {str(exc)} | "
                    f"Path: {request.url.path} | "
                    f"Client: {request.client.host if request.client else 'N/A'}\n"
                    f"Traceback: {traceback.format_exc()}"
                )
            return JSONResponse(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                content={
                    "detail": error_message,
                    "code": "INTERNAL_SERVER_ERROR"
                }
            )
