# coworker/shared/middleware/logging_middleware.py

"""
Access log for every HTTP request.

Only method, path, query parameters, client address, status and
duration are logged. Headers and cookies carry credentials and are
never written out.
"""

import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from coworker.adapters.configuration.config import settings

logger = logging.getLogger(__name__)


def _log_level(status_code: int) -> int:
    if status_code >= 500:
        return logging.ERROR
    if status_code >= 400:
        return logging.WARNING
    return logging.INFO


class AsyncRequestLoggingMiddleware(BaseHTTPMiddleware):
    """Writes one line per request and one per response."""

    async def dispatch(self, request: Request, call_next):
        verbose = settings.ENVIRONMENT != "production"
        target = f"{request.method} {request.url.path}"

        if verbose:
            client = request.client.host if request.client else "N/A"
            logger.info(f"--> {target} | Query: {dict(request.query_params) or 'N/A'} | Client: {client}")
        else:
            logger.info(f"--> {target}")

        started = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - started

        message = f"<-- {response.status_code} {target}"
        if verbose:
            message += f" | Time: {elapsed:.4f}s"
        logger.log(_log_level(response.status_code), message)

        return response
