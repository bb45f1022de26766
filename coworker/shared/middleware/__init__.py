# coworker/shared/middleware/__init__.py

from coworker.shared.middleware.exception_middleware import (
    AsyncExceptionMiddleware,
    coworker_exception_handler,
    validation_exception_handler,
)
from coworker.shared.middleware.logging_middleware import AsyncRequestLoggingMiddleware

# Export all for easy imports
__all__ = [
    "AsyncExceptionMiddleware",
    "AsyncRequestLoggingMiddleware",
    "coworker_exception_handler",
    "validation_exception_handler",
]
