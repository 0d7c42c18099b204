# user_management/shared/middleware/__init__.py

from user_management.shared.middleware.exception_middleware import AsyncExceptionMiddleware
from user_management.shared.middleware.logging_middleware import AsyncRequestLoggingMiddleware

# Export all for easy imports
__all__ = [
    "AsyncExceptionMiddleware",
    "AsyncRequestLoggingMiddleware",
]
