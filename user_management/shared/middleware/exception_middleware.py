# user_management/shared/middleware/exception_middleware.py

"""
Middleware for centralized exception handling.

Anything an endpoint lets escape is turned into a JSON body of the form
``{"detail": ..., "code": ...}``. Details that could leak internals are
replaced by a generic message when running in production.
"""

import re
import time
import logging
from typing import Callable, Optional

from fastapi import Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError, IntegrityError
from starlette.middleware.base import BaseHTTPMiddleware

from user_management.domain.exceptions import DomainException
from user_management.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)

# HTTP status for each domain 'internal_code'
DOMAIN_STATUS_CODES = {
    "RESOURCE_NOT_FOUND": status.HTTP_404_NOT_FOUND,
    "RESOURCE_ALREADY_EXISTS": status.HTTP_409_CONFLICT,
    "DATABASE_OPERATION_ERROR": status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Patterns used to find the violated constraint, per database flavour
CONSTRAINT_PATTERNS = [
    r'duplicate key value violates unique constraint "(.*?)"',
    r'violates foreign key constraint "(.*?)"',
    r'UNIQUE constraint failed: (\S+)',
    r'constraint "(.*?)"',
]


def extract_constraint_name(error_message: str) -> Optional[str]:
    """
    Find the constraint name in an integrity error message.

    Args:
        error_message: The complete error message

    Returns:
        The constraint name or None if not found
    """
    for pattern in CONSTRAINT_PATTERNS:
        match = re.search(pattern, error_message)
        if match:
            return match.group(1)
    return None


def _production() -> bool:
    return settings.ENVIRONMENT == "production"


def _error(status_code: int, detail: str, code: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": detail, "code": code})


class AsyncExceptionMiddleware(BaseHTTPMiddleware):
    """
    Middleware for centralized exception handling.

    Domain exceptions are mapped through ``DOMAIN_STATUS_CODES``; raw
    SQLAlchemy errors become 409 (integrity) or 500; anything else is a 500.
    Successful responses get an ``X-Process-Time`` header.
    """

    async def dispatch(self, request: Request, call_next: Callable):
        start_time = time.time()
        where = f"Path: {request.url.path} | Client: {request.client.host if request.client else 'N/A'}"

        try:
            response = await call_next(request)
            response.headers["X-Process-Time"] = str(time.time() - start_time)
            return response

        except DomainException as exc:
            logger.warning(f"Domain exception: {exc} | Code: {exc.internal_code} | {where}")
            status_code = DOMAIN_STATUS_CODES.get(exc.internal_code, status.HTTP_400_BAD_REQUEST)

            detail = str(exc)
            if status_code >= 500 and _production():
                detail = "Internal database error"

            return _error(status_code, detail, exc.internal_code)

        except IntegrityError as exc:
            constraint = extract_constraint_name(str(exc))
            logger.error(
                f"Integrity error: {type(exc).__name__ if _production() else exc} | "
                f"Constraint={constraint or 'N/A'} | {where}"
            )
            return _error(
                status.HTTP_409_CONFLICT,
                "Database integrity error" if _production() else str(exc),
                f"INTEGRITY_ERROR_{constraint}" if constraint else "INTEGRITY_ERROR",
            )

        except SQLAlchemyError as exc:
            logger.error(f"Database error: {type(exc).__name__ if _production() else exc} | {where}")
            return _error(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Internal database error" if _production() else str(exc),
                "DATABASE_ERROR",
            )

        except Exception as exc:
            logger.exception(f"Unhandled exception: Type={type(exc).__name__} | {where}")
            return _error(
                status.HTTP_500_INTERNAL_SERVER_ERROR,
                "Internal server error" if _production() else str(exc),
                "INTERNAL_SERVER_ERROR",
            )
