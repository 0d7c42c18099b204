# user_management/shared/middleware/logging_middleware.py

"""
Middleware for HTTP request logging.

Shared by the API and the web front-end: one line when a request
arrives and one when its response leaves, with the elapsed time.
"""

import time
import logging
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from user_management.adapters.configuration.config import settings

# Configure logger
logger = logging.getLogger(__name__)


class AsyncRequestLoggingMiddleware(BaseHTTPMiddleware):
    """
    Logs every request and its response status.

    Responses with an error status are logged as warnings. Query strings
    and client addresses are left out in production.
    """

    async def dispatch(self, request: Request, call_next):
        target = f"{request.method} {request.url.path}"

        if settings.ENVIRONMENT == "production":
            logger.info(f"Request: {target}")
        else:
            query = request.url.query or "N/A"
            client = request.client.host if request.client else "N/A"
            logger.info(f"Request: {target} | Query: {query} | Client: {client}")

        start = time.perf_counter()
        response = await call_next(request)
        elapsed = time.perf_counter() - start

        log = logger.warning if response.status_code >= 400 else logger.info
        log(f"Response: {response.status_code} for {target} | Time: {elapsed:.4f}s")

        return response
