# user_management/web/main.py

import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from user_management.adapters.configuration.config import settings
from user_management.shared.middleware import AsyncRequestLoggingMiddleware
from user_management.web.api_client import UserManagementApiClient
from user_management.web.views import router

level = logging.DEBUG if settings.DEBUG else getattr(logging, settings.LOG_LEVEL, logging.INFO)
logging.basicConfig(
    level=level,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open the API client on startup and close it on shutdown."""
    logger.info(f"Web front-end starting up, API at {settings.API_BASE_URL}")
    app.state.api_client = UserManagementApiClient.from_settings(
        settings.API_BASE_URL, settings.API_TIMEOUT_SECONDS
    )

    yield

    logger.info("Web front-end shutting down...")
    await app.state.api_client.aclose()


app = FastAPI(
    title="User Management",
    debug=settings.DEBUG,
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)

app.add_middleware(AsyncRequestLoggingMiddleware)
app.include_router(router)
