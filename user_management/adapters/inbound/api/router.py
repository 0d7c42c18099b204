# user_management/adapters/inbound/api/router.py

from fastapi import APIRouter
from user_management.adapters.inbound.api.endpoints import user_endpoint, group_endpoint

api_router = APIRouter()

# Include the endpoint routers
api_router.include_router(user_endpoint.router, prefix="/users", tags=["Users"])
api_router.include_router(group_endpoint.router, prefix="/groups", tags=["Groups"])
