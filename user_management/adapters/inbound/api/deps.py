# user_management/adapters/inbound/api/deps.py

"""
Dependencies for injection into API endpoints.

This module defines functions that provide dependencies via
FastAPI Depends() for database access and application services.
"""

import logging
from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from user_management.adapters.outbound.persistence.database import get_db
from user_management.application.use_cases.user_use_cases import AsyncUserService
from user_management.application.use_cases.group_use_cases import AsyncGroupService

# Configure logger
logger = logging.getLogger(__name__)

########################################################################
# Database Session Management
########################################################################

# Alias kept so endpoints read the same way across routers
get_session = get_db


########################################################################
# Application services
########################################################################

def get_user_service(db: AsyncSession = Depends(get_session)) -> AsyncUserService:
    return AsyncUserService(db)


def get_group_service(db: AsyncSession = Depends(get_session)) -> AsyncGroupService:
    return AsyncGroupService(db)
