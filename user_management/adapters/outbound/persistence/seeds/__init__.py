# user_management/adapters/outbound/persistence/seeds/__init__.py

"""
Seeds module for database initialization.

Populates the database with the reference data the system needs to work:
groups, permissions and, optionally, a few sample users.
"""

import logging
from sqlalchemy.ext.asyncio import AsyncSession

from user_management.adapters.outbound.persistence.seeds.permissions import run_permissions_seed
from user_management.adapters.outbound.persistence.seeds.users import run_sample_users_seed

# Configure logger
logger = logging.getLogger(__name__)


async def run_all_seeds(db: AsyncSession, include_sample_users: bool = False) -> None:
    """
    Run every seed script in order.

    Args:
        db: Database session
        include_sample_users: Also create the sample users
    """
    logger.info("Running database seeds")

    # Run seeds in dependency order
    await run_permissions_seed(db)
    if include_sample_users:
        await run_sample_users_seed(db)

    logger.info("All seeds executed successfully")
