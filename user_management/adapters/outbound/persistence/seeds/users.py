# user_management/adapters/outbound/persistence/seeds/users.py

"""
Seed script for the sample users.
"""

import logging
from datetime import datetime, timezone
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from user_management.adapters.outbound.persistence.models import User, UserGroup

logger = logging.getLogger(__name__)

sample_users = [
    {"first_name": "Admin", "last_name": "User", "email": "admin@example.com", "group_id": 1},
    {"first_name": "John", "last_name": "Doe", "email": "john.doe@example.com", "group_id": 2},
    {"first_name": "Jane", "last_name": "Smith", "email": "jane.smith@example.com", "group_id": 3},
]


async def run_sample_users_seed(db: AsyncSession) -> None:
    """
    Create the sample users when their email is not taken yet.

    Args:
        db: Database session
    """
    for data in sample_users:
        result = await db.execute(select(User.id).where(User.email == data["email"]))
        if result.scalar_one_or_none() is not None:
            logger.debug(f"User '{data['email']}' already exists.")
            continue

        db.add(User(
            first_name=data["first_name"],
            last_name=data["last_name"],
            email=data["email"],
            created_at=datetime.now(timezone.utc),
            user_groups=[UserGroup(group_id=data["group_id"])],
        ))
        logger.info(f"User '{data['email']}' created.")

    await db.commit()
    logger.info("Sample users seed finished successfully.")
