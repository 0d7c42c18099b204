# user_management/adapters/outbound/persistence/seeds/permissions.py

"""
Seed script for groups, permissions and their associations.
"""

import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from user_management.adapters.outbound.persistence.models import Group, Permission, GroupPermission

logger = logging.getLogger(__name__)

# Groups
groups = [
    {"id": 1, "name": "Admin", "description": "Administrator group with full access"},
    {"id": 2, "name": "Level 1", "description": "Basic user access level"},
    {"id": 3, "name": "Level 2", "description": "Intermediate user access level"},
]

# Permissions
permissions = [
    {"id": 1, "name": "Read", "description": "Read access to resources"},
    {"id": 2, "name": "Write", "description": "Write access to resources"},
    {"id": 3, "name": "Delete", "description": "Delete access to resources"},
    {"id": 4, "name": "Manage Users", "description": "Manage user accounts"},
]

# Permission distribution per group ID
group_permissions = {
    1: [1, 2, 3, 4],  # Admin has all permissions
    2: [1],           # Level 1 reads
    3: [1, 2],        # Level 2 reads and writes
}


async def run_permissions_seed(db: AsyncSession) -> None:
    """
    Create the default groups and permissions when missing.

    Rows are matched by ID; existing rows are left untouched.

    Args:
        db: Database session
    """
    for data in groups:
        if await db.get(Group, data["id"]) is None:
            db.add(Group(**data))
            logger.info(f"Group '{data['name']}' created.")
        else:
            logger.debug(f"Group '{data['name']}' already exists.")

    for data in permissions:
        if await db.get(Permission, data["id"]) is None:
            db.add(Permission(**data))
            logger.info(f"Permission '{data['name']}' created.")
        else:
            logger.debug(f"Permission '{data['name']}' already exists.")

    await db.flush()

    result = await db.execute(select(GroupPermission.group_id, GroupPermission.permission_id))
    existing = set(result.all())
    for group_id, permission_ids in group_permissions.items():
        for permission_id in permission_ids:
            if (group_id, permission_id) not in existing:
                db.add(GroupPermission(group_id=group_id, permission_id=permission_id))
                logger.info(f"Permission {permission_id} granted to group {group_id}.")

    await db.commit()
    logger.info("Permissions seed finished successfully.")
