# user_management/adapters/outbound/persistence/models/__init__.py

"""
Data models module.

Exports every SQLAlchemy model of the system so that importing this
package registers all tables on ``Base.metadata``.
"""

from user_management.adapters.outbound.persistence.database import Base

# Main models
from user_management.adapters.outbound.persistence.models.user_model import User, UserGroup
from user_management.adapters.outbound.persistence.models.group_model import Group, GroupPermission
from user_management.adapters.outbound.persistence.models.permission_model import Permission

__all__ = [
    # Base
    "Base",

    # Main models
    "User",
    "Group",
    "Permission",

    # Association models
    "UserGroup",
    "GroupPermission",
]
