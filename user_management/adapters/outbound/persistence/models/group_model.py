# user_management/adapters/outbound/persistence/models/group_model.py

"""
Group model and its permission association.

Groups bundle permissions and are assigned to users. They are static
reference data written only by the seeding routine.
"""

from sqlalchemy import Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship
from user_management.adapters.outbound.persistence.database import Base


class GroupPermission(Base):
    """Association between a group and a permission."""
    __tablename__ = "group_permissions"

    group_id = Column(Integer, ForeignKey("groups.id", ondelete="CASCADE"), primary_key=True)
    permission_id = Column(Integer, ForeignKey("permissions.id", ondelete="CASCADE"), primary_key=True)

    def __repr__(self) -> str:
        return f"<GroupPermission(group_id={self.group_id}, permission_id={self.permission_id})>"


class Group(Base):
    """
    Permission group.

    Attributes:
        id: Identifier
        name: Group name, unique (e.g. "Admin", "Level 1")
        description: Free text description
        permissions: Permissions granted to the group
    """
    __tablename__ = "groups"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(100), unique=True, nullable=False, index=True)
    description = Column(String(500), nullable=False, default="")

    permissions = relationship(
        "Permission",
        secondary="group_permissions",
        order_by="Permission.id",
        viewonly=True,
        lazy="selectin",
    )

    def __repr__(self) -> str:
        """String representation of the Group object."""
        return f"<Group(name={self.name})>"
