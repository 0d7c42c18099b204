# user_management/adapters/outbound/persistence/models/user_model.py

"""
User model and its group association.

This module defines the user model and the ``UserGroup`` association
object linking users to groups.
"""

from sqlalchemy import (
    Column,
    Integer,
    String,
    DateTime,
    ForeignKey,
)
from sqlalchemy.orm import relationship
from user_management.adapters.outbound.persistence.database import Base


class UserGroup(Base):
    """
    Association between a user and a group.

    Attributes:
        user_id: Owning user
        group_id: Group the user belongs to
        group: The associated group, eagerly joined
    """
    __tablename__ = "user_groups"

    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), primary_key=True)
    group_id = Column(Integer, ForeignKey("groups.id", ondelete="CASCADE"), primary_key=True)

    user = relationship("User", back_populates="user_groups")
    group = relationship("Group", lazy="joined")

    def __repr__(self) -> str:
        return f"<UserGroup(user_id={self.user_id}, group_id={self.group_id})>"


class User(Base):
    """
    System user.

    Attributes:
        id: Generated identifier
        first_name: First name
        last_name: Last name
        email: Email address, unique across users
        created_at: Set when the row is inserted
        updated_at: Set on every update, null until the first one
        user_groups: Group memberships (loaded together with the user)
    """
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(200), unique=True, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), nullable=False)
    updated_at = Column(DateTime(timezone=True), nullable=True)

    # Memberships are always loaded with the user
    user_groups = relationship(
        "UserGroup",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="UserGroup.group_id",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        """String representation of the User object."""
        return f"<User(id={self.id}, email={self.email})>"

    @property
    def groups(self):
        """Groups the user belongs to, following the membership rows."""
        return [membership.group for membership in self.user_groups]
