# user_management/adapters/outbound/persistence/models/permission_model.py

from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column
from user_management.adapters.outbound.persistence.database import Base


class Permission(Base):
    """
    Access permission granted to groups.

    Attributes:
        id: Identifier
        name: Readable name (e.g. "Read", "Manage Users")
        description: What the permission allows
    """
    __tablename__ = "permissions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(String(500), nullable=False, default="")

    def __repr__(self) -> str:
        """String representation of the Permission object."""
        return f"<Permission(name={self.name})>"
