# user_management/application/dtos/user_dto.py

"""
Schemas for user data.

This module defines the Pydantic DTOs used to validate input and
serialize output for user operations.
"""

from datetime import datetime
from typing import List, Optional
from user_management.application.dtos.base_dto import CustomBaseModel
from user_management.application.dtos.group_dto import GroupOutput
from user_management.shared.utils.input_validation import InputValidator
from pydantic import (
    field_validator,
    EmailStr,
    constr,
    Field,
)


class UserBase(CustomBaseModel):
    """
    Base schema for user input.

    Holds the attributes shared by creation and update.
    """
    first_name: constr(strip_whitespace=True, min_length=1, max_length=100) = Field(
        ..., description="User first name."
    )
    last_name: constr(strip_whitespace=True, min_length=1, max_length=100) = Field(
        ..., description="User last name."
    )
    email: EmailStr = Field(
        ...,
        description="User email. Must be a valid email, unique across users.",
    )
    group_ids: List[int] = Field(
        default_factory=list,
        description="Identifiers of the groups the user belongs to.",
    )

    @field_validator("email")
    def validate_email_length(cls, v):
        """
        Validate the email length.

        Args:
            v: Email to validate

        Returns:
            Validated email

        Raises:
            ValueError: If the email is too long
        """
        is_valid, error_msg = InputValidator.validate_email(v)
        if not is_valid:
            raise ValueError(error_msg)
        return v


class UserCreate(UserBase):
    """Schema for creating a user."""


class UserUpdate(UserBase):
    """
    Schema for updating a user.

    Update is a full replacement: every scalar is overwritten and the
    group list replaces the previous memberships.
    """


class UserOutput(CustomBaseModel):
    """
    Schema returned for a user.
    """
    id: int = Field(..., description="User identifier.")
    first_name: str
    last_name: str
    email: str
    created_at: datetime = Field(..., description="Creation date and time.")
    updated_at: Optional[datetime] = Field(None, description="Date and time of the last update.")
    groups: List[GroupOutput] = Field(default_factory=list)


class UserCountByGroupOutput(CustomBaseModel):
    """Number of users in one group."""
    group_id: int
    group_name: str
    user_count: int
