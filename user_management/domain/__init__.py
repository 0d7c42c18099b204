# user_management/domain/__init__.py

"""
Main module for the application's domain components.

Re-exports the domain exceptions for easier imports.
"""

from user_management.domain.exceptions import (
    DomainException,               # Pure base exception of the domain
    ResourceNotFoundException,
    ResourceAlreadyExistsException,
    DatabaseOperationException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "ResourceAlreadyExistsException",
    "DatabaseOperationException",
]
