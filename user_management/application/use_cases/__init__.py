# user_management/application/use_cases/__init__.py

"""
Application service module.

This package contains the application services that implement the business logic
of the application, organized according to functional domains.
"""

# Export service classes for easier imports
from user_management.application.use_cases.user_use_cases import AsyncUserService
from user_management.application.use_cases.group_use_cases import AsyncGroupService

# Export all services
__all__ = [
    "AsyncUserService",
    "AsyncGroupService",
]
