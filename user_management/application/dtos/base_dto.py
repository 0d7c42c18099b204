# user_management/application/dtos/base_dto.py

"""
Base class for the application DTOs.

This module defines ``CustomBaseModel``, which extends Pydantic's
``BaseModel`` with the conventions shared by every DTO.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CustomBaseModel(BaseModel):
    """
    Custom base model for every DTO of the application.

    Fields are exposed over HTTP in camelCase (``firstName``, ``groupIds``)
    while Python code keeps snake_case names. Both spellings are accepted
    on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
