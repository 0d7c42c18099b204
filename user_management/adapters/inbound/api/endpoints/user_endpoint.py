# user_management/adapters/inbound/api/endpoints/user_endpoint.py

import logging
from typing import List
from fastapi import APIRouter, Depends, Request, Response, status, Path
from fastapi.responses import JSONResponse

from user_management.adapters.configuration.config import settings
from user_management.adapters.inbound.api.deps import get_user_service
from user_management.application.use_cases.user_use_cases import AsyncUserService
from user_management.application.dtos.user_dto import (
    UserCreate,
    UserUpdate,
    UserOutput,
    UserCountByGroupOutput,
)
from user_management.domain.exceptions import ResourceNotFoundException

logger = logging.getLogger(__name__)

router = APIRouter()


def _bad_request(message: str, error: Exception) -> JSONResponse:
    """Build the 400 response returned when a write fails unexpectedly."""
    content = {"detail": message, "code": "OPERATION_FAILED"}
    if settings.ENVIRONMENT != "production":
        content["error"] = str(error)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=content)


def _not_found(user_id: int) -> ResourceNotFoundException:
    return ResourceNotFoundException(
        detail=f"User with ID {user_id} not found.",
        resource_id=user_id
    )


@router.get(
    "",
    response_model=List[UserOutput],
    summary="List Users - List all users",
    description="Returns every user with the groups it belongs to.",
)
async def get_all_users(service: AsyncUserService = Depends(get_user_service)):
    return await service.list_users()


@router.get(
    "/count",
    response_model=int,
    summary="Count Users - Total number of users",
)
async def get_total_user_count(service: AsyncUserService = Depends(get_user_service)):
    return await service.count_users()


@router.get(
    "/count-by-group",
    response_model=List[UserCountByGroupOutput],
    summary="Count Users By Group - Number of users in each group",
    description="Returns one entry per group, including groups without users.",
)
async def get_user_count_by_group(service: AsyncUserService = Depends(get_user_service)):
    return await service.count_users_by_group()


@router.get(
    "/{user_id}",
    response_model=UserOutput,
    name="get_user_by_id",
    summary="Get User - Get a user by ID",
    responses={
        404: {
            "description": "User not found",
            "content": {
                "application/json": {
                    "example": {
                        "detail": "User with ID 9999 not found.",
                        "code": "RESOURCE_NOT_FOUND"
                    }
                }
            }
        }
    }
)
async def get_user_by_id(
        user_id: int = Path(..., description="ID of the user"),
        service: AsyncUserService = Depends(get_user_service),
):
    user = await service.get_user(user_id)
    if user is None:
        raise _not_found(user_id)
    return user


@router.post(
    "",
    response_model=UserOutput,
    status_code=status.HTTP_201_CREATED,
    summary="Create User - Create a new user",
    description="Creates a user and assigns it to the given groups.",
)
async def create_user(
        request: Request,
        response: Response,
        user_data: UserCreate,
        service: AsyncUserService = Depends(get_user_service),
):
    try:
        user = await service.create_user(user_data)
    except Exception as e:
        logger.exception(f"Error creating user: {str(e)}")
        return _bad_request("Error creating user.", e)

    response.headers["Location"] = str(request.url_for("get_user_by_id", user_id=user.id))
    return user


@router.put(
    "/{user_id}",
    response_model=UserOutput,
    summary="Update User - Update a user",
    description="Overwrites the user's data. The group list replaces the previous groups.",
)
async def update_user(
        user_data: UserUpdate,
        user_id: int = Path(..., description="ID of the user to update"),
        service: AsyncUserService = Depends(get_user_service),
):
    try:
        return await service.update_user(user_id, user_data)
    except ResourceNotFoundException:
        raise
    except Exception as e:
        logger.exception(f"Error updating user {user_id}: {str(e)}")
        return _bad_request("Error updating user.", e)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete User - Delete a user",
)
async def delete_user(
        user_id: int = Path(..., description="ID of the user to delete"),
        service: AsyncUserService = Depends(get_user_service),
):
    if not await service.delete_user(user_id):
        raise _not_found(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
