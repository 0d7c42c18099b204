# user_management/web/views.py

"""
Pages of the web front-end.

Each action makes one call to the API through ``UserManagementApiClient``.
Outcomes are reported with a message carried as a query parameter on the
redirect (``?success=`` or ``?error=``) and shown by the base template.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from pydantic import ValidationError
from pydantic.alias_generators import to_snake

from user_management.application.dtos.user_dto import UserCreate, UserUpdate
from user_management.web.api_client import UserManagementApiClient

logger = logging.getLogger(__name__)

router = APIRouter()

# Templates for the HTML pages
templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def get_api_client(request: Request) -> UserManagementApiClient:
    return request.app.state.api_client


def _redirect(request: Request, route: str, **params) -> RedirectResponse:
    """Post/redirect/get to a named page, carrying a message in the query string."""
    path_params = {key: params.pop(key) for key in ("user_id",) if key in params}
    url = request.url_for(route, **path_params).include_query_params(**params)
    return RedirectResponse(url=str(url), status_code=status.HTTP_303_SEE_OTHER)


def _field_errors(exc: ValidationError) -> Dict[str, str]:
    errors = {}
    for error in exc.errors():
        field = to_snake(str(error["loc"][0])) if error["loc"] else "form"
        errors.setdefault(field, error["msg"])
    logger.info(f"User form rejected: {errors}")
    return errors


def _form_data(first_name: str, last_name: str, email: str, group_ids: List[int]) -> dict:
    return {"first_name": first_name, "last_name": last_name, "email": email, "group_ids": group_ids}


async def _render_form(
        request: Request,
        api: UserManagementApiClient,
        form: dict,
        user_id: Optional[int] = None,
        errors: Optional[Dict[str, str]] = None,
        error: Optional[str] = None,
):
    return templates.TemplateResponse(request, "users/form.html", {
        "form": form,
        "user_id": user_id,
        "groups": await api.get_all_groups(),
        "errors": errors or {},
        "error": error,
    })


@router.get("/", include_in_schema=False)
async def home(request: Request):
    return RedirectResponse(url=str(request.url_for("users_index")))


@router.get("/users", response_class=HTMLResponse, name="users_index")
async def index(request: Request, api: UserManagementApiClient = Depends(get_api_client)):
    users = await api.get_all_users()
    error = None
    if users is None:
        error = "Unable to load users. Please ensure the API is running."
        users = []
    return templates.TemplateResponse(request, "users/index.html", {"users": users, "error": error})


@router.get("/users/create", response_class=HTMLResponse, name="users_create")
async def create_form(request: Request, api: UserManagementApiClient = Depends(get_api_client)):
    return await _render_form(request, api, _form_data("", "", "", []))


@router.post("/users/create", response_class=HTMLResponse)
async def create(
        request: Request,
        first_name: str = Form(""),
        last_name: str = Form(""),
        email: str = Form(""),
        group_ids: List[int] = Form([]),
        api: UserManagementApiClient = Depends(get_api_client),
):
    form = _form_data(first_name, last_name, email, group_ids)
    try:
        data = UserCreate.model_validate(form)
    except ValidationError as e:
        return await _render_form(request, api, form, errors=_field_errors(e))

    user = await api.create_user(data)
    if user is None:
        return await _render_form(request, api, form, error="Error creating user. Please try again.")

    return _redirect(
        request, "users_index",
        success=f"User '{user.first_name} {user.last_name}' created successfully."
    )


@router.get("/users/{user_id}", response_class=HTMLResponse, name="users_details")
async def details(request: Request, user_id: int, api: UserManagementApiClient = Depends(get_api_client)):
    user = await api.get_user(user_id)
    if user is None:
        return _redirect(request, "users_index", error=f"User with ID {user_id} not found.")
    return templates.TemplateResponse(request, "users/details.html", {"user": user})


@router.get("/users/{user_id}/edit", response_class=HTMLResponse, name="users_edit")
async def edit_form(request: Request, user_id: int, api: UserManagementApiClient = Depends(get_api_client)):
    user = await api.get_user(user_id)
    if user is None:
        return _redirect(request, "users_index", error=f"User with ID {user_id} not found.")

    form = _form_data(user.first_name, user.last_name, user.email, [group.id for group in user.groups])
    return await _render_form(request, api, form, user_id=user_id)


@router.post("/users/{user_id}/edit", response_class=HTMLResponse)
async def edit(
        request: Request,
        user_id: int,
        first_name: str = Form(""),
        last_name: str = Form(""),
        email: str = Form(""),
        group_ids: List[int] = Form([]),
        api: UserManagementApiClient = Depends(get_api_client),
):
    form = _form_data(first_name, last_name, email, group_ids)
    try:
        data = UserUpdate.model_validate(form)
    except ValidationError as e:
        return await _render_form(request, api, form, user_id=user_id, errors=_field_errors(e))

    user = await api.update_user(user_id, data)
    if user is None:
        return await _render_form(
            request, api, form, user_id=user_id, error="Error updating user. Please try again."
        )

    return _redirect(
        request, "users_index",
        success=f"User '{user.first_name} {user.last_name}' updated successfully."
    )


@router.get("/users/{user_id}/delete", response_class=HTMLResponse, name="users_delete")
async def delete_confirm(request: Request, user_id: int, api: UserManagementApiClient = Depends(get_api_client)):
    user = await api.get_user(user_id)
    if user is None:
        return _redirect(request, "users_index", error=f"User with ID {user_id} not found.")
    return templates.TemplateResponse(request, "users/delete.html", {"user": user})


@router.post("/users/{user_id}/delete", response_class=HTMLResponse)
async def delete(request: Request, user_id: int, api: UserManagementApiClient = Depends(get_api_client)):
    if not await api.delete_user(user_id):
        return _redirect(request, "users_delete", user_id=user_id, error="Error deleting user. Please try again.")

    return _redirect(request, "users_index", success="User deleted successfully.")
