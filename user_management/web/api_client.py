# user_management/web/api_client.py

"""
HTTP client used by the web front-end to talk to the User Management API.

Every call degrades instead of raising: network failures and non-success
status codes are logged and reported as ``None`` (or ``False`` for
deletion), so pages can show a message rather than an error page.
"""

import logging
from typing import List, Optional

import httpx

from user_management.application.dtos.group_dto import GroupOutput
from user_management.application.dtos.user_dto import UserCreate, UserUpdate, UserOutput

logger = logging.getLogger(__name__)

# Used when the API cannot list its groups
DEFAULT_GROUPS = [
    GroupOutput(id=1, name="Admin", description="Administrator group"),
    GroupOutput(id=2, name="Level 1", description="Basic user access"),
    GroupOutput(id=3, name="Level 2", description="Intermediate user access"),
]


class UserManagementApiClient:
    """
    Thin async client over the ``/api/users`` and ``/api/groups`` endpoints.

    Args:
        http_client: Configured ``httpx.AsyncClient`` whose base URL points
            at the API root
    """

    def __init__(self, http_client: httpx.AsyncClient):
        self.http = http_client

    @classmethod
    def from_settings(cls, base_url: str, timeout: float) -> "UserManagementApiClient":
        return cls(httpx.AsyncClient(
            base_url=base_url,
            headers={"Accept": "application/json"},
            timeout=timeout,
        ))

    async def aclose(self) -> None:
        await self.http.aclose()

    async def get_all_users(self) -> Optional[List[UserOutput]]:
        try:
            response = await self.http.get("api/users")
            response.raise_for_status()
            return [UserOutput.model_validate(item) for item in response.json()]
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error fetching users from API: {e}")
            return None

    async def get_user(self, user_id: int) -> Optional[UserOutput]:
        try:
            response = await self.http.get(f"api/users/{user_id}")
            response.raise_for_status()
            return UserOutput.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error fetching user {user_id} from API: {e}")
            return None

    async def create_user(self, data: UserCreate) -> Optional[UserOutput]:
        try:
            response = await self.http.post("api/users", json=data.model_dump(mode="json", by_alias=True))
            response.raise_for_status()
            return UserOutput.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error creating user via API: {e}")
            return None

    async def update_user(self, user_id: int, data: UserUpdate) -> Optional[UserOutput]:
        try:
            response = await self.http.put(
                f"api/users/{user_id}", json=data.model_dump(mode="json", by_alias=True)
            )
            response.raise_for_status()
            return UserOutput.model_validate(response.json())
        except (httpx.HTTPError, ValueError) as e:
            logger.error(f"Error updating user {user_id} via API: {e}")
            return None

    async def delete_user(self, user_id: int) -> bool:
        try:
            response = await self.http.delete(f"api/users/{user_id}")
            return response.is_success
        except httpx.HTTPError as e:
            logger.error(f"Error deleting user {user_id} via API: {e}")
            return False

    async def get_all_groups(self) -> List[GroupOutput]:
        """
        List the groups offered in the user forms.

        Falls back to the default groups when the API can't be reached.
        """
        try:
            response = await self.http.get("api/groups")
            response.raise_for_status()
            return [GroupOutput.model_validate(item) for item in response.json()]
        except (httpx.HTTPError, ValueError) as e:
            logger.warning(f"Error fetching groups from API, using defaults: {e}")
            return list(DEFAULT_GROUPS)
