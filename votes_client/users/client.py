"""Users API client."""

from collections.abc import Mapping
from typing import Any

from votes_client.base import BaseClient
from votes_client.errors import MissingIdentifierError
from votes_client.users.schemas import NewUser

# Identifier field names, in lookup order
ID_FIELDS = ("id", "user_id", "userId")


def extract_user_id(data: Mapping[str, Any]) -> str | int:
    """Identifier from the first of ``id``, ``user_id``, ``userId`` that is present.

    A present but falsy value (``0``, ``""``) is not skipped: it counts as missing.
    """
    value = None
    if isinstance(data, Mapping):
        value = next((data[f] for f in ID_FIELDS if data.get(f) is not None), None)
    if not value:
        raise MissingIdentifierError()
    return value


class UsersClient(BaseClient):
    """Client for user endpoints."""

    async def create_user(self, pseudo: Any, email: Any) -> str | int:
        """POST /api/postUser - returns the new user's identifier."""
        body = NewUser(pseudo=pseudo, email=email).model_dump()
        data = await self._request("postUser", "POST", self.config.url("/api/postUser"), body)
        return extract_user_id(data)

    async def fetch_users(self) -> list[dict]:
        """GET /api/getUsers - [{id, pseudo, email, createdAt}, ...]."""
        # Raw base URL: no trim, no access code, no body text on errors
        return await self._request(
            "getUsers", "GET", f"{self.config.base_url}/api/getUsers", with_body=False
        )
