"""Users API client."""

from votes_client.users.client import UsersClient, extract_user_id
from votes_client.users.schemas import NewUser, UserSchema

__all__ = [
    "UsersClient",
    "extract_user_id",
    "NewUser",
    "UserSchema",
]
