"""Functions API client package."""

from votes_client.api import FunctionsClient, create_user, create_vote, fetch_users, fetch_votes
from votes_client.base import BaseClient, safe_text
from votes_client.config import ClientConfig, build_url
from votes_client.errors import (
    ApiStatusError,
    ClientError,
    ConfigurationError,
    MissingIdentifierError,
)
from votes_client.users import UsersClient, extract_user_id
from votes_client.voting import VotingClient

__all__ = [
    # Config
    "ClientConfig",
    "build_url",
    # Base
    "BaseClient",
    "safe_text",
    # Clients
    "UsersClient",
    "VotingClient",
    "FunctionsClient",
    "extract_user_id",
    # One-shot calls
    "create_user",
    "create_vote",
    "fetch_votes",
    "fetch_users",
    # Errors
    "ClientError",
    "ConfigurationError",
    "ApiStatusError",
    "MissingIdentifierError",
]
