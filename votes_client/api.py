"""Aggregate client and one-shot helpers for the four functions endpoints."""

from typing import Any

from votes_client.config import ClientConfig
from votes_client.users import UsersClient
from votes_client.voting import VotingClient


class FunctionsClient(UsersClient, VotingClient):
    """All four endpoints on one connection."""


async def create_user(pseudo: str, email: str, config: ClientConfig | None = None, **kwargs) -> str | int:
    async with FunctionsClient(config or ClientConfig.from_env(), **kwargs) as client:
        return await client.create_user(pseudo, email)


async def create_vote(user_id: str | int, result: Any, config: ClientConfig | None = None, **kwargs) -> Any:
    async with FunctionsClient(config or ClientConfig.from_env(), **kwargs) as client:
        return await client.create_vote(user_id, result)


async def fetch_votes(config: ClientConfig | None = None, **kwargs) -> list[dict]:
    async with FunctionsClient(config or ClientConfig.from_env(), **kwargs) as client:
        return await client.fetch_votes()


async def fetch_users(config: ClientConfig | None = None, **kwargs) -> list[dict]:
    async with FunctionsClient(config or ClientConfig.from_env(), **kwargs) as client:
        return await client.fetch_users()
