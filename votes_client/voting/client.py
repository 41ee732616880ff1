"""Voting API client."""

from typing import Any

from votes_client.base import BaseClient
from votes_client.voting.schemas import NewVote


class VotingClient(BaseClient):
    """Client for vote endpoints."""

    async def create_vote(self, user_id: Any, result: Any) -> Any:
        """POST /api/postVote - server response as returned."""
        body = NewVote(user_id=user_id, result=result).model_dump()
        return await self._request("postVote", "POST", self.config.url("/api/postVote"), body)

    async def fetch_votes(self) -> list[dict]:
        """GET /api/getVotes - [{id, user_id, result, createdAt}, ...]."""
        return await self._request("getVotes", "GET", self.config.url("/api/getVotes", with_code=False))
