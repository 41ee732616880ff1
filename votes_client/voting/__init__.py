"""Voting API client."""

from votes_client.voting.client import VotingClient
from votes_client.voting.schemas import NewVote, VoteSchema

__all__ = [
    "VotingClient",
    "NewVote",
    "VoteSchema",
]
