#!/usr/bin/env python3
"""
Command line access to the poll functions API.

Usage:
    python poll.py users                      # List users
    python poll.py votes                      # List votes
    python poll.py register <pseudo> <email>  # Create a user, print its id
    python poll.py vote <user_id> <result>    # Cast a vote

Reads FUNCTIONS_BASE and FUNCTION_CODE from the environment.
Set POLL_LOG_FILE=1 to also write a daily log under POLL_LOG_DIR (default: logs).
"""

import asyncio
import sys

import httpx
from pydantic import ValidationError

from settings import LOG_LEVEL, LOG_TO_FILE
from settings.logging import setup_logging
from votes_client import ClientConfig, ClientError, FunctionsClient
from votes_client.users import UserSchema
from votes_client.voting import VoteSchema

logger = setup_logging(level=LOG_LEVEL, to_file=LOG_TO_FILE)


def print_users(users: list[dict]) -> None:
    print(f"\n{len(users)} user(s)")
    for raw in users:
        user = UserSchema.model_validate(raw)
        created = user.created_at.isoformat() if user.created_at else "-"
        print(f"  {user.id:<10} {user.pseudo:<20} {user.email:<30} {created}")


def print_votes(votes: list[dict]) -> None:
    print(f"\n{len(votes)} vote(s)")
    for raw in votes:
        vote = VoteSchema.model_validate(raw)
        created = vote.created_at.isoformat() if vote.created_at else "-"
        print(f"  {vote.id:<10} user={vote.user_id:<10} result={vote.result!s:<10} {created}")


async def run(command: str, args: list[str], config: ClientConfig) -> None:
    async with FunctionsClient(config) as client:
        if command == "users":
            print_users(await client.fetch_users())
        elif command == "votes":
            print_votes(await client.fetch_votes())
        elif command == "register":
            pseudo, email = args
            user_id = await client.create_user(pseudo, email)
            print(user_id)
        elif command == "vote":
            user_id, result = args
            print(await client.create_vote(user_id, result))


ARITY = {"users": 0, "votes": 0, "register": 2, "vote": 2}


def main():
    args = sys.argv[1:]

    if not args or args[0] not in ARITY or len(args) - 1 != ARITY[args[0]]:
        print(__doc__)
        sys.exit(1)

    command, rest = args[0], args[1:]
    try:
        config = ClientConfig.from_env()
        asyncio.run(run(command, rest, config))
    except (ClientError, httpx.HTTPError, ValidationError) as e:
        logger.error("{}", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
