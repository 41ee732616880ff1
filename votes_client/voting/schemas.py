"""Vote payload schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NewVote(BaseModel):
    """Body of POST /api/postVote."""

    user_id: Any
    result: Any


class VoteSchema(BaseModel):
    """Vote record as listed by GET /api/getVotes."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | int
    user_id: str | int
    result: Any = None
    created_at: datetime | None = Field(alias="createdAt", default=None)
