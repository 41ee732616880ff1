"""User payload schemas."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class NewUser(BaseModel):
    """Body of POST /api/postUser."""

    pseudo: Any
    email: Any


class UserSchema(BaseModel):
    """User record as listed by GET /api/getUsers."""

    model_config = ConfigDict(populate_by_name=True)

    id: str | int
    pseudo: str
    email: str
    created_at: datetime | None = Field(alias="createdAt", default=None)
