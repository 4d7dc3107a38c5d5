"""Pydantic models for user endpoints."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

NICKNAME_PATTERN = r"^[A-Za-z0-9_]{3,32}$"
DISPLAY_NAME_MAX_LENGTH = 64


class UserResponse(BaseModel):
    """Public representation of a user."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id_: UUID = Field(alias="id")
    nickname: str
    display_name: str
    created_at: datetime


class UserCreateRequest(BaseModel):
    """Payload for creating a new user."""

    nickname: str = Field(pattern=NICKNAME_PATTERN)
    display_name: str = Field(min_length=1, max_length=DISPLAY_NAME_MAX_LENGTH)

    @field_validator("display_name")
    @classmethod
    def validate_display_name(cls, value: str) -> str:
        if not value.strip():
            msg = "display_name must not be blank"
            raise ValueError(msg)
        return value.strip()


class UserListResponse(BaseModel):
    """Collection of users in creation order."""

    items: list[UserResponse]
    total: int
