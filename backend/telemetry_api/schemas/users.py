from __future__ import annotations

import re
from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from telemetry_api.schemas.common import APIModel, LinkMap, _strip_or_none

USERNAME_RE = re.compile(r"^[a-zA-Z0-9_.-]{3,64}$")


class UserCredentials(APIModel):
    username: str = Field(min_length=3, max_length=64)
    password: str = Field(min_length=8, max_length=256)

    _strip_username = field_validator("username", mode="before")(_strip_or_none)

    @field_validator("username")
    @classmethod
    def _validate_username(cls, v: str) -> str:
        if not USERNAME_RE.match(v):
            raise ValueError("Username may only contain letters, digits, '_', '.' and '-'")
        return v


class UserCreatedResponse(APIModel):
    id: int
    links: LinkMap


class LoginResponse(APIModel):
    token: str


class UserResponse(APIModel):
    id: int
    username: str
    created_at: datetime | None = None

    @classmethod
    def from_row(cls, row: Any) -> "UserResponse":
        return cls(id=row.id, username=row.username, created_at=row.created_at)
