"""User entity plus the DTOs used at the HTTP boundary."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from pydantic import BaseModel, field_validator


@dataclass
class UserEntity:
    """Stored user record; `id` stays None until the repository persists it."""

    name: str = ""
    lastname: str = ""
    id: Optional[int] = None

    @property
    def is_transient(self) -> bool:
        return self.id is None


class UserFields(Protocol):
    """Anything exposing validated `name` and `lastname` strings."""

    @property
    def name(self) -> str: ...

    @property
    def lastname(self) -> str: ...


class UserInput(BaseModel):
    """Request payload for creating or replacing a user."""

    model_config = {"frozen": True}

    name: str
    lastname: str

    @field_validator("name", "lastname")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be blank")
        return value


class UserResponse(BaseModel):
    id: int
    name: str
    lastname: str

    @classmethod
    def from_entity(cls, user: UserEntity) -> "UserResponse":
        if user.id is None:
            raise ValueError("transient users have no response representation")
        return cls(id=user.id, name=user.name, lastname=user.lastname)
