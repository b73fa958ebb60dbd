"""Domain types for user records (entity, DTOs, errors)."""

from .errors import (
    InvalidEntityError,
    NotFoundError,
    StorageCorruptError,
    StorageError,
    StorageIOError,
    TypeMismatchError,
    UserRepositoryError,
)
from .users import UserEntity, UserFields, UserInput, UserResponse

__all__ = [
    "InvalidEntityError",
    "NotFoundError",
    "StorageCorruptError",
    "StorageError",
    "StorageIOError",
    "TypeMismatchError",
    "UserRepositoryError",
    "UserEntity",
    "UserFields",
    "UserInput",
    "UserResponse",
]
