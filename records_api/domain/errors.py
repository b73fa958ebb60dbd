"""Exceptions raised by the user repository."""

from __future__ import annotations


class UserRepositoryError(Exception):
    """Base exception for user repository workflow."""


class NotFoundError(UserRepositoryError):
    """Raised when no user is stored under the requested id."""


class TypeMismatchError(UserRepositoryError, TypeError):
    """Raised when an entity that is not a UserEntity is passed in."""


class InvalidEntityError(UserRepositoryError):
    """Raised when an operation needs an id the entity does not carry."""


class StorageError(UserRepositoryError):
    """Base exception for backing file problems."""


class StorageCorruptError(StorageError):
    """Raised when the backing file cannot be parsed into user records."""


class StorageIOError(StorageError):
    """Raised when the backing file cannot be read or written."""
