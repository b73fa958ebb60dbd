"""User repository backed by a single JSON file."""
from __future__ import annotations

import logging
import threading
from pathlib import Path
from typing import Any

from records_api.domain.errors import (
    InvalidEntityError,
    NotFoundError,
    StorageIOError,
    TypeMismatchError,
)
from records_api.domain.users import UserEntity, UserFields
from records_api.repositories import json_codec
from records_api.repositories.identity import next_user_id

logger = logging.getLogger(__name__)


class JsonUserRepository:
    """CRUD helpers over an in-memory user collection mirrored to a JSON file.

    The file is read once on construction. Every mutation rewrites the whole
    file afterwards; a failed write leaves the in-memory change in place.
    """

    def __init__(self, storage_path: str | Path) -> None:
        self._storage_path = Path(storage_path)
        self._collection: dict[int, UserEntity] = {}
        self._lock = threading.RLock()
        self._load()

    @property
    def storage_path(self) -> Path:
        return self._storage_path

    def _load(self) -> None:
        try:
            raw = self._storage_path.read_bytes()
        except FileNotFoundError:
            logger.info("No user storage at %s, starting empty", self._storage_path)
            return
        except OSError as exc:
            raise StorageIOError(f"cannot read {self._storage_path}: {exc}") from exc

        self._collection = json_codec.decode(raw)
        logger.info("Loaded %d user(s) from %s", len(self._collection), self._storage_path)

    # -------------------------- reads --------------------------
    def find_one_by_id(self, user_id: int) -> UserEntity:
        with self._lock:
            user = self._collection.get(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} not found")
        return user

    def list_users(self, amount: int = 10, offset: int = 0) -> list[UserEntity]:
        """Return up to `amount` users starting at `offset`, ordered by id."""
        if amount < 0 or offset < 0:
            raise ValueError("amount and offset must be non-negative")
        with self._lock:
            keys = sorted(self._collection)[offset:offset + amount]
            return [self._collection[key] for key in keys]

    def all(self) -> dict[int, UserEntity]:
        with self._lock:
            return dict(self._collection)

    def count(self) -> int:
        with self._lock:
            return len(self._collection)

    def __len__(self) -> int:
        return self.count()

    def next_user_id(self) -> int:
        with self._lock:
            return next_user_id(self._collection)

    # -------------------------- writes --------------------------
    def upsert(self, user_input: UserFields, user: UserEntity | None = None) -> UserEntity:
        """Copy name/lastname onto `user` (or a new entity) and persist it."""
        with self._lock:
            if user is None:
                user = UserEntity()
            else:
                self._validate_instance(user)

            user.name = user_input.name
            user.lastname = user_input.lastname
            return self.persist(user)

    def persist(self, user: UserEntity) -> UserEntity:
        user = self._validate_instance(user)
        with self._lock:
            self._check_id_unchanged(user)
            if user.id is None:
                self._add_user(user)
            else:
                self._update_user(user)
            self.flush()
        return user

    def delete(self, user: UserEntity) -> bool:
        user = self._validate_instance(user)
        with self._lock:
            self._check_id_unchanged(user)
            if user.id is None:
                raise InvalidEntityError("user not in collection")
            self._collection.pop(user.id, None)
            self.flush()
        return True

    def flush(self) -> "JsonUserRepository":
        """Overwrite the backing file with the entire current collection."""
        with self._lock:
            content = json_codec.encode(self._collection)
            try:
                self._storage_path.write_bytes(content)
            except OSError as exc:
                logger.warning("Failed to write %s: %s", self._storage_path, exc)
                raise StorageIOError(f"cannot write {self._storage_path}: {exc}") from exc
            logger.debug("Flushed %d user(s) to %s", len(self._collection), self._storage_path)
        return self

    # -------------------------- internals --------------------------
    @staticmethod
    def _validate_instance(user: Any) -> UserEntity:
        if not isinstance(user, UserEntity):
            raise TypeMismatchError(f"class {type(user).__name__} not compatible with UserEntity")
        return user

    def _check_id_unchanged(self, user: UserEntity) -> None:
        """Reject (and undo) an id change on an entity already in the collection."""
        for key, stored in self._collection.items():
            if stored is user and key != user.id:
                changed_to, user.id = user.id, key
                raise InvalidEntityError(f"user stored under id {key} cannot change its id to {changed_to!r}")

    def _add_user(self, user: UserEntity) -> UserEntity:
        user.id = next_user_id(self._collection)
        self._collection[user.id] = user
        return user

    def _update_user(self, user: UserEntity) -> UserEntity:
        if isinstance(user.id, bool) or not isinstance(user.id, int) or user.id < 1:
            raise InvalidEntityError(f"invalid user id {user.id!r}")
        self._collection[user.id] = user
        return user
