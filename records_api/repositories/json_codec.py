"""
Encode/decode helpers between the in-memory user collection and the JSON
array stored on disk.

Each record on disk is an object with exactly `id`, `name` and `lastname`.
"""

from __future__ import annotations

import json
from typing import Any, Mapping

from records_api.domain.errors import InvalidEntityError, StorageCorruptError
from records_api.domain.users import UserEntity

FIELDS = ("id", "name", "lastname")


def entity_to_record(user: UserEntity) -> dict:
    return {"id": user.id, "name": user.name, "lastname": user.lastname}


def record_to_entity(record: Any) -> UserEntity:
    """Build a persisted UserEntity from one decoded JSON object."""
    if not isinstance(record, dict):
        raise StorageCorruptError(f"expected an object, got {type(record).__name__}")
    missing = [field for field in FIELDS if field not in record]
    if missing:
        raise StorageCorruptError(f"record is missing field(s): {', '.join(missing)}")

    user_id = record["id"]
    # bool is a subclass of int
    if isinstance(user_id, bool) or not isinstance(user_id, int) or user_id < 1:
        raise StorageCorruptError(f"invalid id {user_id!r}")
    name, lastname = record["name"], record["lastname"]
    if not isinstance(name, str) or not isinstance(lastname, str):
        raise StorageCorruptError(f"name/lastname of user {user_id} must be strings")
    return UserEntity(id=user_id, name=name, lastname=lastname)


def decode(raw: bytes) -> dict[int, UserEntity]:
    """Parse the stored JSON array into a collection keyed by id."""
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise StorageCorruptError("storage is not valid UTF-8") from exc
    if not text.strip():
        return {}
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise StorageCorruptError(f"storage is not valid JSON: {exc}") from exc
    if not isinstance(payload, list):
        raise StorageCorruptError("storage root must be a JSON array")

    collection: dict[int, UserEntity] = {}
    for record in payload:
        user = record_to_entity(record)
        if user.id in collection:
            raise StorageCorruptError(f"duplicate id {user.id}")
        collection[user.id] = user
    return collection


def encode(collection: Mapping[int, UserEntity]) -> bytes:
    """Serialize the collection values as a JSON array ordered by id.

    Every key must equal the id of the entity stored under it.
    """
    records = []
    for key in sorted(collection):
        user = collection[key]
        if user.id != key:
            raise InvalidEntityError(f"user under key {key} carries id {user.id!r}")
        records.append(entity_to_record(user))
    return (json.dumps(records, ensure_ascii=False, indent=2) + "\n").encode("utf-8")
