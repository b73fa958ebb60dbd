"""Id allocation for the user collection."""
from __future__ import annotations

from typing import Mapping


def next_user_id(collection: Mapping[int, object]) -> int:
    """Return 1 for an empty collection, otherwise the highest id plus one.

    Ids freed by deletions are never handed out again.
    """
    if not collection:
        return 1
    return max(collection) + 1
