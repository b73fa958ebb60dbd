"""
Persistence adapters.

The user collection lives in memory and is mirrored to a single JSON file.
Routers and scripts go through JsonUserRepository rather than touching the
file.
"""

from .json_user_repository import JsonUserRepository

__all__ = ["JsonUserRepository"]
