"""Short lookup key for a nullifier in the claim store."""

from __future__ import annotations

from .utils.hash import sha256_hex, truncate_hex

STORAGE_KEY_LENGTH = 16


def create_storage_key(nullifier: str) -> str:
    """First 16 hex chars of SHA-256(nullifier text). Collisions are the store's problem."""
    return truncate_hex(sha256_hex(str(nullifier)), STORAGE_KEY_LENGTH)


__all__ = ["STORAGE_KEY_LENGTH", "create_storage_key"]
