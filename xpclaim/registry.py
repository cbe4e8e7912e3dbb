"""
Nullifier registries (check-and-mark)
=====================================

At-most-once claiming is enforced outside the derivation code: by the
verifier contract's "nullifier used" flag and by a unique row in the claim
store. This module defines the interface the claim flow expects from such a
store, plus an in-process implementation used by tests and the CLI.

    is_used(storage_key) -> bool
    record_commitment(storage_key, commitment, **meta) -> RegistryEntry
    mark_used(storage_key, **meta) -> RegistryEntry   # raises NullifierReuseError
    get(storage_key) -> RegistryEntry | None

mark_used() must be atomic: of two concurrent callers with the same key,
exactly one succeeds.
"""

from __future__ import annotations

import threading
import time
from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Protocol

from .errors import NullifierReuseError


@dataclass(frozen=True)
class RegistryEntry:
    storage_key: str
    commitment: Optional[str] = None
    player: Optional[str] = None
    xp: Optional[int] = None
    season: Optional[int] = None
    used: bool = False
    used_at_ms: Optional[int] = None


class NullifierRegistry(Protocol):
    def is_used(self, storage_key: str) -> bool: ...
    def record_commitment(self, storage_key: str, commitment: str, **meta: Any) -> RegistryEntry: ...
    def mark_used(self, storage_key: str, **meta: Any) -> RegistryEntry: ...
    def get(self, storage_key: str) -> Optional[RegistryEntry]: ...


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class MemoryNullifierRegistry:
    """Dict-backed registry guarded by one lock."""

    def __init__(self) -> None:
        self._entries: Dict[str, RegistryEntry] = {}
        self._lock = threading.Lock()

    def is_used(self, storage_key: str) -> bool:
        with self._lock:
            entry = self._entries.get(storage_key)
            return entry is not None and entry.used

    def record_commitment(self, storage_key: str, commitment: str, **meta: Any) -> RegistryEntry:
        with self._lock:
            prev = self._entries.get(storage_key)
            if prev is not None and prev.used:
                raise NullifierReuseError(storage_key, used_at_ms=prev.used_at_ms)
            entry = RegistryEntry(
                storage_key=storage_key,
                commitment=commitment,
                player=meta.get("player"),
                xp=meta.get("xp"),
                season=meta.get("season"),
            )
            self._entries[storage_key] = entry
            return entry

    def mark_used(self, storage_key: str, **meta: Any) -> RegistryEntry:
        with self._lock:
            prev = self._entries.get(storage_key) or RegistryEntry(storage_key=storage_key)
            if prev.used:
                raise NullifierReuseError(storage_key, used_at_ms=prev.used_at_ms)
            entry = replace(
                prev,
                player=meta.get("player", prev.player),
                xp=meta.get("xp", prev.xp),
                season=meta.get("season", prev.season),
                used=True,
                used_at_ms=int(meta.get("used_at_ms") or _now_ms()),
            )
            self._entries[storage_key] = entry
            return entry

    def get(self, storage_key: str) -> Optional[RegistryEntry]:
        with self._lock:
            return self._entries.get(storage_key)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


__all__ = ["RegistryEntry", "NullifierRegistry", "MemoryNullifierRegistry"]
