"""
Commitment builder.

    commitment = SHA-256( address | xp | season | timestamp | nonce ).hex()

The timestamp (ms since epoch) and a 16-byte random nonce are freshness salt:
two generations for the same (address, xp, season) never share a commitment.
Both sources are injectable so tests can pin them.
"""

from __future__ import annotations

import secrets
import time
from typing import Callable, Iterable, Mapping

from .types import ClaimComponents
from .utils.hash import sha256_hex

COMPONENT_SEPARATOR = "|"
COMPONENT_ORDER = ("address", "xp", "season", "timestamp", "nonce")
NONCE_BYTES = 16

Clock = Callable[[], int]
NonceSource = Callable[[], str]


def now_ms() -> int:
    return time.time_ns() // 1_000_000


def random_nonce() -> str:
    return secrets.token_bytes(NONCE_BYTES).hex()


def build_components(
    normalized: Mapping[str, str],
    *,
    clock: Clock = now_ms,
    nonce_source: NonceSource = random_nonce,
) -> ClaimComponents:
    """Attach fresh timestamp and nonce to already-normalized fields."""
    return ClaimComponents(
        address=normalized["address"],
        xp=normalized["xp"],
        season=normalized["season"],
        timestamp=str(int(clock())),
        nonce=nonce_source(),
    )


def hash_components(parts: Iterable[str]) -> str:
    return sha256_hex(COMPONENT_SEPARATOR.join(parts))


def compute_commitment(components: ClaimComponents) -> str:
    return hash_components(components.ordered())


__all__ = [
    "COMPONENT_SEPARATOR",
    "COMPONENT_ORDER",
    "NONCE_BYTES",
    "Clock",
    "NonceSource",
    "now_ms",
    "random_nonce",
    "build_components",
    "hash_components",
    "compute_commitment",
]
