"""
xpclaim.nullifiers

Derives the **nullifier** for one XP claim attempt. A nullifier is a non-zero
BN254 field element that tags exactly one claim; the on-chain verifier and the
claim store reject any nullifier they have already seen.

Derivation
----------
    components  = normalize(address, xp, season) + (timestamp, nonce)
    commitment  = SHA-256( "|".join(components) ).hex()
    preimage    = commitment + player_secret          # text concatenation
    raw         = placeholder_field_hash(preimage)    # 256-bit hex
    nullifier   = int(raw, 16) mod p                  # decimal string

The preimage is the concatenation of two *hex strings*, hashed as UTF-8 text.
It is not the concatenation of the decoded digest bytes. Stored commitments
and the circuit tooling depend on the text form.

`placeholder_field_hash` is double SHA-256, standing in for a circuit-friendly
hash (Poseidon). It is the single place to swap when the circuit moves to a
real permutation hash.

Public API
----------
- generate_nullifier(address, xp_amount, season, secret, *, clock, nonce_source)
    -> NullifierResult   (raises InvalidAddressError / InvalidXPAmountError /
                          InvalidSeasonError / InvalidSecretError)
- derive_nullifier(commitment, secret) -> (decimal nullifier, raw hex)
- verify_nullifier_format(value) -> bool  (never raises)
"""

from __future__ import annotations

from typing import Any, Optional, Tuple

from .commitment import Clock, NonceSource, build_components, compute_commitment, now_ms, random_nonce
from .errors import InvalidSecretError, NullifierDerivationError
from .field import FIELD_MODULUS, to_field_element
from .logging import get_logger
from .normalize import normalize_components
from .types import NullifierResult
from .utils.hash import double_sha256_hex
from .utils.parse import parse_big_int

MIN_SECRET_LENGTH = 32

log = get_logger("xpclaim.nullifiers")


def placeholder_field_hash(preimage: str) -> str:
    """Double SHA-256 of the UTF-8 preimage (Poseidon stand-in)."""
    return double_sha256_hex(preimage)


def derive_nullifier_hash(commitment: str, secret: str) -> str:
    return placeholder_field_hash(commitment + secret)


def derive_nullifier(commitment: str, secret: str) -> Tuple[str, str]:
    raw = derive_nullifier_hash(commitment, secret)
    return str(to_field_element(raw)), raw


def verify_nullifier_format(nullifier: Any) -> bool:
    """True iff `nullifier` parses as an integer with 0 < n < p."""
    n: Optional[int] = parse_big_int(nullifier)
    if n is None:
        return False
    return 0 < n < FIELD_MODULUS


def _check_secret(secret: Any) -> str:
    if not secret or not isinstance(secret, str):
        raise InvalidSecretError(None if secret is None else 0)
    if len(secret) < MIN_SECRET_LENGTH:
        raise InvalidSecretError(len(secret))
    return secret


def generate_nullifier(
    address: str,
    xp_amount: int,
    season: Any,
    secret: str,
    *,
    clock: Clock = now_ms,
    nonce_source: NonceSource = random_nonce,
) -> NullifierResult:
    """
    Build a fresh commitment for (address, xp_amount, season) and derive its
    nullifier under `secret` (normally generate_player_secret(...)).

    Validation order is address, xp, season, secret.
    """
    normalized = normalize_components(address, xp_amount, season)
    _check_secret(secret)

    components = build_components(normalized, clock=clock, nonce_source=nonce_source)
    commitment = compute_commitment(components)
    nullifier, raw = derive_nullifier(commitment, secret)

    if not verify_nullifier_format(nullifier):
        # only reachable when the digest is an exact multiple of p
        raise NullifierDerivationError(commitment=commitment)

    log.debug(
        "nullifier generated",
        extra={"commitment": commitment, "xp": components.xp, "season": components.season},
    )
    return NullifierResult(
        nullifier=nullifier,
        commitment=commitment,
        components=components,
        nullifier_hash=raw,
    )


__all__ = [
    "MIN_SECRET_LENGTH",
    "placeholder_field_hash",
    "derive_nullifier_hash",
    "derive_nullifier",
    "verify_nullifier_format",
    "generate_nullifier",
]
