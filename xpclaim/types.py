"""
Structured types produced and consumed by xpclaim.

This module defines:
  * ClaimComponents   : the five text fields hashed into a commitment.
  * NullifierResult   : output of generate_nullifier().
  * ParsedProofInputs : a re-validated public-input tuple.
  * ValidationResult  : result-discriminant wrapper returned on the
                        verification path.

Notes
- Field names are snake_case in Python; to_dict() emits the camelCase keys
  used on the wire by the claim API (nullifierHash, playerAddress).
- No validation lives here. See normalize.py and public_inputs.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, NewType, Optional, Tuple

# 40 lowercase hex chars, no prefix (commitment component form).
NormalizedAddress = NewType("NormalizedAddress", str)
# 64 lowercase hex chars.
Commitment = NewType("Commitment", str)
# Decimal string of an integer in (0, p).
Nullifier = NewType("Nullifier", str)
# 16 lowercase hex chars.
StorageKey = NewType("StorageKey", str)

# [nullifier, xp, address-as-decimal, season]
ProofPublicInputs = List[str]


@dataclass(frozen=True)
class ClaimComponents:
    """
    Fields bound by the commitment, in hashing order.

      address:   40 lowercase hex chars, no 0x
      xp:        decimal string, 1..1000
      season:    decimal string, >= 1
      timestamp: decimal string, milliseconds since epoch
      nonce:     32 hex chars (16 random bytes)
    """

    address: str
    xp: str
    season: str
    timestamp: str
    nonce: str

    def ordered(self) -> Tuple[str, str, str, str, str]:
        return (self.address, self.xp, self.season, self.timestamp, self.nonce)

    def to_dict(self) -> Dict[str, str]:
        return {
            "address": self.address,
            "xp": self.xp,
            "season": self.season,
            "timestamp": self.timestamp,
            "nonce": self.nonce,
        }


@dataclass(frozen=True)
class NullifierResult:
    """
    Output of a nullifier generation.

    nullifier_hash is the raw 256-bit digest before field reduction. It is
    kept for audit/debugging and must never be submitted on-chain.
    """

    nullifier: str
    commitment: str
    components: ClaimComponents
    nullifier_hash: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nullifier": self.nullifier,
            "commitment": self.commitment,
            "components": self.components.to_dict(),
            "nullifierHash": self.nullifier_hash,
        }


@dataclass(frozen=True)
class ParsedProofInputs:
    nullifier: Any
    xp: int
    player_address: str
    season: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nullifier": self.nullifier,
            "xp": self.xp,
            "playerAddress": self.player_address,
            "season": self.season,
        }


@dataclass(frozen=True)
class ValidationResult:
    """
    {valid: True, parsed} or {valid: False, error}.

    `detail` narrows an error kind where one kind has several causes
    (e.g. InvalidPlayerAddress: unparsable / non-positive / out-of-range).
    """

    valid: bool
    parsed: Optional[ParsedProofInputs] = None
    error: Optional[str] = None
    detail: Optional[str] = None

    def __bool__(self) -> bool:
        return self.valid

    @classmethod
    def ok(cls, parsed: ParsedProofInputs) -> "ValidationResult":
        return cls(valid=True, parsed=parsed)

    @classmethod
    def fail(cls, error: str, detail: Optional[str] = None) -> "ValidationResult":
        return cls(valid=False, error=str(error), detail=detail)

    def to_dict(self) -> Dict[str, Any]:
        if self.valid and self.parsed is not None:
            return {"valid": True, "parsed": self.parsed.to_dict()}
        out: Dict[str, Any] = {"valid": False, "error": self.error}
        if self.detail:
            out["detail"] = self.detail
        return out


__all__ = [
    "NormalizedAddress",
    "Commitment",
    "Nullifier",
    "StorageKey",
    "ProofPublicInputs",
    "ClaimComponents",
    "NullifierResult",
    "ParsedProofInputs",
    "ValidationResult",
]
