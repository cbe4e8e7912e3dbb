"""
Typed exceptions and stable error kinds for xpclaim.

Design goals
- Structured: machine-readable kind + human message + contextual fields.
- Stable: the kind strings below are part of the public contract. Callers on
  the HTTP side map them to status codes and alerting buckets.
- Safe: context never carries secrets (master secret, player secret).

Two propagation styles coexist:
  * generation-time failures are raised as ClaimError subclasses;
  * verification-time failures are returned as ValidationResult objects that
    carry the same ErrorKind strings (see xpclaim.public_inputs).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Mapping, Optional


class ErrorKind(str, Enum):
    """Canonical error kinds surfaced by xpclaim."""

    # Generation path (raised)
    INVALID_ADDRESS = "InvalidAddress"
    INVALID_XP_AMOUNT = "InvalidXPAmount"
    INVALID_SECRET = "InvalidSecret"

    # Verification path (returned)
    INVALID_INPUTS_ARRAY = "InvalidInputsArray"
    INVALID_NULLIFIER_FORMAT = "InvalidNullifierFormat"
    INVALID_PLAYER_ADDRESS = "InvalidPlayerAddress"
    INVALID_SEASON = "InvalidSeason"  # also raised by generation

    # Claim flow
    NULLIFIER_REUSE = "NullifierReuse"
    PROOF_REJECTED = "ProofRejected"

    # Programming / environment
    NULLIFIER_DERIVATION = "NullifierDerivation"
    CONFIG = "Config"

    def __str__(self) -> str:
        return self.value


_CLIENT_KINDS = frozenset(
    {
        ErrorKind.INVALID_ADDRESS,
        ErrorKind.INVALID_XP_AMOUNT,
        ErrorKind.INVALID_SECRET,
        ErrorKind.INVALID_INPUTS_ARRAY,
        ErrorKind.INVALID_NULLIFIER_FORMAT,
        ErrorKind.INVALID_PLAYER_ADDRESS,
        ErrorKind.INVALID_SEASON,
    }
)


def _clip(value: Any, limit: int) -> str:
    # repr() of a very large int raises on CPython; keep ctx building total
    if isinstance(value, int) and value.bit_length() > 4 * limit:
        return f"<int bit_length={value.bit_length()}>"
    return repr(value)[:limit]


def is_client_error(kind: ErrorKind | str) -> bool:
    """True for malformed-input kinds (HTTP 400 class)."""
    try:
        return ErrorKind(str(kind)) in _CLIENT_KINDS
    except ValueError:
        return False


@dataclass
class ClaimError(Exception):
    """
    Base structured error for xpclaim.

    Fields:
      code:  stable kind (ErrorKind | str)
      msg:   human-readable summary
      ctx:   small dict of contextual fields (never secrets)
      cause: optional underlying exception (not serialized)
    """

    code: ErrorKind | str = ErrorKind.NULLIFIER_DERIVATION
    msg: str = "claim error"
    ctx: Dict[str, Any] = field(default_factory=dict)
    cause: Optional[BaseException] = None

    def __str__(self) -> str:
        parts = [f"[{self.code}] {self.msg}"]
        if self.ctx:
            parts.append(f"ctx={self.ctx}")
        if self.cause:
            parts.append(f"cause={self.cause!r}")
        return " ".join(parts)

    @property
    def kind(self) -> str:
        return str(self.code)

    def to_dict(self) -> Dict[str, Any]:
        return {"error": str(self.code), "msg": self.msg, "ctx": dict(self.ctx)}

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "ClaimError":
        raw = d.get("error", ErrorKind.NULLIFIER_DERIVATION)
        try:
            code: ErrorKind | str = ErrorKind(raw)
        except ValueError:
            code = str(raw)
        return cls(code=code, msg=str(d.get("msg", "claim error")), ctx=dict(d.get("ctx", {})))


class InvalidAddressError(ClaimError):
    """Address is not 0x + 40 hex characters."""

    def __init__(self, address: Any = None, *, msg: str = "Invalid player address") -> None:
        ctx: Dict[str, Any] = {}
        if address is not None:
            ctx["address"] = _clip(address, 64)
        super().__init__(code=ErrorKind.INVALID_ADDRESS, msg=msg, ctx=ctx)


class InvalidXPAmountError(ClaimError):
    """XP amount outside [XP_MIN, XP_MAX] or not an integer."""

    def __init__(self, xp: Any = None, *, msg: str = "Invalid XP amount") -> None:
        ctx: Dict[str, Any] = {}
        if xp is not None:
            ctx["xp"] = _clip(xp, 32)
        super().__init__(code=ErrorKind.INVALID_XP_AMOUNT, msg=msg, ctx=ctx)


class InvalidSeasonError(ClaimError):
    """Season not an integer in [SEASON_MIN, p)."""

    def __init__(self, season: Any = None, *, msg: str = "Invalid season") -> None:
        ctx: Dict[str, Any] = {}
        if season is not None:
            ctx["season"] = _clip(season, 32)
        super().__init__(code=ErrorKind.INVALID_SEASON, msg=msg, ctx=ctx)


class InvalidSecretError(ClaimError):
    """Player secret missing or too short. Only the length is recorded."""

    def __init__(self, length: Optional[int] = None, *, msg: str = "Invalid secret") -> None:
        ctx: Dict[str, Any] = {}
        if length is not None:
            ctx["length"] = int(length)
        super().__init__(code=ErrorKind.INVALID_SECRET, msg=msg, ctx=ctx)


class InvalidNullifierFormatError(ClaimError):
    def __init__(self, nullifier: Any = None) -> None:
        ctx: Dict[str, Any] = {}
        if nullifier is not None:
            ctx["nullifier"] = _clip(nullifier, 96)
        super().__init__(
            code=ErrorKind.INVALID_NULLIFIER_FORMAT, msg="Invalid nullifier format", ctx=ctx
        )


class NullifierReuseError(ClaimError):
    """Raised when a nullifier's storage key is already marked used."""

    def __init__(
        self,
        storage_key: str,
        *,
        used_at_ms: Optional[int] = None,
        ctx: Optional[Mapping[str, Any]] = None,
    ) -> None:
        base_ctx: Dict[str, Any] = {"storage_key": storage_key}
        if used_at_ms is not None:
            base_ctx["used_at_ms"] = int(used_at_ms)
        if ctx:
            base_ctx.update(ctx)
        super().__init__(
            code=ErrorKind.NULLIFIER_REUSE, msg="Nullifier already used", ctx=base_ctx
        )


class NullifierDerivationError(ClaimError):
    """Derived value failed the field self-check (zero residue)."""

    def __init__(self, msg: str = "derived nullifier is not a valid field element", **ctx: Any) -> None:
        super().__init__(code=ErrorKind.NULLIFIER_DERIVATION, msg=msg, ctx=ctx)


class ConfigError(ClaimError):
    def __init__(self, msg: str, **ctx: Any) -> None:
        super().__init__(code=ErrorKind.CONFIG, msg=msg, ctx=ctx)


__all__ = [
    "ErrorKind",
    "ClaimError",
    "InvalidAddressError",
    "InvalidXPAmountError",
    "InvalidSeasonError",
    "InvalidSecretError",
    "InvalidNullifierFormatError",
    "NullifierReuseError",
    "NullifierDerivationError",
    "ConfigError",
    "is_client_error",
]
