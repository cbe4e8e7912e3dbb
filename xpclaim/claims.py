"""
Claim flow: issue a nullifier for an XP award, then redeem it once.

This is the library form of the two claim endpoints:

  issue_claim   player secret -> nullifier -> storage key -> public inputs,
                recording the commitment in the registry.
  redeem_claim  validate public inputs -> refuse used nullifiers -> hand the
                proof to the verifier -> mark the nullifier used.

The verifier is injected (normally a call into the on-chain verifier
contract). Registry and verifier failures that are not claim outcomes
(I/O errors, RPC errors) propagate to the caller unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

from .errors import ErrorKind, InvalidNullifierFormatError, NullifierReuseError
from .logging import get_logger
from .registry import NullifierRegistry
from .service import NullifierService, nullifier_service
from .types import ParsedProofInputs
from .utils.parse import parse_big_int

log = get_logger("xpclaim.claims")

ProofVerifier = Callable[[Any, List[str]], bool]


@dataclass(frozen=True)
class ClaimTicket:
    """What the issuing endpoint returns to the client."""

    nullifier: str
    commitment: str
    storage_key: str
    proof_inputs: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nullifier": self.nullifier,
            "commitment": self.commitment,
            "proofInputs": list(self.proof_inputs),
        }


@dataclass(frozen=True)
class ClaimOutcome:
    ok: bool
    error: Optional[str] = None
    detail: Optional[str] = None
    parsed: Optional[ParsedProofInputs] = None
    storage_key: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"ok": self.ok}
        if self.error:
            out["error"] = self.error
        if self.detail:
            out["detail"] = self.detail
        if self.parsed is not None:
            out["parsed"] = self.parsed.to_dict()
        if self.storage_key:
            out["storageKey"] = self.storage_key
        return out


def _canonical_nullifier(value: Any) -> str:
    n = parse_big_int(value)
    if n is None:
        raise InvalidNullifierFormatError(value)
    return str(n)


def issue_claim(
    address: str,
    xp_amount: int,
    season: Any,
    master_secret: Union[str, bytes],
    *,
    registry: NullifierRegistry,
    service: NullifierService = nullifier_service,
) -> ClaimTicket:
    """
    Generate a nullifier for one XP award and record its commitment.

    Raises InvalidAddressError / InvalidXPAmountError / InvalidSeasonError from
    generation.
    """
    season = season or 1
    secret = service.generate_player_secret(address, master_secret)
    result = service.generate_nullifier(address, xp_amount, season, secret)
    key = service.create_storage_key(result.nullifier)

    registry.record_commitment(
        key,
        result.commitment,
        player=address.lower(),
        xp=int(result.components.xp),
        season=int(result.components.season),
    )
    ticket = ClaimTicket(
        nullifier=result.nullifier,
        commitment=result.commitment,
        storage_key=key,
        proof_inputs=service.generate_proof_inputs(result, address),
    )
    log.info("claim issued", extra={"storage_key": key, "xp": xp_amount, "season": season})
    return ticket


def redeem_claim(
    proof: Any,
    public_inputs: Any,
    *,
    registry: NullifierRegistry,
    verifier: ProofVerifier,
    service: NullifierService = nullifier_service,
) -> ClaimOutcome:
    """
    Redeem a proof for its public inputs. Returns a ClaimOutcome for every
    expected rejection (malformed inputs, reuse, proof rejected).
    """
    checked = service.validate_proof_inputs(public_inputs)
    parsed = checked.parsed
    if not checked.valid or parsed is None:
        log.warning("claim inputs rejected", extra={"error": checked.error, "detail": checked.detail})
        return ClaimOutcome(ok=False, error=checked.error, detail=checked.detail)

    key = service.create_storage_key(_canonical_nullifier(parsed.nullifier))

    if registry.is_used(key):
        log.warning("nullifier reuse attempt", extra={"storage_key": key})
        return ClaimOutcome(ok=False, error=str(ErrorKind.NULLIFIER_REUSE), parsed=parsed, storage_key=key)

    if not verifier(proof, list(public_inputs)):
        log.warning("proof rejected by verifier", extra={"storage_key": key})
        return ClaimOutcome(ok=False, error=str(ErrorKind.PROOF_REJECTED), parsed=parsed, storage_key=key)

    try:
        registry.mark_used(
            key, player=parsed.player_address, xp=parsed.xp, season=parsed.season
        )
    except NullifierReuseError:
        # lost the race against a concurrent redeem of the same nullifier
        log.warning("nullifier reuse attempt", extra={"storage_key": key, "race": True})
        return ClaimOutcome(ok=False, error=str(ErrorKind.NULLIFIER_REUSE), parsed=parsed, storage_key=key)

    log.info("claim redeemed", extra={"storage_key": key, "xp": parsed.xp, "season": parsed.season})
    return ClaimOutcome(ok=True, parsed=parsed, storage_key=key)


def is_nullifier_used(
    nullifier: Any,
    *,
    registry: NullifierRegistry,
    service: NullifierService = nullifier_service,
) -> bool:
    """Raises InvalidNullifierFormatError for anything that is not a legal nullifier."""
    if not service.verify_nullifier_format(nullifier):
        raise InvalidNullifierFormatError(nullifier)
    return registry.is_used(service.create_storage_key(_canonical_nullifier(nullifier)))


__all__ = [
    "ProofVerifier",
    "ClaimTicket",
    "ClaimOutcome",
    "issue_claim",
    "redeem_claim",
    "is_nullifier_used",
]
