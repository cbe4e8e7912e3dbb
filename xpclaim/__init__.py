"""
xpclaim: commitment / nullifier core for XP reward claims.

Turns a validated (address, xp, season) award into a one-time BN254 field
element (the nullifier) bound to a per-player secret, and re-validates the
public inputs a claim proof is submitted with.

Public surface:
- nullifier_service / NullifierService: the six core operations
- generate_nullifier, verify_nullifier_format, generate_proof_inputs,
  generate_player_secret, create_storage_key, validate_proof_inputs
- issue_claim / redeem_claim: the claim flow over a NullifierRegistry
- __version__
"""

from .claims import ClaimOutcome, ClaimTicket, is_nullifier_used, issue_claim, redeem_claim
from .errors import ClaimError, ErrorKind
from .field import FIELD_MODULUS
from .nullifiers import generate_nullifier, verify_nullifier_format
from .player_secret import generate_player_secret
from .public_inputs import generate_proof_inputs, validate_proof_inputs
from .registry import MemoryNullifierRegistry, NullifierRegistry
from .service import NullifierService, nullifier_service
from .storage_key import create_storage_key
from .types import ClaimComponents, NullifierResult, ParsedProofInputs, ValidationResult
from .version import __version__

__all__ = [
    "__version__",
    "FIELD_MODULUS",
    "ErrorKind",
    "ClaimError",
    "ClaimComponents",
    "NullifierResult",
    "ParsedProofInputs",
    "ValidationResult",
    "NullifierService",
    "nullifier_service",
    "generate_nullifier",
    "verify_nullifier_format",
    "generate_proof_inputs",
    "generate_player_secret",
    "create_storage_key",
    "validate_proof_inputs",
    "NullifierRegistry",
    "MemoryNullifierRegistry",
    "ClaimTicket",
    "ClaimOutcome",
    "issue_claim",
    "redeem_claim",
    "is_nullifier_used",
]
