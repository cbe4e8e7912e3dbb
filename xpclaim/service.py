"""
NullifierService: the public surface of the claim core as one object.

The service holds no mutable state. Its only constructor arguments are the
clock and nonce source used for commitments, so tests can build a
deterministic instance and the process can share `nullifier_service`.
"""

from __future__ import annotations

from typing import Any, List, Union

from . import nullifiers as _nullifiers
from .commitment import Clock, NonceSource, now_ms, random_nonce
from .field import FIELD_MODULUS
from .player_secret import generate_player_secret
from .public_inputs import generate_proof_inputs, validate_proof_inputs
from .storage_key import create_storage_key
from .types import NullifierResult, ValidationResult


class NullifierService:
    FIELD_SIZE = FIELD_MODULUS

    def __init__(self, *, clock: Clock = now_ms, nonce_source: NonceSource = random_nonce) -> None:
        self._clock = clock
        self._nonce_source = nonce_source

    def generate_nullifier(
        self, address: str, xp_amount: int, season: Any, secret: str
    ) -> NullifierResult:
        return _nullifiers.generate_nullifier(
            address,
            xp_amount,
            season,
            secret,
            clock=self._clock,
            nonce_source=self._nonce_source,
        )

    def verify_nullifier_format(self, nullifier: Any) -> bool:
        return _nullifiers.verify_nullifier_format(nullifier)

    def generate_proof_inputs(self, result: NullifierResult, address: str) -> List[str]:
        return generate_proof_inputs(result, address)

    def generate_player_secret(self, address: str, master_secret: Union[str, bytes]) -> str:
        return generate_player_secret(address, master_secret)

    def create_storage_key(self, nullifier: str) -> str:
        return create_storage_key(nullifier)

    def validate_proof_inputs(self, inputs: Any) -> ValidationResult:
        return validate_proof_inputs(inputs)


nullifier_service = NullifierService()

__all__ = ["NullifierService", "nullifier_service"]
