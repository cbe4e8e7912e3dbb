"""
BN254 scalar-field helpers.

Every nullifier emitted by xpclaim is a non-zero residue of this field, which
is the public-input domain of the Groth16 claim circuit.
"""

from __future__ import annotations

FIELD_MODULUS = 21888242871839275222246405745257275088548364400416034343698204186575808495617
P = FIELD_MODULUS


def reduce(x: int) -> int:
    """Reduce a non-negative integer (any size) into [0, p)."""
    if x < 0:
        raise ValueError("reduce: negative input")
    return x % FIELD_MODULUS


def to_field_element(hex_digest: str) -> int:
    """Interpret a hex digest (optional 0x prefix) as a big-endian integer mod p."""
    h = hex_digest[2:] if hex_digest[:2] in ("0x", "0X") else hex_digest
    return reduce(int(h, 16))


def is_field_element(x: int) -> bool:
    return 0 <= x < FIELD_MODULUS


__all__ = ["FIELD_MODULUS", "P", "reduce", "to_field_element", "is_field_element"]
