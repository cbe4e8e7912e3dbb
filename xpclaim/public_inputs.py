"""
Public inputs for the XP claim circuit.

The circuit consumes exactly four public signals, in this order:

    [0] nullifier            decimal string, 0 < n < p
    [1] xp                   decimal string, 1..1000
    [2] player address       the 160-bit address as a decimal integer string
    [3] season               decimal string, 1 <= season < p

generate_proof_inputs() assembles the tuple after a successful generation.
validate_proof_inputs() re-checks an untrusted tuple before it is forwarded to
proof verification. It never raises: malformed input on this path is normal
traffic, so the caller branches on ValidationResult.valid.
"""

from __future__ import annotations

from typing import Any, List

from .errors import ErrorKind
from .field import FIELD_MODULUS
from .normalize import SEASON_MIN, XP_MAX, XP_MIN
from .nullifiers import verify_nullifier_format
from .types import NullifierResult, ParsedProofInputs, ValidationResult
from .utils.parse import parse_big_int, parse_int

PUBLIC_INPUT_COUNT = 4
ADDRESS_HEX_DIGITS = 40
_ADDRESS_LIMIT = 1 << 160


def address_to_decimal(address: str) -> str:
    """0x-prefixed hex address -> decimal integer string."""
    return str(int(address, 16))


def decimal_to_address(value: int | str) -> str:
    """Decimal (or int) -> canonical 0x + 40 lowercase hex address."""
    n = int(value)
    if n < 0 or n >= _ADDRESS_LIMIT:
        raise ValueError("address integer out of 160-bit range")
    return "0x" + format(n, "x").zfill(ADDRESS_HEX_DIGITS)


def generate_proof_inputs(result: NullifierResult, address: str) -> List[str]:
    return [
        result.nullifier,
        result.components.xp,
        address_to_decimal(address),
        result.components.season,
    ]


def validate_proof_inputs(inputs: Any) -> ValidationResult:
    if not isinstance(inputs, (list, tuple)) or len(inputs) != PUBLIC_INPUT_COUNT:
        return ValidationResult.fail(ErrorKind.INVALID_INPUTS_ARRAY)

    nullifier, xp_raw, address_raw, season_raw = inputs

    if not verify_nullifier_format(nullifier):
        return ValidationResult.fail(ErrorKind.INVALID_NULLIFIER_FORMAT)

    xp = parse_int(xp_raw)
    if xp is None or xp < XP_MIN or xp > XP_MAX:
        return ValidationResult.fail(ErrorKind.INVALID_XP_AMOUNT)

    address_int = parse_big_int(address_raw)
    if address_int is None:
        return ValidationResult.fail(ErrorKind.INVALID_PLAYER_ADDRESS, "unparsable")
    if address_int <= 0:
        return ValidationResult.fail(ErrorKind.INVALID_PLAYER_ADDRESS, "non-positive")
    if address_int >= _ADDRESS_LIMIT:
        return ValidationResult.fail(ErrorKind.INVALID_PLAYER_ADDRESS, "out-of-range")

    season = parse_int(season_raw)
    if season is None or season < SEASON_MIN or season >= FIELD_MODULUS:
        return ValidationResult.fail(ErrorKind.INVALID_SEASON)

    return ValidationResult.ok(
        ParsedProofInputs(
            nullifier=nullifier,
            xp=xp,
            player_address=decimal_to_address(address_int),
            season=season,
        )
    )


__all__ = [
    "PUBLIC_INPUT_COUNT",
    "address_to_decimal",
    "decimal_to_address",
    "generate_proof_inputs",
    "validate_proof_inputs",
]
