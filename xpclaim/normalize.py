"""
Claim-parameter validation and normalization.

Raw (address, xp, season) arrive from the claim endpoint. This module checks
them and produces the canonical text fields that feed the commitment:

    address -> 40 lowercase hex chars, 0x stripped
    xp      -> decimal string in [XP_MIN, XP_MAX]
    season  -> decimal string, SEASON_MIN <= season < p

Season defaulting (falsy -> 1) is the caller's job. Every value here is a
circuit public input, so season must also be a field element.
"""

from __future__ import annotations

import re
from typing import Any, Dict

from .errors import InvalidAddressError, InvalidSeasonError, InvalidXPAmountError
from .field import FIELD_MODULUS

XP_MIN = 1
XP_MAX = 1000
SEASON_MIN = 1

_ADDRESS_RE = re.compile(r"0[xX][0-9a-fA-F]{40}")


def is_address(value: Any) -> bool:
    """0x + 40 hex characters, any case. No checksum enforcement."""
    return isinstance(value, str) and _ADDRESS_RE.fullmatch(value) is not None


def normalize_address(address: Any) -> str:
    if not is_address(address):
        raise InvalidAddressError(address)
    return address[2:].lower()


def validate_xp_amount(xp: Any) -> int:
    # bool is an int subclass; True must not claim 1 XP
    if isinstance(xp, bool) or not isinstance(xp, int):
        raise InvalidXPAmountError(xp)
    if xp < XP_MIN or xp > XP_MAX:
        raise InvalidXPAmountError(xp)
    return xp


def validate_season(season: Any) -> int:
    if isinstance(season, bool) or not isinstance(season, int):
        raise InvalidSeasonError(season)
    if season < SEASON_MIN or season >= FIELD_MODULUS:
        raise InvalidSeasonError(season)
    return season


def normalize_components(address: Any, xp: Any, season: Any) -> Dict[str, str]:
    """Validate address, xp, then season; return {address, xp, season} as text."""
    normalized = normalize_address(address)
    amount = validate_xp_amount(xp)
    season_n = validate_season(season)
    return {"address": normalized, "xp": str(amount), "season": str(season_n)}


__all__ = [
    "XP_MIN",
    "XP_MAX",
    "SEASON_MIN",
    "is_address",
    "normalize_address",
    "validate_xp_amount",
    "validate_season",
    "normalize_components",
]
