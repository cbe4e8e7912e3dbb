"""
Per-player secret derivation.

    player_secret = HMAC-SHA256(key=master_secret, msg=address.lower()).hex()

Only case is folded; the 0x prefix is kept, unlike the commitment address
form. Changing this changes every issued secret.
"""

from __future__ import annotations

from typing import Union

from .utils.hash import hmac_sha256_hex


def generate_player_secret(address: str, master_secret: Union[str, bytes]) -> str:
    return hmac_sha256_hex(master_secret, address.lower())


__all__ = ["generate_player_secret"]
