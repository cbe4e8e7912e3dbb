"""
xpclaim.utils.hash

Thin wrappers around hashlib/hmac used by the commitment, nullifier, secret
and storage-key derivations.

Design rules
- Text inputs are UTF-8 encoded before hashing. Nothing in this package
  hashes hex strings as decoded bytes unless the function name says so.
- Digests are returned as lowercase hex without a 0x prefix, matching what is
  stored by the claim service and fed to the circuit tooling.
"""

from __future__ import annotations

import hashlib
import hmac
from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def _to_bytes(data: Union[BytesLike, str]) -> bytes:
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, str):
        return data.encode("utf-8")
    raise TypeError(f"unsupported type for hashing: {type(data)!r}")


def sha256(data: Union[BytesLike, str]) -> bytes:
    return hashlib.sha256(_to_bytes(data)).digest()


def sha256_hex(data: Union[BytesLike, str]) -> str:
    return hashlib.sha256(_to_bytes(data)).hexdigest()


def double_sha256_hex(data: Union[BytesLike, str]) -> str:
    """
    SHA-256 over the raw 32-byte SHA-256 digest of `data`:
        H2 = sha256(sha256(data).digest()).hex()
    """
    return hashlib.sha256(sha256(data)).hexdigest()


def hmac_sha256_hex(key: Union[BytesLike, str], message: Union[BytesLike, str]) -> str:
    return hmac.new(_to_bytes(key), _to_bytes(message), hashlib.sha256).hexdigest()


def truncate_hex(digest_hex: str, length: int) -> str:
    if length <= 0 or length > len(digest_hex):
        raise ValueError("truncate_hex: length out of range")
    return digest_hex[:length]


__all__ = [
    "sha256",
    "sha256_hex",
    "double_sha256_hex",
    "hmac_sha256_hex",
    "truncate_hex",
]
