"""
xpclaim.utils

Small helper modules shared across the package. Submodules are not imported
here; import them directly:

    from xpclaim.utils.hash import sha256_hex, hmac_sha256_hex
    from xpclaim.utils.parse import parse_big_int
"""

__all__ = ["hash", "parse"]
