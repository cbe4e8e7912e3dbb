"""
Version for the xpclaim package.

Overridable at build time with XPCLAIM_VERSION. runtime_banner() is the short
line the CLI prints with --version.
"""

from __future__ import annotations

import os
import platform

__version__ = os.getenv("XPCLAIM_VERSION", "0.1.0")

# Bumped whenever commitment/nullifier derivation changes in a way that alters
# outputs for the same inputs. Stored alongside commitments by the claim store.
DERIVATION_VERSION = "sha256x2-v1"


def runtime_banner(prefix: str = "xpclaim") -> str:
    return f"{prefix} {__version__} derivation={DERIVATION_VERSION} python={platform.python_version()}"


__all__ = ["__version__", "DERIVATION_VERSION", "runtime_banner"]
