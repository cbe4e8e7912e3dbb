"""
Common helpers for the xpclaim test-suite.

Registers Hypothesis profiles on import:
  HYPOTHESIS_PROFILE=dev|ci|fast   (default: "ci" when CI is set, else "dev")

Known-answer vector
-------------------
KAT_* values were computed independently of this package (sha256sum /
openssl / bignum mod p) for:

    address    0x742d35Cc6634C0532925a3b844Bc9e7595ed6966
    xp, season 50, 1
    timestamp  1700000000000
    nonce      00112233445566778899aabbccddeeff
    master     master-secret-key-for-testing-0123456789
"""

from __future__ import annotations

import os

from hypothesis import HealthCheck, settings

settings.register_profile(
    "dev",
    settings(max_examples=100, deadline=None, suppress_health_check=(HealthCheck.too_slow,)),
)
settings.register_profile(
    "ci",
    settings(
        max_examples=300,
        deadline=None,
        derandomize=True,
        suppress_health_check=(HealthCheck.too_slow,),
    ),
)
settings.register_profile("fast", settings(max_examples=25, deadline=None))


def _env_truthy(name: str) -> bool:
    return (os.getenv(name) or "").lower() not in ("", "0", "false", "no", "off")


settings.load_profile(os.getenv("HYPOTHESIS_PROFILE") or ("ci" if _env_truthy("CI") else "dev"))


KAT_ADDRESS = "0x742d35Cc6634C0532925a3b844Bc9e7595ed6966"
KAT_ADDRESS_DECIMAL = "663251149454111653834953623422353308285253020006"
KAT_MASTER_SECRET = "master-secret-key-for-testing-0123456789"
KAT_TIMESTAMP = 1700000000000
KAT_NONCE = "00112233445566778899aabbccddeeff"

KAT_PLAYER_SECRET = "467835529aeafc32776de4f66ff05220bb89ab50efb355e3417c28b7b92c0f45"
KAT_COMMITMENT = "e4e2c104d4f467a1ff2114210874f6afbcf8bd601d4827fcc50df52d443b503c"
KAT_NULLIFIER_HASH = "be6034d7d8f56436f57e0863c23f7b02383b9925632a0f2a452c77e0e2139161"
KAT_NULLIFIER = "20444694643568482759868522089420313342740268924660565814953681273345761579358"
KAT_STORAGE_KEY = "43e261fbb8879512"

# Same preimage, but hashed as decoded digest bytes / hashed only once.
# Neither may ever match what the package produces.
KAT_BINARY_CONCAT_HASH = "445a8676a1601a126c21381d71610cdde868136f367f4ac38733eb68eff94c5d"
KAT_SINGLE_HASH = "94ec8c90cbf8c342fb592c8ae641cdae62eb962b5c6cc035bf71ad55e076e458"

P_MINUS_1 = "21888242871839275222246405745257275088548364400416034343698204186575808495616"
