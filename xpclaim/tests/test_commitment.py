from __future__ import annotations

import re

from xpclaim.commitment import (
    COMPONENT_ORDER,
    build_components,
    compute_commitment,
    hash_components,
    now_ms,
    random_nonce,
)
from xpclaim.types import ClaimComponents

from . import KAT_COMMITMENT, KAT_NONCE, KAT_TIMESTAMP

NORMALIZED = {"address": "742d35cc6634c0532925a3b844bc9e7595ed6966", "xp": "50", "season": "1"}


def test_known_commitment() -> None:
    comps = build_components(NORMALIZED, clock=lambda: KAT_TIMESTAMP, nonce_source=lambda: KAT_NONCE)
    assert comps == ClaimComponents(
        address=NORMALIZED["address"], xp="50", season="1", timestamp="1700000000000", nonce=KAT_NONCE
    )
    assert compute_commitment(comps) == KAT_COMMITMENT


def test_field_order_matters() -> None:
    comps = build_components(NORMALIZED, clock=lambda: KAT_TIMESTAMP, nonce_source=lambda: KAT_NONCE)
    assert tuple(comps.to_dict()) == COMPONENT_ORDER
    swapped = hash_components([comps.xp, comps.address, comps.season, comps.timestamp, comps.nonce])
    assert swapped != compute_commitment(comps)


def test_commitment_is_64_hex() -> None:
    comps = build_components(NORMALIZED)
    assert re.fullmatch(r"[0-9a-f]{64}", compute_commitment(comps))


def test_freshness_salt_changes_commitment() -> None:
    a = build_components(NORMALIZED, clock=lambda: 1, nonce_source=lambda: KAT_NONCE)
    b = build_components(NORMALIZED, clock=lambda: 2, nonce_source=lambda: KAT_NONCE)
    c = build_components(NORMALIZED, clock=lambda: 1, nonce_source=lambda: "ff" * 16)
    assert len({compute_commitment(a), compute_commitment(b), compute_commitment(c)}) == 3


def test_nonce_and_clock_defaults() -> None:
    n = random_nonce()
    assert re.fullmatch(r"[0-9a-f]{32}", n)
    assert n != random_nonce()
    assert now_ms() > 1_600_000_000_000
