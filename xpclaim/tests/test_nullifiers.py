"""
Nullifier generation and format checks.

The known-answer tests pin two compatibility details that must not be
"fixed": the preimage is commitment + secret as *text*, and the hash is SHA-256
applied twice (the second pass over the raw first digest).
"""

from __future__ import annotations

import re
import time
from unittest.mock import patch

import pytest
from hypothesis import given
from hypothesis import strategies as st

from xpclaim import nullifiers as nul
from xpclaim.errors import (
    ErrorKind,
    InvalidAddressError,
    InvalidSecretError,
    InvalidSeasonError,
    InvalidXPAmountError,
    NullifierDerivationError,
)
from xpclaim.field import FIELD_MODULUS
from xpclaim.player_secret import generate_player_secret
from xpclaim.public_inputs import generate_proof_inputs, validate_proof_inputs

from . import (
    KAT_ADDRESS,
    KAT_BINARY_CONCAT_HASH,
    KAT_COMMITMENT,
    KAT_MASTER_SECRET,
    KAT_NONCE,
    KAT_NULLIFIER,
    KAT_NULLIFIER_HASH,
    KAT_PLAYER_SECRET,
    KAT_SINGLE_HASH,
    KAT_TIMESTAMP,
    P_MINUS_1,
)

# ---------------------------------------------------------------------------
# generate_nullifier
# ---------------------------------------------------------------------------


def test_known_answer_end_to_end() -> None:
    secret = generate_player_secret(KAT_ADDRESS, KAT_MASTER_SECRET)
    res = nul.generate_nullifier(
        KAT_ADDRESS, 50, 1, secret, clock=lambda: KAT_TIMESTAMP, nonce_source=lambda: KAT_NONCE
    )
    assert res.commitment == KAT_COMMITMENT
    assert res.nullifier_hash == KAT_NULLIFIER_HASH
    assert res.nullifier == KAT_NULLIFIER
    assert res.components.address == KAT_ADDRESS[2:].lower()
    assert res.components.timestamp == str(KAT_TIMESTAMP)


def test_preimage_is_text_concatenation() -> None:
    raw = nul.derive_nullifier_hash(KAT_COMMITMENT, KAT_PLAYER_SECRET)
    assert raw == KAT_NULLIFIER_HASH
    assert raw != KAT_BINARY_CONCAT_HASH
    assert raw != KAT_SINGLE_HASH


def test_derive_nullifier_returns_decimal_and_raw() -> None:
    n, raw = nul.derive_nullifier(KAT_COMMITMENT, KAT_PLAYER_SECRET)
    assert (n, raw) == (KAT_NULLIFIER, KAT_NULLIFIER_HASH)
    # raw digest exceeds p here; only the reduced value is a legal public input
    assert int(raw, 16) >= FIELD_MODULUS
    assert not nul.verify_nullifier_format(str(int(raw, 16)))


def test_result_shape(address: str, player_secret: str) -> None:
    res = nul.generate_nullifier(address, 50, 1, player_secret)
    assert 0 < int(res.nullifier) < FIELD_MODULUS
    assert re.fullmatch(r"[0-9a-f]{64}", res.commitment)
    assert re.fullmatch(r"[0-9a-f]{64}", res.nullifier_hash)
    assert res.components.xp == "50"
    assert res.components.season == "1"
    assert re.fullmatch(r"[0-9a-f]{32}", res.components.nonce)
    d = res.to_dict()
    assert set(d) == {"nullifier", "commitment", "components", "nullifierHash"}


def test_two_generations_differ(address: str, player_secret: str) -> None:
    a = nul.generate_nullifier(address, 50, 1, player_secret)
    time.sleep(0.01)
    b = nul.generate_nullifier(address, 50, 1, player_secret)
    assert a.nullifier != b.nullifier
    assert a.commitment != b.commitment


def test_same_clock_different_nonce_differ(address: str, player_secret: str) -> None:
    a = nul.generate_nullifier(address, 50, 1, player_secret, clock=lambda: 1)
    b = nul.generate_nullifier(address, 50, 1, player_secret, clock=lambda: 1)
    assert a.nullifier != b.nullifier


def test_secret_binds_nullifier(address: str) -> None:
    kw = dict(clock=lambda: KAT_TIMESTAMP, nonce_source=lambda: KAT_NONCE)
    a = nul.generate_nullifier(address, 50, 1, "a" * 64, **kw)
    b = nul.generate_nullifier(address, 50, 1, "b" * 64, **kw)
    assert a.commitment == b.commitment
    assert a.nullifier != b.nullifier


@pytest.mark.parametrize(
    "args,exc,kind",
    [
        (("invalid-address", 50, 1, "s" * 64), InvalidAddressError, ErrorKind.INVALID_ADDRESS),
        ((KAT_ADDRESS, 0, 1, "s" * 64), InvalidXPAmountError, ErrorKind.INVALID_XP_AMOUNT),
        ((KAT_ADDRESS, 1001, 1, "s" * 64), InvalidXPAmountError, ErrorKind.INVALID_XP_AMOUNT),
        ((KAT_ADDRESS, 50, 1, "short-secret"), InvalidSecretError, ErrorKind.INVALID_SECRET),
        ((KAT_ADDRESS, 50, 1, ""), InvalidSecretError, ErrorKind.INVALID_SECRET),
        ((KAT_ADDRESS, 50, 1, None), InvalidSecretError, ErrorKind.INVALID_SECRET),
        ((KAT_ADDRESS, 50, 1, "s" * 31), InvalidSecretError, ErrorKind.INVALID_SECRET),
    ],
)
def test_generation_errors(args, exc, kind) -> None:
    with pytest.raises(exc) as ei:
        nul.generate_nullifier(*args)
    assert ei.value.code == kind


@pytest.mark.parametrize("season", [0, -3, None, "abc", "1", True, 2.0, FIELD_MODULUS])
def test_invalid_season_rejected(season) -> None:
    with pytest.raises(InvalidSeasonError) as ei:
        nul.generate_nullifier(KAT_ADDRESS, 50, season, "s" * 64)
    assert ei.value.code == ErrorKind.INVALID_SEASON


def test_emitted_season_always_validates(player_secret: str) -> None:
    for season in (1, 7, FIELD_MODULUS - 1):
        res = nul.generate_nullifier(KAT_ADDRESS, 50, season, player_secret)
        assert res.components.season == str(season)
        assert validate_proof_inputs(generate_proof_inputs(res, KAT_ADDRESS)).valid


def test_validation_order_address_xp_season_secret() -> None:
    with pytest.raises(InvalidAddressError):
        nul.generate_nullifier("bad", 0, 0, "")
    with pytest.raises(InvalidXPAmountError):
        nul.generate_nullifier(KAT_ADDRESS, 0, 0, "")
    with pytest.raises(InvalidSeasonError):
        nul.generate_nullifier(KAT_ADDRESS, 50, 0, "")


def test_secret_length_32_is_enough(address: str) -> None:
    res = nul.generate_nullifier(address, 1, 1, "s" * nul.MIN_SECRET_LENGTH)
    assert nul.verify_nullifier_format(res.nullifier)


def test_secret_not_leaked_in_error() -> None:
    secret = "leak-me-please"
    with pytest.raises(InvalidSecretError) as ei:
        nul.generate_nullifier(KAT_ADDRESS, 50, 1, secret)
    assert secret not in str(ei.value)
    assert ei.value.ctx == {"length": len(secret)}


def test_zero_residue_is_refused(address: str, player_secret: str) -> None:
    with patch.object(nul, "placeholder_field_hash", return_value=format(FIELD_MODULUS, "064x")):
        with pytest.raises(NullifierDerivationError):
            nul.generate_nullifier(address, 50, 1, player_secret)


@given(
    raw=st.binary(min_size=20, max_size=20),
    xp=st.integers(min_value=1, max_value=1000),
    season=st.integers(min_value=1, max_value=10_000),
    secret=st.text(alphabet="0123456789abcdef", min_size=32, max_size=80),
)
def test_nullifier_always_in_field(raw: bytes, xp: int, season: int, secret: str) -> None:
    res = nul.generate_nullifier("0x" + raw.hex(), xp, season, secret)
    assert 0 < int(res.nullifier) < FIELD_MODULUS
    assert nul.verify_nullifier_format(res.nullifier)


# ---------------------------------------------------------------------------
# verify_nullifier_format
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "value",
    ["1", "12345678901234567890", P_MINUS_1, KAT_NULLIFIER, " 42 ", "0x2a", 42, FIELD_MODULUS - 1, 7.0],
)
def test_format_accepts(value) -> None:
    assert nul.verify_nullifier_format(value) is True


@pytest.mark.parametrize(
    "value",
    [
        "0",
        "",
        str(FIELD_MODULUS),
        str(FIELD_MODULUS + 1),
        "-5",
        "not-a-number",
        "1.5",
        "1e3",
        "1_000",
        "0x",
        None,
        True,
        0,
        -1,
        1.5,
        float("nan"),
        [],
        {},
    ],
)
def test_format_rejects(value) -> None:
    assert nul.verify_nullifier_format(value) is False


def test_format_rejects_very_long_integers() -> None:
    assert nul.verify_nullifier_format("9" * 5000) is False
    assert nul.verify_nullifier_format(10**5000) is False
    assert nul.verify_nullifier_format("0" * 5000 + KAT_NULLIFIER) is True
