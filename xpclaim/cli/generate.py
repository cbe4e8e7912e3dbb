"""
xpclaim.cli.generate
====================

Derive a nullifier for one XP award, exactly as the issuing endpoint does:
player secret from the master secret, then commitment, nullifier, storage key
and the public-input tuple.

  xpclaim generate 0x742d35Cc6634C0532925a3b844Bc9e7595ed6966 50 --season 1
  xpclaim generate <address> 50 --secret <64-hex player secret> --json

Exit code 2 on invalid address / xp / secret, with the error kind on stderr.
"""

from __future__ import annotations

from typing import Optional

import typer

from ..errors import ClaimError
from ..service import nullifier_service
from ._output import emit, resolve_master_secret


def main(
    address: str = typer.Argument(..., help="Player address (0x + 40 hex)"),
    xp: int = typer.Argument(..., help="XP amount, 1..1000"),
    season: int = typer.Option(1, "--season", "-s", help="Season number (0 means default 1)"),
    master_secret: Optional[str] = typer.Option(
        None, "--master-secret", help="Operator master secret (else XPCLAIM_MASTER_SECRET)"
    ),
    secret: Optional[str] = typer.Option(
        None, "--secret", help="Use this player secret instead of deriving one"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON"),
) -> None:
    """Generate a nullifier, commitment and proof inputs for an XP award."""
    player_secret = secret or nullifier_service.generate_player_secret(
        address, resolve_master_secret(master_secret)
    )
    try:
        result = nullifier_service.generate_nullifier(address, xp, season or 1, player_secret)
    except ClaimError as e:
        typer.echo(f"error: {e.kind}: {e.msg}", err=True)
        raise typer.Exit(2) from e

    proof_inputs = nullifier_service.generate_proof_inputs(result, address)
    storage_key = nullifier_service.create_storage_key(result.nullifier)
    payload = result.to_dict()
    payload["storageKey"] = storage_key
    payload["proofInputs"] = proof_inputs

    emit(
        "Claim Nullifier",
        {
            "nullifier": result.nullifier,
            "commitment": result.commitment,
            "storage_key": storage_key,
            "timestamp": result.components.timestamp,
            "nonce": result.components.nonce,
            "proof_inputs": proof_inputs,
        },
        as_json=as_json,
        payload=payload,
    )
