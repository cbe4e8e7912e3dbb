"""
xpclaim.cli.secret

Derive the per-player secret for an address. The output is sensitive: anyone
holding it can forge nullifiers for that player.
"""

from __future__ import annotations

from typing import Optional

import typer

from ..service import nullifier_service
from ._output import emit, resolve_master_secret


def main(
    address: str = typer.Argument(..., help="Player address"),
    master_secret: Optional[str] = typer.Option(
        None, "--master-secret", help="Operator master secret (else XPCLAIM_MASTER_SECRET)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON"),
) -> None:
    """Print HMAC-SHA256(master secret, lowercase address)."""
    value = nullifier_service.generate_player_secret(address, resolve_master_secret(master_secret))
    emit("Player Secret", {"address": address.lower(), "secret": value}, as_json=as_json)
