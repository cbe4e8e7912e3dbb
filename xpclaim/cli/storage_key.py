"""xpclaim.cli.storage_key: print the claim-store key for a nullifier."""

from __future__ import annotations

import typer

from ..service import nullifier_service
from ._output import emit


def main(
    nullifier: str = typer.Argument(..., help="Nullifier (decimal string)"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON"),
) -> None:
    """First 16 hex chars of SHA-256(nullifier)."""
    key = nullifier_service.create_storage_key(nullifier)
    emit("Storage Key", {"nullifier": nullifier, "storageKey": key}, as_json=as_json)
