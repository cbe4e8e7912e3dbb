"""
xpclaim.cli.verify_format

  xpclaim verify-format 12345678901234567890      -> valid, exit 0
  xpclaim verify-format 0                         -> invalid, exit 1
"""

from __future__ import annotations

import typer

from ..service import nullifier_service
from ._output import emit


def main(
    nullifier: str = typer.Argument(..., help="Nullifier as a decimal (or 0x) integer"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON"),
) -> None:
    """Check that a nullifier is an integer with 0 < n < p."""
    ok = nullifier_service.verify_nullifier_format(nullifier)
    emit("Nullifier Format", {"nullifier": nullifier, "valid": ok}, as_json=as_json)
    if not ok:
        raise typer.Exit(1)
