"""
xpclaim.cli.validate_inputs
===========================

Re-validate a public-input tuple before it is forwarded to proof
verification. Inputs are given either as four positional values or as one
JSON array (`--from-json '["1", "50", "...", "1"]'`, or `-` for stdin).

Exit code 0 when valid, 1 otherwise. The result is printed in both cases.
"""

from __future__ import annotations

import json
import sys
from typing import Any, List, Optional

import typer

from ..service import nullifier_service
from ._output import emit


def _load_inputs(values: Optional[List[str]], from_json: Optional[str]) -> Any:
    if from_json is not None:
        raw = sys.stdin.read() if from_json == "-" else from_json
        try:
            return json.loads(raw)
        except ValueError as e:
            # JSONDecodeError, or an integer literal past the int conversion limit
            raise typer.BadParameter(f"--from-json is not valid JSON: {e}") from e
    return list(values or [])


def main(
    values: Optional[List[str]] = typer.Argument(
        None, help="nullifier xp address-as-decimal season"
    ),
    from_json: Optional[str] = typer.Option(
        None, "--from-json", help="JSON array of public inputs, or '-' for stdin"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON"),
) -> None:
    """Validate [nullifier, xp, address, season] the way the verify route does."""
    result = nullifier_service.validate_proof_inputs(_load_inputs(values, from_json))
    rows = {"valid": result.valid}
    if result.valid and result.parsed is not None:
        rows.update(result.parsed.to_dict())
    else:
        rows["error"] = result.error
        if result.detail:
            rows["detail"] = result.detail
    emit("Public Inputs", rows, as_json=as_json, payload=result.to_dict())
    if not result.valid:
        raise typer.Exit(1)
