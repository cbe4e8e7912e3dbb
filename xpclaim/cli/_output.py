"""Shared rendering for CLI commands: JSON for machines, a Rich panel for people."""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional

import typer
from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from ..config import get_settings
from ..errors import ConfigError


def emit(title: str, rows: Mapping[str, Any], *, as_json: bool, payload: Optional[Any] = None) -> None:
    if as_json:
        typer.echo(json.dumps(payload if payload is not None else dict(rows), indent=2))
        return
    t = Table(box=box.SIMPLE, show_header=True)
    t.add_column("Field")
    t.add_column("Value", overflow="fold")
    for k, v in rows.items():
        t.add_row(k, v if isinstance(v, str) else json.dumps(v))
    Console().print(Panel(t, title=title, expand=False))


def resolve_master_secret(cli_value: Optional[str]) -> str:
    """--master-secret wins over XPCLAIM_MASTER_SECRET."""
    if cli_value:
        return cli_value
    try:
        return get_settings().require_master_secret()
    except ConfigError as e:
        raise typer.BadParameter(f"{e.msg} (use --master-secret or XPCLAIM_MASTER_SECRET)") from e
