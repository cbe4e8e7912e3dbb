"""
xpclaim.cli
-----------
Command-line entrypoints for operators and integration tests:

- generate         : derive a nullifier (+ commitment, proof inputs) for an award
- verify-format    : check a nullifier is a non-zero BN254 field element
- validate-inputs  : re-validate a public-input tuple the way the verifier route does
- secret           : derive a player secret (prints the secret; handle with care)
- storage-key      : derive the claim-store key for a nullifier

Each command module exports `main` (single command). A command whose module
(or one of its dependencies) is missing is skipped, so `--help` still works;
any other import error is raised.

Usage:
  python -m xpclaim.cli --help
  xpclaim generate 0xAbC... 50 --season 2
"""

from __future__ import annotations

import importlib
from types import ModuleType
from typing import Optional

import typer

from ..version import __version__, runtime_banner

__all__ = ["build_app", "main", "__version__"]

_COMMANDS = (
    ("xpclaim.cli.generate", "generate"),
    ("xpclaim.cli.verify_format", "verify-format"),
    ("xpclaim.cli.validate_inputs", "validate-inputs"),
    ("xpclaim.cli.secret", "secret"),
    ("xpclaim.cli.storage_key", "storage-key"),
)


def _load_module(mod_name: str) -> Optional[ModuleType]:
    try:
        return importlib.import_module(mod_name)
    except ModuleNotFoundError:
        return None
    except Exception as e:
        raise RuntimeError(f"Failed loading CLI module '{mod_name}': {e}") from e


def _attach_command(app: typer.Typer, mod_name: str, name: str) -> None:
    mod = _load_module(mod_name)
    if mod is None:
        return
    main_fn = getattr(mod, "main", None)
    if not callable(main_fn):
        raise RuntimeError(f"CLI module '{mod_name}' has no main()")
    app.command(name=name)(main_fn)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(runtime_banner())
        raise typer.Exit(0)


def build_app() -> typer.Typer:
    app = typer.Typer(
        name="xpclaim",
        help="XP claim nullifier tools: generate, validate, derive keys",
        no_args_is_help=True,
        add_completion=False,
    )

    @app.callback()
    def _meta(
        version: bool = typer.Option(
            False,
            "--version",
            "-V",
            help="Print version and exit",
            is_eager=True,
            callback=_print_version,
        ),
        log_level: Optional[str] = typer.Option(
            None, "--log-level", help="Log level (default: XPCLAIM_LOG_LEVEL or INFO)"
        ),
    ) -> None:
        from ..config import get_settings
        from ..logging import configure

        settings = get_settings()
        configure(json=settings.log_json(), level=log_level or settings.log_level)

    for mod_name, name in _COMMANDS:
        _attach_command(app, mod_name, name)
    return app


def main() -> int:
    """Entrypoint for the `xpclaim` console script."""
    build_app()()
    return 0
