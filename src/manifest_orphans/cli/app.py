"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import typer

app = typer.Typer(
    name="morph",
    help="Manifest Orphans - Find release manifests the target release no longer declares.",
    no_args_is_help=True,
)


def _register_commands() -> None:
    from manifest_orphans.cli.commands.check_cmd import app as check_app

    app.add_typer(check_app, name="check", help="Check release directories for orphaned resources")


_register_commands()


def main() -> None:
    app()
