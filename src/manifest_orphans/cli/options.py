"""Shared CLI options."""

from __future__ import annotations

import typer

OutputOption = typer.Option(
    "table", "--format", "-f", help="Console output format: table, json, yaml, none",
)
VerboseOption = typer.Option(False, "--verbose", "-v", help="Verbose logging")
OrderOption = typer.Option(
    None, "--order", help="Release directory order: name (default) or version",
)
