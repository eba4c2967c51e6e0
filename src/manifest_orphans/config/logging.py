"""Logging configuration for the command-line interface."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(verbose: bool = False) -> None:
    """Route ``manifest_orphans`` logging to stderr through Rich.

    Verbose mode shows the per-document diagnostics (skipped documents,
    unparseable release labels) at DEBUG level.
    """
    level = logging.DEBUG if verbose else logging.WARNING
    handler = RichHandler(
        console=Console(stderr=True),
        show_time=False,
        show_path=verbose,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger("manifest_orphans")
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
    root.propagate = False
