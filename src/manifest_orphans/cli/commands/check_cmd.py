"""morph check <target file> <top-level dir> - Find delete candidates."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from manifest_orphans.cli.options import OrderOption, OutputOption, VerboseOption
from manifest_orphans.config.logging import setup_logging
from manifest_orphans.config.settings import settings
from manifest_orphans.core.reconciler import OrphanReconciler
from manifest_orphans.core.release_scanner import list_release_dirs, scan_release
from manifest_orphans.core.target_loader import load_target_resources
from manifest_orphans.errors import OrphanCheckError
from manifest_orphans.models.release import ReleaseOrder
from manifest_orphans.output.formatters import check_output_format, output_orphans
from manifest_orphans.output.report import write_report

app = typer.Typer()
console = Console()


@app.callback(invoke_without_command=True)
def check(
    target_file: Path = typer.Argument(help="Target release file: group kind name namespace per line"),
    top_dir: Path = typer.Argument(help="Directory holding one sub-directory per release"),
    output_file: Optional[Path] = typer.Option(
        None, "--output-file", "-o", help="Results file (default: <top-level dir>/delete-candidates.txt)",
    ),
    output: str = OutputOption,
    order: Optional[str] = OrderOption,
    verbose: bool = VerboseOption,
) -> None:
    """List resources found in release directories but missing from the target release."""
    setup_logging(verbose)

    try:
        release_order = ReleaseOrder.from_str(order or settings.release_order)
        check_output_format(output)
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    results_file = output_file or settings.default_results_file(top_dir)

    try:
        targets = load_target_resources(target_file)
        release_dirs = list_release_dirs(top_dir, order=release_order)

        console.print("Checking...")
        reconciler = OrphanReconciler(targets)
        for release_dir in release_dirs:
            scan = scan_release(release_dir)
            added = reconciler.add_release(scan.resources)
            console.print(
                f"{scan.name}: {scan.resource_count} resources checked in {scan.files_read} files, "
                f"{added} new candidates",
                highlight=False,
            )

        write_report(reconciler.orphans, results_file)
    except OrphanCheckError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    output_orphans(reconciler.orphans, output)
    console.print(f"Results file {results_file} created", highlight=False)
