"""Rich table builders for orphan check output."""

from __future__ import annotations

from rich.table import Table

from manifest_orphans.models import OrphanMap
from manifest_orphans.output.themes import styled_last_release, styled_namespace


def sorted_orphans(orphans: OrphanMap) -> list:
    return sorted(
        orphans.items(),
        key=lambda item: (item[0].namespace, item[0].group, item[0].kind, item[0].name),
    )


def orphan_table(orphans: OrphanMap) -> Table:
    table = Table(title="Delete Candidates", expand=True)
    table.add_column("Group", style="magenta", no_wrap=True)
    table.add_column("Kind", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold white")
    table.add_column("Namespace", style="blue", no_wrap=True)
    table.add_column("Release", justify="right")
    table.add_column("Last In", justify="right")
    table.add_column("File", style="dim")

    for identity, provenance in sorted_orphans(orphans):
        table.add_row(
            identity.group,
            identity.kind,
            identity.name,
            styled_namespace(identity.namespace),
            provenance.release,
            styled_last_release(provenance),
            provenance.source_file,
        )
    return table

