"""Write the tab-separated delete-candidates report."""

from __future__ import annotations

from pathlib import Path

from manifest_orphans.errors import ReportWriteError
from manifest_orphans.models import OrphanMap, ResourceIdentity, ResourceProvenance


def format_report_line(identity: ResourceIdentity, provenance: ResourceProvenance) -> str:
    fields = (
        identity.group,
        identity.kind,
        identity.name,
        identity.namespace,
        provenance.release,
        provenance.last_in_release,
        provenance.source_file,
    )
    return "\t".join(fields) + "\n"


def write_report(orphans: OrphanMap, path: Path) -> None:
    """Create *path* and write one line per orphan candidate."""
    try:
        f = path.open("w", encoding="utf-8")
    except OSError as e:
        raise ReportWriteError(f"Unable to create file {path}; err={e}") from e
    with f:
        for identity, provenance in orphans.items():
            try:
                f.write(format_report_line(identity, provenance))
            except OSError as e:
                raise ReportWriteError(f"Unable to write to file {path}; err={e}") from e
