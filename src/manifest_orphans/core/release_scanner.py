"""Collect the resources declared by each release directory."""

from __future__ import annotations

import logging
from pathlib import Path

from manifest_orphans.config.settings import settings
from manifest_orphans.errors import ReleaseReadError
from manifest_orphans.models import ReleaseResources, ResourceProvenance
from manifest_orphans.models.release import ReleaseOrder, ReleaseScan
from manifest_orphans.utils.manifest_parser import parse_identities
from manifest_orphans.utils.version_compare import minor_release, release_sort_key

logger = logging.getLogger(__name__)


def _list_dir(path: Path) -> list[Path]:
    try:
        return sorted(path.iterdir(), key=lambda p: p.name)
    except OSError as e:
        raise ReleaseReadError(f"Unable to read dir {path}; err={e}") from e


def list_release_dirs(top_dir: Path, order: ReleaseOrder = ReleaseOrder.NAME) -> list[Path]:
    """Return the release directories directly under *top_dir*, in processing order."""
    # Symlinked directories are not releases
    dirs = [p for p in _list_dir(top_dir) if p.is_dir() and not p.is_symlink()]
    if not dirs:
        raise ReleaseReadError(f"No directories found under {top_dir}")

    if order == ReleaseOrder.VERSION:
        dirs.sort(key=lambda p: release_sort_key(p.name))
    return dirs


def scan_release(release_dir: Path, extension: str | None = None) -> ReleaseScan:
    """Read every manifest file in one release directory.

    When two files in the same release declare the same resource, the file
    read last wins.
    """
    extension = extension or settings.manifest_extension
    label = minor_release(release_dir.name)
    scan = ReleaseScan(path=release_dir, label=label)
    resources: ReleaseResources = scan.resources

    for entry in _list_dir(release_dir):
        if not entry.name.endswith(extension) or entry.is_dir():
            continue
        try:
            data = entry.read_bytes()
        except OSError as e:
            raise ReleaseReadError(f"Unable to read file {entry}; err={e}") from e

        provenance = ResourceProvenance(
            release=label,
            last_in_release=label,
            source_file=entry.name,
        )
        logger.debug("%s", provenance)
        for identity in parse_identities(data, source=str(entry)):
            resources[identity] = provenance
        scan.files_read += 1

    return scan
