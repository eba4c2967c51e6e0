"""Load the set of resources that the target release keeps."""

from __future__ import annotations

import logging
from pathlib import Path

from manifest_orphans.errors import TargetFileError
from manifest_orphans.models import ResourceIdentity, TargetSet
from manifest_orphans.utils.manifest_parser import truncate_group

logger = logging.getLogger(__name__)

TARGET_COLUMNS = ("group", "kind", "name", "namespace")


def parse_target_line(line: str) -> ResourceIdentity | None:
    """Parse one ``group kind name namespace`` line; blank lines give None."""
    fields = line.split()
    if not fields:
        return None
    if len(fields) != len(TARGET_COLUMNS):
        raise ValueError(
            "The target release file should have 4 columns: "
            f"group, kind, name, namespace. Found {line!r}"
        )
    group, kind, name, namespace = fields
    return ResourceIdentity(
        group=truncate_group(group),
        kind=kind,
        name=name,
        namespace=namespace,
    )


def load_target_resources(path: Path) -> TargetSet:
    """Read the target resource file into a frozen set of identities.

    The namespace column is taken verbatim, so cluster-scoped resources must
    be written with the ``<none>`` placeholder.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TargetFileError(f"Unable to read target release file {path}; err={e}") from e

    targets: set[ResourceIdentity] = set()
    for lineno, line in enumerate(text.splitlines(), start=1):
        try:
            identity = parse_target_line(line)
        except ValueError as e:
            raise TargetFileError(f"{path}:{lineno}: {e}") from e
        if identity is None:
            continue
        logger.debug("target %s", identity)
        targets.add(identity)
    return frozenset(targets)
