"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console

from manifest_orphans.models import OrphanMap
from manifest_orphans.output.tables import orphan_table, sorted_orphans

console = Console()

OUTPUT_FORMATS = ("table", "json", "yaml", "none")


def check_output_format(fmt: str) -> str:
    if fmt not in OUTPUT_FORMATS:
        raise ValueError(f"Unknown output format {fmt!r}; expected one of: {', '.join(OUTPUT_FORMATS)}")
    return fmt


def _orphans_to_list(orphans: OrphanMap) -> list[dict[str, Any]]:
    return [
        {
            "group": identity.group,
            "kind": identity.kind,
            "name": identity.name,
            "namespace": identity.namespace,
            "release": provenance.release,
            "last_in_release": provenance.last_in_release,
            "source_file": provenance.source_file,
        }
        for identity, provenance in sorted_orphans(orphans)
    ]


def output_orphans(orphans: OrphanMap, fmt: str) -> None:
    if fmt == "none":
        return
    if fmt == "json":
        console.print_json(json.dumps(_orphans_to_list(orphans), indent=2))
    elif fmt == "yaml":
        console.print(yaml.dump(_orphans_to_list(orphans), default_flow_style=False, sort_keys=False))
    else:
        console.print(orphan_table(orphans))
