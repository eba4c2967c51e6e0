"""Release snapshot models."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path

from manifest_orphans.models import ReleaseResources


class ReleaseOrder(enum.Enum):
    NAME = "name"
    VERSION = "version"

    @classmethod
    def from_str(cls, s: str) -> ReleaseOrder:
        for member in cls:
            if member.value == s:
                return member
        raise ValueError(f"Unknown release order {s!r}; expected one of: name, version")


@dataclass
class ReleaseScan:
    """Resources found in one release directory."""

    path: Path
    label: str
    resources: ReleaseResources = field(default_factory=dict)
    files_read: int = 0

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def resource_count(self) -> int:
        return len(self.resources)
