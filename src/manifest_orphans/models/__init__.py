"""Data models for manifest orphan detection."""

from __future__ import annotations

from dataclasses import dataclass, replace

NO_NAMESPACE = "<none>"


@dataclass(frozen=True)
class ResourceIdentity:
    group: str
    kind: str
    name: str
    namespace: str = NO_NAMESPACE


@dataclass(frozen=True)
class ResourceProvenance:
    release: str
    last_in_release: str
    source_file: str

    def seen_in(self, release: str) -> ResourceProvenance:
        """Return a copy with ``last_in_release`` moved to *release*."""
        return replace(self, last_in_release=release)


ReleaseResources = dict[ResourceIdentity, ResourceProvenance]
OrphanMap = dict[ResourceIdentity, ResourceProvenance]
TargetSet = frozenset[ResourceIdentity]
