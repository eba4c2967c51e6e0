"""Fold scanned releases into the map of orphaned resources."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from manifest_orphans.models import OrphanMap, ReleaseResources, TargetSet
from manifest_orphans.utils.version_compare import is_later_release

logger = logging.getLogger(__name__)


def reconcile(scanned: ReleaseResources, orphans: OrphanMap, targets: TargetSet) -> OrphanMap:
    """Merge one release's resources into *orphans* and return it.

    A resource enters the map the first time it is seen outside the target
    set and is never re-checked against the targets afterwards. For
    resources already in the map only ``last_in_release`` moves, and only
    forward.
    """
    for identity, provenance in scanned.items():
        current = orphans.get(identity)
        if current is None:
            if identity not in targets:
                orphans[identity] = provenance
            continue

        if is_later_release(current.last_in_release, provenance.last_in_release):
            orphans[identity] = current.seen_in(provenance.last_in_release)
        else:
            logger.debug(
                "Keeping last release %s for %s (saw %s)",
                current.last_in_release, identity, provenance.last_in_release,
            )
    return orphans


def find_orphans(releases: Iterable[ReleaseResources], targets: TargetSet) -> OrphanMap:
    """Reconcile releases in the given order, starting from an empty map."""
    orphans: OrphanMap = {}
    for scanned in releases:
        reconcile(scanned, orphans, targets)
    return orphans


class OrphanReconciler:
    """Accumulates orphan candidates release by release."""

    def __init__(self, targets: TargetSet):
        self.targets = targets
        self.orphans: OrphanMap = {}

    def add_release(self, scanned: ReleaseResources) -> int:
        """Reconcile one release; returns the number of new orphan candidates."""
        before = len(self.orphans)
        reconcile(scanned, self.orphans, self.targets)
        return len(self.orphans) - before
