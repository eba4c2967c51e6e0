"""Color maps for orphan candidate output."""

from manifest_orphans.models import NO_NAMESPACE, ResourceProvenance


def styled_namespace(namespace: str) -> str:
    if namespace == NO_NAMESPACE:
        return "[dim]<none>[/dim]"
    return namespace


def styled_last_release(provenance: ResourceProvenance) -> str:
    """Highlight candidates that lingered past the release they appeared in."""
    if provenance.last_in_release == provenance.release:
        return provenance.last_in_release
    return f"[yellow]{provenance.last_in_release}[/yellow]"
