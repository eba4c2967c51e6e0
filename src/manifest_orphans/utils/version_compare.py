"""Release label helpers."""

from __future__ import annotations

from packaging.version import InvalidVersion, Version


def minor_release(release: str) -> str:
    """Truncate a release name to ``<major>.<minor>``.

    Names with fewer than two dot-separated parts are returned verbatim.
    """
    parts = release.split(".")
    if len(parts) < 2:
        return release
    return f"{parts[0]}.{parts[1]}"


def release_number(label: str) -> tuple[int, ...] | None:
    """Parse a minor-release label into numeric components, None on failure.

    ``"4.12"`` -> ``(4, 12)``, so 4.9 sorts before 4.11.
    """
    try:
        return tuple(int(part) for part in label.split("."))
    except ValueError:
        return None


def is_later_release(current: str, candidate: str) -> bool:
    """Return True if candidate is a numerically later release than current.

    Labels that do not parse as numbers never compare as later.
    """
    cur = release_number(current)
    cand = release_number(candidate)
    if cur is None or cand is None:
        return False
    return cand > cur


def parse_version(v: str) -> Version | None:
    """Parse a release directory name, returning None on failure."""
    try:
        return Version(v)
    except InvalidVersion:
        # Try stripping leading 'v'
        if v.startswith("v"):
            try:
                return Version(v[1:])
            except InvalidVersion:
                pass
    return None


def release_sort_key(name: str) -> tuple:
    """Sort key ordering release names by version, unparseable names last."""
    version = parse_version(name)
    if version is None:
        return (1, Version("0"), name)
    return (0, version, name)
