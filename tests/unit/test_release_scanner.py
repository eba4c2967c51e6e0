"""Tests for release directory listing and scanning."""

from __future__ import annotations

from pathlib import Path

import pytest

from manifest_orphans.core.release_scanner import list_release_dirs, scan_release
from manifest_orphans.errors import ManifestParseError, ReleaseReadError
from manifest_orphans.models import ResourceIdentity, ResourceProvenance
from manifest_orphans.models.release import ReleaseOrder
from tests.manifests import CLUSTERROLE_BAZ, CONFIGMAP_BAR, DEPLOYMENT_FOO, manifest

FOO = ResourceIdentity("apps", "Deployment", "foo", "ns1")
BAR = ResourceIdentity("v1", "ConfigMap", "bar", "ns1")
BAZ = ResourceIdentity("rbac.authorization.k8s.io", "ClusterRole", "baz", "<none>")


# ---------------------------------------------------------------------------
# scan_release
# ---------------------------------------------------------------------------


def test_scan_release_provenance(make_release) -> None:
    release_dir = make_release("4.12.3", {
        "app.yaml": manifest(DEPLOYMENT_FOO, CONFIGMAP_BAR),
        "rbac.yaml": CLUSTERROLE_BAZ,
    })

    scan = scan_release(release_dir)

    assert scan.label == "4.12"
    assert scan.name == "4.12.3"
    assert scan.files_read == 2
    assert scan.resources == {
        FOO: ResourceProvenance("4.12", "4.12", "app.yaml"),
        BAR: ResourceProvenance("4.12", "4.12", "app.yaml"),
        BAZ: ResourceProvenance("4.12", "4.12", "rbac.yaml"),
    }


def test_scan_release_ignores_other_extensions(make_release) -> None:
    release_dir = make_release("4.12.0", {
        "app.yaml": DEPLOYMENT_FOO,
        "notes.txt": CONFIGMAP_BAR,
        "extra.yml": CLUSTERROLE_BAZ,
    })
    (release_dir / "nested").mkdir()
    (release_dir / "nested" / "deep.yaml").write_text(CONFIGMAP_BAR, encoding="utf-8")

    scan = scan_release(release_dir)

    assert set(scan.resources) == {FOO}


def test_scan_release_custom_extension(make_release) -> None:
    release_dir = make_release("4.12.0", {"app.yaml": DEPLOYMENT_FOO, "extra.yml": CLUSTERROLE_BAZ})
    assert set(scan_release(release_dir, extension=".yml").resources) == {BAZ}


def test_scan_release_excludes_documents_without_kind(make_release) -> None:
    no_kind = CONFIGMAP_BAR.replace("kind: ConfigMap\n", "")
    release_dir = make_release("4.12.0", {"app.yaml": manifest(DEPLOYMENT_FOO, no_kind)})

    scan = scan_release(release_dir)

    assert set(scan.resources) == {FOO}


def test_scan_release_later_file_wins(make_release) -> None:
    release_dir = make_release("4.12.0", {"a.yaml": DEPLOYMENT_FOO, "b.yaml": DEPLOYMENT_FOO})
    assert scan_release(release_dir).resources[FOO].source_file == "b.yaml"


def test_scan_release_short_label(make_release) -> None:
    release_dir = make_release("4", {"app.yaml": DEPLOYMENT_FOO})
    assert scan_release(release_dir).resources[FOO].release == "4"


def test_scan_release_empty_dir(make_release) -> None:
    scan = scan_release(make_release("4.12.0"))
    assert scan.resources == {}
    assert scan.resource_count == 0


def test_scan_release_malformed_yaml(make_release) -> None:
    release_dir = make_release("4.12.0", {"bad.yaml": "kind: [ConfigMap\n"})
    with pytest.raises(ManifestParseError, match="bad.yaml"):
        scan_release(release_dir)


def test_scan_release_missing_dir(tmp_path: Path) -> None:
    with pytest.raises(ReleaseReadError, match="Unable to read dir"):
        scan_release(tmp_path / "4.12.0")


# ---------------------------------------------------------------------------
# list_release_dirs
# ---------------------------------------------------------------------------


def test_list_release_dirs_by_name(release_tree: Path, make_release) -> None:
    for name in ("4.9.0", "4.10.0", "4.11.0"):
        make_release(name)
    (release_tree / "delete-candidates.txt").write_text("", encoding="utf-8")

    dirs = list_release_dirs(release_tree)

    assert [d.name for d in dirs] == ["4.10.0", "4.11.0", "4.9.0"]


def test_list_release_dirs_by_version(release_tree: Path, make_release) -> None:
    for name in ("4.9.0", "4.10.0", "4.11.0"):
        make_release(name)

    dirs = list_release_dirs(release_tree, order=ReleaseOrder.VERSION)

    assert [d.name for d in dirs] == ["4.9.0", "4.10.0", "4.11.0"]


def test_list_release_dirs_skips_symlinks(release_tree: Path, make_release, tmp_path: Path) -> None:
    make_release("4.12.0")
    elsewhere = tmp_path / "4.13.0"
    elsewhere.mkdir()
    (release_tree / "4.13.0").symlink_to(elsewhere, target_is_directory=True)

    dirs = list_release_dirs(release_tree)

    assert [d.name for d in dirs] == ["4.12.0"]


def test_list_release_dirs_none_found(release_tree: Path) -> None:
    with pytest.raises(ReleaseReadError, match="No directories found"):
        list_release_dirs(release_tree)


def test_list_release_dirs_missing_top_dir(tmp_path: Path) -> None:
    with pytest.raises(ReleaseReadError):
        list_release_dirs(tmp_path / "nope")


def test_release_order_from_str() -> None:
    assert ReleaseOrder.from_str("version") is ReleaseOrder.VERSION
    with pytest.raises(ValueError):
        ReleaseOrder.from_str("date")
