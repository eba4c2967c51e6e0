"""Shared fixtures: build release trees and target files under tmp_path."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def release_tree(tmp_path: Path) -> Path:
    top = tmp_path / "releases"
    top.mkdir()
    return top


@pytest.fixture
def make_release(release_tree: Path) -> Callable[..., Path]:
    """Create ``<release_tree>/<name>/`` holding the given manifest files."""

    def _make(name: str, files: dict[str, str] | None = None) -> Path:
        release_dir = release_tree / name
        release_dir.mkdir()
        for filename, content in (files or {}).items():
            (release_dir / filename).write_text(content, encoding="utf-8")
        return release_dir

    return _make


@pytest.fixture
def make_target(tmp_path: Path) -> Callable[..., Path]:
    def _make(*lines: str) -> Path:
        path = tmp_path / "target.txt"
        path.write_text("".join(line + "\n" for line in lines), encoding="utf-8")
        return path

    return _make
