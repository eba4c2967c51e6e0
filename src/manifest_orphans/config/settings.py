"""Application configuration and defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path


def _env(name: str, default: str) -> str:
    return os.environ.get(name, "") or default


def _default_manifest_extension() -> str:
    """Return the manifest file extension, with a leading dot.

    MORPH_MANIFEST_EXTENSION may be given with or without the dot.
    """
    ext = _env("MORPH_MANIFEST_EXTENSION", ".yaml")
    if not ext.startswith("."):
        ext = "." + ext
    return ext


@dataclass
class Settings:
    manifest_extension: str = field(default_factory=_default_manifest_extension)
    results_file_name: str = field(
        default_factory=lambda: _env("MORPH_RESULTS_FILE_NAME", "delete-candidates.txt")
    )
    release_order: str = field(default_factory=lambda: _env("MORPH_RELEASE_ORDER", "name"))

    def default_results_file(self, top_dir: Path) -> Path:
        return top_dir / self.results_file_name


# Global singleton
settings = Settings()
