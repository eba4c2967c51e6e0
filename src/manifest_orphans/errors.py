"""Fatal input errors raised by the orphan check."""

from __future__ import annotations


class OrphanCheckError(Exception):
    """Base class for errors that abort a whole check run."""


class TargetFileError(OrphanCheckError):
    """The target resource file is unreadable or malformed."""


class ReleaseReadError(OrphanCheckError):
    """A release directory or one of its manifest files could not be read."""


class ManifestParseError(OrphanCheckError):
    """A manifest file contains a structurally invalid YAML document."""


class ReportWriteError(OrphanCheckError):
    """The results file could not be created or written."""
