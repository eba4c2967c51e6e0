"""Split multi-document YAML manifests and extract resource identities."""

from __future__ import annotations

import logging
from typing import Any

import yaml

from manifest_orphans.errors import ManifestParseError
from manifest_orphans.models import NO_NAMESPACE, ResourceIdentity

logger = logging.getLogger(__name__)


def truncate_group(api_version: str) -> str:
    """Strip the version from an apiVersion, e.g. ``apps/v1`` -> ``apps``.

    Core API versions (``v1``) have no group and are returned unchanged.
    """
    parts = api_version.split("/")
    if len(parts) != 2:
        return api_version
    return parts[0]


def split_yaml(data: bytes, source: str = "<bytes>") -> list[bytes]:
    """Split a multi-document YAML stream into one normalized buffer per document.

    Each document is decoded on its own and dumped back out, so the buffers
    can be loaded independently. A broken document fails the whole stream.
    """
    docs: list[bytes] = []
    if not data:
        return docs

    try:
        for value in yaml.safe_load_all(data):
            docs.append(yaml.safe_dump(value, default_flow_style=False).encode("utf-8"))
    except yaml.YAMLError as e:
        raise ManifestParseError(f"Unable to split yaml from file {source}; err={e}") from e
    return docs


def _field(value: Any) -> str:
    if value is None or isinstance(value, (dict, list)):
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def _metadata(doc: dict) -> dict:
    metadata = doc.get("metadata") or {}
    return metadata if isinstance(metadata, dict) else {}


def is_valid_document(doc: Any) -> bool:
    """A document names a resource when apiVersion, kind and metadata.name are set."""
    if not isinstance(doc, dict):
        return False
    return bool(
        _field(doc.get("apiVersion"))
        and _field(doc.get("kind"))
        and _field(_metadata(doc).get("name"))
    )


def identity_from_document(doc: Any) -> ResourceIdentity | None:
    """Build the identity of a decoded manifest, or None if it names no resource."""
    if not is_valid_document(doc):
        logger.debug("Ignoring invalid resource key %r", doc)
        return None

    metadata = _metadata(doc)
    return ResourceIdentity(
        group=truncate_group(_field(doc["apiVersion"])),
        kind=_field(doc["kind"]),
        name=_field(metadata["name"]),
        namespace=_field(metadata.get("namespace")) or NO_NAMESPACE,
    )


def parse_identities(data: bytes, source: str = "<bytes>") -> list[ResourceIdentity]:
    """Return the identities of every valid resource in a manifest stream."""
    identities: list[ResourceIdentity] = []
    for buf in split_yaml(data, source=source):
        try:
            doc = yaml.safe_load(buf)
        except yaml.YAMLError as e:
            raise ManifestParseError(f"Unable to unmarshall yaml from file {source}; err={e}") from e
        identity = identity_from_document(doc)
        if identity is not None:
            logger.debug("%s: %s", source, identity)
            identities.append(identity)
    return identities
