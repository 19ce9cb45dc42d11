"""Blobs: namespaced data submitted for inclusion in a data square."""

from __future__ import annotations

from dataclasses import dataclass
from typing import MutableSequence

from squarekit.namespace import (
    NAMESPACE_ID_SIZE,
    NAMESPACE_VERSION_MAX,
    NAMESPACE_VERSION_ZERO,
    Namespace,
)

SUPPORTED_BLOB_NAMESPACE_VERSIONS = (NAMESPACE_VERSION_ZERO,)

PROTO_BLOB_TX_TYPE_ID = "BLOB"
PROTO_INDEX_WRAPPER_TYPE_ID = "INDX"

_MAX_SHARE_VERSION = 0xFF


@dataclass
class Blob:
    """A blob of data together with its namespace and share version."""

    namespace_id: bytes
    data: bytes
    share_version: int = 0
    namespace_version: int = 0

    def namespace(self) -> Namespace:
        """Return the namespace the blob belongs to."""
        return Namespace(self.namespace_version & 0xFF, self.namespace_id)

    def validate(self) -> None:
        """Check the form of the blob; raise ValueError if it is invalid."""
        if len(self.namespace_id) != NAMESPACE_ID_SIZE:
            raise ValueError(f"namespace id must be {NAMESPACE_ID_SIZE} bytes")
        if self.share_version > _MAX_SHARE_VERSION:
            raise ValueError("share version can not be greater than MaxShareVersion")
        if self.namespace_version > NAMESPACE_VERSION_MAX:
            raise ValueError("namespace version can not be greater than MaxNamespaceVersion")
        if not self.data:
            raise ValueError("blob data can not be empty")


def new_blob(ns: Namespace, data: bytes, share_version: int) -> Blob:
    """Create a blob in namespace `ns` holding `data`."""
    return Blob(
        namespace_id=ns.id,
        data=bytes(data),
        share_version=share_version,
        namespace_version=ns.version,
    )


def sort_blobs(blobs: MutableSequence[Blob]) -> None:
    """Stably sort `blobs` in place by namespace."""
    blobs[:] = sorted(blobs, key=lambda b: bytes(b.namespace()))