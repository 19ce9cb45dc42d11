"""Hash primitives for RFC-6962 style Merkle trees."""

from __future__ import annotations

import hashlib

_LEAF_PREFIX = b"\x00"
_INNER_PREFIX = b"\x01"


def _sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def empty_hash() -> bytes:
    """Return the SHA-256 hash of the empty string."""
    return _sha256(b"")


def leaf_hash(leaf: bytes) -> bytes:
    """Return sha256(0x00 || leaf)."""
    return _sha256(_LEAF_PREFIX + bytes(leaf))


def inner_hash(left: bytes, right: bytes) -> bytes:
    """Return sha256(0x01 || left || right)."""
    return _sha256(_INNER_PREFIX + bytes(left) + bytes(right))


def _uvarint(value: int) -> bytes:
    if value < 0:
        raise ValueError("uvarint value must not be negative")
    out = bytearray()
    while value >= 0x80:
        out.append((value & 0x7F) | 0x80)
        value >>= 7
    out.append(value)
    return bytes(out)


def encode_byte_slice(bz: bytes) -> bytes:
    """Return `bz` prefixed with its length as an unsigned varint."""
    bz = bytes(bz)
    return _uvarint(len(bz)) + bz