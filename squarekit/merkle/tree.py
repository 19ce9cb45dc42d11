"""Deterministic minimal-height Merkle tree hashing.

When the number of items is not a power of two, some leaves sit at
different depths.  Both sides of the tree are kept the same size where
possible, with the left side holding the largest power of two smaller
than the total.  The construction follows RFC-6962 but does not by itself
guard against second pre-image attacks.
"""

from __future__ import annotations

from typing import Sequence

from squarekit.merkle.hashing import empty_hash, inner_hash, leaf_hash


def get_split_point(length: int) -> int:
    """Return the largest power of two strictly less than `length`."""
    if length < 1:
        raise ValueError("Trying to split a tree with size < 1")
    k = 1 << (length.bit_length() - 1)
    if k == length:
        k >>= 1
    return k


def hash_from_byte_slices(items: Sequence[bytes] | None) -> bytes:
    """Return the Merkle root of `items`, taken as leaves in order."""
    items = list(items or [])
    if not items:
        return empty_hash()
    if len(items) == 1:
        return leaf_hash(items[0])
    k = get_split_point(len(items))
    return inner_hash(hash_from_byte_slices(items[:k]), hash_from_byte_slices(items[k:]))


def hash_from_byte_slices_iterative(items: Sequence[bytes] | None) -> bytes:
    """Return the same root as hash_from_byte_slices, computed level by level."""
    level = [leaf_hash(item) for item in items or []]
    if not level:
        return empty_hash()
    while len(level) > 1:
        level = [
            inner_hash(level[i], level[i + 1]) if i + 1 < len(level) else level[i]
            for i in range(0, len(level), 2)
        ]
    return level[0]