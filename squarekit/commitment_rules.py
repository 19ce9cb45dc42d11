"""Blob share commitment rules: where each blob may start in a data square.

The rules follow the non-interactive default layout: every blob begins at
a multiple of the width of the first subtree of its share commitment.
"""

from __future__ import annotations

import math


def _round_up_power_of_two(value: int) -> int:
    """Return the smallest power of two that is >= `value` (1 for values <= 1)."""
    result = 1
    while result < value:
        result <<= 1
    return result


def round_up_by_multiple_of(cursor: int, v: int) -> int:
    """Round `cursor` up to the next multiple of `v`; multiples are returned unchanged."""
    if cursor % v == 0:
        return cursor
    return (cursor // v + 1) * v


def blob_min_square_size(share_count: int) -> int:
    """Return the smallest square size that can hold `share_count` shares."""
    side = math.isqrt(share_count - 1) + 1 if share_count > 0 else 0
    return _round_up_power_of_two(side)


def sub_tree_width(share_count: int, subtree_root_threshold: int) -> int:
    """Return the maximum number of leaves per subtree of a blob's share commitment."""
    width = share_count // subtree_root_threshold
    if share_count % subtree_root_threshold != 0:
        width += 1
    width = _round_up_power_of_two(width)
    return min(width, blob_min_square_size(share_count))


def next_share_index(cursor: int, blob_share_len: int, subtree_root_threshold: int) -> int:
    """Return the first index at or after `cursor` where a blob of this length may start."""
    tree_width = sub_tree_width(blob_share_len, subtree_root_threshold)
    return round_up_by_multiple_of(cursor, tree_width)


def blob_shares_used_non_interactive_defaults(
    cursor: int, subtree_root_threshold: int, *args: int
) -> tuple[int, list[int]]:
    """Lay out blobs of the given share lengths starting at `cursor`.

    Return the number of shares consumed, padding included, and the start
    index of each blob.
    """
    start = cursor
    indexes: list[int] = []
    for blob_len in args:
        cursor = next_share_index(cursor, blob_len, subtree_root_threshold)
        indexes.append(cursor)
        cursor += blob_len
    return cursor - start, indexes