"""Sizes of the trees in a Merkle mountain range."""

from __future__ import annotations


def _round_down_power_of_two(value: int) -> int:
    if value <= 0:
        raise ValueError("input must be positive")
    return 1 << (value.bit_length() - 1)


def merkle_mountain_range_sizes(total_size: int, max_tree_size: int) -> list[int]:
    """Return the leaf counts of the trees in a mountain range over `total_size` leaves.

    Trees hold at most `max_tree_size` leaves; the remainder is split into
    decreasing powers of two.
    """
    if total_size < 0:
        raise ValueError("total size must not be negative")
    if max_tree_size <= 0 and total_size > 0:
        raise ValueError("max tree size must be positive")
    sizes: list[int] = []
    while total_size != 0:
        if total_size >= max_tree_size:
            size = max_tree_size
        else:
            size = _round_down_power_of_two(total_size)
        sizes.append(size)
        total_size -= size
    return sizes