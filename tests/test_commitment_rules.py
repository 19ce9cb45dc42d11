import pytest

from squarekit.commitment_rules import (
    blob_min_square_size,
    blob_shares_used_non_interactive_defaults,
    next_share_index,
    round_up_by_multiple_of,
    sub_tree_width,
)

THRESHOLD = 64
MAX_SQUARE_SIZE = 128
SQUARE_SIZE = 128


@pytest.mark.parametrize(
    "cursor, expected, blob_lens, indexes",
    [
        (2, 1, [1], [2]),
        (3, 6, [3, 3], [3, 6]),
        (0, 8, [8], [0]),
        (1, 6, [3, 3], [1, 4]),
        (1, 32, [1] * 32, list(range(1, 33))),
        (3, 12, [5, 7], [3, 8]),
        (0, 20, [5, 5, 5, 5], [0, 5, 10, 15]),
        (0, 10, [10], [0]),
        (1, 20, [10, 10], [1, 11]),
        (0, 1000, [1000], [0]),
        (0, SQUARE_SIZE + 1, [SQUARE_SIZE + 1], [0]),
        (1, 385, [128, 128, 128], [2, 130, 258]),
        (1024, 32, [32], [1024]),
    ],
)
def test_blob_shares_used_non_interactive_defaults(cursor, expected, blob_lens, indexes):
    used, got_indexes = blob_shares_used_non_interactive_defaults(cursor, THRESHOLD, *blob_lens)
    assert used == expected
    assert got_indexes == indexes


def test_blob_shares_used_with_no_blobs():
    assert blob_shares_used_non_interactive_defaults(7, THRESHOLD) == (0, [])


@pytest.mark.parametrize(
    "cursor, blob_len, expected",
    [
        (0, 4, 0),
        (1, 2, 1),
        (2, 2, 2),
        (3, 4, 3),
        (3, 5, 3),
        (3, 2, 3),
        (1, 12, 1),
        (10291, 1, 10291),
        (11, 2, 11),
        (11, 11, 11),
        (11, THRESHOLD, 11),
        (64, THRESHOLD + 1, 64),
        (64, THRESHOLD - 1, 64),
        (1, THRESHOLD - 1, 1),
        (1, 16256, 128),
        (1, 8192, 128),
        (1, 4096, 64),
        (1, 8193, 128),
    ],
)
def test_next_share_index(cursor, blob_len, expected):
    assert next_share_index(cursor, blob_len, THRESHOLD) == expected


@pytest.mark.parametrize(
    "cursor, v, expected",
    [
        (1, 2, 2),
        (2, 2, 2),
        (0, 2, 0),
        (5, 2, 6),
        (8, 16, 16),
        (33, 1, 33),
        (32, 16, 32),
        (33, 16, 48),
    ],
)
def test_round_up_by_multiple_of(cursor, v, expected):
    assert round_up_by_multiple_of(cursor, v) == expected


def test_round_up_by_multiple_of_zero_divisor():
    with pytest.raises(ZeroDivisionError):
        round_up_by_multiple_of(3, 0)


@pytest.mark.parametrize(
    "share_count, expected",
    [(0, 1), (1, 1), (2, 2), (3, 2), (4, 2), (5, 4), (16, 4), (17, 8)],
)
def test_blob_min_square_size(share_count, expected):
    assert blob_min_square_size(share_count) == expected


@pytest.mark.parametrize(
    "share_count, expected",
    [
        (0, 1),
        (1, 1),
        (2, 1),
        (THRESHOLD, 1),
        (THRESHOLD + 1, 2),
        (THRESHOLD - 1, 1),
        (THRESHOLD * 2, 2),
        (THRESHOLD * 2 + 1, 4),
        (THRESHOLD * 3 - 1, 4),
        (THRESHOLD * 4, 4),
        (THRESHOLD * 5, 8),
        (THRESHOLD * MAX_SQUARE_SIZE - 1, 128),
    ],
)
def test_sub_tree_width(share_count, expected):
    assert sub_tree_width(share_count, THRESHOLD) == expected