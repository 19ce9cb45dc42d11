import pytest

from squarekit.mountain_range import merkle_mountain_range_sizes


@pytest.mark.parametrize(
    "total_size, max_tree_size, expected",
    [
        (11, 4, [4, 4, 2, 1]),
        (2, 64, [2]),
        (64, 8, [8] * 8),
        (19, 8, [8, 8, 2, 1]),
    ],
)
def test_merkle_mountain_range_sizes(total_size, max_tree_size, expected):
    assert merkle_mountain_range_sizes(total_size, max_tree_size) == expected


def test_empty_range_has_no_trees():
    assert merkle_mountain_range_sizes(0, 8) == []


@pytest.mark.parametrize("total_size, max_tree_size", [(1, 1), (7, 16), (100, 32), (1000, 64)])
def test_sizes_sum_to_total_and_respect_maximum(total_size, max_tree_size):
    sizes = merkle_mountain_range_sizes(total_size, max_tree_size)
    assert sum(sizes) == total_size
    assert all(size <= max_tree_size for size in sizes)
    assert sizes == sorted(sizes, reverse=True)


def test_zero_max_tree_size_is_rejected():
    with pytest.raises(ValueError):
        merkle_mountain_range_sizes(5, 0)


def test_negative_total_is_rejected():
    with pytest.raises(ValueError):
        merkle_mountain_range_sizes(-1, 4)