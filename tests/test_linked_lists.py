import pytest

from dailypuzzles.linked_lists import pair_sum, swap_nodes, swap_pairs
from dailypuzzles.structures import build_list, list_values


VALUES = [7, 9, 6, 6, 7, 8, 3, 0, 9, 5]


@pytest.mark.parametrize("k", [1, 2, 5, 10])
def test_swap_nodes_exchanges_mirrored_positions(k):
    result = list_values(swap_nodes(build_list(VALUES), k))
    assert result[k - 1] == VALUES[-k]
    assert result[-k] == VALUES[k - 1]
    assert sorted(result) == sorted(VALUES)


@pytest.mark.parametrize("k", [1, 3, 4])
def test_swap_nodes_twice_restores(k):
    head = swap_nodes(swap_nodes(build_list(VALUES), k), k)
    assert list_values(head) == VALUES


@pytest.mark.parametrize("k", [1, 3, 4])
def test_swap_nodes_k_and_mirror_agree(k):
    n = len(VALUES)
    left = list_values(swap_nodes(build_list(VALUES), k))
    right = list_values(swap_nodes(build_list(VALUES), n - k + 1))
    assert left == right


def test_swap_nodes_middle_of_odd_list_unchanged():
    values = [1, 2, 3, 4, 5]
    assert list_values(swap_nodes(build_list(values), 3)) == values


@pytest.mark.parametrize("k", [0, 4])
def test_swap_nodes_out_of_range(k):
    with pytest.raises(IndexError):
        swap_nodes(build_list([1, 2, 3]), k)


def test_swap_pairs_even_length():
    values = [4, 8, 15, 16, 23, 42]
    result = list_values(swap_pairs(build_list(values)))
    assert result[0::2] == values[1::2]
    assert result[1::2] == values[0::2]


def test_swap_pairs_odd_length_keeps_last():
    values = [1, 2, 3, 4, 5]
    result = list_values(swap_pairs(build_list(values)))
    assert result[-1] == values[-1]
    assert result[:-1:2] == values[1::2]


def test_swap_pairs_twice_restores():
    values = list(range(11))
    assert list_values(swap_pairs(swap_pairs(build_list(values)))) == values


def test_swap_pairs_short_lists():
    assert swap_pairs(None) is None
    assert list_values(swap_pairs(build_list([9]))) == [9]


def test_pair_sum_example():
    assert pair_sum(build_list([5, 4, 2, 1])) == 6


@pytest.mark.parametrize("value", [0, 3, -8])
def test_pair_sum_constant_list(value):
    assert pair_sum(build_list([value] * 6)) == 2 * value


def test_pair_sum_mirrored_list():
    half = [3, 11, 7, 2]
    assert pair_sum(build_list(half + half[::-1])) == 2 * max(half)


@pytest.mark.parametrize("values", [[], [4]])
def test_pair_sum_needs_two_nodes(values):
    with pytest.raises(ValueError):
        pair_sum(build_list(values))