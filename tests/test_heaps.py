import pytest

from dailypuzzles.heaps import (
    KthLargest,
    SmallestInfiniteSet,
    last_stone_weight,
    max_subsequence_score,
    top_k_frequent,
)


def test_last_stone_weight_example():
    assert last_stone_weight([2, 7, 4, 1, 8, 1]) == 1


def test_last_stone_weight_single_and_equal():
    assert last_stone_weight([13]) == 13
    assert last_stone_weight([6, 6]) == 0


@pytest.mark.parametrize("stones", [[3, 9, 4, 10], [31, 26, 33, 21, 40], [1, 1, 1]])
def test_last_stone_weight_invariants(stones):
    result = last_stone_weight(list(stones))
    assert 0 <= result <= max(stones)
    assert (result - sum(stones)) % 2 == 0


def test_last_stone_weight_empty():
    with pytest.raises(ValueError):
        last_stone_weight([])


def test_top_k_frequent_picks_most_common():
    nums = [1, 1, 1, 2, 2, 3]
    assert top_k_frequent(nums, 2) == [2, 1]


def test_top_k_frequent_k_exceeds_distinct():
    nums = [4, 4, 5]
    assert sorted(top_k_frequent(nums, 5)) == sorted(set(nums))


def test_top_k_frequent_order_is_ascending_frequency():
    nums = [9] * 5 + [8] * 3 + [7] * 4 + [6]
    result = top_k_frequent(nums, 3)
    counts = [nums.count(v) for v in result]
    assert counts == sorted(counts)
    assert set(result) == {9, 8, 7}


def test_max_subsequence_score_example():
    assert max_subsequence_score([1, 3, 3, 2], [2, 1, 3, 4], 3) == 12


def test_max_subsequence_score_all_values():
    nums1, nums2 = [4, 2, 3, 1, 1], [7, 5, 10, 9, 6]
    assert max_subsequence_score(nums1, nums2, len(nums1)) == sum(nums1) * min(nums2)


def test_max_subsequence_score_zero_k():
    assert max_subsequence_score([5, 6], [7, 8], 0) == 0


def test_kth_largest_tracks_sorted_order():
    stream = [4, 5, 8, 2]
    tracker = KthLargest(3, stream)
    seen = list(stream)
    for val in [3, 5, 10, 9, 4]:
        seen.append(val)
        assert tracker.add(val) == sorted(seen, reverse=True)[2]


def test_kth_largest_before_k_values():
    tracker = KthLargest(3, [])
    assert tracker.add(5) == 5
    assert tracker.add(2) == 2


def test_kth_largest_rejects_bad_k():
    with pytest.raises(ValueError):
        KthLargest(0, [1, 2])


def test_smallest_infinite_set_pops_in_order():
    numbers = SmallestInfiniteSet()
    assert [numbers.pop_smallest() for _ in range(3)] == [1, 2, 3]


def test_smallest_infinite_set_add_back():
    numbers = SmallestInfiniteSet()
    popped = [numbers.pop_smallest() for _ in range(3)]
    numbers.add_back(popped[1])
    numbers.add_back(popped[1])
    numbers.add_back(popped[-1] + 10)
    assert numbers.pop_smallest() == popped[1]
    assert numbers.pop_smallest() == popped[-1] + 1