"""Heap-based puzzles and streaming structures."""

from __future__ import annotations

import heapq
from collections import Counter
from collections.abc import Iterable


def last_stone_weight(stones: list[int]) -> int:
    """Smash the two heaviest stones until one is left and return its weight."""
    if not stones:
        raise ValueError("need at least one stone")
    heap = [-stone for stone in stones]
    heapq.heapify(heap)
    while len(heap) > 1:
        first = -heapq.heappop(heap)
        second = -heapq.heappop(heap)
        heapq.heappush(heap, -(first - second))
    return -heap[0]


def top_k_frequent(nums: list[int], k: int) -> list[int]:
    """Return the k most frequent values, least frequent of them first."""
    return [num for num, _ in reversed(Counter(nums).most_common(k))]


def max_subsequence_score(nums1: list[int], nums2: list[int], k: int) -> int:
    """Return the best sum of k values from nums1 times their smallest nums2 partner."""
    pairs = sorted(zip(nums2, nums1), key=lambda pair: pair[0], reverse=True)
    heap: list[int] = []
    total = 0
    best = 0
    for multiplier, value in pairs:
        heapq.heappush(heap, value)
        total += value
        if len(heap) > k:
            total -= heapq.heappop(heap)
        if len(heap) == k:
            best = max(best, total * multiplier)
    return best


class KthLargest:
    """Track the k-th largest value of a growing stream."""

    def __init__(self, k: int, nums: Iterable[int]) -> None:
        if k < 1:
            raise ValueError("k must be positive")
        self._k = k
        self._heap: list[int] = []
        for num in nums:
            self.add(num)

    def add(self, val: int) -> int:
        """Add a value and return the current k-th largest."""
        if len(self._heap) < self._k:
            heapq.heappush(self._heap, val)
        elif val > self._heap[0]:
            heapq.heapreplace(self._heap, val)
        return self._heap[0]


class SmallestInfiniteSet:
    """The set of all positive integers, with removal of the smallest."""

    def __init__(self) -> None:
        self._next = 1
        self._heap: list[int] = []
        self._returned: set[int] = set()

    def pop_smallest(self) -> int:
        """Remove and return the smallest integer in the set."""
        if self._heap:
            smallest = heapq.heappop(self._heap)
            self._returned.discard(smallest)
            return smallest
        self._next += 1
        return self._next - 1

    def add_back(self, num: int) -> None:
        """Put num back into the set if it was removed."""
        if num < self._next and num not in self._returned:
            heapq.heappush(self._heap, num)
            self._returned.add(num)