"""Bit tricks, binary searches and small numeric puzzles."""

from __future__ import annotations

from functools import cache
from itertools import combinations
from math import gcd, isqrt


def min_flips(a: int, b: int, c: int) -> int:
    """Return the fewest bit flips in a and b that make a | b equal c."""
    if a < 0 or b < 0 or c < 0:
        raise ValueError("values must be non-negative")
    flips = 0
    while a or b or c:
        bit_a, bit_b, bit_c = a & 1, b & 1, c & 1
        if bit_c:
            if not (bit_a or bit_b):
                flips += 1
        else:
            flips += bit_a + bit_b
        a >>= 1
        b >>= 1
        c >>= 1
    return flips


def _extra_sum(peak: int, index: int, n: int) -> int:
    """Extra amount above one needed to put peak at index with slopes of one."""
    left = max(peak - index, 0)
    total = (peak + left) * (peak - left + 1) // 2
    right = max(peak - (n - 1 - index), 0)
    total += (peak + right) * (peak - right + 1) // 2
    return total - peak


def max_value(n: int, index: int, max_sum: int) -> int:
    """Return the largest value at index in a bounded array of n positive ints."""
    budget = max_sum - n
    low, high = 0, budget
    while low < high:
        mid = (low + high + 1) // 2
        if _extra_sum(mid, index, n) <= budget:
            low = mid
        else:
            high = mid - 1
    return low + 1


def _total_cost(nums: list[int], cost: list[int], target: int) -> int:
    return sum(abs(num - target) * weight for num, weight in zip(nums, cost))


def min_cost(nums: list[int], cost: list[int]) -> int:
    """Return the least weighted cost of making all values equal."""
    low, high = min(nums), max(nums)
    best = 0
    while low < high:
        mid = (low + high) // 2
        here = _total_cost(nums, cost, mid)
        after = _total_cost(nums, cost, mid + 1)
        if here > after:
            low = mid + 1
            best = after
        else:
            high = mid
            best = here
    return best


def add_digits(num: int) -> int:
    """Repeatedly sum the decimal digits of num until one digit is left."""
    while num > 9:
        num = sum(int(digit) for digit in str(num))
    return num


def bulb_switch(n: int) -> int:
    """Return how many of n bulbs are on after n toggling rounds."""
    return isqrt(n)


def single_number(nums: list[int]) -> int:
    """Return the value that appears once where every other appears three times."""
    ones = twos = 0
    for num in nums:
        ones = (ones ^ num) & ~twos
        twos = (twos ^ num) & ~ones
    return ones


def new21_game(n: int, k: int, max_pts: int) -> float:
    """Return the chance of ending with at most n points when drawing below k."""
    if k == 0 or n >= k + max_pts:
        return 1.0
    window = 1.0
    probability = 0.0
    dp = [1.0] + [0.0] * n
    for i in range(1, n + 1):
        dp[i] = window / max_pts
        if i < k:
            window += dp[i]
        else:
            probability += dp[i]
        if i >= max_pts:
            window -= dp[i - max_pts]
    return probability


def max_gcd_score(nums: list[int]) -> int:
    """Return the best score from pairing values, weighting each pair's gcd by its turn."""
    n = len(nums)
    if n % 2:
        raise ValueError("need an even number of values")

    @cache
    def best(mask: int) -> int:
        remaining = [i for i in range(n) if mask >> i & 1]
        if not remaining:
            return 0
        multiplier = len(remaining) // 2
        return max(
            gcd(nums[i], nums[j]) * multiplier + best(mask & ~(1 << i) & ~(1 << j))
            for i, j in combinations(remaining, 2)
        )

    return best((1 << n) - 1)