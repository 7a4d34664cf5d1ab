"""Counting puzzles whose answers are taken modulo 1_000_000_007."""

from __future__ import annotations

from collections import Counter
from collections.abc import Sequence
from math import comb

MOD = 1_000_000_007


def num_of_bst_orderings(nums: Sequence[int]) -> int:
    """Return how many other orderings of nums build the same binary search tree."""
    children = [[None, None] for _ in nums]
    for idx, value in enumerate(nums):
        if idx == 0:
            continue
        node = 0
        while True:
            side = 0 if value < nums[node] else 1
            child = children[node][side]
            if child is None:
                children[node][side] = idx
                break
            node = child

    sizes = [1] * len(nums)
    ways = 1
    for idx in reversed(range(len(nums))):
        left, right = (0 if c is None else sizes[c] for c in children[idx])
        sizes[idx] = 1 + left + right
        ways = ways * comb(left + right, left) % MOD
    return ways - 1


def count_paths(grid: Sequence[Sequence[int]]) -> int:
    """Return the number of strictly increasing 4-way paths in the grid."""
    rows, cols = len(grid), len(grid[0])
    cells = sorted(
        ((grid[r][c], r, c) for r in range(rows) for c in range(cols)), reverse=True
    )
    paths: dict[tuple[int, int], int] = {}
    total = 0
    for value, r, c in cells:
        count = 1
        for nr, nc in ((r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)):
            if 0 <= nr < rows and 0 <= nc < cols and grid[nr][nc] > value:
                count += paths[(nr, nc)]
        count %= MOD
        paths[(r, c)] = count
        total = (total + count) % MOD
    return total


def num_ways_to_form_target(words: Sequence[str], target: str) -> int:
    """Return the ways to spell target taking letters from strictly later columns."""
    if not words:
        raise ValueError("need at least one word")
    columns = [Counter(column) for column in zip(*words)]
    ways = [1] * (len(columns) + 1)
    for ch in target:
        following = [0] * (len(columns) + 1)
        for j, column in enumerate(columns):
            following[j + 1] = (following[j] + ways[j] * column[ch]) % MOD
        ways = following
    return ways[-1]


def profitable_schemes(
    n: int, min_profit: int, group: Sequence[int], profit: Sequence[int]
) -> int:
    """Return the number of crime subsets using at most n members with enough profit."""
    dp = [[0] * (n + 1) for _ in range(min_profit + 1)]
    dp[0][0] = 1
    for members, gain in zip(group, profit):
        for i in range(min_profit, -1, -1):
            reached = min(i + gain, min_profit)
            for j in range(n - members, -1, -1):
                dp[reached][j + members] = (
                    dp[reached][j + members] + dp[i][j]
                ) % MOD
    return sum(dp[min_profit]) % MOD


def number_of_arrays(s: str, k: int) -> int:
    """Return how many arrays of integers in 1..k print as the digit string s."""
    n = len(s)
    ways = [0] * (n + 1)
    ways[n] = 1
    for i in range(n - 1, -1, -1):
        if s[i] == "0":
            continue
        value = 0
        total = 0
        for j in range(i, n):
            value = value * 10 + int(s[j])
            if value > k:
                break
            total += ways[j + 1]
        ways[i] = total % MOD
    return ways[0]


def num_subseq(nums: Sequence[int], target: int) -> int:
    """Return the non-empty subsequences whose minimum plus maximum is at most target."""
    ordered = sorted(nums)
    if not ordered:
        return 0
    powers = [1] * len(ordered)
    for i in range(1, len(ordered)):
        powers[i] = powers[i - 1] * 2 % MOD
    result = 0
    left, right = 0, len(ordered) - 1
    while left <= right:
        if ordered[left] + ordered[right] > target:
            right -= 1
        else:
            result = (result + powers[right - left]) % MOD
            left += 1
    return result


def count_good_strings(low: int, high: int, zero: int, one: int) -> int:
    """Return the strings of length low..high built from blocks of zero and one lengths."""
    dp = [0] * (high + 1)
    dp[0] = 1
    for i in range(1, high + 1):
        from_zero = dp[i - zero] if i - zero >= 0 else 0
        from_one = dp[i - one] if i - one >= 0 else 0
        dp[i] = (from_zero + from_one) % MOD
    return sum(dp[low : high + 1]) % MOD