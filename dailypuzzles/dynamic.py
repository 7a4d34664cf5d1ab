"""Dynamic programming puzzles."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Sequence
from itertools import accumulate
from math import inf


def _replacements_needed(
    values: Sequence[float], replacements: Sequence[int], start: int, end: int
) -> int | None:
    gap = end - start - 1
    if gap == 0:
        return 0
    first = bisect_right(replacements, values[start])
    last = first + gap - 1
    if last < len(replacements) and replacements[last] < values[end]:
        return gap
    return None


def make_array_increasing(arr1: Sequence[int], arr2: Sequence[int]) -> int:
    """Return the fewest replacements from arr2 making arr1 strictly increasing, or -1."""
    replacements = sorted(set(arr2))
    values: list[float] = [-inf, *arr1, inf]
    best: list[int | None] = [0] + [None] * (len(values) - 1)
    for end in range(1, len(values)):
        for start in range(end):
            before = best[start]
            if before is None or values[start] >= values[end]:
                continue
            change = _replacements_needed(values, replacements, start, end)
            if change is not None and (best[end] is None or before + change < best[end]):
                best[end] = before + change
    return -1 if best[-1] is None else best[-1]


def _lcs(first: Sequence, second: Sequence) -> int:
    dp = [0] * (len(second) + 1)
    for x in first:
        prev = 0
        for j, y in enumerate(second, start=1):
            current = dp[j]
            dp[j] = prev + 1 if x == y else max(dp[j - 1], current)
            prev = current
    return dp[-1]


def longest_palindrome_subseq(s: str) -> int:
    """Return the length of the longest palindromic subsequence of s."""
    return _lcs(s, s[::-1])


def max_value_of_coins(piles: Sequence[Sequence[int]], k: int) -> int:
    """Return the most value from taking k coins off the tops of the piles."""
    if k > sum(len(pile) for pile in piles):
        raise ValueError("not enough coins in the piles")
    best: list[int | None] = [0] + [None] * k
    for pile in piles:
        prefix = list(accumulate(pile))
        updated = best[:]
        for j in range(1, k + 1):
            for taken, gain in enumerate(prefix[:j], start=1):
                before = best[j - taken]
                if before is not None and (
                    updated[j] is None or before + gain > updated[j]
                ):
                    updated[j] = before + gain
        best = updated
    return best[k]


def min_insertions(s: str) -> int:
    """Return the fewest insertions that make s a palindrome."""
    if not s:
        return 0
    n = len(s)
    dp = [0] * n
    for i in range(n - 2, -1, -1):
        prev = 0
        for j in range(i + 1, n):
            saved = dp[j]
            dp[j] = prev if s[i] == s[j] else min(dp[j], dp[j - 1]) + 1
            prev = saved
    return dp[-1]


def longest_obstacle_course(obstacles: Sequence[int]) -> list[int]:
    """For each position, return the longest non-decreasing course ending there."""
    tails: list[int] = []
    lengths = []
    for height in obstacles:
        pos = bisect_right(tails, height)
        if pos == len(tails):
            tails.append(height)
        else:
            tails[pos] = height
        lengths.append(pos + 1)
    return lengths


def max_uncrossed_lines(nums1: Sequence[int], nums2: Sequence[int]) -> int:
    """Return the most equal-value lines drawable between the two rows without crossing."""
    if len(nums1) < len(nums2):
        nums1, nums2 = nums2, nums1
    return _lcs(nums1, nums2)


def most_points(questions: Sequence[Sequence[int]]) -> int:
    """Return the most points from solving questions, each skipping its brainpower."""
    n = len(questions)
    dp = [0] * (n + 1)
    for i in range(n - 1, -1, -1):
        points, brainpower = questions[i][0], questions[i][1]
        following = min(i + brainpower + 1, n)
        dp[i] = max(points + dp[following], dp[i + 1])
    return dp[0]


def stone_game_ii(piles: Sequence[int]) -> int:
    """Return the most stones the first player can get when both play optimally."""
    n = len(piles)
    if n == 0:
        return 0
    suffix = list(accumulate(reversed(piles)))[::-1] + [0]
    dp = [[0] * (n + 1) for _ in range(n)]
    for i in range(n - 1, -1, -1):
        for m in range(1, n + 1):
            if i + 2 * m >= n:
                dp[i][m] = suffix[i]
            else:
                dp[i][m] = max(
                    [0]
                    + [
                        suffix[i] - dp[i + x][max(x, m)]
                        for x in range(1, 2 * m + 1)
                    ]
                )
    return dp[0][1]


def stone_game_iii(stone_value: Sequence[int]) -> str:
    """Return "Alice", "Bob" or "Tie" for the take-one-to-three stone game."""
    n = len(stone_value)
    dp = [0] * (n + 1)
    for i in range(n - 1, -1, -1):
        dp[i] = max(
            sum(stone_value[i : i + t]) - dp[i + t]
            for t in range(1, 4)
            if i + t <= n
        )
    if dp[0] > 0:
        return "Alice"
    if dp[0] < 0:
        return "Bob"
    return "Tie"


def min_cost_to_cut(n: int, cuts: Sequence[int]) -> int:
    """Return the least total cost of cutting a stick of length n at every cut."""
    points = [0, *sorted(cuts), n]
    size = len(points)
    cost = [[0] * size for _ in range(size)]
    for span in range(2, size):
        for i in range(size - span):
            j = i + span
            cost[i][j] = min(cost[i][k] + cost[k][j] for k in range(i + 1, j)) + (
                points[j] - points[i]
            )
    return cost[0][-1]