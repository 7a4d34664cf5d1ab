"""Array and matrix puzzles."""

from bisect import bisect_right
from itertools import accumulate


def check_straight_line(coordinates: list[list[int]]) -> bool:
    """Return True if all points lie on one straight line."""
    (x0, y0), (x1, y1) = coordinates[0], coordinates[1]
    return all(
        (x - x0) * (y1 - y0) == (y - y0) * (x1 - x0) for x, y in coordinates[2:]
    )


def can_make_arithmetic_progression(arr: list[int]) -> bool:
    """Return True if the values can be rearranged into an arithmetic progression."""
    if len(arr) < 2:
        raise ValueError("need at least two values")
    ordered = sorted(arr)
    step = ordered[1] - ordered[0]
    return all(b - a == step for a, b in zip(ordered, ordered[1:]))


def count_negatives(grid: list[list[int]]) -> int:
    """Count negatives in a grid sorted non-increasingly by rows and columns."""
    if not grid:
        return 0
    col = len(grid[0]) - 1
    count = 0
    for row in grid:
        while col >= 0 and row[col] < 0:
            col -= 1
        count += len(row) - 1 - col
    return count


def next_greatest_letter(letters: list[str], target: str) -> str:
    """Return the smallest letter greater than target, wrapping to the first."""
    idx = bisect_right(letters, target)
    return letters[idx] if idx < len(letters) else letters[0]


def _format_range(start: int, end: int) -> str:
    return str(start) if start == end else f"{start}->{end}"


def summary_ranges(nums: list[int]) -> list[str]:
    """Summarise a sorted list of distinct integers as consecutive ranges."""
    if not nums:
        return []
    ranges = []
    start = prev = nums[0]
    for num in nums[1:]:
        if num != prev + 1:
            ranges.append(_format_range(start, prev))
            start = num
        prev = num
    ranges.append(_format_range(start, prev))
    return ranges


def largest_altitude(gain: list[int]) -> int:
    """Return the highest altitude reached starting from zero."""
    return max(accumulate(gain, initial=0))


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b > 0) else -quotient


def get_averages(nums: list[int], k: int) -> list[int]:
    """Return the k-radius averages, -1 where the window does not fit."""
    n = len(nums)
    size = 2 * k + 1
    result = [-1] * n
    if n < size:
        return result
    window = sum(nums[:size])
    result[k] = _trunc_div(window, size)
    for i in range(size, n):
        window += nums[i] - nums[i - size]
        result[i - k] = _trunc_div(window, size)
    return result


def kids_with_candies(candies: list[int], extra_candies: int) -> list[bool]:
    """For each kid, say whether the extra candies would give them the most."""
    most = max(0, *candies) if candies else 0
    return [c + extra_candies >= most for c in candies]


def average_salary(salary: list[int]) -> float:
    """Return the average salary leaving out the minimum and the maximum."""
    if len(salary) < 3:
        raise ValueError("need at least three salaries")
    return (sum(salary) - min(salary) - max(salary)) / (len(salary) - 2)


def array_sign(nums: list[int]) -> int:
    """Return the sign of the product of the values: 1, -1 or 0."""
    if 0 in nums:
        return 0
    negatives = sum(1 for num in nums if num < 0)
    return -1 if negatives % 2 else 1


def find_difference(nums1: list[int], nums2: list[int]) -> list[list[int]]:
    """Return the distinct values only in nums1 and those only in nums2."""
    first, second = set(nums1), set(nums2)
    return [list(first - second), list(second - first)]


def diagonal_sum(mat: list[list[int]]) -> int:
    """Sum both diagonals of a square matrix, counting the centre once."""
    n = len(mat)
    total = sum(row[i] + row[n - 1 - i] for i, row in enumerate(mat))
    if n % 2:
        total -= mat[n // 2][n // 2]
    return total


def spiral_order(matrix: list[list]) -> list:
    """Return the matrix elements in clockwise spiral order."""
    rows = [list(row) for row in matrix]
    order = []
    while rows:
        order.extend(rows.pop(0))
        rows = [list(col) for col in zip(*rows)][::-1]
    return order


def generate_matrix(n: int) -> list[list[int]]:
    """Return an n by n matrix filled with 1..n*n in clockwise spiral order."""
    grid = [[0] * n for _ in range(n)]
    cells = spiral_order([[(r, c) for c in range(n)] for r in range(n)])
    for value, (r, c) in enumerate(cells, start=1):
        grid[r][c] = value
    return grid


def min_subarray_len(target: int, nums: list[int]) -> int:
    """Return the shortest length of a subarray summing to at least target, or 0."""
    best = None
    left = 0
    window = 0
    for right, num in enumerate(nums):
        window += num
        while window >= target:
            length = right - left + 1
            best = length if best is None else min(best, length)
            window -= nums[left]
            left += 1
    return 0 if best is None else best