"""Graph and grid search puzzles."""

from __future__ import annotations

from collections import defaultdict, deque
from collections.abc import Iterator, Sequence

_EIGHT_WAYS = [(dr, dc) for dr in (-1, 0, 1) for dc in (-1, 0, 1) if dr or dc]
_FOUR_WAYS = [(0, 1), (1, 0), (0, -1), (-1, 0)]


def _neighbours(
    row: int, col: int, rows: int, cols: int, moves: list[tuple[int, int]]
) -> Iterator[tuple[int, int]]:
    for dr, dc in moves:
        r, c = row + dr, col + dc
        if 0 <= r < rows and 0 <= c < cols:
            yield r, c


def shortest_path_binary_matrix(grid: Sequence[Sequence[int]]) -> int:
    """Return the cell count of the shortest 8-way clear path corner to corner, or -1."""
    n = len(grid)
    if grid[0][0] != 0 or grid[n - 1][n - 1] != 0:
        return -1
    seen = {(0, 0)}
    queue = deque([(0, 0, 1)])
    while queue:
        row, col, distance = queue.popleft()
        if row == n - 1 and col == n - 1:
            return distance
        for r, c in _neighbours(row, col, n, n, _EIGHT_WAYS):
            if grid[r][c] == 0 and (r, c) not in seen:
                seen.add((r, c))
                queue.append((r, c, distance + 1))
    return -1


def maximum_detonation(bombs: Sequence[Sequence[int]]) -> int:
    """Return the most bombs one detonation can set off in a chain."""
    reach = [
        [
            j
            for j, (xj, yj, _) in enumerate(bombs)
            if j != i and r * r >= (xi - xj) ** 2 + (yi - yj) ** 2
        ]
        for i, (xi, yi, r) in enumerate(bombs)
    ]
    best = 0
    for start in range(len(bombs)):
        seen = {start}
        stack = [start]
        while stack:
            for nxt in reach[stack.pop()]:
                if nxt not in seen:
                    seen.add(nxt)
                    stack.append(nxt)
        best = max(best, len(seen))
    return best


def num_of_minutes(
    n: int, head_id: int, manager: Sequence[int], inform_time: Sequence[int]
) -> int:
    """Return the minutes needed for news from the head to reach every employee."""
    subordinates: defaultdict[int, list[int]] = defaultdict(list)
    for employee, boss in enumerate(manager[:n]):
        if boss != -1:
            subordinates[boss].append(employee)
    longest = 0
    queue = deque([(head_id, 0)])
    while queue:
        employee, reached = queue.popleft()
        passed_on = reached + inform_time[employee]
        longest = max(longest, passed_on)
        queue.extend((sub, passed_on) for sub in subordinates[employee])
    return longest


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Return the number of connected groups in an adjacency matrix."""
    n = len(is_connected)
    visited: set[int] = set()
    provinces = 0
    for start in range(n):
        if start in visited:
            continue
        provinces += 1
        visited.add(start)
        stack = [start]
        while stack:
            node = stack.pop()
            for other, linked in enumerate(is_connected[node]):
                if linked == 1 and other not in visited:
                    visited.add(other)
                    stack.append(other)
    return provinces


def can_finish(num_courses: int, prerequisites: Sequence[Sequence[int]]) -> bool:
    """Return True if the prerequisite graph has no cycle."""
    dependents: defaultdict[int, list[int]] = defaultdict(list)
    indegree = [0] * num_courses
    for course, required in prerequisites:
        dependents[required].append(course)
        indegree[course] += 1
    ready = deque(c for c, degree in enumerate(indegree) if degree == 0)
    taken = 0
    while ready:
        course = ready.popleft()
        taken += 1
        for nxt in dependents[course]:
            indegree[nxt] -= 1
            if indegree[nxt] == 0:
                ready.append(nxt)
    return taken == num_courses


def find_smallest_set_of_vertices(n: int, edges: Sequence[Sequence[int]]) -> list[int]:
    """Return, in ascending order, the vertices with no incoming edge."""
    destinations = {edge[1] for edge in edges}
    return [v for v in range(n) if v not in destinations]


def is_bipartite(graph: Sequence[Sequence[int]]) -> bool:
    """Return True if the nodes can be split into two sets with edges only between them."""
    colours: dict[int, int] = {}
    for start in range(len(graph)):
        if start in colours:
            continue
        colours[start] = 1
        queue = deque([start])
        while queue:
            node = queue.popleft()
            for neighbour in graph[node]:
                if neighbour not in colours:
                    colours[neighbour] = -colours[node]
                    queue.append(neighbour)
                elif colours[neighbour] == colours[node]:
                    return False
    return True


def calc_equation(
    equations: Sequence[Sequence[str]],
    values: Sequence[float],
    queries: Sequence[Sequence[str]],
) -> list[float]:
    """Evaluate each queried ratio from known ratios, -1.0 where it cannot be found."""
    graph: defaultdict[str, dict[str, float]] = defaultdict(dict)
    for (dividend, divisor), value in zip(equations, values):
        graph[dividend][divisor] = value
        graph[divisor][dividend] = 1.0 / value

    def solve(start: str, end: str) -> float:
        if start not in graph or end not in graph:
            return -1.0
        seen = {start}
        queue = deque([(start, 1.0)])
        while queue:
            node, product = queue.popleft()
            if node == end:
                return product
            for neighbour, ratio in graph[node].items():
                if neighbour not in seen:
                    seen.add(neighbour)
                    queue.append((neighbour, product * ratio))
        return -1.0

    return [solve(dividend, divisor) for dividend, divisor in queries]


def shortest_bridge(grid: Sequence[Sequence[int]]) -> int:
    """Return the fewest water cells to fill to join the first island to another, or -1."""
    rows, cols = len(grid), len(grid[0])
    start = next(
        ((r, c) for r in range(rows) for c in range(cols) if grid[r][c] == 1), None
    )
    if start is None:
        return -1

    island = {start}
    stack = [start]
    while stack:
        row, col = stack.pop()
        for cell in _neighbours(row, col, rows, cols, _FOUR_WAYS):
            if grid[cell[0]][cell[1]] == 1 and cell not in island:
                island.add(cell)
                stack.append(cell)

    visited = set(island)
    frontier = list(island)
    level = 0
    while frontier:
        following = []
        for row, col in frontier:
            for cell in _neighbours(row, col, rows, cols, _FOUR_WAYS):
                if cell in visited:
                    continue
                if grid[cell[0]][cell[1]] == 1:
                    return level
                visited.add(cell)
                following.append(cell)
        frontier = following
        level += 1
    return -1