"""Disjoint-set forests and the puzzles built on them."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import combinations


class UnionFind:
    """A disjoint-set forest over the integers 0..n-1 with rank and path compression."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must be non-negative")
        self._parent = list(range(n))
        self._rank = [0] * n
        self._count = n

    def __len__(self) -> int:
        return len(self._parent)

    @property
    def count(self) -> int:
        """Number of separate components."""
        return self._count

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} is outside the forest")

    def find(self, x: int) -> int:
        """Return the representative of the component holding x."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            following = self._parent[x]
            self._parent[x] = root
            x = following
        return root

    def union(self, x: int, y: int) -> bool:
        """Join the components of x and y; return False if they were already one."""
        root_x, root_y = self.find(x), self.find(y)
        if root_x == root_y:
            return False
        if self._rank[root_x] < self._rank[root_y]:
            root_x, root_y = root_y, root_x
        self._parent[root_y] = root_x
        if self._rank[root_x] == self._rank[root_y]:
            self._rank[root_x] += 1
        self._count -= 1
        return True

    def connected(self, x: int, y: int) -> bool:
        """Return True if x and y are in the same component."""
        return self.find(x) == self.find(y)


def is_similar(s1: str, s2: str) -> bool:
    """Return True if the strings are equal or differ in exactly two positions."""
    if s1 == s2:
        return True
    diff = 0
    for a, b in zip(s1, s2):
        if a != b:
            diff += 1
            if diff > 2:
                return False
    return diff == 2


def num_similar_groups(strs: Sequence[str]) -> int:
    """Return the number of groups of strings linked by similarity."""
    forest = UnionFind(len(strs))
    for (i, first), (j, second) in combinations(enumerate(strs), 2):
        if is_similar(first, second):
            forest.union(i, j)
    return forest.count


def distance_limited_paths_exist(
    n: int, edges: Sequence[Sequence[int]], queries: Sequence[Sequence[int]]
) -> list[bool]:
    """For each query (u, v, limit), say whether u reaches v using edges lighter than limit."""
    ordered_edges = sorted(edges, key=lambda edge: edge[2])
    order = sorted(range(len(queries)), key=lambda i: queries[i][2])
    forest = UnionFind(n)
    answers = [False] * len(queries)
    pos = 0
    for qi in order:
        u, v, limit = queries[qi][:3]
        while pos < len(ordered_edges) and ordered_edges[pos][2] < limit:
            a, b = ordered_edges[pos][0], ordered_edges[pos][1]
            forest.union(a, b)
            pos += 1
        answers[qi] = forest.connected(u, v)
    return answers


def max_num_edges_to_remove(n: int, edges: Sequence[Sequence[int]]) -> int:
    """Return how many edges can go while both travellers still reach every node, or -1."""
    alice = UnionFind(n + 1)
    bob = UnionFind(n + 1)
    removable = alice_edges = bob_edges = 0

    for kind, u, v in edges:
        if kind == 3:
            if alice.union(u, v):
                alice_edges += 1
                if bob.union(u, v):
                    bob_edges += 1
            else:
                removable += 1

    for kind, u, v in edges:
        if kind == 1:
            if alice.union(u, v):
                alice_edges += 1
            else:
                removable += 1

    for kind, u, v in edges:
        if kind == 2:
            if bob.union(u, v):
                bob_edges += 1
            else:
                removable += 1

    if alice_edges == bob_edges == n - 1:
        return removable
    return -1