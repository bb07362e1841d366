"""Graph traversals, shortest paths, topological order and disjoint sets.

A graph is an adjacency list: ``graph[node]`` holds the neighbours of
``node``, and nodes are the integers ``0 .. len(graph) - 1``.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

Graph = Sequence[Sequence[int]]


class UnionFind:
    """Disjoint-set forest with path compression and union by size."""

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("n must not be negative")
        self._parent = list(range(n))
        self._size = [1] * n
        self._count = n

    def _check(self, x: int) -> None:
        if not 0 <= x < len(self._parent):
            raise IndexError(f"element {x} out of range")

    def find(self, x: int) -> int:
        """Return the representative of the set holding ``x``."""
        self._check(x)
        root = x
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[x] != root:
            self._parent[x], x = root, self._parent[x]
        return root

    def unite(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if already joined."""
        root_x = self.find(x)
        root_y = self.find(y)
        if root_x == root_y:
            return False
        if self._size[root_x] < self._size[root_y]:
            root_x, root_y = root_y, root_x
        self._parent[root_y] = root_x
        self._size[root_x] += self._size[root_y]
        self._count -= 1
        return True

    def is_connected(self, x: int, y: int) -> bool:
        """Return True if ``x`` and ``y`` are in the same set."""
        return self.find(x) == self.find(y)

    @property
    def count(self) -> int:
        """Number of disjoint sets."""
        return self._count

    def __len__(self) -> int:
        return len(self._parent)


def _valid_start(graph: Graph, start: int) -> bool:
    return 0 <= start < len(graph)


def bfs_traversal(graph: Graph, start: int) -> list[int]:
    """Return nodes reachable from ``start`` in breadth-first order.

    An out-of-range ``start`` yields an empty list.
    """
    if not _valid_start(graph, start):
        return []
    visited = [False] * len(graph)
    visited[start] = True
    queue = deque([start])
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in graph[node]:
            if not visited[neighbor]:
                visited[neighbor] = True
                queue.append(neighbor)
    return order


def dfs_traversal(graph: Graph, start: int) -> list[int]:
    """Return nodes reachable from ``start`` in depth-first preorder.

    An out-of-range ``start`` yields an empty list.
    """
    if not _valid_start(graph, start):
        return []
    visited = [False] * len(graph)
    visited[start] = True
    order = [start]
    stack: list[Iterator[int]] = [iter(graph[start])]
    while stack:
        for neighbor in stack[-1]:
            if not visited[neighbor]:
                visited[neighbor] = True
                order.append(neighbor)
                stack.append(iter(graph[neighbor]))
                break
        else:
            stack.pop()
    return order


def shortest_path_unweighted(graph: Graph, start: int) -> list[int]:
    """Return the fewest edges from ``start`` to each node, -1 if unreachable.

    An out-of-range ``start`` yields -1 for every node.
    """
    distance = [-1] * len(graph)
    if not _valid_start(graph, start):
        return distance
    distance[start] = 0
    queue = deque([start])
    while queue:
        node = queue.popleft()
        for neighbor in graph[node]:
            if distance[neighbor] == -1:
                distance[neighbor] = distance[node] + 1
                queue.append(neighbor)
    return distance


def topological_sort(graph: Graph) -> list[int]:
    """Return a topological order of a directed graph (Kahn's algorithm).

    A graph with a cycle yields an empty list.
    """
    indegree = [0] * len(graph)
    for neighbors in graph:
        for neighbor in neighbors:
            indegree[neighbor] += 1
    queue = deque(node for node, degree in enumerate(indegree) if degree == 0)
    order: list[int] = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for neighbor in graph[node]:
            indegree[neighbor] -= 1
            if indegree[neighbor] == 0:
                queue.append(neighbor)
    if len(order) != len(graph):
        return []
    return order