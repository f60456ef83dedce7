"""Graph traversals, shortest paths, spanning trees and grid flood fill."""

from __future__ import annotations

import heapq
from collections import deque
from collections.abc import Iterable, Sequence


def adjacency_from_edges(n: int, edges: Iterable[tuple[int, int]]) -> list[list[int]]:
    """Build an undirected adjacency list for ``n`` vertices from ``(u, v)`` edges."""
    if n < 0:
        raise ValueError("vertex count must be non-negative")
    adjacency: list[list[int]] = [[] for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) names a vertex outside 0..{n - 1}")
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def bfs_matrix(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Breadth-first visiting order over an adjacency matrix with vertices numbered from 1.

    Row and column 0 are not vertices: they are never followed as neighbours.
    """
    size = len(matrix)
    if not 0 <= start < size:
        raise ValueError(f"start vertex {start} is outside the matrix")
    seen = {start}
    order = [start]
    queue = deque([start])
    while queue:
        u = queue.popleft()
        for v in range(1, size):
            if matrix[u][v] == 1 and v not in seen:
                seen.add(v)
                order.append(v)
                queue.append(v)
    return order


def bfs_order(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Breadth-first order over every component, starting each at its lowest vertex."""
    visited = [False] * len(adjacency)
    order: list[int] = []
    for root in range(len(adjacency)):
        if visited[root]:
            continue
        visited[root] = True
        queue = deque([root])
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbour in adjacency[current]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    queue.append(neighbour)
    return order


def dfs_order(adjacency: Sequence[Sequence[int]]) -> list[int]:
    """Depth-first preorder over every component, starting each at its lowest vertex."""
    visited = [False] * len(adjacency)
    order: list[int] = []
    for root in range(len(adjacency)):
        if visited[root]:
            continue
        visited[root] = True
        order.append(root)
        stack = [iter(adjacency[root])]
        while stack:
            for neighbour in stack[-1]:
                if not visited[neighbour]:
                    visited[neighbour] = True
                    order.append(neighbour)
                    stack.append(iter(adjacency[neighbour]))
                    break
            else:
                stack.pop()
    return order


def dijkstra(
    adjacency: Sequence[Sequence[tuple[int, int]]], source: int
) -> list[int | None]:
    """Shortest distances from ``source`` over directed ``(target, weight)`` lists.

    Vertices that cannot be reached get ``None``.
    """
    size = len(adjacency)
    if not 0 <= source < size:
        raise ValueError(f"source vertex {source} is outside the graph")
    distances: list[int | None] = [None] * size
    distances[source] = 0
    done = [False] * size
    heap = [(0, source)]
    while heap:
        dist, vertex = heapq.heappop(heap)
        if done[vertex]:
            continue
        done[vertex] = True
        for target, weight in adjacency[vertex]:
            candidate = dist + weight
            known = distances[target]
            if known is None or candidate < known:
                distances[target] = candidate
                heapq.heappush(heap, (candidate, target))
    return distances


def kruskal(
    vertex_count: int, edges: Iterable[tuple[int, int, int]]
) -> list[tuple[int, int, int]]:
    """Minimum spanning forest as ``(u, v, weight)`` edges, in the order they were chosen."""
    parent = list(range(vertex_count))

    def find(vertex: int) -> int:
        root = vertex
        while parent[root] != root:
            root = parent[root]
        while parent[vertex] != root:
            parent[vertex], vertex = root, parent[vertex]
        return root

    chosen: list[tuple[int, int, int]] = []
    for weight, u, v in sorted((w, u, v) for u, v, w in edges):
        if not (0 <= u < vertex_count and 0 <= v < vertex_count):
            raise ValueError(f"edge ({u}, {v}) names a vertex outside the graph")
        u_root, v_root = find(u), find(v)
        if u_root != v_root:
            chosen.append((u, v, weight))
            parent[u_root] = v_root
    return chosen


def is_star(matrix: Sequence[Sequence[int]]) -> bool:
    """Tell whether an adjacency matrix describes a star graph."""
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("adjacency matrix must be square")
    if size == 0:
        return False
    if size == 1:
        return matrix[0][0] == 0
    if size == 2:
        return (
            matrix[0][0] == 0
            and matrix[0][1] == 1
            and matrix[1][0] == 1
            and matrix[1][1] == 0
        )
    degrees = [sum(1 for cell in row if cell) for row in matrix]
    leaves = sum(1 for degree in degrees if degree == 1)
    centres = sum(1 for degree in degrees if degree == size - 1)
    return leaves == size - 1 and centres == 1


def flood_fill(
    screen: Sequence[Sequence[int]], x: int, y: int, new_color: int
) -> list[list[int]]:
    """Recolour the 4-connected region around ``(x, y)`` and return the new grid."""
    grid = [list(row) for row in screen]
    rows = len(grid)
    if not (0 <= x < rows and 0 <= y < len(grid[x])):
        raise IndexError(f"position ({x}, {y}) is outside the screen")
    old_color = grid[x][y]
    grid[x][y] = new_color
    stack = [(x, y)]
    while stack:
        px, py = stack.pop()
        for nx, ny in ((px + 1, py), (px - 1, py), (px, py + 1), (px, py - 1)):
            if (
                0 <= nx < rows
                and 0 <= ny < len(grid[nx])
                and grid[nx][ny] == old_color
                and grid[nx][ny] != new_color
            ):
                grid[nx][ny] = new_color
                stack.append((nx, ny))
    return grid