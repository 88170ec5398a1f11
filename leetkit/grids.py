"""Two-dimensional grid problems: spiral walks and island counting."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence
from typing import TypeVar

T = TypeVar("T")

_DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))


def spiral_order(matrix: Sequence[Sequence[T]]) -> list[T]:
    """Return the elements of the matrix in clockwise spiral order."""
    result: list[T] = []
    if not matrix:
        return result
    up, down = 0, len(matrix) - 1
    left, right = 0, len(matrix[0]) - 1
    while True:
        result.extend(matrix[up][i] for i in range(left, right + 1))
        up += 1
        if up > down:
            break
        result.extend(matrix[i][right] for i in range(up, down + 1))
        right -= 1
        if right < left:
            break
        result.extend(matrix[down][i] for i in range(right, left - 1, -1))
        down -= 1
        if down < up:
            break
        result.extend(matrix[i][left] for i in range(down, up - 1, -1))
        left += 1
        if left > right:
            break
    return result


def _land(grid: Sequence[Sequence[str]]) -> set[tuple[int, int]]:
    return {
        (r, c)
        for r, row in enumerate(grid)
        for c, cell in enumerate(row)
        if cell == "1"
    }


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Count 4-connected groups of ``'1'`` cells, exploring depth first."""
    land = _land(grid)
    count = 0
    while land:
        stack = [land.pop()]
        while stack:
            r, c = stack.pop()
            for dr, dc in _DIRECTIONS:
                neighbour = (r + dr, c + dc)
                if neighbour in land:
                    land.remove(neighbour)
                    stack.append(neighbour)
        count += 1
    return count


def num_islands_bfs(grid: Sequence[Sequence[str]]) -> int:
    """Count 4-connected groups of ``'1'`` cells, exploring breadth first."""
    land = _land(grid)
    count = 0
    for r, row in enumerate(grid):
        for c, _ in enumerate(row):
            if (r, c) not in land:
                continue
            land.remove((r, c))
            queue = deque([(r, c)])
            while queue:
                x, y = queue.popleft()
                for dx, dy in _DIRECTIONS:
                    neighbour = (x + dx, y + dy)
                    if neighbour in land:
                        land.remove(neighbour)
                        queue.append(neighbour)
            count += 1
    return count