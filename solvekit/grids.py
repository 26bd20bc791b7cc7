"""Algorithms over rectangular grids: paths, searches, regions and bounds."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def unique_paths_with_obstacles(grid: Sequence[Sequence[int]]) -> int:
    """Number of right/down paths from the top-left to the bottom-right cell
    that avoid cells marked 1."""
    cols = len(grid[0])
    previous = [0] * cols
    for i, row in enumerate(grid):
        current = [0] * cols
        for j, cell in enumerate(row):
            if cell == 1:
                continue
            if i == 0 and j == 0:
                current[j] = 1
                continue
            current[j] = previous[j] + (current[j - 1] if j > 0 else 0)
        previous = current
    return previous[-1]


def word_exists(board: Sequence[Sequence[str]], word: str) -> bool:
    """Tell whether ``word`` can be traced through adjacent cells, each used once."""
    rows = len(board)
    cols = len(board[0]) if rows else 0

    def trace(index: int, i: int, j: int, used: set[tuple[int, int]]) -> bool:
        if index == len(word):
            return True
        if not (0 <= i < rows and 0 <= j < cols):
            return False
        if (i, j) in used or board[i][j] != word[index]:
            return False
        used.add((i, j))
        found = any(trace(index + 1, i + di, j + dj, used) for di, dj in _STEPS)
        used.discard((i, j))
        return found

    return any(trace(0, i, j, set()) for i in range(rows) for j in range(cols))


def count_islands(grid: Sequence[Sequence[str]]) -> int:
    """Number of 4-connected regions of "1" cells."""
    rows = len(grid)
    cols = len(grid[0]) if rows else 0
    visited: set[tuple[int, int]] = set()
    count = 0
    for i in range(rows):
        for j in range(cols):
            if grid[i][j] != "1" or (i, j) in visited:
                continue
            count += 1
            visited.add((i, j))
            queue = deque([(i, j)])
            while queue:
                r, c = queue.popleft()
                for dr, dc in _STEPS:
                    nr, nc = r + dr, c + dc
                    if (
                        0 <= nr < rows
                        and 0 <= nc < cols
                        and grid[nr][nc] == "1"
                        and (nr, nc) not in visited
                    ):
                        visited.add((nr, nc))
                        queue.append((nr, nc))
    return count


def flood_fill(image: list[list[int]], sr: int, sc: int, color: int) -> list[list[int]]:
    """Recolour, in place, the 4-connected region holding ``(sr, sc)``; return the image."""
    target = image[sr][sc]
    if target == color:
        return image
    rows, cols = len(image), len(image[0])
    pending = [(sr, sc)]
    while pending:
        r, c = pending.pop()
        if 0 <= r < rows and 0 <= c < cols and image[r][c] == target:
            image[r][c] = color
            pending.extend((r + dr, c + dc) for dr, dc in _STEPS)
    return image


def minimum_area(grid: Sequence[Sequence[int]]) -> int:
    """Area of the smallest axis-aligned rectangle covering every 1, or 0 if none."""
    rows = [i for i, row in enumerate(grid) if any(cell == 1 for cell in row)]
    cols = [j for row in grid for j, cell in enumerate(row) if cell == 1]
    if not rows:
        return 0
    return (rows[-1] - rows[0] + 1) * (max(cols) - min(cols) + 1)