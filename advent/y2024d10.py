"""Hoof it: hiking trails that climb from height 0 to height 9."""

from collections import deque

BOTTOM = 0
TOP = 9
_DIGITS = "0123456789"


def parse_map(text):
    """Rows of heights; anything that is not a digit is impassable (None)."""
    lines = text.split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    return [[int(c) if c in _DIGITS else None for c in line] for line in lines]


def _uphill(grid, row, col):
    height = grid[row][col]
    if height is None:
        return
    for r, c in ((row - 1, col), (row, col + 1), (row + 1, col), (row, col - 1)):
        if 0 <= r < len(grid) and 0 <= c < len(grid[r]) and grid[r][c] == height + 1:
            yield r, c


def trailhead_score(grid, row, col):
    """Number of distinct summits reachable from this cell."""
    seen = {(row, col)}
    queue = deque([(row, col)])
    summits = 0
    while queue:
        r, c = queue.popleft()
        if grid[r][c] == TOP:
            summits += 1
            continue
        for cell in _uphill(grid, r, c):
            if cell not in seen:
                seen.add(cell)
                queue.append(cell)
    return summits


def trailhead_rating(grid, row, col):
    """Number of distinct hiking trails from this cell to any summit."""
    if grid[row][col] == TOP:
        return 1
    return sum(trailhead_rating(grid, r, c) for r, c in _uphill(grid, row, col))


def _trailheads(grid):
    return ((r, c) for r, line in enumerate(grid) for c, h in enumerate(line) if h == BOTTOM)


def total_score(text):
    """Sum of the scores of all trailheads."""
    grid = parse_map(text)
    return sum(trailhead_score(grid, r, c) for r, c in _trailheads(grid))


def total_rating(text):
    """Sum of the ratings of all trailheads."""
    grid = parse_map(text)
    return sum(trailhead_rating(grid, r, c) for r, c in _trailheads(grid))