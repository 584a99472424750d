"""Treetop tree house: tree visibility and scenic scores on a height grid."""


def parse_grid(text):
    """Split the input into rows of height digits."""
    rows = text.split("\n")
    if rows and rows[-1] == "":
        rows.pop()
    return rows


def _lines_of_sight(grid, row, col):
    column = [line[col] for line in grid]
    return (
        column[:row][::-1],
        column[row + 1:],
        grid[row][:col][::-1],
        grid[row][col + 1:],
    )


def visible(grid, row, col):
    """True if the tree is taller than everything in some direction."""
    height = grid[row][col]
    return any(all(h < height for h in line) for line in _lines_of_sight(grid, row, col))


def count_visible(grid):
    """Number of trees visible from outside the grid."""
    rows, cols = len(grid), len(grid[0])
    inside = sum(visible(grid, r, c) for r in range(1, rows - 1) for c in range(1, cols - 1))
    return (rows + cols - 2) * 2 + inside


def _viewing_distance(height, line):
    distance = 0
    for distance, h in enumerate(line, 1):
        if h >= height:
            break
    return distance


def scenic_score(grid, row, col):
    """Product of the viewing distances in the four directions."""
    height = grid[row][col]
    score = 1
    for line in _lines_of_sight(grid, row, col):
        score *= _viewing_distance(height, line)
    return score


def best_scenic_score(grid):
    """Highest scenic score of any interior tree."""
    rows, cols = len(grid), len(grid[0])
    return max(
        (scenic_score(grid, r, c) for r in range(1, rows - 1) for c in range(1, cols - 1)),
        default=0,
    )