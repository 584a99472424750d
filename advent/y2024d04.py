"""Ceres search: finding XMAS words and X-shaped MAS in a letter grid."""

WORD = "XMAS"
DIRECTIONS = ((-1, -1), (-1, 0), (-1, 1), (0, 1), (1, 1), (1, 0), (1, -1), (0, -1))


def _spells(grid, row, col, dr, dc):
    height, width = len(grid), len(grid[0])
    last = len(WORD) - 1
    if not (0 <= row + dr * last < height and 0 <= col + dc * last < width):
        return False
    return all(
        grid[row + dr * k][col + dc * k] == letter for k, letter in enumerate(WORD)
    )


def count_xmas(grid):
    """Occurrences of XMAS in any of the eight directions; grid is a list of rows."""
    return sum(
        _spells(grid, row, col, dr, dc)
        for row, line in enumerate(grid)
        for col, letter in enumerate(line)
        if letter == WORD[0]
        for dr, dc in DIRECTIONS
    )


def is_x_mas(grid, row, col):
    """True if two MAS words cross diagonally at this interior cell."""
    if grid[row][col] != "A":
        return False
    diagonals = (
        {grid[row - 1][col - 1], grid[row + 1][col + 1]},
        {grid[row - 1][col + 1], grid[row + 1][col - 1]},
    )
    return all(diagonal == {"M", "S"} for diagonal in diagonals)


def count_x_mas(grid):
    """Number of X-shaped MAS crossings in the grid."""
    height, width = len(grid), len(grid[0])
    return sum(
        is_x_mas(grid, row, col)
        for row in range(1, height - 1)
        for col in range(1, width - 1)
    )