"""Guard gallivant: a guard patrolling a lab and obstructions that trap it in a loop."""

from dataclasses import dataclass
from typing import Optional

UP, RIGHT, DOWN, LEFT = range(4)
DIRECTIONS = ((-1, 0), (0, 1), (1, 0), (0, -1))

OBSTACLE = 1
CHECKED = 1 << 1
TRACES = tuple(1 << bit for bit in range(2, 2 + len(DIRECTIONS)))


def _turn(direction):
    return (direction + 1) % len(DIRECTIONS)


@dataclass
class Situation:
    """The lab floor as bit flags per cell, and the guard's starting cell."""

    board: list
    guard: Optional[tuple] = None

    def copy_board(self):
        """An independent copy of the board."""
        return [row[:] for row in self.board]

    def falls_in_cycle(self, i, j, direction):
        """True if a guard at (i, j) heading `direction` never leaves the lab."""
        board = self.copy_board()
        height, width = len(board), len(board[0])
        while True:
            trace = TRACES[direction]
            if board[i][j] & trace:
                return True
            board[i][j] |= trace
            di, dj = DIRECTIONS[direction]
            ni, nj = i + di, j + dj
            if not (0 <= ni < height and 0 <= nj < width):
                return False
            if board[ni][nj] == OBSTACLE:
                direction = _turn(direction)
                continue
            i, j = ni, nj


def parse_situation(text):
    """Read the map: '#' is an obstacle, '^' the guard facing up."""
    lines = text.split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    if not lines:
        raise ValueError("empty map")
    board = []
    guard = None
    for i, line in enumerate(lines):
        row = []
        for j, mark in enumerate(line):
            if mark == "#":
                row.append(OBSTACLE)
            elif mark == "^":
                row.append(CHECKED)
                guard = (i, j)
            else:
                row.append(0)
        board.append(row)
    return Situation(board, guard)


def _require_guard(situation):
    if situation.guard is None:
        raise ValueError("the map has no guard")
    return situation.guard


def visited_count(text):
    """Distinct cells the guard visits before leaving the lab."""
    situation = parse_situation(text)
    i, j = _require_guard(situation)
    board = situation.board
    height, width = len(board), len(board[0])
    direction = UP
    visited = {(i, j)}
    while True:
        di, dj = DIRECTIONS[direction]
        ni, nj = i + di, j + dj
        if not (0 <= ni < height and 0 <= nj < width):
            break
        if board[ni][nj] == OBSTACLE:
            direction = _turn(direction)
            continue
        i, j = ni, nj
        visited.add((i, j))
    return len(visited)


def loop_obstruction_count(text):
    """Cells where one new obstacle would trap the guard in a loop."""
    situation = parse_situation(text)
    guard = _require_guard(situation)
    board = situation.board
    height, width = len(board), len(board[0])
    i, j = guard
    direction = UP
    count = 0
    while True:
        di, dj = DIRECTIONS[direction]
        ni, nj = i + di, j + dj
        if not (0 <= ni < height and 0 <= nj < width):
            break
        if board[ni][nj] == OBSTACLE:
            direction = _turn(direction)
            continue
        if (ni, nj) != guard and board[ni][nj] != CHECKED:
            board[ni][nj] = OBSTACLE
            if situation.falls_in_cycle(i, j, _turn(direction)):
                count += 1
            board[ni][nj] = CHECKED
        i, j = ni, nj
    return count