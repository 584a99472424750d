"""Blizzard basin: shortest way through a valley of moving blizzards."""

from dataclasses import dataclass

EMPTY = "."
WALL = "#"

_BLIZZARD_MOVES = {"^": (-1, 0), ">": (0, 1), "v": (1, 0), "<": (0, -1)}
_STEPS = ((0, 0), (-1, 0), (0, 1), (1, 0), (0, -1))


@dataclass
class Blizzard:
    """A blizzard at (x, y) moving by (dx, dy) each minute."""

    x: int
    y: int
    dx: int
    dy: int

    def move(self, width, height):
        """Advance one minute, wrapping around the valley walls."""
        self.x += self.dx
        self.y += self.dy
        if self.x == 0:
            self.x = height - 2
        if self.x == height - 1:
            self.x = 1
        if self.y == 0:
            self.y = width - 2
        if self.y == width - 1:
            self.y = 1


class Valley:
    """The walled valley, its entrance and exit, and the blizzards inside."""

    def __init__(self, rows, start, target, blizzards):
        self.rows = list(rows)
        self.height = len(self.rows)
        self.width = len(self.rows[0])
        self.start = start
        self.target = target
        self.blizzards = list(blizzards)
        self._occupied = {(b.x, b.y) for b in self.blizzards}

    def _move_blizzards(self):
        for blizzard in self.blizzards:
            blizzard.move(self.width, self.height)
        self._occupied = {(b.x, b.y) for b in self.blizzards}

    def _is_open(self, x, y):
        if not (0 <= x < self.height and 0 <= y < self.width):
            return False
        inner = 0 < x < self.height - 1 and 0 < y < self.width - 1
        if not inner and self.rows[x][y] != EMPTY:
            return False
        return (x, y) not in self._occupied

    def bfs(self, start, target):
        """Minutes to get from start to target; blizzards keep moving meanwhile."""
        cells = {start}
        step = 0
        while cells:
            self._move_blizzards()
            step += 1
            next_cells = set()
            for x, y in cells:
                for dx, dy in _STEPS:
                    cell = (x + dx, y + dy)
                    if cell == target:
                        return step
                    if cell not in next_cells and self._is_open(*cell):
                        next_cells.add(cell)
            cells = next_cells
        raise ValueError("target cannot be reached")


def parse_valley(text):
    """Read the valley map."""
    rows = text.split("\n")
    while rows and rows[-1] == "":
        rows.pop()
    if len(rows) < 2:
        raise ValueError("valley map is too small")

    start = target = None
    blizzards = []
    last = len(rows) - 1
    for x, line in enumerate(rows):
        for y, mark in enumerate(line):
            if mark == EMPTY:
                if x == 0:
                    start = (x, y)
                if x == last:
                    target = (x, y)
            elif mark != WALL:
                try:
                    dx, dy = _BLIZZARD_MOVES[mark]
                except KeyError:
                    raise ValueError(f"unknown tile {mark!r}") from None
                blizzards.append(Blizzard(x, y, dx, dy))

    if start is None or target is None:
        raise ValueError("valley needs an entrance and an exit")
    return Valley(rows, start, target, blizzards)


def fastest_crossing(text):
    """Minutes to cross the valley once."""
    valley = parse_valley(text)
    return valley.bfs(valley.start, valley.target)


def fastest_round_trip(text):
    """Minutes to cross, go back for the snacks, and cross again."""
    valley = parse_valley(text)
    return (
        valley.bfs(valley.start, valley.target)
        + valley.bfs(valley.target, valley.start)
        + valley.bfs(valley.start, valley.target)
    )