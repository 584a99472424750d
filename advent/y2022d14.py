"""Regolith reservoir: sand falling into a cave slice."""

from enum import Enum

SAND_SOURCE = (500, 0)


class Cell(Enum):
    AIR = "."
    ROCK = "#"
    SAND = "o"


def parse_path(line):
    """Parse "x,y -> x,y -> ..." into a list of (x, y) points."""
    points = []
    for point in line.split(" -> "):
        x, y = point.split(",")
        points.append((int(x), int(y)))
    return points


class RockSlice:
    """A vertical slice of cave with rock paths and an optional floor."""

    def __init__(self, paths, floor_at=0, sand_source=SAND_SOURCE):
        paths = [list(path) for path in paths]
        if not paths or not all(paths):
            raise ValueError("no rock paths")
        points = [point for path in paths for point in path]
        min_x = min(x for x, _ in points)
        max_x = max(x for x, _ in points)
        max_y = max(y for _, y in points)
        if floor_at > 0:
            max_y += floor_at
            spread = max_y - sand_source[1]
            min_x = min(min_x, sand_source[0] - spread)
            max_x = max(max_x, sand_source[0] + spread)
            paths.append([(min_x, max_y), (max_x, max_y)])

        self.sand_source = sand_source
        self.min_x = min_x
        self.grid = [[Cell.AIR] * (max_x - min_x + 1) for _ in range(max_y + 1)]
        for path in paths:
            self._add_path(path)

    def _set(self, x, y, cell):
        self.grid[y][x - self.min_x] = cell

    def _add_path(self, path):
        for (x1, y1), (x2, y2) in zip(path, path[1:]):
            if x1 == x2:
                for y in range(min(y1, y2), max(y1, y2) + 1):
                    self._set(x1, y, Cell.ROCK)
            else:
                for x in range(min(x1, x2), max(x1, x2) + 1):
                    self._set(x, y1, Cell.ROCK)

    def _inside(self, x, y):
        return y < len(self.grid) - 1 and 0 < x < len(self.grid[0]) - 1

    def _next_sand(self):
        """Drop one unit; return (came to rest, x, y)."""
        x, y = self.sand_source[0] - self.min_x, self.sand_source[1]
        while self._inside(x, y):
            below = self.grid[y + 1]
            for dx in (0, -1, 1):
                if below[x + dx] is Cell.AIR:
                    x += dx
                    y += 1
                    break
            else:
                break
        return self._inside(x, y), x + self.min_x, y

    def fill_with_sand(self):
        """Pour sand until it falls away or blocks the source; return units at rest."""
        count = 0
        while True:
            rest, x, y = self._next_sand()
            if not rest:
                break
            self._set(x, y, Cell.SAND)
            count += 1
            if y == self.sand_source[1]:
                break
        return count

    def render(self):
        """The slice as text: '.' air, '#' rock, 'o' sand."""
        return "\n".join("".join(cell.value for cell in row) for row in self.grid)


def count_resting_sand(text, floor_at=0):
    """Units of sand at rest; a positive floor_at adds a floor that far below the lowest rock."""
    paths = [parse_path(line) for line in text.split("\n") if line]
    return RockSlice(paths, floor_at).fill_with_sand()