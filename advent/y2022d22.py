"""Monkey map: walking a board that wraps around flat or folded into a cube."""

import re
from dataclasses import dataclass

RIGHT = (0, 1)
DOWN = (1, 0)
LEFT = (0, -1)
UP = (-1, 0)
DIRECTIONS = (RIGHT, DOWN, LEFT, UP)

TILE_EMPTY = " "
TILE_OPEN = "."
TILE_WALL = "#"
TURN_LEFT = "L"
TURN_RIGHT = "R"

LAYOUT_SIZE = 5
GRID_SIZE = LAYOUT_SIZE + 1
BORDER_EDGES = 14

# Corner numbers of the cube faces; corners 0-3 form the front face.
SIDE_FRONT = (0, 1, 2, 3)
SIDE_UP = (1, 5, 6, 2)
SIDE_DOWN = (4, 0, 3, 7)
SIDE_RIGHT = (3, 2, 6, 7)
SIDE_LEFT = (4, 5, 1, 0)

_PATH = re.compile(r"(?:\d+|[LR])*")
_INSTRUCTION = re.compile(r"\d+|[LR]")


@dataclass(frozen=True)
class Vertex:
    """A cube corner id placed at a point of the layout grid."""

    ident: int
    x: int
    y: int


@dataclass
class Edge:
    """A unit edge on the border of the layout; `pair` is its glued twin's index."""

    v1: Vertex
    v2: Vertex
    pair: int = 0

    def enter_direction(self):
        """Direction of travel when stepping onto the board across this edge."""
        if self.v1.x == self.v2.x:
            return DOWN if self.v1.y < self.v2.y else UP
        return LEFT if self.v1.x < self.v2.x else RIGHT


def rotate_side(cube, side, clockwise):
    """Rotate the corner labels of one face by a quarter turn."""
    cube = list(cube)
    shift = -1 if clockwise else 1
    rotated = [cube[side[(i + shift) % 4]] for i in range(4)]
    for corner, label in zip(side, rotated):
        cube[corner] = label
    return tuple(cube)


def rotate_cube(cube, direction):
    """Roll the cube: 0 up, 1 down, 2 left, 3 right."""
    if direction in (0, 1):
        cube = rotate_side(cube, SIDE_RIGHT, direction == 0)
        cube = rotate_side(cube, SIDE_LEFT, direction == 1)
    elif direction in (2, 3):
        cube = rotate_side(cube, SIDE_UP, direction == 2)
        cube = rotate_side(cube, SIDE_DOWN, direction == 3)
    return tuple(cube)


class Cube:
    """A net of six faces on a 5x5 layout, folded into a cube."""

    def __init__(self):
        self.layout = [[False] * LAYOUT_SIZE for _ in range(LAYOUT_SIZE)]
        self._border = None

    def add_side(self, x, y):
        self.layout[x][y] = True
        self._border = None

    def layout_vertices(self):
        """Cube corner id at every point of the 6x6 layout grid, -1 where none."""
        ids = [[-1] * GRID_SIZE for _ in range(GRID_SIZE)]
        visited = [[False] * LAYOUT_SIZE for _ in range(LAYOUT_SIZE)]

        def inside(x, y):
            return 0 <= x < LAYOUT_SIZE and 0 <= y < LAYOUT_SIZE

        def visit(x, y, corners):
            if not inside(x, y):
                return
            ids[x + 1][y] = corners[0]
            ids[x][y] = corners[1]
            ids[x][y + 1] = corners[2]
            ids[x + 1][y + 1] = corners[3]
            visited[x][y] = True
            neighbours = ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1))
            for roll, (nx, ny) in enumerate(neighbours):
                if not inside(nx, ny) or not self.layout[nx][ny] or visited[nx][ny]:
                    continue
                visit(nx, ny, rotate_cube(corners, roll))

        first = next((y for y, side in enumerate(self.layout[0]) if side), None)
        if first is None:
            raise ValueError("the first row of the layout has no side")
        visit(0, first, tuple(range(8)))
        return ids

    def border(self):
        """The 14 border edges of the net, clockwise, each paired with its twin."""
        if self._border is None:
            ids = self.layout_vertices()
            px, py = 0, next(y for y, v in enumerate(ids[0]) if v != -1)
            edges = []
            facing = 0
            while len(edges) < BORDER_EDGES:
                for _ in DIRECTIONS:
                    dx, dy = DIRECTIONS[facing]
                    x, y = px + dx, py + dy
                    if 0 <= x < GRID_SIZE and 0 <= y < GRID_SIZE and ids[x][y] != -1:
                        edges.append(
                            Edge(Vertex(ids[px][py], px, py), Vertex(ids[x][y], x, y))
                        )
                        px, py = x, y
                        facing = (facing - 1) % len(DIRECTIONS)
                        break
                    facing = (facing + 1) % len(DIRECTIONS)
                else:
                    raise ValueError("layout has no border to follow")

            for i, first in enumerate(edges):
                for j in range(i + 1, len(edges)):
                    second = edges[j]
                    ends1 = {first.v1.ident, first.v2.ident}
                    ends2 = {second.v1.ident, second.v2.ident}
                    if ends1 == ends2:
                        first.pair = j
                        second.pair = i
            self._border = edges
        return self._border

    def go_over_edge(self, x1, y1, x2, y2):
        """The border edge from (x1, y1) to (x2, y2) and the edge it is glued to."""
        border = self.border()
        for edge in border:
            if (edge.v1.x, edge.v1.y, edge.v2.x, edge.v2.y) == (x1, y1, x2, y2):
                return edge, border[edge.pair]
        raise ValueError(f"no border edge ({x1}, {y1}) - ({x2}, {y2})")


class Board:
    """The monkey map: rows of tiles, optionally folded into a cube."""

    def __init__(self, data, cube_size=0):
        self.data = list(data)
        self.cube_size = cube_size
        self._cube = None

    def as_cube(self, size):
        """The same board folded into a cube with faces `size` tiles wide."""
        return Board(self.data, size)

    @property
    def height(self):
        return len(self.data)

    def width(self, row):
        return len(self.data[row])

    def is_empty(self, row, col):
        """True outside the board or on a blank tile."""
        return (
            row < 0
            or row >= self.height
            or col < 0
            or col >= self.width(row)
            or self.data[row][col] == TILE_EMPTY
        )

    def next_tile(self, row, col, dist, direction):
        """Walk up to `dist` tiles, stopping at walls; return (row, col, direction)."""
        for _ in range(dist):
            next_row, next_col = row + direction[0], col + direction[1]
            next_direction = direction
            if self.is_empty(next_row, next_col):
                if self.cube_size > 0:
                    next_row, next_col, next_direction = self.go_over_edge(
                        row, col, direction
                    )
                else:
                    next_row, next_col = self._opposite_side(row, col, direction)
            if self.data[next_row][next_col] == TILE_WALL:
                break
            row, col, direction = next_row, next_col, next_direction
        return row, col, direction

    def _opposite_side(self, row, col, direction):
        if direction == RIGHT:
            col = 0
        elif direction == DOWN:
            row = 0
        elif direction == LEFT:
            col = self.width(row) - 1
        elif direction == UP:
            row = self.height - 1
        while self.is_empty(row, col):
            row += direction[0]
            col += direction[1]
        return row, col

    @property
    def cube(self):
        if self._cube is None:
            if self.cube_size <= 0:
                raise ValueError("board is not folded into a cube")
            size = self.cube_size
            cube = Cube()
            for i, top in enumerate(range(0, self.height, size)):
                for j, left in enumerate(range(0, self.width(top), size)):
                    if not self.is_empty(top, left):
                        cube.add_side(i, j)
            self._cube = cube
        return self._cube

    def go_over_edge(self, row, col, direction):
        """Step off a cube face; return the tile and direction on the glued face."""
        source, target = self.cube.go_over_edge(*self._edge_ends(row, col, direction))
        offset = self._offset_on_edge(row, col, source)
        new_row, new_col = self._apply_offset(
            target, offset, source.v1.ident != target.v1.ident
        )
        return new_row, new_col, target.enter_direction()

    def _edge_ends(self, row, col, direction):
        x, y = row // self.cube_size, col // self.cube_size
        if direction == UP:
            return x, y, x, y + 1
        if direction == RIGHT:
            return x, y + 1, x + 1, y + 1
        if direction == DOWN:
            return x + 1, y + 1, x + 1, y
        if direction == LEFT:
            return x + 1, y, x, y
        raise ValueError(f"bad direction: {direction}")

    def _offset_on_edge(self, row, col, edge):
        x, y = self._edge_end(edge, edge.v1.x, edge.v1.y)
        if row == x:
            return (col - y) * (edge.v2.y - edge.v1.y)
        return (row - x) * (edge.v2.x - edge.v1.x)

    def _apply_offset(self, edge, offset, reverse):
        v1, v2 = (edge.v2, edge.v1) if reverse else (edge.v1, edge.v2)
        row, col = self._edge_end(edge, v1.x, v1.y)
        return row + (v2.x - v1.x) * offset, col + (v2.y - v1.y) * offset

    def _edge_end(self, edge, x, y):
        row, col = x * self.cube_size, y * self.cube_size
        entering = edge.enter_direction()
        if x > edge.v1.x or x > edge.v2.x or entering == UP:
            row -= 1
        if y > edge.v1.y or y > edge.v2.y or entering == LEFT:
            col -= 1
        return row, col


@dataclass
class Actor:
    """The walker: position and facing (an index into DIRECTIONS)."""

    row: int = 0
    col: int = 0
    facing: int = 0

    def set_position(self, row, col, direction):
        self.row, self.col = row, col
        self.facing = DIRECTIONS.index(direction)

    def turn(self, code):
        """Turn 90 degrees: counter-clockwise for 'L', clockwise otherwise."""
        step = -1 if code == TURN_LEFT else 1
        self.facing = (self.facing + step) % len(DIRECTIONS)

    def direction(self):
        return DIRECTIONS[self.facing]


def password(text, cube_size=0):
    """Walk the path over the board; return 1000*row + 4*column + facing."""
    rows = text.rstrip("\n").split("\n")
    if len(rows) < 3 or rows[-2] != "":
        raise ValueError("expected a board, a blank line and a path")
    board = Board(rows[:-2], cube_size)
    path = rows[-1]
    if not _PATH.fullmatch(path):
        raise ValueError(f"bad path: {path!r}")

    actor = Actor()
    while board.is_empty(actor.row, actor.col):
        if actor.col >= board.width(0):
            raise ValueError("the first row has no tiles")
        actor.col += 1

    for token in _INSTRUCTION.findall(path):
        if token in (TURN_LEFT, TURN_RIGHT):
            actor.turn(token)
        else:
            actor.set_position(
                *board.next_tile(actor.row, actor.col, int(token), actor.direction())
            )

    return 1000 * (actor.row + 1) + 4 * (actor.col + 1) + actor.facing