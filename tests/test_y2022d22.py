import pytest

from advent.y2022d22 import (
    DOWN,
    LEFT,
    RIGHT,
    SIDE_FRONT,
    UP,
    Actor,
    Board,
    Cube,
    Edge,
    Vertex,
    password,
    rotate_cube,
    rotate_side,
)

CROSS_ROWS = [
    "     .....          ",
    "     .....          ",
    "     .....          ",
    "     .....          ",
    "     .....          ",
    "....................",
    "....................",
    "....................",
    "....................",
    "....................",
    "          .....     ",
    "          .....     ",
    "          .....     ",
    "          .....     ",
    "          .....     ",
]

EXAMPLE = """        ...#
        .#..
        #...
        ....
...#.......#
........#...
..#....#....
..........#.
        ...#....
        .....#..
        .#......
        ......#.

10R5L5R10L4R5L5
"""


@pytest.mark.parametrize(
    "start, end",
    [
        ((0, 6, UP), (5, 18, DOWN)),
        ((4, 5, LEFT), (5, 4, DOWN)),
        ((9, 0, LEFT), (9, 19, LEFT)),
        ((9, 0, DOWN), (14, 14, UP)),
    ],
)
def test_go_over_edge(start, end):
    board = Board(CROSS_ROWS).as_cube(5)
    assert board.go_over_edge(*start) == end


def test_rotate_side():
    cube = tuple(range(8))
    assert rotate_side(cube, SIDE_FRONT, True) == (3, 0, 1, 2, 4, 5, 6, 7)
    assert rotate_side(cube, SIDE_FRONT, False) == (1, 2, 3, 0, 4, 5, 6, 7)


@pytest.mark.parametrize("direction", [0, 1, 2, 3])
def test_rotate_cube_keeps_corners(direction):
    assert sorted(rotate_cube(tuple(range(8)), direction)) == list(range(8))


@pytest.mark.parametrize(
    "layout, expected",
    [
        (
            [(0, 1), (1, 0), (1, 1), (1, 2), (1, 3), (2, 2)],
            [
                [-1, 1, 2, -1, -1, -1],
                [1, 0, 3, 2, 1, -1],
                [5, 4, 7, 6, 5, -1],
                [-1, -1, 4, 5, -1, -1],
                [-1, -1, -1, -1, -1, -1],
                [-1, -1, -1, -1, -1, -1],
            ],
        ),
        (
            [(0, 0), (0, 1), (0, 2), (1, 2), (1, 3), (1, 4)],
            [
                [1, 2, 6, 5, -1, -1],
                [0, 3, 7, 4, 5, 6],
                [-1, -1, 3, 0, 1, 2],
                [-1, -1, -1, -1, -1, -1],
                [-1, -1, -1, -1, -1, -1],
                [-1, -1, -1, -1, -1, -1],
            ],
        ),
    ],
)
def test_layout_vertices(layout, expected):
    cube = Cube()
    for x, y in layout:
        cube.add_side(x, y)
    assert cube.layout_vertices() == expected


def _edge(a, b, pair):
    return Edge(Vertex(*a), Vertex(*b), pair)


def test_border():
    cube = Cube()
    for x, y in [(0, 1), (1, 0), (1, 1), (1, 2), (1, 3), (2, 2)]:
        cube.add_side(x, y)
    expected = [
        _edge((1, 0, 1), (2, 0, 2), 3),
        _edge((2, 0, 2), (3, 1, 2), 2),
        _edge((3, 1, 2), (2, 1, 3), 1),
        _edge((2, 1, 3), (1, 1, 4), 0),
        _edge((1, 1, 4), (5, 2, 4), 11),
        _edge((5, 2, 4), (6, 2, 3), 6),
        _edge((6, 2, 3), (5, 3, 3), 5),
        _edge((5, 3, 3), (4, 3, 2), 10),
        _edge((4, 3, 2), (7, 2, 2), 9),
        _edge((7, 2, 2), (4, 2, 1), 8),
        _edge((4, 2, 1), (5, 2, 0), 7),
        _edge((5, 2, 0), (1, 1, 0), 4),
        _edge((1, 1, 0), (0, 1, 1), 13),
        _edge((0, 1, 1), (1, 0, 1), 12),
    ]
    assert cube.border() == expected


def test_cube_go_over_missing_edge_raises():
    cube = Cube()
    cube.add_side(0, 0)
    with pytest.raises(ValueError):
        cube.go_over_edge(4, 4, 4, 5)


def test_enter_direction():
    assert _edge((0, 0, 0), (1, 0, 1), 0).enter_direction() == DOWN
    assert _edge((0, 0, 1), (1, 0, 0), 0).enter_direction() == UP
    assert _edge((0, 0, 0), (1, 1, 0), 0).enter_direction() == LEFT
    assert _edge((0, 1, 0), (1, 0, 0), 0).enter_direction() == RIGHT


def test_actor_turns_wrap():
    actor = Actor()
    actor.turn("L")
    assert actor.direction() == UP
    actor.turn("R")
    actor.turn("R")
    assert actor.direction() == DOWN


def test_actor_set_position():
    actor = Actor()
    actor.set_position(3, 4, LEFT)
    assert (actor.row, actor.col, actor.direction()) == (3, 4, LEFT)


def test_flat_wrap_around():
    board = Board(CROSS_ROWS)
    assert board.next_tile(0, 6, 1, UP) == (9, 6, UP)


def test_walls_stop_walking():
    board = Board(["..#.."])
    assert board.next_tile(0, 0, 10, RIGHT) == (0, 1, RIGHT)


def test_example_flat_password():
    assert password(EXAMPLE) == 6032


def test_flat_password_wraps():
    text = "\n".join(CROSS_ROWS) + "\n\n1L1"
    assert password(text) == 10031


def test_cube_password_crosses_edge():
    text = "\n".join(CROSS_ROWS) + "\n\n1L1"
    assert password(text, 5) == 6077


def test_missing_path_raises():
    with pytest.raises(ValueError):
        password("....\n....\n")


def test_bad_path_raises():
    with pytest.raises(ValueError):
        password("....\n\n1X2")