import pytest

from advent.y2024d06 import (
    DOWN,
    OBSTACLE,
    RIGHT,
    UP,
    loop_obstruction_count,
    parse_situation,
    visited_count,
)

EXAMPLE = """....#.....
.........#
..........
..#.......
.......#..
..........
.#..^.....
........#.
#.........
......#...
"""


def test_falls_in_cycle_small():
    s = parse_situation("\n".join([".#..", "...#", "#...", "..#."]))
    assert s.falls_in_cycle(0, 2, DOWN) is True
    assert s.falls_in_cycle(3, 3, UP) is False


def test_falls_in_cycle_larger():
    s = parse_situation(
        "\n".join(
            [
                ".#......",
                ".......#",
                "...#....",
                ".....#..",
                "#.......",
                "....#...",
                "..#.....",
                "......#.",
            ]
        )
    )
    assert s.falls_in_cycle(7, 0, UP) is False
    assert s.falls_in_cycle(1, 0, RIGHT) is True


def test_falls_in_cycle_leaves_board_untouched():
    s = parse_situation("\n".join([".#..", "...#", "#...", "..#."]))
    before = s.copy_board()
    s.falls_in_cycle(0, 2, DOWN)
    assert s.board == before


def test_parse_situation():
    s = parse_situation("#.\n.^\n")
    assert s.guard == (1, 1)
    assert s.board[0][0] == OBSTACLE
    assert len(s.board) == 2


def test_visited_count_example():
    assert visited_count(EXAMPLE) == 41


def test_loop_obstruction_count_example():
    assert loop_obstruction_count(EXAMPLE) == 6


def test_no_guard():
    with pytest.raises(ValueError):
        visited_count("..#\n...\n")