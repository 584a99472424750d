import pytest

from advent.y2024d08 import count_antinodes, count_harmonic_antinodes, parse_antenna_map

EXAMPLE = """............
........0...
.....0......
.......0....
....0.......
......A.....
............
............
........A...
.........A..
............
............
"""


def _transpose(text):
    rows = [line for line in text.split("\n") if line]
    return "\n".join("".join(column) for column in zip(*rows))


def test_example_antinodes():
    assert count_antinodes(EXAMPLE) == 14


def test_example_harmonic_antinodes():
    assert count_harmonic_antinodes(EXAMPLE) == 34


def test_parse_antenna_map():
    height, width, antennas = parse_antenna_map("a..\n..b\n")
    assert (height, width) == (2, 3)
    assert antennas == {"a": [(0, 0)], "b": [(1, 2)]}


def test_parse_empty():
    with pytest.raises(ValueError):
        parse_antenna_map("")


def test_harmonic_is_superset():
    assert count_harmonic_antinodes(EXAMPLE) >= count_antinodes(EXAMPLE)


def test_transpose_invariance():
    transposed = _transpose(EXAMPLE)
    assert count_antinodes(transposed) == count_antinodes(EXAMPLE)
    assert count_harmonic_antinodes(transposed) == count_harmonic_antinodes(EXAMPLE)


def test_lone_antenna_adds_nothing():
    lines = EXAMPLE.split("\n")
    lines[0] = "Z" + lines[0][1:]
    with_lone = "\n".join(lines)
    assert count_antinodes(with_lone) == count_antinodes(EXAMPLE)
    assert count_harmonic_antinodes(with_lone) == count_harmonic_antinodes(EXAMPLE)