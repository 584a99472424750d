"""Resonant collinearity: antinodes created by pairs of same-frequency antennas."""

from collections import defaultdict
from itertools import combinations

EMPTY = "."


def parse_antenna_map(text):
    """Return (height, width, {frequency: [(row, col), ...]})."""
    lines = text.split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    if not lines:
        raise ValueError("empty map")
    antennas = defaultdict(list)
    for row, line in enumerate(lines):
        for col, mark in enumerate(line):
            if mark != EMPTY:
                antennas[mark].append((row, col))
    return len(lines), len(lines[0]), dict(antennas)


def _pairs(antennas):
    for positions in antennas.values():
        yield from combinations(positions, 2)


def count_antinodes(text):
    """Distinct in-bounds points twice as far from one antenna as from the other."""
    height, width, antennas = parse_antenna_map(text)
    nodes = set()
    for (r1, c1), (r2, c2) in _pairs(antennas):
        dr, dc = r2 - r1, c2 - c1
        for row, col in ((r2 + dr, c2 + dc), (r1 - dr, c1 - dc)):
            if 0 <= row < height and 0 <= col < width:
                nodes.add((row, col))
    return len(nodes)


def count_harmonic_antinodes(text):
    """Distinct in-bounds points in line with any pair of same-frequency antennas."""
    height, width, antennas = parse_antenna_map(text)

    def inside(row, col):
        return 0 <= row < height and 0 <= col < width

    nodes = set()
    for (r1, c1), (r2, c2) in _pairs(antennas):
        nodes.update(((r1, c1), (r2, c2)))
        dr, dc = r2 - r1, c2 - c1
        for (row, col), (sr, sc) in (((r2 + dr, c2 + dc), (dr, dc)), ((r1 - dr, c1 - dc), (-dr, -dc))):
            while inside(row, col):
                nodes.add((row, col))
                row, col = row + sr, col + sc
    return len(nodes)