"""Camp cleanup: section assignment pairs that contain or overlap each other."""


def _parse_range(text):
    begin, end = text.split("-")
    return int(begin), int(end)


def parse_row(row):
    """Parse "a-b,c-d" into two (begin, end) pairs."""
    first, second = row.split(",")
    return _parse_range(first), _parse_range(second)


def fully_contain(r1, r2):
    """True if one range lies wholly inside the other."""
    return r1[0] >= r2[0] and r1[1] <= r2[1] or r2[0] >= r1[0] and r2[1] <= r1[1]


def have_overlap(r1, r2):
    """True if the two ranges share at least one section."""
    if r1[0] > r2[0]:
        r1, r2 = r2, r1
    return r1[1] >= r2[0]


def _rows(text):
    return (parse_row(line) for line in text.split("\n") if line)


def part1(text):
    """Number of pairs where one range fully contains the other."""
    return sum(fully_contain(r1, r2) for r1, r2 in _rows(text))


def part2(text):
    """Number of pairs whose ranges overlap."""
    return sum(have_overlap(r1, r2) for r1, r2 in _rows(text))