"""Beacon exclusion zone: sensor coverage computed with interval unions."""

import re
from dataclasses import dataclass, field

TUNING_MULTIPLIER = 4000000

_SENSOR = re.compile(
    r"Sensor at x=(-?\d+), y=(-?\d+): closest beacon is at x=(-?\d+), y=(-?\d+)"
)


@dataclass(frozen=True)
class Interval:
    """A closed range of integers [begin, end]."""

    begin: int
    end: int

    def __post_init__(self):
        if self.begin > self.end:
            raise ValueError(
                f"interval begin ({self.begin}) is greater than end ({self.end})"
            )

    def length(self):
        """Number of integers in the interval."""
        return self.end - self.begin + 1


def _distance(p1, p2):
    return abs(p1[0] - p2[0]) + abs(p1[1] - p2[1])


@dataclass
class Sensor:
    """A sensor with the position of its closest beacon."""

    position: tuple
    beacon: tuple
    radius: int = field(init=False)

    def __post_init__(self):
        self.radius = _distance(self.position, self.beacon)

    def coverage_in_row(self, y):
        """The interval this sensor covers in row y, or None if it does not reach it."""
        x, sy = self.position
        dx = self.radius - abs(sy - y)
        if dx < 0:
            return None
        return Interval(x - dx, x + dx)


def union_add(union, interval):
    """Add an interval to a sorted list of disjoint intervals, merging neighbours."""
    union = list(union)
    if not union:
        return [interval]
    if union[0].begin > interval.end + 1:
        return [interval] + union
    if union[-1].end < interval.begin - 1:
        return union + [interval]

    right = next((i for i, u in enumerate(union) if interval.end <= u.end), -1)
    left = next(
        (i for i in reversed(range(len(union))) if interval.begin >= union[i].begin), -1
    )
    if left == -1 and right == -1:
        return [interval]

    left_part, right_part = [], []
    begin, end = interval.begin, interval.end
    if left >= 0:
        cut = left + 1
        if union[left].end + 1 >= interval.begin:
            cut -= 1
            begin = union[left].begin
        left_part = union[:cut]
    if right >= 0:
        cut = right
        if union[right].begin - 1 <= interval.end:
            cut += 1
            end = union[right].end
        right_part = union[cut:]

    return left_part + [Interval(begin, end)] + right_part


def union_remove(union, interval):
    """Remove an interval from a sorted list of disjoint intervals."""
    union = list(union)
    if not union or union[0].begin > interval.end or union[-1].end < interval.begin:
        return union

    left = next(i for i, u in enumerate(union) if u.end >= interval.begin)
    right = next(
        i for i in reversed(range(len(union))) if union[i].begin <= interval.end
    )

    middle = []
    if union[left].begin < interval.begin:
        middle.append(Interval(union[left].begin, interval.begin - 1))
    if union[right].end > interval.end:
        middle.append(Interval(interval.end + 1, union[right].end))

    return union[:left] + middle + union[right + 1:]


def union_size(union):
    """Number of integers covered by the union."""
    return sum(interval.length() for interval in union)


def parse_sensor(line):
    """Parse one sensor report line."""
    match = _SENSOR.fullmatch(line.strip())
    if match is None:
        raise ValueError(f"bad sensor line: {line!r}")
    sx, sy, bx, by = map(int, match.groups())
    return Sensor((sx, sy), (bx, by))


def _sensors(text):
    return [parse_sensor(line) for line in text.split("\n") if line.strip()]


def coverage_in_row(text, row):
    """Positions in the row where a beacon cannot be."""
    row = int(row)
    union = []
    beacons = set()
    for sensor in _sensors(text):
        coverage = sensor.coverage_in_row(row)
        if coverage is None:
            continue
        union = union_add(union, coverage)
        if sensor.beacon[1] == row:
            beacons.add(sensor.beacon[0])
    return union_size(union) - len(beacons)


def inspect_region(text, bound):
    """The (x, y) in [0, bound]² covered by no sensor, or (0, 0) if there is none."""
    bound = int(bound)
    sensors = _sensors(text)
    for y in range(bound + 1):
        union = [Interval(0, bound)]
        for sensor in sensors:
            coverage = sensor.coverage_in_row(y)
            if coverage is not None:
                union = union_remove(union, coverage)
        if union:
            return union[0].begin, y
    return 0, 0


def tuning_frequency(text, bound):
    """x * 4000000 + y of the distress beacon."""
    x, y = inspect_region(text, bound)
    return x * TUNING_MULTIPLIER + y