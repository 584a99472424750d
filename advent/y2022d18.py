"""Boiling boulders: surface area of a lava droplet made of unit cubes."""

from collections import Counter, deque

_NEIGHBOURS = (
    (-1, 0, 0), (1, 0, 0),
    (0, -1, 0), (0, 1, 0),
    (0, 0, -1), (0, 0, 1),
)
FACES = len(_NEIGHBOURS)


def _adjacent(cube):
    x, y, z = cube
    return ((x + dx, y + dy, z + dz) for dx, dy, dz in _NEIGHBOURS)


def parse_cubes(text):
    """Read "x,y,z" lines into a list of (x, y, z) tuples."""
    cubes = []
    for line in text.split("\n"):
        if not line.strip():
            continue
        parts = line.split(",")
        if len(parts) != 3:
            raise ValueError(f"bad cube: {line!r}")
        cubes.append(tuple(int(part) for part in parts))
    return cubes


def surface_area(cubes):
    """Faces of the cubes that do not touch another cube."""
    cubes = list(cubes)
    counts = Counter(cubes)
    touching = sum(counts[neighbour] for cube in cubes for neighbour in _adjacent(cube))
    return FACES * len(cubes) - touching


def exterior_surface_area(cubes):
    """Faces reachable by water flowing around the droplet from outside."""
    lava = set(cubes)
    if not lava:
        raise ValueError("no cubes")
    lows = [min(cube[axis] for cube in lava) - 1 for axis in range(3)]
    highs = [max(cube[axis] for cube in lava) + 1 for axis in range(3)]

    start = tuple(highs)
    seen = {start}
    queue = deque([start])
    surface = 0
    while queue:
        cell = queue.popleft()
        for neighbour in _adjacent(cell):
            if not all(lo <= v <= hi for lo, v, hi in zip(lows, neighbour, highs)):
                continue
            if neighbour in lava:
                surface += 1
                continue
            if neighbour in seen:
                continue
            seen.add(neighbour)
            queue.append(neighbour)
    return surface