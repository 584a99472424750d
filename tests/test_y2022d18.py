import itertools

import pytest

from advent.y2022d18 import exterior_surface_area, parse_cubes, surface_area

EXAMPLE = """2,2,2
1,2,2
3,2,2
2,1,2
2,3,2
2,2,1
2,2,3
2,2,4
2,2,6
1,2,5
3,2,5
2,1,5
2,3,5
"""


def _solid():
    return list(itertools.product(range(3), repeat=3))


def _shell():
    return [cube for cube in _solid() if cube != (1, 1, 1)]


def test_example_surface():
    assert surface_area(parse_cubes(EXAMPLE)) == 64


def test_example_exterior():
    assert exterior_surface_area(parse_cubes(EXAMPLE)) == 58


def test_single_cube():
    cube = [(1, 1, 1)]
    assert surface_area(cube) == 6
    assert exterior_surface_area(cube) == surface_area(cube)


def test_parse_cubes():
    assert parse_cubes("1,2,3\n4,5,6\n") == [(1, 2, 3), (4, 5, 6)]


def test_parse_error():
    with pytest.raises(ValueError):
        parse_cubes("1,2\n")


def test_hollow_shell_hides_inner_faces():
    shell, solid = _shell(), _solid()
    assert exterior_surface_area(shell) == surface_area(solid)
    assert exterior_surface_area(solid) == surface_area(solid)
    assert surface_area(shell) - exterior_surface_area(shell) == surface_area([(1, 1, 1)])


def test_translation_invariance():
    cubes = parse_cubes(EXAMPLE)
    moved = [(x + 5, y + 7, z + 9) for x, y, z in cubes]
    assert surface_area(moved) == surface_area(cubes)
    assert exterior_surface_area(moved) == exterior_surface_area(cubes)


def test_exterior_not_larger_than_surface():
    cubes = parse_cubes(EXAMPLE)
    assert exterior_surface_area(cubes) <= surface_area(cubes)


def test_exterior_of_nothing():
    with pytest.raises(ValueError):
        exterior_surface_area([])