from advent.y2024d03 import iter_muls, sum_muls

EXAMPLE = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
EXAMPLE_DO = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_iter_muls_example():
    assert list(iter_muls(EXAMPLE, False)) == [(2, 4), (5, 5), (11, 8), (8, 5)]


def test_iter_muls_with_do():
    assert list(iter_muls(EXAMPLE_DO, True)) == [(2, 4), (8, 5)]


def test_sum_example():
    assert sum_muls(EXAMPLE, False) == 161


def test_sum_example_with_do():
    assert sum_muls(EXAMPLE_DO, True) == 48


def test_dont_is_ignored_without_use_do():
    assert list(iter_muls("don't()mul(2,3)", False)) == [(2, 3)]


def test_dont_disables_with_use_do():
    assert list(iter_muls("don't()mul(2,3)", True)) == []


def test_broken_instructions_are_skipped():
    assert list(iter_muls("mul(4*,mul(6,9!mul ( 2 , 4 )", False)) == []


def test_do_enables_again():
    assert list(iter_muls("don't()mul(1,2)do()mul(3,4)", True)) == [(3, 4)]