import pytest

from advent.y2022d25 import snafu_add, snafu_sum

EXAMPLE = """1=-0-2
12111
2=0=
21
2=01
111
20012
112
1=-1=
1-12
12
1=
122
"""


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("10", "1", "11"),
        ("1=", "2=", "21"),
        ("20", "10", "1=0"),
        ("10", "1=0", "1-0"),
    ],
)
def test_snafu_add(a, b, expected):
    assert snafu_add(a, b) == expected


def test_snafu_add_is_symmetric():
    assert snafu_add("1=0", "10") == snafu_add("10", "1=0")


def test_counting_up_by_one():
    total = "0"
    seen = []
    for _ in range(5):
        total = snafu_add(total, "1")
        seen.append(total)
    assert seen == ["1", "2", "1=", "1-", "10"]


def test_snafu_sum_example():
    assert snafu_sum(EXAMPLE) == "2=-1=0"


def test_bad_digit():
    with pytest.raises(ValueError):
        snafu_add("13", "1")