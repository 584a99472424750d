import string

import pytest

from advent.y2022d03 import badge, compartment_priority, part1, part2, priority

EXAMPLE = "\n".join(
    [
        "vJrwpWtwJgWrhcsFMMfFFhFp",
        "jqHRNqRjqzjGDLGLrsFMfFZSrLrFZsSL",
        "PmmdzqPrVvPwwTWBwg",
        "wMqvLMZHhHMvwLHjbvcjnnSBnvTQFn",
        "ttgJtRGJQctTZtZT",
        "CrZsJsPPZsGzwwsLwLmpwMDw",
    ]
) + "\n"


def test_priority_bases():
    assert priority("a") == 1
    assert priority("A") == 27


def test_priorities_are_consecutive():
    letters = string.ascii_lowercase + string.ascii_uppercase
    assert [priority(c) for c in letters] == list(range(1, len(letters) + 1))


def test_compartment_priority_uses_shared_item():
    assert compartment_priority("abcAxyzA") == priority("A")


def test_compartment_priority_ignores_same_half_duplicates():
    assert compartment_priority("aabc") == 0


def test_badge_finds_common_item():
    assert badge(["abc", "cde", "fgc"]) == "c"


def test_badge_without_common_item_raises():
    with pytest.raises(ValueError):
        badge(["ab", "cd", "ef"])


def test_part1_example():
    assert part1(EXAMPLE) == 157


def test_part2_example():
    assert part2(EXAMPLE) == 70


def test_part2_small_group():
    assert part2("abc\ncde\nfgc\n") == priority("c")