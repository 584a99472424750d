"""Rucksack reorganisation: priorities of misplaced items and group badges."""

from itertools import zip_longest

GROUP_SIZE = 3
LOWER_CASE_PRIORITY_A = 1
UPPER_CASE_PRIORITY_A = 27


def _lines(text):
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return lines


def priority(item):
    """Priority of an item: a-z are 1..26, A-Z are 27..52."""
    if item <= "Z":
        return UPPER_CASE_PRIORITY_A + ord(item) - ord("A")
    return LOWER_CASE_PRIORITY_A + ord(item) - ord("a")


def compartment_priority(line):
    """Sum of priorities of the items found in both halves of a rucksack."""
    half = len(line) // 2
    return sum(priority(item) for item in set(line[:half]) & set(line[half:]))


def badge(group):
    """The item that every rucksack of the group carries."""
    if not group:
        raise ValueError("empty group")
    common = set.intersection(*(set(rucksack) for rucksack in group))
    if not common:
        raise ValueError("group has no common item")
    return min(common)


def part1(text):
    """Total priority of items misplaced between compartments."""
    return sum(compartment_priority(line) for line in _lines(text))


def part2(text):
    """Total priority of the badges of every group of three elves."""
    lines = _lines(text)
    groups = zip_longest(*[iter(lines)] * GROUP_SIZE, fillvalue="")
    return sum(priority(badge(group)) for group in groups)