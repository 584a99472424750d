"""Historian hysteria: comparing two lists of location ids."""

from collections import Counter


def parse_lists(text):
    """Read the left and right columns as two lists of ints."""
    left, right = [], []
    for line in text.split("\n"):
        if not line.strip():
            continue
        parts = line.split()
        if len(parts) != 2:
            raise ValueError(f"bad line: {line!r}")
        left.append(int(parts[0]))
        right.append(int(parts[1]))
    return left, right


def total_distance(text):
    """Sum of distances between the lists paired up in sorted order."""
    left, right = parse_lists(text)
    return sum(abs(l - r) for l, r in zip(sorted(left), sorted(right)))


def similarity_score(text):
    """Sum of each left number times how often it appears on the right."""
    left, right = parse_lists(text)
    counts = Counter(right)
    return sum(n * counts[n] for n in left)