"""Print queue: page ordering rules and the updates that follow them."""

from functools import cmp_to_key
from itertools import combinations


def parse_manual(text):
    """Return the rules as {page: pages that must follow it} and the updates."""
    lines = text.split("\n")
    try:
        blank = lines.index("")
    except ValueError:
        raise ValueError("no blank line between rules and updates") from None

    followers = {}
    for line in lines[:blank]:
        before, sep, after = line.partition("|")
        if not sep:
            raise ValueError(f"bad rule: {line!r}")
        followers.setdefault(int(before), set()).add(int(after))

    updates = [[int(page) for page in line.split(",")] for line in lines[blank + 1:] if line]
    return followers, updates


def is_valid(update, followers):
    """True if no page comes before a page that is required to precede it."""
    return not any(
        earlier in followers.get(later, ()) for earlier, later in combinations(update, 2)
    )


def correct(update, followers):
    """The update reordered so that it follows the rules."""

    def order(a, b):
        if b in followers.get(a, ()):
            return -1
        if a in followers.get(b, ()):
            return 1
        return 0

    return sorted(update, key=cmp_to_key(order))


def _middle(update):
    return update[len(update) // 2]


def valid_middle_sum(text):
    """Sum of the middle pages of the updates already in order."""
    followers, updates = parse_manual(text)
    return sum(_middle(u) for u in updates if is_valid(u, followers))


def corrected_middle_sum(text):
    """Sum of the middle pages of the out-of-order updates after correction."""
    followers, updates = parse_manual(text)
    return sum(
        _middle(correct(u, followers)) for u in updates if not is_valid(u, followers)
    )