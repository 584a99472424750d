"""Supply stacks: crates moved between stacks by a crane."""

import re
from itertools import takewhile

_MOVE = re.compile(r"move (\d+) from (\d+) to (\d+)")


def move_one_by_one(n, source, target):
    """Move n crates one at a time, reversing their order."""
    return source[n:], source[:n][::-1] + target


def move_at_once(n, source, target):
    """Move n crates together, keeping their order."""
    return source[n:], source[:n] + target


class StackSet:
    """Stacks of crates, each listed from the top down."""

    def __init__(self, size, mover):
        self.stacks = [[] for _ in range(size)]
        self.mover = mover

    def add(self, stack, crate):
        """Put a crate below the crates already in the stack."""
        self.stacks[stack].append(crate)

    def move(self, n, source, target):
        """Move n crates between stacks (0-based indices)."""
        new_source, new_target = self.mover(n, self.stacks[source], self.stacks[target])
        self.stacks[target] = new_target
        self.stacks[source] = new_source

    def top_crates(self):
        """The crates on top of every stack."""
        return "".join(stack[0] for stack in self.stacks)


def parse_stacks(rows, mover):
    """Read the drawing; return the stacks and the index of the first move row."""
    header = list(takewhile(lambda row: row != "", rows))
    if len(header) == len(rows):
        raise ValueError("no blank line after the stack drawing")
    count = (len(rows[0]) + 1) // 4
    stacks = StackSet(count, mover)
    for row in header[:-1]:
        for index, crate in enumerate(row[1::4][:count]):
            if crate != " ":
                stacks.add(index, crate)
    return stacks, len(header) + 1


def parse_move(row):
    """Parse "move N from A to B" into (N, A, B)."""
    match = _MOVE.fullmatch(row)
    if match is None:
        raise ValueError(f"bad move: {row!r}")
    n, source, target = match.groups()
    return int(n), int(source), int(target)


def solve(text, mover):
    """Run every move and return the top crates."""
    rows = text.split("\n")
    stacks, offset = parse_stacks(rows, mover)
    for row in rows[offset:]:
        if not row:
            continue
        n, source, target = parse_move(row)
        stacks.move(n, source - 1, target - 1)
    return stacks.top_crates()