"""Unstable diffusion: elves spreading out over a grid in rounds."""

from collections import Counter

ELF = "#"

# Cells to look at for each direction; the middle cell is where the elf steps.
_LOOK_AROUND = (
    ((-1, -1), (-1, 0), (-1, 1)),
    ((1, -1), (1, 0), (1, 1)),
    ((-1, -1), (0, -1), (1, -1)),
    ((-1, 1), (0, 1), (1, 1)),
)


def parse_elves(text):
    """Positions (row, col) of every elf in the scan."""
    return [
        (row, col)
        for row, line in enumerate(text.split("\n"))
        for col, mark in enumerate(line)
        if mark == ELF
    ]


class Simulation:
    """Elves on an unbounded grid and the order in which they consider directions."""

    def __init__(self, elves):
        self.elves = list(elves)
        if len(set(self.elves)) != len(self.elves):
            raise ValueError("two elves share a position")
        self.order = list(_LOOK_AROUND)

    def _proposal(self, elf, occupied):
        x, y = elf
        first_free = None
        crowded = False
        for cells in self.order:
            if any((x + dx, y + dy) in occupied for dx, dy in cells):
                crowded = True
            elif first_free is None:
                first_free = cells[1]
        if not crowded or first_free is None:
            return elf
        return x + first_free[0], y + first_free[1]

    def round(self):
        """Play one round; return whether any elf wanted to move."""
        occupied = set(self.elves)
        proposals = [self._proposal(elf, occupied) for elf in self.elves]
        counts = Counter(proposals)
        wanted_to_move = any(p != elf for p, elf in zip(proposals, self.elves))
        self.elves = [
            proposal if counts[proposal] == 1 else elf
            for proposal, elf in zip(proposals, self.elves)
        ]
        self.order = self.order[1:] + self.order[:1]
        return wanted_to_move

    def empty_ground(self):
        """Empty tiles in the smallest rectangle holding every elf."""
        if not self.elves:
            raise ValueError("no elves")
        rows = [x for x, _ in self.elves]
        cols = [y for _, y in self.elves]
        area = (max(rows) - min(rows) + 1) * (max(cols) - min(cols) + 1)
        return area - len(self.elves)


def empty_after_rounds(text, rounds):
    """Empty ground tiles after the given number of rounds."""
    simulation = Simulation(parse_elves(text))
    for _ in range(rounds):
        simulation.round()
    return simulation.empty_ground()


def rounds_until_stable(text):
    """Number of the first round in which no elf wants to move."""
    simulation = Simulation(parse_elves(text))
    rounds = 1
    while simulation.round():
        rounds += 1
    return rounds