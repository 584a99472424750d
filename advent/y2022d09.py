"""Rope bridge: follow the positions visited by a rope's tail."""

_DELTAS = {"U": (0, 1), "D": (0, -1), "R": (1, 0), "L": (-1, 0)}


def delta(direction):
    """Unit step for a direction letter."""
    try:
        return _DELTAS[direction]
    except KeyError:
        raise ValueError(f"wrong direction: {direction}") from None


def _sign(value):
    return (value > 0) - (value < 0)


class Rope:
    """A rope of knots whose tail follows the head."""

    def __init__(self, length):
        if length < 1:
            raise ValueError("rope needs at least one knot")
        self.knots = [[0, 0] for _ in range(length)]
        self._visited = {(0, 0)}

    def move_head(self, direction, steps):
        """Move the head step by step and drag the rest of the rope."""
        dx, dy = delta(direction)
        for _ in range(steps):
            self.knots[0][0] += dx
            self.knots[0][1] += dy
            self._pull_tail()

    def _pull_tail(self):
        for leader, knot in zip(self.knots, self.knots[1:]):
            dx, dy = leader[0] - knot[0], leader[1] - knot[1]
            if abs(dx) < 2 and abs(dy) < 2:
                return
            knot[0] += _sign(dx)
            knot[1] += _sign(dy)
        self._visited.add(tuple(self.knots[-1]))

    def tail_visited_count(self):
        """Number of distinct positions the tail has been at."""
        return len(self._visited)


def count_tail_positions(text, length):
    """Run the moves in `text` and count the tail's positions."""
    rope = Rope(length)
    for line in text.split("\n"):
        if not line:
            continue
        direction, steps = line.split(" ")
        rope.move_head(direction, int(steps))
    return rope.tail_visited_count()