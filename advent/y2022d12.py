"""Hill climbing: shortest paths on a height map."""

from collections import deque

UNREACHABLE = -1


class HeightMap:
    """A grid of elevations with a start and a target cell."""

    def __init__(self, heights, start, target):
        self.heights = heights
        self.start = start
        self.target = target
        self._lengths = None

    def path_lengths(self):
        """Steps from every cell to the target, or -1 where unreachable."""
        if self._lengths is None:
            heights = self.heights
            rows, cols = len(heights), len(heights[0])
            lengths = [[UNREACHABLE] * cols for _ in range(rows)]
            row, col = self.target
            lengths[row][col] = 0
            queue = deque([self.target])
            while queue:
                row, col = queue.popleft()
                for nrow, ncol in ((row - 1, col), (row, col + 1), (row + 1, col), (row, col - 1)):
                    if not (0 <= nrow < rows and 0 <= ncol < cols):
                        continue
                    if lengths[nrow][ncol] >= 0:
                        continue
                    if heights[row][col] > heights[nrow][ncol] + 1:
                        continue
                    lengths[nrow][ncol] = lengths[row][col] + 1
                    queue.append((nrow, ncol))
            self._lengths = lengths
        return self._lengths

    def shortest_from_start(self):
        """Fewest steps from the start to the target."""
        row, col = self.start
        return self.path_lengths()[row][col]

    def shortest_from_any_a(self):
        """Fewest steps from any lowest cell to the target."""
        lengths = self.path_lengths()
        from_start = self.shortest_from_start()
        lowest = ord("a")
        candidates = (
            length
            for height_row, length_row in zip(self.heights, lengths)
            for height, length in zip(height_row, length_row)
            if height == lowest and 0 <= length < from_start
        )
        return min(candidates, default=from_start)


def parse_heightmap(text):
    """Read the grid; S is elevation a, E is elevation z."""
    lines = text.split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    if not lines:
        raise ValueError("empty height map")

    heights = []
    start = target = None
    for row, line in enumerate(lines):
        height_row = []
        for col, mark in enumerate(line):
            if mark == "S":
                start, mark = (row, col), "a"
            elif mark == "E":
                target, mark = (row, col), "z"
            height_row.append(ord(mark))
        heights.append(height_row)

    if start is None or target is None:
        raise ValueError("height map needs both S and E")
    return HeightMap(heights, start, target)