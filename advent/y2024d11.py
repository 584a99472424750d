"""Plutonian pebbles: counting stones that change every time you blink."""

MULTIPLIER = 2024


def blink(value):
    """The stones one engraved stone turns into after a blink."""
    if value == "0":
        return ("1",)
    if len(value) % 2 == 0:
        half = len(value) // 2
        return value[:half], value[half:].lstrip("0") or "0"
    return (str(int(value) * MULTIPLIER),)


class StoneCounter:
    """Counts descendants of a stone, remembering results already computed."""

    def __init__(self):
        self._cache = {}

    def count(self, value, blinks):
        """Number of stones one stone becomes after `blinks` blinks."""
        if blinks < 0:
            raise ValueError("blinks must not be negative")
        if not value:
            return 0
        if blinks == 0:
            return 1
        key = (value, blinks)
        if key not in self._cache:
            self._cache[key] = sum(self.count(stone, blinks - 1) for stone in blink(value))
        return self._cache[key]


def count_stones(text, blinks):
    """Total number of stones after blinking at the whole line of stones."""
    counter = StoneCounter()
    return sum(counter.count(value, blinks) for value in text.split())