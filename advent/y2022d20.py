"""Grove positioning system: mixing an encrypted circular list of numbers."""

GROVE_OFFSETS = (1000, 2000, 3000)
DECRYPTION_KEY = 811589153


def mix(values, rounds=1):
    """Mix the numbers `rounds` times and return them in their final circular order.

    Every number moves forward (or backward, if negative) by its own value,
    in the order the numbers were originally given.
    """
    values = list(values)
    count = len(values)
    if count < 2:
        raise ValueError("need at least two numbers to mix")
    order = list(range(count))
    for _ in range(rounds):
        for index, value in enumerate(values):
            position = order.index(index)
            order.pop(position)
            order.insert((position + value) % (count - 1), index)
    return [values[index] for index in order]


def grove_coordinates(text, rounds=1, key=1):
    """Sum of the numbers 1000, 2000 and 3000 places after zero once mixed."""
    values = [int(line) * key for line in text.split("\n") if line.strip()]
    mixed = mix(values, rounds)
    try:
        zero = mixed.index(0)
    except ValueError:
        raise ValueError("the list holds no zero") from None
    return sum(mixed[(zero + offset) % len(mixed)] for offset in GROVE_OFFSETS)