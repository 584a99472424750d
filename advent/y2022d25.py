"""Full of hot air: adding balanced base-five (SNAFU) numbers."""

from itertools import zip_longest

BASE = 5
MIN_DIGIT = -2
MAX_DIGIT = 2
DIGITS = "=-012"
_VALUES = {digit: value for value, digit in enumerate(DIGITS, MIN_DIGIT)}


def _value(digit):
    try:
        return _VALUES[digit]
    except KeyError:
        raise ValueError(f"bad SNAFU digit: {digit!r}") from None


def snafu_add(a, b):
    """Sum of two SNAFU numbers, computed digit by digit."""
    if len(a) < len(b):
        a, b = b, a
    digits = []
    carry = 0
    for da, db in zip_longest(reversed(a), reversed(b), fillvalue="0"):
        d = _value(da) + _value(db) + carry
        carry = 0
        if d > MAX_DIGIT:
            carry, d = 1, d - BASE
        elif d < MIN_DIGIT:
            carry, d = -1, d + BASE
        digits.append(DIGITS[d - MIN_DIGIT])
    if carry:
        digits.append(DIGITS[carry - MIN_DIGIT])
    return "".join(reversed(digits))


def snafu_sum(text):
    """Sum of every SNAFU number in the input, one per line."""
    total = "0"
    for line in text.split("\n"):
        if line:
            total = snafu_add(total, line)
    return total