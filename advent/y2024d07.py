"""Bridge repair: equations completed with +, * and concatenation."""

from dataclasses import dataclass, field


def _concat(acc, operand):
    multiplier = 10
    while multiplier <= operand:
        multiplier *= 10
    return acc * multiplier + operand


@dataclass
class Equation:
    """A test value and the operands that should produce it."""

    value: int
    operands: list = field(default_factory=list)

    def is_valid(self, use_concat=False):
        """True if some left-to-right choice of operators yields the value."""
        if not self.operands:
            raise ValueError("equation has no operands")
        operands = self.operands

        def check(acc, index):
            if acc > self.value:
                return False
            if index == len(operands):
                return acc == self.value
            operand = operands[index]
            if check(acc + operand, index + 1) or check(acc * operand, index + 1):
                return True
            return use_concat and check(_concat(acc, operand), index + 1)

        return check(operands[0], 1)


def parse_equation(line):
    """Parse "value: a b c"."""
    value, sep, rest = line.partition(": ")
    if not sep:
        raise ValueError(f"bad equation: {line!r}")
    operands = [int(part) for part in rest.split()]
    if not operands:
        raise ValueError(f"equation has no operands: {line!r}")
    return Equation(int(value), operands)


def calibration_total(text, use_concat=False):
    """Sum of the test values of the equations that can be made true."""
    equations = (parse_equation(line) for line in text.split("\n") if line.strip())
    return sum(e.value for e in equations if e.is_valid(use_concat))