"""Monkey in the middle: monkeys passing items by worry level."""

import heapq
import math
import operator
import re
from dataclasses import dataclass
from typing import Callable

_OPERATORS = {"*": operator.mul, "+": operator.add}
_OPERATION = re.compile(r"Operation: new = (\S+) (\S+) (\S+)")
_TEST = re.compile(r"Test: divisible by (\d+)")
_ACTION = re.compile(r"If (true|false): throw to monkey (\d+)")
_ITEMS_PREFIX = "Starting items:"


@dataclass
class Monkey:
    """A monkey holding items and its rules for passing them on."""

    items: list
    operation: Callable[[int], int]
    divider: int
    if_true: int
    if_false: int
    inspected: int = 0

    def take_turn(self, relief):
        """Inspect every held item; return (worry level, target monkey) pairs."""
        throws = []
        for item in self.items:
            worry = self.operation(item) // relief
            target = self.if_true if worry % self.divider == 0 else self.if_false
            throws.append((worry, target))
        self.inspected += len(self.items)
        self.items = []
        return throws


def _operand(token):
    if token == "old":
        return lambda old: old
    constant = int(token)
    return lambda old: constant


def _operation(left, symbol, right):
    try:
        function = _OPERATORS[symbol]
    except KeyError:
        raise ValueError(f"unknown operation: {symbol}") from None
    lhs, rhs = _operand(left), _operand(right)
    return lambda old: function(lhs(old), rhs(old))


def _parse_monkey(block):
    lines = [line.strip() for line in block.strip().split("\n")]
    if len(lines) < 6:
        raise ValueError(f"incomplete monkey: {block!r}")
    _, items_line, operation_line, test_line, *action_lines = lines

    if not items_line.startswith(_ITEMS_PREFIX):
        raise ValueError(f"bad items line: {items_line!r}")
    items = [int(v) for v in items_line[len(_ITEMS_PREFIX):].split(",") if v.strip()]

    match = _OPERATION.fullmatch(operation_line)
    if match is None:
        raise ValueError(f"bad operation line: {operation_line!r}")
    operation = _operation(*match.groups())

    match = _TEST.fullmatch(test_line)
    if match is None:
        raise ValueError(f"bad test line: {test_line!r}")
    divider = int(match.group(1))

    targets = {}
    for line in action_lines:
        match = _ACTION.fullmatch(line)
        if match is None:
            raise ValueError(f"bad action line: {line!r}")
        targets[match.group(1)] = int(match.group(2))
    if set(targets) != {"true", "false"}:
        raise ValueError(f"monkey needs both targets: {block!r}")

    return Monkey(items, operation, divider, targets["true"], targets["false"])


def parse_monkeys(text):
    """Parse every monkey description in the input."""
    blocks = re.split(r"\n\s*\n", text.strip())
    return [_parse_monkey(block) for block in blocks if block.strip()]


def play(monkeys, relief, rounds):
    """Play the given number of rounds; return how many items each monkey inspected."""
    modulus = math.prod(monkey.divider for monkey in monkeys)
    for _ in range(rounds):
        for monkey in monkeys:
            for worry, target in monkey.take_turn(relief):
                if relief == 1 and worry > modulus:
                    worry %= modulus
                monkeys[target].items.append(worry)
    return [monkey.inspected for monkey in monkeys]


def monkey_business(text, relief, rounds):
    """Product of the two highest inspection counts."""
    counts = play(parse_monkeys(text), relief, rounds)
    first, second = (heapq.nlargest(2, counts) + [0, 0])[:2]
    return first * second