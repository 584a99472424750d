"""Distress signal: comparing nested list packets."""

DIVIDERS = ([[2]], [[6]])


def parse_packet(text):
    """Parse a packet such as "[1,[2,3]]" into nested lists of ints."""
    stack = [[]]
    number = None
    for symbol in text:
        if symbol == "[":
            stack.append([])
        elif symbol in ",]":
            if number is not None:
                stack[-1].append(number)
                number = None
            if symbol == "]":
                if len(stack) < 2:
                    raise ValueError(f"unbalanced packet: {text!r}")
                finished = stack.pop()
                stack[-1].append(finished)
        elif symbol == " ":
            continue
        elif "0" <= symbol <= "9":
            number = (number or 0) * 10 + int(symbol)
        else:
            raise ValueError(f"unexpected {symbol!r} in packet {text!r}")
    if len(stack) != 1 or not stack[0]:
        raise ValueError(f"malformed packet: {text!r}")
    return stack[0][0]


def compare(left, right):
    """Negative if left comes first, positive if right does, zero if equal."""
    if isinstance(left, int) and isinstance(right, int):
        return (left > right) - (left < right)
    if isinstance(left, int):
        left = [left]
    if isinstance(right, int):
        right = [right]
    for a, b in zip(left, right):
        result = compare(a, b)
        if result:
            return result
    return (len(left) > len(right)) - (len(left) < len(right))


def _packets(text):
    return [parse_packet(line) for line in text.split("\n") if line]


def right_order_sum(text):
    """Sum of the 1-based indices of the pairs already in the right order."""
    packets = _packets(text)
    pairs = zip(packets[::2], packets[1::2])
    return sum(index for index, (left, right) in enumerate(pairs, 1) if compare(left, right) < 1)


def decoder_key(text):
    """Product of the positions the divider packets take in the sorted list."""
    packets = _packets(text)
    key = 1
    for index, divider in enumerate(DIVIDERS):
        key *= sum(compare(packet, divider) < 0 for packet in packets) + index + 1
    return key