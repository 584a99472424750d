"""Cathode-ray tube: a two-instruction CPU driving a signal and a display."""

SCREEN_WIDTH = 40
FIRST_SAMPLE = 20


def _instructions(lines):
    """Yield (cycles taken, increment of X) for every instruction line."""
    for line in lines:
        if not line:
            continue
        match line.split(" "):
            case ["noop", *_]:
                yield 1, 0
            case ["addx", value, *_]:
                yield 2, int(value)
            case _:
                raise ValueError(f"unknown command: {line!r}")


def run_program(lines):
    """Yield (cycle, X) during every cycle of the program."""
    x = 1
    cycle = 0
    for cycles, increment in _instructions(lines):
        for _ in range(cycles):
            cycle += 1
            yield cycle, x
        x += increment


def signal_strength(text):
    """Sum of cycle * X sampled at cycles 20, 60, 100, ..."""
    return sum(
        cycle * x
        for cycle, x in run_program(text.split("\n"))
        if cycle % SCREEN_WIDTH == FIRST_SAMPLE
    )


def render(text):
    """Draw the CRT image: '#' where the sprite covers the beam, '.' elsewhere."""
    pixels = []
    for cycle, x in run_program(text.split("\n")):
        beam = (cycle - 1) % SCREEN_WIDTH
        pixels.append("#" if abs(beam - x) < 2 else ".")
        if cycle % SCREEN_WIDTH == 0:
            pixels.append("\n")
    return "".join(pixels)