"""Red-nosed reports: safety of level sequences, with a problem dampener."""

MIN_STEP = 1
MAX_STEP = 3


def _sign(value):
    return (value > 0) - (value < 0)


def _in_step(value):
    return MIN_STEP <= value <= MAX_STEP


def parse_reports(text):
    """One list of levels per non-empty line."""
    return [[int(v) for v in line.split()] for line in text.split("\n") if line.strip()]


def is_safe(report):
    """True if the levels move steadily one way by 1 to 3 each step."""
    direction = 1 if report[1] > report[0] else -1
    return all(_in_step((b - a) * direction) for a, b in zip(report, report[1:]))


def is_safe_with_dampener(report):
    """True if the report is safe once at most one bad level is dropped."""
    n = len(report)
    if n < 3:
        return True

    a = report[1] - report[0]
    b = report[2] - report[1]
    c = report[2] - report[0]
    if n == 3:
        return any(_in_step(abs(k)) for k in (a, b, c))

    trend = sum(_sign(k) for k in (a, b, c, report[3] - report[2], report[3] - report[1]))
    if trend == 0:
        return False
    direction = 1 if trend > 0 else -1

    i = 0
    skipped = False
    while (not skipped and i < n - 2) or (skipped and i < n - 1):
        if _in_step((report[i + 1] - report[i]) * direction):
            i += 1
            continue
        if skipped:
            return False
        over_current = (report[i + 1] - report[i - 1]) * direction if i > 0 else 0
        over_next = (report[i + 2] - report[i]) * direction
        skipped = True
        if _in_step(over_next):
            i += 2
        elif i == 0 or _in_step(over_current):
            i += 1
        else:
            return False
    return True


def count_safe(text):
    """Number of safe reports."""
    return sum(is_safe(report) for report in parse_reports(text))


def count_safe_with_dampener(text):
    """Number of reports safe with the problem dampener."""
    return sum(is_safe_with_dampener(report) for report in parse_reports(text))