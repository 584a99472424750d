"""Pyroclastic flow: rocks pushed by jets falling into a narrow chamber."""

WIDTH = 7
NEW_FIGURE_GAP = 3
NEW_FIGURE_LEFT = 2
WIND_LEFT = "<"
WIND_RIGHT = ">"

# Each form lists its rows from top to bottom as bit masks.
FORM_HOR_LINE = (0b1111,)
FORM_PLUS = (0b010, 0b111, 0b010)
FORM_ANGLE = (0b001, 0b001, 0b111)
FORM_VERT_LINE = (1, 1, 1, 1)
FORM_BOX = (0b11, 0b11)
FORMS = (FORM_HOR_LINE, FORM_PLUS, FORM_ANGLE, FORM_VERT_LINE, FORM_BOX)


def _form_width(form):
    return max(line.bit_length() for line in form)


class Figure:
    """A falling rock with its rows precomputed for every horizontal shift."""

    def __init__(self, form, width=WIDTH, top=0, left=0):
        positions = width - _form_width(form) + 1
        if positions < 1:
            raise ValueError("form is wider than the chamber")
        self.shifts = [
            tuple(line << (positions - i - 1) for line in form) for i in range(positions)
        ]
        self.top = top
        self.shift = left
        self.height = len(form)

    @property
    def lines(self):
        """Row masks at the current shift, top first."""
        return self.shifts[self.shift]

    def move_down(self):
        self.top -= 1

    def move_left(self):
        """Move one column left if the wall allows; report whether it moved."""
        if self.shift > 0:
            self.shift -= 1
            return True
        return False

    def move_right(self):
        """Move one column right if the wall allows; report whether it moved."""
        if self.shift < len(self.shifts) - 1:
            self.shift += 1
            return True
        return False


class FigureCycle:
    """Hands out the same figures over and over in a fixed order."""

    def __init__(self, width=WIDTH, forms=FORMS):
        self.figures = [Figure(form, width, len(form) - 1) for form in forms]
        self._current = 0

    def next_figure(self):
        figure = self.figures[self._current]
        self._current = (self._current + 1) % len(self.figures)
        return figure


def _intersects(top, lines, stack):
    bottom = top - len(lines) + 1
    return any(
        stack[row] & lines[top - row]
        for row in range(bottom, min(len(stack), top + 1))
    )


class Simulation:
    """The chamber: a stack of settled rows and the jets that push falling rocks."""

    def __init__(self, width, new_figure_gap, new_figure_left, winds, figures):
        if not winds:
            raise ValueError("no jets")
        self.width = width
        self.new_figure_gap = new_figure_gap
        self.new_figure_left = new_figure_left
        self.winds = winds
        self.figures = figures
        self.stack = []
        self._wind = 0

    def stack_height(self):
        """Height of the tower of settled rocks."""
        return len(self.stack)

    def drop_next_figure(self):
        """Drop the next rock until it comes to rest on the tower."""
        figure = self.figures.next_figure()
        figure.top = len(self.stack) + self.new_figure_gap + figure.height - 1
        figure.shift = self.new_figure_left
        while True:
            self._blow_wind(figure)
            if not self._can_move_down(figure):
                break
            figure.move_down()
        self._add_to_stack(figure)

    def _blow_wind(self, figure):
        wind = self.winds[self._wind]
        self._wind = (self._wind + 1) % len(self.winds)
        shift, rollback = figure.move_left, figure.move_right
        if wind == WIND_RIGHT:
            shift, rollback = rollback, shift
        if shift() and _intersects(figure.top, figure.lines, self.stack):
            rollback()

    def _can_move_down(self, figure):
        return figure.top >= figure.height and not _intersects(
            figure.top - 1, figure.lines, self.stack
        )

    def _add_to_stack(self, figure):
        while len(self.stack) <= figure.top:
            self.stack.append(0)
        for i, line in enumerate(figure.lines):
            self.stack[figure.top - i] |= line

    def render(self):
        """The tower as text, top row first, with a floor of dashes."""
        rows = [
            "".join("#" if line & (1 << j) else "." for j in reversed(range(self.width)))
            for line in reversed(self.stack)
        ]
        rows.append("-" * self.width)
        return "\n".join(rows)


def tower_height(winds, steps):
    """Height of the tower after `steps` rocks have fallen."""
    winds = winds.strip()
    simulation = Simulation(
        WIDTH, NEW_FIGURE_GAP, NEW_FIGURE_LEFT, winds, FigureCycle(WIDTH, FORMS)
    )
    for _ in range(steps):
        simulation.drop_next_figure()
    return simulation.stack_height()