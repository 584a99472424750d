"""Mull it over: scanning corrupted memory for mul instructions."""

from enum import Enum, auto


class _State(Enum):
    NULL = auto()
    M = auto()
    MU = auto()
    MUL = auto()
    D = auto()
    DO = auto()
    DON = auto()
    DON_ = auto()
    DONT = auto()
    DO_CALL = auto()
    DONT_CALL = auto()
    WAIT_FIRST = auto()
    FIRST = auto()
    WAIT_SECOND = auto()
    SECOND = auto()
    DISABLED = auto()


_OPEN_CALL = {
    _State.MUL: _State.WAIT_FIRST,
    _State.DO: _State.DO_CALL,
    _State.DONT: _State.DONT_CALL,
}


def iter_muls(text, use_do):
    """Yield the argument pairs of every valid mul(a,b).

    With use_do, don't() disables the instructions that follow and do()
    enables them again.
    """
    first = second = 0
    st = _State.NULL
    for c in text:
        if c == "d" and use_do:
            st = _State.D
        elif c == "o" and st is _State.D:
            st = _State.DO
        elif c == "n" and st is _State.DO:
            st = _State.DON
        elif c == "'" and st is _State.DON:
            st = _State.DON_
        elif c == "t" and st is _State.DON_:
            st = _State.DONT
        elif c == "m" and st is not _State.DISABLED:
            st = _State.M
        elif c == "u" and st is _State.M:
            st = _State.MU
        elif c == "l" and st is _State.MU:
            st = _State.MUL
        elif c == "(":
            st = _OPEN_CALL.get(st, st)
        elif c == "," and st is _State.FIRST:
            st = _State.WAIT_SECOND
        elif c == ")":
            if st is _State.SECOND:
                yield first, second
                st = _State.NULL
            elif st is _State.DO_CALL:
                st = _State.NULL
            elif st is _State.DONT_CALL:
                st = _State.DISABLED
        elif "0" <= c <= "9" and st is not _State.DISABLED:
            digit = int(c)
            if st is _State.WAIT_FIRST:
                st, first = _State.FIRST, digit
            elif st is _State.FIRST:
                first = first * 10 + digit
            elif st is _State.WAIT_SECOND:
                st, second = _State.SECOND, digit
            elif st is _State.SECOND:
                second = second * 10 + digit
            else:
                st = _State.NULL
        elif st is not _State.DISABLED:
            st = _State.NULL


def sum_muls(text, use_do):
    """Sum of the products of every valid mul."""
    return sum(a * b for a, b in iter_muls(text, use_do))