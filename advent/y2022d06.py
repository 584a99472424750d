"""Tuning trouble: find the end of the first run of distinct characters."""


def marker_end(data, size):
    """Position just past the first `size` distinct symbols, or 0 if none."""
    window = []
    for offset, symbol in enumerate(data):
        if symbol in window:
            window = window[window.index(symbol) + 1:]
        window.append(symbol)
        if len(window) >= size:
            return offset + 1
    return 0