"""Elapsed-time measurement and small sequence helpers."""

import time


class Chronometer:
    """Measures the milliseconds between a start and a stop."""

    def __init__(self):
        self._started_at = None

    def start(self):
        """Begin (or restart) timing."""
        self._started_at = time.perf_counter()

    def stop(self):
        """Return elapsed milliseconds since start, or -1.0 if not started."""
        if self._started_at is None:
            return -1.0
        elapsed = (time.perf_counter() - self._started_at) * 1000.0
        self._started_at = None
        return elapsed


def swap(values, i, j):
    """Exchange the items at positions i and j of a mutable sequence."""
    values[i], values[j] = values[j], values[i]


def seq_to_str(values):
    """Render a sequence as "[a, b, c]"."""
    return "[" + ", ".join(str(value) for value in values) + "]"