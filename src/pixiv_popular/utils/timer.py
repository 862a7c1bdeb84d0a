"""Wall-clock timing for a whole search run."""

import time


class Stopwatch:
    """Measures elapsed time from entering the ``with`` block.

    Reading ``elapsed`` inside the block gives the running time; after the
    block exits the value is frozen.
    """

    def __init__(self):
        self._start: float | None = None
        self._end: float | None = None

    def __enter__(self) -> "Stopwatch":
        self._start = time.perf_counter()
        self._end = None
        return self

    def __exit__(self, *exc_info) -> None:
        self._end = time.perf_counter()

    @property
    def elapsed(self) -> float:
        if self._start is None:
            raise RuntimeError("Stopwatch has not been started")
        end = self._end if self._end is not None else time.perf_counter()
        return end - self._start


def format_duration(seconds: float) -> str:
    """Format a duration with two decimals in the largest fitting unit.

    >>> format_duration(1.2)
    '1.20s'
    >>> format_duration(0.12345)
    '123.45ms'
    """
    if seconds >= 1:
        return f"{seconds:.2f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.2f}ms"
    if seconds >= 1e-6:
        return f"{seconds * 1e6:.2f}µs"
    return f"{seconds * 1e9:.2f}ns"
