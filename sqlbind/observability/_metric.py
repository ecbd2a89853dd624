"""Elapsed-time checkpoints for one statement execution."""

from time import perf_counter

__all__ = ("Metric",)


class Metric:
    """Records the time spent between named checkpoints.

    Each checkpoint stores the seconds elapsed since the previous one;
    :meth:`done` records a final checkpoint and stops the clock.
    """

    __slots__ = ("_done", "_last", "_start", "_timings")

    def __init__(self) -> None:
        self._start = perf_counter()
        self._last = self._start
        self._timings: dict[str, float] = {}
        self._done = False

    def checkpoint(self, name: str) -> None:
        if self._done:
            return
        now = perf_counter()
        self._timings[name] = now - self._last
        self._last = now

    def done(self, name: str) -> None:
        self.checkpoint(name)
        self._done = True

    @property
    def timings(self) -> "dict[str, float]":
        return dict(self._timings)

    @property
    def elapsed(self) -> float:
        return self._last - self._start

    def __repr__(self) -> str:
        labels = ",".join(f"{name}={seconds * 1000:.3f}ms" for name, seconds in self._timings.items())
        return f"Metric({labels})"
