# core/interval.py
import math


class Interval:
    """
    Half-open range [start, end) over the ray parameter t.

    An interval whose start is not below its end is empty; the BVH uses that
    to reject a node once its window has closed.
    """
    __slots__ = ("start", "end")

    def __init__(self, start: float = 0.0, end: float = 0.0):
        self.start = start
        self.end = end

    def size(self) -> float:
        return self.end - self.start

    def is_empty(self) -> bool:
        return self.start >= self.end

    def contains(self, x: float) -> bool:
        return self.start <= x < self.end

    def expand(self, delta: float) -> "Interval":
        half_delta = delta / 2.0
        return Interval(self.start - half_delta, self.end + half_delta)

    def pad(self, delta: float) -> "Interval":
        """Expands the interval by delta only if it is thinner than delta."""
        if self.size() < delta:
            return self.expand(delta)
        return Interval(self.start, self.end)

    def combine(self, other: "Interval") -> "Interval":
        return Interval(min(self.start, other.start), max(self.end, other.end))

    def __add__(self, offset: float) -> "Interval":
        return Interval(self.start + offset, self.end + offset)

    def __radd__(self, offset: float) -> "Interval":
        return self.__add__(offset)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self.start == other.start and self.end == other.end

    def __repr__(self) -> str:
        return f"Interval({self.start}, {self.end})"


Interval.EMPTY = Interval(math.inf, -math.inf)
Interval.UNIVERSE = Interval(-math.inf, math.inf)
