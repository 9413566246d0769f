"""Closed real intervals."""

from __future__ import annotations

import math
from dataclasses import dataclass


def _format_bound(value: float) -> str:
    return format(value, "g")


@dataclass
class Interval:
    """The range ``[min, max]``; empty when ``min > max``."""

    min: float = math.inf
    max: float = -math.inf

    @classmethod
    def empty(cls) -> Interval:
        """An interval containing nothing."""
        return cls(math.inf, -math.inf)

    @classmethod
    def universe(cls) -> Interval:
        """An interval containing every real number."""
        return cls(-math.inf, math.inf)

    def contains(self, x: float) -> bool:
        """True if ``x`` lies within the bounds, inclusive."""
        return self.min <= x <= self.max

    def surrounds(self, x: float) -> bool:
        """True if ``x`` lies strictly between the bounds."""
        return self.min < x < self.max

    def clamp(self, x: float) -> float:
        """Limit ``x`` to the bounds."""
        if x < self.min:
            return self.min
        if self.max < x:
            return self.max
        return x

    def expand_to_include(self, value: float | Interval) -> None:
        """Grow the interval to cover a value or another interval."""
        if isinstance(value, Interval):
            self.min = min(self.min, value.min)
            self.max = max(self.max, value.max)
            return
        if value < self.min:
            self.min = value
        if value > self.max:
            self.max = value

    def size(self) -> float:
        """Length of the interval."""
        return self.max - self.min

    def is_empty(self) -> bool:
        """True if the interval contains nothing."""
        return self.min > self.max

    @staticmethod
    def intersect(a: Interval, b: Interval) -> Interval:
        """The interval common to ``a`` and ``b``."""
        return Interval(max(a.min, b.min), min(a.max, b.max))

    @staticmethod
    def overlaps(a: Interval, b: Interval) -> bool:
        """True if ``a`` and ``b`` share at least one point."""
        return a.max >= b.min and b.max >= a.min

    def __str__(self) -> str:
        return f"[{_format_bound(self.min)}, {_format_bound(self.max)}]"