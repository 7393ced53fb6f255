# colour_thief/colour_box.py
from __future__ import annotations

"""
ColourBox: an inclusive rectangular region of the reduced RGB cube.

A box never changes its bounds. Population and average colour are computed on
first use and cached on the instance; `copy()` gives a fresh, uncached box with
the same bounds. Splitting returns two new boxes and leaves the parent as is.

Split policy:
  - cut only the widest axis (hi - lo), ties broken R, G, B
  - cut at the smallest coordinate whose cumulative population reaches half
    of the box total
  - if that leaves nothing on the right, cut one slice lower
  - if the left side is then empty the whole population sits in one slice of
    that axis and the box is not splittable
"""

from typing import List, Optional, Tuple

import numpy as np

from .core_types import Bounds, RGBTuple
from .histogram import Histogram

AXIS_NAMES = ("r", "g", "b")


class ColourBox:
    __slots__ = (
        "r1",
        "r2",
        "g1",
        "g2",
        "b1",
        "b2",
        "histogram",
        "_population",
        "_average",
    )

    def __init__(
        self,
        r1: int,
        r2: int,
        g1: int,
        g2: int,
        b1: int,
        b2: int,
        histogram: Histogram,
    ) -> None:
        side = histogram.side
        for name, lo, hi in (("r", r1, r2), ("g", g1, g2), ("b", b1, b2)):
            if lo > hi:
                raise ValueError(f"{name} bounds inverted: {lo} > {hi}")
            if lo < 0 or hi >= side:
                raise ValueError(f"{name} bounds {lo}..{hi} outside 0..{side - 1}")
        self.r1, self.r2 = int(r1), int(r2)
        self.g1, self.g2 = int(g1), int(g2)
        self.b1, self.b2 = int(b1), int(b2)
        self.histogram = histogram
        self._population: Optional[int] = None
        self._average: Optional[RGBTuple] = None

    @classmethod
    def from_bounds(
        cls,
        r1: int,
        r2: int,
        g1: int,
        g2: int,
        b1: int,
        b2: int,
        histogram: Histogram,
    ) -> "ColourBox":
        return cls(r1, r2, g1, g2, b1, b2, histogram)

    @classmethod
    def spanning(cls, histogram: Histogram) -> Optional["ColourBox"]:
        """Smallest box holding every populated cell, or None for an empty histogram."""
        bounds = histogram.populated_bounds()
        if bounds is None:
            return None
        return cls(*bounds, histogram)

    @property
    def bounds(self) -> Bounds:
        return (self.r1, self.r2, self.g1, self.g2, self.b1, self.b2)

    def axis_bounds(self, axis: int) -> Tuple[int, int]:
        b = self.bounds
        return b[2 * axis], b[2 * axis + 1]

    def copy(self) -> "ColourBox":
        return ColourBox(*self.bounds, self.histogram)

    # Derived values

    def _slab(self) -> np.ndarray:
        return self.histogram.cube[
            self.r1 : self.r2 + 1, self.g1 : self.g2 + 1, self.b1 : self.b2 + 1
        ]

    def volume(self) -> int:
        return (
            (self.r2 - self.r1 + 1)
            * (self.g2 - self.g1 + 1)
            * (self.b2 - self.b1 + 1)
        )

    def population(self) -> int:
        if self._population is None:
            self._population = int(self._slab().sum())
        return self._population

    def profile(self, axis: int) -> np.ndarray:
        """Population of each slice along `axis`, low to high."""
        others = tuple(a for a in range(3) if a != axis)
        return self._slab().sum(axis=others).astype(np.int64, copy=False)

    def average(self) -> RGBTuple:
        """
        Population-weighted centroid of cell midpoints in 0..255.
        An empty box falls back to its geometric midpoint.
        """
        if self._average is not None:
            return self._average

        mult = 1 << self.histogram.rshift
        total = self.population()
        channels: List[int] = []
        for axis in range(3):
            lo, hi = self.axis_bounds(axis)
            if total == 0:
                value = int(mult * (lo + hi + 1) / 2)
            else:
                weights = self.profile(axis).astype(np.float64)
                mids = (np.arange(lo, hi + 1, dtype=np.float64) + 0.5) * mult
                value = int(float(np.dot(weights, mids)) / total)
            channels.append(min(255, max(0, value)))

        self._average = (channels[0], channels[1], channels[2])
        return self._average

    def contains(self, rgb: RGBTuple) -> bool:
        """Whether an 8-bit colour falls inside this box."""
        shift = self.histogram.rshift
        r, g, b = int(rgb[0]) >> shift, int(rgb[1]) >> shift, int(rgb[2]) >> shift
        return (
            self.r1 <= r <= self.r2
            and self.g1 <= g <= self.g2
            and self.b1 <= b <= self.b2
        )

    # Splitting

    def axis_order(self) -> List[int]:
        """Axes that can still be cut, widest first; ties go R, G, B."""
        ranges = [hi - lo for lo, hi in (self.axis_bounds(a) for a in range(3))]
        order = sorted(range(3), key=lambda a: (-ranges[a], a))
        return [a for a in order if ranges[a] > 0]

    def median_cut(self, axis: int) -> Optional[int]:
        """
        Last coordinate of the left child along `axis`, or None if every cut on
        this axis would leave one side without population.
        """
        lo, hi = self.axis_bounds(axis)
        if lo == hi:
            return None
        cumulative = np.cumsum(self.profile(axis))
        total = int(cumulative[-1])
        if total == 0:
            return None
        idx = int(np.searchsorted(cumulative, total / 2.0, side="left"))
        if int(cumulative[idx]) == total:
            idx -= 1
        if idx < 0 or int(cumulative[idx]) == 0:
            return None
        return lo + idx

    def split_at(self, axis: int, cut: int) -> Tuple["ColourBox", "ColourBox"]:
        """Children [lo, cut] and [cut + 1, hi] on `axis`; other bounds copied."""
        lo, hi = self.axis_bounds(axis)
        if not lo <= cut < hi:
            raise ValueError(
                f"cut {cut} outside {lo}..{hi - 1} on axis {AXIS_NAMES[axis]}"
            )
        left = list(self.bounds)
        right = list(self.bounds)
        left[2 * axis + 1] = cut
        right[2 * axis] = cut + 1
        return (
            ColourBox(*left, self.histogram),
            ColourBox(*right, self.histogram),
        )

    def split(self) -> Optional[Tuple["ColourBox", "ColourBox"]]:
        """Two children sharing this box's population, or None if not splittable."""
        if self.volume() == 1 or self.population() == 0:
            return None
        axes = self.axis_order()
        if not axes:
            return None
        cut = self.median_cut(axes[0])
        if cut is None:
            return None
        return self.split_at(axes[0], cut)

    def __repr__(self) -> str:
        return (
            f"ColourBox(r={self.r1}..{self.r2}, g={self.g1}..{self.g2}, "
            f"b={self.b1}..{self.b2}, population={self.population()})"
        )


__all__ = ["AXIS_NAMES", "ColourBox"]
