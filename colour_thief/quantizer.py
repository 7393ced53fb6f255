# colour_thief/quantizer.py
from __future__ import annotations

"""
Modified median cut quantiser (MMCQ).

Exports:
  MedianCutQuantizer(sig_bits=5, fract_by_population=0.75, max_iterations=1000,
                     luma=LumaStrategy.YIQ, debug=False)
    quantize(samples, max_colours)            -> ColourMap
    quantize_histogram(histogram, max_colours) -> ColourMap
  quantize(samples, max_colours, **kwargs)     -> ColourMap

Notes:
  - Phase 1 splits the most populated box until ceil(fract * max_colours)
    boxes exist.
  - Phase 2 rebuilds the queue keyed by population * volume and splits until
    max_colours boxes exist.
  - Boxes that cannot be split are parked and still count towards the total.
  - Queue entries carry a creation sequence number, so equal scores pop in
    creation order and the final map lists boxes in creation order.
"""

import heapq
import itertools
import math
from typing import Callable, Iterable, Iterator, List, Tuple

from .colour_box import AXIS_NAMES, ColourBox
from .colour_map import ColourMap
from .constants import FRACT_BY_POPULATION, MAX_ITERATIONS, SIG_BITS
from .core_types import Sample
from .histogram import Histogram
from .luma import LumaStrategy
from .utils import debug_log, key_value_pairs_to_string, warn

QueueEntry = Tuple[int, int, ColourBox]  # (-score, sequence, box)
Parked = Tuple[int, ColourBox]  # (sequence, box)
Score = Callable[[ColourBox], int]


def by_population(box: ColourBox) -> int:
    return box.population()


def by_population_volume(box: ColourBox) -> int:
    return box.population() * box.volume()


class MedianCutQuantizer:
    """Holds settings only; every call owns its own histogram and boxes."""

    def __init__(
        self,
        sig_bits: int = SIG_BITS,
        fract_by_population: float = FRACT_BY_POPULATION,
        max_iterations: int = MAX_ITERATIONS,
        luma: LumaStrategy = LumaStrategy.YIQ,
        debug: bool = False,
    ) -> None:
        if not 0.0 <= fract_by_population <= 1.0:
            raise ValueError(
                f"fract_by_population must be in [0, 1], got {fract_by_population}"
            )
        self.sig_bits = sig_bits
        self.fract_by_population = fract_by_population
        self.max_iterations = max(1, int(max_iterations))
        self.luma = luma
        self.debug = debug

    def quantize(self, samples: Iterable[Sample], max_colours: int) -> ColourMap:
        """Consume `samples` once and cluster them into at most `max_colours` boxes."""
        histogram = Histogram.from_samples(samples, self.sig_bits)
        return self.quantize_histogram(histogram, max_colours)

    def quantize_histogram(self, histogram: Histogram, max_colours: int) -> ColourMap:
        target = max(1, int(max_colours))
        cmap = ColourMap(self.luma)

        seed = ColourBox.spanning(histogram)
        if seed is None:
            if self.debug:
                debug_log("quantize: no retained pixels, empty palette")
            return cmap

        sequence = itertools.count()
        parked: List[Parked] = []

        heap: List[QueueEntry] = [(-by_population(seed), next(sequence), seed)]
        phase1_target = math.ceil(self.fract_by_population * target)
        self._iterate(heap, parked, phase1_target, by_population, sequence, "phase 1")

        # Same boxes, new ordering.
        heap = [(-by_population_volume(box), seq, box) for _, seq, box in heap]
        heapq.heapify(heap)
        self._iterate(heap, parked, target, by_population_volume, sequence, "phase 2")

        final = sorted(
            [(seq, box) for _, seq, box in heap] + parked, key=lambda item: item[0]
        )
        for _, box in final:
            cmap.push(box)

        if self.debug:
            debug_log(
                key_value_pairs_to_string(
                    [
                        ("Pixels", histogram.total),
                        ("Requested", target),
                        ("Boxes", len(cmap)),
                        ("Unsplittable", len(parked)),
                    ]
                )
            )
        return cmap

    def _iterate(
        self,
        heap: List[QueueEntry],
        parked: List[Parked],
        target: int,
        score: Score,
        sequence: Iterator[int],
        phase: str,
    ) -> None:
        """Pop, split, push until `target` boxes exist or nothing splits."""
        iterations = 0
        while heap and len(heap) + len(parked) < target:
            if iterations >= self.max_iterations:
                if self.debug:
                    warn(f"{phase}: stopped after {iterations} iterations")
                return
            iterations += 1

            _, seq, box = heapq.heappop(heap)
            children = box.split()
            if children is None:
                parked.append((seq, box))
                continue

            left, right = children
            heapq.heappush(heap, (-score(left), next(sequence), left))
            heapq.heappush(heap, (-score(right), next(sequence), right))
            if self.debug:
                axis = _cut_axis(box, left)
                debug_log(
                    f"{phase}: split {box.population():,} px on {axis} -> "
                    f"{left.population():,} + {right.population():,}"
                )


def _cut_axis(parent: ColourBox, left: ColourBox) -> str:
    for axis in range(3):
        if parent.axis_bounds(axis) != left.axis_bounds(axis):
            return AXIS_NAMES[axis]
    return "?"


def quantize(
    samples: Iterable[Sample],
    max_colours: int,
    *,
    luma: LumaStrategy = LumaStrategy.YIQ,
    debug: bool = False,
) -> ColourMap:
    """Convenience wrapper around MedianCutQuantizer().quantize()."""
    return MedianCutQuantizer(luma=luma, debug=debug).quantize(samples, max_colours)


__all__ = [
    "MedianCutQuantizer",
    "by_population",
    "by_population_volume",
    "quantize",
]
