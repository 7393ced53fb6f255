# colour_thief/colour_map.py
from __future__ import annotations

"""
ColourMap: the final set of boxes and the palette built from them.

Exports:
  ColourMap(luma=LumaStrategy.YIQ)
    push(box)               : append a box, drop the cached palette list
    generate_palette()      -> Iterator[QuantizedColour]  (fresh pass each call)
    generate_palette_list() -> List[QuantizedColour]      (memoised, copied out)
    nearest(rgb)            -> RGBTuple
"""

from typing import Iterator, List, Optional, Sequence, Tuple

from .colour_box import ColourBox
from .core_types import QuantizedColour, RGBTuple, coerce_to_rgb_tuple
from .luma import LumaStrategy


class ColourMap:
    """Boxes in the order they were pushed, plus a lazily built palette."""

    def __init__(self, luma: LumaStrategy = LumaStrategy.YIQ) -> None:
        self._boxes: List[ColourBox] = []
        self._palette: Optional[Tuple[QuantizedColour, ...]] = None
        self.luma = luma

    def push(self, box: ColourBox) -> None:
        self._palette = None
        self._boxes.append(box)

    @property
    def boxes(self) -> Sequence[ColourBox]:
        return tuple(self._boxes)

    def __len__(self) -> int:
        return len(self._boxes)

    def __iter__(self) -> Iterator[ColourBox]:
        return iter(tuple(self._boxes))

    def _entry(self, box: ColourBox) -> QuantizedColour:
        rgb = box.average()
        return QuantizedColour(
            rgb=rgb,
            population=box.population(),
            is_dark=self.luma.is_dark(rgb),
        )

    def generate_palette(self) -> Iterator[QuantizedColour]:
        for box in tuple(self._boxes):
            yield self._entry(box)

    def generate_palette_list(self) -> List[QuantizedColour]:
        """Built once per set of boxes; callers get their own copy."""
        if self._palette is None:
            self._palette = tuple(self._entry(box) for box in self._boxes)
        return list(self._palette)

    def nearest(self, rgb: Sequence[int]) -> RGBTuple:
        """
        Palette colour for an 8-bit colour: the box that contains it if any,
        otherwise the closest palette colour by squared RGB distance.
        """
        if not self._boxes:
            raise ValueError("colour map is empty")
        colour = coerce_to_rgb_tuple(rgb)
        for box in self._boxes:
            if box.contains(colour):
                return box.average()

        def distance2(avg: RGBTuple) -> int:
            return sum((a - c) * (a - c) for a, c in zip(avg, colour))

        return min((box.average() for box in self._boxes), key=distance2)

    def __repr__(self) -> str:
        return f"ColourMap(boxes={len(self._boxes)}, luma={self.luma.value})"


__all__ = ["ColourMap"]
