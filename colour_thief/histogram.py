# colour_thief/histogram.py
from __future__ import annotations

"""
Fixed-resolution colour histogram over reduced-precision RGB.

Each channel keeps its top `sig_bits` bits; a cell is addressed by the packed
key  r << (2 * sig_bits) | g << sig_bits | b.  The table is built once and is
read-only afterwards.
"""

from typing import Iterable, List, Optional

import numpy as np

from .constants import SIG_BITS
from .core_types import Bounds, BoolRows, Sample, U8Rows


def index_of(r: int, g: int, b: int, sig_bits: int = SIG_BITS) -> int:
    """Packed key of already-reduced channels."""
    return (r << (2 * sig_bits)) | (g << sig_bits) | b


class Histogram:
    """Dense int64 count table of (2 ** sig_bits) ** 3 cells."""

    def __init__(self, counts: np.ndarray, sig_bits: int = SIG_BITS) -> None:
        if not 1 <= sig_bits <= 8:
            raise ValueError(f"sig_bits must be in 1..8, got {sig_bits}")
        size = 1 << (3 * sig_bits)
        flat = np.array(counts, dtype=np.int64).reshape(-1)
        if flat.shape[0] != size:
            raise ValueError(f"expected {size} cells, got {flat.shape[0]}")
        if flat.size and int(flat.min()) < 0:
            raise ValueError("histogram counts must be non-negative")
        flat.setflags(write=False)
        self._counts = flat
        self._sig_bits = sig_bits

    # Construction

    @classmethod
    def from_samples(
        cls, samples: Iterable[Sample], sig_bits: int = SIG_BITS
    ) -> "Histogram":
        """Consume `samples` once, counting every sample not flagged ignored."""
        rshift = 8 - sig_bits
        counts: List[int] = [0] * (1 << (3 * sig_bits))
        for sample in samples:
            if sample.ignored:
                continue
            key = index_of(
                int(sample.r) >> rshift,
                int(sample.g) >> rshift,
                int(sample.b) >> rshift,
                sig_bits,
            )
            counts[key] += 1
        return cls(np.asarray(counts, dtype=np.int64), sig_bits)

    @classmethod
    def from_pixels(
        cls,
        rgb: U8Rows,
        keep: Optional[BoolRows] = None,
        sig_bits: int = SIG_BITS,
    ) -> "Histogram":
        """Vectorised build from (N,3) uint8 rows and an optional keep-mask."""
        rows = np.asarray(rgb)
        if rows.dtype != np.uint8 or rows.shape[-1] != 3:
            raise TypeError("expected uint8 (..., 3) rows")
        rows = rows.reshape(-1, 3)
        if keep is not None:
            mask = np.asarray(keep, dtype=bool).reshape(-1)
            if mask.shape[0] != rows.shape[0]:
                raise ValueError("keep mask length does not match pixel rows")
            rows = rows[mask]
        size = 1 << (3 * sig_bits)
        if rows.shape[0] == 0:
            return cls(np.zeros(size, dtype=np.int64), sig_bits)
        reduced = rows.astype(np.int64) >> (8 - sig_bits)
        keys = (
            (reduced[:, 0] << (2 * sig_bits))
            | (reduced[:, 1] << sig_bits)
            | reduced[:, 2]
        )
        counts = np.bincount(keys, minlength=size).astype(np.int64, copy=False)
        return cls(counts, sig_bits)

    # Views

    @property
    def sig_bits(self) -> int:
        return self._sig_bits

    @property
    def rshift(self) -> int:
        return 8 - self._sig_bits

    @property
    def side(self) -> int:
        return 1 << self._sig_bits

    @property
    def size(self) -> int:
        return int(self._counts.shape[0])

    @property
    def counts(self) -> np.ndarray:
        """Flat read-only counts indexed by packed key."""
        return self._counts

    @property
    def cube(self) -> np.ndarray:
        """Read-only (side, side, side) view indexed [r, g, b]."""
        return self._counts.reshape(self.side, self.side, self.side)

    @property
    def total(self) -> int:
        return int(self._counts.sum())

    @property
    def is_empty(self) -> bool:
        return not bool(self._counts.any())

    def index_of(self, r: int, g: int, b: int) -> int:
        return index_of(r, g, b, self._sig_bits)

    def count_at(self, r: int, g: int, b: int) -> int:
        """Count of the cell at reduced coordinates (r, g, b)."""
        return int(self._counts[self.index_of(r, g, b)])

    def populated_bounds(self) -> Optional[Bounds]:
        """Smallest (r1, r2, g1, g2, b1, b2) covering every non-empty cell."""
        if self.is_empty:
            return None
        filled = self.cube > 0
        out: List[int] = []
        for axis in range(3):
            others = tuple(a for a in range(3) if a != axis)
            hits = np.flatnonzero(filled.any(axis=others))
            out.extend((int(hits[0]), int(hits[-1])))
        return (out[0], out[1], out[2], out[3], out[4], out[5])

    def __repr__(self) -> str:
        return f"Histogram(sig_bits={self._sig_bits}, total={self.total})"


__all__ = ["index_of", "Histogram"]
