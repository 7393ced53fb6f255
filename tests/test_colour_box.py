"""Tests for ColourBox: derived values and median splitting."""

import numpy as np
import pytest

from colour_thief.colour_box import ColourBox
from colour_thief.core_types import Sample
from colour_thief.histogram import Histogram


def _full_box(hist):
    return ColourBox.from_bounds(0, 31, 0, 31, 0, 31, hist)


class TestConstruction:
    """Bounds checks and the spanning seed box."""

    def test_inverted_bounds(self, make_histogram):
        hist = make_histogram({})
        with pytest.raises(ValueError):
            ColourBox.from_bounds(3, 2, 0, 0, 0, 0, hist)

    def test_out_of_range(self, make_histogram):
        hist = make_histogram({})
        with pytest.raises(ValueError):
            ColourBox.from_bounds(0, 32, 0, 0, 0, 0, hist)
        with pytest.raises(ValueError):
            ColourBox.from_bounds(0, 0, -1, 0, 0, 0, hist)

    def test_spanning(self, make_histogram):
        hist = make_histogram({(1, 2, 3): 1, (4, 0, 9): 2})
        box = ColourBox.spanning(hist)

        assert box.bounds == (1, 4, 0, 2, 3, 9)
        assert box.population() == 3

    def test_spanning_empty(self, make_histogram):
        assert ColourBox.spanning(make_histogram({})) is None


class TestDerivedValues:
    """Volume, population and average."""

    def test_volume(self, make_histogram):
        box = ColourBox.from_bounds(0, 1, 0, 2, 0, 3, make_histogram({}))
        assert box.volume() == 24

    def test_population_only_counts_inside(self, make_histogram):
        hist = make_histogram({(0, 0, 0): 2, (1, 1, 1): 3, (5, 5, 5): 7})
        box = ColourBox.from_bounds(0, 1, 0, 1, 0, 1, hist)

        assert box.population() == 5
        assert box.population() == 5
        assert box.copy().population() == 5

    def test_copy_is_fresh_box(self, make_histogram):
        box = ColourBox.from_bounds(0, 1, 0, 1, 0, 1, make_histogram({(0, 0, 0): 1}))
        twin = box.copy()

        assert twin is not box
        assert twin.bounds == box.bounds

    def test_average_weighted_centroid(self, make_histogram):
        hist = make_histogram({(0, 0, 0): 1, (2, 0, 0): 3})
        box = ColourBox.from_bounds(0, 2, 0, 0, 0, 0, hist)

        # r: (0.5 * 8 * 1 + 2.5 * 8 * 3) / 4 = 16
        assert box.average() == (16, 4, 4)

    def test_average_matches_direct_recomputation(self, make_histogram, rng):
        cells = {}
        for _ in range(20):
            key = tuple(int(v) for v in rng.integers(0, 6, 3))
            cells[key] = int(rng.integers(1, 50))
        hist = make_histogram(cells)
        box = ColourBox.from_bounds(0, 5, 0, 5, 0, 5, hist)

        total = sum(cells.values())
        expected = tuple(
            int(sum(n * (key[axis] + 0.5) * 8 for key, n in cells.items()) / total)
            for axis in range(3)
        )
        assert box.average() == expected

    def test_average_empty_box_uses_midpoint(self, make_histogram):
        hist = make_histogram({})
        assert _full_box(hist).average() == (128, 128, 128)
        box = ColourBox.from_bounds(2, 3, 0, 0, 31, 31, hist)
        assert box.average() == (24, 4, 252)

    def test_average_in_byte_range(self, make_histogram):
        hist = make_histogram({(31, 31, 31): 10, (0, 0, 0): 1})
        r, g, b = _full_box(hist).average()
        for c in (r, g, b):
            assert 0 <= c <= 255

    def test_contains(self, make_histogram):
        box = ColourBox.from_bounds(0, 1, 0, 31, 0, 31, make_histogram({}))
        assert box.contains((15, 0, 0))
        assert not box.contains((16, 0, 0))


class TestSplit:
    """Median cut splitting."""

    def test_cut_at_median(self, make_histogram):
        hist = make_histogram({(i, 0, 0): 1 for i in range(4)})
        box = ColourBox.from_bounds(0, 3, 0, 0, 0, 0, hist)

        left, right = box.split()
        assert (left.r1, left.r2) == (0, 1)
        assert (right.r1, right.r2) == (2, 3)
        assert left.population() == right.population() == 2

    def test_nudges_when_right_would_be_empty(self, make_histogram):
        hist = make_histogram({(0, 0, 0): 1, (3, 0, 0): 5})
        box = ColourBox.from_bounds(0, 3, 0, 0, 0, 0, hist)

        left, right = box.split()
        assert (left.r1, left.r2) == (0, 2)
        assert (right.r1, right.r2) == (3, 3)
        assert (left.population(), right.population()) == (1, 5)

    def test_only_widest_axis_is_cut(self, make_histogram):
        # red is widest but every pixel sits at r=0; green could be cut
        hist = make_histogram({(0, 0, 0): 2, (0, 1, 0): 3})
        box = ColourBox.from_bounds(0, 5, 0, 1, 0, 0, hist)

        assert box.median_cut(0) is None
        assert box.median_cut(1) == 0
        assert box.split() is None

    def test_ties_prefer_red(self, make_histogram):
        hist = make_histogram({(0, 0, 0): 1, (1, 1, 1): 1})
        box = ColourBox.from_bounds(0, 1, 0, 1, 0, 1, hist)

        left, right = box.split()
        assert (left.r1, left.r2, right.r1, right.r2) == (0, 0, 1, 1)
        assert (left.g1, left.g2) == (0, 1)

    def test_axis_order(self, make_histogram):
        box = ColourBox.from_bounds(0, 3, 0, 9, 0, 9, make_histogram({}))
        assert box.axis_order() == [1, 2, 0]

    def test_single_cell_not_splittable(self, make_histogram):
        hist = make_histogram({(4, 4, 4): 9})
        assert ColourBox.from_bounds(4, 4, 4, 4, 4, 4, hist).split() is None

    def test_concentrated_population_not_splittable(self, make_histogram):
        hist = make_histogram({(2, 2, 2): 7})
        assert ColourBox.from_bounds(0, 4, 0, 4, 0, 4, hist).split() is None

    def test_empty_box_not_splittable(self, make_histogram):
        assert _full_box(make_histogram({})).split() is None

    def test_split_at_rejects_bad_cut(self, make_histogram):
        box = ColourBox.from_bounds(0, 3, 0, 0, 0, 0, make_histogram({}))
        with pytest.raises(ValueError):
            box.split_at(0, 3)

    def test_population_conserved_recursively(self, random_image):
        hist = Histogram.from_pixels(random_image.reshape(-1, 3))
        pending = [ColourBox.spanning(hist)]
        splits = 0
        while pending and splits < 200:
            box = pending.pop()
            children = box.split()
            if children is None:
                continue
            splits += 1
            left, right = children
            assert left.population() + right.population() == box.population()
            assert left.population() > 0 and right.population() > 0

            diff = [
                axis
                for axis in range(3)
                if left.axis_bounds(axis) != right.axis_bounds(axis)
            ]
            assert len(diff) == 1
            axis = diff[0]
            lo, hi = box.axis_bounds(axis)
            assert left.axis_bounds(axis)[0] == lo
            assert right.axis_bounds(axis)[1] == hi
            assert left.axis_bounds(axis)[1] + 1 == right.axis_bounds(axis)[0]
            pending.extend(children)
        assert splits > 0

    def test_split_does_not_touch_parent(self):
        hist = Histogram.from_samples([Sample(0, 0, 0), Sample(255, 255, 255)])
        box = ColourBox.spanning(hist)
        before = box.bounds
        box.split()
        assert box.bounds == before
        assert box.population() == 2

    def test_profile(self, make_histogram):
        hist = make_histogram({(0, 0, 0): 1, (0, 2, 0): 4, (1, 2, 0): 2})
        box = ColourBox.from_bounds(0, 1, 0, 2, 0, 0, hist)
        np.testing.assert_array_equal(box.profile(1), [1, 0, 6])
        np.testing.assert_array_equal(box.profile(0), [5, 2])
