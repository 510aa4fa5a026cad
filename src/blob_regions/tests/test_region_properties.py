"""Property-based tests for Region invariants.

These tests check properties that must hold for every rectangle and for every
mask whose outer frame is fully set (so the raster-order bounding box spans
the whole mask).
"""

import numpy as np
import pytest
from hypothesis import given
from hypothesis import strategies as st
from hypothesis.extra import numpy as hnp

from blob_regions.ops import boundary_mask
from blob_regions.point import Point
from blob_regions.region import Region

coords = st.integers(min_value=-20, max_value=20)
extents = st.integers(min_value=2, max_value=10)


@st.composite
def rectangles(draw):
    width, height = draw(extents), draw(extents)
    return Region.from_rectangle(width, height, (draw(coords), draw(coords)))


@st.composite
def framed_masks(draw):
    """Masks with a set outer frame and arbitrary interior cells."""
    height = draw(st.integers(min_value=1, max_value=8))
    width = draw(st.integers(min_value=1, max_value=8))
    mask = draw(hnp.arrays(dtype=np.bool_, shape=(height, width)))
    mask[0, :] = mask[-1, :] = True
    mask[:, 0] = mask[:, -1] = True
    return mask


@pytest.mark.property
class TestRegionInvariants:
    @given(extents, extents, coords, coords)
    def test_rectangle_boundary_size_and_bounds(self, width, height, x0, y0):
        r = Region.from_rectangle(width, height, (x0, y0))
        assert len(r) == 2 * width + 2 * height - 4
        assert r.bound_min == Point(x0, y0)
        assert r.bound_max == Point(x0 + width, y0 + height)
        assert list(r.points) == sorted(r.points, key=lambda p: p.y)

    @given(rectangles())
    def test_row_index_points_at_first_of_each_row(self, r):
        rows = [p.y for p in r.points]
        assert set(r.row_index) == set(rows)
        for row, start in r.row_index.items():
            assert start == rows.index(row)

    @given(rectangles(), st.integers(-25, 35), st.integers(-25, 35))
    def test_contains_matches_rectangle_footprint(self, r, x, y):
        inside = (
            r.bound_min.x <= x < r.bound_max.x and r.bound_min.y <= y < r.bound_max.y
        )
        assert r.contains((x, y)) == inside
        if r.in_boundary((x, y)):
            assert inside

    @given(rectangles(), rectangles())
    def test_adjacency_is_symmetric(self, a, b):
        assert a.adjacent_to(b) == b.adjacent_to(a)

    @given(rectangles(), st.integers(2, 10), st.integers(2, 10), st.integers(2, 6))
    def test_far_rectangles_are_not_adjacent(self, a, width, height, gap):
        b = Region.from_rectangle(
            width, height, (a.bound_max.x + gap, a.bound_max.y + gap)
        )
        assert not a.adjacent_to(b)
        assert not b.adjacent_to(a)

    @given(rectangles(), st.integers(2, 10), st.integers(0, 20))
    def test_rectangles_sharing_an_edge_are_adjacent(self, a, height, shift):
        a_height = a.bound_max.y - a.bound_min.y
        # b starts one pixel right of a's last column, overlapping a's rows
        n_overlapping_starts = a_height + height - 1
        y0 = a.bound_min.y - height + 1 + shift % n_overlapping_starts
        b = Region.from_rectangle(3, height, (a.bound_max.x, y0))
        assert a.adjacent_to(b)
        assert b.adjacent_to(a)

    @given(framed_masks(), coords, coords)
    def test_to_mask_keeps_boundary_pixels(self, mask, x0, y0):
        r = Region.from_mask(mask, offset=(x0, y0))
        m = r.to_mask()
        assert m.shape == mask.shape
        assert np.all(m[boundary_mask(r)])
        for p in r.points:
            assert mask[p.y - y0, p.x - x0]
