"""Shared fixtures for blob_regions tests.

Masks are indexed ``[row, col]`` (``[y, x]``). The filled, notched, ring and
framed-hole masks have their first boundary cell in the top-left corner and
their last one in the bottom-right corner, so the raster-order bounding box
spans the whole mask. The disc, triangle and staircase masks do not: their
bounding box is narrower than the blob.
"""

import numpy as np
import pytest

from blob_regions import Region


# ==============================================================================
# MASK FIXTURES
# ==============================================================================


@pytest.fixture
def filled_mask():
    """Fully set 4x5 mask (4 rows, 5 columns)."""
    return np.ones((4, 5), dtype=bool)


@pytest.fixture
def notched_mask():
    """5x5 block with the middle cell of the right edge cleared."""
    mask = np.ones((5, 5), dtype=np.uint8)
    mask[2, 4] = 0
    return mask


@pytest.fixture
def ring_mask():
    """5x5 block with the centre cell cleared."""
    mask = np.ones((5, 5), dtype=bool)
    mask[2, 2] = False
    return mask


@pytest.fixture
def framed_hole_mask():
    """7x7 block with a 3x3 hole in the middle."""
    mask = np.ones((7, 7), dtype=bool)
    mask[2:5, 2:5] = False
    return mask


@pytest.fixture
def disc_mask():
    """9x9 disc of radius 4 centred on (4, 4); rows 0 and 8 hold one cell."""
    yy, xx = np.mgrid[:9, :9]
    return (xx - 4) ** 2 + (yy - 4) ** 2 <= 16


@pytest.fixture
def triangle_mask():
    """Lower-right triangle: the top row starts in the last column."""
    return np.array([[0, 0, 1], [0, 1, 1], [1, 1, 1]], dtype=np.uint8)


@pytest.fixture
def staircase_mask():
    """Diagonal band whose last row ends left of where the first row starts."""
    return np.array([[0, 0, 1], [0, 1, 1], [1, 1, 0]], dtype=np.uint8)


# ==============================================================================
# REGION FIXTURES
# ==============================================================================


@pytest.fixture
def rect_5x4():
    """5 wide, 4 tall rectangle at the origin."""
    return Region.from_rectangle(5, 4)


@pytest.fixture
def rect_pair_sharing_edge():
    """Two 3x3 rectangles side by side, touching along x = 2 | x = 3."""
    return Region.from_rectangle(3, 3, (0, 0)), Region.from_rectangle(3, 3, (3, 0))
