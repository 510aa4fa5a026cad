"""
ops.py

Bulk queries over many points for a single Region.

- points_in_region: Given an (n, 2) array of ``(x, y)`` points, returns an
  (n,) boolean array telling whether each point is contained in the Region.
- boundary_mask: Dense mask in the ``Region.to_mask`` frame with only the
  stored boundary points set.

Examples
--------
>>> import numpy as np
>>> from blob_regions import Region
>>> from blob_regions.ops import points_in_region
>>> region = Region.from_rectangle(5, 4)
>>> points_in_region(np.array([[2, 2], [7, 1]]), region)
array([ True, False])
"""

from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

from blob_regions.exceptions import ValidationError
from blob_regions.point import Point
from blob_regions.region import Region


def _prepare_points(
    pts: Union[Sequence[Sequence[int]], NDArray[np.integer]],
) -> NDArray[np.int64]:
    """
    Convert input points to an ``(N, 2)`` integer array.

    Parameters
    ----------
    pts : Union[Sequence[Sequence[int]], NDArray[np.integer]], shape (n_points, 2)

    Returns
    -------
    NDArray[np.int64]

    Raises
    ------
    ValidationError
        If points cannot be converted to integer shape (N, 2).
    """
    try:
        processed_pts = np.asarray(pts)
    except Exception as e:
        raise ValidationError(f"Could not convert points to NumPy array: {e}") from e

    if processed_pts.size == 0:
        return np.empty((0, 2), dtype=np.int64)

    if processed_pts.ndim == 1:  # Handle single point case [x, y]
        if processed_pts.shape[0] == 2:
            processed_pts = processed_pts.reshape(1, 2)
        else:
            raise ValidationError(
                "Single point must have 2 coordinates",
                got=f"shape {processed_pts.shape}",
            )
    elif processed_pts.ndim != 2 or processed_pts.shape[1] != 2:
        raise ValidationError(
            "Points array must be of shape (N, 2)",
            got=f"shape {processed_pts.shape}",
        )

    if not np.issubdtype(processed_pts.dtype, np.integer):
        if not np.all(processed_pts == np.round(processed_pts)):
            raise ValidationError(
                "Points must have integer pixel coordinates",
                hint="Round or floor the coordinates first, e.g. np.floor(pts)",
            )
    return processed_pts.astype(np.int64)


def points_in_region(
    pts: Union[Sequence[Sequence[int]], NDArray[np.integer]],
    region: Region,
) -> NDArray[np.bool_]:
    """
    Vectorised :meth:`Region.contains`.

    Points outside the bounding box (in row-major order) are rejected in bulk
    before the per-point boundary and interior tests.

    Parameters
    ----------
    pts : array-like, shape (n_points, 2)
        ``(x, y)`` pixel coordinates.
    region : Region

    Returns
    -------
    NDArray[np.bool_], shape (n_points,)
    """
    coords = _prepare_points(pts)
    result = np.zeros(coords.shape[0], dtype=bool)
    if coords.shape[0] == 0 or region.is_empty():
        return result

    # row-major: compare y, then x
    x, y = coords[:, 0], coords[:, 1]
    lo, hi = region.bound_min, region.bound_max
    after_min = (y > lo.y) | ((y == lo.y) & (x >= lo.x))
    before_max = (y < hi.y) | ((y == hi.y) & (x <= hi.x))
    candidates = np.flatnonzero(after_min & before_max)

    for i in candidates:
        result[i] = region.contains(Point(int(x[i]), int(y[i])))
    return result


def boundary_mask(region: Region) -> NDArray[np.bool_]:
    """
    Mask with only the boundary points of ``region`` set.

    Uses the same frame as :meth:`Region.to_mask`, so
    ``region.to_mask() >= boundary_mask(region)`` holds cell by cell.
    """
    if region.is_empty():
        return np.zeros((0, 0), dtype=bool)
    x0, y0 = region.bound_min
    width = max(region.bound_max.x - x0 + 1, 0)
    height = max(region.bound_max.y - y0 + 1, 0)
    mask = np.zeros((height, width), dtype=bool)

    coords = region.coordinates
    cols = coords[:, 0] - x0
    rows = coords[:, 1] - y0
    in_frame = (cols >= 0) & (cols < width) & (rows >= 0) & (rows < height)
    mask[rows[in_frame], cols[in_frame]] = True
    return mask
