"""
region.py
=========

Boundary representation of a connected pixel blob.

A :class:`Region` stores only the boundary pixels of a blob (sorted by row)
plus a bounding box. Membership of the remaining pixels is recovered on
demand: :meth:`Region.interior` casts axis-aligned rays from a point and
:meth:`Region.to_mask` runs a scanline fill over the bounding box.

The interior test is a crossing heuristic, not a general point-in-polygon
algorithm. It is exact for rectangles and reliable for roughly convex blobs;
for strongly concave outlines (a ``U`` shape, say) pixels inside a notch can
be reported as interior.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from logging import getLogger
from types import MappingProxyType
from typing import Any, Union

import numpy as np
from numpy.typing import DTypeLike, NDArray
from scipy import ndimage

from blob_regions._defaults import (
    DEFAULT_MASK_FOREGROUND,
    DEFAULT_MASK_THRESHOLD,
    DEFAULT_OFFSET,
)
from blob_regions._validation import (
    ensure_integer_pair,
    ensure_mask_2d,
    ensure_non_negative_extent,
)
from blob_regions.exceptions import UnsupportedOperationError, ValidationError
from blob_regions.point import NEIGHBOR_OFFSETS_4, Point

logger = getLogger(__name__)

PointLike = Union[Point, Sequence[int], NDArray[np.integer]]

# 4-connected structuring element: a cell survives erosion only when it and
# its left, right, up and down neighbours are all set.
_CROSS = ndimage.generate_binary_structure(2, 1)

# Ray directions for the interior test: +x, -x, +y, -y.
_RAY_DIRECTIONS = (Point(1, 0), Point(-1, 0), Point(0, 1), Point(0, -1))


def build_row_index(points: Sequence[Point]) -> Mapping[int, int]:
    """
    Map each row coordinate to the position of its first point.

    Parameters
    ----------
    points : Sequence[Point]
        Boundary points in non-decreasing row order.

    Returns
    -------
    Mapping[int, int]
        Read-only ``row -> index`` mapping with one key per distinct row.

    Raises
    ------
    ValidationError
        If ``points`` is not sorted by row.
    """
    row_index: dict[int, int] = {}
    current_row = None
    for i, p in enumerate(points):
        if p.y == current_row:
            continue
        if current_row is not None and p.y < current_row:
            raise ValidationError(
                "Boundary points must be in non-decreasing row order",
                got=f"row {p.y} at position {i} after row {current_row}",
                hint="Sort with sorted(points) (Points order row-major)",
            )
        current_row = p.y
        row_index[current_row] = i
    return MappingProxyType(row_index)


def _rectangle_perimeter(
    width: int, height: int, offset: Point
) -> list[Point]:
    # Top row, then left/right pairs for the middle rows, then bottom row, so
    # the sequence is already grouped by row.
    if width == 0 or height == 0:
        return []
    x0, y0 = offset
    points = [Point(x0 + i, y0) for i in range(width)]
    for j in range(1, height - 1):
        points.append(Point(x0, y0 + j))
        if width > 1:
            points.append(Point(x0 + width - 1, y0 + j))
    if height > 1:
        points.extend(Point(x0 + i, y0 + height - 1) for i in range(width))
    return points


def _mask_edge_points(mask: NDArray[np.bool_], offset: Point) -> list[Point]:
    if mask.size == 0 or not mask.any():
        return []
    # Cells outside the mask count as unset, so the outer border is always
    # an edge.
    interior = ndimage.binary_erosion(mask, structure=_CROSS, border_value=0)
    rows, cols = np.nonzero(mask & ~interior)
    return [
        Point(int(col) + offset.x, int(row) + offset.y)
        for row, col in zip(rows, cols)
    ]


@dataclass(frozen=True, slots=True, eq=True)
class Region:
    """
    Immutable boundary description of a connected pixel set.

    Parameters
    ----------
    points
        Boundary points, sorted by row. Within a row the order is kept.
    bound_min
        Lower corner of the bounding box.
    bound_max
        Upper corner of the bounding box. Regions built from a rectangle use
        the exclusive far corner (``offset + (width, height)``); regions
        built from a mask use the last boundary point in raster order.

    Notes
    -----
    For mask-built regions ``bound_min``/``bound_max`` are the first and last
    boundary points in raster order. Their ``y`` values are the true row
    extremes but their ``x`` values are the extremes only of the first and
    last rows, so ``to_mask`` and the interior rays see the box they span.

    Copies are free: the point tuple and row index are shared and never
    mutated, and ``copy.copy``/``copy.deepcopy`` return the region itself.
    """

    points: tuple[Point, ...] = ()
    bound_min: Point = Point(0, 0)
    bound_max: Point = Point(0, 0)

    # derived in __post_init__
    row_index: Mapping[int, int] = field(
        init=False,
        repr=False,
        compare=False,
        default_factory=lambda: MappingProxyType({}),
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "points", tuple(Point.coerce(p) for p in self.points)
        )
        object.__setattr__(self, "bound_min", Point.coerce(self.bound_min))
        object.__setattr__(self, "bound_max", Point.coerce(self.bound_max))
        object.__setattr__(self, "row_index", build_row_index(self.points))

    # -----------------------------------------------------------------
    # Construction
    # -----------------------------------------------------------------
    @classmethod
    def from_image(
        cls,
        image: Any,
        offset: PointLike = DEFAULT_OFFSET,
        *,
        mask: bool = True,
        threshold: float = DEFAULT_MASK_THRESHOLD,
    ) -> "Region":
        """
        Build a region from a 2-D image placed at ``offset``.

        Parameters
        ----------
        image : array-like, shape (height, width)
            With ``mask=True`` the set cells (value > ``threshold``) form the
            blob. With ``mask=False`` only the shape is used and the region is
            the full rectangle.
        offset : PointLike, default=(0, 0)
            ``(x, y)`` position of ``image[0, 0]`` in the parent frame.
        mask : bool, default=True
            Selects mask mode or rectangle mode.
        threshold : float, default=0
            Intensity above which a cell is set (mask mode only).

        Raises
        ------
        ValidationError
            If ``image`` is not 2-D or ``offset`` is not an integer pair.
        """
        if mask:
            return cls.from_mask(image, offset, threshold=threshold)
        shape = np.shape(image)
        if len(shape) != 2:
            raise ValidationError(
                "image must be a 2-dimensional array",
                expected="array with shape (height, width)",
                got=f"array with shape {shape}",
            )
        height, width = shape
        return cls.from_rectangle(width, height, offset)

    @classmethod
    def from_mask(
        cls,
        mask: Any,
        offset: PointLike = DEFAULT_OFFSET,
        *,
        threshold: float = DEFAULT_MASK_THRESHOLD,
    ) -> "Region":
        """
        Build a region from the edge cells of a binary mask.

        A set cell is an edge cell when it lies on the border of ``mask`` or
        has an unset 4-neighbour. Points are collected in raster order.
        """
        offset = Point.coerce(offset)
        cells = ensure_mask_2d(mask, "mask", threshold)
        points = _mask_edge_points(cells, offset)
        logger.debug(
            "Built region from mask of shape %s at %s: %d boundary points",
            cells.shape,
            offset,
            len(points),
        )
        if not points:
            return cls((), offset, offset)
        return cls(tuple(points), points[0], points[-1])

    @classmethod
    def from_rectangle(
        cls, width: int, height: int, offset: PointLike = DEFAULT_OFFSET
    ) -> "Region":
        """
        Build a region whose boundary is the perimeter of a rectangle.

        ``bound_max`` is the exclusive corner ``offset + (width, height)``.
        """
        width, height = ensure_non_negative_extent(width, height)
        offset = Point.coerce(offset)
        points = _rectangle_perimeter(width, height, offset)
        logger.debug(
            "Built region from %dx%d rectangle at %s: %d boundary points",
            width,
            height,
            offset,
            len(points),
        )
        return cls(tuple(points), offset, offset + Point(width, height))

    @classmethod
    def from_roi(
        cls,
        parent: Any,
        x: int,
        y: int,
        width: int,
        height: int,
        *,
        mask: bool = True,
        threshold: float = DEFAULT_MASK_THRESHOLD,
    ) -> "Region":
        """
        Build a region from a sub-image of ``parent``.

        The sub-image ``parent[y:y + height, x:x + width]`` is used as in
        :meth:`from_image`, with ``(x, y)`` as its offset, so the points are
        in ``parent`` coordinates.
        """
        x, y = ensure_integer_pair((x, y), "roi origin")
        width, height = ensure_non_negative_extent(width, height)
        parent = np.asarray(parent)
        if parent.ndim != 2:
            raise ValidationError(
                "parent must be a 2-dimensional array",
                got=f"array with shape {parent.shape}",
            )
        n_rows, n_cols = parent.shape
        if x < 0 or y < 0 or x + width > n_cols or y + height > n_rows:
            raise ValidationError(
                "ROI must lie inside the parent image",
                expected=f"0 <= x, x + width <= {n_cols}, 0 <= y, y + height <= {n_rows}",
                got=f"x = {x}, y = {y}, width = {width}, height = {height}",
            )
        sub_image = parent[y : y + height, x : x + width]
        return cls.from_image(sub_image, (x, y), mask=mask, threshold=threshold)

    # -----------------------------------------------------------------
    # Value semantics
    # -----------------------------------------------------------------
    def __copy__(self) -> "Region":
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> "Region":
        return self

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __contains__(self, p: object) -> bool:
        try:
            return self.contains(p)  # type: ignore[arg-type]
        except ValidationError:
            return False

    @property
    def coordinates(self) -> NDArray[np.int64]:
        """Read-only ``(n_points, 2)`` array of ``[x, y]`` boundary coordinates."""
        coords = np.array(
            [(p.x, p.y) for p in self.points], dtype=np.int64
        ).reshape(-1, 2)
        coords.flags.writeable = False
        return coords

    def is_empty(self) -> bool:
        """True when the region has no boundary points."""
        return len(self.points) == 0

    # -----------------------------------------------------------------
    # Mutation (unsupported)
    # -----------------------------------------------------------------
    def add(self, other: "Region | PointLike") -> None:
        """
        Merge another region or a single point into this one.

        Not supported: regions are immutable snapshots and no merge
        semantics are defined. Always raises.

        Raises
        ------
        UnsupportedOperationError
        """
        logger.warning(
            "Region.add called on a region with %d boundary points; "
            "merging is not supported",
            len(self.points),
        )
        raise UnsupportedOperationError(
            "Region.add",
            hint="Rasterise both regions with to_mask(), combine the masks "
            "and rebuild with Region.from_mask().",
        )

    # -----------------------------------------------------------------
    # Membership queries
    # -----------------------------------------------------------------
    def in_boundary(self, p: PointLike) -> bool:
        """True when ``p`` is one of the stored boundary points."""
        p = Point.coerce(p)
        start = self.row_index.get(p.y)
        if start is None:
            return False
        for i in range(start, len(self.points)):
            candidate = self.points[i]
            if candidate.y != p.y:
                break
            if candidate == p:
                return True
        return False

    def contains(self, p: PointLike) -> bool:
        """True when ``p`` is a boundary point or an interior point."""
        p = Point.coerce(p)
        if p < self.bound_min or self.bound_max < p:
            return False
        return self.in_boundary(p) or self.interior(p)

    def interior(self, p: PointLike) -> bool:
        """
        Ray-cast interior test.

        Rays are stepped outwards from ``p`` in the four axis directions, one
        pixel per iteration. A ray stops once it lands on a boundary point.
        The point is interior when all four rays stop; as soon as any
        unstopped ray leaves the bounding box the point is not interior.
        """
        p = Point.coerce(p)
        if self.is_empty():
            return False
        pending = list(_RAY_DIRECTIONS)
        step = 1
        while pending:
            pending = [
                d
                for d in pending
                if not self.in_boundary(Point(p.x + d.x * step, p.y + d.y * step))
            ]
            for d in pending:
                if self._ray_left_box(p, d, step):
                    return False
            step += 1
        return True

    def _ray_left_box(self, p: Point, direction: Point, step: int) -> bool:
        if direction.x > 0:
            return p.x + step > self.bound_max.x
        if direction.x < 0:
            return p.x - step < self.bound_min.x
        if direction.y > 0:
            return p.y + step > self.bound_max.y
        return p.y - step < self.bound_min.y

    # -----------------------------------------------------------------
    # Adjacency
    # -----------------------------------------------------------------
    def adjacent_to(self, other: "Region") -> bool:
        """
        Check whether ``other`` touches this region.

        Two regions are adjacent when some boundary point of one has a
        4-neighbour on the boundary of the other. Regions whose bounding
        boxes are apart along both axes are rejected without probing.
        """
        if self.is_empty() or other.is_empty():
            return False
        if (
            other.bound_max.x < self.bound_min.x
            and other.bound_max.y < self.bound_min.y
        ) or (
            self.bound_max.x < other.bound_min.x
            and self.bound_max.y < other.bound_min.y
        ):
            return False
        return any(self.adjacent_point(p, other) for p in self.points)

    @staticmethod
    def adjacent_point(p: PointLike, other: "Region") -> bool:
        """True when a 4-neighbour of ``p`` is on the boundary of ``other``."""
        p = Point.coerce(p)
        return any(other.in_boundary(p + offset) for offset in NEIGHBOR_OFFSETS_4)

    # -----------------------------------------------------------------
    # Rasterisation
    # -----------------------------------------------------------------
    def to_mask(
        self,
        dtype: DTypeLike = np.bool_,
        foreground: int | float | None = None,
    ) -> NDArray[Any]:
        """
        Rasterise the region over its bounding box.

        Parameters
        ----------
        dtype : DTypeLike, default=bool
            Output dtype.
        foreground : int or float, optional
            Value of set cells for non-boolean dtypes. Defaults to 255.

        Returns
        -------
        NDArray, shape (bound_max.y - bound_min.y + 1, bound_max.x - bound_min.x + 1)
            Cell ``[y - bound_min.y, x - bound_min.x]`` holds point ``(x, y)``.
            An empty region gives a ``(0, 0)`` array.

        Notes
        -----
        Rows are swept top to bottom. Each column remembers whether the
        previous row was on the boundary and whether the column is currently
        inside the region. When a column steps off a boundary run, the
        ``contains`` test decides whether it has entered the region (top
        edge, bottom edge of a hole) or left it (bottom edge).
        """
        if self.is_empty():
            return np.zeros((0, 0), dtype=dtype)

        x0, y0 = self.bound_min
        # A mask-built region whose last row ends left of where its first
        # row starts spans no columns.
        width = max(self.bound_max.x - x0 + 1, 0)
        height = max(self.bound_max.y - y0 + 1, 0)
        filled = np.zeros((height, width), dtype=np.bool_)

        on_boundary = np.zeros(width, dtype=np.bool_)
        inside = np.zeros(width, dtype=np.bool_)
        for row in range(height):
            for col in range(width):
                p = Point(x0 + col, y0 + row)
                if self.in_boundary(p):
                    on_boundary[col] = True
                else:
                    if on_boundary[col]:
                        inside[col] = self.contains(p)
                    on_boundary[col] = False
                filled[row, col] = on_boundary[col] or inside[col]

        if np.dtype(dtype) == np.bool_:
            return filled
        out = np.zeros(filled.shape, dtype=dtype)
        out[filled] = DEFAULT_MASK_FOREGROUND if foreground is None else foreground
        return out
