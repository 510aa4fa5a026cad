"""Internal validation utilities for constructor arguments.

These functions are for internal use only (note the leading underscore in
module name).
"""

import operator
from typing import Any

import numpy as np
from numpy.typing import NDArray

from blob_regions.exceptions import ValidationError


def ensure_integer_pair(value: Any, name: str) -> tuple[int, int]:
    """Convert ``value`` to an ``(x, y)`` pair of Python ints.

    Parameters
    ----------
    value : Any
        A 2-sequence (or 2-element array) of integral numbers
    name : str
        Name of the argument for error messages

    Returns
    -------
    tuple[int, int]

    Raises
    ------
    ValidationError
        If value does not hold exactly two integral numbers

    Examples
    --------
    >>> ensure_integer_pair((3, 4), "offset")
    (3, 4)
    >>> ensure_integer_pair(np.array([3, 4]), "offset")
    (3, 4)
    """
    try:
        arr = np.asarray(value)
    except Exception as e:
        raise ValidationError(f"Could not interpret {name} as a pair: {e}") from e

    if arr.shape != (2,):
        raise ValidationError(
            f"{name} must be an (x, y) pair",
            expected="sequence of length 2",
            got=f"value with shape {arr.shape}",
            example=f"    {name} = (10, 20)",
        )
    if not (
        np.issubdtype(arr.dtype, np.integer)
        or (np.issubdtype(arr.dtype, np.floating) and np.all(arr == np.round(arr)))
    ):
        raise ValidationError(
            f"{name} must hold integer coordinates",
            expected="two integers",
            got=f"{value!r}",
        )
    return int(arr[0]), int(arr[1])


def ensure_mask_2d(image: Any, name: str, threshold: float) -> NDArray[np.bool_]:
    """Convert an image to a 2-D boolean mask of set cells.

    Parameters
    ----------
    image : array-like, shape (n_rows, n_cols)
        Boolean or intensity image
    name : str
        Name of the argument for error messages
    threshold : float
        A cell is set when its value is strictly greater than this

    Returns
    -------
    NDArray[np.bool_], shape (n_rows, n_cols)

    Raises
    ------
    ValidationError
        If image is not 2-D or contains non-finite values
    """
    arr = np.asarray(image)
    if arr.ndim != 2:
        raise ValidationError(
            f"{name} must be a 2-dimensional array",
            expected="array with shape (n_rows, n_cols)",
            got=f"array with shape {arr.shape}",
            hint="Select a single channel, e.g. image[..., 0], for multi-channel images",
        )
    if arr.dtype == np.bool_:
        return arr.copy()
    if not (np.issubdtype(arr.dtype, np.integer) or np.issubdtype(arr.dtype, np.floating)):
        raise ValidationError(
            f"{name} must be a boolean or numeric array",
            got=f"dtype {arr.dtype}",
        )
    if not np.all(np.isfinite(arr)):
        raise ValidationError(
            f"{name} must not contain NaN or Inf values",
            hint="Replace missing values, e.g. np.nan_to_num(image)",
        )
    return arr > threshold


def ensure_non_negative_extent(width: Any, height: Any) -> tuple[int, int]:
    """Verify a rectangle extent is a pair of non-negative integers.

    Raises
    ------
    ValidationError
        If either component is negative or not integral

    Examples
    --------
    >>> ensure_non_negative_extent(5, 4)
    (5, 4)
    >>> ensure_non_negative_extent(-1, 4)  # Raises
    """
    width, height = ensure_integer_pair((width, height), "extent")
    if width < 0 or height < 0:
        raise ValidationError(
            "Rectangle extent must be non-negative",
            expected="width >= 0 and height >= 0",
            got=f"width = {width}, height = {height}",
        )
    return width, height


def ensure_integer(value: Any, name: str) -> int:
    """Return ``value`` as a Python int; accepts ints and numpy integers.

    Raises
    ------
    ValidationError
        If value is not an integer (floats are rejected, even 3.0)

    Examples
    --------
    >>> ensure_integer(np.int64(3), "x")
    3
    >>> ensure_integer(1.5, "x")  # Raises
    """
    try:
        return operator.index(value)
    except TypeError:
        raise ValidationError(
            f"{name} must be an integer",
            got=f"{name} = {value!r} ({type(value).__name__})",
            hint="Use Point.coerce() to accept integral floats such as 3.0",
        ) from None
