"""Custom exceptions for blob_regions.

Usage Guidelines
----------------
- **ValidationError**: Constructor inputs don't meet requirements (a mask
  that is not 2-D, a negative rectangle extent, boundary points that are
  not sorted by row, ...). Queries never raise it.

- **UnsupportedOperationError**: The operation is declared on the public
  surface but has no defined semantics yet (region merging).

All exceptions inherit from **BlobRegionsError**, allowing users to catch
any package-specific error with a single except clause.

Examples
--------
>>> from blob_regions.exceptions import ValidationError, BlobRegionsError
>>> try:
...     raise ValidationError(
...         "mask must be 2-dimensional",
...         expected="array with shape (n_rows, n_cols)",
...         got="array with shape (4,)",
...     )
... except BlobRegionsError as e:
...     print(type(e).__name__)
ValidationError
"""


class BlobRegionsError(Exception):
    """Base exception for all blob_regions errors."""

    pass


class ValidationError(BlobRegionsError):
    """Raised when input validation fails.

    Parameters
    ----------
    message : str
        Description of what went wrong
    expected : str, optional
        What was expected (for structured error messages)
    got : str, optional
        What was actually received
    hint : str, optional
        Actionable suggestion for fixing the error
    example : str, optional
        Code snippet showing correct usage

    Examples
    --------
    >>> raise ValidationError(
    ...     "Rectangle extent must be non-negative",
    ...     expected="width >= 0 and height >= 0",
    ...     got="width = -2, height = 3",
    ... )
    """

    def __init__(
        self,
        message: str,
        expected: str | None = None,
        got: str | None = None,
        hint: str | None = None,
        example: str | None = None,
    ):
        parts = [message]

        if expected is not None:
            parts.append(f"\nExpected: {expected}")

        if got is not None:
            parts.append(f"Got: {got}")

        if hint is not None:
            parts.append(f"\nHint: {hint}")

        if example is not None:
            parts.append(f"\nExample:\n{example}")

        super().__init__("\n".join(parts))


class UnsupportedOperationError(BlobRegionsError, NotImplementedError):
    """Raised by operations that are declared but have no semantics yet.

    Subclasses ``NotImplementedError`` so callers that already guard against
    unfinished APIs keep working.

    Parameters
    ----------
    operation : str
        Name of the unsupported operation
    hint : str, optional
        Suggested alternative
    """

    def __init__(self, operation: str, hint: str | None = None):
        self.operation = operation
        message = f"{operation} is not supported"
        if hint is not None:
            message += f"\n\nHint: {hint}"
        super().__init__(message)
