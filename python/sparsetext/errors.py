"""Exceptions raised by :mod:`sparsetext`.

File-system failures are not wrapped: reading or writing a matrix lets the
builtin :class:`OSError` family propagate unchanged.
"""


class SparseTextError(Exception):
    """Base class for errors raised by sparsetext."""


class MalformedInput(SparseTextError, ValueError):
    """A line of matrix text is neither a header nor a valid entry triple.

    Parameters
    ----------
    lineno : int, optional
        1-based number of the offending line.
    line : str, optional
        The offending line, stripped.
    """

    message = "Input file has wrong format"

    def __init__(self, lineno=None, line=None):
        super().__init__(self.message)
        self.lineno = lineno
        self.line = line


class DimensionMismatch(SparseTextError, ValueError):
    """Operand shapes are incompatible for the requested operation."""

    def __init__(self, operation, left, right):
        super().__init__(
            f"Matrix dimensions do not match for {operation}: {tuple(left)} vs {tuple(right)}"
        )
        self.operation = operation
        self.left = tuple(left)
        self.right = tuple(right)


class InvalidSelection(SparseTextError, ValueError):
    """Unknown operation name or out-of-range choice made by a caller."""
