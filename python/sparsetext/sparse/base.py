"""Base class for sparse matrices.

Defines the shape bookkeeping shared by concrete sparse types in
`sparsetext.sparse`, and the default dense materialization.
"""

import numpy as np


class SparseArray:
    """Abstract base class for 2D sparse integer matrices.

    Parameters
    ----------
    shape : tuple[int, int]
        Matrix shape ``(rows, cols)``. Both must be non-negative integers.
    dtype : numpy.dtype, optional
        Element dtype used when materializing (default ``np.int64``).

    Attributes
    ----------
    ndim : int
        Always 2.
    dtype : numpy.dtype
        Element dtype metadata.

    Raises
    ------
    ValueError
        If ``shape`` is not 2D or holds negative or non-integer sizes.
    """

    ndim = 2

    def __init__(self, shape, dtype=np.int64):
        shape = tuple(shape)
        if len(shape) != 2:
            raise ValueError("sparse matrix requires 2D shape")
        for n in shape:
            if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
                raise ValueError(f"dimensions must be integers, got {n!r}")
            if n < 0:
                raise ValueError(f"dimensions must be non-negative, got {n!r}")
        self.rows = int(shape[0])
        self.cols = int(shape[1])
        self.dtype = np.dtype(dtype)

    @property
    def shape(self):
        """Matrix shape as a ``(rows, cols)`` tuple."""
        return (self.rows, self.cols)

    def items(self):
        """Iterate over stored ``((row, col), value)`` pairs."""
        raise NotImplementedError

    def toarray(self):
        """Return a dense numpy.ndarray with the same shape.

        Raises
        ------
        IndexError
            If a stored coordinate lies outside ``shape``.
        """
        out = np.zeros(self.shape, dtype=self.dtype)
        for (r, c), v in self.items():
            if not (0 <= r < self.rows and 0 <= c < self.cols):
                raise IndexError(f"entry ({r}, {c}) lies outside shape {self.shape}")
            out[r, c] = v
        return out
