"""Dictionary-of-keys sparse integer matrix.

Non-zero entries live in a ``dict`` keyed by ``(row, col)`` tuples. No entry
ever holds 0: writing 0 removes the coordinate, and arithmetic results drop
coordinates whose value cancels out.

Notes
-----
- Values are Python ints, so accumulation is arbitrary precision and never
  overflows. ``toarray`` narrows to int64.
- Coordinates are not checked against ``shape`` on write; ``get_element``
  returns 0 for anything not stored, in bounds or not.
"""

import logging
import operator
from collections import defaultdict

import numpy as np

from .. import _runtime
from ..errors import DimensionMismatch
from .base import SparseArray

logger = logging.getLogger(__name__)


class SparseMatrix(SparseArray):
    """Sparse integer matrix storing only non-zero entries.

    Parameters
    ----------
    rows, cols : int, optional
        Matrix dimensions, both default to 0.

    Attributes
    ----------
    rows, cols : int
        Matrix dimensions.
    elements : dict[tuple[int, int], int]
        Stored non-zero entries.

    Examples
    --------
    >>> from sparsetext.sparse import SparseMatrix
    >>> a = SparseMatrix(2, 2)
    >>> a.set_element(0, 0, 1)
    >>> a.set_element(1, 1, 2)
    >>> b = SparseMatrix(2, 2)
    >>> b.set_element(0, 0, 3)
    >>> b.set_element(0, 1, 4)
    >>> sorted((a + b).items())
    [((0, 0), 4), ((0, 1), 4), ((1, 1), 2)]
    >>> sorted((a @ b).items())
    [((0, 0), 3), ((0, 1), 4)]
    """

    def __init__(self, rows=0, cols=0):
        super().__init__((rows, cols))
        self.elements = {}

    @classmethod
    def from_dense(cls, array):
        """Build from a 2D array-like of integers, keeping non-zeros only."""
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise ValueError("from_dense requires a 2D array")
        if arr.size and not np.issubdtype(arr.dtype, np.integer):
            raise ValueError(f"from_dense requires integer values, got {arr.dtype}")
        out = cls(arr.shape[0], arr.shape[1])
        for r, c in zip(*np.nonzero(arr)):
            out.elements[(int(r), int(c))] = int(arr[r, c])
        return out

    @classmethod
    def from_file(cls, path):
        """Load a matrix from a text file. See :func:`sparsetext.io.load`."""
        from ..io import load

        return load(path)

    @classmethod
    def parse(cls, text):
        """Parse matrix text. See :func:`sparsetext.io.loads`."""
        from ..io import loads

        return loads(text)

    @property
    def nnz(self):
        """Number of stored non-zero entries."""
        return len(self.elements)

    def set_element(self, row, col, value):
        """Store ``value`` at ``(row, col)``; a zero value removes the entry.

        Raises
        ------
        TypeError
            If ``row``, ``col`` or ``value`` is not an integer.
        """
        key = (operator.index(row), operator.index(col))
        value = operator.index(value)
        if value != 0:
            self.elements[key] = value
        else:
            self.elements.pop(key, None)

    def get_element(self, row, col):
        """Return the value at ``(row, col)``, or 0 if nothing is stored.

        Raises
        ------
        TypeError
            If ``row`` or ``col`` is not an integer.
        """
        return self.elements.get((operator.index(row), operator.index(col)), 0)

    def __getitem__(self, key):
        if isinstance(key, tuple) and len(key) == 2:
            return self.get_element(*key)
        raise NotImplementedError("only (row, col) indexing is supported")

    def __setitem__(self, key, value):
        if isinstance(key, tuple) and len(key) == 2:
            self.set_element(key[0], key[1], value)
            return
        raise NotImplementedError("only (row, col) indexing is supported")

    def items(self):
        return self.elements.items()

    def copy(self):
        out = SparseMatrix(self.rows, self.cols)
        out.elements = dict(self.elements)
        return out

    def _check_same_shape(self, other, operation):
        if self.rows != other.rows or self.cols != other.cols:
            raise DimensionMismatch(operation, self.shape, other.shape)

    def add(self, other):
        """Elementwise sum with a matrix of the same shape.

        Parameters
        ----------
        other : SparseMatrix
            Right-hand operand.

        Returns
        -------
        SparseMatrix
            New matrix; coordinates whose sum is 0 are not stored.

        Raises
        ------
        DimensionMismatch
            If the shapes differ.
        """
        self._check_same_shape(other, "addition")
        result = self.copy()
        for (r, c), v in other.items():
            result.set_element(r, c, result.get_element(r, c) + v)
        logger.debug("add %s + %s -> nnz=%d", self.shape, other.shape, result.nnz)
        return result

    def subtract(self, other):
        """Elementwise difference ``self - other``; see :meth:`add`."""
        self._check_same_shape(other, "subtraction")
        result = self.copy()
        for (r, c), v in other.items():
            result.set_element(r, c, result.get_element(r, c) - v)
        logger.debug("subtract %s - %s -> nnz=%d", self.shape, other.shape, result.nnz)
        return result

    def multiply(self, other, kernel=None):
        """Matrix product ``self @ other``.

        Parameters
        ----------
        other : SparseMatrix
            Right-hand operand with ``other.rows == self.cols``.
        kernel : {"indexed", "scan"}, optional
            Accumulation strategy. ``"scan"`` pairs every entry of ``self``
            with every entry of ``other``; ``"indexed"`` first groups
            ``other`` by row. Both give the same result. Defaults to
            :func:`sparsetext.get_matmul_kernel`.

        Returns
        -------
        SparseMatrix
            New ``self.rows x other.cols`` matrix.

        Raises
        ------
        DimensionMismatch
            If the inner dimensions differ.
        ValueError
            If ``kernel`` is unknown.
        """
        if self.cols != other.rows:
            raise DimensionMismatch("multiplication", self.shape, other.shape)
        if kernel is None:
            kernel = _runtime.get_matmul_kernel()
        if kernel == "indexed":
            result = self._multiply_indexed(other)
        elif kernel == "scan":
            result = self._multiply_scan(other)
        else:
            raise ValueError(f"unknown matmul kernel {kernel!r}")
        logger.debug(
            "multiply %s @ %s [%s] -> nnz=%d", self.shape, other.shape, kernel, result.nnz
        )
        return result

    def _multiply_scan(self, other):
        result = SparseMatrix(self.rows, other.cols)
        for (r1, c1), v1 in self.items():
            for (r2, c2), v2 in other.items():
                if c1 == r2:
                    result.set_element(r1, c2, result.get_element(r1, c2) + v1 * v2)
        return result

    def _multiply_indexed(self, other):
        by_row = defaultdict(list)
        for (r2, c2), v2 in other.items():
            by_row[r2].append((c2, v2))
        result = SparseMatrix(self.rows, other.cols)
        for (r1, c1), v1 in self.items():
            for c2, v2 in by_row.get(c1, ()):
                result.set_element(r1, c2, result.get_element(r1, c2) + v1 * v2)
        return result

    def __add__(self, other):
        if isinstance(other, SparseMatrix):
            return self.add(other)
        return NotImplemented

    def __sub__(self, other):
        if isinstance(other, SparseMatrix):
            return self.subtract(other)
        return NotImplemented

    def __matmul__(self, other):
        if isinstance(other, SparseMatrix):
            return self.multiply(other)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, SparseMatrix):
            return NotImplemented
        return self.shape == other.shape and self.elements == other.elements

    __hash__ = None

    def to_string(self):
        """Serialize to the text format. See :func:`sparsetext.io.dumps`."""
        from ..io import dumps

        return dumps(self)

    __str__ = to_string

    def save_to_file(self, path):
        """Write the text form to ``path``, overwriting it."""
        from ..io import save

        save(self, path)

    def __repr__(self):
        return f"SparseMatrix({self.rows}x{self.cols}, nnz={self.nnz})"
