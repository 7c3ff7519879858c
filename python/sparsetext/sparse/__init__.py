from .base import SparseArray
from .matrix import SparseMatrix

__all__ = [
    "SparseArray",
    "SparseMatrix",
]
