from ._runtime import configure_logging, get_matmul_kernel, set_matmul_kernel
from .errors import DimensionMismatch, InvalidSelection, MalformedInput, SparseTextError
from .io import dumps, load, loads, parse, save
from .sparse import SparseMatrix

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "SparseMatrix",
    "parse",
    "loads",
    "load",
    "dumps",
    "save",
    "SparseTextError",
    "MalformedInput",
    "DimensionMismatch",
    "InvalidSelection",
    "set_matmul_kernel",
    "get_matmul_kernel",
    "configure_logging",
]
