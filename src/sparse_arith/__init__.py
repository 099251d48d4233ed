"""
Sparse integer matrix arithmetic over a coordinate-list text format.

Matrices are loaded from ``rows=/cols=/(row, col, value)`` files, added, subtracted
or multiplied using only their non-zero entries, and written back in the same format.
"""

__version__ = "0.1.0"

from .sparse_matrix import SparseMatrix
from .matrix_format import parse_matrix, serialize_matrix, load_matrix, save_matrix
from .matrix_ops import add, subtract, multiply, apply_operation
from .constants import OPERATIONS
from .config import CalculatorConfig
from .sparse_calculator import SparseMatrixCalculator, list_matrix_files
from .matrix_errors import (
    SparseMatrixError,
    MatrixFormatError,
    MalformedHeaderError,
    MalformedEntryError,
    IndexOutOfBoundsError,
    DimensionMismatchError,
    InvalidDimensionsError,
    InvalidValueError,
    InvalidOperationError,
)

__all__ = [
    "SparseMatrix",
    "parse_matrix",
    "serialize_matrix",
    "load_matrix",
    "save_matrix",
    "add",
    "subtract",
    "multiply",
    "apply_operation",
    "OPERATIONS",
    "CalculatorConfig",
    "SparseMatrixCalculator",
    "list_matrix_files",
    "SparseMatrixError",
    "MatrixFormatError",
    "MalformedHeaderError",
    "MalformedEntryError",
    "IndexOutOfBoundsError",
    "DimensionMismatchError",
    "InvalidDimensionsError",
    "InvalidValueError",
    "InvalidOperationError",
]
