import numbers
import numpy as np
import pandas as pd
from scipy import sparse
from dataclasses import dataclass, field
from typing import Iterator

from .matrix_errors import IndexOutOfBoundsError, InvalidDimensionsError, InvalidValueError



def _is_integer(value) -> bool:
    return isinstance(value, numbers.Integral) and not isinstance(value, (bool, np.bool_))


@dataclass
class SparseMatrix:
    """
    Integer matrix storing only its non-zero entries.

    Entries live in ``data_store``, a dict keyed by ``(row, col)`` integer tuples.
    A value written as zero is removed rather than stored, so every coordinate
    absent from the dict reads as 0. Dimensions are fixed at construction.
    """

    rows: int
    cols: int
    data_store: dict[tuple[int, int], int] = field(default_factory=dict)

    def __post_init__(self):
        if not _is_integer(self.rows) or not _is_integer(self.cols) or self.rows < 0 or self.cols < 0:
            raise InvalidDimensionsError(self.rows, self.cols)
        object.__setattr__(self, "rows", int(self.rows))
        object.__setattr__(self, "cols", int(self.cols))

        # route initial entries through set() so the bounds and zero checks apply
        initial = self.data_store
        self.data_store = {}
        for (i, j), v in initial.items():
            self.set(i, j, v)

    def __setattr__(self, name, value):
        # dimensions are fixed once constructed
        if name in ("rows", "cols") and name in self.__dict__:
            raise AttributeError(f"SparseMatrix dimensions cannot be changed, {name} is read-only")
        super().__setattr__(name, value)

    @classmethod
    def with_dimensions(cls, rows: int, cols: int) -> 'SparseMatrix':
        """Create an empty rows x cols matrix."""
        return cls(rows, cols)

    @classmethod
    def from_file(cls, path: str) -> 'SparseMatrix':
        """Load a matrix from a coordinate-list text file."""
        from .matrix_format import load_matrix
        return load_matrix(path)

    @classmethod
    def from_dense(cls, array) -> 'SparseMatrix':
        """Build a matrix from a 2D array-like, keeping only the non-zero values.

        Args:
            array: Any 2D array-like of integers (list of lists, numpy array).

        Returns:
            New SparseMatrix with the same shape as ``array``.
        """
        arr = np.asarray(array)
        if arr.ndim != 2:
            raise ValueError(f"Expected a 2D array, got shape {arr.shape}")
        result = cls(arr.shape[0], arr.shape[1])
        for i, j in zip(*np.nonzero(arr)):
            v = arr[i, j]
            result.set(int(i), int(j), v.item() if isinstance(v, np.generic) else v)
        return result

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    @property
    def nnz(self) -> int:
        """Number of stored (non-zero) entries."""
        return len(self.data_store)

    def get(self, row: int, col: int) -> int:
        """Get the value at (row, col), 0 when absent or outside the matrix."""
        return self.data_store.get((row, col), 0)

    def set(self, row: int, col: int, value: int) -> None:
        """Set the value at (row, col). Writing 0 removes the entry.

        Raises:
            IndexOutOfBoundsError: If (row, col) are not integers or lie outside the matrix.
            InvalidValueError: If value is not an integer.
        """
        if not _is_integer(row) or not _is_integer(col):
            raise IndexOutOfBoundsError(row, col, self.rows, self.cols)
        row, col = int(row), int(col)
        if not (0 <= row < self.rows and 0 <= col < self.cols):
            raise IndexOutOfBoundsError(row, col, self.rows, self.cols)
        if not _is_integer(value):
            raise InvalidValueError(value)

        if value == 0:
            # Remove zero values to maintain sparsity
            self.data_store.pop((row, col), None)
        else:
            self.data_store[(row, col)] = int(value)

    def add_at(self, row: int, col: int, value: int) -> None:
        """Add a value to the element at position (row, col)."""
        self.set(row, col, self.get(row, col) + value)

    def __getitem__(self, key) -> int:
        if isinstance(key, tuple) and len(key) == 2:
            i, j = key
        else:
            raise KeyError("SparseMatrix indices must be a tuple of length 2")
        return self.get(i, j)

    def __setitem__(self, key, value: int) -> None:
        if isinstance(key, tuple) and len(key) == 2:
            i, j = key
        else:
            raise KeyError("SparseMatrix indices must be a tuple of length 2")
        self.set(i, j, value)

    def __contains__(self, key) -> bool:
        """True if (i, j) holds a non-zero value."""
        if not (isinstance(key, tuple) and len(key) == 2):
            return False
        return key in self.data_store

    def __len__(self) -> int:
        return len(self.data_store)

    def __iter__(self):
        """Iterate over the coordinates holding non-zero values."""
        return iter(self.data_store.keys())

    def items(self) -> list[tuple[tuple[int, int], int]]:
        """Returns a list of ((row, col), value) pairs, mimicking dict.items()."""
        return list(self.data_store.items())

    def entries(self) -> Iterator[tuple[int, int, int]]:
        """Lazily yield (row, col, value) triples in storage order."""
        for (i, j), v in self.data_store.items():
            yield i, j, v

    def sorted_entries(self) -> list[tuple[int, int, int]]:
        """(row, col, value) triples ordered by row, then column."""
        return sorted(self.entries())

    def is_equal(self, other: 'SparseMatrix') -> bool:
        return self.shape == other.shape and self.data_store == other.data_store

    def __add__(self, other: 'SparseMatrix') -> 'SparseMatrix':
        from .matrix_ops import add
        return add(self, other)

    def __sub__(self, other: 'SparseMatrix') -> 'SparseMatrix':
        from .matrix_ops import subtract
        return subtract(self, other)

    def __matmul__(self, other: 'SparseMatrix') -> 'SparseMatrix':
        from .matrix_ops import multiply
        return multiply(self, other)

    def __repr__(self) -> str:
        if not self.data_store:
            return f"SparseMatrix({self.rows}x{self.cols}, {{}})"
        items_str = ", ".join(f"{k}: {v}" for k, v in sorted(self.data_store.items()))
        return f"SparseMatrix({self.rows}x{self.cols}, {{{items_str}}})"

    def copy(self) -> 'SparseMatrix':
        """Returns a copy of the matrix."""
        result = SparseMatrix(self.rows, self.cols)
        result.data_store = self.data_store.copy()
        return result

    def to_dense(self, dtype=np.int64) -> np.ndarray:
        """Expand into a dense numpy array.

        Use ``dtype=object`` for values that do not fit in 64 bits.
        """
        arr = np.zeros(self.shape, dtype=dtype)
        for i, j, v in self.entries():
            arr[i, j] = v
        return arr

    def to_coo(self, dtype=np.int64) -> sparse.coo_matrix:
        """Convert into a scipy.sparse COO matrix."""
        triples = self.sorted_entries()
        row_idx = np.array([t[0] for t in triples], dtype=np.int64)
        col_idx = np.array([t[1] for t in triples], dtype=np.int64)
        vals = np.array([t[2] for t in triples], dtype=dtype)
        return sparse.coo_matrix((vals, (row_idx, col_idx)), shape=self.shape)

    def to_dataframe(self) -> pd.DataFrame:
        """Entries as a DataFrame with columns row, col, value sorted by coordinate."""
        return pd.DataFrame(self.sorted_entries(), columns=['row', 'col', 'value'])
