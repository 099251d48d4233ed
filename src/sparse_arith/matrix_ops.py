from collections import defaultdict

from .constants import Operation, OPERATIONS
from .matrix_errors import DimensionMismatchError, InvalidOperationError
from .sparse_matrix import SparseMatrix


def _check_same_shape(a: SparseMatrix, b: SparseMatrix, operation: str) -> None:
    if a.rows != b.rows or a.cols != b.cols:
        raise DimensionMismatchError(operation, a.shape, b.shape)


def add(a: SparseMatrix, b: SparseMatrix) -> SparseMatrix:
    """
    Element-wise sum of two equally shaped matrices.

    Only coordinates non-zero in at least one operand are visited, so the cost is
    O(nnz(a) + nnz(b)). Neither operand is modified.

    Raises:
        DimensionMismatchError: If the shapes differ.
    """
    _check_same_shape(a, b, 'addition')
    result = a.copy()
    for i, j, v in b.entries():
        result.add_at(i, j, v)
    return result


def subtract(a: SparseMatrix, b: SparseMatrix) -> SparseMatrix:
    """Element-wise difference a - b of two equally shaped matrices."""
    _check_same_shape(a, b, 'subtraction')
    result = a.copy()
    for i, j, v in b.entries():
        result.add_at(i, j, -v)
    return result


def multiply(a: SparseMatrix, b: SparseMatrix) -> SparseMatrix:
    """
    Matrix product a @ b computed over non-zero terms only.

    a's non-zero columns are grouped per row and b's non-zero rows are grouped per
    column. Each output (i, j) sums a[i, k] * b[k, j] over the intersection of
    the two index sets, instead of scanning the dense inner dimension.

    Raises:
        DimensionMismatchError: If a.cols != b.rows.
    """
    if a.cols != b.rows:
        raise DimensionMismatchError('multiplication', a.shape, b.shape)

    result = SparseMatrix(a.rows, b.cols)

    # row of a -> {k: a[row, k]}
    a_rows = defaultdict(dict)
    for i, k, v in a.entries():
        a_rows[i][k] = v
    # column of b -> {k: b[k, col]}
    b_cols = defaultdict(dict)
    for k, j, v in b.entries():
        b_cols[j][k] = v

    for i, a_row in a_rows.items():
        for j, b_col in b_cols.items():
            # walk the smaller side of the intersection
            if len(a_row) <= len(b_col):
                total = sum(v * b_col[k] for k, v in a_row.items() if k in b_col)
            else:
                total = sum(a_row[k] * v for k, v in b_col.items() if k in a_row)
            if total != 0:
                result.set(i, j, total)

    return result


_OPERATION_FUNCS = {
    Operation.ADD: add,
    Operation.SUBTRACT: subtract,
    Operation.MULTIPLY: multiply,
}


def apply_operation(operation: str, a: SparseMatrix, b: SparseMatrix) -> SparseMatrix:
    """
    Apply the named operation ('add', 'subtract' or 'multiply') to a and b.

    Raises:
        InvalidOperationError: If operation is not one of OPERATIONS.
        DimensionMismatchError: If the operand shapes are incompatible.
    """
    if operation not in _OPERATION_FUNCS:
        raise InvalidOperationError(operation, OPERATIONS)
    return _OPERATION_FUNCS[operation](a, b)
