import numpy as np
import pytest

from sparse_arith import (
    SparseMatrix,
    add,
    subtract,
    multiply,
    apply_operation,
    parse_matrix,
    serialize_matrix,
    load_matrix,
    DimensionMismatchError,
    InvalidOperationError,
)
from test_utils import data_path, random_sparse, validate_dense


@pytest.fixture
def a_2x2() -> SparseMatrix:
    return SparseMatrix.from_dense([[1, 0], [0, 3]])


@pytest.fixture
def b_2x2() -> SparseMatrix:
    return SparseMatrix.from_dense([[2, 0], [4, 0]])


def test_add(a_2x2, b_2x2):
    validate_dense(add(a_2x2, b_2x2), [[3, 0], [4, 3]])


def test_subtract(a_2x2, b_2x2):
    validate_dense(subtract(a_2x2, b_2x2), [[-1, 0], [-4, 3]])


def test_multiply_fixture(a_2x2, b_2x2):
    validate_dense(multiply(a_2x2, b_2x2), [[2, 0], [12, 0]])


def test_operands_are_not_mutated(a_2x2, b_2x2):
    a_before, b_before = a_2x2.copy(), b_2x2.copy()
    add(a_2x2, b_2x2)
    subtract(a_2x2, b_2x2)
    multiply(a_2x2, b_2x2)
    assert a_2x2 == a_before
    assert b_2x2 == b_before


def test_add_zero_matrix_is_identity():
    a = random_sparse(7, 5, density=0.3, seed=1)
    assert add(a, SparseMatrix(7, 5)) == a


def test_subtract_self_is_zero():
    a = random_sparse(7, 5, density=0.3, seed=2)
    diff = subtract(a, a)
    assert diff.shape == a.shape
    assert diff.nnz == 0


def test_add_is_commutative():
    a = random_sparse(8, 6, density=0.25, seed=4)
    b = random_sparse(8, 6, density=0.25, seed=5)
    assert add(a, b) == add(b, a)


def test_cancelling_entries_are_dropped():
    a = SparseMatrix(2, 2, {(0, 0): 5, (1, 1): 1})
    b = SparseMatrix(2, 2, {(0, 0): -5})
    result = add(a, b)
    assert result.data_store == {(1, 1): 1}


def test_multiply_cancelling_sum_is_omitted():
    # row [1, 1] times column [1, -1] sums to zero
    a = SparseMatrix.from_dense([[1, 1]])
    b = SparseMatrix.from_dense([[1], [-1]])
    result = multiply(a, b)
    assert result.shape == (1, 1)
    assert result.nnz == 0


def test_multiply_shape():
    a = load_matrix(data_path('d_2x3.txt'))
    b = load_matrix(data_path('c_3x2.txt'))
    result = multiply(a, b)
    assert result.shape == (2, 2)
    validate_dense(result, a.to_dense() @ b.to_dense())


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_multiply_matches_numpy(seed):
    a = random_sparse(15, 11, density=0.2, seed=seed)
    b = random_sparse(11, 9, density=0.2, seed=seed + 100)
    validate_dense(multiply(a, b), a.to_dense() @ b.to_dense())


def test_multiply_matches_scipy():
    a = random_sparse(30, 40, density=0.05, seed=7)
    b = random_sparse(40, 20, density=0.05, seed=8)
    expected = (a.to_coo().tocsr() @ b.to_coo().tocsr()).toarray()
    validate_dense(multiply(a, b), expected)


def test_add_subtract_match_numpy():
    a = random_sparse(10, 10, density=0.3, seed=9)
    b = random_sparse(10, 10, density=0.3, seed=10)
    validate_dense(add(a, b), a.to_dense() + b.to_dense())
    validate_dense(subtract(a, b), a.to_dense() - b.to_dense())


def test_big_integer_products_are_exact():
    a = SparseMatrix(1, 2, {(0, 0): 2 ** 40, (0, 1): 3})
    b = SparseMatrix(2, 1, {(0, 0): 2 ** 40, (1, 0): 5})
    assert multiply(a, b).get(0, 0) == 2 ** 80 + 15


def test_operator_sugar(a_2x2, b_2x2):
    assert a_2x2 + b_2x2 == add(a_2x2, b_2x2)
    assert a_2x2 - b_2x2 == subtract(a_2x2, b_2x2)
    assert a_2x2 @ b_2x2 == multiply(a_2x2, b_2x2)


def test_add_dimension_mismatch():
    with pytest.raises(DimensionMismatchError) as exc_info:
        add(SparseMatrix(2, 2), SparseMatrix(3, 2))
    assert exc_info.value.left_shape == (2, 2)
    assert exc_info.value.right_shape == (3, 2)


def test_subtract_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        subtract(SparseMatrix(2, 2), SparseMatrix(2, 3))


def test_multiply_dimension_mismatch():
    with pytest.raises(DimensionMismatchError):
        multiply(SparseMatrix(2, 3), SparseMatrix(2, 2))


def test_dimension_mismatch_checked_before_work():
    # even empty operands are rejected
    with pytest.raises(DimensionMismatchError):
        multiply(SparseMatrix(0, 1), SparseMatrix(0, 0))


def test_apply_operation(a_2x2, b_2x2):
    assert apply_operation('add', a_2x2, b_2x2) == add(a_2x2, b_2x2)
    assert apply_operation('subtract', a_2x2, b_2x2) == subtract(a_2x2, b_2x2)
    assert apply_operation('multiply', a_2x2, b_2x2) == multiply(a_2x2, b_2x2)


def test_apply_operation_invalid(a_2x2, b_2x2):
    with pytest.raises(InvalidOperationError):
        apply_operation('divide', a_2x2, b_2x2)


def test_end_to_end_add():
    a = parse_matrix("rows=2\ncols=2\n(0,0,1)\n(1,1,3)\n")
    b = parse_matrix("rows=2\ncols=2\n(0,0,2)\n(1,0,4)\n")
    out = serialize_matrix(add(a, b))
    assert out == "rows=2\ncols=2\n(0, 0, 3)\n(1, 0, 4)\n(1, 1, 3)\n"
    # whitespace-insensitive check of the full entry set
    assert parse_matrix(out).data_store == {(0, 0): 3, (1, 0): 4, (1, 1): 3}
    assert np.array_equal(parse_matrix(out).to_dense(), [[3, 0], [4, 3]])
