"""Tests for mcalc v0.1.0."""
import numpy as np
from scipy import sparse
import pytest

import mcalc
from mcalc import Matrix, InvalidShape, ShapeMismatch, IndexOutOfRange


def test_version():
    assert mcalc.__version__ == "0.1.0"


# === Matrix construction ===

def test_zeros():
    m = mcalc.zeros(2, 3)
    assert m.shape == (2, 3)
    assert m.rows == 2 and m.cols == 3
    assert m == [[0, 0, 0], [0, 0, 0]]


@pytest.mark.parametrize("rows, cols", [(0, 2), (2, 0), (-1, 3)])
def test_zeros_invalid_shape(rows, cols):
    with pytest.raises(InvalidShape):
        mcalc.zeros(rows, cols)


def test_matrix_from_lists():
    m = Matrix([[1, 2], [3, 4]])
    assert m[0, 1] == 2.0
    assert m[1] == (3.0, 4.0)
    assert len(m) == 2
    assert list(m) == [(1.0, 2.0), (3.0, 4.0)]


def test_matrix_rejects_ragged():
    with pytest.raises(InvalidShape):
        Matrix([[1, 2], [3]])


def test_matrix_rejects_empty_and_1d():
    with pytest.raises(InvalidShape):
        Matrix([])
    with pytest.raises(InvalidShape):
        Matrix([[]])
    with pytest.raises(InvalidShape):
        Matrix([1, 2, 3])


def test_matrix_rejects_non_numeric():
    with pytest.raises(InvalidShape):
        Matrix([["a", 1]])


def test_matrix_rejects_numeric_strings():
    with pytest.raises(InvalidShape):
        Matrix([["1", "2"], ["3", "4"]])
    with pytest.raises(InvalidShape):
        Matrix([[1, "2"], [3, None]])
    with pytest.raises(InvalidShape):
        Matrix([[b"1"]])


def test_matrix_rejects_complex():
    with pytest.raises(InvalidShape):
        Matrix([[1 + 2j]])


def test_matrix_from_sparse():
    A = sparse.eye(3, format="csr") * 2.0
    m = Matrix(A)
    assert m == np.eye(3) * 2.0


def test_matrix_is_read_only():
    src = [[1.0, 2.0], [3.0, 4.0]]
    m = Matrix(src)
    src[0][0] = 99.0
    assert m[0, 0] == 1.0
    arr = m.to_numpy()
    arr[0, 0] = 42.0
    assert m[0, 0] == 1.0
    with pytest.raises(ValueError):
        m._data[0, 0] = 5.0


def test_matrix_getitem_out_of_range():
    m = Matrix([[1, 2], [3, 4]])
    with pytest.raises(IndexOutOfRange):
        m[2, 0]


def test_matrix_equality_and_hash():
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix(np.array([[1.0, 2.0], [3.0, 4.0]]))
    assert a == b
    assert hash(a) == hash(b)
    assert a != Matrix([[1, 2, 3]])
    assert a != "not a matrix"


def test_is_square_same_shape():
    assert mcalc.is_square([[1, 2], [3, 4]])
    assert not mcalc.is_square([[1, 2, 3], [4, 5, 6]])
    assert mcalc.same_shape([[1, 2]], [[3, 4]])
    assert not mcalc.same_shape([[1, 2]], [[3], [4]])


def test_identity():
    assert mcalc.identity(3) == np.eye(3)


# === Editor helpers ===

def test_resize_truncates_and_pads():
    m = Matrix([[1, 2, 3], [4, 5, 6]])
    assert mcalc.resize(m, 1, 2) == [[1, 2]]
    assert mcalc.resize(m, 3, 4) == [[1, 2, 3, 0], [4, 5, 6, 0], [0, 0, 0, 0]]
    # input untouched
    assert m == [[1, 2, 3], [4, 5, 6]]


def test_resize_bounds():
    m = Matrix([[1]])
    with pytest.raises(InvalidShape):
        mcalc.resize(m, 0, 1)
    with pytest.raises(InvalidShape):
        mcalc.resize(m, 100, 1)
    assert mcalc.resize(m, 99, 99).shape == (99, 99)


def test_random_matrix_range_and_seed():
    m = mcalc.random_matrix(5, 4, seed=7)
    arr = m.to_numpy()
    assert m.shape == (5, 4)
    assert arr.min() >= -9 and arr.max() <= 9
    assert np.array_equal(arr, np.round(arr))
    assert m == mcalc.random_matrix(5, 4, seed=7)


def test_random_matrix_invalid():
    with pytest.raises(InvalidShape):
        mcalc.random_matrix(0, 3)
    with pytest.raises(InvalidShape):
        mcalc.random_matrix(2, 2, low=5, high=1)


# === Transforms ===

def test_transpose_rectangular():
    assert mcalc.transpose([[1, 2, 3], [4, 5, 6]]) == [[1, 4], [2, 5], [3, 6]]


def test_transpose_twice_is_identity():
    m = mcalc.random_matrix(3, 5, seed=1)
    assert mcalc.transpose(mcalc.transpose(m)) == m


def test_rotate_right():
    assert mcalc.rotate_right([[1, 2, 3], [4, 5, 6]]) == [[4, 1], [5, 2], [6, 3]]


def test_rotate_right_four_times():
    m = mcalc.random_matrix(2, 5, seed=3)
    r = m
    for _ in range(4):
        r = mcalc.rotate_right(r)
    assert r == m


def test_rotate_single_cell_and_column():
    assert mcalc.rotate_right([[7]]) == [[7]]
    assert mcalc.rotate_right([[1], [2], [3]]) == [[3, 2, 1]]


def test_add():
    assert mcalc.add([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[6, 8], [10, 12]]


def test_add_shape_mismatch():
    with pytest.raises(ShapeMismatch) as exc:
        mcalc.add([[1, 2], [3, 4]], [[1, 2, 3], [4, 5, 6]])
    assert exc.value.left == (2, 2)
    assert exc.value.right == (2, 3)
    assert exc.value.operation == "add"


def test_multiply():
    assert mcalc.multiply([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]


def test_multiply_rectangular():
    a = [[1, 2, 3], [4, 5, 6]]
    b = [[7], [8], [9]]
    assert mcalc.multiply(a, b) == [[50], [122]]


def test_multiply_shape_mismatch():
    with pytest.raises(ShapeMismatch) as exc:
        mcalc.multiply([[1, 2, 3], [4, 5, 6]], [[1, 2], [3, 4]])
    assert exc.value.left[1] == 3
    assert exc.value.right[0] == 2
    assert "(3)" in str(exc.value) and "(2)" in str(exc.value)


def test_multiply_matches_numpy():
    a = mcalc.random_matrix(3, 4, seed=11)
    b = mcalc.random_matrix(4, 2, seed=12)
    assert np.allclose(mcalc.multiply(a, b).to_numpy(), a.to_numpy() @ b.to_numpy())


def test_operations_do_not_mutate_inputs():
    a = Matrix([[1, 2], [3, 4]])
    b = Matrix([[5, 6], [7, 8]])
    mcalc.add(a, b)
    mcalc.multiply(a, b)
    mcalc.transpose(a)
    mcalc.rotate_right(a)
    mcalc.inverse(a)
    assert a == [[1, 2], [3, 4]]
    assert b == [[5, 6], [7, 8]]


# === Detector ===

def test_detect_square():
    report = mcalc.detect_matrix(np.eye(4))
    assert report["shape"] == (4, 4)
    assert report["is_square"]
    assert report["strategy"] == "cofactor"
    assert report["cofactor_terms"] == 24
    assert report["adjugate_terms"] == 16 * 6
    assert report["nnz"] == 4
    assert report["within_limit"]


def test_detect_small_orders():
    assert mcalc.detect_matrix([[3]])["strategy"] == "direct"
    assert mcalc.detect_matrix([[1, 2], [3, 4]])["strategy"] == "closed_form"


def test_detect_rectangular():
    report = mcalc.detect_matrix([[1, 0, 0], [0, 0, 0]])
    assert not report["is_square"]
    assert report["strategy"] == "none"
    assert report["density"] == round(1 / 6, 6)
    assert not report["within_limit"]


def test_detect_too_large():
    report = mcalc.detect_matrix(np.eye(6), max_order=5)
    assert report["strategy"] == "too_large"
    assert not report["within_limit"]


def test_detect_no_limit():
    report = mcalc.detect_matrix(np.eye(12), max_order=None)
    assert report["strategy"] == "cofactor"
    assert report["within_limit"]
    assert mcalc.detect_matrix([[1, 2], [3, 4]], max_order=None)["within_limit"]



def test_detect_sparse_input():
    A = sparse.eye(3, format="csr")
    report = mcalc.detect_matrix(A)
    assert report["nnz"] == 3


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
