"""
MCalc Transforms: transpose, 90-degree rotation, addition, multiplication.

All four are index remappings or accumulations over fresh output arrays.
transpose and rotate_right accept any shape; add and multiply check
shape compatibility first and raise ShapeMismatch.
"""

import numpy as np

from mcalc.errors import ShapeMismatch
from mcalc.matrix import Matrix, _as_array


def transpose(m):
    """C x R matrix with result[j, i] = m[i, j]."""
    a = _as_array(m)
    return Matrix._wrap(a.T.copy())


def rotate_right(m):
    """
    Rotate 90 degrees clockwise: result[j, R-1-i] = m[i, j].

    Not the same as transpose:

    >>> rotate_right([[1, 2, 3], [4, 5, 6]]).tolist()
    [[4.0, 1.0], [5.0, 2.0], [6.0, 3.0]]
    """
    a = _as_array(m)
    rows, cols = a.shape
    out = np.empty((cols, rows), dtype=np.float64)
    for i in range(rows):
        out[:, rows - 1 - i] = a[i, :]
    return Matrix._wrap(out)


def add(a, b):
    """Elementwise sum of two matrices of the same shape."""
    x = _as_array(a)
    y = _as_array(b)
    if x.shape != y.shape:
        raise ShapeMismatch(x.shape, y.shape, "add")
    return Matrix._wrap(x + y)


def multiply(a, b):
    """
    Matrix product by triple-loop accumulation.

    Parameters
    ----------
    a : Matrix or array-like
        R x K matrix.
    b : Matrix or array-like
        K x C matrix.

    Returns
    -------
    Matrix
        R x C product, result[i, j] = sum_k a[i, k] * b[k, j].

    Raises
    ------
    ShapeMismatch
        If a.cols != b.rows.
    """
    x = _as_array(a)
    y = _as_array(b)
    rows, inner = x.shape
    if inner != y.shape[0]:
        raise ShapeMismatch(x.shape, y.shape, "multiply")
    cols = y.shape[1]

    out = np.zeros((rows, cols), dtype=np.float64)
    for i in range(rows):
        for j in range(cols):
            acc = 0.0
            for k in range(inner):
                acc += x[i, k] * y[k, j]
            out[i, j] = acc
    return Matrix._wrap(out)
