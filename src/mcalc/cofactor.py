"""
MCalc Cofactor: determinant, adjugate and inverse by Laplace expansion.

determinant(M) expands along row 0:

    det(M) = sum_j (-1)^j * M[0, j] * det(minor(M, 0, j))

with closed forms for n = 1 and n = 2. Cost is O(n!), so this is meant
for small matrices only; pass max_order to refuse anything larger.

The adjugate is the transposed cofactor matrix, and the inverse is the
adjugate divided by the determinant. A determinant of exactly 0.0 is the
only value treated as singular: no epsilon is applied, so a matrix that
is singular in exact arithmetic can come out non-singular after float
round-off (and vice versa). Callers that need a tolerance apply their own.
"""

import math
import sys
import time

import numpy as np

from mcalc.errors import IndexOutOfRange, InvalidShape, NotSquare, OrderTooLarge, Singular
from mcalc.matrix import Matrix, _as_array
from mcalc.transforms import transpose

# Ceiling used when judging whether an expansion is affordable
DEFAULT_MAX_ORDER = 10


def _check_square(a, operation, max_order):
    n, c = a.shape
    if n != c:
        raise NotSquare(a.shape, operation)
    if max_order is not None and n > max_order:
        raise OrderTooLarge(n, max_order)
    return n


def _minor(a, i, j):
    """Fresh copy of a without row i and column j."""
    return np.delete(np.delete(a, i, axis=0), j, axis=1)


def _det(a):
    """Recursive cofactor expansion of a square float64 array."""
    n = a.shape[0]
    if n == 1:
        return float(a[0, 0])
    if n == 2:
        return float(a[0, 0] * a[1, 1] - a[0, 1] * a[1, 0])

    det = 0.0
    for j in range(n):
        sign = 1.0 if j % 2 == 0 else -1.0
        det += sign * float(a[0, j]) * _det(_minor(a, 0, j))
    return det


def _cofactors(a):
    """Cofactor matrix C[i, j] = (-1)^(i+j) * det(minor(a, i, j))."""
    n = a.shape[0]
    cof = np.empty((n, n), dtype=np.float64)
    for i in range(n):
        for j in range(n):
            sign = 1.0 if (i + j) % 2 == 0 else -1.0
            cof[i, j] = sign * _det(_minor(a, i, j))
    return cof


def minor(m, i, j):
    """
    Remove row i and column j.

    Parameters
    ----------
    m : Matrix or array-like
        Input with at least 2 rows and 2 columns.
    i, j : int
        Row and column to delete, 0 <= i < rows, 0 <= j < cols.

    Returns
    -------
    Matrix
        New (rows-1) x (cols-1) matrix. Never a view of m.
    """
    a = _as_array(m)
    rows, cols = a.shape
    for k in (i, j):
        if isinstance(k, bool) or not isinstance(k, (int, np.integer)):
            raise IndexOutOfRange((i, j), a.shape)
    if not (0 <= i < rows and 0 <= j < cols):
        raise IndexOutOfRange((i, j), a.shape)
    if rows < 2 or cols < 2:
        raise InvalidShape(
            f"Minor of a {rows}x{cols} matrix would have no cells")
    return Matrix._wrap(_minor(a, i, j))


def determinant(m, max_order=None, verbose=False):
    """
    Determinant of a square matrix by cofactor expansion.

    Parameters
    ----------
    m : Matrix or array-like
        Square matrix.
    max_order : int, optional
        Refuse matrices larger than max_order x max_order.
    verbose : bool
        Print strategy and timing info.

    Returns
    -------
    float
        The determinant.

    Raises
    ------
    NotSquare
        If m is not square.
    OrderTooLarge
        If max_order is given and exceeded.
    """
    a = _as_array(m)
    n = _check_square(a, "determinant", max_order)

    if verbose:
        print(f"  [mcalc] det {n}x{n}, expansion terms={math.factorial(n):,}")
        sys.stdout.flush()

    t0 = time.time()
    det = _det(a)

    if verbose:
        print(f"  [mcalc] det={det:.6g} [{time.time() - t0:.3f}s]")
        sys.stdout.flush()
    return det


def adjugate(m, max_order=None, verbose=False):
    """
    Adjugate (classical adjoint): transpose of the cofactor matrix.

    A 1x1 matrix has no proper minors; its adjugate is [[1]] by convention.
    Computes n^2 determinants of order n-1.
    """
    a = _as_array(m)
    n = _check_square(a, "adjugate", max_order)
    if n == 1:
        if verbose:
            print("  [mcalc] adjugate 1x1: [[1]] by convention")
            sys.stdout.flush()
        return Matrix._wrap(np.ones((1, 1), dtype=np.float64))

    t0 = time.time()
    adj = transpose(Matrix._wrap(_cofactors(a)))

    if verbose:
        print(f"  [mcalc] adjugate {n}x{n}: {n * n} minors of order {n - 1} "
              f"[{time.time() - t0:.3f}s]")
        sys.stdout.flush()
    return adj


def inverse(m, max_order=None, verbose=False):
    """
    Inverse as adjugate(m) / determinant(m).

    Returns
    -------
    Matrix
        Float cells, even when m is integral.

    Raises
    ------
    NotSquare
        If m is not square.
    Singular
        If the determinant is exactly 0.
    OrderTooLarge
        If max_order is given and exceeded.
    """
    a = _as_array(m)
    n = _check_square(a, "inverse", max_order)

    t0 = time.time()
    det = _det(a)
    if det == 0:
        if verbose:
            print(f"  [mcalc] inverse {n}x{n}: singular (det = 0)")
            sys.stdout.flush()
        raise Singular(det)

    adj = adjugate(a).to_numpy()
    inv = Matrix._wrap(adj / det)

    if verbose:
        print(f"  [mcalc] inverse {n}x{n}, det={det:.6g} [{time.time() - t0:.3f}s]")
        sys.stdout.flush()
    return inv
