"""
MCalc - Matrix Calculator Kernel
================================

Exact, dimension-checked arithmetic over small rectangular matrices:
determinant, adjugate/inverse by cofactor expansion, transpose, 90-degree
rotation, addition and multiplication.

Quick start:
    import mcalc

    A = mcalc.Matrix([[1, 2], [3, 4]])
    mcalc.determinant(A)         # -2.0
    mcalc.inverse(A)             # adjugate / det
    mcalc.rotate_right(A)        # 90 degrees clockwise
    mcalc.multiply(A, mcalc.identity(2))

    # Check cost before an O(n!) expansion
    report = mcalc.detect_matrix(A)

Failures are raised as mcalc.MatrixError subclasses (NotSquare, Singular,
ShapeMismatch, ...), never returned as None.

License: MIT
"""

__version__ = "0.1.0"

from mcalc.errors import (
    MatrixError, InvalidShape, IndexOutOfRange, NotSquare, Singular,
    ShapeMismatch, OrderTooLarge,
)
from mcalc.matrix import (
    Matrix, MAX_DIM, as_matrix, is_square, same_shape, check_dims,
    zeros, identity, resize, random_matrix,
)
from mcalc.transforms import transpose, rotate_right, add, multiply
from mcalc.cofactor import (
    DEFAULT_MAX_ORDER, minor, determinant, adjugate, inverse,
)
from mcalc.detector import detect_matrix

__all__ = [
    "Matrix", "MAX_DIM", "as_matrix", "is_square", "same_shape",
    "check_dims", "zeros", "identity", "resize", "random_matrix",
    "transpose", "rotate_right", "add", "multiply",
    "DEFAULT_MAX_ORDER", "minor", "determinant", "adjugate", "inverse",
    "detect_matrix",
    "MatrixError", "InvalidShape", "IndexOutOfRange", "NotSquare",
    "Singular", "ShapeMismatch", "OrderTooLarge",
]
