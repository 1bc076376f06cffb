"""
MCalc Errors: failure signals raised by the kernel.

Every failure is synchronous and deterministic: the same input fails the
same way every time. Nothing is ever returned as a sentinel value.
"""


class MatrixError(ValueError):
    """Base class for all kernel failures."""


class InvalidShape(MatrixError):
    """Matrix construction with a non-positive, ragged or non-2-D shape."""


class IndexOutOfRange(MatrixError, IndexError):
    """Row/column index outside the matrix."""

    def __init__(self, index, shape):
        self.index = index
        self.shape = shape
        super().__init__(
            f"Index {index} out of range for {shape[0]}x{shape[1]} matrix")


class NotSquare(MatrixError):
    """Determinant, adjugate or inverse requested for a non-square matrix."""

    def __init__(self, shape, operation="determinant"):
        self.shape = shape
        self.operation = operation
        super().__init__(
            f"{operation} requires a square matrix, got {shape[0]}x{shape[1]}")


class Singular(MatrixError, ZeroDivisionError):
    """Determinant is exactly 0, no inverse exists."""

    def __init__(self, determinant=0.0):
        self.determinant = determinant
        super().__init__("Matrix is singular (det = 0), no inverse exists")


class ShapeMismatch(MatrixError):
    """
    Two matrices with incompatible shapes.

    Attributes
    ----------
    left, right : tuple of int
        Shapes of the two operands.
    operation : str
        'add' or 'multiply'.
    """

    def __init__(self, left, right, operation):
        self.left = left
        self.right = right
        self.operation = operation
        if operation == "multiply":
            msg = (f"Cannot multiply {left[0]}x{left[1]} by {right[0]}x{right[1]}: "
                   f"columns of A ({left[1]}) must equal rows of B ({right[0]})")
        else:
            msg = (f"Cannot {operation} {left[0]}x{left[1]} and "
                   f"{right[0]}x{right[1]}: shapes must match")
        super().__init__(msg)


class OrderTooLarge(MatrixError):
    """Square matrix above the caller-imposed cofactor ceiling."""

    def __init__(self, order, max_order):
        self.order = order
        self.max_order = max_order
        super().__init__(
            f"Order {order} exceeds max_order {max_order} "
            f"(cofactor expansion is O(n!))")
