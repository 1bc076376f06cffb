"""
MCalc Matrix: the rectangular value type every operation consumes.

A Matrix is a read-only 2-D float64 buffer with its (rows, cols) pair.
Operations never mutate a Matrix; each result is a freshly allocated one.

Also hosts the editor-side helpers (zero fill, resize with truncation,
random fill) that produce inputs for the kernel.
"""

import numpy as np
from scipy import sparse

from mcalc.errors import IndexOutOfRange, InvalidShape

# Size bound of editable matrices (1..MAX_DIM per side)
MAX_DIM = 99


def _as_array(obj):
    """Coerce matrix-like input to a read-only 2-D float64 array."""
    if isinstance(obj, Matrix):
        return obj._data
    if sparse.issparse(obj):
        obj = obj.toarray()
    try:
        raw = np.array(obj)
    except (TypeError, ValueError) as e:
        raise InvalidShape(f"Not a rectangular numeric matrix: {e}") from e

    # Cell text is parsed by the caller, never here
    if raw.dtype.kind in ("U", "S") or (
            raw.dtype.kind == "O"
            and any(isinstance(x, (str, bytes)) for x in raw.ravel())):
        raise InvalidShape("Matrix cells must be numbers, not strings")
    if raw.dtype.kind == "c":
        raise InvalidShape("Matrix cells must be real numbers")
    try:
        arr = raw.astype(np.float64)
    except (TypeError, ValueError) as e:
        raise InvalidShape(f"Not a rectangular numeric matrix: {e}") from e

    if arr.ndim != 2:
        raise InvalidShape(f"Matrix must be 2-D, got {arr.ndim}-D input")
    if arr.shape[0] < 1 or arr.shape[1] < 1:
        raise InvalidShape(
            f"Matrix needs at least 1 row and 1 column, got shape {arr.shape}")

    arr.flags.writeable = False
    return arr


class Matrix:
    """
    Immutable rectangular matrix of real numbers.

    Parameters
    ----------
    data : Matrix, array-like or scipy.sparse matrix
        Rows of numeric cells. Every row must have the same length.

    Examples
    --------
    >>> m = Matrix([[1, 2], [3, 4]])
    >>> m.shape
    (2, 2)
    >>> m[1, 0]
    3.0
    """

    def __init__(self, data):
        self._data = _as_array(data)

    @classmethod
    def _wrap(cls, arr):
        # Internal fast path: arr is a fresh 2-D float64 array owned by the caller
        arr.flags.writeable = False
        m = cls.__new__(cls)
        m._data = arr
        return m

    @property
    def rows(self):
        return self._data.shape[0]

    @property
    def cols(self):
        return self._data.shape[1]

    @property
    def shape(self):
        return (self.rows, self.cols)

    def is_square(self):
        return self.rows == self.cols

    def to_numpy(self):
        """Writable copy of the cells as a float64 array."""
        return self._data.copy()

    def tolist(self):
        return self._data.tolist()

    def __getitem__(self, key):
        try:
            value = self._data[key]
        except IndexError as e:
            raise IndexOutOfRange(key, self.shape) from e
        if isinstance(value, np.ndarray):
            return tuple(value.tolist())
        return float(value)

    def __len__(self):
        return self.rows

    def __iter__(self):
        for row in self._data:
            yield tuple(row.tolist())

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            try:
                other = Matrix(other)
            except InvalidShape:
                return NotImplemented
        return (self.shape == other.shape
                and bool(np.array_equal(self._data, other._data)))

    def __hash__(self):
        return hash((self.shape, tuple(self._data.ravel().tolist())))

    def __repr__(self):
        return f"Matrix(shape={self.rows}x{self.cols}, data={self.tolist()})"


def as_matrix(obj):
    """Return obj as a Matrix (no copy if it already is one)."""
    if isinstance(obj, Matrix):
        return obj
    return Matrix(obj)


def is_square(m):
    """True when m has as many rows as columns."""
    return as_matrix(m).is_square()


def same_shape(a, b):
    """True when a and b have identical (rows, cols)."""
    return as_matrix(a).shape == as_matrix(b).shape


def check_dims(rows, cols, max_dim=MAX_DIM):
    """
    Validate a requested (rows, cols) pair.

    Raises
    ------
    InvalidShape
        If either side is not an int in 1..max_dim.
    """
    for name, value in (("rows", rows), ("cols", cols)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
            raise InvalidShape(f"{name} must be an integer, got {value!r}")
        if value < 1:
            raise InvalidShape(f"{name} must be >= 1, got {value}")
        if max_dim is not None and value > max_dim:
            raise InvalidShape(f"{name} must be <= {max_dim}, got {value}")


def zeros(rows, cols):
    """A rows x cols matrix filled with 0."""
    check_dims(rows, cols, max_dim=None)
    return Matrix._wrap(np.zeros((rows, cols), dtype=np.float64))


def identity(n):
    """The n x n identity matrix."""
    check_dims(n, n, max_dim=None)
    return Matrix._wrap(np.eye(n, dtype=np.float64))


def resize(m, rows, cols, max_dim=MAX_DIM):
    """
    Resize to rows x cols, keeping the overlapping top-left block.

    Cells outside the old shape are 0; cells outside the new shape are
    dropped.
    """
    src = _as_array(m)
    check_dims(rows, cols, max_dim=max_dim)
    out = np.zeros((rows, cols), dtype=np.float64)
    r = min(rows, src.shape[0])
    c = min(cols, src.shape[1])
    out[:r, :c] = src[:r, :c]
    return Matrix._wrap(out)


def random_matrix(rows, cols, low=-9, high=9, seed=None, max_dim=MAX_DIM):
    """
    A rows x cols matrix of uniformly drawn integers in [low, high].

    Parameters
    ----------
    seed : int or numpy.random.Generator, optional
        Seed for reproducible fills.
    """
    check_dims(rows, cols, max_dim=max_dim)
    if low > high:
        raise InvalidShape(f"low ({low}) must be <= high ({high})")
    rng = np.random.default_rng(seed)
    cells = rng.integers(low, high, size=(rows, cols), endpoint=True)
    return Matrix._wrap(cells.astype(np.float64))
