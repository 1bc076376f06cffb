"""
MCalc Detector: structure report for a matrix before an expensive call.

Reports shape, density and, for square input, how many products the
cofactor expansion would take, so a caller can refuse a matrix before
running the O(n!) operations.

Usage:
    import mcalc
    report = mcalc.detect_matrix(A)
    if report["within_limit"]:
        d = mcalc.determinant(A)
"""

import math

import numpy as np

from mcalc.cofactor import DEFAULT_MAX_ORDER
from mcalc.matrix import _as_array


def detect_matrix(m, max_order=DEFAULT_MAX_ORDER):
    """
    Analyze matrix structure and recommend an evaluation strategy.

    Parameters
    ----------
    m : Matrix, array-like or scipy.sparse matrix
        The matrix to analyze.
    max_order : int or None
        Largest square order considered affordable for cofactor expansion.
        None means no ceiling.

    Returns
    -------
    dict
        Structure report with shape, density, strategy, expansion cost.
    """
    a = _as_array(m)
    rows, cols = a.shape
    cells = rows * cols
    nnz = int(np.count_nonzero(a))
    density = nnz / cells
    is_square = (rows == cols)

    report = {
        "shape": (rows, cols),
        "cells": cells,
        "nnz": nnz,
        "density": round(density, 6),
        "is_square": is_square,
    }

    if not is_square:
        report["strategy"] = "none"
        report["reason"] = (f"Rectangular {rows}x{cols}: no determinant "
                            f"or inverse, transforms only")
        report["within_limit"] = False
        return report

    n = rows
    within_limit = max_order is None or n <= max_order
    if n == 1:
        strategy = "direct"
        reason = "1x1, determinant is the single cell"
    elif n == 2:
        strategy = "closed_form"
        reason = "2x2, ad - bc"
    elif within_limit:
        strategy = "cofactor"
        reason = f"{n}x{n}, Laplace expansion along row 0 ({math.factorial(n):,} terms)"
    else:
        strategy = "too_large"
        reason = f"{n}x{n} exceeds max_order {max_order}, O(n!) expansion"

    report["strategy"] = strategy
    report["reason"] = reason
    report["cofactor_terms"] = math.factorial(n)
    report["adjugate_terms"] = n * n * math.factorial(n - 1)
    report["within_limit"] = within_limit
    return report
