"""
MCalc demo: walk through the call surface on small matrices.

Usage:
  pip install -e .
  python examples/demo.py [n]

n is the order of the random square matrix (default 4).
"""

import sys
import time

import mcalc


def show(label, value):
    print(f"\n{label}:")
    if isinstance(value, mcalc.Matrix):
        for row in value:
            print("  " + "  ".join(f"{x:8.3f}" for x in row))
    else:
        print(f"  {value}")
    sys.stdout.flush()


def main():
    n = int(sys.argv[1]) if len(sys.argv) > 1 else 4

    A = mcalc.Matrix([[1, 2], [3, 4]])
    B = mcalc.Matrix([[5, 6], [7, 8]])
    show("A", A)
    show("B", B)
    show("det(A)", mcalc.determinant(A))
    show("A^-1", mcalc.inverse(A))
    show("A^T", mcalc.transpose(A))
    show("A rotated 90 right", mcalc.rotate_right(A))
    show("A + B", mcalc.add(A, B))
    show("A x B", mcalc.multiply(A, B))

    # Failures are exceptions, reported the way an editor would
    for label, call in [
        ("inverse([[1, 2], [2, 4]])", lambda: mcalc.inverse([[1, 2], [2, 4]])),
        ("add(2x2, 2x3)", lambda: mcalc.add(A, mcalc.zeros(2, 3))),
        ("multiply(2x3, 2x2)", lambda: mcalc.multiply(mcalc.zeros(2, 3), A)),
        ("determinant(2x3)", lambda: mcalc.determinant(mcalc.zeros(2, 3))),
    ]:
        try:
            call()
        except mcalc.MatrixError as e:
            print(f"\n{label}: {type(e).__name__}: {e}")

    # Random square matrix, checked before the O(n!) expansion
    R = mcalc.random_matrix(n, n, seed=42)
    report = mcalc.detect_matrix(R)
    print(f"\nRandom {n}x{n}: strategy={report['strategy']}, "
          f"terms={report['cofactor_terms']:,} ({report['reason']})")
    if not report["within_limit"]:
        print("  Too large for cofactor expansion, skipping.")
        return

    t0 = time.time()
    d = mcalc.determinant(R, verbose=True)
    if d == 0:
        print("  Singular, no inverse.")
        return
    inv = mcalc.inverse(R, verbose=True)
    check = mcalc.multiply(R, inv)
    err = max(abs(check[i, j] - (1.0 if i == j else 0.0))
              for i in range(n) for j in range(n))
    print(f"  max |R R^-1 - I| = {err:.2e} [{time.time() - t0:.2f}s]")


if __name__ == "__main__":
    main()
