# core/numeric/gauss_jordan.py
"""
Dense linear solver: Gauss-Jordan elimination with partial pivoting.

The augmented matrix [A | b] is reduced in place (on a private copy) until
the left block is the identity, at which point the right column holds x.
"""
import numpy as np

from core.constants import PIVOT_TOLERANCE
from core.exceptions import SingularMatrixError


def solve_linear_system(A, b, tol: float = PIVOT_TOLERANCE) -> np.ndarray:
    """
    Solve A @ x = b.

    Args:
        A: Square (n, n) array-like.
        b: Right-hand side of length n.
        tol: Smallest pivot magnitude accepted before declaring the
             system singular.

    Returns:
        Solution vector of length n (empty for n == 0).

    Raises:
        SingularMatrixError: if some pivot column has no entry above `tol`.
        ValueError: on shape mismatch.
    """
    A = np.asarray(A, dtype=float)
    b = np.asarray(b, dtype=float).reshape(-1)
    if A.size == 0 and b.size == 0:
        return np.zeros(0)
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ValueError(f"Expected a square matrix, got shape {A.shape}.")
    n = A.shape[0]
    if b.shape[0] != n:
        raise ValueError(f"Right-hand side has length {b.shape[0]}, expected {n}.")

    aug = np.empty((n, n + 1), dtype=float)
    aug[:, :n] = A
    aug[:, n] = b

    for i in range(n):
        # np.argmax keeps the first row on ties
        pivot_row = i + int(np.argmax(np.abs(aug[i:, i])))
        if pivot_row != i:
            aug[[i, pivot_row]] = aug[[pivot_row, i]]

        pivot = aug[i, i]
        if abs(pivot) < tol:
            raise SingularMatrixError(
                f"Matrix is singular: pivot {abs(pivot):.3e} in column {i} is below {tol:g}."
            )
        aug[i, i:] /= pivot

        factors = aug[:, i].copy()
        factors[i] = 0.0
        aug[:, i:] -= np.outer(factors, aug[i, i:])

    return aug[:, n].copy()
