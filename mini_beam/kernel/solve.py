# mini_beam/kernel/solve.py
"""Linear system solver with boundary conditions and mechanism detection."""

import logging
import numpy as np
from typing import Sequence, Tuple

from ..errors import UnderconstrainedSystemError
from .partition import partition_dofs, reduce_system

logger = logging.getLogger(__name__)


def diagonal_scale(A: np.ndarray) -> np.ndarray:
    """Symmetric scaling factors |a_ii|^-1/2 (1 where the diagonal is zero)."""
    diag = np.abs(np.diag(A)).astype(float)
    scale = np.ones(diag.shape[0], dtype=float)
    positive = diag > 0.0
    scale[positive] = 1.0 / np.sqrt(diag[positive])
    return scale


def check_conditioning(A: np.ndarray, cond_limit: float = 1e12) -> float:
    """
    Condition number of the diagonally scaled matrix.

    Catches near-singular systems whose pivots still pass pivot_tol, such as
    a very short element next to a long one.

    Raises:
        UnderconstrainedSystemError: If cond is not finite or exceeds cond_limit
    """
    if A.shape[0] == 0:
        return 1.0
    scale = diagonal_scale(A)
    cond = float(np.linalg.cond(A * np.outer(scale, scale)))
    if not np.isfinite(cond) or cond > cond_limit:
        raise UnderconstrainedSystemError(
            f"Ill-conditioned system (cond={cond:.2e}, limit {cond_limit:.0e}). "
            f"Check supports and very short elements."
        )
    return cond


def gauss_solve(A: np.ndarray, b: np.ndarray, pivot_tol: float = 1e-12) -> np.ndarray:
    """
    Solve A x = b by Gaussian elimination with partial pivoting.

    At step i the row with the largest |a[k, i]|, k >= i, becomes the pivot
    row; rows of A and entries of b are swapped together. A pivot smaller
    than pivot_tol means the system is singular and the solve fails instead
    of dividing by a tiny number.

    The system is first scaled symmetrically by D = diag(|a_ii|)^-1/2, so
    pivot_tol is relative to the matrix entries and independent of units
    (beam stiffness entries in N/mm and N.mm/rad differ by many decades).

    Args:
        A: Square matrix (n x n), not modified
        b: Right-hand side (n,), not modified
        pivot_tol: Smallest accepted pivot magnitude of the scaled system

    Returns:
        x: Solution (n,); empty for an empty system

    Raises:
        UnderconstrainedSystemError: If a pivot falls below pivot_tol
    """
    n = b.shape[0]
    if n == 0:
        return np.zeros(0, dtype=float)
    if A.shape != (n, n):
        raise ValueError(f"matrix shape {A.shape} does not match rhs length {n}")

    scale = diagonal_scale(A)
    a = A * np.outer(scale, scale)
    rhs = b * scale

    for i in range(n):
        p = i + int(np.argmax(np.abs(a[i:, i])))
        if p != i:
            a[[i, p]] = a[[p, i]]
            rhs[[i, p]] = rhs[[p, i]]

        pivot = a[i, i]
        if abs(pivot) < pivot_tol:
            raise UnderconstrainedSystemError(
                f"Singular system: pivot {abs(pivot):.3e} < {pivot_tol:.0e} at "
                f"free DOF {i} of {n}. Supports cannot prevent rigid-body motion."
            )

        factors = a[i + 1:, i] / pivot
        a[i + 1:, i:] -= np.outer(factors, a[i, i:])
        rhs[i + 1:] -= factors * rhs[i]

    y = np.zeros(n, dtype=float)
    for i in range(n - 1, -1, -1):
        y[i] = (rhs[i] - a[i, i + 1:] @ y[i + 1:]) / a[i, i]

    return y * scale


def solve_linear(
    K: np.ndarray,
    F: np.ndarray,
    fixed_dofs: Sequence[int],
    pivot_tol: float = 1e-12,
    cond_limit: float = 1e12,
) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Solve K.d = F with fixed DOFs (d = 0) enforced by partitioning.

    Args:
        K: Global stiffness matrix (ndof x ndof)
        F: Global load vector (ndof,)
        fixed_dofs: Constrained DOF indices
        pivot_tol: Passed to gauss_solve
        cond_limit: Largest accepted condition number of the scaled K_ff

    Returns:
        d: Displacement vector (ndof,)
        R: Reaction vector R = K.d - F (ndof,)
        free: Array of free DOF indices

    Raises:
        UnderconstrainedSystemError: If the reduced system is singular or
            ill-conditioned
    """
    ndof = K.shape[0]
    free, _ = partition_dofs(ndof, fixed_dofs)
    Kff, Ff = reduce_system(K, F, free)

    cond = check_conditioning(Kff, cond_limit)
    df = gauss_solve(Kff, Ff, pivot_tol)

    d = np.zeros(ndof, dtype=float)
    d[free] = df

    R = K @ d - F
    logger.debug("solved %d free DOFs (cond %.2e)", free.size, cond)
    return d, R, free
