# truss2d/kernel/solve.py
"""Square linear solve with singularity (mechanism) detection from LU pivots."""

import logging
import warnings

import numpy as np
import scipy.linalg

from .errors import GeometricInstability

logger = logging.getLogger(__name__)


def solve_square(
    A: np.ndarray,
    b: np.ndarray,
    pivot_tol: float = 1e-9
) -> np.ndarray:
    """
    Solve A·x = b by LU factorisation with partial pivoting.

    The pivots of the same factorisation certify non-singularity, so no
    separate determinant or condition-number pass is needed. Entries of A
    are direction cosines and unit reaction coefficients, all of order 1,
    which makes an absolute pivot tolerance meaningful.

    Args:
        A: Equilibrium matrix (n x n)
        b: Load vector (n,)
        pivot_tol: Smallest |pivot| accepted

    Returns:
        x: Solution vector (n,), ordered like the columns of A

    Raises:
        ValueError: If A is not square, shapes disagree or entries are not finite
        GeometricInstability: If a pivot is below pivot_tol (structure is a mechanism)
    """
    if A.ndim != 2 or A.shape[0] != A.shape[1]:
        raise ValueError(f"Equilibrium matrix must be square, got shape {A.shape}.")
    if b.shape != (A.shape[0],):
        raise ValueError(f"Load vector shape {b.shape} doesn't match matrix {A.shape}.")
    if not (np.all(np.isfinite(A)) and np.all(np.isfinite(b))):
        raise ValueError("Equilibrium system contains non-finite values.")

    n = A.shape[0]
    if n == 0:
        return np.zeros(0, dtype=float)

    # lu_factor warns on an exactly zero pivot; the pivot check below reports it
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", scipy.linalg.LinAlgWarning)
        lu, piv = scipy.linalg.lu_factor(A, check_finite=False)

    pivots = np.abs(np.diag(lu))
    weakest = int(np.argmin(pivots))
    if pivots[weakest] < pivot_tol:
        raise GeometricInstability(
            f"Structure is unstable (singular matrix, pivot {pivots[weakest]:.2e} "
            f"at unknown {weakest}). Check support placement and that the "
            f"geometry does not form a movable mechanism."
        )

    x = scipy.linalg.lu_solve((lu, piv), b, check_finite=False)
    logger.debug("Solved %dx%d system, smallest pivot %.3e", n, n, pivots[weakest])
    return x
