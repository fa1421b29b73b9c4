# truss2d/config.py
"""
Solver configuration and defaults.
"""

from dataclasses import dataclass


@dataclass
class SolverConfig:
    """Numerical tolerances used by the solve pipeline."""

    # |force| below this is reported as a zero-force member
    zero_force_tol: float = 1e-9

    # |pivot| below this in the LU factorisation means a singular system
    pivot_tol: float = 1e-9

    # Global equilibrium residual accepted by equilibrium checks
    equilibrium_tol: float = 1e-6


# Global config instance
CONFIG = SolverConfig()
