# truss2d/kernel - Equilibrium system core
"""
KERNEL: INDEX, CHECK, ASSEMBLE, SOLVE
=====================================

The four numerical stages of a truss solve:

    build_index           unknowns → columns, nodes → rows
    check_determinacy     2N == M + R ?
    assemble_equilibrium  A, b by the method of joints
    solve_square          x = A⁻¹b, or GeometricInstability

Every stage is a plain function over per-call data, so any number of
solves can run side by side.
"""

from .errors import (
    TrussError, DeterminacyMismatch, GeometricInstability, InvalidReference, InvalidValue,
)
from .dof import Unknown, UnknownIndex, build_index
from .determinacy import check_determinacy
from .assemble import check_references, assemble_equilibrium
from .solve import solve_square

__all__ = [
    'TrussError', 'DeterminacyMismatch', 'GeometricInstability', 'InvalidReference', 'InvalidValue',
    'Unknown', 'UnknownIndex', 'build_index',
    'check_determinacy',
    'check_references', 'assemble_equilibrium',
    'solve_square',
]
