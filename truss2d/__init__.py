# truss2d - Static equilibrium of 2D pin-jointed trusses
"""
TRUSS2D: Method-of-Joints Truss Solver
======================================

This package provides:
- Input model (nodes, members, supports, loads)
- Determinacy and reference validation
- Equilibrium assembly and mechanism detection
- Member force / reaction results, tables and plots

ARCHITECTURE:
-------------
    kernel/         Index, determinacy check, assembly, solve
    model.py        Input definitions (Node, Member, Support, Load, TrussModel)
    results.py      Output definitions (MemberForce, Reaction, TrussResult)
    elements.py     Member geometry (direction cosines)
    post.py         Result formatting, equilibrium check, tables
    solve.py        solve_truss(): the whole pipeline
    config.py       Tolerances
    viz.py          Force diagram plotting
"""

from .config import CONFIG, SolverConfig
from .kernel import (
    TrussError, DeterminacyMismatch, GeometricInstability, InvalidReference, InvalidValue,
)
from .model import Node, Member, Support, SupportKind, Load, TrussModel
from .results import ForceState, MemberForce, Reaction, TrussResult
from .solve import solve_truss

__version__ = "0.1.0"

__all__ = [
    'CONFIG', 'SolverConfig',
    'TrussError', 'DeterminacyMismatch', 'GeometricInstability', 'InvalidReference', 'InvalidValue',
    'Node', 'Member', 'Support', 'SupportKind', 'Load', 'TrussModel',
    'ForceState', 'MemberForce', 'Reaction', 'TrussResult',
    'solve_truss',
]
