# truss2d/solve.py
"""
SOLVE: The Complete Truss Pipeline
==================================

    model → build_index → check_determinacy → check_references
          → assemble_equilibrium → solve_square → format_results → result

The first failing stage raises; nothing partial is ever returned.
All intermediate data (index, A, b, x) is local to one call, so
solve_truss is safe to call from many threads at once.
"""

import logging
from typing import Optional

from .config import CONFIG, SolverConfig
from .kernel import (
    TrussError,
    assemble_equilibrium,
    build_index,
    check_determinacy,
    check_references,
    solve_square,
)
from .model import TrussModel
from .post import format_results
from .results import TrussResult

logger = logging.getLogger(__name__)


def solve_truss(model: TrussModel, config: Optional[SolverConfig] = None) -> TrussResult:
    """
    Compute member forces and support reactions of a 2D pin-jointed truss.

    Args:
        model: Nodes, members, supports and loads
        config: Tolerances (defaults to the global CONFIG)

    Returns:
        TrussResult with one force per member and one reaction per support

    Raises:
        DeterminacyMismatch: 2·nodes != members + reaction unknowns
        InvalidReference: A member, support or load references a bad node
        InvalidValue: A coordinate or load component is NaN or infinite
        GeometricInstability: The system is singular (mechanism)
    """
    config = config or CONFIG

    try:
        index = build_index(model)
        # Counts list entries; index.node_rows drops duplicate ids, which
        # check_references rejects before the index sizes the matrix
        check_determinacy(len(model.nodes), len(model.members), index.n_reactions)
        check_references(model)
        A, b = assemble_equilibrium(model, index)
        x = solve_square(A, b, pivot_tol=config.pivot_tol)
    except TrussError as e:
        logger.warning("Truss solve failed (%s): %s", type(e).__name__, e)
        raise

    result = format_results(x, index, tol=config.zero_force_tol)
    logger.info(
        "Solved truss: %d nodes, %d members, %d reactions",
        len(model.nodes), len(result.member_forces), len(result.reactions),
    )
    return result
