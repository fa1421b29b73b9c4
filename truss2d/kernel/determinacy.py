# truss2d/kernel/determinacy.py
"""Static determinacy check (Maxwell's count) run before any matrix work."""

import logging

from .errors import DeterminacyMismatch

logger = logging.getLogger(__name__)


def check_determinacy(n_nodes: int, n_members: int, n_reactions: int) -> int:
    """
    Compare equilibrium equations E = 2N with unknowns U = M + R.

    U < E means the truss is a mechanism by count, U > E means it is
    statically indeterminate. Both raise DeterminacyMismatch since neither
    gives a square system.

    Returns:
        The common size E (= U) of the square system.

    Raises:
        DeterminacyMismatch: If E != U
    """
    equations = 2 * n_nodes
    unknowns = n_members + n_reactions
    if equations != unknowns:
        raise DeterminacyMismatch(equations, unknowns)
    logger.debug("Determinacy ok: %d equations, %d unknowns", equations, unknowns)
    return equations
