# truss2d/post.py
# solution vector -> member forces and reactions, equilibrium check, tables

from typing import Tuple

import numpy as np
import pandas as pd

from .kernel.dof import UnknownIndex
from .model import TrussModel
from .results import ForceState, MemberForce, Reaction, TrussResult


def classify_force(force: float, tol: float = 1e-9) -> ForceState:
    """
    Classify an axial force.

    |force| < tol  -> ZERO
    force > 0      -> TENSION
    otherwise      -> COMPRESSION
    """
    if abs(force) < tol:
        return ForceState.ZERO
    return ForceState.TENSION if force > 0 else ForceState.COMPRESSION


def format_results(x: np.ndarray, index: UnknownIndex, tol: float = 1e-9) -> TrussResult:
    """
    Map the solved unknown vector back onto members and supports.

    Parameters:
    -----------
    x : np.ndarray
        Solution of the equilibrium system, ordered like index.columns
    index : UnknownIndex
        The index used to assemble the system
    tol : float
        Zero-force threshold for classification

    Returns:
    --------
    TrussResult
        One MemberForce per member (member order) and one Reaction per
        supported node (support order). An axis the support does not
        restrain is reported as exactly 0.0.
    """
    result = TrussResult()
    reactions = {}

    for col, unknown in enumerate(index.columns):
        value = float(x[col])
        if unknown.kind == "member":
            result.member_forces.append(
                MemberForce(unknown.ref_id, value, classify_force(value, tol))
            )
        else:
            # dicts keep insertion order, i.e. support order
            rx, ry = reactions.get(unknown.ref_id, (0.0, 0.0))
            if unknown.axis == "x":
                rx = value
            else:
                ry = value
            reactions[unknown.ref_id] = (rx, ry)

    result.reactions = [Reaction(node_id, rx, ry) for node_id, (rx, ry) in reactions.items()]
    return result


def equilibrium_residual(model: TrussModel, result: TrussResult) -> Tuple[float, float, float]:
    """
    Global equilibrium of the whole truss: Σ(loads + reactions).

    Returns:
        (ΣFx, ΣFy, ΣMz about the origin). All three are ~0 for a correct solve.
    """
    nodes = model.node_map()
    fx = fy = mz = 0.0

    forces = [(l.node_id, l.fx, l.fy) for l in model.loads]
    forces += [(r.node_id, r.rx, r.ry) for r in result.reactions]

    for node_id, px, py in forces:
        node = nodes[node_id]
        fx += px
        fy += py
        mz += node.x * py - node.y * px

    return fx, fy, mz


def results_table(result: TrussResult) -> pd.DataFrame:
    """One row per member: id, force and classification."""
    return pd.DataFrame(
        {
            "member_id": [mf.member_id for mf in result.member_forces],
            "force": [mf.force for mf in result.member_forces],
            "state": [mf.state.value for mf in result.member_forces],
        }
    )


def reactions_table(result: TrussResult) -> pd.DataFrame:
    """One row per supported node: id, Rx and Ry."""
    return pd.DataFrame(
        {
            "node_id": [r.node_id for r in result.reactions],
            "rx": [r.rx for r in result.reactions],
            "ry": [r.ry for r in result.reactions],
        }
    )
