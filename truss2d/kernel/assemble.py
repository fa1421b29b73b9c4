# truss2d/kernel/assemble.py
"""
ASSEMBLY: Equilibrium Matrix by the Method of Joints
====================================================

PURPOSE:
--------
This module builds the square system A·x = b whose solution x holds every
member force and every support reaction:

    A : (E × U) coefficients (direction cosines and 1.0 for reactions)
    b : (E,)    external loads moved to the right-hand side
    x : (U,)    unknowns, ordered as in UnknownIndex.columns

For each node, two rows are written:

    ΣFx:  Σ(±c · N_member) + Rx = -Fx
    ΣFy:  Σ(±s · N_member) + Ry = -Fy

SIGN CONVENTION:
----------------
Every member is assumed to be in TENSION, i.e. it pulls on both of its
nodes. At the start node (ni) the pull points towards nj, so the member
contributes (+c, +s); at the end node (nj) it points back towards ni and
contributes (-c, -s). A negative solved force is therefore compression.

USAGE:
------
    index = build_index(model)
    check_references(model)
    A, b = assemble_equilibrium(model, index)
"""

import logging
import math
from typing import Tuple

import numpy as np

from ..elements import member_geometry
from ..model import TrussModel
from .dof import UnknownIndex
from .errors import InvalidReference, InvalidValue

logger = logging.getLogger(__name__)


def check_references(model: TrussModel) -> None:
    """
    Verify that every reference in the model points to exactly one node
    and that every coordinate and load component is a finite number.

    Raises:
    -------
    InvalidReference
        - a node or member id appears more than once
        - a member, support or load references a missing node
        - a member starts and ends at the same node
        - a node carries more than one support
    InvalidValue
        - a node coordinate or load component is NaN or infinite
    """
    node_ids = set()
    for node in model.nodes:
        if node.id in node_ids:
            raise InvalidReference(f"Duplicate node id {node.id}.")
        if not (math.isfinite(node.x) and math.isfinite(node.y)):
            raise InvalidValue(f"Node {node.id} has non-finite coordinates ({node.x}, {node.y}).")
        node_ids.add(node.id)

    member_ids = set()
    for member in model.members:
        if member.id in member_ids:
            raise InvalidReference(f"Duplicate member id {member.id}.")
        member_ids.add(member.id)
        for end in (member.ni, member.nj):
            if end not in node_ids:
                raise InvalidReference(
                    f"Member {member.id} references missing node {end}."
                )
        if member.ni == member.nj:
            raise InvalidReference(
                f"Member {member.id} starts and ends at the same node {member.ni}."
            )

    supported = set()
    for support in model.supports:
        if support.node_id not in node_ids:
            raise InvalidReference(f"Support references missing node {support.node_id}.")
        if support.node_id in supported:
            raise InvalidReference(f"Node {support.node_id} has more than one support.")
        supported.add(support.node_id)

    for load in model.loads:
        if load.node_id not in node_ids:
            raise InvalidReference(f"Load references missing node {load.node_id}.")
        if not (math.isfinite(load.fx) and math.isfinite(load.fy)):
            raise InvalidValue(
                f"Load at node {load.node_id} has non-finite components ({load.fx}, {load.fy})."
            )


def assemble_equilibrium(
    model: TrussModel,
    index: UnknownIndex
) -> Tuple[np.ndarray, np.ndarray]:
    """
    Assemble the joint-equilibrium matrix A and load vector b.

    The model must have passed check_references.

    Parameters:
    -----------
    model : TrussModel
        Structural model
    index : UnknownIndex
        Column/row assignment from build_index

    Returns:
    --------
    A : np.ndarray
        Shape (n_equations, n_unknowns)
    b : np.ndarray
        Shape (n_equations,)

    Raises:
    -------
    GeometricInstability
        If a member has zero length
    InvalidValue
        If a member length is not finite
    """
    A = np.zeros((index.n_equations, index.n_unknowns), dtype=float)
    b = np.zeros(index.n_equations, dtype=float)

    nodes = model.node_map()

    # External loads go to the right-hand side with their sign flipped
    for load in model.loads:
        b[index.row(load.node_id, "x")] -= load.fx
        b[index.row(load.node_id, "y")] -= load.fy

    # Reactions: unit coefficient on each restrained axis
    for support in model.supports:
        for axis in support.kind.restrains:
            col = index.reaction_cols[(support.node_id, axis)]
            A[index.row(support.node_id, axis), col] = 1.0

    # Member forces: direction cosines at both ends
    for member in model.members:
        _, c, s = member_geometry(nodes, member)
        col = index.member_cols[member.id]

        A[index.row(member.ni, "x"), col] += c
        A[index.row(member.ni, "y"), col] += s
        A[index.row(member.nj, "x"), col] -= c
        A[index.row(member.nj, "y"), col] -= s

    logger.debug("Assembled equilibrium system %s", A.shape)
    return A, b
