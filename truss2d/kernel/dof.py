# truss2d/kernel/dof.py
"""
UNKNOWN INDEXER: Column Assignment for the Equilibrium System
=============================================================

PURPOSE:
--------
This module maps every unknown force to a column of the equilibrium matrix,
and every node to a pair of rows:

    Columns:  [ N_m0, N_m1, ..., N_mk,  R_a_x, R_a_y,  R_b_y, ... ]
               \\___ member forces ___/  \\__ support reactions __/

    Rows:     node k (in node list order) owns rows 2k (ΣFx) and 2k+1 (ΣFy)

Members come first, in list order, one column each. Supports follow, in
list order: two adjacent columns (x then y) for a Pinned support, one
column for a RollerX (x) or RollerY (y).

Node rows come from an explicit id -> row map, so node ids may be sparse
or start anywhere.

USAGE:
------
    index = build_index(model)
    index.member_cols[member_id]      # → column of the member force
    index.reaction_cols[(3, "y")]     # → column of Ry at node 3
    index.row(node_id=3, axis="x")    # → row of ΣFx at node 3
    index.columns[5]                  # → Unknown(kind="reaction", ref_id=3, axis="y")

An UnknownIndex is built fresh for every solve and passed through the
pipeline; nothing here is shared between calls.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from ..model import TrussModel

logger = logging.getLogger(__name__)

AXES = ("x", "y")


@dataclass(frozen=True)
class Unknown:
    """
    Origin of one column of the unknown vector.

    kind   : "member" or "reaction"
    ref_id : member id (for members) or node id (for reactions)
    axis   : "x"/"y" for reactions, None for members
    """
    kind: str
    ref_id: int
    axis: Optional[str] = None


@dataclass
class UnknownIndex:
    """
    Per-solve lookup tables between model entities and matrix positions.

    Attributes:
    -----------
    member_cols : Dict[int, int]
        member id → column
    reaction_cols : Dict[Tuple[int, str], int]
        (node id, axis) → column
    columns : List[Unknown]
        column → origin (reverse mapping used by the formatter)
    node_rows : Dict[int, int]
        node id → row-pair index k (rows 2k and 2k+1)
    n_reactions : int
        Number of reaction unknowns
    """
    member_cols: Dict[int, int] = field(default_factory=dict)
    reaction_cols: Dict[Tuple[int, str], int] = field(default_factory=dict)
    columns: List[Unknown] = field(default_factory=list)
    node_rows: Dict[int, int] = field(default_factory=dict)
    n_reactions: int = 0

    @property
    def n_unknowns(self) -> int:
        return len(self.columns)

    @property
    def n_equations(self) -> int:
        return 2 * len(self.node_rows)

    def row(self, node_id: int, axis: str) -> int:
        """
        Global row of the ΣFx (axis="x") or ΣFy (axis="y") equation of a node.

        Examples:
        ---------
        >>> index.node_rows
        {10: 0, 20: 1}
        >>> index.row(20, "x")
        2
        >>> index.row(20, "y")
        3
        """
        return 2 * self.node_rows[node_id] + AXES.index(axis)


def build_index(model: TrussModel) -> UnknownIndex:
    """
    Assign columns to all unknowns and rows to all nodes.

    No validation happens here: a missing or duplicated reference is
    reported later by the assembler's reference check.

    Parameters:
    -----------
    model : TrussModel
        The structural model (its list order fixes the column order)

    Returns:
    --------
    UnknownIndex
        Fresh lookup tables for this model
    """
    index = UnknownIndex()

    for k, node in enumerate(model.nodes):
        index.node_rows.setdefault(node.id, k)

    col = 0
    for member in model.members:
        index.member_cols[member.id] = col
        index.columns.append(Unknown("member", member.id))
        col += 1

    for support in model.supports:
        for axis in support.kind.restrains:
            index.reaction_cols[(support.node_id, axis)] = col
            index.columns.append(Unknown("reaction", support.node_id, axis))
            col += 1
            index.n_reactions += 1

    logger.debug(
        "Indexed %d member and %d reaction unknowns over %d nodes",
        len(model.members), index.n_reactions, len(index.node_rows),
    )
    return index
