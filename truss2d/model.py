# truss2d/model.py
"""
MODEL DEFINITIONS: Node, Member, Support, Load, TrussModel
==========================================================

PURPOSE:
--------
Input data structures for a 2D pin-jointed truss:
- Node: a joint in the plane
- Member: a two-force bar connecting two nodes
- Support: a restraint at a node (pinned or roller)
- Load: a point force applied at a node

ENGINEERING CONTEXT:
--------------------
In a PIN-JOINTED TRUSS every member carries only axial force and every
joint is a frictionless pin. Each node therefore gives exactly two
equilibrium equations (ΣFx = 0, ΣFy = 0), and the unknowns are one axial
force per member plus one reaction per restrained support axis.

Support kinds:
    Pinned   restrains x and y  -> 2 reaction unknowns (Rx, Ry)
    RollerX  restrains x only   -> 1 reaction unknown  (Rx)
    RollerY  restrains y only   -> 1 reaction unknown  (Ry)
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Tuple


@dataclass(frozen=True)
class Node:
    """
    A joint in the plane.

    Parameters:
    -----------
    id : int
        Unique identifier. Ids do NOT need to be contiguous or start at 0;
        rows of the equilibrium matrix are assigned from the node list order.
    x, y : float
        Coordinates in the global system
    """
    id: int
    x: float
    y: float


@dataclass(frozen=True)
class Member:
    """
    A truss member (axial-only bar) between two nodes.

    The direction ni -> nj defines the direction cosines, but the axial force
    sign convention (positive = tension) does not depend on it.
    """
    id: int
    ni: int  # Start node ID
    nj: int  # End node ID


class SupportKind(str, Enum):
    PINNED = "Pinned"
    ROLLER_X = "RollerX"
    ROLLER_Y = "RollerY"

    @property
    def restrains(self) -> Tuple[str, ...]:
        """Axes restrained by this kind of support, in column order."""
        if self is SupportKind.PINNED:
            return ("x", "y")
        if self is SupportKind.ROLLER_X:
            return ("x",)
        return ("y",)


@dataclass(frozen=True)
class Support:
    node_id: int
    kind: SupportKind


@dataclass(frozen=True)
class Load:
    node_id: int
    fx: float = 0.0
    fy: float = 0.0


@dataclass
class TrussModel:
    """
    A complete structural model, as received from the model-building side.

    Lists keep the caller's order: member order fixes the first unknown
    columns, support order fixes the reaction columns.
    """
    nodes: List[Node]
    members: List[Member]
    supports: List[Support]
    loads: List[Load] = field(default_factory=list)

    def node_map(self) -> Dict[int, Node]:
        """Lookup of nodes by id (later duplicates win; see check_references)."""
        return {n.id: n for n in self.nodes}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "TrussModel":
        """
        Build a model from the JSON payload layout:

            {"nodes":    [{"id", "x", "y"}],
             "members":  [{"id", "startNodeId", "endNodeId"}],
             "supports": [{"nodeId", "kind"}],
             "loads":    [{"nodeId", "fx", "fy"}]}
        """
        nodes = [Node(int(n["id"]), float(n["x"]), float(n["y"])) for n in data.get("nodes", [])]
        members = [
            Member(int(m["id"]), int(m["startNodeId"]), int(m["endNodeId"]))
            for m in data.get("members", [])
        ]
        supports = [
            Support(int(s["nodeId"]), SupportKind(s["kind"]))
            for s in data.get("supports", [])
        ]
        loads = [
            Load(int(l["nodeId"]), float(l.get("fx", 0.0)), float(l.get("fy", 0.0)))
            for l in data.get("loads", [])
        ]
        return cls(nodes=nodes, members=members, supports=supports, loads=loads)
