# truss2d/results.py
"""Output data structures: member forces and support reactions."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class ForceState(str, Enum):
    TENSION = "Tension"
    COMPRESSION = "Compression"
    ZERO = "Zero"


@dataclass(frozen=True)
class MemberForce:
    member_id: int
    force: float  # positive = tension, negative = compression
    state: ForceState


@dataclass(frozen=True)
class Reaction:
    """Support reaction. Both components are always present (0.0 if unrestrained)."""
    node_id: int
    rx: float
    ry: float


@dataclass
class TrussResult:
    member_forces: List[MemberForce] = field(default_factory=list)
    reactions: List[Reaction] = field(default_factory=list)

    def member_force(self, member_id: int) -> Optional[MemberForce]:
        for mf in self.member_forces:
            if mf.member_id == member_id:
                return mf
        return None

    def reaction(self, node_id: int) -> Optional[Reaction]:
        for r in self.reactions:
            if r.node_id == node_id:
                return r
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Result payload in the JSON layout returned to the rendering side."""
        return {
            "memberForces": [
                {"memberId": mf.member_id, "force": mf.force, "classification": mf.state.value}
                for mf in self.member_forces
            ],
            "reactions": [
                {"nodeId": r.node_id, "rx": r.rx, "ry": r.ry}
                for r in self.reactions
            ],
        }
