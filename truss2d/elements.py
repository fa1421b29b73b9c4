# truss2d/elements.py
# Member geometry: length and direction cosines

import numpy as np

from .kernel.errors import GeometricInstability, InvalidValue
from .model import Node, Member


def member_geometry(nodes: dict[int, Node], m: Member) -> tuple[float, float, float]:
    """
    Length and direction cosines (L, c, s) of a member, measured ni -> nj.

    c = cos(theta) = dx / L,  s = sin(theta) = dy / L
    """
    ni = nodes[m.ni]
    nj = nodes[m.nj]
    dx = nj.x - ni.x
    dy = nj.y - ni.y
    L = float(np.hypot(dx, dy))
    if not np.isfinite(L):
        raise InvalidValue(
            f"Member {m.id} has a non-finite length (check coordinates of nodes {m.ni} and {m.nj})."
        )
    if L <= 0.0:
        raise GeometricInstability(
            f"Member {m.id} has zero length (nodes {m.ni} and {m.nj} coincide). "
            f"Check the geometry and support placement."
        )
    c = dx / L
    s = dy / L
    return L, c, s
