# tests/test_triangle.py
"""
REFERENCE TRIANGLE: hand-checkable method-of-joints result
==========================================================

            N2 (0, 4)   ↓ 20
           /  \\
       M0 /    \\ M1        members M0, M1: 3-4-5 triangles
         /      \\
    N0 (-3,0)----N1 (3,0)
    Pinned   M2   RollerY

Joint N2, vertical:   -0.8·F0 - 0.8·F1 = 20, F0 = F1  →  F0 = F1 = -12.5
Joint N1, horizontal: -0.6·F1 - F2 = 0                →  F2 = +7.5
Supports by symmetry: Ry0 = Ry1 = 10, Rx0 = 0
"""

import numpy as np

from truss2d import ForceState, Load, solve_truss


def test_member_forces(triangle):
    result = solve_truss(triangle)

    forces = {mf.member_id: mf.force for mf in result.member_forces}
    assert np.isclose(forces[0], -12.5)
    assert np.isclose(forces[1], -12.5)
    assert np.isclose(forces[2], 7.5)


def test_classification(triangle):
    result = solve_truss(triangle)

    assert result.member_force(0).state is ForceState.COMPRESSION
    assert result.member_force(1).state is ForceState.COMPRESSION
    assert result.member_force(2).state is ForceState.TENSION


def test_reactions(triangle):
    result = solve_truss(triangle)

    assert [r.node_id for r in result.reactions] == [0, 1]
    r0, r1 = result.reaction(0), result.reaction(1)
    assert np.isclose(r0.rx, 0.0, atol=1e-9)
    assert np.isclose(r0.ry, 10.0)
    assert np.isclose(r1.ry, 10.0)


def test_roller_reports_unrestrained_axis_as_zero(triangle):
    """N1 is a y-roller: its Rx is never solved for and is exactly 0.0."""
    triangle.loads.append(Load(1, 0.0, 0.0))
    result = solve_truss(triangle)

    assert result.reaction(1).rx == 0.0


def test_horizontal_load_goes_to_pin(triangle):
    """A sideways push at the apex can only be resisted by the pin."""
    triangle.loads = [Load(2, 6.0, 0.0)]
    result = solve_truss(triangle)

    r0, r1 = result.reaction(0), result.reaction(1)
    assert np.isclose(r0.rx, -6.0)
    # Overturning moment 6·4 = 24 over a 6 m span
    assert np.isclose(r1.ry, 4.0)
    assert np.isclose(r0.ry, -4.0)
