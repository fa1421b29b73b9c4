# tests/test_determinacy.py
"""
DETERMINACY GATE: 2·nodes must equal members + reaction unknowns
================================================================

Whatever the geometry, a count mismatch fails before any matrix work.
"""

import pytest

from truss2d import (
    DeterminacyMismatch, Member, Node, Support, SupportKind, TrussModel, solve_truss,
)
from truss2d.kernel.determinacy import check_determinacy


def test_matching_counts_pass():
    assert check_determinacy(n_nodes=3, n_members=3, n_reactions=3) == 6


def test_under_constrained():
    with pytest.raises(DeterminacyMismatch) as exc:
        check_determinacy(n_nodes=3, n_members=3, n_reactions=2)

    assert exc.value.equations == 6
    assert exc.value.unknowns == 5
    assert "equations=6" in str(exc.value)
    assert "unknowns=5" in str(exc.value)


def test_over_constrained():
    with pytest.raises(DeterminacyMismatch) as exc:
        check_determinacy(n_nodes=3, n_members=3, n_reactions=4)

    assert exc.value.equations == 6
    assert exc.value.unknowns == 7
    assert "indeterminate" in str(exc.value)


def test_two_pins_fail_regardless_of_geometry(triangle):
    """Replacing the roller by a pin adds a redundant reaction."""
    triangle.supports[1] = Support(1, SupportKind.PINNED)

    with pytest.raises(DeterminacyMismatch):
        solve_truss(triangle)


def test_missing_member_fails(triangle):
    triangle.members.pop()

    with pytest.raises(DeterminacyMismatch):
        solve_truss(triangle)


def test_mismatch_reported_before_bad_reference():
    """The count check runs before reference checks."""
    model = TrussModel(
        nodes=[Node(0, 0, 0), Node(1, 1, 0)],
        members=[Member(0, 0, 99)],
        supports=[Support(0, SupportKind.PINNED)],
    )

    with pytest.raises(DeterminacyMismatch):
        solve_truss(model)
