import pytest

from truss2d import Load, Member, Node, Support, SupportKind, TrussModel


@pytest.fixture
def triangle():
    """
    Reference triangle: 6 m span, 4 m rise, 20 down at the apex.

        N0 (-3, 0) Pinned, N1 (3, 0) RollerY, N2 (0, 4) loaded
    """
    return TrussModel(
        nodes=[Node(0, -3.0, 0.0), Node(1, 3.0, 0.0), Node(2, 0.0, 4.0)],
        members=[Member(0, 0, 2), Member(1, 1, 2), Member(2, 0, 1)],
        supports=[Support(0, SupportKind.PINNED), Support(1, SupportKind.ROLLER_Y)],
        loads=[Load(2, 0.0, -20.0)],
    )


@pytest.fixture
def pratt():
    """
    Four-panel Pratt truss, 4 m panels, 3 m deep, pinned/roller supported.

        bottom chord: nodes 0..4 at y=0
        top chord:    nodes 5..7 above nodes 1..3
    """
    nodes = [Node(i, 4.0 * i, 0.0) for i in range(5)]
    nodes += [Node(5 + i, 4.0 * (i + 1), 3.0) for i in range(3)]

    pairs = [
        (0, 1), (1, 2), (2, 3), (3, 4),     # bottom chord
        (5, 6), (6, 7),                     # top chord
        (0, 5), (7, 4),                     # end posts
        (1, 5), (2, 6), (3, 7),             # verticals
        (5, 2), (7, 2),                     # diagonals
    ]
    members = [Member(k, a, b) for k, (a, b) in enumerate(pairs)]

    supports = [Support(0, SupportKind.PINNED), Support(4, SupportKind.ROLLER_Y)]
    loads = [Load(1, 0.0, -10.0), Load(2, 0.0, -10.0), Load(3, 0.0, -10.0)]
    return TrussModel(nodes=nodes, members=members, supports=supports, loads=loads)
