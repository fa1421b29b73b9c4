# tests/test_post.py
"""
RESULT FORMATTING: solution vector → member forces and reactions
================================================================
"""

import json

import numpy as np

from truss2d import ForceState, SupportKind, TrussModel, solve_truss
from truss2d.kernel.dof import build_index
from truss2d.post import format_results, reactions_table, results_table


class TestFormatResults:

    def test_maps_columns_back(self, triangle):
        index = build_index(triangle)
        x = np.array([1.0, -2.0, 0.0, 3.0, 4.0, 5.0])

        result = format_results(x, index)

        assert [(mf.member_id, mf.force, mf.state) for mf in result.member_forces] == [
            (0, 1.0, ForceState.TENSION),
            (1, -2.0, ForceState.COMPRESSION),
            (2, 0.0, ForceState.ZERO),
        ]
        assert result.reaction(0).rx == 3.0
        assert result.reaction(0).ry == 4.0
        assert result.reaction(1).rx == 0.0
        assert result.reaction(1).ry == 5.0

    def test_one_reaction_per_support_in_support_order(self, triangle):
        triangle.supports.reverse()
        index = build_index(triangle)

        result = format_results(np.arange(6, dtype=float), index)

        assert [r.node_id for r in result.reactions] == [1, 0]

    def test_lookup_of_unknown_ids(self, triangle):
        result = solve_truss(triangle)

        assert result.member_force(99) is None
        assert result.reaction(2) is None


class TestPayloads:

    def test_to_dict_layout(self, triangle):
        payload = solve_truss(triangle).to_dict()

        assert set(payload) == {"memberForces", "reactions"}
        first = payload["memberForces"][0]
        assert set(first) == {"memberId", "force", "classification"}
        assert first["classification"] == "Compression"
        assert set(payload["reactions"][0]) == {"nodeId", "rx", "ry"}
        json.dumps(payload)  # plain JSON types only

    def test_model_from_dict(self):
        data = {
            "nodes": [{"id": 0, "x": -3, "y": 0}, {"id": 1, "x": 3, "y": 0}, {"id": 2, "x": 0, "y": 4}],
            "members": [
                {"id": 0, "startNodeId": 0, "endNodeId": 2},
                {"id": 1, "startNodeId": 1, "endNodeId": 2},
                {"id": 2, "startNodeId": 0, "endNodeId": 1},
            ],
            "supports": [{"nodeId": 0, "kind": "Pinned"}, {"nodeId": 1, "kind": "RollerY"}],
            "loads": [{"nodeId": 2, "fx": 0, "fy": -20}],
        }

        model = TrussModel.from_dict(data)

        assert model.supports[1].kind is SupportKind.ROLLER_Y
        assert model.members[0].ni == 0 and model.members[0].nj == 2
        assert np.isclose(solve_truss(model).member_force(2).force, 7.5)


class TestTables:

    def test_results_table(self, triangle):
        df = results_table(solve_truss(triangle))

        assert list(df.columns) == ["member_id", "force", "state"]
        assert len(df) == 3
        assert list(df["state"]) == ["Compression", "Compression", "Tension"]

    def test_reactions_table(self, triangle):
        df = reactions_table(solve_truss(triangle))

        assert list(df["node_id"]) == [0, 1]
        np.testing.assert_allclose(df["ry"], [10.0, 10.0])
