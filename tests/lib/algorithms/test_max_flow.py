import pytest

from flowgraph.lib.algorithms import max_flow as max_flow_module
from flowgraph.lib.algorithms.base import SolverState
from flowgraph.lib.algorithms.max_flow import (
    MaxFlowSolver,
    calc_max_flow,
    saturated_edges,
)
from flowgraph.lib.graph import ResidualGraph


class TestMaxFlowBasic:
    """
    Tests that directly verify specific flow values on known small graphs.
    """

    def test_single_path(self, single_path):
        assert calc_max_flow(single_path, "s", "t") == 1

    def test_diamond(self, diamond):
        assert calc_max_flow(diamond, "s", "t") == 2

    def test_bottleneck(self, bottleneck):
        assert calc_max_flow(bottleneck, "s", "t") == 1

    def test_disconnected_sink(self, disconnected):
        assert calc_max_flow(disconnected, "s", "t") == 0

    def test_clrs(self, clrs):
        assert calc_max_flow(clrs, "s", "t") == 23

    def test_layered(self, layered):
        assert calc_max_flow(layered, "s", "t") == 5

    def test_funnel(self, funnel):
        assert calc_max_flow(funnel, "s", "t") == 2

    def test_split_hub_limits_flow(self, split_hub):
        assert calc_max_flow(split_hub, "s", "t") == 1

    def test_parallel_edges_sum(self, parallel_edges):
        assert calc_max_flow(parallel_edges, "A", "B") == 20

    def test_reverse_direction_has_no_flow(self, clrs):
        assert calc_max_flow(clrs, "t", "s") == 0


class TestMaxFlowEdgeCases:
    def test_source_equals_sink(self, diamond):
        solver = MaxFlowSolver(diamond)
        assert solver.max_flow("s", "s") == 0
        assert solver.augmentations == 0
        assert solver.state is SolverState.DONE
        assert all(diamond.flow(e) == 0 for e in diamond.edges(include_residual=True))

    def test_unknown_nodes(self, diamond):
        assert calc_max_flow(diamond, "nope", "t") == 0
        assert calc_max_flow(diamond, "s", "nope") == 0

    def test_empty_graph(self):
        assert calc_max_flow(ResidualGraph(), "s", "t") == 0

    def test_zero_capacity_edge(self):
        g = ResidualGraph()
        g.add_edge("A", "B", 0)
        assert calc_max_flow(g, "A", "B") == 0

    def test_edge_into_source_not_counted(self):
        """Edges pointing into the source never inflate the result."""
        g = ResidualGraph()
        g.add_edge("x", "s", 5)
        g.add_edge("s", "t", 2)
        assert calc_max_flow(g, "s", "t") == 2

    def test_cycle_through_source(self):
        g = ResidualGraph()
        g.add_edge("s", "a", 4)
        g.add_edge("a", "s", 4)
        g.add_edge("a", "t", 3)
        assert calc_max_flow(g, "s", "t") == 3

    def test_large_capacities_few_augmentations(self):
        """Shortest-path selection avoids the classic zig-zag worst case."""
        big = 10**9
        g = ResidualGraph()
        g.add_edge("s", "a", big)
        g.add_edge("s", "b", big)
        g.add_edge("a", "b", 1)
        g.add_edge("a", "t", big)
        g.add_edge("b", "t", big)

        solver = MaxFlowSolver(g)
        assert solver.max_flow("s", "t") == 2 * big
        assert solver.augmentations == 2


class TestSolverLifecycle:
    def test_initial_and_final_state(self, diamond):
        solver = MaxFlowSolver(diamond)
        assert solver.state is SolverState.IDLE
        assert solver.max_flow("s", "t") == 2
        assert solver.state is SolverState.DONE
        assert solver.augmentations == 2
        assert solver.total_flow == 2

    def test_states_between_augmentations(self, clrs, monkeypatch):
        """The solver is SEARCHING whenever a path search starts."""
        solver = MaxFlowSolver(clrs)
        seen = []
        original = max_flow_module.find_augmenting_path

        def recording(graph, src, dst):
            seen.append(solver.state)
            return original(graph, src, dst)

        monkeypatch.setattr(max_flow_module, "find_augmenting_path", recording)
        solver.max_flow("s", "t")

        assert seen
        assert all(state is SolverState.SEARCHING for state in seen)
        # one search per augmentation plus the final empty search
        assert len(seen) == solver.augmentations + 1

    def test_requery_adds_no_flow(self, layered):
        solver = MaxFlowSolver(layered)
        first = solver.max_flow("s", "t")
        flows = [layered.flow(e) for e in layered.edges(include_residual=True)]

        second = solver.max_flow("s", "t")
        assert second == first == 5
        assert solver.augmentations == 0
        assert [layered.flow(e) for e in layered.edges(include_residual=True)] == flows

    def test_requery_via_calc_max_flow(self, layered):
        assert calc_max_flow(layered, "s", "t") == 5
        flow, summary = calc_max_flow(layered, "s", "t", return_summary=True)
        assert flow == 5
        assert summary.augmentations == 0

    def test_reset_flow_graph_recomputes(self, layered):
        assert calc_max_flow(layered, "s", "t") == 5
        flow, summary = calc_max_flow(
            layered, "s", "t", return_summary=True, reset_flow_graph=True
        )
        assert flow == 5
        assert summary.augmentations > 0

    def test_debug_logging_of_augmentations(self, single_path, caplog):
        caplog.set_level("DEBUG", logger="flowgraph")
        calc_max_flow(single_path, "s", "t")
        messages = [r.getMessage() for r in caplog.records]
        assert any("Augmentation 1: pushed 1 along 2 edges" in m for m in messages)
        assert any("Max flow s -> t = 1" in m for m in messages)


class TestFlowSummary:
    def test_summary_contents(self, clrs):
        flow, summary = calc_max_flow(clrs, "s", "t", return_summary=True)
        assert flow == summary.total_flow == 23
        assert summary.reachable == {"s", "v1", "v2", "v4"}
        assert sorted((e.source, e.sink) for e in summary.min_cut) == [
            ("v1", "v3"),
            ("v4", "t"),
            ("v4", "v3"),
        ]
        assert summary.cut_capacity == 23
        assert set(summary.edge_flow) == set(clrs.edges())
        for edge, f in summary.edge_flow.items():
            assert summary.residual_cap[edge] == edge.capacity - f

    def test_summary_disconnected(self, disconnected):
        flow, summary = calc_max_flow(disconnected, "s", "t", return_summary=True)
        assert flow == 0
        assert summary.reachable == {"s", "a"}
        assert summary.min_cut == []
        assert summary.cut_capacity == 0

    def test_saturated_edges(self, bottleneck):
        edges = saturated_edges(bottleneck, "s", "t")
        assert [(e.source, e.sink) for e in edges] == [("a", "t")]

    def test_saturated_edges_skip_zero_capacity(self):
        g = ResidualGraph()
        g.add_edge("s", "t", 0)
        g.add_edge("s", "t", 2)
        edges = saturated_edges(g, "s", "t")
        assert [e.capacity for e in edges] == [2]


@pytest.mark.parametrize("repeat", range(3))
def test_determinism_same_insertion_order(repeat):
    def build():
        g = ResidualGraph()
        for u, v, c in [
            ("s", "a", 2),
            ("s", "b", 2),
            ("a", "b", 1),
            ("a", "c", 2),
            ("b", "c", 1),
            ("b", "t", 2),
            ("c", "t", 3),
        ]:
            g.add_edge(u, v, c)
        return g

    g1, g2 = build(), build()
    assert calc_max_flow(g1, "s", "t") == calc_max_flow(g2, "s", "t") == 4
    assert [g1.flow(e) for e in g1.edges(include_residual=True)] == [
        g2.flow(e) for e in g2.edges(include_residual=True)
    ]
