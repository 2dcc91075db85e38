"""Small capacity graphs shared by the flow tests."""

import pytest

from flowgraph.lib.graph import ResidualGraph


@pytest.fixture
def single_path():
    # s ──1──► a ──1──► t
    g = ResidualGraph()
    g.add_edge("s", "a", 1)
    g.add_edge("a", "t", 1)
    return g


@pytest.fixture
def diamond():
    #      ┌──1──► a ──1──┐
    #   s ─┤              ├─► t
    #      └──1──► b ──1──┘
    g = ResidualGraph()
    g.add_edge("s", "a", 1)
    g.add_edge("s", "b", 1)
    g.add_edge("a", "t", 1)
    g.add_edge("b", "t", 1)
    return g


@pytest.fixture
def bottleneck():
    # s ──3──► a ──1──► t
    g = ResidualGraph()
    g.add_edge("s", "a", 3)
    g.add_edge("a", "t", 1)
    return g


@pytest.fixture
def disconnected():
    # s ──2──► a        b ──2──► t
    g = ResidualGraph()
    g.add_edge("s", "a", 2)
    g.add_edge("b", "t", 2)
    return g


@pytest.fixture
def clrs():
    # Textbook six-node network (s, v1..v4, t). Max flow 23, min cut
    # {s, v1, v2, v4} | {v3, t} through v1->v3, v4->v3 and v4->t.
    g = ResidualGraph()
    g.add_edge("s", "v1", 16)
    g.add_edge("s", "v2", 13)
    g.add_edge("v1", "v3", 12)
    g.add_edge("v2", "v1", 4)
    g.add_edge("v2", "v4", 14)
    g.add_edge("v3", "v2", 9)
    g.add_edge("v3", "t", 20)
    g.add_edge("v4", "v3", 7)
    g.add_edge("v4", "t", 4)
    return g


@pytest.fixture
def layered():
    # s ─► {o, p} ─► {q, r} ─► t with a cross edge o ─► p. Max flow 5.
    g = ResidualGraph()
    g.add_edge("s", "o", 3)
    g.add_edge("s", "p", 3)
    g.add_edge("o", "p", 2)
    g.add_edge("o", "q", 3)
    g.add_edge("p", "r", 2)
    g.add_edge("r", "t", 3)
    g.add_edge("q", "r", 4)
    g.add_edge("q", "t", 2)
    return g


@pytest.fixture
def funnel():
    # Four unit sources into a complete bipartite layer that drains
    # through two hubs m, n. Max flow 2.
    g = ResidualGraph()
    left = ["a", "b", "c", "d"]
    right = ["w", "x", "y", "z"]
    for u in left:
        g.add_edge("s", u, 1)
        for v in right:
            g.add_edge(u, v, 1)
    for v in right:
        g.add_edge(v, "m", 1)
        g.add_edge(v, "n", 1)
    g.add_edge("m", "t", 1)
    g.add_edge("n", "t", 1)
    return g


@pytest.fixture
def split_hub():
    # Two branches meet at hub w, which is split into w_in ─1─► w_out.
    # Both exits are open, but the split edge limits the flow to 1.
    g = ResidualGraph()
    g.add_edge("s", "a_in", 1)
    g.add_edge("a_in", "a_out", 1)
    g.add_edge("s", "b_in", 1)
    g.add_edge("b_in", "b_out", 1)
    g.add_edge("a_out", "w_in", 1)
    g.add_edge("b_out", "w_in", 1)
    g.add_edge("w_in", "w_out", 1)
    g.add_edge("w_out", "m_in", 1)
    g.add_edge("m_in", "m_out", 1)
    g.add_edge("w_out", "n_in", 1)
    g.add_edge("n_in", "n_out", 1)
    g.add_edge("m_out", "t", 1)
    g.add_edge("n_out", "t", 1)
    return g


@pytest.fixture
def parallel_edges():
    # Three independent A ─► B edges with the same endpoints.
    g = ResidualGraph()
    g.add_edge("A", "B", 10)
    g.add_edge("A", "B", 5)
    g.add_edge("A", "B", 5)
    return g
