from __future__ import annotations

from typing import Any, Dict, Iterable, Optional

from flowgraph.lib.graph import ResidualGraph


def graph_to_node_link(graph: ResidualGraph) -> Dict[str, Any]:
    """
    Converts a ResidualGraph into a node-link dict representation.

    Only caller-added (forward) edges are listed; residual twins are implied.
    Node values are converted with ``str`` so the result is JSON-serializable.

    The returned dict has the following structure:
        {
            "nodes": [{"id": "<node>"}, ...],
            "links": [
                {
                    "source": <node index>,
                    "target": <node index>,
                    "key": <edge index>,
                    "capacity": <int>,
                    "flow": <int>,
                },
                ...
            ]
        }

    Args:
        graph: The ResidualGraph to convert.

    Returns:
        A dict containing the list of 'nodes' and list of 'links'.
    """
    node_list = graph.nodes()
    node_map = {node: i for i, node in enumerate(node_list)}

    return {
        "nodes": [{"id": str(node)} for node in node_list],
        "links": [
            {
                "source": node_map[edge.source],
                "target": node_map[edge.sink],
                "key": edge.index,
                "capacity": edge.capacity,
                "flow": graph.flow(edge),
            }
            for edge in graph.edges()
        ],
    }


def edgelist_to_graph(
    lines: Iterable[str],
    separator: Optional[str] = None,
    graph: Optional[ResidualGraph] = None,
) -> ResidualGraph:
    """
    Builds or updates a ResidualGraph from an edge list.

    Each non-empty line that does not start with ``#`` must hold three
    tokens: source node, sink node and integer capacity. Node names are kept
    as strings.

    Args:
        lines: An iterable of strings, each representing one edge.
        separator: Token separator; None splits on any whitespace.
        graph: Existing graph to extend. If None, a new graph is created.

    Returns:
        The updated (or newly created) ResidualGraph.

    Raises:
        ValueError: If a line does not have three tokens or the capacity is not
            an integer. The message names the offending line.
        InvalidEdgeError: If a line describes a self-loop or a negative capacity.
    """
    if graph is None:
        graph = ResidualGraph()

    for lineno, line in enumerate(lines, start=1):
        line = line.strip()
        if not line or line.startswith("#"):
            continue

        tokens = line.split(separator)
        if len(tokens) != 3:
            raise ValueError(
                f"Line {lineno}: expected 'source sink capacity', got {line!r}."
            )
        src, dst, cap = (t.strip() for t in tokens)
        try:
            capacity = int(cap)
        except ValueError:
            raise ValueError(
                f"Line {lineno}: capacity must be an integer, got {cap!r}."
            ) from None
        graph.add_edge(src, dst, capacity)

    return graph
