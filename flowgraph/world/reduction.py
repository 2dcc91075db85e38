"""Reduce an ant world to a max-flow problem.

Every ant needs one fruit, one workplace and one meat, with the fruit and
the meat reachable from the workplace, and no cell may serve two ants. The
reduction builds a flow network::

    SOURCE -> fruit -> workplace -> meat -> SINK

with unit capacity on every edge. To make each cell usable once, every cell
node is split into an ``IN`` and an ``OUT`` twin joined by one edge of
capacity 1. The max-flow value is then the number of ants that can work at
the same time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, NamedTuple, Set

from flowgraph.lib.algorithms.max_flow import MaxFlowSolver
from flowgraph.lib.graph import ResidualGraph
from flowgraph.logging import get_logger
from flowgraph.world.grid import CellKind, Point, World
from flowgraph.world.reach import reachable_resources

logger = get_logger(__name__)


class Twin(Enum):
    IN = "in"
    OUT = "out"


class Terminal(Enum):
    SOURCE = "source"
    SINK = "sink"


class SplitNode(NamedTuple):
    """One half of a split cell node."""

    point: Point
    twin: Twin

    def __str__(self) -> str:
        return f"{self.point}/{self.twin.value}"


class Assignment(NamedTuple):
    fruit: Point
    workplace: Point
    meat: Point


@dataclass
class AssignmentNetwork:
    """Flow network built from a world.

    Attributes:
        graph: The node-split residual graph.
        workplaces: Workplaces that reach at least one resource.
        source: Global source node.
        sink: Global sink node.
    """

    graph: ResidualGraph = field(default_factory=ResidualGraph)
    workplaces: List[Point] = field(default_factory=list)
    source: Terminal = Terminal.SOURCE
    sink: Terminal = Terminal.SINK
    _split: Set[Point] = field(default_factory=set, init=False, repr=False)

    def split(self, point: Point) -> None:
        """Add the unit ``IN -> OUT`` edge for ``point`` once."""
        if point not in self._split:
            self._split.add(point)
            self.graph.add_edge(
                SplitNode(point, Twin.IN), SplitNode(point, Twin.OUT), 1
            )

    def solve(self) -> int:
        return MaxFlowSolver(self.graph).max_flow(self.source, self.sink)


def build_assignment_network(world: World) -> AssignmentNetwork:
    """
    Build the node-split flow network for ``world``.

    Args:
        world: Parsed world.

    Returns:
        AssignmentNetwork: Unsolved network.
    """
    net = AssignmentNetwork()
    fed: Set[Point] = set()
    drained: Set[Point] = set()

    for workplace in world.points_of(CellKind.WORKPLACE):
        reach = reachable_resources(world, workplace)
        if not reach.fruits and not reach.meats:
            continue
        net.workplaces.append(workplace)
        net.split(workplace)
        w_in = SplitNode(workplace, Twin.IN)
        w_out = SplitNode(workplace, Twin.OUT)

        for fruit in sorted(reach.fruits):
            net.split(fruit)
            if fruit not in fed:
                fed.add(fruit)
                net.graph.add_edge(net.source, SplitNode(fruit, Twin.IN), 1)
            net.graph.add_edge(SplitNode(fruit, Twin.OUT), w_in, 1)

        for meat in sorted(reach.meats):
            net.split(meat)
            net.graph.add_edge(w_out, SplitNode(meat, Twin.IN), 1)
            if meat not in drained:
                drained.add(meat)
                net.graph.add_edge(SplitNode(meat, Twin.OUT), net.sink, 1)

    logger.info(
        "Built assignment network: %d workplaces, %d nodes, %d edges",
        len(net.workplaces),
        net.graph.node_count,
        net.graph.edge_count,
    )
    return net


def count_assignments(world: World) -> int:
    """Return how many ants can work at once in ``world``."""
    return build_assignment_network(world).solve()


def extract_assignments(net: AssignmentNetwork) -> List[Assignment]:
    """Decode a solved network into ``(fruit, workplace, meat)`` triples.

    Args:
        net: Network after ``solve()``.

    Returns:
        List[Assignment]: One triple per unit of flow, sorted by workplace.
    """
    fruit_of: Dict[Point, Point] = {}
    meat_of: Dict[Point, Point] = {}
    workplaces = set(net.workplaces)
    for edge in net.graph.edges():
        if net.graph.flow(edge) <= 0:
            continue
        src, dst = edge.source, edge.sink
        if not (isinstance(src, SplitNode) and isinstance(dst, SplitNode)):
            continue
        if src.point == dst.point:
            continue
        if dst.point in workplaces and dst.twin is Twin.IN:
            fruit_of[dst.point] = src.point
        elif src.point in workplaces and src.twin is Twin.OUT:
            meat_of[src.point] = dst.point

    return [
        Assignment(fruit=fruit_of[w], workplace=w, meat=meat_of[w])
        for w in sorted(fruit_of)
        if w in meat_of
    ]
