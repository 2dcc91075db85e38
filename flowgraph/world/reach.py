from __future__ import annotations

from typing import FrozenSet, List, NamedTuple

from flowgraph.world.grid import CellKind, Point, World


class Reach(NamedTuple):
    """Resources a workplace can reach."""

    fruits: FrozenSet[Point]
    meats: FrozenSet[Point]


def reachable_resources(world: World, start: Point) -> Reach:
    """
    Level-by-level BFS from ``start`` over grass cells.

    Fruit and meat cells next to an expanded cell are collected; they are
    never walked through. Rocks, workplaces and the grid edge block
    movement. The start cell is always expanded; a grass cell ``k`` steps
    away is expanded only while ``k < world.max_distance``, so resources up
    to ``max(1, max_distance)`` steps away are found.

    Args:
        world: Parsed world.
        start: Cell to search from, usually a workplace.

    Returns:
        Reach: Collected fruit and meat cells.
    """
    fruits = set()
    meats = set()
    visited = {start}
    frontier: List[Point] = [start]
    level = 0

    while frontier:
        next_frontier: List[Point] = []
        for cell in frontier:
            for nbr in world.neighbors(cell):
                kind = world.kind_at(nbr)
                if kind is CellKind.FRUIT:
                    fruits.add(nbr)
                elif kind is CellKind.MEAT:
                    meats.add(nbr)
                elif kind is CellKind.GRASS and nbr not in visited:
                    visited.add(nbr)
                    next_frontier.append(nbr)
        level += 1
        if level >= world.max_distance:
            break
        frontier = next_frontier

    return Reach(fruits=frozenset(fruits), meats=frozenset(meats))
