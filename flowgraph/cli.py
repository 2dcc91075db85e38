"""Command-line interface for flowgraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from time import perf_counter
from typing import Any, Dict, List, Optional

from flowgraph.config import DEFAULT_CONFIG, load_config
from flowgraph.lib.algorithms.max_flow import calc_max_flow
from flowgraph.lib.errors import FlowGraphError
from flowgraph.lib.io import edgelist_to_graph
from flowgraph.logging import get_logger, level_from_flags, set_global_log_level
from flowgraph.world.grid import load_world
from flowgraph.world.reduction import build_assignment_network, extract_assignments

logger = get_logger(__name__)


def _format_duration(seconds: float) -> str:
    if seconds < 1.0:
        return f"{seconds * 1000:.1f} ms"
    return f"{seconds:.2f} s"


def _solve_world(
    path: Path,
    config_path: Optional[Path] = None,
    show_assignments: bool = False,
    as_json: bool = False,
) -> None:
    """Count ant assignments in a world file and print the result."""
    config = load_config(config_path) if config_path else DEFAULT_CONFIG
    logger.info(f"Solving world: {path}")

    start = perf_counter()
    world = load_world(path, config)
    network = build_assignment_network(world)
    count = network.solve()
    elapsed = perf_counter() - start
    logger.info(f"Solved {path.name} in {_format_duration(elapsed)}")

    assignments = []
    if show_assignments or as_json:
        assignments = extract_assignments(network)

    if as_json:
        doc: Dict[str, Any] = {
            "world": str(path),
            "rows": world.rows,
            "cols": world.cols,
            "max_distance": world.max_distance,
            "assignments": count,
            "triples": [
                {
                    "fruit": list(a.fruit),
                    "workplace": list(a.workplace),
                    "meat": list(a.meat),
                }
                for a in assignments
            ],
        }
        print(json.dumps(doc, indent=2))
        return

    print(count)
    if show_assignments:
        for a in assignments:
            print(f"  fruit {a.fruit} -> workplace {a.workplace} -> meat {a.meat}")


def _solve_edgelist(
    path: Path,
    source: str,
    sink: str,
    show_summary: bool = False,
    as_json: bool = False,
) -> None:
    """Compute max flow on an edge-list file and print the result."""
    logger.info(f"Reading edge list: {path}")
    with open(path, "r", encoding="utf-8") as fh:
        graph = edgelist_to_graph(fh)
    logger.info(f"Loaded {graph.node_count} nodes and {graph.edge_count} edges")

    flow, summary = calc_max_flow(graph, source, sink, return_summary=True)

    if as_json:
        doc: Dict[str, Any] = {"source": source, "sink": sink, "max_flow": flow}
        if show_summary:
            doc["augmentations"] = summary.augmentations
            doc["reachable"] = sorted(str(n) for n in summary.reachable)
            doc["min_cut"] = [
                {"source": e.source, "sink": e.sink, "capacity": e.capacity}
                for e in summary.min_cut
            ]
        print(json.dumps(doc, indent=2))
        return

    print(flow)
    if show_summary:
        print(f"  augmentations: {summary.augmentations}")
        print(f"  reachable from source: {len(summary.reachable)} nodes")
        print(
            f"  min-cut ({len(summary.min_cut)} edges,"
            f" capacity {summary.cut_capacity}):"
        )
        for edge in summary.min_cut:
            print(f"    {edge.source} -> {edge.sink} [{edge.capacity}]")


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``flowgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.
    """
    parser = argparse.ArgumentParser(
        prog="flowgraph",
        description="Compute maximum flows and ant world assignments.",
    )

    # Global options
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Suppress informational logging"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{solve,maxflow}",
        help="Available commands",
    )

    solve_parser = subparsers.add_parser(
        "solve", help="Count concurrent ant assignments in a world file"
    )
    solve_parser.add_argument("world", type=Path, help="Path to world file")
    solve_parser.add_argument(
        "--config", "-c", type=Path, default=None, help="Path to YAML config"
    )
    solve_parser.add_argument(
        "--assignments",
        "-a",
        action="store_true",
        help="Also print each (fruit, workplace, meat) triple",
    )

    maxflow_parser = subparsers.add_parser(
        "maxflow", help="Compute max flow on an edge-list file"
    )
    maxflow_parser.add_argument(
        "edgelist", type=Path, help="File with 'source sink capacity' lines"
    )
    maxflow_parser.add_argument("--source", "-s", required=True, help="Source node")
    maxflow_parser.add_argument("--sink", "-t", required=True, help="Sink node")
    maxflow_parser.add_argument(
        "--summary",
        action="store_true",
        help="Show augmentation count and the minimum cut",
    )

    for p in (solve_parser, maxflow_parser):
        p.add_argument("--json", action="store_true", help="Print results as JSON")

    effective_args = sys.argv[1:] if argv is None else argv

    # If no arguments are provided, show help and exit cleanly
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    level = level_from_flags(args.verbose, args.quiet)
    set_global_log_level(level)
    logger.debug(f"Log level set to {logging.getLevelName(level)}")

    try:
        if args.command == "solve":
            _solve_world(args.world, args.config, args.assignments, args.json)
        elif args.command == "maxflow":
            _solve_edgelist(
                args.edgelist, args.source, args.sink, args.summary, args.json
            )
    except FileNotFoundError as e:
        logger.error(f"File not found: {e.filename}")
        print(f"❌ ERROR: File not found: {e.filename}")
        sys.exit(1)
    except (FlowGraphError, ValueError, OSError) as e:
        logger.error(f"Failed to run {args.command}: {type(e).__name__}: {e}")
        print(f"❌ ERROR: {type(e).__name__}: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
