from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .graph import Graph
from .logger import log_event
from .paths import describe_graph, shortest_path_rows
from .solver import compute_shortest_paths
from .spec import GraphSpec, SolveOptions, load_graph_spec


EXIT_NEGATIVE_CYCLE = 3


def build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="bellman-paths", description="Single-source shortest paths with negative edges (Bellman-Ford)")
    sub = p.add_subparsers(dest="cmd", required=True)

    solve = sub.add_parser("solve", help="Solve a graph given on the command line")
    solve.add_argument("--vertices", type=int, required=True, help="Number of vertices")
    solve.add_argument("--start", type=int, default=0, help="Start vertex index")
    solve.add_argument("--edges", nargs="*", default=[], help="Edges of form src:dst:weight, e.g., 0:1:-1 1:2:3")
    solve.add_argument("--labels", nargs="*", help="Optional display label per vertex")
    solve.add_argument("--no-early-exit", action="store_true", help="Always run all V-1 relaxation passes")

    from_json = sub.add_parser("solve-from-json", help="Solve a JSON graph document")
    from_json.add_argument("path", help="Path to JSON graph document")

    describe = sub.add_parser("describe-from-json", help="Print the adjacency listing of a JSON graph document")
    describe.add_argument("path", help="Path to JSON graph document")

    return p


def parse_edges(edge_specs: List[str]):
    edges = []
    for spec in edge_specs:
        try:
            src, dst, w = spec.split(":")
            edges.append((int(src), int(dst), int(w)))
        except ValueError:
            raise SystemExit(f"Invalid edge spec '{spec}'. Expected src:dst:weight with integers")
    return edges


def _solve(spec: GraphSpec) -> int:
    result = compute_shortest_paths(spec.graph, spec.start, early_exit=spec.options.early_exit)
    rows = shortest_path_rows(result, spec.labels)
    log_event("solve", start=result.start, has_negative_cycle=result.has_negative_cycle,
              passes=result.passes, rows=[r.as_dict() for r in rows])
    return EXIT_NEGATIVE_CYCLE if result.has_negative_cycle else 0


def cmd_solve(args: argparse.Namespace) -> int:
    try:
        graph = Graph(args.vertices)
        for src, dst, w in parse_edges(args.edges):
            graph.add_edge(src, dst, w)
        if args.labels and len(args.labels) != args.vertices:
            raise ValueError("labels must have one entry per vertex")
        spec = GraphSpec(graph, args.start, args.labels or None, SolveOptions(early_exit=not args.no_early_exit))
        return _solve(spec)
    except ValueError as exc:
        log_event("error", action="solve", error=str(exc))
        return 2


def cmd_solve_from_json(args: argparse.Namespace) -> int:
    try:
        spec = load_graph_spec(args.path)
    except (OSError, ValueError) as exc:
        log_event("error", action="load_graph_spec", error=str(exc))
        return 2
    return _solve(spec)


def cmd_describe_from_json(args: argparse.Namespace) -> int:
    try:
        spec = load_graph_spec(args.path)
    except (OSError, ValueError) as exc:
        log_event("error", action="load_graph_spec", error=str(exc))
        return 2
    log_event("describe", start=spec.start, **describe_graph(spec.graph, spec.labels))
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    p = build_arg_parser()
    args = p.parse_args(argv)
    if args.cmd == "solve":
        return cmd_solve(args)
    if args.cmd == "solve-from-json":
        return cmd_solve_from_json(args)
    if args.cmd == "describe-from-json":
        return cmd_describe_from_json(args)
    return 0

if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
