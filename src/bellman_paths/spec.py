from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .errors import InvalidVertex
from .graph import Graph


@dataclass
class SolveOptions:
    early_exit: bool = True


@dataclass
class GraphSpec:
    graph: Graph
    start: int
    labels: Optional[List[str]] = None
    options: SolveOptions = field(default_factory=SolveOptions)


def _parse_edge(raw: Any) -> Tuple[int, int, int]:
    if isinstance(raw, dict):
        try:
            src, dst, w = raw["src"], raw["dst"], raw["weight"]
        except KeyError as exc:
            raise ValueError(f"edge object missing key {exc}") from exc
    elif isinstance(raw, (list, tuple)) and len(raw) == 3:
        src, dst, w = raw
    else:
        raise ValueError(f"edge must be [src, dst, weight] or an object with src/dst/weight, got {raw!r}")
    for name, value in (("src", src), ("dst", dst), ("weight", w)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError(f"edge {name} must be an integer, got {value!r}")
    return src, dst, w


def parse_graph_spec(data: Dict[str, Any]) -> GraphSpec:
    """Build a GraphSpec from a graph document.

    Document keys:
    - vertices (required): vertex count, integer >= 0
    - start: start vertex (default 0)
    - labels: optional display names, one per vertex
    - edges: list of [src, dst, weight] or {"src", "dst", "weight"}
    - options: {"early_exit": bool}
    """
    if not isinstance(data, dict):
        raise ValueError("graph document must be a JSON object")
    vertices = data.get("vertices")
    if isinstance(vertices, bool) or not isinstance(vertices, int) or vertices < 0:
        raise ValueError("vertices must be a non-negative integer")

    start = data.get("start", 0)
    if isinstance(start, bool) or not isinstance(start, int):
        raise ValueError("start must be an integer")
    if vertices > 0 and not (0 <= start < vertices):
        raise InvalidVertex(start, vertices)

    labels = data.get("labels")
    if labels is not None:
        if not isinstance(labels, list) or len(labels) != vertices:
            raise ValueError("labels must be a list with one entry per vertex")
        labels = [str(x) for x in labels]

    options_data = data.get("options", {}) or {}
    if not isinstance(options_data, dict):
        raise ValueError("options must be a JSON object")
    unknown = sorted(set(options_data) - {"early_exit"})
    if unknown:
        raise ValueError(f"unknown options: {', '.join(unknown)}")
    early_exit = options_data.get("early_exit", True)
    if not isinstance(early_exit, bool):
        raise ValueError("options.early_exit must be a boolean")
    options = SolveOptions(early_exit=early_exit)

    edges = data.get("edges", [])
    if not isinstance(edges, list):
        raise ValueError("edges must be a list")

    graph = Graph(vertices)
    for raw in edges:
        src, dst, w = _parse_edge(raw)
        graph.add_edge(src, dst, w)

    return GraphSpec(graph, start, labels, options)


def load_graph_spec(path: str) -> GraphSpec:
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    return parse_graph_spec(data)
