from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence

from .errors import CorruptState, InvalidVertex
from .graph import Graph, Vertex
from .solver import INFINITY, Distance, PathResult, detect_any_negative_cycle


@dataclass
class ShortestPathRow:
    vertex: Vertex
    label: str
    distance: Optional[Distance]
    path: Optional[List[Vertex]]

    def as_dict(self) -> Dict[str, Any]:
        return {"vertex": self.vertex, "label": self.label, "distance": self.distance, "path": self.path}


def path_to(result: PathResult, target: Vertex) -> Optional[List[Vertex]]:
    """Return the vertex sequence ``start, ..., target`` or None if ``target`` is unreachable.

    Raises CorruptState if the predecessor chain runs longer than V vertices or
    ends somewhere other than the start vertex. This is expected only when
    ``result.has_negative_cycle`` is set.
    """
    n = result.vertex_count
    if isinstance(target, bool) or not isinstance(target, int) or not (0 <= target < n):
        raise InvalidVertex(target, n)
    if result.distances[target] == INFINITY:
        return None

    path: List[Vertex] = []
    cur: Optional[Vertex] = target
    while cur is not None:
        if len(path) >= n:
            raise CorruptState(target, len(path))
        path.append(cur)
        cur = result.predecessors[cur]
    path.reverse()
    if path[0] != result.start:
        raise CorruptState(target, len(path), f"predecessor chain for vertex {target} ends at {path[0]}, not start {result.start}")
    return path


def _label(v: Vertex, labels: Optional[Sequence[str]]) -> str:
    if labels is not None and v < len(labels):
        return str(labels[v])
    return str(v)


def shortest_path_rows(result: PathResult, labels: Optional[Sequence[str]] = None) -> List[ShortestPathRow]:
    """One row per vertex: distance (None when unreachable) and path.

    Paths are left as None when the result has a negative cycle.
    """
    rows: List[ShortestPathRow] = []
    for v, d in enumerate(result.distances):
        if d == INFINITY:
            rows.append(ShortestPathRow(v, _label(v, labels), None, None))
            continue
        path = None if result.has_negative_cycle else path_to(result, v)
        rows.append(ShortestPathRow(v, _label(v, labels), d, path))
    return rows


def describe_graph(graph: Graph, labels: Optional[Sequence[str]] = None) -> Dict[str, Any]:
    adjacency = []
    for v in range(graph.vertex_count):
        adjacency.append({
            "vertex": v,
            "label": _label(v, labels),
            "out": [{"target": e.target, "weight": e.weight} for e in graph.out_edges(v)],
        })
    return {
        "vertex_count": graph.vertex_count,
        "edge_count": graph.edge_count,
        "negative_cycle_anywhere": detect_any_negative_cycle(graph),
        "adjacency": adjacency,
    }
