from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .errors import InvalidVertex
from .graph import Graph, Vertex


INFINITY = float("inf")

Distance = Union[int, float]


@dataclass(frozen=True)
class PathResult:
    start: Optional[Vertex]  # None only for an empty graph
    distances: Tuple[Distance, ...]
    predecessors: Tuple[Optional[Vertex], ...]
    has_negative_cycle: bool
    passes: int = 0  # relaxation passes actually run

    @property
    def vertex_count(self) -> int:
        return len(self.distances)

    def is_reachable(self, v: Vertex) -> bool:
        return self.distances[v] != INFINITY


def compute_shortest_paths(graph: Graph, start: Vertex, early_exit: bool = True) -> PathResult:
    """Bellman-Ford shortest paths from ``start`` with predecessor tracking and negative cycle detection.

    Runs at most V-1 relaxation passes over every edge (vertex ascending, insertion
    order). With ``early_exit`` the loop stops after the first pass that changes
    nothing, which yields the same result as running all passes. An empty
    graph yields an empty result with ``start`` set to None.

    A negative cycle reachable from ``start`` sets ``has_negative_cycle``; the
    distances of vertices it affects are then meaningless.
    """
    n = graph.vertex_count
    if n == 0:
        return PathResult(None, (), (), False)
    if isinstance(start, bool) or not isinstance(start, int) or not (0 <= start < n):
        raise InvalidVertex(start, n)

    arrays = graph.compile()
    sources, targets, weights = arrays.sources, arrays.targets, arrays.weights
    m = len(arrays)

    dist: List[Distance] = [INFINITY] * n
    pred: List[Optional[Vertex]] = [None] * n
    dist[start] = 0

    passes = 0
    for _ in range(n - 1):
        passes += 1
        changed = False
        for i in range(m):
            du = dist[sources[i]]
            if du == INFINITY:
                continue
            v = targets[i]
            candidate = du + weights[i]
            if candidate < dist[v]:
                dist[v] = candidate
                pred[v] = sources[i]
                changed = True
        if early_exit and not changed:
            break

    has_negative_cycle = False
    for i in range(m):
        du = dist[sources[i]]
        if du != INFINITY and du + weights[i] < dist[targets[i]]:
            has_negative_cycle = True
            break

    return PathResult(start, tuple(dist), tuple(pred), has_negative_cycle, passes)


def detect_any_negative_cycle(graph: Graph) -> bool:
    # Super-source technique: a virtual source with zero-weight edges to every vertex
    n = graph.vertex_count
    arrays = graph.compile()
    sources, targets, weights = arrays.sources, arrays.targets, arrays.weights
    dist = [0] * n

    # The virtual source adds one vertex, so V relaxation passes are needed
    for _ in range(n):
        changed = False
        for u, v, w in zip(sources, targets, weights):
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                changed = True
        if not changed:
            return False

    return any(dist[u] + w < dist[v] for u, v, w in zip(sources, targets, weights))
