from __future__ import annotations

import operator
from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .errors import InvalidVertex


Vertex = int


@dataclass(frozen=True)
class Edge:
    source: Vertex
    target: Vertex
    weight: int


@dataclass(frozen=True)
class EdgeArrays:
    """Structure-of-arrays view of a graph's edges.

    Edges of vertex ``v`` occupy ``offsets[v]:offsets[v + 1]`` in ``sources``,
    ``targets`` and ``weights``, in insertion order.
    """

    offsets: Tuple[int, ...]
    sources: Tuple[Vertex, ...]
    targets: Tuple[Vertex, ...]
    weights: Tuple[int, ...]

    def __len__(self) -> int:
        return len(self.targets)


class Graph:
    """Directed, weighted, append-only graph over vertices ``0..vertex_count-1``.

    - Weights are integers and may be negative
    - Parallel edges and self-loops are kept as separate edges
    - Each vertex keeps its outgoing edges in insertion order
    """

    def __init__(self, vertex_count: int):
        vertex_count = operator.index(vertex_count)
        if vertex_count < 0:
            raise InvalidVertex(vertex_count, 0, f"vertex count must be >= 0, got {vertex_count}")
        self._vertex_count = vertex_count
        self._out: List[List[Edge]] = [[] for _ in range(vertex_count)]
        self._edge_count = 0
        self._compiled: Optional[EdgeArrays] = None

    @property
    def vertex_count(self) -> int:
        return self._vertex_count

    @property
    def edge_count(self) -> int:
        return self._edge_count

    def _check_vertex(self, v: int) -> None:
        if isinstance(v, bool) or not isinstance(v, int) or not (0 <= v < self._vertex_count):
            raise InvalidVertex(v, self._vertex_count)

    def add_edge(self, source: Vertex, target: Vertex, weight: int) -> Edge:
        self._check_vertex(source)
        self._check_vertex(target)
        if isinstance(weight, bool) or not isinstance(weight, int):
            raise TypeError(f"edge weight must be an integer, got {type(weight).__name__}")
        edge = Edge(source, target, weight)
        self._out[source].append(edge)
        self._edge_count += 1
        self._compiled = None
        return edge

    def out_edges(self, v: Vertex) -> Tuple[Edge, ...]:
        self._check_vertex(v)
        return tuple(self._out[v])

    def edges(self) -> Iterator[Edge]:
        """Yield every edge: vertex index ascending, then insertion order."""
        for bucket in self._out:
            yield from bucket

    def compile(self) -> EdgeArrays:
        if self._compiled is None:
            offsets = [0]
            sources: List[Vertex] = []
            targets: List[Vertex] = []
            weights: List[int] = []
            for bucket in self._out:
                for e in bucket:
                    sources.append(e.source)
                    targets.append(e.target)
                    weights.append(e.weight)
                offsets.append(len(targets))
            self._compiled = EdgeArrays(tuple(offsets), tuple(sources), tuple(targets), tuple(weights))
        return self._compiled

    def __repr__(self) -> str:
        return f"Graph(vertex_count={self._vertex_count}, edge_count={self._edge_count})"
