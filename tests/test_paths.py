import pytest

from bellman_paths.errors import CorruptState, InvalidVertex
from bellman_paths.graph import Graph
from bellman_paths.paths import describe_graph, path_to, shortest_path_rows
from bellman_paths.solver import INFINITY, PathResult, compute_shortest_paths


def _weight(graph, u, v):
    return min(e.weight for e in graph.out_edges(u) if e.target == v)


def test_path_to_scenario_a(scenario_a):
    res = compute_shortest_paths(scenario_a, 0)
    assert path_to(res, 0) == [0]
    assert path_to(res, 3) == [0, 1, 4, 3]
    assert path_to(res, 2) == [0, 1, 2]


def test_path_weights_match_distances(scenario_a):
    res = compute_shortest_paths(scenario_a, 0)
    for v in range(scenario_a.vertex_count):
        path = path_to(res, v)
        assert path[0] == 0 and path[-1] == v
        assert sum(_weight(scenario_a, a, b) for a, b in zip(path, path[1:])) == res.distances[v]


def test_unreachable_returns_none():
    g = Graph(6)
    g.add_edge(0, 1, 1)
    g.add_edge(5, 0, 1)
    res = compute_shortest_paths(g, 0)
    assert path_to(res, 5) is None


def test_single_vertex_path():
    res = compute_shortest_paths(Graph(1), 0)
    assert path_to(res, 0) == [0]


def test_target_out_of_range(scenario_a):
    res = compute_shortest_paths(scenario_a, 0)
    with pytest.raises(InvalidVertex):
        path_to(res, 5)


def test_cyclic_predecessors_raise_corrupt_state():
    res = PathResult(start=0, distances=(0, -7, -4), predecessors=(None, 2, 1), has_negative_cycle=True)
    with pytest.raises(CorruptState) as info:
        path_to(res, 1)
    assert info.value.target == 1
    assert info.value.steps == 3


def test_chain_not_ending_at_start_raises():
    res = PathResult(start=0, distances=(0, INFINITY, 3), predecessors=(None, None, 1), has_negative_cycle=False)
    with pytest.raises(CorruptState):
        path_to(res, 2)


def test_path_to_does_not_mutate(scenario_a):
    res = compute_shortest_paths(scenario_a, 0)
    before = (res.distances, res.predecessors)
    for v in range(5):
        path_to(res, v)
    assert (res.distances, res.predecessors) == before


def test_rows_with_labels():
    g = Graph(3)
    g.add_edge(0, 1, 2)
    res = compute_shortest_paths(g, 0)
    rows = shortest_path_rows(res, ["a", "b", "c"])
    assert [r.as_dict() for r in rows] == [
        {"vertex": 0, "label": "a", "distance": 0, "path": [0]},
        {"vertex": 1, "label": "b", "distance": 2, "path": [0, 1]},
        {"vertex": 2, "label": "c", "distance": None, "path": None},
    ]


def test_rows_skip_paths_on_negative_cycle(scenario_a):
    scenario_a.add_edge(2, 1, -10)
    res = compute_shortest_paths(scenario_a, 0)
    rows = shortest_path_rows(res)
    assert all(r.path is None for r in rows)
    assert rows[1].label == "1"


def test_describe_graph(scenario_a):
    info = describe_graph(scenario_a)
    assert info["vertex_count"] == 5
    assert info["edge_count"] == 8
    assert info["negative_cycle_anywhere"] is False
    assert info["adjacency"][1]["out"] == [
        {"target": 2, "weight": 3},
        {"target": 3, "weight": 2},
        {"target": 4, "weight": 2},
    ]


def test_describe_graph_reports_unreachable_negative_cycle():
    g = Graph(3)
    g.add_edge(0, 1, 1)
    g.add_edge(2, 2, -1)
    assert describe_graph(g)["negative_cycle_anywhere"] is True
