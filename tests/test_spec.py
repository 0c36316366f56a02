import json
from pathlib import Path

import pytest

from bellman_paths.errors import InvalidVertex
from bellman_paths.spec import load_graph_spec, parse_graph_spec


def test_load_graph_spec(tmp_path: Path):
    doc = {
        "vertices": 3,
        "start": 1,
        "labels": ["x", "y", "z"],
        "edges": [[1, 2, -4], {"src": 2, "dst": 0, "weight": 6}],
        "options": {"early_exit": False},
    }
    p = tmp_path / "g.json"
    p.write_text(json.dumps(doc))
    spec = load_graph_spec(str(p))
    assert spec.start == 1
    assert spec.labels == ["x", "y", "z"]
    assert spec.graph.edge_count == 2
    assert spec.options.early_exit is False


def test_defaults():
    spec = parse_graph_spec({"vertices": 2})
    assert spec.start == 0
    assert spec.labels is None
    assert spec.graph.edge_count == 0


def test_negative_weights_always_accepted():
    spec = parse_graph_spec({"vertices": 2, "edges": [[0, 1, -1], [1, 0, -3]]})
    assert [e.weight for e in spec.graph.edges()] == [-1, -3]


def test_unknown_option_rejected():
    with pytest.raises(ValueError, match="unknown options: allow_negative_edges"):
        parse_graph_spec({"vertices": 2, "options": {"allow_negative_edges": False}})


@pytest.mark.parametrize("doc", [
    {},
    {"vertices": -2},
    {"vertices": 2, "labels": ["only-one"]},
    {"vertices": 2, "edges": [[0, 1]]},
    {"vertices": 2, "edges": [[0, 1, 1.5]]},
    {"vertices": 2, "edges": [{"src": 0, "dst": 1}]},
    {"vertices": 2, "start": "0"},
    {"vertices": 2, "edges": 5},
    {"vertices": 2, "options": {"early_exit": "no"}},
    {"vertices": 2, "options": [1]},
    [],
])
def test_invalid_documents(doc):
    with pytest.raises(ValueError):
        parse_graph_spec(doc)


def test_out_of_range_indices():
    with pytest.raises(InvalidVertex):
        parse_graph_spec({"vertices": 2, "start": 2})
    with pytest.raises(InvalidVertex):
        parse_graph_spec({"vertices": 2, "edges": [[0, 2, 1]]})
