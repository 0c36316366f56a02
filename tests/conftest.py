import pytest

from bellman_paths import logger
from bellman_paths.graph import Graph


SCENARIO_A_EDGES = [(0, 1, -1), (0, 2, 4), (1, 2, 3), (1, 3, 2), (1, 4, 2), (3, 2, 5), (3, 1, 1), (4, 3, -3)]


@pytest.fixture(autouse=True)
def log_dir(tmp_path, monkeypatch):
    d = tmp_path / "logs"
    monkeypatch.setattr(logger, "_LOG_DIR", str(d))
    return d


@pytest.fixture
def scenario_a() -> Graph:
    g = Graph(5)
    for u, v, w in SCENARIO_A_EDGES:
        g.add_edge(u, v, w)
    return g
