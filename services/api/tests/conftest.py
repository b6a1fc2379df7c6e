import pytest
from fastapi.testclient import TestClient

from kitchenplan.limits import limiter
from kitchenplan.main import app
from kitchenplan.services.conversion_checks import Graph


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Each test starts with fresh per-IP request counters."""
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
def client():
    """Test client for the API."""
    with TestClient(app) as c:
        yield c


@pytest.fixture
def grid_graph():
    """3x3 grid, cells numbered row by row, edges both ways between neighbours."""
    adjacency = {}
    for v in range(1, 10):
        targets = []
        if v - 3 > 0:
            targets.append(v - 3)
        if v % 3 != 1:
            targets.append(v - 1)
        if v % 3 != 0:
            targets.append(v + 1)
        if v + 3 <= 9:
            targets.append(v + 3)
        adjacency[v] = targets
    return Graph.from_adjacency(adjacency)


@pytest.fixture
def sample_graph():
    """Nine vertices, one strong component {3, 4, 6, 7, 8}."""
    return Graph(
        list(range(1, 10)),
        [0, 0, 1, 4, 6, 7, 8, 11, 12, 12],
        [3, 1, 4, 6, 3, 5, 1, 7, 4, 8, 9, 6],
    )
