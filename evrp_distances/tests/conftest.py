# evrp_distances/tests/conftest.py
import json
from pathlib import Path
import pytest
from fastapi.testclient import TestClient

from evrp_distances.app import app
from evrp_distances.models import Instance

# Base directories
ROOT = Path(__file__).resolve().parents[2]        # repository root
EXAMPLES_DIR = ROOT / "examples"


@pytest.fixture(scope="session")
def client():
    return TestClient(app)


@pytest.fixture(scope="session")
def instances():
    """Always load instances.json from examples/ folder."""
    path = EXAMPLES_DIR / "instances.json"
    if not path.exists():
        raise FileNotFoundError(f"{path} not found.")
    with path.open(encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def default_config(instances):
    return instances.get("defaults", {}).get("config", {})


@pytest.fixture
def small_instance(instances):
    return Instance.model_validate(instances["small"]["instance"])


def table_distance(table):
    """
    Distance function backed by a {(id_a, id_b): d} table (either orientation).
    Self pairs are 0; unknown pairs fail loudly so tests notice missing entries.
    """
    sym = {}
    for (a, b), d in table.items():
        sym[(a, b)] = d
        sym[(b, a)] = d

    def dist(a, b):
        if a.id == b.id:
            return 0.0
        return sym[(a.id, b.id)]
    return dist


def forbid_pairs(*pairs, allow_self=False):
    """Feasibility predicate rejecting the given unordered id pairs (and self pairs unless allowed)."""
    banned = {frozenset(p) for p in pairs}

    def violates(a, b):
        if a.id == b.id:
            return not allow_self
        return frozenset((a.id, b.id)) in banned
    return violates


@pytest.fixture
def make_distance():
    return table_distance


@pytest.fixture
def make_predicate():
    return forbid_pairs
