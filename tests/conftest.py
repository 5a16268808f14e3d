"""Shared test fixtures for Dependency Mapper tests."""

import random

import pytest


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture
def diamond_edges():
    """A depends on B and C, both depend on D. No cycle."""
    return [("A", "B"), ("A", "C"), ("B", "D"), ("C", "D")]


@pytest.fixture
def mutual_edges():
    """X and Y depend on each other."""
    return [("X", "Y"), ("Y", "X")]


@pytest.fixture
def sdp_edges():
    """P has I=0.2 (Ca=4, Ce=1), Q has I=0.9 (Ca=1, Ce=9), and P depends on Q."""
    edges = [(f"user{i}", "P") for i in range(4)]
    edges.append(("P", "Q"))
    edges.extend(("Q", f"lib{i}") for i in range(9))
    return edges


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep user and project config files out of every test."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    for key in ("DEPMAP_WORKERS", "DEPMAP_MAX_VIOLATIONS", "DEPMAP_VERBOSITY"):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def random_input():
    """Factory for seeded random (edges, type_counts) inputs, self-loops included."""

    def make(seed, max_modules=25):
        rng = random.Random(seed)
        names = [f"mod{i}" for i in range(rng.randint(1, max_modules))]
        edges = [
            (rng.choice(names), rng.choice(names))
            for _ in range(rng.randint(0, len(names) * 3))
        ]
        type_counts = []
        for name in rng.sample(names, rng.randint(0, len(names))):
            total = rng.randint(0, 10)
            type_counts.append((name, total, rng.randint(0, total)))
        return edges, type_counts

    return make
