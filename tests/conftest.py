"""
Pytest configuration and shared fixtures.

The graphs here are small enough to reason about by hand; the algorithm
tests refer to them by vertex name.
"""

import pathlib
import shutil
import sys
import tempfile

import pytest

ROOT = pathlib.Path(__file__).resolve().parents[1]  # project root
sys.path.insert(0, str(ROOT))

from pathgraph.core.graph import Graph


def _build(names, edges):
    G = Graph()
    V = {name: G.add_vertex(name) for name in names}
    E = {}
    for data, s, t in edges:
        E[s + t] = G.add_edge(data, V[s], V[t])
    return G, V, E


@pytest.fixture
def empty_graph():
    return Graph()


@pytest.fixture
def abcd():
    """A-B 1, B-C 2, A-C 5, C-D 1, plus an isolated vertex E."""
    return _build(
        ["A", "B", "C", "D", "E"],
        [(1, "A", "B"), (2, "B", "C"), (5, "A", "C"), (1, "C", "D")],
    )


@pytest.fixture
def star():
    """Center X with unit-weight leaves L1..L5, edges added in leaf order."""
    names = ["X"] + [f"L{i}" for i in range(1, 6)]
    return _build(names, [(1, "X", f"L{i}") for i in range(1, 6)])


@pytest.fixture
def build_graph():
    return _build


@pytest.fixture
def tmpdir_fixture():
    d = pathlib.Path(tempfile.mkdtemp())
    yield d
    shutil.rmtree(d, ignore_errors=True)
