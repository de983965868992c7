"""Pytest configuration and shared fixtures for atomgraph tests.

This module provides:
- Deterministic RNG fixtures for numpy and torch
- A graph builder and small reference graphs used across test modules
"""

import os
from typing import Callable, Dict, Iterable, Sequence, Tuple

import numpy as np
import pytest
import torch

from atomgraph.diagnostics import set_debug_enabled
from atomgraph.graphs import Graph, Vertex, WeightData

EdgeSpec = Tuple[str, str, float]


@pytest.fixture(scope="function")
def rng() -> np.random.Generator:
    """Provide a deterministic numpy RNG for tests.

    Uses seed from TEST_RNG_SEED environment variable (default: 0).

    Returns:
        A seeded numpy.random.Generator instance.
    """
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    return np.random.default_rng(seed)


@pytest.fixture(scope="function", autouse=True)
def set_random_seeds() -> None:
    """Auto-use fixture to set global random seeds for reproducibility."""
    seed = int(os.environ.get("TEST_RNG_SEED", "0"))
    np.random.seed(seed)
    torch.manual_seed(seed)


@pytest.fixture(scope="function", autouse=True)
def debug_off():
    """Run every test with debug mode off unless the test switches it on."""
    set_debug_enabled(False)
    yield
    set_debug_enabled(False)


def _build(
    edges: Iterable[EdgeSpec],
    directed: bool = True,
    vertices: Sequence[str] = (),
    **kwargs,
) -> Tuple[Graph, Dict[str, Vertex]]:
    G = Graph(directed=directed, **kwargs)
    by_name: Dict[str, Vertex] = {}

    def vertex(name: str) -> Vertex:
        if name not in by_name:
            by_name[name] = G.add_vertex(name)
        return by_name[name]

    for name in vertices:
        vertex(name)
    for u, v, w in edges:
        G.add_edge(vertex(u), vertex(v), WeightData(w))
    return G, by_name


@pytest.fixture
def make_graph() -> Callable[..., Tuple[Graph, Dict[str, Vertex]]]:
    """Builder: ``make_graph([(u, v, w), ...], directed=True, vertices=())``.

    Returns the graph and a name -> vertex mapping.
    """
    return _build


@pytest.fixture
def round_trip_graph() -> Tuple[Graph, Dict[str, Vertex]]:
    """Directed graph A->B(1), B->C(1), A->C(5), C->D(1), B->D(10) plus isolated E."""
    return _build(
        [("A", "B", 1.0), ("B", "C", 1.0), ("A", "C", 5.0), ("C", "D", 1.0), ("B", "D", 10.0)],
        directed=True,
        vertices=("A", "B", "C", "D", "E"),
    )


@pytest.fixture
def tarjan_graph() -> Tuple[Graph, Dict[str, Vertex]]:
    """Directed cycle X->Y->Z->X plus a separate edge P->Q."""
    return _build(
        [("X", "Y", 1.0), ("Y", "Z", 1.0), ("Z", "X", 1.0), ("P", "Q", 1.0)],
        directed=True,
    )


@pytest.fixture
def weighted_undirected_graph() -> Tuple[Graph, Dict[str, Vertex]]:
    """Connected undirected graph with distinct weights (unique MST of weight 11)."""
    return _build(
        [
            ("A", "B", 4.0),
            ("A", "C", 1.0),
            ("B", "C", 2.0),
            ("B", "D", 5.0),
            ("C", "D", 8.0),
            ("D", "E", 3.0),
            ("C", "E", 9.0),
        ],
        directed=False,
    )


@pytest.fixture
def random_weighted_graph(rng: np.random.Generator) -> Callable[..., Tuple[Graph, Dict[str, Vertex]]]:
    """Builder for random graphs: ``random_weighted_graph(n, p, directed)``.

    Weights are integers in [1, 9] so distance comparisons are exact.
    """

    def build(n: int = 7, p: float = 0.4, directed: bool = True):
        names = [f"v{i}" for i in range(n)]
        edges = []
        for i in range(n):
            start = 0 if directed else i + 1
            for j in range(start, n):
                if i == j:
                    continue
                if rng.random() < p:
                    edges.append((names[i], names[j], float(rng.integers(1, 10))))
        return _build(edges, directed=directed, vertices=names)

    return build
