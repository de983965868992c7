"""Structural checks for graphs, paths and graph matrices."""

from __future__ import annotations

from typing import Dict, Iterable, Optional, Sequence, Union

import numpy as np

from ..graphs.core import Edge, Graph, Vertex


def is_forest(graph: Graph) -> bool:
    """
    Check whether a graph contains no cycle when edge directions are ignored.

    Parameters
    ----------
    graph:
        Graph to inspect.

    Returns
    -------
    bool
        True if every connected component is a tree.
    """
    parent: Dict[int, int] = {id(v): id(v) for v in graph.vertices}

    def find(key: int) -> int:
        while parent[key] != key:
            parent[key] = parent[parent[key]]
            key = parent[key]
        return key

    for edge in graph.edges:
        left, right = find(id(edge.source)), find(id(edge.target))
        if left == right:
            return False
        parent[left] = right
    return True


def assert_forest(graph: Graph) -> None:
    """
    Assert that a graph is a forest.

    Raises
    ------
    ValueError
        If the graph contains a cycle (self-loops and parallel edges
        included).
    """
    if not is_forest(graph):
        raise ValueError(
            f"Graph is not a forest: {graph.edge_count} edges on "
            f"{graph.vertex_count} vertices contain a cycle."
        )


def path_is_chained(
    path: Sequence[Edge],
    source: Vertex,
    target: Optional[Vertex] = None,
) -> bool:
    """
    Check that consecutive edges of a path share endpoints.

    Parameters
    ----------
    path:
        Edges in walking order.
    source:
        Vertex the walk starts at.
    target:
        Vertex the walk must end at; not checked when None.

    Returns
    -------
    bool
        True if each edge continues from where the previous one ended
        (following edge direction in directed graphs) and the walk ends at
        ``target``.
    """
    current = source
    for edge in path:
        if edge.directed:
            if edge.source is not current:
                return False
            current = edge.target
        elif edge.source is current:
            current = edge.target
        elif edge.target is current:
            current = edge.source
        else:
            return False
    return target is None or current is target


def assert_path_chained(
    path: Sequence[Edge],
    source: Vertex,
    target: Optional[Vertex] = None,
) -> None:
    """
    Assert that a path chains from ``source`` to ``target``.

    Raises
    ------
    ValueError
        If the edges do not form a walk from ``source`` to ``target``.
    """
    if not path_is_chained(path, source, target):
        target_label = target.data if target is not None else None
        raise ValueError(
            f"Path of {len(path)} edges does not chain from {source.data!r} "
            f"to {target_label!r}."
        )


def total_weight(graph_or_edges: Union[Graph, Iterable[Edge]]) -> float:
    """
    Sum of edge weights of a graph or an edge sequence.

    Edges without a payload contribute 0.
    """
    edges = graph_or_edges.edges if isinstance(graph_or_edges, Graph) else graph_or_edges
    return float(sum(edge.data.weight for edge in edges if edge.data is not None))


def is_symmetric(matrix: np.ndarray, atol: float = 1e-9) -> bool:
    """
    Check whether a square matrix equals its transpose within ``atol``.

    Parameters
    ----------
    matrix:
        Array of shape (n, n).
    atol:
        Absolute tolerance.
    """
    matrix = np.asarray(matrix)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        return False
    return bool(np.allclose(matrix, matrix.T, atol=atol, rtol=0.0))
