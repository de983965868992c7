"""
Matrix representations of graphs.

All matrices are numpy arrays indexed by vertex insertion order (and edge
insertion order for the incidence matrix). ``as_tensor`` moves any of them
onto a torch device.

References:
    - Godsil, C., Royle, G. "Algebraic Graph Theory" (2001), Chapters 8, 13.
    - Seidel, J. J. (1968). "Strongly regular graphs with (-1, 1, 0)
      adjacency matrix having eigenvalue 3".
"""

from __future__ import annotations

from typing import Optional

import numpy as np
import torch

from ..core.device import Device, default_device
from .core import Graph


def _require_graph(graph: Graph) -> None:
    if graph is None:
        raise TypeError("graph must not be None")


def adjacency_matrix(graph: Graph) -> np.ndarray:
    """
    0/1 adjacency matrix: ``A[i, j] = 1`` iff vertex i has an emanating edge to j.

    Symmetric for undirected graphs. Parallel edges count once.

    Example:
        >>> G = Graph(directed=True)
        >>> a, b = G.add_vertex("A"), G.add_vertex("B")
        >>> _ = G.add_edge(a, b)
        >>> adjacency_matrix(G).tolist()
        [[0.0, 1.0], [0.0, 0.0]]
    """
    _require_graph(graph)
    vertices = graph.vertices
    n = len(vertices)
    A = np.zeros((n, n))
    for i, vertex_i in enumerate(vertices):
        for j, vertex_j in enumerate(vertices):
            if vertex_i.has_emanating_edge_to(vertex_j):
                A[i, j] = 1.0
    return A


def weighted_adjacency_matrix(graph: Graph) -> np.ndarray:
    """
    Adjacency matrix holding edge weights instead of ones.

    Uses the first emanating edge between two vertices; edges without a
    payload contribute 0.
    """
    _require_graph(graph)
    vertices = graph.vertices
    n = len(vertices)
    W = np.zeros((n, n))
    for i, vertex_i in enumerate(vertices):
        for j, vertex_j in enumerate(vertices):
            edge = vertex_i.get_emanating_edge_to(vertex_j)
            if edge is not None and edge.data is not None:
                W[i, j] = edge.data.weight
    return W


def seidel_adjacency_matrix(graph: Graph) -> np.ndarray:
    """
    Seidel matrix: 0 on the diagonal, -1 for adjacent and 1 for non-adjacent pairs.

    Raises:
        RuntimeError: If the graph is not simple.
    """
    _require_graph(graph)
    if not graph.is_simple:
        raise RuntimeError("The Seidel adjacency matrix is only defined for simple graphs")
    vertices = graph.vertices
    n = len(vertices)
    S = np.zeros((n, n))
    for i, vertex_i in enumerate(vertices):
        for j, vertex_j in enumerate(vertices):
            if i == j:
                continue
            S[i, j] = -1.0 if vertex_i.has_incident_edge_with(vertex_j) else 1.0
    return S


def incidence_matrix(graph: Graph) -> np.ndarray:
    """
    Vertex-by-edge incidence matrix.

    Directed graphs use -1 at the source row and +1 at the target row;
    undirected graphs use 1 at both endpoints. A self-loop is marked 2 at
    its vertex in either case.
    """
    _require_graph(graph)
    vertices = graph.vertices
    edges = graph.edges
    M = np.zeros((len(vertices), len(edges)))
    for i, vertex in enumerate(vertices):
        for j, edge in enumerate(edges):
            if edge.is_self_loop:
                if edge.source is vertex:
                    M[i, j] = 2.0
            elif graph.directed:
                if edge.source is vertex:
                    M[i, j] = -1.0
                elif edge.target is vertex:
                    M[i, j] = 1.0
            elif edge.source is vertex or edge.target is vertex:
                M[i, j] = 1.0
    return M


def laplacian_matrix(graph: Graph) -> np.ndarray:
    """
    Combinatorial Laplacian L = D - A of the underlying undirected graph.

    The diagonal holds vertex degrees; off-diagonal entries are -1 where
    two vertices share an edge in either direction.
    """
    _require_graph(graph)
    vertices = graph.vertices
    n = len(vertices)
    L = np.zeros((n, n))
    for i, vertex_i in enumerate(vertices):
        L[i, i] = vertex_i.degree
        for j, vertex_j in enumerate(vertices):
            if i != j and vertex_i.has_incident_edge_with(vertex_j):
                L[i, j] = -1.0
    return L


def as_tensor(matrix: np.ndarray, device: Optional[Device] = None) -> torch.Tensor:
    """
    Convert a graph matrix to a torch tensor.

    Args:
        matrix: Any of the matrices produced by this module.
        device: Target device and dtype; defaults to the CPU device.

    Returns:
        Tensor with the device's dtype on the device's torch device.
    """
    if matrix is None:
        raise TypeError("matrix must not be None")
    if device is None:
        device = default_device()
    return torch.as_tensor(np.asarray(matrix), dtype=device.dtype, device=device.as_torch_device())
