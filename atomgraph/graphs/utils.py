"""
Utility functions for graph algorithms.

Provides helpers for vertex indexing, edge weights, path inspection and
building predecessor trees from per-vertex search state.
"""

from __future__ import annotations

import copy
import math
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence

from .core import Edge, Graph, Vertex


@dataclass
class VertexInfo:
    """
    Per-vertex bookkeeping for Dijkstra and Prim.

    Created fresh for every vertex on every call and discarded once the
    result graph has been built.

    Attributes:
        distance: Tentative distance (Dijkstra) or connecting edge weight
            (Prim); +inf until relaxed.
        edge_followed: Predecessor edge, None until relaxed.
        is_finalised: Whether the vertex has been settled.
    """

    distance: float = math.inf
    edge_followed: Optional[Edge] = None
    is_finalised: bool = False


def vertex_index_map(graph: Graph) -> Dict[Vertex, int]:
    """
    Map each vertex to its insertion index 0..n-1.

    Example:
        >>> G = Graph()
        >>> a, b = G.add_vertex("A"), G.add_vertex("B")
        >>> vertex_index_map(G)[b]
        1
    """
    return {vertex: index for index, vertex in enumerate(graph.vertices)}


def edge_weight(edge: Edge) -> float:
    """Weight of an edge; edges without a payload weigh 0."""
    return edge.data.weight if edge.data is not None else 0.0


def path_weight(path: Sequence[Edge]) -> float:
    """Sum of the edge weights along ``path``."""
    return sum(edge_weight(edge) for edge in path)


def path_vertices(path: Sequence[Edge], source: Vertex) -> List[Vertex]:
    """
    Vertices visited by walking ``path`` from ``source``.

    Args:
        path: Edges in walking order.
        source: Vertex the walk starts at.

    Returns:
        ``[source, v1, ..., vn]``; just ``[source]`` for an empty path.

    Raises:
        ValueError: If an edge does not continue from the previous vertex.
    """
    vertices = [source]
    current = source
    for edge in path:
        current = edge.partner(current)
        vertices.append(current)
    return vertices


def build_predecessor_graph(
    graph: Graph,
    status: Dict[Vertex, VertexInfo],
    root: Vertex,
    directed: Optional[bool] = None,
) -> Graph:
    """
    Build a tree graph from per-vertex predecessor edges.

    The result holds a clone of every vertex that was reached (finite
    distance) plus, for each reached vertex other than ``root``, one edge
    from its predecessor to it carrying a copy of the followed edge's
    payload. Vertex order follows the input graph.

    Args:
        graph: Graph the search ran on.
        status: VertexInfo of every vertex of ``graph``.
        root: Vertex the search started at.
        directed: Directedness of the result; defaults to the input's.
    """
    result = graph.empty_like(directed=directed)
    clones: Dict[Vertex, Vertex] = {}
    for vertex in graph.vertices:
        if math.isinf(status[vertex].distance):
            continue
        clones[vertex] = result.add_vertex(vertex.clone())

    for vertex, clone in clones.items():
        followed = status[vertex].edge_followed
        if followed is None or vertex is root:
            continue
        predecessor = followed.partner(vertex)
        result.add_edge(clones[predecessor], clone, copy.copy(followed.data))
    return result
