"""
Constructors for common undirected graph families.

Every constructor takes a ``vertex_function`` mapping a vertex number to a
hashable payload; payloads must be distinct. Edge payloads come from the
graph's data factory.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional

from .core import Graph, Vertex
from .data import GraphDataFactory

VertexFunction = Callable[[int], Any]


def _require_function(vertex_function: Callable) -> None:
    if vertex_function is None:
        raise TypeError("vertex_function must not be None")


def _new_graph(data_factory: Optional[GraphDataFactory]) -> Graph:
    return Graph(directed=False, data_factory=data_factory)


def create_star(vertex: Vertex, data_factory: Optional[GraphDataFactory] = None) -> Graph:
    """
    Star formed by ``vertex`` and its neighbours.

    The result holds a clone of ``vertex`` joined to a clone of each vertex
    reached over one of its emanating edges. Self-loops are skipped and
    repeated neighbours appear once.

    Raises:
        TypeError: If ``vertex`` is None.
    """
    if vertex is None:
        raise TypeError("vertex must not be None")
    graph = _new_graph(data_factory)
    center = graph.add_vertex(vertex.clone())
    for neighbour in vertex.neighbours():
        if neighbour is vertex or graph.contains_vertex(neighbour.data):
            continue
        graph.add_edge(center, graph.add_vertex(neighbour.clone()))
    return graph


def create_star_of_order(
    order: int,
    vertex_function: VertexFunction,
    data_factory: Optional[GraphDataFactory] = None,
) -> Graph:
    """
    Star with ``order`` vertices: vertex 0 joined to vertices 1 .. order-1.

    Raises:
        ValueError: If ``order < 1``.
    """
    if order < 1:
        raise ValueError(f"order must be at least 1, got {order}")
    _require_function(vertex_function)
    graph = _new_graph(data_factory)
    center = graph.add_vertex(vertex_function(0))
    for i in range(1, order):
        graph.add_edge(center, graph.add_vertex(vertex_function(i)))
    return graph


def create_path(
    vertex_count: int,
    vertex_function: VertexFunction,
    data_factory: Optional[GraphDataFactory] = None,
) -> Graph:
    """
    Path graph P_n: vertices 0 .. n-1 joined in sequence.

    Raises:
        ValueError: If ``vertex_count < 2``.
    """
    if vertex_count < 2:
        raise ValueError(f"A path needs at least 2 vertices, got {vertex_count}")
    _require_function(vertex_function)
    graph = _new_graph(data_factory)
    previous = graph.add_vertex(vertex_function(0))
    for i in range(1, vertex_count):
        current = graph.add_vertex(vertex_function(i))
        graph.add_edge(previous, current)
        previous = current
    return graph


def create_complete(
    vertex_count: int,
    vertex_function: VertexFunction,
    data_factory: Optional[GraphDataFactory] = None,
) -> Graph:
    """
    Complete graph K_n.

    Raises:
        ValueError: If ``vertex_count < 1``.

    Example:
        >>> create_complete(4, str).edge_count
        6
    """
    if vertex_count < 1:
        raise ValueError(f"vertex_count must be at least 1, got {vertex_count}")
    _require_function(vertex_function)
    graph = _new_graph(data_factory)
    vertices = [graph.add_vertex(vertex_function(i)) for i in range(vertex_count)]
    for i, left in enumerate(vertices):
        for right in vertices[i + 1:]:
            graph.add_edge(left, right)
    return graph


def create_complete_bipartite(
    upper_count: int,
    lower_count: int,
    vertex_function: Callable[[int, bool], Any],
    data_factory: Optional[GraphDataFactory] = None,
) -> Graph:
    """
    Complete bipartite graph K_{m,n}.

    Args:
        upper_count: Number of vertices in the upper part (m).
        lower_count: Number of vertices in the lower part (n).
        vertex_function: Called as ``vertex_function(i, is_upper)``.

    Raises:
        ValueError: If either part would be empty.
    """
    if upper_count < 1 or lower_count < 1:
        raise ValueError(
            f"Both parts need at least one vertex, got {upper_count} and {lower_count}"
        )
    _require_function(vertex_function)
    graph = _new_graph(data_factory)
    upper = [graph.add_vertex(vertex_function(i, True)) for i in range(upper_count)]
    lower = [graph.add_vertex(vertex_function(i, False)) for i in range(lower_count)]
    for left in upper:
        for right in lower:
            graph.add_edge(left, right)
    return graph


def create_circle(
    vertex_count: int,
    vertex_function: VertexFunction,
    data_factory: Optional[GraphDataFactory] = None,
) -> Graph:
    """
    Cycle graph C_n.

    Raises:
        ValueError: If ``vertex_count < 3``.
    """
    if vertex_count < 3:
        raise ValueError(f"A circle needs at least 3 vertices, got {vertex_count}")
    _require_function(vertex_function)
    graph = _new_graph(data_factory)
    vertices = [graph.add_vertex(vertex_function(i)) for i in range(vertex_count)]
    for i, vertex in enumerate(vertices):
        graph.add_edge(vertex, vertices[(i + 1) % vertex_count])
    return graph


def create_banana(
    leaf_count: int,
    star_order: int,
    vertex_function: VertexFunction,
    data_factory: Optional[GraphDataFactory] = None,
) -> Graph:
    """
    Banana tree B(n, k).

    A root is joined to one leaf of each of ``leaf_count`` stars; every star
    has a center and ``star_order`` outer vertices, and the root attaches to
    the first outer vertex of each star. Vertices are numbered in creation
    order starting with the root at 0.

    Raises:
        ValueError: If ``leaf_count < 2`` or ``star_order < 2``.
    """
    if leaf_count < 2 or star_order < 2:
        raise ValueError(
            f"leaf_count and star_order must be at least 2, got {leaf_count} and {star_order}"
        )
    _require_function(vertex_function)
    graph = _new_graph(data_factory)
    numbers = iter(range(1 + leaf_count * (1 + star_order)))
    root = graph.add_vertex(vertex_function(next(numbers)))

    for _ in range(leaf_count):
        center = graph.add_vertex(vertex_function(next(numbers)))
        outer: List[Vertex] = []
        for _ in range(star_order):
            vertex = graph.add_vertex(vertex_function(next(numbers)))
            graph.add_edge(center, vertex)
            outer.append(vertex)
        graph.add_edge(root, outer[0])
    return graph
