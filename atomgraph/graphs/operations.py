"""
Structural graph operations.

``contract`` and ``cut`` modify the given graph in place; the other
operations build a new graph and leave their inputs untouched.
"""

from __future__ import annotations

import copy
from typing import Any, Callable, Dict, List, Tuple

from ..logging import get_logger
from .core import Edge, Graph, Vertex

logger = get_logger(__name__)


def _distinct(vertices: List[Vertex]) -> List[Vertex]:
    seen = set()
    result = []
    for vertex in vertices:
        if id(vertex) not in seen:
            seen.add(id(vertex))
            result.append(vertex)
    return result


def contract(edge: Edge, graph: Graph, discard_extra: bool = True) -> None:
    """
    Contract ``edge`` in an undirected graph.

    The source endpoint is merged into the target endpoint: every edge
    between the two is removed, the source vertex is removed, and each
    former neighbour of the source is joined to the target.

    Args:
        edge: Edge to contract.
        graph: Undirected graph owning ``edge``; modified in place.
        discard_extra: Skip a reconnection when the target is already
            joined to that neighbour. With False such edges are added as
            parallel edges, which requires ``graph.allows_multiple_edges``.

    Raises:
        TypeError: If ``edge`` or ``graph`` is None.
        ValueError: If the graph is directed or does not contain ``edge``.
    """
    if edge is None or graph is None:
        raise TypeError("edge and graph must not be None")
    if graph.directed:
        raise ValueError("Edge contraction is only supported on undirected graphs")
    if not graph.contains_edge(edge):
        raise ValueError(f"Edge {edge!r} is not part of the graph")

    merged = edge.source
    kept = edge.target

    reconnect: List[Tuple[Vertex, Any]] = []
    for other in merged.incident_edges:
        neighbour = other.partner(merged)
        if neighbour is merged or neighbour is kept:
            continue
        reconnect.append((neighbour, other.data))

    while graph.remove_edge(merged, kept):
        pass
    graph.remove_vertex(merged)

    for neighbour, data in reconnect:
        if discard_extra and graph.contains_edge(kept, neighbour):
            continue
        graph.add_edge(kept, neighbour, copy.copy(data))


def cut(vertex: Vertex, graph: Graph) -> None:
    """
    Remove ``vertex`` and join all of its former neighbours pairwise.

    Pairs that are already connected are left alone.

    Raises:
        TypeError: If ``vertex`` or ``graph`` is None.
        ValueError: If ``vertex`` is not part of the graph.
    """
    if vertex is None or graph is None:
        raise TypeError("vertex and graph must not be None")
    if not graph.contains_vertex(vertex):
        raise ValueError(f"Vertex {vertex.data!r} is not part of the graph")

    neighbours = _distinct([n for n in vertex.neighbours() if n is not vertex])
    graph.remove_vertex(vertex)

    for left in neighbours:
        for right in neighbours:
            if left is right:
                continue
            if not graph.contains_edge(left, right):
                graph.add_edge(left, right)


def edge_complement(graph: Graph) -> Graph:
    """
    Complement graph: same vertices, edges exactly between non-adjacent pairs.

    Adjacency ignores direction, so in a directed graph a pair joined in
    either direction stays unjoined in the complement.

    Raises:
        TypeError: If ``graph`` is None.
    """
    if graph is None:
        raise TypeError("graph must not be None")
    result = graph.clone_with_vertices()
    for left in graph.vertices:
        for right in graph.vertices:
            if left is right or left.has_incident_edge_with(right):
                continue
            if not result.contains_edge(left.data, right.data):
                result.add_edge(left.data, right.data)
    return result


def cartesian_product(
    left: Graph,
    right: Graph,
    vertex_function: Callable[[Vertex, Vertex], Any],
) -> Graph:
    """
    Cartesian product G x H.

    Vertices are the pairs ``(u, v)``; ``(u, v)`` is joined to ``(u, v')``
    when ``v -> v'`` in ``right`` and to ``(u', v)`` when ``u -> u'`` in
    ``left``.

    Args:
        left: First factor.
        right: Second factor, of the same directedness.
        vertex_function: Builds the payload of ``(u, v)``.

    Raises:
        TypeError: If an argument is None.
        ValueError: If the factors differ in directedness.

    Example:
        >>> square = cartesian_product(path2, path2, lambda u, v: (u.data, v.data))
        >>> square.vertex_count, square.edge_count
        (4, 4)
    """
    if left is None or right is None or vertex_function is None:
        raise TypeError("left, right and vertex_function must not be None")
    if left.directed != right.directed:
        raise ValueError("Both factors must have the same directedness")

    result = Graph(directed=left.directed, data_factory=left.data_factory)
    pairs: Dict[Tuple[int, int], Vertex] = {}
    for i, u in enumerate(left.vertices):
        for j, v in enumerate(right.vertices):
            pairs[(i, j)] = result.add_vertex(vertex_function(u, v))

    left_index = {id(u): i for i, u in enumerate(left.vertices)}
    right_index = {id(v): j for j, v in enumerate(right.vertices)}

    for i in range(left.vertex_count):
        for edge in right.edges:
            a, b = right_index[id(edge.source)], right_index[id(edge.target)]
            _add_once(result, pairs[(i, a)], pairs[(i, b)])
    for j in range(right.vertex_count):
        for edge in left.edges:
            a, b = left_index[id(edge.source)], left_index[id(edge.target)]
            _add_once(result, pairs[(a, j)], pairs[(b, j)])

    logger.debug(
        "cartesian product: %d vertices, %d edges", result.vertex_count, result.edge_count
    )
    return result


def _add_once(graph: Graph, source: Vertex, target: Vertex) -> None:
    if source is target and not graph.allows_self_loops:
        return
    if not graph.contains_edge(source, target):
        graph.add_edge(source, target)


def join(first: Graph, second: Graph) -> Graph:
    """
    Join G + H: disjoint union plus an edge from every vertex of ``first``
    to every vertex of ``second``.

    Edge payloads of both inputs are copied. Vertex payloads must be
    distinct across the two graphs.

    Raises:
        TypeError: If either graph is None.
        ValueError: If the graphs differ in directedness or share a payload.
    """
    if first is None or second is None:
        raise TypeError("first and second must not be None")
    if first.directed != second.directed:
        raise ValueError("Both graphs must have the same directedness")

    result = Graph(
        directed=first.directed,
        data_factory=first.data_factory,
        allows_self_loops=first.allows_self_loops or second.allows_self_loops,
        allows_multiple_edges=first.allows_multiple_edges or second.allows_multiple_edges,
    )
    sides: List[List[Vertex]] = []
    for graph in (first, second):
        clones = {id(v): result.add_vertex(v.clone()) for v in graph.vertices}
        for edge in graph.edges:
            result.add_edge(clones[id(edge.source)], clones[id(edge.target)], copy.copy(edge.data))
        sides.append(list(clones.values()))

    for a in sides[0]:
        for b in sides[1]:
            result.add_edge(a, b)
    return result
