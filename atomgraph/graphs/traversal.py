"""
Graph traversal algorithms: DFS, BFS and Kahn's topological order.

Traversals follow emanating edges in insertion order, so results are
deterministic. Every traversal keeps its own visited set per call and
stops as soon as the visitor reports ``has_completed``.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS), 22.3 (DFS) and 22.4 (topological sort).
    - Kahn, A. B. (1962). "Topological sorting of large networks".
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Dict, Iterator, List, Set, Tuple

from ..logging import get_logger
from .core import Edge, Graph, Vertex
from .visitors import OrderedVisitor, Visitor

logger = get_logger(__name__)


def depth_first(visitor: OrderedVisitor, start: Vertex) -> None:
    """
    Depth-first traversal from ``start``.

    Each vertex is announced with ``visit_pre_order`` when first reached and
    with ``visit_post_order`` once all of its unvisited neighbours have been
    explored. Uses an explicit work stack, so deep graphs do not hit the
    interpreter's recursion limit.

    Args:
        visitor: Receives pre-order and post-order events.
        start: Vertex the traversal starts at.

    Raises:
        TypeError: If ``visitor`` or ``start`` is None.

    Complexity: O(V + E) for the reachable part of the graph.

    Example:
        >>> tracker = TrackingVisitor()
        >>> depth_first(PreOrderVisitor(tracker), a)
        >>> [v.data for v in tracker.tracking_list]
        ['A', 'B', 'C']
    """
    if visitor is None:
        raise TypeError("visitor must not be None")
    if start is None:
        raise TypeError("start must not be None")
    if visitor.has_completed:
        return

    visited: Set[Vertex] = {start}
    visitor.visit_pre_order(start)
    stack: List[Tuple[Vertex, Iterator[Edge]]] = [(start, iter(start.emanating_edges))]

    while stack:
        if visitor.has_completed:
            return
        vertex, edges = stack[-1]
        for edge in edges:
            neighbour = edge.partner(vertex)
            if neighbour not in visited:
                visited.add(neighbour)
                visitor.visit_pre_order(neighbour)
                stack.append((neighbour, iter(neighbour.emanating_edges)))
                break
        else:
            stack.pop()
            visitor.visit_post_order(vertex)


def breadth_first(start: Vertex, visitor: Visitor) -> None:
    """
    Breadth-first (level order) traversal from ``start``.

    Args:
        start: Vertex the traversal starts at.
        visitor: Receives every reached vertex once.

    Raises:
        TypeError: If ``start`` or ``visitor`` is None.

    Complexity: O(V + E) for the reachable part of the graph.
    """
    if start is None:
        raise TypeError("start must not be None")
    if visitor is None:
        raise TypeError("visitor must not be None")

    visited: Set[Vertex] = {start}
    queue: Deque[Vertex] = deque([start])

    while queue and not visitor.has_completed:
        vertex = queue.popleft()
        visitor.visit(vertex)
        for edge in vertex.emanating_edges:
            neighbour = edge.partner(vertex)
            if neighbour not in visited:
                visited.add(neighbour)
                queue.append(neighbour)


def topological(graph: Graph, visitor: Visitor) -> int:
    """
    Visit the vertices of a directed graph in topological order (Kahn).

    A return value smaller than ``graph.vertex_count`` means the graph
    contains a cycle; the vertices visited then form a topological order of
    the acyclic part only. This is not treated as an error.

    Args:
        graph: Directed graph to order.
        visitor: Receives vertices in topological order.

    Returns:
        Number of vertices visited.

    Raises:
        TypeError: If ``graph`` or ``visitor`` is None.
        RuntimeError: If the graph is undirected.

    Complexity: O(V + E).
    """
    if graph is None:
        raise TypeError("graph must not be None")
    if visitor is None:
        raise TypeError("visitor must not be None")
    if not graph.directed:
        raise RuntimeError("Topological order is only defined for directed graphs")

    in_degree: Dict[Vertex, int] = {}
    queue: Deque[Vertex] = deque()
    for vertex in graph.vertices:
        count = vertex.incoming_edge_count
        in_degree[vertex] = count
        if count == 0:
            queue.append(vertex)

    visited = 0
    while queue and not visitor.has_completed:
        vertex = queue.popleft()
        visitor.visit(vertex)
        visited += 1
        for edge in vertex.emanating_edges:
            target = edge.target
            in_degree[target] -= 1
            if in_degree[target] == 0:
                queue.append(target)

    logger.debug(
        "topological order visited %d of %d vertices", visited, graph.vertex_count
    )
    return visited
