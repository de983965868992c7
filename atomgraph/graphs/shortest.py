"""
Shortest path algorithms: Dijkstra's shortest-path tree.

Edge weights are assumed non-negative. This is not checked; negative
weights give results that are not shortest paths.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from __future__ import annotations

import heapq
from typing import Dict, List, Tuple

from ..diagnostics.debug_mode import is_debug_enabled
from ..logging import get_logger
from .core import Graph, Vertex
from .utils import VertexInfo, build_predecessor_graph, edge_weight, vertex_index_map

logger = get_logger(__name__)


def _dijkstra(graph: Graph, source: Vertex) -> Dict[Vertex, VertexInfo]:
    if graph is None:
        raise TypeError("graph must not be None")
    if source is None:
        raise TypeError("source must not be None")
    if not graph.contains_vertex(source):
        raise ValueError(f"Source vertex {source.data!r} is not part of the graph")

    order = vertex_index_map(graph)
    status: Dict[Vertex, VertexInfo] = {vertex: VertexInfo() for vertex in graph.vertices}
    status[source].distance = 0.0

    # (distance, insertion index, vertex): the index breaks ties deterministically
    heap: List[Tuple[float, int, Vertex]] = [(0.0, order[source], source)]
    settled = 0

    while heap:
        _, _, vertex = heapq.heappop(heap)
        info = status[vertex]
        if info.is_finalised:
            continue
        info.is_finalised = True
        settled += 1

        for edge in vertex.emanating_edges:
            partner = edge.partner(vertex)
            distance = info.distance + edge_weight(edge)
            partner_info = status[partner]
            if distance < partner_info.distance:
                partner_info.distance = distance
                partner_info.edge_followed = edge
                heapq.heappush(heap, (distance, order[partner], partner))

    logger.debug(
        "Dijkstra from %r settled %d of %d vertices",
        source.data,
        settled,
        graph.vertex_count,
    )
    return status


def find_shortest_paths(graph: Graph, source: Vertex) -> Graph:
    """
    Dijkstra's algorithm producing the shortest-path tree rooted at ``source``.

    Args:
        graph: Graph whose edge payloads expose a non-negative ``weight``.
        source: Root of the tree.

    Returns:
        A new graph of the same directedness holding a clone of every vertex
        reachable from ``source`` and, for each of them except the source,
        the predecessor edge used to reach it (payload copied). The source
        has no incoming edge.

    Raises:
        TypeError: If ``graph`` or ``source`` is None.
        ValueError: If ``source`` is not part of ``graph``.

    Complexity: O((V + E) log V) with a binary heap and lazy deletion.

    Example:
        >>> tree = find_shortest_paths(G, a)
        >>> tree.edge_count == tree.vertex_count - 1
        True
    """
    status = _dijkstra(graph, source)
    tree = build_predecessor_graph(graph, status, source)
    if is_debug_enabled():
        from ..diagnostics.core import assert_forest

        assert_forest(tree)
    return tree


def shortest_distances(graph: Graph, source: Vertex) -> Dict[Vertex, float]:
    """
    Shortest distance from ``source`` to every vertex of ``graph``.

    Unreachable vertices map to ``math.inf``.

    Raises:
        TypeError: If ``graph`` or ``source`` is None.
        ValueError: If ``source`` is not part of ``graph``.
    """
    status = _dijkstra(graph, source)
    return {vertex: info.distance for vertex, info in status.items()}
