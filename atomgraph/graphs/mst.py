"""
Minimum spanning tree algorithms: Prim and Kruskal.

Prim grows one tree from a start vertex with a priority queue. Kruskal
merges trees of a parent-pointer forest, taking edges by ascending weight.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 23.1 (MST properties), 23.2 (Kruskal and Prim).
"""

from __future__ import annotations

import copy
import heapq
from typing import Dict, List, Optional, Tuple

from ..diagnostics.debug_mode import is_debug_enabled
from ..logging import get_logger
from .core import Edge, Graph, Vertex
from .utils import VertexInfo, build_predecessor_graph, edge_weight, vertex_index_map

logger = get_logger(__name__)


class ParentForest:
    """
    Disjoint trees of vertices linked by parent pointers.

    ``find`` walks parent pointers up to the root; there is no path
    compression or union by rank, so a find costs O(tree height).
    """

    def __init__(self, vertices: List[Vertex]) -> None:
        self.parent: Dict[Vertex, Optional[Vertex]] = {vertex: None for vertex in vertices}

    def find(self, vertex: Vertex) -> Vertex:
        """Return the root of the tree containing ``vertex``."""
        root = vertex
        while self.parent[root] is not None:
            root = self.parent[root]
        return root

    def union(self, left: Vertex, right: Vertex) -> bool:
        """
        Attach the tree of ``left`` below the root of ``right``.

        Returns:
            True if the trees were merged, False if both vertices already
            share a tree.
        """
        left_root = self.find(left)
        right_root = self.find(right)
        if left_root is right_root:
            return False
        self.parent[left_root] = right_root
        return True


def prim(graph: Graph, start: Vertex) -> Graph:
    """
    Prim's minimum spanning tree of the component containing ``start``.

    Follows incident edges regardless of direction and relaxes on the raw
    edge weight. Edges without a payload weigh 0.

    Args:
        graph: Graph whose edge payloads expose ``weight``.
        start: Vertex the tree grows from.

    Returns:
        A new graph of the same directedness holding clones of the vertices
        reachable from ``start`` and the selected tree edges, each oriented
        from the tree side to the newly attached vertex.

    Raises:
        TypeError: If ``graph`` or ``start`` is None.
        ValueError: If ``start`` is not part of ``graph``.

    Complexity: O((V + E) log V) with lazy deletion.

    Example:
        >>> tree = prim(G, a)
        >>> tree.vertex_count - 1 == tree.edge_count
        True
    """
    if graph is None:
        raise TypeError("graph must not be None")
    if start is None:
        raise TypeError("start must not be None")
    if not graph.contains_vertex(start):
        raise ValueError(f"Start vertex {start.data!r} is not part of the graph")

    order = vertex_index_map(graph)
    status: Dict[Vertex, VertexInfo] = {vertex: VertexInfo() for vertex in graph.vertices}
    status[start].distance = 0.0
    heap: List[Tuple[float, int, Vertex]] = [(0.0, order[start], start)]

    while heap:
        _, _, vertex = heapq.heappop(heap)
        info = status[vertex]
        if info.is_finalised:
            continue
        info.is_finalised = True

        for edge in vertex.incident_edges:
            partner = edge.partner(vertex)
            partner_info = status[partner]
            if partner_info.is_finalised:
                continue
            weight = edge_weight(edge)
            if weight < partner_info.distance:
                partner_info.distance = weight
                partner_info.edge_followed = edge
                heapq.heappush(heap, (weight, order[partner], partner))

    tree = build_predecessor_graph(graph, status, start)
    logger.debug(
        "Prim from %r spans %d vertices with %d edges",
        start.data,
        tree.vertex_count,
        tree.edge_count,
    )
    if is_debug_enabled():
        from ..diagnostics.core import assert_forest

        assert_forest(tree)
    return tree


def kruskal(graph: Graph) -> Graph:
    """
    Kruskal's minimum spanning forest.

    Edges are taken from a min-heap by ascending weight (ties in edge
    insertion order) and rejected when both endpoints already share a tree.
    Stops after ``V - 1`` edges or when the heap is exhausted.

    Args:
        graph: Graph whose edge payloads expose ``weight``.

    Returns:
        A new undirected graph (whatever the input's directedness) holding
        clones of all vertices and the selected edges with copied payloads.

    Raises:
        TypeError: If ``graph`` is None.

    Complexity: O(E log E + E * h), h being the height of the forest trees.

    Example:
        >>> forest = kruskal(G)
        >>> forest.directed
        False
    """
    if graph is None:
        raise TypeError("graph must not be None")

    result = graph.empty_like(directed=False)
    clones: Dict[Vertex, Vertex] = {}
    for vertex in graph.vertices:
        clones[vertex] = result.add_vertex(vertex.clone())

    heap: List[Tuple[float, int, Edge]] = [
        (edge_weight(edge), sequence, edge) for sequence, edge in enumerate(graph.edges)
    ]
    heapq.heapify(heap)

    forest = ParentForest(graph.vertices)
    remaining = graph.vertex_count - 1
    while heap and remaining > 0:
        _, _, edge = heapq.heappop(heap)
        if not forest.union(edge.source, edge.target):
            continue
        result.add_edge(clones[edge.source], clones[edge.target], copy.copy(edge.data))
        remaining -= 1

    logger.debug(
        "Kruskal selected %d edges for %d vertices", result.edge_count, result.vertex_count
    )
    if is_debug_enabled():
        from ..diagnostics.core import assert_forest

        assert_forest(result)
    return result
