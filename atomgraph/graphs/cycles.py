"""
Cycle analysis: brute-force cycle enumeration and Tarjan's strongly
connected components.

The brute-force functions share one walk. From a start vertex the walk
extends along emanating edges without revisiting a vertex already on the
walk; whenever the current vertex has the start vertex as a neighbour, a
cycle is recorded. Closing the walk right after leaving the start vertex is
never recorded, so an edge walked out and straight back (``A -> B -> A``)
does not count as a cycle. Self-loops at the start vertex are reported as
cycles of length 1.

Every cycle is found once per vertex on it and once per orientation in
undirected graphs; an undirected triangle therefore yields six cycles.
Enumeration is exponential in the worst case and meant for small graphs.

References:
    - Tarjan, R. E. (1972). "Depth-first search and linear graph algorithms".
      SIAM Journal on Computing 1(2).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Set, Tuple, Union

from ..logging import get_logger
from .core import Edge, Graph, Vertex

logger = get_logger(__name__)

Cycle = List[Vertex]


@dataclass(frozen=True)
class CycleStatus:
    """
    Summary of all cycles in a graph.

    Attributes:
        minimum: Length of the shortest cycle, -1 if there is none.
        maximum: Length of the longest cycle, -1 if there is none.
        count: Number of cycles, as ``find_cycles`` would report them.
    """

    minimum: int
    maximum: int
    count: int

    @property
    def has_cycles(self) -> bool:
        return self.count > 0


def _walk_cycles(start: Vertex) -> Iterator[List[Vertex]]:
    """
    Yield every cycle through ``start`` as the live walk list.

    The yielded list ends with ``start`` appended and is mutated after the
    consumer resumes the generator; copy it to keep it.
    """
    walk: List[Vertex] = [start]
    on_walk: Set[Vertex] = {start}
    # Frame: (current vertex, previous vertex, neighbour list, next index)
    stack: List[List] = [[start, None, start.neighbours(), 0]]

    while stack:
        frame = stack[-1]
        current, previous, neighbours, position = frame
        if position == len(neighbours):
            stack.pop()
            if len(stack) > 0:
                on_walk.discard(walk.pop())
            continue
        frame[3] = position + 1
        neighbour = neighbours[position]

        if neighbour is start and previous is not start:
            walk.append(start)
            yield walk
            walk.pop()
            continue
        if neighbour in on_walk:
            continue

        walk.append(neighbour)
        on_walk.add(neighbour)
        stack.append([neighbour, current, neighbour.neighbours(), 0])


def _start_vertices(graph_or_vertex: Union[Graph, Vertex]) -> List[Vertex]:
    if graph_or_vertex is None:
        raise TypeError("graph must not be None")
    if isinstance(graph_or_vertex, Vertex):
        return [graph_or_vertex]
    return graph_or_vertex.vertices


def find_cycles(graph_or_vertex: Union[Graph, Vertex]) -> List[Cycle]:
    """
    Enumerate every elementary cycle.

    Args:
        graph_or_vertex: A graph (cycles from every vertex) or a single
            vertex (cycles through that vertex only).

    Returns:
        List of cycles; each cycle is a vertex list that starts and ends
        with its start vertex, so its length is ``len(cycle) - 1``.

    Raises:
        TypeError: If the argument is None.

    Example:
        >>> G = Graph(directed=True)
        >>> a, b, c = (G.add_vertex(name) for name in "ABC")
        >>> _ = G.add_edge(a, b), G.add_edge(b, c), G.add_edge(c, a)
        >>> [v.data for v in find_cycles(G)[0]]
        ['A', 'B', 'C', 'A']
    """
    cycles: List[Cycle] = []
    for start in _start_vertices(graph_or_vertex):
        for walk in _walk_cycles(start):
            cycles.append(list(walk))
    logger.debug("find_cycles found %d cycles", len(cycles))
    return cycles


def find_cycle_status(graph: Graph) -> CycleStatus:
    """
    Count cycles and record the shortest and longest cycle length.

    Performs the same walk as ``find_cycles`` without materialising cycles.

    Raises:
        TypeError: If ``graph`` is None.
    """
    minimum: Optional[int] = None
    maximum: Optional[int] = None
    count = 0
    for start in _start_vertices(graph):
        for walk in _walk_cycles(start):
            length = len(walk) - 1
            count += 1
            if minimum is None or length < minimum:
                minimum = length
            if maximum is None or length > maximum:
                maximum = length

    status = CycleStatus(
        minimum=-1 if minimum is None else minimum,
        maximum=-1 if maximum is None else maximum,
        count=count,
    )
    logger.debug("cycle status: %s", status)
    return status


def find_minimum_cycle_length(graph: Graph) -> int:
    """
    Length of the shortest cycle, or -1 if the graph has no cycle.

    Stops as soon as a cycle of the smallest possible length is found: 1
    when the graph has self-loops, 3 otherwise.

    Raises:
        TypeError: If ``graph`` is None.
    """
    if graph is None:
        raise TypeError("graph must not be None")
    floor = 1 if graph.contains_self_loops else 3
    minimum: Optional[int] = None
    for start in graph.vertices:
        for walk in _walk_cycles(start):
            length = len(walk) - 1
            if minimum is None or length < minimum:
                minimum = length
            if minimum <= floor:
                return minimum
    return -1 if minimum is None else minimum


def find_strongly_connected(
    graph: Graph, exclude_single_items: bool = False
) -> List[List[Vertex]]:
    """
    Strongly connected components using Tarjan's algorithm.

    Iterative form: an explicit work stack replaces the recursion, so deep
    graphs do not hit the interpreter's recursion limit. Undirected edges
    are followed in both directions, which makes each connected component
    one strongly connected component.

    Args:
        graph: Graph to decompose.
        exclude_single_items: Drop components consisting of one vertex.

    Returns:
        Components in the order Tarjan's algorithm completes them; each
        component lists its vertices in stack pop order.

    Raises:
        TypeError: If ``graph`` is None.

    Complexity: O(V + E).
    """
    if graph is None:
        raise TypeError("graph must not be None")

    index_of: Dict[Vertex, int] = {}
    low_link: Dict[Vertex, int] = {}
    on_stack: Set[Vertex] = set()
    stack: List[Vertex] = []
    components: List[List[Vertex]] = []
    counter = 0

    for root in graph.vertices:
        if root in index_of:
            continue

        index_of[root] = low_link[root] = counter
        counter += 1
        stack.append(root)
        on_stack.add(root)
        work: List[Tuple[Vertex, Iterator[Edge]]] = [(root, iter(root.emanating_edges))]

        while work:
            vertex, edges = work[-1]
            descended = False
            for edge in edges:
                successor = edge.partner(vertex)
                if successor not in index_of:
                    index_of[successor] = low_link[successor] = counter
                    counter += 1
                    stack.append(successor)
                    on_stack.add(successor)
                    work.append((successor, iter(successor.emanating_edges)))
                    descended = True
                    break
                if successor in on_stack:
                    low_link[vertex] = min(low_link[vertex], index_of[successor])
            if descended:
                continue

            work.pop()
            if work:
                parent = work[-1][0]
                low_link[parent] = min(low_link[parent], low_link[vertex])

            if low_link[vertex] == index_of[vertex]:
                component: List[Vertex] = []
                while True:
                    member = stack.pop()
                    on_stack.discard(member)
                    component.append(member)
                    if member is vertex:
                        break
                if not exclude_single_items or len(component) > 1:
                    components.append(component)

    logger.debug("Tarjan found %d strongly connected components", len(components))
    return components
