"""
Core graph data structures.

Provides the Graph container and its Vertex and Edge records. A Graph owns
its vertices and, through them, their edges; vertex and edge order is
insertion order so every algorithm iterates deterministically.

Vertices compare and hash by payload. A graph refuses two vertices with
equal payloads, so within one graph payload equality and vertex identity
coincide. Clones placed in another graph compare equal to the vertex they
were cloned from, which lets results be looked up with original vertices.

Complexity:
    - add_vertex: O(1)
    - add_edge: O(deg(v)) for the duplicate-edge check
    - get_vertex / contains_vertex: O(1)
    - remove_vertex: O(E) in the worst case
"""

from __future__ import annotations

import copy
import threading
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Hashable,
    Iterator,
    List,
    Optional,
    TypeVar,
    Union,
)

from .data import WEIGHT_DATA_FACTORY, GraphDataFactory

V = TypeVar("V", bound=Hashable)
E = TypeVar("E")


class Edge(Generic[V, E]):
    """
    A connection between two vertices.

    The endpoints are fixed at construction. ``source``/``target`` order is
    kept even for undirected edges, purely for representation; undirected
    algorithms treat both directions alike.

    Attributes:
        source: The vertex the edge starts at.
        target: The vertex the edge ends at.
        directed: Whether the edge belongs to a directed graph.
        data: Mutable payload (weight, voltage, ...).
    """

    __slots__ = ("_source", "_target", "_directed", "data")

    def __init__(
        self, source: "Vertex[V, E]", target: "Vertex[V, E]", directed: bool, data: E = None
    ) -> None:
        if source is None or target is None:
            raise TypeError("Edge endpoints must not be None")
        self._source = source
        self._target = target
        self._directed = directed
        self.data = data

    @property
    def source(self) -> "Vertex[V, E]":
        return self._source

    @property
    def target(self) -> "Vertex[V, E]":
        return self._target

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def is_self_loop(self) -> bool:
        return self._source is self._target

    @property
    def weight(self) -> float:
        """Weight of the payload; the payload must expose ``weight``."""
        return self.data.weight

    def partner(self, vertex: "Vertex[V, E]") -> "Vertex[V, E]":
        """
        Return the endpoint that is not ``vertex``.

        Raises:
            ValueError: If ``vertex`` is not an endpoint of this edge.
        """
        if vertex is self._source:
            return self._target
        if vertex is self._target:
            return self._source
        raise ValueError(f"Vertex {vertex.data!r} is not part of edge {self!r}")

    def __repr__(self) -> str:
        arrow = "->" if self._directed else "--"
        return f"Edge({self._source.data!r} {arrow} {self._target.data!r}, data={self.data!r})"


class Vertex(Generic[V, E]):
    """
    A vertex holding a payload and the edges incident to it.

    ``emanating_edges`` are the edges a traversal may follow from this
    vertex: outgoing edges in a directed graph, every incident edge in an
    undirected one.
    """

    __slots__ = ("data", "_incident", "_emanating", "_graph", "__weakref__")

    def __init__(self, data: V = None) -> None:
        self.data = data
        self._incident: List[Edge[V, E]] = []
        self._emanating: List[Edge[V, E]] = []
        # Owning graph, None while detached
        self._graph: Optional["Graph[V, E]"] = None

    # Value semantics through the payload.
    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Vertex):
            return NotImplemented
        return self.data == other.data

    def __hash__(self) -> int:
        return hash(self.data)

    def __repr__(self) -> str:
        return f"Vertex({self.data!r})"

    @property
    def incident_edges(self) -> List[Edge[V, E]]:
        return list(self._incident)

    @property
    def emanating_edges(self) -> List[Edge[V, E]]:
        return list(self._emanating)

    @property
    def incident_edge_count(self) -> int:
        return len(self._incident)

    @property
    def outgoing_edge_count(self) -> int:
        return len(self._emanating)

    @property
    def incoming_edge_count(self) -> int:
        """Number of directed edges ending at this vertex (self-loops included)."""
        return sum(1 for edge in self._incident if edge.directed and edge.target is self)

    @property
    def degree(self) -> int:
        """Number of edge endpoints at this vertex; a self-loop counts twice."""
        return sum(2 if edge.is_self_loop else 1 for edge in self._incident)

    def emanating_edge_at(self, index: int) -> Edge[V, E]:
        return self._emanating[index]

    def incident_edge_at(self, index: int) -> Edge[V, E]:
        return self._incident[index]

    def neighbours(self) -> List["Vertex[V, E]"]:
        """Vertices reachable over one emanating edge, in edge order."""
        return [edge.partner(self) for edge in self._emanating]

    def get_emanating_edge_to(self, vertex: "Vertex[V, E]") -> Optional[Edge[V, E]]:
        """Return the first emanating edge leading to ``vertex``, or None."""
        if vertex is None:
            raise TypeError("vertex must not be None")
        for edge in self._emanating:
            if edge.partner(self) is vertex:
                return edge
        return None

    def get_incident_edge_with(self, vertex: "Vertex[V, E]") -> Optional[Edge[V, E]]:
        """Return the first incident edge shared with ``vertex``, in either direction."""
        if vertex is None:
            raise TypeError("vertex must not be None")
        for edge in self._incident:
            if edge.partner(self) is vertex:
                return edge
        return None

    def has_emanating_edge_to(self, vertex: "Vertex[V, E]") -> bool:
        return self.get_emanating_edge_to(vertex) is not None

    def has_incident_edge_with(self, vertex: "Vertex[V, E]") -> bool:
        return self.get_incident_edge_with(vertex) is not None

    def clone(self) -> "Vertex[V, E]":
        """Return a detached vertex carrying a copy of the payload and no edges."""
        return Vertex(copy.copy(self.data))

    def _attach(self, edge: Edge[V, E]) -> None:
        self._incident.append(edge)
        if not edge.directed or edge.source is self:
            self._emanating.append(edge)

    def _detach(self, edge: Edge[V, E]) -> None:
        self._incident.remove(edge)
        if edge in self._emanating:
            self._emanating.remove(edge)


VertexLike = Union[Vertex, Hashable]


class Graph(Generic[V, E]):
    """
    Directed or undirected graph of payload-carrying vertices and edges.

    Args:
        directed: Whether edges have a direction (default True).
        data_factory: Supplies payloads for ``add_vertex()`` / ``add_edge()``
            calls that omit them. Defaults to a factory producing
            ``WeightData(1.0)`` edge payloads.
        allows_self_loops: Whether an edge may start and end at the same vertex.
        allows_multiple_edges: Whether parallel edges are accepted.

    Attributes:
        lock: Re-entrant lock scoped to this graph; held by A* searches.

    Example:
        >>> G = Graph(directed=True)
        >>> a, b = G.add_vertex("A"), G.add_vertex("B")
        >>> G.add_edge(a, b).weight
        1.0
    """

    def __init__(
        self,
        directed: bool = True,
        data_factory: Optional[GraphDataFactory] = None,
        allows_self_loops: bool = False,
        allows_multiple_edges: bool = False,
    ) -> None:
        self._directed = directed
        self.data_factory = data_factory if data_factory is not None else WEIGHT_DATA_FACTORY
        self.allows_self_loops = allows_self_loops
        self.allows_multiple_edges = allows_multiple_edges
        self.lock = threading.RLock()
        self._vertices: List[Vertex[V, E]] = []
        self._edges: List[Edge[V, E]] = []
        self._by_data: Dict[Any, Vertex[V, E]] = {}

    # ------------------------------------------------------------------
    # Basic properties
    # ------------------------------------------------------------------

    @property
    def directed(self) -> bool:
        return self._directed

    @property
    def vertices(self) -> List[Vertex[V, E]]:
        return list(self._vertices)

    @property
    def edges(self) -> List[Edge[V, E]]:
        return list(self._edges)

    @property
    def vertex_count(self) -> int:
        return len(self._vertices)

    @property
    def edge_count(self) -> int:
        return len(self._edges)

    @property
    def face_count(self) -> int:
        """Faces by Euler's formula F = 2 - V + E (1 for graphs with at most one edge)."""
        if self.edge_count <= 1:
            return 1
        return 2 - self.vertex_count + self.edge_count

    def __len__(self) -> int:
        return len(self._vertices)

    def __iter__(self) -> Iterator[V]:
        """Iterate over vertex payloads."""
        for vertex in self._vertices:
            yield vertex.data

    def __contains__(self, item: object) -> bool:
        return self.contains_vertex(item)

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"Graph({kind}, vertices={self.vertex_count}, edges={self.edge_count})"

    # ------------------------------------------------------------------
    # Structure queries
    # ------------------------------------------------------------------

    @property
    def contains_self_loops(self) -> bool:
        return any(edge.is_self_loop for edge in self._edges)

    @property
    def contains_multiple_edges(self) -> bool:
        seen = set()
        for edge in self._edges:
            key = self._endpoint_key(edge.source, edge.target)
            if key in seen:
                return True
            seen.add(key)
        return False

    @property
    def is_simple(self) -> bool:
        """True when the graph has neither self-loops nor parallel edges."""
        return not (self.contains_self_loops or self.contains_multiple_edges)

    @property
    def is_regular(self) -> bool:
        if self.vertex_count <= 1:
            return True
        degree = self._vertices[0].degree
        return all(vertex.degree == degree for vertex in self._vertices[1:])

    @property
    def girth(self) -> int:
        """Length of the shortest cycle, or -1 if the graph has none."""
        from .cycles import find_minimum_cycle_length

        return find_minimum_cycle_length(self)

    @property
    def is_weakly_connected(self) -> bool:
        """
        Whether every vertex is reachable from every other ignoring direction.

        Raises:
            RuntimeError: If the graph is empty.
        """
        if self.vertex_count == 0:
            raise RuntimeError("Connectivity is undefined for an empty graph")
        start = self._vertices[0]
        seen = {id(start)}
        stack = [start]
        while stack:
            vertex = stack.pop()
            for edge in vertex._incident:
                other = edge.partner(vertex)
                if id(other) not in seen:
                    seen.add(id(other))
                    stack.append(other)
        return len(seen) == self.vertex_count

    @property
    def is_strongly_connected(self) -> bool:
        """
        Whether every vertex reaches every other along edge directions.

        Raises:
            RuntimeError: If the graph is undirected or empty.
        """
        from .traversal import breadth_first
        from .visitors import CountingVisitor

        if not self._directed:
            raise RuntimeError("Strong connectivity is only defined for directed graphs")
        if self.vertex_count == 0:
            raise RuntimeError("Connectivity is undefined for an empty graph")
        visitor = CountingVisitor()
        for vertex in self._vertices:
            breadth_first(vertex, visitor)
            if visitor.count != self.vertex_count:
                return False
            visitor.reset()
        return True

    @property
    def is_cyclic(self) -> bool:
        """
        Whether the directed graph contains a cycle.

        Raises:
            RuntimeError: If the graph is undirected.
        """
        from .traversal import topological
        from .visitors import EmptyVisitor

        return topological(self, EmptyVisitor()) < self.vertex_count

    @property
    def is_tree(self) -> bool:
        """Whether the graph is connected (ignoring direction) with V - 1 edges."""
        if self.vertex_count == 0:
            return False
        return self.edge_count == self.vertex_count - 1 and self.is_weakly_connected

    @property
    def is_planar(self) -> bool:
        """
        Necessary-condition planarity test from Euler's formula.

        Returns False when 2E < 3F or 2E < girth * F. A True result does
        not prove planarity.
        """
        faces = self.face_count
        if faces == 1:
            return True
        edges = self.edge_count
        if 2 * edges < 3 * faces:
            return False
        return 2 * edges >= self.girth * faces

    # ------------------------------------------------------------------
    # Vertices
    # ------------------------------------------------------------------

    def add_vertex(self, item: Union[Vertex[V, E], V, None] = None) -> Vertex[V, E]:
        """
        Add a vertex to the graph.

        Args:
            item: A detached Vertex to insert, a payload to wrap in a new
                Vertex, or None to take a payload from the data factory.

        Returns:
            The vertex now owned by this graph.

        Raises:
            ValueError: If a vertex with an equal payload already exists, or
                the given Vertex still has edges or belongs to a graph.
        """
        if isinstance(item, Vertex):
            vertex = item
            if vertex._incident:
                raise ValueError("Only vertices without edges can be added to a graph")
            if vertex._graph is not None:
                raise ValueError(f"Vertex {vertex.data!r} already belongs to a graph")
        else:
            data = item if item is not None else self.data_factory.build_vertex_data()
            vertex = Vertex(data)

        if vertex.data in self._by_data:
            raise ValueError(f"Vertex {vertex.data!r} already exists in the graph")

        self._vertices.append(vertex)
        self._by_data[vertex.data] = vertex
        vertex._graph = self
        return vertex

    def get_vertex(self, data: Any) -> Optional[Vertex[V, E]]:
        """Return the vertex whose payload equals ``data``, or None."""
        return self._by_data.get(data)

    def contains_vertex(self, item: object) -> bool:
        """
        Whether the graph owns ``item``.

        A Vertex argument must be this graph's own object; any other
        argument is matched against vertex payloads.
        """
        if isinstance(item, Vertex):
            return self._by_data.get(item.data) is item
        try:
            return item in self._by_data
        except TypeError:
            return False

    def vertex_at(self, index: int) -> Vertex[V, E]:
        return self._vertices[index]

    def index_of_vertex(self, vertex: Vertex[V, E]) -> int:
        """Insertion index of ``vertex``, or -1 if it is not part of the graph."""
        for index, candidate in enumerate(self._vertices):
            if candidate is vertex:
                return index
        return -1

    def find_vertices(self, predicate: Callable[[V], bool]) -> List[Vertex[V, E]]:
        """Return vertices whose payload satisfies ``predicate``."""
        if predicate is None:
            raise TypeError("predicate must not be None")
        return [vertex for vertex in self._vertices if predicate(vertex.data)]

    def remove_vertex(self, item: VertexLike) -> bool:
        """
        Remove a vertex and all its edges.

        Returns:
            True if a vertex was removed, False if it was not found.
        """
        vertex = self._resolve(item)
        if vertex is None:
            return False
        for edge in list(vertex._incident):
            self.remove_edge(edge)
        self._vertices.remove(vertex)
        del self._by_data[vertex.data]
        vertex._graph = None
        return True

    # ------------------------------------------------------------------
    # Edges
    # ------------------------------------------------------------------

    def add_edge(self, source: VertexLike, target: VertexLike, data: Any = None) -> Edge[V, E]:
        """
        Create an edge between two member vertices.

        Args:
            source: Start vertex (Vertex object or payload).
            target: End vertex (Vertex object or payload).
            data: Edge payload; taken from the data factory when None.

        Returns:
            The new Edge.

        Raises:
            TypeError: If an endpoint is None.
            ValueError: If an endpoint is not part of the graph, the edge
                would be a forbidden self-loop, or it would duplicate an
                existing edge while multiple edges are not allowed.
        """
        if source is None or target is None:
            raise TypeError("Edge endpoints must not be None")
        from_vertex = self._require(source, "source")
        to_vertex = self._require(target, "target")

        if from_vertex is to_vertex and not self.allows_self_loops:
            raise ValueError(
                f"Graph does not allow self-loops (vertex {from_vertex.data!r})"
            )
        if not self.allows_multiple_edges and self._has_edge(from_vertex, to_vertex):
            raise ValueError(
                f"An edge from {from_vertex.data!r} to {to_vertex.data!r} already exists"
            )

        if data is None:
            data = self.data_factory.build_edge_data()
        edge = Edge(from_vertex, to_vertex, self._directed, data)
        self._edges.append(edge)
        from_vertex._attach(edge)
        if to_vertex is not from_vertex:
            to_vertex._attach(edge)
        return edge

    def get_edge(self, source: VertexLike, target: VertexLike) -> Optional[Edge[V, E]]:
        """Return the edge leading from ``source`` to ``target`` (either way if undirected)."""
        from_vertex = self._resolve(source)
        to_vertex = self._resolve(target)
        if from_vertex is None or to_vertex is None:
            return None
        return from_vertex.get_emanating_edge_to(to_vertex)

    def contains_edge(self, *args: Any) -> bool:
        """
        ``contains_edge(edge)`` or ``contains_edge(source, target)``.

        Endpoints may be vertices or payloads.
        """
        if len(args) == 1:
            edge = args[0]
            return any(candidate is edge for candidate in self._edges)
        if len(args) == 2:
            return self.get_edge(args[0], args[1]) is not None
        raise TypeError("contains_edge expects an edge or a (source, target) pair")

    def edge_at(self, index: int) -> Edge[V, E]:
        return self._edges[index]

    def remove_edge(self, *args: Any) -> bool:
        """
        ``remove_edge(edge)`` or ``remove_edge(source, target)``.

        Returns:
            True if an edge was removed.
        """
        if len(args) == 1:
            edge = args[0]
        elif len(args) == 2:
            edge = self.get_edge(args[0], args[1])
        else:
            raise TypeError("remove_edge expects an edge or a (source, target) pair")
        if edge is None:
            return False
        for index, candidate in enumerate(self._edges):
            if candidate is edge:
                del self._edges[index]
                edge.source._detach(edge)
                if not edge.is_self_loop:
                    edge.target._detach(edge)
                return True
        return False

    def clear(self) -> None:
        for vertex in self._vertices:
            vertex._incident.clear()
            vertex._emanating.clear()
            vertex._graph = None
        self._edges.clear()
        self._vertices.clear()
        self._by_data.clear()

    # ------------------------------------------------------------------
    # Derived graphs
    # ------------------------------------------------------------------

    def topological_sort(self) -> List[Vertex[V, E]]:
        """
        Return the vertices in topological order.

        Raises:
            RuntimeError: If the graph is undirected or contains a cycle.
        """
        from .traversal import topological
        from .visitors import TrackingVisitor

        visitor = TrackingVisitor()
        count = topological(self, visitor)
        if count < self.vertex_count:
            raise RuntimeError("Graph contains cycles; no topological order exists")
        return visitor.tracking_list

    def clone_with_vertices(self) -> "Graph[V, E]":
        """Return a graph of the same kind holding clones of every vertex and no edges."""
        graph = self.empty_like()
        for vertex in self._vertices:
            graph.add_vertex(vertex.clone())
        return graph

    def empty_like(self, directed: Optional[bool] = None) -> "Graph[V, E]":
        """Return an empty graph sharing this graph's factory and settings."""
        return Graph(
            directed=self._directed if directed is None else directed,
            data_factory=self.data_factory,
            allows_self_loops=self.allows_self_loops,
            allows_multiple_edges=self.allows_multiple_edges,
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _resolve(self, item: VertexLike) -> Optional[Vertex[V, E]]:
        if isinstance(item, Vertex):
            return item if self._by_data.get(item.data) is item else None
        try:
            return self._by_data.get(item)
        except TypeError:
            return None

    def _require(self, item: VertexLike, role: str) -> Vertex[V, E]:
        vertex = self._resolve(item)
        if vertex is None:
            label = item.data if isinstance(item, Vertex) else item
            raise ValueError(f"The {role} vertex {label!r} is not part of the graph")
        return vertex

    def _has_edge(self, source: Vertex[V, E], target: Vertex[V, E]) -> bool:
        return source.get_emanating_edge_to(target) is not None

    def _endpoint_key(self, source: Vertex[V, E], target: Vertex[V, E]) -> Any:
        if self._directed:
            return (id(source), id(target))
        return frozenset((id(source), id(target)))
