"""
Voltage graph lift.

A voltage graph is a directed graph whose edges carry an element of the
cyclic group Z_n (the voltage). Its derived graph (the lift) has ``n``
copies ``v_0 .. v_{n-1}`` of every vertex ``v`` and, for every edge
``u -> w`` with voltage ``a``, the edges ``u_i -> w_{(i + a) mod n}``.

References:
    - Gross, J. L., Tucker, T. W. "Topological Graph Theory" (1987),
      Chapter 2.
"""

from __future__ import annotations

import copy
from typing import Callable, Dict, List

from ..logging import get_logger
from .core import Graph, Vertex
from .data import NamedData

logger = get_logger(__name__)


def _verify(voltage_graph: Graph, order: int) -> None:
    if voltage_graph is None:
        raise TypeError("voltage_graph must not be None")
    if not voltage_graph.directed:
        raise ValueError("A voltage graph must be directed")
    if order < 1:
        raise ValueError(f"Voltage group order must be at least 1, got {order}")
    for edge in voltage_graph.edges:
        if edge.data is None:
            raise ValueError(f"Edge {edge!r} carries no voltage")
        voltage = edge.data.voltage
        if voltage < 0 or voltage >= order:
            raise ValueError(
                f"Voltage {voltage} of edge {edge!r} is not part of the voltage "
                f"group of order {order}"
            )


def derive(
    voltage_graph: Graph,
    order: int,
    vertex_factory: Callable[[str], object] = NamedData,
) -> Graph:
    """
    Derive the lift of a voltage graph.

    Args:
        voltage_graph: Directed graph; vertex payloads expose ``name`` and
            edge payloads expose an integer ``voltage`` in ``[0, order)``.
        order: Order ``n`` of the cyclic voltage group.
        vertex_factory: Builds a derived vertex payload from its name
            ``"{name}_{i}"``.

    Returns:
        A new directed graph with ``order * V`` vertices and ``order * E``
        edges. Self-loops are allowed; parallel edges are allowed if the
        input allows them. Edge payloads are copied from the input.

    Raises:
        TypeError: If ``voltage_graph`` is None.
        ValueError: If the graph is undirected, ``order < 1``, or a voltage
            lies outside ``[0, order)``.

    Example:
        >>> lift = derive(G, 3)
        >>> lift.vertex_count == 3 * G.vertex_count
        True
    """
    _verify(voltage_graph, order)

    lift = Graph(
        directed=True,
        data_factory=voltage_graph.data_factory,
        allows_self_loops=True,
        allows_multiple_edges=voltage_graph.allows_multiple_edges,
    )

    copies: Dict[Vertex, List[Vertex]] = {}
    for vertex in voltage_graph.vertices:
        name = vertex.data.name
        copies[vertex] = [lift.add_vertex(vertex_factory(f"{name}_{i}")) for i in range(order)]

    for edge in voltage_graph.edges:
        voltage = edge.data.voltage
        starts = copies[edge.source]
        ends = copies[edge.target]
        for i in range(order):
            lift.add_edge(starts[i], ends[(i + voltage) % order], copy.copy(edge.data))

    logger.debug(
        "derived lift of order %d: %d vertices, %d edges",
        order,
        lift.vertex_count,
        lift.edge_count,
    )
    return lift
