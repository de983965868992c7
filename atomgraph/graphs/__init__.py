"""
Graph algorithms package for atomgraph.

This package provides:
- Graph data structures (Graph, Vertex, Edge) and payload types
- Traversal (depth-first, breadth-first, Kahn topological order) with visitors
- Cycle analysis (enumeration, status, minimum length, Tarjan SCC)
- A* pathfinding and Dijkstra shortest-path trees
- Minimum spanning trees (Prim, Kruskal)
- Voltage graph lifts
- Graph matrices, graph families and structural operations

Vertex and edge order is insertion order, so every algorithm is
deterministic.
"""

from .core import Edge, Graph, Vertex
from .data import (
    DEFAULT_DATA_FACTORY,
    WEIGHT_DATA_FACTORY,
    DataFactory,
    GraphDataFactory,
    HasVoltage,
    HasWeight,
    NamedData,
    Nameable,
    PositionData,
    Positionable2,
    VoltageData,
    WeightData,
)
from .visitors import (
    CallbackVisitor,
    CountingVisitor,
    EmptyVisitor,
    InOrderVisitor,
    OrderedVisitor,
    PostOrderVisitor,
    PreOrderVisitor,
    TrackingVisitor,
    Visitor,
)
from .traversal import breadth_first, depth_first, topological
from .cycles import (
    CycleStatus,
    find_cycle_status,
    find_cycles,
    find_minimum_cycle_length,
    find_strongly_connected,
)
from .heuristics import (
    euclidean_distance,
    manhattan_distance,
    max_axis_distance,
    squared_euclidean_distance,
    zero_heuristic,
)
from .astar import AStar, Track
from .shortest import find_shortest_paths, shortest_distances
from .mst import ParentForest, kruskal, prim
from .voltage import derive
from .matrices import (
    adjacency_matrix,
    as_tensor,
    incidence_matrix,
    laplacian_matrix,
    seidel_adjacency_matrix,
    weighted_adjacency_matrix,
)
from .factory import (
    create_banana,
    create_circle,
    create_complete,
    create_complete_bipartite,
    create_path,
    create_star,
    create_star_of_order,
)
from .operations import cartesian_product, contract, cut, edge_complement, join
from .utils import (
    VertexInfo,
    build_predecessor_graph,
    edge_weight,
    path_vertices,
    path_weight,
    vertex_index_map,
)

__all__ = [
    "Graph",
    "Vertex",
    "Edge",
    "DataFactory",
    "GraphDataFactory",
    "DEFAULT_DATA_FACTORY",
    "WEIGHT_DATA_FACTORY",
    "HasWeight",
    "HasVoltage",
    "Positionable2",
    "Nameable",
    "WeightData",
    "VoltageData",
    "NamedData",
    "PositionData",
    "Visitor",
    "OrderedVisitor",
    "PreOrderVisitor",
    "InOrderVisitor",
    "PostOrderVisitor",
    "TrackingVisitor",
    "CountingVisitor",
    "EmptyVisitor",
    "CallbackVisitor",
    "depth_first",
    "breadth_first",
    "topological",
    "CycleStatus",
    "find_cycles",
    "find_cycle_status",
    "find_minimum_cycle_length",
    "find_strongly_connected",
    "euclidean_distance",
    "squared_euclidean_distance",
    "manhattan_distance",
    "max_axis_distance",
    "zero_heuristic",
    "AStar",
    "Track",
    "find_shortest_paths",
    "shortest_distances",
    "prim",
    "kruskal",
    "ParentForest",
    "derive",
    "adjacency_matrix",
    "weighted_adjacency_matrix",
    "seidel_adjacency_matrix",
    "incidence_matrix",
    "laplacian_matrix",
    "as_tensor",
    "create_star",
    "create_star_of_order",
    "create_path",
    "create_complete",
    "create_complete_bipartite",
    "create_circle",
    "create_banana",
    "contract",
    "cut",
    "edge_complement",
    "cartesian_product",
    "join",
    "VertexInfo",
    "build_predecessor_graph",
    "edge_weight",
    "path_vertices",
    "path_weight",
    "vertex_index_map",
]

# Example usage:
# from atomgraph.graphs import Graph, WeightData, find_shortest_paths
#
# G = Graph(directed=True)
# a, b, c = G.add_vertex("A"), G.add_vertex("B"), G.add_vertex("C")
# G.add_edge(a, b, WeightData(1.0))
# G.add_edge(b, c, WeightData(2.0))
# tree = find_shortest_paths(G, a)  # edges A->B, B->C
