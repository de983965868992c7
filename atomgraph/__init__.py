"""atomgraph - an in-memory graph algorithms engine."""

__version__ = "0.1.0"

# Graph model and algorithms
from .graphs import (
    AStar,
    CycleStatus,
    DataFactory,
    Edge,
    Graph,
    NamedData,
    PositionData,
    Track,
    Vertex,
    VoltageData,
    WeightData,
    breadth_first,
    depth_first,
    derive,
    find_cycle_status,
    find_cycles,
    find_minimum_cycle_length,
    find_shortest_paths,
    find_strongly_connected,
    kruskal,
    prim,
    shortest_distances,
    topological,
)

# Core abstractions
from .core import Device, default_device, device

# Diagnostics
from .diagnostics import (
    assert_forest,
    assert_path_chained,
    debug_context,
    is_debug_enabled,
    is_forest,
    path_is_chained,
    set_debug_enabled,
    total_weight,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    "Graph",
    "Vertex",
    "Edge",
    "DataFactory",
    "WeightData",
    "VoltageData",
    "NamedData",
    "PositionData",
    "depth_first",
    "breadth_first",
    "topological",
    "CycleStatus",
    "find_cycles",
    "find_cycle_status",
    "find_minimum_cycle_length",
    "find_strongly_connected",
    "AStar",
    "Track",
    "find_shortest_paths",
    "shortest_distances",
    "prim",
    "kruskal",
    "derive",
    "Device",
    "device",
    "default_device",
    "is_forest",
    "assert_forest",
    "path_is_chained",
    "assert_path_chained",
    "total_weight",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    "get_logger",
    "set_log_level",
    "configure_logging",
]
