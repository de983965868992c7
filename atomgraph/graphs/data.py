"""
Payload capabilities and default payload types for vertices and edges.

Algorithms only rely on the structural protocols defined here: any object
with a ``weight`` attribute can sit on an edge handed to Dijkstra, any
hashable object with a ``position`` can sit on a vertex searched by A*.
Vertex payloads must be hashable and implement value equality, because
vertices compare and hash through their payload.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, Tuple


class HasWeight(Protocol):
    """Edge payload exposing a non-negative weight."""

    weight: float


class HasVoltage(Protocol):
    """Edge payload exposing an integer voltage in ``[0, order)``."""

    voltage: int


class Positionable2(Protocol):
    """Vertex payload exposing a 2D position."""

    @property
    def position(self) -> Tuple[float, float]:
        ...


class Nameable(Protocol):
    """Vertex payload exposing a name."""

    @property
    def name(self) -> str:
        ...


@dataclass
class WeightData:
    """Mutable edge payload carrying a weight."""

    weight: float = 1.0


@dataclass
class VoltageData:
    """Mutable edge payload for voltage graphs."""

    voltage: int = 0
    weight: float = 1.0


@dataclass(frozen=True)
class NamedData:
    """Hashable vertex payload identified by name."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class PositionData:
    """Hashable vertex payload with a name and a 2D position."""

    name: str
    position: Tuple[float, float] = (0.0, 0.0)

    def __str__(self) -> str:
        return f"{self.name}{self.position}"


class GraphDataFactory(Protocol):
    """Supplies default payloads when a graph creates vertices or edges."""

    def build_vertex_data(self) -> Any:
        ...

    def build_edge_data(self) -> Any:
        ...


class DataFactory:
    """
    Data factory backed by two optional zero-argument callables.

    Args:
        vertex_type: Called to create a vertex payload; None yields None.
        edge_type: Called to create an edge payload; None yields None.

    Example:
        >>> factory = DataFactory(edge_type=WeightData)
        >>> factory.build_edge_data()
        WeightData(weight=1.0)
    """

    def __init__(
        self,
        vertex_type: Optional[Callable[[], Any]] = None,
        edge_type: Optional[Callable[[], Any]] = None,
    ) -> None:
        self.vertex_type = vertex_type
        self.edge_type = edge_type

    def build_vertex_data(self) -> Any:
        return self.vertex_type() if self.vertex_type is not None else None

    def build_edge_data(self) -> Any:
        return self.edge_type() if self.edge_type is not None else None

    def __repr__(self) -> str:
        return f"DataFactory(vertex_type={self.vertex_type!r}, edge_type={self.edge_type!r})"


DEFAULT_DATA_FACTORY = DataFactory()
WEIGHT_DATA_FACTORY = DataFactory(edge_type=WeightData)
