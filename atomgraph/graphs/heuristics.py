"""
Distance heuristics for A* on vertices whose payload exposes a 2D position.

Every heuristic has the signature ``(vertex, target) -> float``. Only the
Euclidean and zero heuristics are admissible for arbitrary non-negative
edge weights; the others trade optimality for fewer expansions.
"""

from __future__ import annotations

import math
from typing import Callable, Tuple

from .core import Vertex

Heuristic = Callable[[Vertex, Vertex], float]


def _delta(left: Vertex, right: Vertex) -> Tuple[float, float]:
    if left is None or right is None:
        raise TypeError("vertices must not be None")
    lx, ly = left.data.position
    rx, ry = right.data.position
    return lx - rx, ly - ry


def euclidean_distance(left: Vertex, right: Vertex) -> float:
    """Straight-line distance between two positioned vertices."""
    dx, dy = _delta(left, right)
    return math.hypot(dx, dy)


def squared_euclidean_distance(left: Vertex, right: Vertex) -> float:
    dx, dy = _delta(left, right)
    return dx * dx + dy * dy


def manhattan_distance(left: Vertex, right: Vertex) -> float:
    """Sum of the absolute axis differences (grid distance)."""
    dx, dy = _delta(left, right)
    return abs(dx) + abs(dy)


def max_axis_distance(left: Vertex, right: Vertex) -> float:
    """Largest absolute axis difference (Chebyshev distance)."""
    dx, dy = _delta(left, right)
    return max(abs(dx), abs(dy))


def zero_heuristic(left: Vertex, right: Vertex) -> float:
    """Always 0; turns A* into Dijkstra's algorithm."""
    return 0.0
