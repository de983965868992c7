"""
A* pathfinding.

Search state lives in a per-search arena of Track records. A track points
to its predecessor by arena index, so the candidate paths form a tree of
integers and the found path is rebuilt by following parent indices back to
the root.

The open list is a binary heap ordered by ``(total, insertion sequence)``
with lazy deletion: replaced tracks stay in the heap and are skipped when
popped. At most one track per end vertex is live in the open or closed
list; a new track to an already-discovered vertex only replaces the old one
when it is strictly cheaper.

References:
    - Hart, P. E., Nilsson, N. J., Raphael, B. (1968). "A Formal Basis for the
      Heuristic Determination of Minimum Cost Paths". IEEE Transactions on
      Systems Science and Cybernetics 4(2).
"""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

from ..diagnostics.debug_mode import is_debug_enabled
from ..logging import get_logger
from .core import Edge, Graph, Vertex
from .heuristics import Heuristic, euclidean_distance
from .utils import edge_weight

logger = get_logger(__name__)

ROOT = -1


@dataclass
class Track:
    """
    One A* frontier record.

    Attributes:
        end: Vertex this track reaches.
        parent: Arena index of the predecessor track, ``ROOT`` for the start.
        edge: Edge followed from the predecessor (None for the root).
        cost: Accumulated edge weight from the source (g).
        estimate: Heuristic estimate from ``end`` to the target (h).
        edges_visited: Number of edges on the track.
    """

    end: Vertex
    parent: int
    edge: Optional[Edge]
    cost: float
    estimate: float
    edges_visited: int = 0

    @property
    def total(self) -> float:
        """Evaluation f = g + h used to order the open list."""
        return self.cost + self.estimate

    @property
    def is_root(self) -> bool:
        return self.parent == ROOT


class AStar:
    """
    A* searcher bound to one graph.

    Edge payloads must expose ``weight``; edges without a payload weigh
    0. With the default Euclidean
    heuristic, vertex payloads must expose a 2D ``position``.

    Args:
        graph: Graph to search.
        heuristic: Estimate ``(vertex, target) -> float``; must never
            overestimate for the found path to be optimal.

    Example:
        >>> searcher = AStar(G, heuristic=zero_heuristic)
        >>> searcher.search(a, d)
        True
        >>> [e.target.data for e in searcher.found_path()]
        ['B', 'C', 'D']
    """

    def __init__(self, graph: Graph, heuristic: Heuristic = euclidean_distance) -> None:
        if graph is None:
            raise TypeError("graph must not be None")
        if heuristic is None:
            raise TypeError("heuristic must not be None")
        self.graph = graph
        self.heuristic = heuristic
        self._source: Optional[Vertex] = None
        self._target: Optional[Vertex] = None
        self._tracks: List[Track] = []
        self._open: Dict[Vertex, int] = {}
        self._closed: Dict[Vertex, int] = {}
        self._heap: List[Tuple[float, int, int]] = []
        self._sequence = 0
        self._leaf: Optional[int] = None
        self.expanded = 0

    @property
    def source(self) -> Optional[Vertex]:
        return self._source

    @property
    def target(self) -> Optional[Vertex]:
        return self._target

    @property
    def is_path_found(self) -> bool:
        return self._leaf is not None

    @property
    def tracks(self) -> List[Track]:
        """Arena of every track created by the last search."""
        return list(self._tracks)

    def search(self, source: Vertex, target: Vertex) -> bool:
        """
        Search a path from ``source`` to ``target``.

        Holds ``graph.lock`` for the whole search, so concurrent searches on
        the same graph run one after another.

        Args:
            source: Start vertex.
            target: Goal vertex.

        Returns:
            True if a path was found. Not finding a path is not an error.

        Raises:
            TypeError: If ``source`` or ``target`` is None.
            ValueError: If either vertex is not part of the graph.
        """
        if source is None or target is None:
            raise TypeError("source and target must not be None")
        if not self.graph.contains_vertex(source):
            raise ValueError(f"Source vertex {source.data!r} is not part of the graph")
        if not self.graph.contains_vertex(target):
            raise ValueError(f"Target vertex {target.data!r} is not part of the graph")

        with self.graph.lock:
            self._initialize(source, target)
            while self._next_step():
                pass
            found = self._leaf is not None

            logger.debug(
                "A* %r -> %r: found=%s, expanded=%d, tracks=%d",
                source.data,
                target.data,
                found,
                self.expanded,
                len(self._tracks),
            )
            if is_debug_enabled() and found:
                from ..diagnostics.core import assert_path_chained

                assert_path_chained(self.found_path(), source, target)
            return found

    def found_path(self) -> Optional[List[Edge]]:
        """
        Edges of the found path in source-to-target order.

        Returns:
            The edge list (empty when source equals target), or None if the
            last search found no path.
        """
        if self._leaf is None:
            return None
        path: List[Edge] = []
        index = self._leaf
        while index != ROOT:
            track = self._tracks[index]
            if track.edge is not None:
                path.append(track.edge)
            index = track.parent
        path.reverse()
        return path

    def found_cost(self) -> Optional[float]:
        """Accumulated weight of the found path, or None."""
        if self._leaf is None:
            return None
        return self._tracks[self._leaf].cost

    # ------------------------------------------------------------------

    def _initialize(self, source: Vertex, target: Vertex) -> None:
        self._source = source
        self._target = target
        self._tracks = []
        self._open = {}
        self._closed = {}
        self._heap = []
        self._sequence = 0
        self._leaf = None
        self.expanded = 0
        self._push(Track(source, ROOT, None, 0.0, self.heuristic(source, target)))

    def _push(self, track: Track) -> None:
        index = len(self._tracks)
        self._tracks.append(track)
        self._open[track.end] = index
        heapq.heappush(self._heap, (track.total, self._sequence, index))
        self._sequence += 1

    def _pop_best(self) -> Optional[int]:
        while self._heap:
            _, _, index = heapq.heappop(self._heap)
            track = self._tracks[index]
            # Skip tracks that were replaced after being pushed
            if self._open.get(track.end) == index:
                del self._open[track.end]
                return index
        return None

    def _next_step(self) -> bool:
        index = self._pop_best()
        if index is None:
            return False

        best = self._tracks[index]
        if best.end is self._target:
            self._leaf = index
            self._open.clear()
            self._heap.clear()
            return False

        self._propagate(index, best)
        self._closed[best.end] = index
        self.expanded += 1
        return bool(self._open)

    def _propagate(self, index: int, best: Track) -> None:
        for edge in best.end.emanating_edges:
            end = edge.partner(best.end)
            if end is best.end:
                continue
            cost = best.cost + edge_weight(edge)

            closed_index = self._closed.get(end)
            if closed_index is not None and self._tracks[closed_index].cost <= cost:
                continue
            open_index = self._open.get(end)
            if open_index is not None and self._tracks[open_index].cost <= cost:
                continue

            if closed_index is not None:
                del self._closed[end]
            self._push(
                Track(
                    end=end,
                    parent=index,
                    edge=edge,
                    cost=cost,
                    estimate=self.heuristic(end, self._target),
                    edges_visited=best.edges_visited + 1,
                )
            )
