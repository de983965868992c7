"""
Visitors consumed by the traversal algorithms.

A visitor receives each visited object through ``visit`` and can stop a
traversal early by reporting ``has_completed``. Depth-first traversal
needs an ``OrderedVisitor``, which distinguishes the moment a vertex is
first reached (pre-order) from the moment its subtree is finished
(post-order).
"""

from __future__ import annotations

from typing import Any, Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")


class Visitor(Generic[T]):
    """Base visitor: accepts everything and never completes."""

    @property
    def has_completed(self) -> bool:
        return False

    def visit(self, obj: T) -> None:
        raise NotImplementedError


class EmptyVisitor(Visitor[Any]):
    """Visitor that ignores every object."""

    def visit(self, obj: Any) -> None:
        pass


class CountingVisitor(Visitor[Any]):
    """Counts visited objects."""

    def __init__(self) -> None:
        self.count = 0

    def visit(self, obj: Any) -> None:
        self.count += 1

    def reset(self) -> None:
        self.count = 0


class TrackingVisitor(Visitor[T]):
    """Records visited objects in visiting order."""

    def __init__(self) -> None:
        self.tracking_list: List[T] = []

    def visit(self, obj: T) -> None:
        self.tracking_list.append(obj)


class CallbackVisitor(Visitor[T]):
    """
    Forwards each object to a callable.

    The traversal stops when the callback returns a truthy value or, if
    ``limit`` is set, once ``limit`` objects have been visited.

    Args:
        callback: Called with each visited object.
        limit: Optional maximum number of visits.
    """

    def __init__(self, callback: Callable[[T], Any], limit: Optional[int] = None) -> None:
        if callback is None:
            raise TypeError("callback must not be None")
        if limit is not None and limit < 0:
            raise ValueError(f"limit must be non-negative, got {limit}")
        self.callback = callback
        self.limit = limit
        self.visited = 0
        self._stopped = False

    @property
    def has_completed(self) -> bool:
        if self._stopped:
            return True
        return self.limit is not None and self.visited >= self.limit

    def visit(self, obj: T) -> None:
        self.visited += 1
        if self.callback(obj):
            self._stopped = True


class OrderedVisitor(Visitor[T]):
    """
    Wraps a visitor and receives pre-order, in-order and post-order events.

    The base class drops every event; subclasses choose which ones reach
    the wrapped visitor. ``has_completed`` is delegated.
    """

    def __init__(self, visitor: Visitor[T]) -> None:
        if visitor is None:
            raise TypeError("visitor must not be None")
        self.visitor = visitor

    @property
    def has_completed(self) -> bool:
        return self.visitor.has_completed

    def visit(self, obj: T) -> None:
        self.visitor.visit(obj)

    def visit_pre_order(self, obj: T) -> None:
        pass

    def visit_in_order(self, obj: T) -> None:
        pass

    def visit_post_order(self, obj: T) -> None:
        pass


class PreOrderVisitor(OrderedVisitor[T]):
    """Forwards pre-order events only."""

    def visit_pre_order(self, obj: T) -> None:
        self.visitor.visit(obj)


class InOrderVisitor(OrderedVisitor[T]):
    """Forwards in-order events only."""

    def visit_in_order(self, obj: T) -> None:
        self.visitor.visit(obj)


class PostOrderVisitor(OrderedVisitor[T]):
    """Forwards post-order events only."""

    def visit_post_order(self, obj: T) -> None:
        self.visitor.visit(obj)
