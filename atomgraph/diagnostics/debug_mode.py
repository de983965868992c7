"""Debug mode switch for atomgraph.

While debug mode is on, algorithms that derive a new graph (shortest-path
trees, spanning trees) verify the structure of their result before handing
it back. The initial value comes from the ATOMGRAPH_DEBUG environment
variable.
"""

from __future__ import annotations

import os
from contextlib import contextmanager
from typing import Iterator

DEBUG_ENV_VAR = "ATOMGRAPH_DEBUG"
_TRUTHY = frozenset({"1", "true", "yes", "on"})


def _read_env_flag(var: str) -> bool:
    return os.getenv(var, "0").strip().lower() in _TRUTHY


_debug_enabled: bool = _read_env_flag(DEBUG_ENV_VAR)


def is_debug_enabled() -> bool:
    """Return whether result verification is currently switched on."""
    return _debug_enabled


def set_debug_enabled(enabled: bool) -> None:
    """
    Globally enable or disable debug mode.

    Parameters
    ----------
    enabled:
        Whether derived graphs should be verified.
    """
    global _debug_enabled
    _debug_enabled = bool(enabled)


def reset_debug_from_env() -> bool:
    """
    Re-read ATOMGRAPH_DEBUG and apply it.

    Returns
    -------
    bool
        The resulting debug state.
    """
    set_debug_enabled(_read_env_flag(DEBUG_ENV_VAR))
    return _debug_enabled


@contextmanager
def debug_context(enabled: bool = True) -> Iterator[None]:
    """
    Temporarily switch debug mode, restoring the previous state on exit.

    Example
    -------
    >>> with debug_context(True):
    ...     tree = find_shortest_paths(graph, source)  # verified
    """
    global _debug_enabled
    prev = _debug_enabled
    _debug_enabled = bool(enabled)
    try:
        yield
    finally:
        _debug_enabled = prev
