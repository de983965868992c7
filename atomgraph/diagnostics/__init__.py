"""Diagnostics and debugging utilities for atomgraph."""

from .core import (
    assert_forest,
    assert_path_chained,
    is_forest,
    is_symmetric,
    path_is_chained,
    total_weight,
)
from .debug_mode import (
    debug_context,
    is_debug_enabled,
    reset_debug_from_env,
    set_debug_enabled,
)

__all__ = [
    "is_forest",
    "assert_forest",
    "path_is_chained",
    "assert_path_chained",
    "total_weight",
    "is_symmetric",
    "is_debug_enabled",
    "set_debug_enabled",
    "reset_debug_from_env",
    "debug_context",
]
