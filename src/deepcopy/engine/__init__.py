"""Copy engine: per-call tracking, category copiers and dispatch.

Architecture Note:
    engine/ holds the state of one top-level copy call (aliasing tracker,
    depth, path). Nothing here outlives a call. For the stateless category
    model and value types, see core/.
"""

from deepcopy.engine.api import copy, must_copy
from deepcopy.engine.errors import (
    CategoryMismatchError,
    CopyError,
    DepthLimitError,
    UnhashableKeyError,
    UnsupportedCategoryError,
)
from deepcopy.engine.result import CopyOutcome
from deepcopy.engine.router import COPIERS, Copier, copy_value, dispatch, new_context
from deepcopy.engine.tracker import AliasingTracker, CopyContext

__all__ = [
    # Entry points
    "copy",
    "must_copy",
    "CopyOutcome",
    # Router
    "COPIERS",
    "Copier",
    "dispatch",
    "copy_value",
    "new_context",
    # Tracking
    "AliasingTracker",
    "CopyContext",
    # Errors
    "CopyError",
    "UnsupportedCategoryError",
    "CategoryMismatchError",
    "UnhashableKeyError",
    "DepthLimitError",
]
