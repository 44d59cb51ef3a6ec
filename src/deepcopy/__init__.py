"""deepcopy: type-dispatching deep copy with cycle reconstruction.

Usage:
    from deepcopy import copy, must_copy, Ref

    @dataclass
    class Node:
        next: Ref["Node"]
        value: int

    node = Node(next=Ref(), value=1)
    node.next.set(node)  # self-referential

    clone = must_copy(node)
    assert clone is not node
    assert clone.next.get() is clone

    outcome = copy([lambda: None])
    assert outcome.value is None and outcome.failure is not None
"""

__version__ = "0.1.0"

# Configuration
from deepcopy.config import CopySettings

# Core primitives
from deepcopy.core import (
    CategoryRegistry,
    Copy,
    Dynamic,
    Ref,
    TypeCategory,
    classify,
    copy_as,
    get_registry,
)

# Engine
from deepcopy.engine import (
    CategoryMismatchError,
    CopyError,
    CopyOutcome,
    DepthLimitError,
    UnhashableKeyError,
    UnsupportedCategoryError,
    copy,
    must_copy,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Copy",
    "TypeCategory",
    "classify",
    "copy_as",
    "get_registry",
    "CategoryRegistry",
    "Ref",
    "Dynamic",
    # Engine
    "copy",
    "must_copy",
    "CopyOutcome",
    "CopyError",
    "UnsupportedCategoryError",
    "CategoryMismatchError",
    "UnhashableKeyError",
    "DepthLimitError",
    # Config
    "CopySettings",
]
