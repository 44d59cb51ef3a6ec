"""Core functionalities: stateless categories, classifier and value types.

Architecture Note:
    core/ contains pure, stateless building blocks. Classification depends on
    the runtime type only. The per-call copy machinery (tracker, copiers,
    router) lives in engine/.
"""

from deepcopy.core.category import (
    CategoryRegistry,
    TypeCategory,
    classify,
    copy_as,
    get_registry,
)
from deepcopy.core.reference import Dynamic, Ref
from deepcopy.core.types import Copy

__all__ = [
    # Types
    "Copy",
    # Category
    "TypeCategory",
    "classify",
    "copy_as",
    "get_registry",
    "CategoryRegistry",
    # Reference
    "Ref",
    "Dynamic",
]
