"""Category functionality: type categories, classifier and override registry."""

from deepcopy.core.category.core import (
    CategoryRegistry,
    classify,
    copy_as,
    get_registry,
)
from deepcopy.core.category.models import TypeCategory

__all__ = [
    # Models
    "TypeCategory",
    # Core
    "classify",
    "copy_as",
    "get_registry",
    "CategoryRegistry",
]
