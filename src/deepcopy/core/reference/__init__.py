"""Reference functionality: nullable cells and holds-anything wrappers."""

from deepcopy.core.reference.models import Dynamic, Ref

__all__ = [
    "Ref",
    "Dynamic",
]
