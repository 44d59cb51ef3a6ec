"""Type category models.

A category is a coarse classification of a runtime type. It decides which copy
algorithm the engine applies; it is derived from the type alone, never from the
value's content.
"""

from __future__ import annotations

from enum import Enum, auto


class TypeCategory(Enum):
    """Closed set of categories the copy engine knows how to handle."""

    SCALAR = auto()  # Immutable atom, duplicated by value
    REFERENCE = auto()  # Nullable single-target cell (Ref)
    WRAPPER = auto()  # Holds-anything slot (Dynamic)
    ORDERED = auto()  # Variable-length sequence (list, deque, bytearray)
    FIXED = auto()  # Fixed-length sequence (tuple, namedtuple)
    ASSOCIATIVE = auto()  # Keyed collection (dict family, set, frozenset)
    RECORD = auto()  # Instance with a named field set
    UNSUPPORTED = auto()  # Callables, live channels, unknown types

    @property
    def is_supported(self) -> bool:
        """Check if values of this category can be copied.

        Returns:
            False only for UNSUPPORTED.
        """
        return self is not TypeCategory.UNSUPPORTED

    @property
    def is_scalar(self) -> bool:
        return self is TypeCategory.SCALAR
