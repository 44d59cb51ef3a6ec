"""Reference and wrapper value types.

Usage:
    node = Ref(Inner(value=3))
    empty = Ref()  # null reference
    node.get().value  # 3

    slot = Dynamic(Inner(value=3))
    slot.held_type  # Inner
    Dynamic().is_empty()  # True, distinct from Dynamic(None)
"""

from __future__ import annotations

import reprlib
from typing import Any, cast


class Ref[T]:
    """Mutable single-target reference cell.

    A Ref whose target is None is a null reference. Two cells compare equal
    when their targets compare equal; identity is the cell itself, so Refs are
    unhashable like other mutable containers.
    """

    __slots__ = ("_target",)

    def __init__(self, target: T | None = None) -> None:
        self._target = target

    def get(self) -> T | None:
        """Return the referenced value, or None for a null reference."""
        return self._target

    def set(self, target: T | None) -> None:
        """Point this reference at a new target (None clears it)."""
        self._target = target

    def is_null(self) -> bool:
        return self._target is None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ref):
            return NotImplemented
        if other is self:
            return True
        return bool(self._target == other._target)

    __hash__ = None  # type: ignore[assignment]

    @reprlib.recursive_repr()
    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._target!r})"


class _Empty:
    """Marker for a wrapper that holds no value at all."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<empty>"


_EMPTY = _Empty()


class Dynamic:
    """Immutable slot holding a value of any runtime type.

    Unlike Ref, a Dynamic is not a reference: it cannot be re-pointed, and it
    distinguishes holding nothing (`Dynamic()`) from holding None
    (`Dynamic(None)`).
    """

    __slots__ = ("_value",)

    def __init__(self, value: Any = _EMPTY) -> None:
        self._value = value

    def is_empty(self) -> bool:
        """Check if this wrapper holds no value."""
        return self._value is _EMPTY

    def unwrap(self) -> Any:
        """Return the held value.

        Raises:
            ValueError: If the wrapper is empty.
        """
        if self._value is _EMPTY:
            raise ValueError("Cannot unwrap an empty Dynamic")
        return self._value

    @property
    def held_type(self) -> type | None:
        """Return the concrete type of the held value, None when empty."""
        if self._value is _EMPTY:
            return None
        return type(self._value)

    def rewrap(self, value: Any = _EMPTY) -> Dynamic:
        """Build a wrapper of the same concrete type around another value.

        Bypasses subclass constructors so wrapper subclasses round-trip. Only
        the held value is set; subclass fields are left to the caller.

        Args:
            value: Value the new wrapper holds. Omit for an empty wrapper.

        Returns:
            New wrapper instance of type(self).
        """
        clone = cast(Dynamic, object.__new__(type(self)))
        clone._value = value
        return clone

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Dynamic):
            return NotImplemented
        if self.is_empty() or other.is_empty():
            return self.is_empty() and other.is_empty()
        return self.held_type is other.held_type and bool(self._value == other._value)

    def __hash__(self) -> int:
        return hash((Dynamic, self._value))

    @reprlib.recursive_repr()
    def __repr__(self) -> str:
        if self.is_empty():
            return f"{type(self).__name__}()"
        return f"{type(self).__name__}({self._value!r})"
