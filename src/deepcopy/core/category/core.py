"""Category registry and runtime type classifier.

Usage:
    classify([1, 2])  # TypeCategory.ORDERED
    classify(lambda: None)  # TypeCategory.UNSUPPORTED

    # Mark a third-party immutable type as copy-by-value:
    get_registry().register(re.Pattern, TypeCategory.SCALAR)

    # Or a class of your own:
    @copy_as(TypeCategory.SCALAR)
    class Color:
        ...
"""

from __future__ import annotations

import asyncio
import concurrent.futures
import datetime
import io
import queue
import selectors
import socket
import subprocess
import threading
import types
import uuid
import warnings
import weakref
from collections import deque
from collections.abc import Callable
from decimal import Decimal
from enum import Enum
from fractions import Fraction
from pathlib import PurePath
from typing import Any, TypeVar

from deepcopy.core.category.models import TypeCategory
from deepcopy.core.reference.models import Dynamic, Ref

C = TypeVar("C", bound=type)

SCALAR_TYPES: tuple[type, ...] = (
    type(None),
    bool,
    int,
    float,
    complex,
    str,
    bytes,
    Decimal,
    Fraction,
    range,
    slice,
    type(Ellipsis),
    type(NotImplemented),
    Enum,
    type,
    datetime.date,
    datetime.time,
    datetime.timedelta,
    datetime.tzinfo,
    uuid.UUID,
    PurePath,
)
"""Immutable atoms, duplicated by value. `datetime.date` covers datetime."""

UNSUPPORTED_TYPES: tuple[type, ...] = (
    # Executable values that are not caught by callable()
    types.GeneratorType,
    types.CoroutineType,
    types.AsyncGeneratorType,
    types.CodeType,
    types.FrameType,
    types.TracebackType,
    types.ModuleType,
    BaseException,
    # Live channels and synchronisation primitives
    io.IOBase,
    socket.socket,
    selectors.BaseSelector,
    subprocess.Popen,
    queue.Queue,
    type(threading.Lock()),
    type(threading.RLock()),
    threading.Condition,
    threading.Event,
    threading.Semaphore,
    threading.Thread,
    asyncio.Queue,
    asyncio.Future,
    asyncio.Event,
    asyncio.Lock,
    asyncio.Condition,
    asyncio.Semaphore,
    concurrent.futures.Future,
    concurrent.futures.Executor,
    weakref.ref,
    weakref.ProxyType,
    weakref.CallableProxyType,
)

ORDERED_TYPES: tuple[type, ...] = (list, deque, bytearray)
ASSOCIATIVE_TYPES: tuple[type, ...] = (dict, set, frozenset)

_OVERRIDE_BASES: dict[TypeCategory, tuple[type, ...]] = {
    TypeCategory.REFERENCE: (Ref,),
    TypeCategory.WRAPPER: (Dynamic,),
    TypeCategory.ORDERED: ORDERED_TYPES,
    TypeCategory.FIXED: (tuple,),
    TypeCategory.ASSOCIATIVE: ASSOCIATIVE_TYPES,
}
"""Categories whose copier relies on a concrete base type."""


def _is_record_type(cls: type) -> bool:
    """Check if instances of cls carry a named, per-instance field set.

    True when instances have a __dict__ or when any class in the MRO declares
    __slots__.

    Args:
        cls: Class to check.

    Returns:
        True if cls can be copied field by field.
    """
    if cls.__dictoffset__ != 0:
        return True
    return any("__slots__" in vars(base) for base in cls.__mro__[:-1])


def _defines_call(cls: type) -> bool:
    """Check if instances of cls are callable (functions, methods, partials)."""
    return any("__call__" in vars(base) for base in cls.__mro__)


def _builtin_category(cls: type) -> TypeCategory:
    """Classify a type by the built-in rules. Fails closed."""
    if issubclass(cls, SCALAR_TYPES):
        return TypeCategory.SCALAR
    if issubclass(cls, UNSUPPORTED_TYPES) or _defines_call(cls):
        return TypeCategory.UNSUPPORTED
    if issubclass(cls, Ref):
        return TypeCategory.REFERENCE
    if issubclass(cls, Dynamic):
        return TypeCategory.WRAPPER
    if issubclass(cls, tuple):
        return TypeCategory.FIXED
    if issubclass(cls, ORDERED_TYPES):
        return TypeCategory.ORDERED
    if issubclass(cls, ASSOCIATIVE_TYPES):
        return TypeCategory.ASSOCIATIVE
    if _is_record_type(cls):
        return TypeCategory.RECORD
    return TypeCategory.UNSUPPORTED


class CategoryRegistry:
    """Per-type category overrides on top of the built-in classification.

    Overrides are inherited: a subclass of a registered type gets the same
    category unless it is registered itself. Resolved categories are cached
    per type until the next registration.
    """

    def __init__(self) -> None:
        """Initialize registry with no overrides."""
        self._overrides: dict[type, TypeCategory] = {}
        self._resolved: dict[type, TypeCategory] = {}

    def register(self, cls: type, category: TypeCategory) -> None:
        """Register an explicit category for a type.

        Args:
            cls: Type to classify.
            category: Category its instances are copied as.

        Raises:
            TypeError: If cls is not a type, or category requires a base type
                that cls does not derive from.
        """
        if not isinstance(cls, type):
            raise TypeError(f"Expected a type, got {cls!r}")
        required = _OVERRIDE_BASES.get(category)
        if required is not None and not issubclass(cls, required):
            names = ", ".join(base.__name__ for base in required)
            raise TypeError(f"{cls.__name__} cannot be copied as {category.name}: not a {names}")

        existing = self._overrides.get(cls)
        if existing is not None and existing is not category:
            warnings.warn(
                f"Overriding category of {cls.__qualname__}: {existing.name} -> {category.name}",
                RuntimeWarning,
                stacklevel=2,
            )
        self._overrides[cls] = category
        self._resolved.clear()

    def get(self, cls: type) -> TypeCategory | None:
        """Get the override that applies to a type, searching its MRO.

        Args:
            cls: Type to look up.

        Returns:
            Overridden category, or None if no override applies.
        """
        for base in cls.__mro__:
            category = self._overrides.get(base)
            if category is not None:
                return category
        return None

    def is_registered(self, cls: type) -> bool:
        """Check if a type itself (not a base) has an override."""
        return cls in self._overrides

    def classify_type(self, cls: type) -> TypeCategory:
        """Classify a runtime type.

        Args:
            cls: Runtime type of a value.

        Returns:
            The override if one applies, otherwise the built-in category.
        """
        category = self._resolved.get(cls)
        if category is None:
            category = self.get(cls) or _builtin_category(cls)
            self._resolved[cls] = category
        return category


# Module-level registry instance
_registry = CategoryRegistry()


def get_registry() -> CategoryRegistry:
    """Access the global category registry.

    Returns:
        The process-local CategoryRegistry instance.
    """
    return _registry


def classify(value: Any, registry: CategoryRegistry | None = None) -> TypeCategory:
    """Determine the type category of a value from its runtime type.

    Args:
        value: Any Python object.
        registry: Registry to consult; defaults to the global one.

    Returns:
        Category of type(value). Unknown types classify as UNSUPPORTED.
    """
    return (registry or _registry).classify_type(type(value))


def copy_as(category: TypeCategory) -> Callable[[C], C]:
    """Register a class with the global registry under an explicit category.

    Args:
        category: Category instances of the decorated class are copied as.

    Returns:
        Class decorator returning the class unchanged.

    Note:
        >>> @copy_as(TypeCategory.SCALAR)
        ... class Color:
        ...     def __init__(self, rgb: int) -> None:
        ...         self.rgb = rgb
    """

    def decorator(cls: C) -> C:
        _registry.register(cls, category)
        return cls

    return decorator
