"""Category copiers: one algorithm per type category.

Each copier takes (value, context) and returns the copied value or raises a
CopyError. Nested values go back through `context.copy`, which re-enters the
router with the same aliasing tracker.

Identity-bearing mutable destinations (Ref, list, dict, set, records) are
registered with the tracker before their contents are copied. Immutable
containers (tuple, frozenset, Dynamic) can only be built after their contents,
so they re-check the tracker once the contents are done.
"""

from __future__ import annotations

import reprlib
import types
from collections import Counter, OrderedDict, defaultdict, deque
from collections.abc import Iterator
from typing import TYPE_CHECKING, Any

from deepcopy.core.category.core import ORDERED_TYPES
from deepcopy.core.category.models import TypeCategory
from deepcopy.core.reference.models import Dynamic, Ref
from deepcopy.engine.errors import (
    CategoryMismatchError,
    UnhashableKeyError,
    UnsupportedCategoryError,
)

if TYPE_CHECKING:
    from deepcopy.engine.tracker import CopyContext

_MAPPING_BASES: tuple[type, ...] = (defaultdict, OrderedDict, Counter, dict)
"""Most specific first."""

_WRAPPER_VALUE = frozenset({"_value"})


def _expect(value: Any, category: TypeCategory, context: CopyContext) -> None:
    """Guard against a copier being dispatched a value of another category.

    Raises:
        CategoryMismatchError: If value does not classify as category.
    """
    actual = context.classify(value)
    if actual is not category:
        raise CategoryMismatchError(category, actual, type(value), path=context.path)


def _key_segment(key: Any, context: CopyContext) -> str:
    """Path segment for a map entry; empty when paths are not recorded."""
    if not context.settings.track_paths:
        return ""
    return f"[{reprlib.repr(key)}]"


def _member_segment(member: Any, context: CopyContext) -> str:
    """Path segment for a set member; empty when paths are not recorded."""
    if not context.settings.track_paths:
        return ""
    return f"{{{reprlib.repr(member)}}}"


def _hashable(copied: Any, context: CopyContext, segment: str) -> Any:
    """Check a copied key or set member can still be hashed."""
    try:
        hash(copied)
    except (TypeError, AttributeError) as exc:
        raise UnhashableKeyError(type(copied), path=context.path + segment) from exc
    return copied


# Privileged field access
#
# Records are copied below their public surface: allocation skips __init__,
# reads and writes go straight to the instance __dict__ and to the slot member
# descriptors. Properties, __setattr__ guards (frozen dataclasses) and
# name-mangled private attributes do not get in the way.


def _slot_descriptors(cls: type) -> Iterator[tuple[str, types.MemberDescriptorType]]:
    """Yield (name, descriptor) for every __slots__ entry along the MRO."""
    seen: set[str] = set()
    for base in cls.__mro__:
        if "__slots__" not in vars(base):
            continue
        for name, attr in vars(base).items():
            if isinstance(attr, types.MemberDescriptorType) and name not in seen:
                seen.add(name)
                yield name, attr


def _copy_fields(
    source: Any,
    destination: Any,
    context: CopyContext,
    exclude: frozenset[str] = frozenset(),
) -> None:
    """Copy every instance field of source into destination.

    Unset slots stay unset on the destination.

    Args:
        source: Object to read from.
        destination: Freshly allocated object of the same type.
        context: Current copy context.
        exclude: Field names already handled by the caller.
    """
    try:
        state = object.__getattribute__(source, "__dict__")
    except AttributeError:
        state = None
    if state:
        target = object.__getattribute__(destination, "__dict__")
        for name, value in list(state.items()):
            if name not in exclude:
                target[name] = context.copy(value, f".{name}")

    cls = type(source)
    for name, descriptor in _slot_descriptors(cls):
        if name in exclude:
            continue
        try:
            value = descriptor.__get__(source, cls)
        except AttributeError:
            continue  # Unset slot
        descriptor.__set__(destination, context.copy(value, f".{name}"))


# Copiers


def copy_scalar(value: Any, context: CopyContext) -> Any:
    """Immutable atoms are duplicated by value: return them as they are."""
    _expect(value, TypeCategory.SCALAR, context)
    return value


def copy_reference(source: Ref[Any], context: CopyContext) -> Ref[Any]:
    """Copy a reference cell and, unless it is null, its target.

    The new cell is registered before the target is copied, so a target that
    leads back to this cell resolves to the new cell instead of recursing.
    """
    _expect(source, TypeCategory.REFERENCE, context)
    destination: Ref[Any] = object.__new__(type(source))
    destination.set(None)
    context.tracker.register(source, destination)

    target = source.get()
    if target is not None:
        destination.set(context.copy(target, ".*"))
    _copy_fields(source, destination, context, exclude=frozenset({"_target"}))
    return destination


def copy_wrapper(source: Dynamic, context: CopyContext) -> Dynamic:
    """Copy a holds-anything wrapper by copying and re-wrapping its payload.

    An empty wrapper stays empty; it never becomes a wrapper holding None.
    Fields added by wrapper subclasses are copied like record fields.
    """
    _expect(source, TypeCategory.WRAPPER, context)
    if source.is_empty():
        if type(source) is Dynamic:
            return source  # Immutable and stateless
        destination = source.rewrap()
        context.tracker.register(source, destination)
        _copy_fields(source, destination, context, exclude=_WRAPPER_VALUE)
        return destination

    held = context.copy(source.unwrap(), ".<held>")
    if type(held) is not source.held_type:
        raise CategoryMismatchError(
            TypeCategory.WRAPPER, context.classify(held), type(held), path=context.path
        )
    existing = context.tracker.get(source)
    if existing is not None:
        return existing  # type: ignore[no-any-return]
    destination = source.rewrap(held)
    context.tracker.register(source, destination)
    _copy_fields(source, destination, context, exclude=_WRAPPER_VALUE)
    return destination


def copy_ordered(source: Any, context: CopyContext) -> Any:
    """Copy a list, deque or bytearray element by element, preserving order."""
    _expect(source, TypeCategory.ORDERED, context)
    cls = type(source)
    base = next(b for b in ORDERED_TYPES if isinstance(source, b))
    destination = base.__new__(cls)
    if base is deque:
        deque.__init__(destination, (), source.maxlen)
    context.tracker.register(source, destination)

    if base is bytearray:
        bytearray.extend(destination, source)
    else:
        for index, item in enumerate(list(source)):
            base.append(destination, context.copy(item, f"[{index}]"))
    _copy_fields(source, destination, context)
    return destination


def copy_fixed(source: tuple[Any, ...], context: CopyContext) -> tuple[Any, ...]:
    """Copy a tuple or named tuple to one of identical length."""
    _expect(source, TypeCategory.FIXED, context)
    items = [context.copy(item, f"[{index}]") for index, item in enumerate(source)]

    # Reached again through its own elements
    existing = context.tracker.get(source)
    if existing is not None:
        return existing  # type: ignore[no-any-return]

    cls = type(source)
    if cls is tuple:
        destination: tuple[Any, ...] = tuple(items)
    elif hasattr(cls, "_make"):
        destination = cls._make(items)
    else:
        destination = tuple.__new__(cls, items)
    context.tracker.register(source, destination)
    _copy_fields(source, destination, context)
    return destination


def copy_associative(source: Any, context: CopyContext) -> Any:
    """Copy a dict-like mapping, a set or a frozenset.

    Keys and values both go through the router. Keys must stay hashable after
    copying; identity-hashed keys become new identities, value-hashed keys
    keep their hash. A None value stays a None value under its key.
    """
    _expect(source, TypeCategory.ASSOCIATIVE, context)
    if isinstance(source, dict):
        return _copy_mapping(source, context)
    if isinstance(source, set):
        return _copy_set(source, context)
    return _copy_frozenset(source, context)


def _copy_mapping(source: dict[Any, Any], context: CopyContext) -> dict[Any, Any]:
    cls = type(source)
    base = next(b for b in _MAPPING_BASES if isinstance(source, b))
    destination = base.__new__(cls)
    base.__init__(destination)
    context.tracker.register(source, destination)

    if base is defaultdict:
        destination.default_factory = context.copy(source.default_factory, ".default_factory")
    for key, value in list(source.items()):
        segment = _key_segment(key, context)
        copied_key = _hashable(context.copy(key, segment), context, segment)
        base.__setitem__(destination, copied_key, context.copy(value, segment))
    _copy_fields(source, destination, context)
    return destination


def _copy_set(source: set[Any], context: CopyContext) -> set[Any]:
    cls = type(source)
    destination = set.__new__(cls)
    set.__init__(destination)
    context.tracker.register(source, destination)

    for member in list(source):
        segment = _member_segment(member, context)
        set.add(destination, _hashable(context.copy(member, segment), context, segment))
    _copy_fields(source, destination, context)
    return destination


def _copy_frozenset(source: frozenset[Any], context: CopyContext) -> frozenset[Any]:
    members = []
    for member in source:
        segment = _member_segment(member, context)
        members.append(_hashable(context.copy(member, segment), context, segment))

    existing = context.tracker.get(source)
    if existing is not None:
        return existing  # type: ignore[no-any-return]

    cls = type(source)
    destination = frozenset(members) if cls is frozenset else frozenset.__new__(cls, members)
    context.tracker.register(source, destination)
    _copy_fields(source, destination, context)
    return destination


def copy_record(source: Any, context: CopyContext) -> Any:
    """Copy an instance field by field through the privileged access path.

    Allocates a zero-valued instance without running __init__, registers it,
    then copies every __dict__ entry and every slot, public or private.
    """
    _expect(source, TypeCategory.RECORD, context)
    cls = type(source)
    try:
        destination = object.__new__(cls)
    except TypeError as exc:
        raise UnsupportedCategoryError(
            cls, TypeCategory.RECORD, path=context.path, reason=str(exc)
        ) from exc
    context.tracker.register(source, destination)
    _copy_fields(source, destination, context)
    return destination


def copy_unsupported(value: Any, context: CopyContext) -> Any:
    """Reject the value. Never substitutes None or a zero value."""
    raise UnsupportedCategoryError(type(value), context.classify(value), path=context.path)
