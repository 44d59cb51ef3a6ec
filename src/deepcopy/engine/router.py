"""Dispatch router: category -> copier.

Usage:
    context = new_context()
    copied = copy_value(value, context)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from deepcopy.config.settings import CopySettings, get_settings
from deepcopy.core.category.core import CategoryRegistry, get_registry
from deepcopy.core.category.models import TypeCategory
from deepcopy.engine.copiers import (
    copy_associative,
    copy_fixed,
    copy_ordered,
    copy_record,
    copy_reference,
    copy_scalar,
    copy_unsupported,
    copy_wrapper,
)
from deepcopy.engine.tracker import CopyContext

type Copier = Callable[[Any, CopyContext], Any]

COPIERS: dict[TypeCategory, Copier] = {
    TypeCategory.SCALAR: copy_scalar,
    TypeCategory.REFERENCE: copy_reference,
    TypeCategory.WRAPPER: copy_wrapper,
    TypeCategory.ORDERED: copy_ordered,
    TypeCategory.FIXED: copy_fixed,
    TypeCategory.ASSOCIATIVE: copy_associative,
    TypeCategory.RECORD: copy_record,
    TypeCategory.UNSUPPORTED: copy_unsupported,
}


def dispatch(category: TypeCategory) -> Copier:
    """Get the copier for a category.

    Args:
        category: Category to look up.

    Returns:
        The category's copier, or the unsupported copier for anything not in
        the table.
    """
    return COPIERS.get(category, copy_unsupported)


def copy_value(value: Any, context: CopyContext) -> Any:
    """Classify a value and copy it with the matching copier.

    A non-scalar value whose identity was already copied in this call resolves
    to the existing destination, which breaks cycles and preserves sharing.

    Args:
        value: Value to copy.
        context: Context of the current top-level call.

    Returns:
        Copied value.
    """
    category = context.classify(value)
    if not category.is_scalar:
        existing = context.tracker.get(value)
        if existing is not None:
            return existing
    return dispatch(category)(value, context)


def new_context(
    settings: CopySettings | None = None,
    registry: CategoryRegistry | None = None,
) -> CopyContext:
    """Create the context for one top-level copy call.

    Args:
        settings: Copy settings; defaults to the environment-loaded settings.
        registry: Category registry; defaults to the global registry.

    Returns:
        Fresh context with an empty aliasing tracker.
    """
    return CopyContext(
        dispatch=copy_value,
        settings=settings or get_settings(),
        registry=registry or get_registry(),
    )
