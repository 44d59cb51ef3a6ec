"""Copy failure taxonomy.

Every failure carries the runtime type and category of the offending value and
the path from the top-level value to it, rendered like `$.items[2].*`.
"""

from __future__ import annotations

from deepcopy.core.category.models import TypeCategory


def _type_name(value_type: type | None) -> str:
    if value_type is None:
        return "<unknown>"
    return f"{value_type.__module__}.{value_type.__qualname__}"


class CopyError(Exception):
    """Base class for failures of a top-level copy call."""

    def __init__(
        self,
        message: str,
        *,
        value_type: type | None = None,
        category: TypeCategory | None = None,
        path: str = "$",
    ) -> None:
        super().__init__(f"{message} at {path}")
        self.value_type = value_type
        self.category = category
        self.path = path


class UnsupportedCategoryError(CopyError):
    """Raised when a value has no well-defined duplication (callables, channels)."""

    def __init__(
        self,
        value_type: type,
        category: TypeCategory = TypeCategory.UNSUPPORTED,
        *,
        path: str = "$",
        reason: str | None = None,
    ) -> None:
        message = f"Cannot copy {_type_name(value_type)} ({category.name})"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message, value_type=value_type, category=category, path=path)


class CategoryMismatchError(CopyError):
    """Raised when a copier is handed a value outside its own category.

    Only reachable through a wrong dispatch table entry, never through the
    public entry points.
    """

    def __init__(
        self,
        expected: TypeCategory,
        actual: TypeCategory,
        value_type: type,
        *,
        path: str = "$",
    ) -> None:
        super().__init__(
            f"{expected.name} copier received {_type_name(value_type)} ({actual.name})",
            value_type=value_type,
            category=actual,
            path=path,
        )
        self.expected = expected


class UnhashableKeyError(CopyError):
    """Raised when a copied map key or set member cannot be hashed."""

    def __init__(self, value_type: type, *, path: str = "$") -> None:
        super().__init__(
            f"Copied key of type {_type_name(value_type)} is not hashable",
            value_type=value_type,
            path=path,
        )


class DepthLimitError(CopyError):
    """Raised when nesting exceeds the configured maximum depth."""

    def __init__(self, max_depth: int, *, path: str = "$") -> None:
        super().__init__(f"Nesting deeper than {max_depth} levels", path=path)
        self.max_depth = max_depth
