"""Per-call aliasing tracker and copy context.

A tracker lives for exactly one top-level copy call. Two calls on the same
cyclic source build two independent cyclic results.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from deepcopy.config.settings import CopySettings
from deepcopy.core.category.core import CategoryRegistry
from deepcopy.core.category.models import TypeCategory
from deepcopy.engine.errors import DepthLimitError


class AliasingTracker:
    """Maps source identities to the destinations already built for them.

    Keyed by id(source). Registered sources are kept alive until the tracker is
    dropped so their ids cannot be reused mid-call.
    """

    __slots__ = ("_destinations", "_sources")

    def __init__(self) -> None:
        self._destinations: dict[int, Any] = {}
        self._sources: list[Any] = []

    def register(self, source: Any, destination: Any) -> None:
        """Record the destination built for a source identity.

        Must be called before the source's contents are copied so a cycle back
        to the same identity resolves to the in-progress destination.

        Args:
            source: Source object.
            destination: Destination object (possibly still being filled).
        """
        self._destinations[id(source)] = destination
        self._sources.append(source)

    def get(self, source: Any, default: Any = None) -> Any:
        """Get the destination registered for a source identity.

        Args:
            source: Source object.
            default: Returned when the identity is not tracked.

        Returns:
            Registered destination, or default.
        """
        return self._destinations.get(id(source), default)

    def __contains__(self, source: object) -> bool:
        return id(source) in self._destinations

    def __len__(self) -> int:
        return len(self._destinations)


@dataclass(slots=True)
class CopyContext:
    """State threaded through one top-level copy call.

    Args:
        dispatch: Router entry used for every nested value.
        settings: Limits and path recording options.
        registry: Category registry used for classification.
    """

    dispatch: Callable[[Any, CopyContext], Any]
    settings: CopySettings
    registry: CategoryRegistry
    tracker: AliasingTracker = field(default_factory=AliasingTracker)
    depth: int = field(default=0, init=False)
    _segments: list[str] = field(default_factory=list, init=False, repr=False)

    @property
    def path(self) -> str:
        """Path from the top-level value to the value being copied."""
        return "$" + "".join(self._segments)

    def classify(self, value: Any) -> TypeCategory:
        return self.registry.classify_type(type(value))

    def copy(self, value: Any, segment: str = "") -> Any:
        """Copy a nested value through the router.

        Args:
            value: Value to copy.
            segment: Path segment leading from the parent to value.

        Returns:
            Copied value.

        Raises:
            CopyError: If value or anything reachable from it cannot be copied.
        """
        track = self.settings.track_paths
        if track:
            self._segments.append(segment)
        try:
            if self.depth >= self.settings.max_depth:
                raise DepthLimitError(self.settings.max_depth, path=self.path)
            self.depth += 1
            try:
                return self.dispatch(value, self)
            finally:
                self.depth -= 1
        finally:
            if track:
                self._segments.pop()
