"""Outcome of a fallible top-level copy.

Usage:
    outcome = copy(value)
    if outcome.ok:
        use(outcome.value)

    # Or unpack like a (value, failure) pair:
    copied, failure = copy(value)
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any, cast

from deepcopy.engine.errors import CopyError


@dataclass(frozen=True, slots=True)
class CopyOutcome[T]:
    """Either a copied value or a failure, never both.

    A failed outcome always carries value None: no partially-copied structure
    is ever handed back.
    """

    value: T | None = None
    failure: CopyError | None = None

    def __post_init__(self) -> None:
        if self.failure is not None and self.value is not None:
            raise ValueError("A failed CopyOutcome cannot carry a value")

    @property
    def ok(self) -> bool:
        """Check if the copy succeeded."""
        return self.failure is None

    def unwrap(self) -> T:
        """Return the copied value.

        Returns:
            The copied value (None is a valid copy of None).

        Raises:
            CopyError: The failure, if the copy failed.
        """
        if self.failure is not None:
            raise self.failure
        return cast(T, self.value)

    def __iter__(self) -> Iterator[Any]:
        yield self.value
        yield self.failure
