"""Public entry points.

Usage:
    from deepcopy import copy, must_copy

    outcome = copy(value)
    if not outcome.ok:
        print(outcome.failure)

    # When the value is known to hold nothing unsupported:
    duplicate = must_copy(value)
"""

from __future__ import annotations

import logging

from deepcopy.config.settings import CopySettings
from deepcopy.core.category.core import CategoryRegistry
from deepcopy.core.types import Copy
from deepcopy.engine.errors import CopyError, DepthLimitError
from deepcopy.engine.result import CopyOutcome
from deepcopy.engine.router import new_context

logger = logging.getLogger(__name__)


def copy[T](
    value: T,
    settings: CopySettings | None = None,
    *,
    registry: CategoryRegistry | None = None,
) -> CopyOutcome[T]:
    """Deep-copy a value of any supported shape.

    Args:
        value: Value to copy. It is only read, never modified.
        settings: Copy settings; defaults to the environment-loaded settings.
        registry: Category registry; defaults to the global registry.

    Returns:
        Outcome holding either the copy or the failure. A failed outcome never
        holds a partial copy.
    """
    context = new_context(settings, registry)
    type_name = type(value).__name__
    logger.debug("Copying %s", type_name)
    try:
        result = context.copy(value)
    except CopyError as exc:
        logger.debug("Copy of %s failed: %s", type_name, exc)
        return CopyOutcome(failure=exc)
    except RecursionError:
        # Interpreter stack ran out before max_depth was reached
        failure = DepthLimitError(context.settings.max_depth, path=context.path)
        logger.debug("Copy of %s failed: %s", type_name, failure)
        return CopyOutcome(failure=failure)
    logger.debug("Copied %s (%d tracked identities)", type_name, len(context.tracker))
    return CopyOutcome(value=result)


def must_copy[T](
    value: T,
    settings: CopySettings | None = None,
    *,
    registry: CategoryRegistry | None = None,
) -> Copy[T]:
    """Deep-copy a value, raising instead of returning a failure.

    Args:
        value: Value known to contain no unsupported categories.
        settings: Copy settings; defaults to the environment-loaded settings.
        registry: Category registry; defaults to the global registry.

    Returns:
        The copied value.

    Raises:
        CopyError: If the copy failed.
    """
    return copy(value, settings, registry=registry).unwrap()
