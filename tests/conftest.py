"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from deepcopy import CategoryRegistry, CopySettings
from deepcopy.engine import CopyContext, new_context


@pytest.fixture
def registry():
    """Fresh CategoryRegistry, isolated from the global one."""
    return CategoryRegistry()


@pytest.fixture
def settings():
    """Default settings, ignoring any DEEPCOPY_* environment."""
    return CopySettings(max_depth=200, track_paths=True)


@pytest.fixture
def context(settings, registry) -> CopyContext:
    """Context for a single top-level copy call."""
    return new_context(settings, registry)
