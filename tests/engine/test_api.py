"""Tests for the copy / must_copy entry points."""

import logging
from dataclasses import dataclass

import pytest

from deepcopy import (
    CategoryRegistry,
    CopyError,
    CopyOutcome,
    CopySettings,
    DepthLimitError,
    Ref,
    TypeCategory,
    UnsupportedCategoryError,
    copy,
    must_copy,
)


class Opaque:
    def __init__(self) -> None:
        self.items = [1, 2]


def test_copy_returns_successful_outcome():
    source = {"a": [1, 2]}

    outcome = copy(source)

    assert outcome.ok
    assert outcome.failure is None
    assert outcome.value == source
    assert outcome.value is not source


def test_outcome_unpacks_as_value_failure_pair():
    value, failure = copy([1])

    assert value == [1]
    assert failure is None


def test_failed_copy_returns_no_value():
    value, failure = copy([1, 2, lambda: None])

    assert value is None
    assert isinstance(failure, UnsupportedCategoryError)
    assert failure.path == "$[2]"


def test_copy_of_none_succeeds_with_none():
    outcome = copy(None)

    assert outcome.ok
    assert outcome.value is None


def test_must_copy_raises_on_failure():
    with pytest.raises(UnsupportedCategoryError):
        must_copy(lambda: None)


def test_must_copy_returns_value():
    assert must_copy((1, "a")) == (1, "a")


def test_registry_argument_changes_classification():
    registry = CategoryRegistry()
    registry.register(Opaque, TypeCategory.SCALAR)
    source = Opaque()

    assert must_copy(source, registry=registry) is source
    assert must_copy(source) is not source


def test_registry_can_reject_a_type():
    registry = CategoryRegistry()
    registry.register(Opaque, TypeCategory.UNSUPPORTED)

    outcome = copy([Opaque()], registry=registry)

    assert not outcome.ok
    assert outcome.failure.category is TypeCategory.UNSUPPORTED


def test_depth_limit_from_settings():
    nested: list[object] = []
    for _ in range(10):
        nested = [nested]

    outcome = copy(nested, CopySettings(max_depth=5))

    assert isinstance(outcome.failure, DepthLimitError)
    assert outcome.failure.path == "$[0][0][0][0][0]"
    assert must_copy(nested, CopySettings(max_depth=50)) == nested


@dataclass
class Link:
    next: Ref["Link"] | None = None


def _ref_chain(length: int) -> Link:
    head = Link()
    for _ in range(length - 1):
        head = Link(next=Ref(head))
    return head


def test_ref_chain_costs_two_levels_per_link():
    # Link k sits at depth 2 * (k - 1): one level for .next, one for .*
    # The tail's None field takes one more level
    assert must_copy(_ref_chain(60)) == _ref_chain(60)
    assert copy(_ref_chain(100), CopySettings(max_depth=200)).ok

    outcome = copy(_ref_chain(101), CopySettings(max_depth=200))

    assert isinstance(outcome.failure, DepthLimitError)
    assert outcome.failure.path == "$" + ".next.*" * 100
    assert copy(_ref_chain(101), CopySettings(max_depth=202)).ok


def test_interpreter_recursion_limit_becomes_depth_failure():
    nested: list[object] = []
    for _ in range(20_000):
        nested = [nested]

    outcome = copy(nested, CopySettings(max_depth=1_000_000))

    assert outcome.value is None
    assert isinstance(outcome.failure, DepthLimitError)


def test_paths_can_be_disabled():
    outcome = copy({"k": [print]}, CopySettings(track_paths=False))

    assert isinstance(outcome.failure, CopyError)
    assert outcome.failure.path == "$"


def test_copy_logs_start_and_finish(caplog):
    caplog.set_level(logging.DEBUG, logger="deepcopy.engine.api")

    copy([[1], [2]])

    assert "Copying list" in caplog.text
    assert "Copied list (3 tracked identities)" in caplog.text


def test_copy_logs_failure(caplog):
    caplog.set_level(logging.DEBUG, logger="deepcopy.engine.api")

    copy({"k": print})

    assert "Copy of dict failed" in caplog.text


def test_outcome_rejects_value_with_failure():
    with pytest.raises(ValueError, match="cannot carry a value"):
        CopyOutcome(value=[1], failure=CopyError("boom"))


def test_outcome_unwrap_reraises_failure():
    failure = UnsupportedCategoryError(type(print), path="$.x")
    outcome: CopyOutcome[object] = CopyOutcome(failure=failure)

    with pytest.raises(UnsupportedCategoryError, match=r"builtin_function_or_method .*at \$\.x"):
        outcome.unwrap()
