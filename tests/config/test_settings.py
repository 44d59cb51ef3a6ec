"""Tests for copy settings."""

import pytest
from pydantic import ValidationError

from deepcopy import CopySettings
from deepcopy.config import get_settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("DEEPCOPY_MAX_DEPTH", raising=False)
    monkeypatch.delenv("DEEPCOPY_TRACK_PATHS", raising=False)

    settings = CopySettings(_env_file=None)

    assert settings.max_depth == 200
    assert settings.track_paths is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DEEPCOPY_MAX_DEPTH", "42")
    monkeypatch.setenv("DEEPCOPY_TRACK_PATHS", "false")

    settings = CopySettings(_env_file=None)

    assert settings.max_depth == 42
    assert settings.track_paths is False


def test_explicit_values_win_over_environment(monkeypatch):
    monkeypatch.setenv("DEEPCOPY_MAX_DEPTH", "42")

    assert CopySettings(max_depth=7).max_depth == 7


def test_max_depth_must_be_positive():
    with pytest.raises(ValidationError):
        CopySettings(max_depth=0)


def test_settings_are_immutable():
    settings = CopySettings()

    with pytest.raises(ValidationError):
        settings.max_depth = 10  # type: ignore[misc]


def test_get_settings_is_cached():
    get_settings.cache_clear()

    assert get_settings() is get_settings()
