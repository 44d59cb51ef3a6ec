"""Configuration module using Pydantic Settings.

Provides typed configuration for the copy engine with environment variable
support.

Usage:
    from deepcopy.config import CopySettings

    settings = CopySettings(max_depth=500, track_paths=False)
"""

from deepcopy.config.settings import CopySettings, get_settings

__all__ = [
    "CopySettings",
    "get_settings",
]
