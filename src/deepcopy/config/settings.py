"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the copy
engine.

Usage:
    from deepcopy.config import CopySettings

    # Load from environment variables (DEEPCOPY_*)
    settings = CopySettings()

    # Or override with explicit values
    settings = CopySettings(max_depth=1000)
"""

from __future__ import annotations

from functools import lru_cache

try:
    from pydantic import Field
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install deepcopy-engine"
    ) from e


class CopySettings(BaseSettings):  # type: ignore[misc]
    """Configuration for a top-level copy call.

    Attributes:
        max_depth: Maximum nesting depth before the copy fails. Every nested
            value (element, field, map entry, reference target) adds one level,
            so the bound applies to nesting, not to distinct identities: a
            chain of records linked through Ref fields costs two levels per
            node (`.next` then `.*`). Cycles never add levels once their
            members are tracked. Long acyclic chains need a higher
            max_depth and, past a few hundred levels, a higher
            sys.setrecursionlimit; running out of interpreter stack is
            reported as a depth failure.
        track_paths: Record the path to the offending value in failures.

    Environment Variables:
        DEEPCOPY_MAX_DEPTH
        DEEPCOPY_TRACK_PATHS
    """

    model_config = SettingsConfigDict(
        env_prefix="DEEPCOPY_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    max_depth: int = Field(default=200, gt=0)
    track_paths: bool = True


@lru_cache(maxsize=1)
def get_settings() -> CopySettings:
    """Load settings from the environment once per process.

    Returns:
        Cached CopySettings instance.
    """
    return CopySettings()
