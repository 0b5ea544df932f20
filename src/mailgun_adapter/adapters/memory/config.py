"""In-memory configuration adapter for testing.

Satisfies the GetConfig protocol without touching the filesystem or
lib_layered_config's discovery.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from lib_layered_config import Config


def get_config_in_memory(
    *,
    profile: str | None = None,
    start_dir: str | None = None,
) -> Config:
    """Return an empty in-memory Config."""
    return Config({}, {})


def config_from_mapping(data: Mapping[str, Any]) -> Config:
    """Wrap *data* in a real Config with no provenance information."""
    return Config(dict(data), {})


__all__ = [
    "config_from_mapping",
    "get_config_in_memory",
]
