"""Configuration adapter - layered configuration loading.

Contents:
    * :mod:`.loader` - Configuration loading with caching and profiles
    * ``defaultconfig.toml`` - Bundled ``[mailgun]`` and ``[lib_log_rich]`` defaults
"""

from __future__ import annotations

from .loader import get_config, get_default_config_path, validate_profile

__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
