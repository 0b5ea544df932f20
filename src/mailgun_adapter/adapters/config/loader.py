"""Layered configuration loader with caching and profile support."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from lib_layered_config import (
    DEFAULT_MAX_PROFILE_LENGTH,
    Config,
    read_config,
    validate_profile_name,
)

from mailgun_adapter import __init__conf__


def validate_profile(profile: str, max_length: int | None = None) -> None:
    """Validate a profile name using lib_layered_config.

    Args:
        profile: The profile name to validate.
        max_length: Optional maximum length. Defaults to DEFAULT_MAX_PROFILE_LENGTH.

    Raises:
        ValueError: If the profile name is empty, too long, contains invalid
            characters, or attempts path traversal.

    Examples:
        >>> validate_profile("staging")  # valid, no exception

        >>> validate_profile("../etc/passwd")  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ValueError: profile contains invalid characters: ../etc/passwd
    """
    length = max_length if max_length is not None else DEFAULT_MAX_PROFILE_LENGTH
    validate_profile_name(profile, max_length=length)


@lru_cache(maxsize=1)
def get_default_config_path() -> Path:
    """Return the path to the bundled defaultconfig.toml.

    The file ships the ``[mailgun]`` defaults (production base URI, timeout)
    and the ``[lib_log_rich]`` logging defaults.

    Example:
        >>> get_default_config_path().name
        'defaultconfig.toml'
    """
    return Path(__file__).parent / "defaultconfig.toml"


# Cached per (profile, start_dir). deliver() never reads this; callers hand
# the resulting MailgunConfig over explicitly. A rejected profile raises
# before anything is cached.
@lru_cache(maxsize=4)
def get_config(*, profile: str | None = None, start_dir: str | None = None) -> Config:
    """Load layered configuration with the adapter defaults.

    Sources in precedence order: defaults -> app -> host -> user -> dotenv -> env.
    This is where the process-wide ``mailgun.base_uri`` override enters,
    e.g. from an environment variable pointing tests at a mock endpoint.
    ``get_config.cache_clear()`` forces the next call to re-read every layer.

    Args:
        profile: Optional profile name inserting a ``profile/<name>/``
            subdirectory into every configuration path.
        start_dir: Optional directory that seeds .env discovery.

    Returns:
        Immutable configuration object with provenance tracking.

    Example:
        >>> config = get_config()
        >>> config.get("mailgun.base_uri")
        'https://api.mailgun.net/v3/'
    """
    if profile is not None:
        validate_profile(profile)
    return read_config(
        vendor=__init__conf__.LAYEREDCONF_VENDOR,
        app=__init__conf__.LAYEREDCONF_APP,
        slug=__init__conf__.LAYEREDCONF_SLUG,
        profile=profile,
        default_file=get_default_config_path(),
        start_dir=start_dir,
    )


__all__ = [
    "get_config",
    "get_default_config_path",
    "validate_profile",
]
