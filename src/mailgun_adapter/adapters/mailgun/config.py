"""Mailgun configuration model, setup-time validation, and loader.

Provides the MailgunConfig Pydantic model for validated, immutable adapter
settings, the validate_config gate that the mailer runs once before the
first send, and the loader that reads the ``[mailgun]`` section of the
layered configuration.
"""

from __future__ import annotations

import base64
from collections.abc import Mapping
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

from mailgun_adapter.domain.errors import ConfigurationError, redact_options

SERVICE_NAME = "Mailgun"
DEFAULT_BASE_URI = "https://api.mailgun.net/v3/"
REQUIRED_SETTINGS = ("api_key", "domain")


class MailgunConfig(BaseModel):
    """Validated, immutable Mailgun adapter configuration.

    Example:
        >>> config = MailgunConfig(api_key="key-123", domain="mg.example.com")
        >>> config.messages_url
        'https://api.mailgun.net/v3/mg.example.com/messages'
        >>> MailgunConfig(api_key="k", domain="d.com", base_uri="http://localhost:8080").base_uri
        'http://localhost:8080/'
    """

    model_config = ConfigDict(frozen=True)

    api_key: str
    domain: str
    base_uri: str = DEFAULT_BASE_URI
    timeout: float = 30.0

    @field_validator("base_uri", mode="before")
    @classmethod
    def _normalize_base_uri(cls, v: Any) -> Any:
        """Fall back to the production API root for empty values and ensure a trailing slash.

        The messages URL is built by plain concatenation, so an override such
        as ``http://localhost:4000`` must gain its ``/`` here.
        """
        if v is None:
            return DEFAULT_BASE_URI
        if isinstance(v, str):
            stripped = v.strip()
            if not stripped:
                return DEFAULT_BASE_URI
            return stripped if stripped.endswith("/") else f"{stripped}/"
        return v

    @model_validator(mode="after")
    def _validate_config(self) -> MailgunConfig:
        """Reject values that would only fail later at send time.

        Raises:
            ValueError: When timeout is not positive.
        """
        if self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")
        return self

    @property
    def messages_url(self) -> str:
        """Full URL of the send-message endpoint."""
        return f"{self.base_uri}{self.domain}/messages"

    @property
    def authorization(self) -> str:
        """Value of the ``Authorization`` header (HTTP Basic, user ``api``).

        Example:
            >>> MailgunConfig(api_key="k", domain="d.com").authorization
            'Basic YXBpOms='
        """
        token = base64.b64encode(f"api:{self.api_key}".encode()).decode("ascii")
        return f"Basic {token}"

    def __repr__(self) -> str:
        """Return string representation with api_key redacted.

        Example:
            >>> "key-123" in repr(MailgunConfig(api_key="key-123", domain="d.com"))
            False
        """
        fields = ", ".join(f"{name}={value!r}" for name, value in redact_options(dict(self)).items())
        return f"MailgunConfig({fields})"


def _is_blank(value: Any) -> bool:
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def validate_config(config: Mapping[str, Any] | MailgunConfig) -> MailgunConfig:
    """Check the required settings once, before any email is sent.

    ``api_key`` and ``domain`` are checked in that order; the first one that
    is missing, None, or blank aborts setup.

    Args:
        config: Raw adapter options, or an already-built MailgunConfig.

    Returns:
        The validated, immutable configuration.

    Raises:
        ConfigurationError: A required setting is missing or empty. The message
            names the setting and echoes the passed options with the key masked.
        pydantic.ValidationError: Another setting is malformed (e.g. timeout <= 0).

    Example:
        >>> validate_config({"api_key": "k", "domain": "d.com"}).domain
        'd.com'
        >>> validate_config({"api_key": "", "domain": "d.com"})  # doctest: +IGNORE_EXCEPTION_DETAIL
        Traceback (most recent call last):
        ...
        ConfigurationError: There was no api_key set for the Mailgun adapter.
    """
    options: dict[str, Any] = config.model_dump() if isinstance(config, MailgunConfig) else dict(config)
    for setting in REQUIRED_SETTINGS:
        if _is_blank(options.get(setting)):
            raise ConfigurationError(setting, options)
    if isinstance(config, MailgunConfig):
        return config
    return MailgunConfig.model_validate(options)


def load_mailgun_config_from_dict(config_dict: Mapping[str, Any]) -> MailgunConfig:
    """Load and validate MailgunConfig from a layered configuration dictionary.

    Bridges lib_layered_config's dictionary output with the typed
    MailgunConfig model.

    Args:
        config_dict: Configuration dictionary typically from lib_layered_config,
            expected to contain a ``mailgun`` section.

    Returns:
        The validated configuration.

    Raises:
        ConfigurationError: The section is missing, not a table, or lacks a
            required setting.

    Example:
        >>> cfg = load_mailgun_config_from_dict({"mailgun": {"api_key": "k", "domain": "mg.example.com"}})
        >>> cfg.base_uri
        'https://api.mailgun.net/v3/'
    """
    section: Any = config_dict.get("mailgun", {})
    if not isinstance(section, Mapping):
        raise ConfigurationError(REQUIRED_SETTINGS[0], {"mailgun": section})
    return validate_config(cast(Mapping[str, Any], section))


__all__ = [
    "DEFAULT_BASE_URI",
    "SERVICE_NAME",
    "MailgunConfig",
    "load_mailgun_config_from_dict",
    "validate_config",
]
