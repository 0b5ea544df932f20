"""Domain-specific exceptions for typed error handling at boundaries."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .body import WireBody

_REDACTED = "[REDACTED]"
_SECRET_SETTINGS = frozenset({"api_key"})


def redact_options(options: Mapping[str, Any]) -> dict[str, Any]:
    """Return a copy of *options* with secret values masked.

    Example:
        >>> redact_options({"api_key": "key-123", "domain": "mg.example.com"})
        {'api_key': '[REDACTED]', 'domain': 'mg.example.com'}
        >>> redact_options({"api_key": ""})
        {'api_key': ''}
    """
    return {key: (_REDACTED if key in _SECRET_SETTINGS and value else value) for key, value in options.items()}


class ConfigurationError(Exception):
    """Missing, invalid, or incomplete adapter configuration.

    Raised once at setup time when a required setting is absent or empty.
    The message names the setting and echoes the options that were passed
    in, with the API key masked.

    Example:
        >>> err = ConfigurationError("domain", {"api_key": "secret", "domain": ""})
        >>> err.setting
        'domain'
        >>> "secret" in str(err)
        False
    """

    def __init__(self, setting: str, options: Mapping[str, Any]) -> None:
        self.setting = setting
        self.options = redact_options(options)
        super().__init__(
            f"There was no {setting} set for the Mailgun adapter.\n\n"
            "* Here are the config options that were passed in:\n\n"
            f"{self.options!r}\n"
        )


class ApiError(Exception):
    """The provider rejected the request or could not be reached.

    Two flavours share this type so callers handle a failed send the same
    way regardless of cause:

    * HTTP rejection (status > 299) carries ``status_code``, the raw
      ``response_body`` and the ``request_body`` that was sent.
    * Transport failure carries only a description of the low-level reason;
      ``status_code`` and both bodies are ``None``.

    Example:
        >>> err = ApiError.from_transport_failure("ConnectError('refused')")
        >>> err.status_code is None
        True
        >>> err.message
        "ConnectError('refused')"
    """

    def __init__(
        self,
        message: str,
        *,
        service_name: str,
        status_code: int | None = None,
        response_body: str | None = None,
        request_body: WireBody | None = None,
    ) -> None:
        self.message = message
        self.service_name = service_name
        self.status_code = status_code
        self.response_body = response_body
        self.request_body = request_body
        super().__init__(message)

    @classmethod
    def from_response(
        cls,
        service_name: str,
        status_code: int,
        response_body: str,
        request_body: WireBody,
    ) -> ApiError:
        """Build the error for an HTTP response the provider refused."""
        message = (
            f"There was a problem sending the email through the {service_name} API.\n\n"
            f"Here is the response (HTTP {status_code}):\n\n"
            f"{response_body!r}\n\n"
            "Here are the params we sent:\n\n"
            f"{request_body.describe()}\n"
        )
        return cls(
            message,
            service_name=service_name,
            status_code=status_code,
            response_body=response_body,
            request_body=request_body,
        )

    @classmethod
    def from_transport_failure(cls, reason: str, service_name: str = "Mailgun") -> ApiError:
        """Build the error for a request that never produced a response."""
        return cls(reason, service_name=service_name)


__all__ = [
    "ApiError",
    "ConfigurationError",
    "redact_options",
]
