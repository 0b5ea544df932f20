"""Application ports - callable Protocol definitions for adapter functions.

Each Protocol defines a ``__call__`` whose signature matches the
corresponding adapter function, so module-level functions and the in-memory
spies satisfy them structurally (PEP 544). A mailer framework depends on
these ports rather than on the httpx-backed implementation.

System Role:
    Sits between domain and adapters. Infrastructure types are imported under
    ``TYPE_CHECKING`` only.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

from ..domain.models import Email

if TYPE_CHECKING:
    import httpx
    from lib_layered_config import Config

    from ..adapters.mailgun.config import MailgunConfig
    from ..adapters.mailgun.transport import DeliveryResult


class GetConfig(Protocol):
    """Load layered configuration with application defaults."""

    def __call__(self, *, profile: str | None = ..., start_dir: str | None = ...) -> Config: ...


class InitLogging(Protocol):
    """Initialize lib_log_rich runtime with the provided configuration."""

    def __call__(self, config: Config) -> None: ...


class ValidateConfig(Protocol):
    """Check required adapter settings once at setup time."""

    def __call__(self, config: Mapping[str, Any] | MailgunConfig) -> MailgunConfig: ...


class LoadMailgunConfigFromDict(Protocol):
    """Load MailgunConfig from a layered configuration dictionary."""

    def __call__(self, config_dict: Mapping[str, Any]) -> MailgunConfig: ...


class DeliverEmail(Protocol):
    """Send one email and return the provider's answer."""

    def __call__(
        self,
        email: Email,
        config: MailgunConfig,
        *,
        client: httpx.Client | None = ...,
    ) -> DeliveryResult: ...


class SupportsAttachments(Protocol):
    """Report whether the adapter can send attachments."""

    def __call__(self) -> bool: ...


__all__ = [
    "DeliverEmail",
    "GetConfig",
    "InitLogging",
    "LoadMailgunConfigFromDict",
    "SupportsAttachments",
    "ValidateConfig",
]
