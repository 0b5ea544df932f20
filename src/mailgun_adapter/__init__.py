"""Public package surface for sending email through the Mailgun HTTP API.

Routes imports through the architectural layers:
- Domain exports: message value objects, body building, errors
- Adapter exports: configuration validation and delivery
- Composition exports: wired services and configuration loading
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Adapter exports
from .adapters.mailgun import (
    DEFAULT_BASE_URI,
    DeliveryResult,
    MailgunConfig,
    deliver,
    load_mailgun_config_from_dict,
    supports_attachments,
    validate_config,
)

# Composition exports (wired adapters)
from .composition import get_config

# Domain exports
from .domain import (
    Address,
    ApiError,
    Attachment,
    ConfigurationError,
    ContentType,
    Email,
    content_type,
    to_mailgun_body,
)

__all__ = [
    "DEFAULT_BASE_URI",
    "Address",
    "ApiError",
    "Attachment",
    "ConfigurationError",
    "ContentType",
    "DeliveryResult",
    "Email",
    "MailgunConfig",
    "content_type",
    "deliver",
    "get_config",
    "load_mailgun_config_from_dict",
    "print_info",
    "supports_attachments",
    "to_mailgun_body",
    "validate_config",
]
