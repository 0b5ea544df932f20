"""Mailgun adapter - HTTP API delivery.

Structure:
    * :mod:`.config` - Configuration model, validation and loader
    * :mod:`.transport` - HTTP send and response classification

Contents:
    * :class:`.config.MailgunConfig` - Validated adapter configuration
    * :func:`.config.validate_config` - Setup-time required-settings gate
    * :func:`.config.load_mailgun_config_from_dict` - Config dict loader
    * :func:`.transport.deliver` - Send one email
    * :func:`.transport.supports_attachments` - Capability flag
"""

from __future__ import annotations

from .config import (
    DEFAULT_BASE_URI,
    SERVICE_NAME,
    MailgunConfig,
    load_mailgun_config_from_dict,
    validate_config,
)
from .transport import DeliveryResult, deliver, supports_attachments

__all__ = [
    "DEFAULT_BASE_URI",
    "SERVICE_NAME",
    "DeliveryResult",
    "MailgunConfig",
    "deliver",
    "load_mailgun_config_from_dict",
    "supports_attachments",
    "validate_config",
]
