"""Application layer - port definitions consumed by mailer frameworks.

Contents:
    * :mod:`.ports` - Protocol definitions for adapter functions
"""

from __future__ import annotations

from .ports import (
    DeliverEmail,
    GetConfig,
    InitLogging,
    LoadMailgunConfigFromDict,
    SupportsAttachments,
    ValidateConfig,
)

__all__ = [
    "DeliverEmail",
    "GetConfig",
    "InitLogging",
    "LoadMailgunConfigFromDict",
    "SupportsAttachments",
    "ValidateConfig",
]
