"""In-memory adapter implementations for testing.

Lightweight implementations of the application ports that operate entirely
in memory -- no filesystem, no HTTP, no logging framework.

Contents:
    * :mod:`.config` - In-memory configuration adapter
    * :mod:`.mailgun` - In-memory delivery adapter (DeliverySpy class)
    * :mod:`.logging` - In-memory logging adapter (LoggingSpy class)
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .config import config_from_mapping, get_config_in_memory
from .logging import LoggingSpy
from .mailgun import (
    CapturedDelivery,
    DeliverySpy,
    load_mailgun_config_from_dict_in_memory,
)

# Static conformance assertions
if TYPE_CHECKING:
    from mailgun_adapter.application.ports import (
        DeliverEmail,
        GetConfig,
        InitLogging,
        LoadMailgunConfigFromDict,
    )

    _assert_get_config: GetConfig = get_config_in_memory
    _assert_init_logging: InitLogging = LoggingSpy().init_logging
    _assert_load_mailgun_config: LoadMailgunConfigFromDict = load_mailgun_config_from_dict_in_memory
    _assert_deliver: DeliverEmail = DeliverySpy().deliver

__all__ = [
    "CapturedDelivery",
    "DeliverySpy",
    "LoggingSpy",
    "config_from_mapping",
    "get_config_in_memory",
    "load_mailgun_config_from_dict_in_memory",
]
