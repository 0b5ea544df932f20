"""Composition root wiring adapters to application ports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

# Configuration services
from ..adapters.config.loader import get_config

# Logging services
from ..adapters.logging.setup import init_logging

# Mailgun services
from ..adapters.mailgun import (
    deliver,
    load_mailgun_config_from_dict,
    supports_attachments,
    validate_config,
)

# Static conformance assertions - pyright verifies that each adapter function
# structurally satisfies its corresponding Protocol at type-check time.
if TYPE_CHECKING:
    from ..adapters.memory import DeliverySpy, LoggingSpy
    from ..application.ports import (
        DeliverEmail,
        GetConfig,
        InitLogging,
        LoadMailgunConfigFromDict,
        SupportsAttachments,
        ValidateConfig,
    )

    _assert_get_config: GetConfig = get_config
    _assert_init_logging: InitLogging = init_logging
    _assert_validate_config: ValidateConfig = validate_config
    _assert_load_mailgun_config_from_dict: LoadMailgunConfigFromDict = load_mailgun_config_from_dict
    _assert_deliver: DeliverEmail = deliver
    _assert_supports_attachments: SupportsAttachments = supports_attachments


@dataclass(frozen=True, slots=True)
class AppServices:
    """Frozen container holding all application port implementations."""

    get_config: GetConfig
    init_logging: InitLogging
    validate_config: ValidateConfig
    load_mailgun_config_from_dict: LoadMailgunConfigFromDict
    deliver: DeliverEmail
    supports_attachments: SupportsAttachments


def build_production() -> AppServices:
    """Wire production adapters into an AppServices container."""
    return AppServices(
        get_config=get_config,
        init_logging=init_logging,
        validate_config=validate_config,
        load_mailgun_config_from_dict=load_mailgun_config_from_dict,
        deliver=deliver,
        supports_attachments=supports_attachments,
    )


def build_testing(
    *,
    spy: DeliverySpy | None = None,
    logging_spy: LoggingSpy | None = None,
) -> AppServices:
    """Wire in-memory adapters into an AppServices container.

    Args:
        spy: Optional DeliverySpy for capturing deliveries. When None, a
            fresh spy is created. Pass your own to assert on captured emails.
        logging_spy: Optional LoggingSpy recording init_logging calls.

    Returns:
        AppServices container with in-memory adapters. Config validation
        stays real so setup errors still surface in tests.
    """
    from ..adapters.memory import (
        DeliverySpy,
        LoggingSpy,
        get_config_in_memory,
        load_mailgun_config_from_dict_in_memory,
    )

    delivery_spy = spy if spy is not None else DeliverySpy()
    recorder = logging_spy if logging_spy is not None else LoggingSpy()

    return AppServices(
        get_config=get_config_in_memory,
        init_logging=recorder.init_logging,
        validate_config=validate_config,
        load_mailgun_config_from_dict=load_mailgun_config_from_dict_in_memory,
        deliver=delivery_spy.deliver,
        supports_attachments=supports_attachments,
    )


def build_from_config(*, profile: str | None = None, services: AppServices | None = None) -> AppServices:
    """Load layered configuration, start logging, and return wired services.

    Convenience for applications: after this call the caller validates the
    ``[mailgun]`` section once with ``services.load_mailgun_config_from_dict``
    and reuses the resulting config for every send.
    """
    wired = services if services is not None else build_production()
    wired.init_logging(wired.get_config(profile=profile))
    return wired


__all__ = [
    # Configuration
    "get_config",
    # Logging
    "init_logging",
    # Mailgun
    "deliver",
    "load_mailgun_config_from_dict",
    "supports_attachments",
    "validate_config",
    # Composition
    "AppServices",
    "build_from_config",
    "build_production",
    "build_testing",
]
