"""In-memory Mailgun adapters for testing.

Provides delivery and config functions that satisfy the same Protocols as
the production adapters but perform no HTTP requests.

Contents:
    * :class:`DeliverySpy` - Captures deliveries for test assertions.
    * :func:`load_mailgun_config_from_dict_in_memory` - Config loader without defaults file.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ...domain.body import WireBody, to_mailgun_body
from ...domain.errors import ApiError
from ...domain.models import Email
from ..mailgun.config import SERVICE_NAME, MailgunConfig, validate_config
from ..mailgun.transport import DeliveryResult

if TYPE_CHECKING:
    import httpx


@dataclass(frozen=True, slots=True)
class CapturedDelivery:
    """One recorded deliver call with the body that would have been sent."""

    email: Email
    config: MailgunConfig
    body: WireBody


def _empty_delivery_list() -> list[CapturedDelivery]:
    """Create an empty typed list for delivery records."""
    return []


@dataclass
class DeliverySpy:
    """Captures deliver calls for test assertions.

    The body builder still runs, so assertions can inspect the exact wire
    fields. Each test should create its own spy.

    Attributes:
        deliveries: Recorded calls, oldest first.
        status_code: Status reported by successful fake deliveries.
        fail_with_status: When set, deliver raises an HTTP-status ApiError.
        raise_exception: When set, deliver raises this exception.

    Example:
        >>> spy = DeliverySpy()
        >>> config = MailgunConfig(api_key="k", domain="d.com")
        >>> spy.deliver(Email(sender="s@x.com", to=["r@x.com"], subject="Hi"), config).status_code
        200
        >>> spy.deliveries[0].body.fields["subject"]
        'Hi'
    """

    deliveries: list[CapturedDelivery] = field(default_factory=_empty_delivery_list)
    status_code: int = 200
    fail_with_status: int | None = None
    raise_exception: Exception | None = None

    def clear(self) -> None:
        """Reset captured data for the next test."""
        self.deliveries.clear()
        self.fail_with_status = None
        self.raise_exception = None

    def deliver(
        self,
        email: Email,
        config: MailgunConfig,
        *,
        client: httpx.Client | None = None,
    ) -> DeliveryResult:
        """Record the call and answer like the provider would.

        Raises:
            ApiError: When fail_with_status is set.
            Exception: If raise_exception is set, raises that exception.
        """
        body = to_mailgun_body(email)
        self.deliveries.append(CapturedDelivery(email=email, config=config, body=body))
        if self.raise_exception is not None:
            raise self.raise_exception
        if self.fail_with_status is not None:
            raise ApiError.from_response(SERVICE_NAME, self.fail_with_status, "spy failure", body)
        return DeliveryResult(
            status_code=self.status_code,
            headers={"content-type": "application/json"},
            body=f'{{"id": "<spy-{len(self.deliveries)}@{config.domain}>", "message": "Queued. Thank you."}}',
        )


def load_mailgun_config_from_dict_in_memory(config_dict: Mapping[str, Any]) -> MailgunConfig:
    """Validate the ``mailgun`` section using the real model and gate."""
    section = config_dict.get("mailgun", {})
    return validate_config(section if section else {})


__all__ = [
    "CapturedDelivery",
    "DeliverySpy",
    "load_mailgun_config_from_dict_in_memory",
]
