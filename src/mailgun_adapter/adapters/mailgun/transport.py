"""Mailgun HTTP transport and response classification.

Provides the deliver function that POSTs a built wire body to the
messages endpoint via httpx and turns the outcome into a DeliveryResult
or an ApiError. One attempt per call; retries belong to the caller.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, cast

import httpx
import orjson

from mailgun_adapter.domain.body import WireBody, to_mailgun_body
from mailgun_adapter.domain.errors import ApiError
from mailgun_adapter.domain.models import Email
from mailgun_adapter.domain.recipients import format_recipients

from .config import SERVICE_NAME, MailgunConfig

logger = logging.getLogger(__name__)

_LAST_SUCCESS_STATUS = 299


@dataclass(frozen=True, slots=True)
class DeliveryResult:
    """The provider's answer to an accepted send, returned as-is.

    Example:
        >>> result = DeliveryResult(200, {}, '{"id": "<1@mg.example.com>", "message": "Queued. Thank you."}')
        >>> result.message_id
        '<1@mg.example.com>'
    """

    status_code: int
    headers: Mapping[str, str]
    body: str

    def json(self) -> Any:
        """Parse the response body as JSON.

        Raises:
            orjson.JSONDecodeError: When the body is not valid JSON.
        """
        return orjson.loads(self.body)

    @property
    def message_id(self) -> str | None:
        """Return the queued message id, or None when the body carries none."""
        try:
            payload = self.json()
        except orjson.JSONDecodeError:
            return None
        if isinstance(payload, dict):
            value = cast(dict[str, Any], payload).get("id")
            return str(value) if value is not None else None
        return None


def supports_attachments() -> bool:
    """Report that this adapter can send attachments."""
    return True


def _build_headers(config: MailgunConfig, content_type: str) -> dict[str, str]:
    return {
        "Content-Type": content_type,
        "Authorization": config.authorization,
    }


def _classify(response: httpx.Response, request_body: WireBody) -> DeliveryResult:
    """Map an HTTP response to a result, raising for any status above 299."""
    if response.status_code > _LAST_SUCCESS_STATUS:
        logger.error(
            "Mailgun rejected the message",
            extra={"status_code": response.status_code, "response_body": response.text},
        )
        raise ApiError.from_response(SERVICE_NAME, response.status_code, response.text, request_body)
    return DeliveryResult(
        status_code=response.status_code,
        headers=dict(response.headers),
        body=response.text,
    )


def _post(client: httpx.Client, url: str, headers: Mapping[str, str], content: bytes) -> httpx.Response:
    try:
        return client.post(url, headers=headers, content=content)
    except httpx.RequestError as exc:
        logger.error("Mailgun request failed", extra={"url": url, "reason": repr(exc)})
        logger.debug("Mailgun transport failure", exc_info=True)
        raise ApiError.from_transport_failure(repr(exc)) from exc


def deliver(email: Email, config: MailgunConfig, *, client: httpx.Client | None = None) -> DeliveryResult:
    """Send *email* through the Mailgun messages API.

    Args:
        email: The fully built message.
        config: Validated adapter configuration; ``base_uri`` is read on
            every call.
        client: Optional httpx client to send with. Used as-is and left open.
            When None, a client with ``config.timeout`` is opened for this
            call only.

    Returns:
        Status code, headers and body of the accepted request.

    Raises:
        ApiError: The provider answered with a status above 299, or the
            request could not be completed at all.

    Side Effects:
        One HTTP POST. Logs the attempt at INFO level and failures at
        ERROR level. The API key is never logged.
    """
    body = to_mailgun_body(email)
    rendered = body.render()
    url = config.messages_url
    headers = _build_headers(config, rendered.content_type)

    logger.info(
        "Sending email via Mailgun",
        extra={
            "url": url,
            "sender": format_recipients(email.sender),
            "recipients": format_recipients(email.to),
            "subject": email.subject,
            "content_type": body.content_type.value,
            "attachment_count": len(email.attachments),
        },
    )

    if client is not None:
        response = _post(client, url, headers, rendered.content)
    else:
        with httpx.Client(timeout=config.timeout) as owned_client:
            response = _post(owned_client, url, headers, rendered.content)

    result = _classify(response, body)
    logger.info(
        "Email accepted by Mailgun",
        extra={"status_code": result.status_code, "message_id": result.message_id},
    )
    return result


__all__ = [
    "DeliveryResult",
    "deliver",
    "supports_attachments",
]
