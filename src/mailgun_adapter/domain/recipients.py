"""Recipient formatting for the ``from``/``to``/``cc``/``bcc`` wire fields."""

from __future__ import annotations

from collections.abc import Sequence

from .models import Address, Recipient


def format_recipient(recipient: Recipient) -> str:
    """Render a single recipient as Mailgun expects it.

    A structured address with a display name becomes ``"Name <email>"``;
    a missing or empty name yields the bare address. Plain strings are
    assumed to be formatted already and pass through unchanged.

    Example:
        >>> format_recipient(Address("Jane Doe", "jane@example.com"))
        'Jane Doe <jane@example.com>'
        >>> format_recipient(Address("", "jane@example.com"))
        'jane@example.com'
        >>> format_recipient("Ops <ops@example.com>")
        'Ops <ops@example.com>'
    """
    if isinstance(recipient, Address):
        if not recipient.name:
            return recipient.email
        return f"{recipient.name} <{recipient.email}>"
    return recipient


def format_recipients(recipients: Recipient | Sequence[Recipient]) -> str:
    """Render one recipient or a list of them, comma-joined without spaces.

    Example:
        >>> format_recipients([Address(None, "a@example.com"), Address("B", "b@example.com")])
        'a@example.com,B <b@example.com>'
        >>> format_recipients(Address(None, "solo@example.com"))
        'solo@example.com'
    """
    if isinstance(recipients, (Address, str)):
        return format_recipient(recipients)
    return ",".join(format_recipient(recipient) for recipient in recipients)


__all__ = [
    "format_recipient",
    "format_recipients",
]
