"""Immutable value objects describing an outgoing email."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class Address:
    """A mailbox with an optional display name.

    Example:
        >>> Address("Jane Doe", "jane@example.com").email
        'jane@example.com'
        >>> Address.from_pair((None, "ops@example.com"))
        Address(name=None, email='ops@example.com')
    """

    name: str | None
    email: str

    @classmethod
    def from_pair(cls, pair: tuple[str | None, str]) -> Address:
        """Build an Address from a ``(name, email)`` tuple."""
        name, email = pair
        return cls(name, email)


Recipient = Address | str
"""Either a structured :class:`Address` or an already-formatted address string."""


@dataclass(frozen=True, slots=True)
class Attachment:
    """An in-memory file attached to an email."""

    filename: str
    data: bytes
    content_type: str | None = None

    @classmethod
    def from_path(cls, path: Path | str, *, filename: str | None = None, content_type: str | None = None) -> Attachment:
        """Read *path* eagerly into an Attachment.

        Args:
            path: File to read.
            filename: Name to present to recipients. Defaults to the file's name.
            content_type: Explicit MIME type. Guessed from the filename when None.

        Raises:
            FileNotFoundError: When *path* does not exist.
        """
        source = Path(path)
        return cls(
            filename=filename if filename is not None else source.name,
            data=source.read_bytes(),
            content_type=content_type,
        )


def _empty_headers() -> dict[str, str | None]:
    return {}


def _empty_private() -> dict[str, Any]:
    return {}


@dataclass(frozen=True, slots=True)
class Email:
    """A fully built message ready to hand to :func:`deliver`.

    The mailer that builds the message guarantees a sender and at least one
    ``to`` recipient. A reply-to override is carried as the ``reply-to``
    entry of ``headers``.

    Attributes:
        sender: The ``From`` mailbox.
        to: Primary recipients, in order.
        subject: Subject line, sent even when empty.
        cc: Carbon-copy recipients.
        bcc: Blind carbon-copy recipients.
        text_body: Plain-text body, omitted when None.
        html_body: HTML body, omitted when None.
        headers: Raw header name to value pairs.
        private: Provider-specific options such as ``tag`` or ``testmode``.
        attachments: Files to attach, in order.
    """

    sender: Recipient
    to: Sequence[Recipient]
    subject: str = ""
    cc: Sequence[Recipient] = ()
    bcc: Sequence[Recipient] = ()
    text_body: str | None = None
    html_body: str | None = None
    headers: Mapping[str, str | None] = field(default_factory=_empty_headers)
    private: Mapping[str, Any] = field(default_factory=_empty_private)
    attachments: Sequence[Attachment] = ()

    @property
    def reply_to(self) -> str | None:
        """Return the reply-to override, or None when unset."""
        return self.headers.get("reply-to")


__all__ = [
    "Address",
    "Attachment",
    "Email",
    "Recipient",
]
