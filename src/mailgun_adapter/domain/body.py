"""Pure transformation of an :class:`Email` into a Mailgun request body.

No I/O happens here. :func:`to_mailgun_body` picks the body flavour from the
attachment list, assembles the form fields in a fixed order, and returns one
of the two :data:`WireBody` variants. Rendering a variant into bytes is a
method on the variant, so the ``Content-Type`` always matches the encoding.

Contents:
    * :func:`content_type` - encoding chosen for an email.
    * :func:`build_fields` - ordered non-file form fields.
    * :func:`build_file_parts` - attachment parts, last attachment first.
    * :func:`to_mailgun_body` - the complete wire body.
    * :class:`FormBody` / :class:`MultipartBody` - the two body variants.
"""

from __future__ import annotations

import mimetypes
import os
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, ClassVar
from urllib.parse import urlencode

from .enums import ContentType, MailgunVar
from .models import Attachment, Email
from .recipients import format_recipients

FieldValue = str | list[str]
"""A form value; lists are sent as repeated fields of the same name."""

ATTACHMENT_FIELD = "attachment"
DEFAULT_ATTACHMENT_TYPE = "application/octet-stream"
_CRLF = b"\r\n"


@dataclass(frozen=True, slots=True)
class RenderedBody:
    """Bytes ready for the HTTP request plus the matching header value."""

    content_type: str
    content: bytes


@dataclass(frozen=True, slots=True)
class FilePart:
    """One attachment as a multipart file part.

    The filename is interpolated into the disposition verbatim; embedded
    quote characters are not escaped.

    Example:
        >>> FilePart(filename="report.pdf", data=b"%PDF", content_type="application/pdf").disposition
        'form-data; name="attachment"; filename="report.pdf"'
    """

    filename: str
    data: bytes
    content_type: str
    name: str = ATTACHMENT_FIELD

    @property
    def disposition(self) -> str:
        return f'form-data; name="{self.name}"; filename="{self.filename}"'


@dataclass(frozen=True, slots=True)
class FormBody:
    """Flat field mapping sent as ``application/x-www-form-urlencoded``.

    Example:
        >>> FormBody({"subject": "Hi there", "to": "a@example.com"}).render().content
        b'subject=Hi+there&to=a%40example.com'
    """

    fields: Mapping[str, FieldValue]
    content_type: ClassVar[ContentType] = ContentType.FORM_URLENCODED

    def encode(self) -> str:
        return urlencode(list(self.fields.items()), doseq=True)

    def render(self) -> RenderedBody:
        return RenderedBody(self.content_type.value, self.encode().encode("ascii"))

    def describe(self) -> str:
        return self.encode()


def _new_boundary() -> str:
    return os.urandom(16).hex()


@dataclass(frozen=True, slots=True)
class MultipartBody:
    """Field parts followed by file parts, sent as ``multipart/form-data``.

    The boundary is generated per body and excluded from equality so two
    bodies built from the same email compare equal.
    """

    fields: Sequence[tuple[str, str]]
    files: Sequence[FilePart]
    boundary: str = field(default_factory=_new_boundary, compare=False, repr=False)
    content_type: ClassVar[ContentType] = ContentType.MULTIPART

    @property
    def parts(self) -> list[tuple[str, str] | FilePart]:
        """All parts in wire order."""
        return [*self.fields, *self.files]

    def render(self) -> RenderedBody:
        delimiter = b"--" + self.boundary.encode("ascii") + _CRLF
        chunks: list[bytes] = []
        for name, value in self.fields:
            chunks.append(delimiter)
            chunks.append(f'Content-Disposition: form-data; name="{name}"'.encode() + _CRLF + _CRLF)
            chunks.append(value.encode("utf-8") + _CRLF)
        for part in self.files:
            chunks.append(delimiter)
            chunks.append(f"Content-Disposition: {part.disposition}".encode() + _CRLF)
            chunks.append(f"Content-Type: {part.content_type}".encode() + _CRLF + _CRLF)
            chunks.append(part.data + _CRLF)
        chunks.append(b"--" + self.boundary.encode("ascii") + b"--" + _CRLF)
        return RenderedBody(f"{self.content_type.value}; boundary={self.boundary}", b"".join(chunks))

    def describe(self) -> str:
        lines = [f"{name}={value!r}" for name, value in self.fields]
        lines.extend(
            f"{part.name}: {part.filename!r} ({len(part.data)} bytes, {part.content_type})" for part in self.files
        )
        return "\n".join(lines)


WireBody = FormBody | MultipartBody
"""Either body variant; dispatch on the concrete type when encoding."""


def _scalar(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value if isinstance(value, str) else str(value)


def _field_value(value: Any) -> FieldValue:
    """Convert a header or option value into its form representation.

    Example:
        >>> _field_value("yes")
        'yes'
        >>> _field_value(True)
        'true'
        >>> _field_value(["newsletter", 2024])
        ['newsletter', '2024']
        >>> _field_value(None)
        ''
    """
    if isinstance(value, (list, tuple)):
        return [_scalar(item) for item in value]
    return _scalar(value)


def content_type(email: Email) -> ContentType:
    """Return the body encoding for *email*.

    Example:
        >>> content_type(Email(sender="a@example.com", to=["b@example.com"]))
        <ContentType.FORM_URLENCODED: 'application/x-www-form-urlencoded'>
    """
    if not email.attachments:
        return ContentType.FORM_URLENCODED
    return ContentType.MULTIPART


def build_fields(email: Email) -> dict[str, FieldValue]:
    """Assemble every non-file field in wire order.

    A ``reply-to`` header is emitted twice, as ``h:Reply-To`` and again as
    ``h:reply-to`` with the rest of the headers. A None reply-to is left out
    of ``h:Reply-To`` only; None header and option values are sent empty.
    """
    fields: dict[str, FieldValue] = {
        "from": format_recipients(email.sender),
        "to": format_recipients(email.to),
    }
    if email.cc:
        fields["cc"] = format_recipients(email.cc)
    if email.bcc:
        fields["bcc"] = format_recipients(email.bcc)

    reply_to = email.reply_to
    if reply_to is not None:
        fields["h:Reply-To"] = _field_value(reply_to)

    fields["subject"] = email.subject
    if email.html_body is not None:
        fields["html"] = email.html_body
    if email.text_body is not None:
        fields["text"] = email.text_body

    for name, value in email.headers.items():
        fields[f"h:{name}"] = _field_value(value)

    for key, value in email.private.items():
        if MailgunVar.is_known(key):
            option = key.value if isinstance(key, MailgunVar) else key
            fields[f"o:{option}"] = _field_value(value)

    return fields


def _file_part(attachment: Attachment) -> FilePart:
    guessed, _ = mimetypes.guess_type(attachment.filename)
    return FilePart(
        filename=attachment.filename,
        data=attachment.data,
        content_type=attachment.content_type or guessed or DEFAULT_ATTACHMENT_TYPE,
    )


def build_file_parts(email: Email) -> list[FilePart]:
    """Return one file part per attachment, last attachment first."""
    return [_file_part(attachment) for attachment in reversed(email.attachments)]


def _flatten(fields: Mapping[str, FieldValue]) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for name, value in fields.items():
        if isinstance(value, list):
            pairs.extend((name, item) for item in value)
        else:
            pairs.append((name, value))
    return pairs


def to_mailgun_body(email: Email) -> WireBody:
    """Build the complete wire body for *email*.

    Without attachments the result is a :class:`FormBody`; otherwise a
    :class:`MultipartBody` carrying the same fields followed by the file
    parts. The variant's ``content_type`` always equals
    :func:`content_type` for the same email.
    """
    fields = build_fields(email)
    if content_type(email) is ContentType.FORM_URLENCODED:
        return FormBody(fields)
    return MultipartBody(fields=_flatten(fields), files=build_file_parts(email))


__all__ = [
    "ATTACHMENT_FIELD",
    "DEFAULT_ATTACHMENT_TYPE",
    "FieldValue",
    "FilePart",
    "FormBody",
    "MultipartBody",
    "RenderedBody",
    "WireBody",
    "build_fields",
    "build_file_parts",
    "content_type",
    "to_mailgun_body",
]
