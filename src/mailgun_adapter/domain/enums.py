"""Type-safe domain enums for wire content types and provider variables."""

from __future__ import annotations

from enum import Enum


class ContentType(str, Enum):
    """Request body encodings accepted by the messages endpoint.

    Inherits from str so members compare equal to the raw header value.

    Attributes:
        FORM_URLENCODED: Flat form body, used when there are no attachments.
        MULTIPART: Multipart form body, used when attachments are present.

    Example:
        >>> ContentType.FORM_URLENCODED.value
        'application/x-www-form-urlencoded'
        >>> ContentType.MULTIPART == "multipart/form-data"
        True
    """

    FORM_URLENCODED = "application/x-www-form-urlencoded"
    MULTIPART = "multipart/form-data"


class MailgunVar(str, Enum):
    """Private email options forwarded to Mailgun as ``o:`` fields.

    Anything not listed here is dropped from the wire body.

    Example:
        >>> MailgunVar.TRACKING_CLICKS.value
        'tracking-clicks'
        >>> MailgunVar.is_known("tag")
        True
        >>> MailgunVar.is_known("unknown_key")
        False
    """

    TAG = "tag"
    CAMPAIGN = "campaign"
    TESTMODE = "testmode"
    TRACKING = "tracking"
    TRACKING_CLICKS = "tracking-clicks"
    TRACKING_OPENS = "tracking-opens"

    @classmethod
    def is_known(cls, key: object) -> bool:
        """Return True when *key* names an allow-listed provider variable."""
        if isinstance(key, MailgunVar):
            return True
        return isinstance(key, str) and key in _MAILGUN_VAR_VALUES


_MAILGUN_VAR_VALUES = frozenset(member.value for member in MailgunVar)


__all__ = [
    "ContentType",
    "MailgunVar",
]
