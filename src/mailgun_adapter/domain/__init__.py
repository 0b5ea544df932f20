"""Domain layer - pure message modelling and wire-body building, no I/O.

Contents:
    * :mod:`.models` - Email, Address, Attachment value objects
    * :mod:`.recipients` - Recipient formatting
    * :mod:`.body` - Email to wire-body transformation
    * :mod:`.enums` - Content types and provider variables
    * :mod:`.errors` - Domain exception types
"""

from __future__ import annotations

from .body import (
    FilePart,
    FormBody,
    MultipartBody,
    RenderedBody,
    WireBody,
    build_fields,
    build_file_parts,
    content_type,
    to_mailgun_body,
)
from .enums import ContentType, MailgunVar
from .errors import ApiError, ConfigurationError
from .models import Address, Attachment, Email, Recipient
from .recipients import format_recipient, format_recipients

__all__ = [
    # Models
    "Address",
    "Attachment",
    "Email",
    "Recipient",
    # Body building
    "FilePart",
    "FormBody",
    "MultipartBody",
    "RenderedBody",
    "WireBody",
    "build_fields",
    "build_file_parts",
    "content_type",
    "format_recipient",
    "format_recipients",
    "to_mailgun_body",
    # Enums
    "ContentType",
    "MailgunVar",
    # Errors
    "ApiError",
    "ConfigurationError",
]
