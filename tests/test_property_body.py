"""Property-based tests for recipient formatting and body building.

Uses hypothesis to verify the body builder's contracts across generated
emails: content type follows the attachment list, empty cc/bcc never reach
the wire, attachments are reversed, and named addresses survive a
format-then-parse round trip.
"""

from __future__ import annotations

from email.utils import parseaddr

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from mailgun_adapter.domain.body import build_fields, build_file_parts, content_type, to_mailgun_body
from mailgun_adapter.domain.enums import ContentType, MailgunVar
from mailgun_adapter.domain.models import Address, Attachment, Email
from mailgun_adapter.domain.recipients import format_recipient

# ======================== Strategy helpers ========================

_email_local_part = st.from_regex(r"[a-z][a-z0-9_]{0,20}", fullmatch=True)
_email_domain = st.from_regex(r"[a-z][a-z0-9]{0,10}\.[a-z]{2,4}", fullmatch=True)
_valid_email = st.builds(lambda local, domain: f"{local}@{domain}", _email_local_part, _email_domain)  # type: ignore[arg-type]
_display_name = st.from_regex(r"[A-Z][a-z]{0,10}( [A-Z][a-z]{0,10})?", fullmatch=True)
_address = st.builds(Address, st.one_of(st.none(), st.just(""), _display_name), _valid_email)
_attachment = st.builds(
    Attachment,
    filename=st.from_regex(r"[a-z]{1,8}\.[a-z]{2,3}", fullmatch=True),
    data=st.binary(max_size=64),
)
_emails = st.builds(
    Email,
    sender=_address,
    to=st.lists(_address, min_size=1, max_size=4),
    subject=st.text(max_size=40),
    cc=st.lists(_address, max_size=3),
    bcc=st.lists(_address, max_size=3),
    attachments=st.lists(_attachment, max_size=4),
)


# ======================== Recipient formatting ========================


@pytest.mark.os_agnostic
@given(name=_display_name, email=_valid_email)
@settings(max_examples=100)
def test_named_address_round_trips_through_parser(name: str, email: str) -> None:
    """Formatting a named address and parsing it back yields the same pair."""
    assert parseaddr(format_recipient(Address(name, email))) == (name, email)


@pytest.mark.os_agnostic
@given(name=st.one_of(st.none(), st.just("")), email=_valid_email)
@settings(max_examples=50)
def test_unnamed_address_formats_to_bare_address(name: str | None, email: str) -> None:
    """A None or empty name yields exactly the address."""
    assert format_recipient(Address(name, email)) == email


# ======================== Body building ========================


@pytest.mark.os_agnostic
@given(email=_emails)
@settings(max_examples=100)
def test_content_type_tracks_attachment_list(email: Email) -> None:
    """Empty attachment lists are form encoded; anything else is multipart."""
    expected = ContentType.MULTIPART if email.attachments else ContentType.FORM_URLENCODED

    assert content_type(email) is expected
    assert to_mailgun_body(email).content_type is expected


@pytest.mark.os_agnostic
@given(email=_emails)
@settings(max_examples=100)
def test_empty_copy_lists_never_reach_the_wire(email: Email) -> None:
    """cc and bcc fields exist exactly when their lists are non-empty."""
    fields = build_fields(email)

    assert ("cc" in fields) is bool(email.cc)
    assert ("bcc" in fields) is bool(email.bcc)


@pytest.mark.os_agnostic
@given(email=_emails)
@settings(max_examples=100)
def test_file_parts_are_attachments_reversed(email: Email) -> None:
    """File parts list the attachments last-first."""
    parts = build_file_parts(email)

    assert [(part.filename, part.data) for part in parts] == [
        (attachment.filename, attachment.data) for attachment in reversed(email.attachments)
    ]


@pytest.mark.os_agnostic
@given(
    private=st.dictionaries(
        st.one_of(st.sampled_from([var.value for var in MailgunVar]), st.text(min_size=1, max_size=15)),
        st.text(max_size=10),
        max_size=8,
    )
)
@settings(max_examples=100)
def test_only_allow_listed_options_are_forwarded(private: dict[str, str]) -> None:
    """Every o: field comes from an allow-listed private key."""
    email = Email(sender="s@x.com", to=["r@x.com"], private=private)

    option_keys = {key[2:] for key in build_fields(email) if key.startswith("o:")}

    assert option_keys == {key for key in private if MailgunVar.is_known(key)}
