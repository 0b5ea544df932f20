"""Recipient formatting: names, bare addresses, and comma-joined lists."""

from __future__ import annotations

import pytest

from mailgun_adapter.domain.models import Address
from mailgun_adapter.domain.recipients import format_recipient, format_recipients


@pytest.mark.os_agnostic
def test_named_address_renders_name_and_angle_brackets() -> None:
    """A display name wraps the address in angle brackets."""
    assert format_recipient(Address("Jane Doe", "jane@example.com")) == "Jane Doe <jane@example.com>"


@pytest.mark.os_agnostic
def test_missing_name_renders_bare_address() -> None:
    """A None display name yields the address alone."""
    assert format_recipient(Address(None, "jane@example.com")) == "jane@example.com"


@pytest.mark.os_agnostic
def test_empty_name_renders_bare_address() -> None:
    """An empty display name is treated like no name."""
    assert format_recipient(Address("", "jane@example.com")) == "jane@example.com"


@pytest.mark.os_agnostic
def test_bare_string_passes_through_unchanged() -> None:
    """Strings are assumed to be formatted already."""
    assert format_recipient("Ops Team <ops@example.com>") == "Ops Team <ops@example.com>"


@pytest.mark.os_agnostic
def test_list_is_joined_with_comma_and_no_spaces() -> None:
    """Multiple recipients are comma-joined without whitespace."""
    recipients = [
        Address(None, "a@example.com"),
        Address("Bee", "b@example.com"),
        "c@example.com",
    ]

    assert format_recipients(recipients) == "a@example.com,Bee <b@example.com>,c@example.com"


@pytest.mark.os_agnostic
def test_single_address_is_formatted_without_joining() -> None:
    """A lone Address is formatted as a single recipient."""
    assert format_recipients(Address("Solo", "solo@example.com")) == "Solo <solo@example.com>"


@pytest.mark.os_agnostic
def test_single_string_is_not_split_into_characters() -> None:
    """A lone string recipient is not iterated character by character."""
    assert format_recipients("solo@example.com") == "solo@example.com"


@pytest.mark.os_agnostic
def test_empty_list_renders_empty_string() -> None:
    """No recipients produce an empty string."""
    assert format_recipients([]) == ""


@pytest.mark.os_agnostic
def test_address_from_pair_builds_address() -> None:
    """Tuples convert into structured addresses."""
    assert Address.from_pair(("Jane", "jane@example.com")) == Address("Jane", "jane@example.com")
