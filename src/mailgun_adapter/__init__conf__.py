"""Static package metadata and layered-configuration identifiers."""

from __future__ import annotations

from importlib import metadata as _metadata

name = "mailgun_adapter"
title = "Mailgun HTTP API adapter"
homepage = "https://github.com/bitranox/mailgun_adapter"
author = "bitranox"

LAYEREDCONF_VENDOR = "bitranox"
LAYEREDCONF_APP = "Mailgun Adapter"
LAYEREDCONF_SLUG = "mailgun-adapter"


def _resolve_version() -> str:
    """Return the installed distribution version, or a placeholder in a source checkout."""
    try:
        return _metadata.version("mailgun-adapter")
    except _metadata.PackageNotFoundError:
        return "0.0.0.dev0"


version = _resolve_version()


def print_info() -> None:
    """Print a short summary of the package metadata.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for mailgun_adapter:
        ...
    """
    fields = (
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
    )
    pad = max(len(label) for label, _ in fields)
    print(f"Info for {name}:\n")
    for label, value in fields:
        print(f"    {label.ljust(pad)} = {value}")


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "homepage",
    "name",
    "print_info",
    "title",
    "version",
]
