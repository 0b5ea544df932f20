"""Adapters layer - infrastructure and framework integrations.

Contains adapter implementations that connect the domain to external
systems (Mailgun HTTP API, layered configuration, logging).

Contents:
    * :mod:`.mailgun` - Email delivery via the Mailgun HTTP API
    * :mod:`.config` - Layered configuration loading
    * :mod:`.logging` - Logging setup with lib_log_rich
    * :mod:`.memory` - In-memory implementations for tests
"""

from __future__ import annotations

__all__: list[str] = []
