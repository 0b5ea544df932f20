"""Shared pytest fixtures for body-building, config, and delivery tests.

Centralizes test infrastructure:
- All shared fixtures live here
- Tests import fixtures implicitly via pytest's conftest discovery
- Fixtures use descriptive names that read as plain English
"""

from __future__ import annotations

import contextlib
import os
import tempfile
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import httpx
import pytest
from lib_layered_config import Config

from mailgun_adapter.adapters.mailgun.config import MailgunConfig
from mailgun_adapter.adapters.memory import DeliverySpy
from mailgun_adapter.domain.models import Address, Email

_COVERAGE_BASENAME = ".coverage.mailgun_adapter"


def _purge_stale_coverage_files(cov_path: Path) -> None:
    """Delete leftover SQLite database and journal files from crashed runs."""
    for suffix in ("", "-journal", "-wal", "-shm"):
        with contextlib.suppress(FileNotFoundError):
            Path(str(cov_path) + suffix).unlink()


def pytest_configure(config: pytest.Config) -> None:
    """Redirect the coverage database to a local temp directory.

    Runs before pytest-cov creates its Coverage object, so network-mounted
    checkouts never hold the SQLite file.
    """
    if "COVERAGE_FILE" not in os.environ:
        cov_path = Path(tempfile.gettempdir()) / _COVERAGE_BASENAME
        _purge_stale_coverage_files(cov_path)
        os.environ["COVERAGE_FILE"] = str(cov_path)


def _load_dotenv() -> None:
    """Load .env file when it exists for integration test configuration."""
    from dotenv import load_dotenv

    env_file = Path(__file__).parent.parent / ".env"
    if env_file.exists():
        load_dotenv(env_file)


_load_dotenv()


@dataclass
class RecordingTransport:
    """httpx transport double that records requests and replays one response.

    Attributes:
        status_code: Status of the canned response.
        body: Body of the canned response.
        error: When set, raised instead of answering (simulates network failure).
        requests: Every request received, oldest first.
    """

    status_code: int = 200
    body: str = '{"id": "<20240101.1@mg.example.com>", "message": "Queued. Thank you."}'
    error: Exception | None = None
    requests: list[httpx.Request] = field(default_factory=lambda: [])

    def handle(self, request: httpx.Request) -> httpx.Response:
        request.read()
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return httpx.Response(
            self.status_code,
            text=self.body,
            headers={"content-type": "application/json", "x-mailgun-test": "1"},
        )

    def client(self) -> httpx.Client:
        return httpx.Client(transport=httpx.MockTransport(self.handle))

    @property
    def last_request(self) -> httpx.Request:
        return self.requests[-1]


@pytest.fixture
def recording_transport() -> RecordingTransport:
    """Provide a fresh recording transport answering HTTP 200.

    Example:
        def test_send(recording_transport: RecordingTransport, mailgun_config: MailgunConfig) -> None:
            with recording_transport.client() as client:
                deliver(email, mailgun_config, client=client)
            assert recording_transport.last_request.method == "POST"
    """
    return RecordingTransport()


@pytest.fixture
def mailgun_config() -> MailgunConfig:
    """Provide a valid MailgunConfig with short test credentials."""
    return MailgunConfig(api_key="k", domain="d.com")


@pytest.fixture
def simple_email() -> Email:
    """Provide the minimal text email used by end-to-end scenarios."""
    return Email(
        sender=Address(None, "s@x.com"),
        to=[Address(None, "r@x.com")],
        subject="Hi",
        text_body="Hello",
    )


@pytest.fixture
def delivery_spy() -> DeliverySpy:
    """Provide a fresh DeliverySpy per test."""
    return DeliverySpy()


@pytest.fixture
def clear_config_cache() -> Iterator[None]:
    """Clear the get_config lru_cache before each test.

    Only clears before, not after, to avoid errors when the function has
    been monkeypatched during the test.
    """
    from mailgun_adapter.adapters.config import loader as config_mod

    config_mod.get_config.cache_clear()
    yield


@pytest.fixture
def config_factory() -> Callable[[dict[str, Any]], Config]:
    """Create real Config instances from test data dicts without filesystem I/O.

    Example:
        def test_section(config_factory: Callable[[dict[str, Any]], Config]) -> None:
            config = config_factory({"mailgun": {"domain": "mg.example.com"}})
            assert config.get("mailgun.domain") == "mg.example.com"
    """

    def _factory(data: dict[str, Any]) -> Config:
        return Config(data, {})

    return _factory
