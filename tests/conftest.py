"""Pytest configuration and fixtures."""

from unittest.mock import AsyncMock

import pytest

from src.config.settings import Settings
from src.infrastructure.audit import AuditEntry
from src.infrastructure.llm import UpstreamResult


class ListAuditSink:
    """In-memory sink that keeps every recorded entry."""

    def __init__(self):
        self.entries: list[AuditEntry] = []

    def record(self, entry: AuditEntry) -> None:
        self.entries.append(entry)


@pytest.fixture
def settings():
    """Provide settings fixture, independent of the local environment."""
    return Settings(_env_file=None, anthropic_api_key="test-key", anthropic_base_url=None)


@pytest.fixture
def audit_sink():
    """Provide an in-memory audit sink."""
    return ListAuditSink()


@pytest.fixture
def upstream():
    """Provide a fake upstream client that always answers."""
    fake = AsyncMock()
    fake.generate.return_value = UpstreamResult(
        text="Mulch the bed and plant clover.",
        usage={"input_tokens": 120, "output_tokens": 80},
    )
    return fake
