"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import pytest

from wiremsg import Message


@pytest.fixture
def sample_headers() -> dict[str, str]:
    """Sample headers for testing."""
    return {"Content-Type": "application/json", "X-Request-Id": "12345"}


@pytest.fixture
def sample_payload() -> bytes:
    """Sample JSON payload for testing."""
    return b'{"key":"value"}'


@pytest.fixture
def sample_message(sample_headers: dict[str, str], sample_payload: bytes) -> Message:
    """Sample message for testing."""
    return Message(headers=sample_headers, payload=sample_payload)
