"""Unit tests for the Message model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from wiremsg import Message


class TestMessage:
    """Test message construction and equality."""

    def test_defaults(self) -> None:
        """Test that an empty message has no headers and no payload."""
        msg = Message()

        assert msg.headers == {}
        assert msg.payload == b""

    def test_equality_ignores_header_order(self) -> None:
        """Test that insertion order does not affect equality."""
        first = Message(headers={"A": "1", "B": "2"}, payload=b"x")
        second = Message(headers={"B": "2", "A": "1"}, payload=b"x")

        assert first == second

    def test_inequality_on_payload(self) -> None:
        """Test that payload bytes are compared."""
        assert Message(payload=b"x") != Message(payload=b"y")

    def test_inequality_on_header_value(self) -> None:
        """Test that header values are compared."""
        assert Message(headers={"A": "1"}) != Message(headers={"A": "2"})

    def test_bytearray_payload_coerced(self) -> None:
        """Test that a bytearray payload is stored as bytes."""
        msg = Message(payload=bytearray(b"abc"))

        assert isinstance(msg.payload, bytes)
        assert msg == Message(payload=b"abc")

    def test_sorted_headers(self) -> None:
        """Test wire-order header listing."""
        msg = Message(headers={"b": "2", "B": "3", "a": "1"})

        assert msg.sorted_headers() == [("B", "3"), ("a", "1"), ("b", "2")]


class TestMessageValidation:
    """Test Pydantic validation of message fields."""

    def test_extra_field_rejected(self) -> None:
        """Test that unknown fields are forbidden."""
        with pytest.raises(ValidationError):
            Message(headers={}, payload=b"", version=1)  # type: ignore[call-arg]

    def test_non_string_header_rejected(self) -> None:
        """Test that header values must be text."""
        with pytest.raises(ValidationError):
            Message(headers={"A": 1})  # type: ignore[dict-item]

    def test_assignment_validated(self) -> None:
        """Test that assignment is validated."""
        msg = Message()

        with pytest.raises(ValidationError):
            msg.headers = {"A": None}  # type: ignore[dict-item]
