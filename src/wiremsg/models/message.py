"""Message model carried by the wiremsg codec.

A message is a set of named text headers plus an opaque byte payload. The
model deliberately carries no wire-format limits: those are checked by
``encode``, while ``decode`` may legitimately return larger values.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..codec.layout import header_bytes


class Message(BaseModel):
    """Headers plus payload.

    Two messages are equal when their header mappings hold the same
    name/value pairs (insertion order is ignored) and their payloads are
    byte-for-byte equal.

    Example:
        >>> msg = Message(headers={"Content-Type": "text/plain"}, payload=b"hi")
        >>> msg == Message(headers={"Content-Type": "text/plain"}, payload=b"hi")
        True

    Attributes:
        headers: Header name to header value
        payload: Raw payload bytes, uninterpreted by the codec
    """

    model_config = ConfigDict(
        # Lax mode accepts bytearray (and str) payloads as bytes
        strict=False,
        validate_assignment=True,
        extra="forbid",
    )

    headers: dict[str, str] = Field(default_factory=dict)
    payload: bytes = b""

    def sorted_headers(self) -> list[tuple[str, str]]:
        """Return header pairs in wire order (ascending name bytes)."""
        return sorted(self.headers.items(), key=lambda item: header_bytes(item[0]))
