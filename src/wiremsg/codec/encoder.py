"""Binary encoder for wiremsg messages.

This module provides the encode() function that converts a Message into its
wire representation: header count, size table, header content, payload.
"""

from __future__ import annotations

import logging
import struct

from ..exceptions import (
    EncodeError,
    HeaderFieldTooLargeError,
    InvalidHeaderCountError,
    PayloadTooLargeError,
)
from ..models.message import Message
from .layout import MAX_HEADER_FIELD_SIZE, MAX_HEADERS, MAX_PAYLOAD_SIZE, header_bytes

logger = logging.getLogger(__name__)


def encode(message: Message) -> bytes:
    """Encode a message to the wire format.

    Headers are written in ascending order of name, so two messages with the
    same header set always encode to identical bytes.

    Args:
        message: Message to encode

    Returns:
        Encoded bytes

    Raises:
        InvalidHeaderCountError: If the message has more than 63 headers
        PayloadTooLargeError: If the payload exceeds 262144 bytes
        HeaderFieldTooLargeError: If a header name or value exceeds 1023 bytes
        EncodeError: If a header holds a surrogate that does not stand for a raw byte

    Examples:
        ```python
        from wiremsg import Message, encode

        msg = Message(headers={"B": "2", "A": "1"}, payload=b"data")
        data = encode(msg)
        assert data[:1] == b"\\x02"
        ```
    """
    # Everything is validated before the output buffer is started
    fields = _validate(message)

    result = bytearray()
    result.append(len(fields))

    for name_bytes, value_bytes in fields:
        result.extend(struct.pack("<HH", len(name_bytes), len(value_bytes)))

    for name_bytes, value_bytes in fields:
        result.extend(name_bytes)
        result.extend(value_bytes)

    result.extend(message.payload)

    logger.debug(
        "Encoded message: %d headers, %d payload bytes, %d bytes total",
        len(fields),
        len(message.payload),
        len(result),
    )
    return bytes(result)


def _validate(message: Message) -> list[tuple[bytes, bytes]]:
    """Check the format limits and return the header fields in wire order.

    Args:
        message: Message to check

    Returns:
        (name bytes, value bytes) pairs sorted by name

    Raises:
        EncodeError: If any limit is violated
    """
    if len(message.headers) > MAX_HEADERS:
        raise InvalidHeaderCountError(
            f"Maximum {MAX_HEADERS} headers allowed, got {len(message.headers)}"
        )

    if len(message.payload) > MAX_PAYLOAD_SIZE:
        raise PayloadTooLargeError(
            f"Maximum payload size of {MAX_PAYLOAD_SIZE} bytes allowed, "
            f"got {len(message.payload)} bytes"
        )

    fields: list[tuple[bytes, bytes]] = []
    for name, value in message.headers.items():
        name_bytes = _encode_text(name, "name", name)
        value_bytes = _encode_text(value, "value", name)

        if len(name_bytes) > MAX_HEADER_FIELD_SIZE or len(value_bytes) > MAX_HEADER_FIELD_SIZE:
            raise HeaderFieldTooLargeError(
                f"Header {name[:32]!r}: name and value must be <= {MAX_HEADER_FIELD_SIZE} bytes, "
                f"got {len(name_bytes)} and {len(value_bytes)}"
            )

        fields.append((name_bytes, value_bytes))

    # Wire order: ascending name bytes
    return sorted(fields)


def _encode_text(text: str, part: str, name: str) -> bytes:
    try:
        return header_bytes(text)
    except UnicodeEncodeError as err:
        raise EncodeError(
            f"Header {name[:32]!r}: {part} cannot be encoded as UTF-8: {err}"
        ) from err
