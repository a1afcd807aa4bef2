"""Binary decoder for wiremsg messages.

This module provides the decode() function that converts untrusted wire
bytes back into a Message. All offsets are computed through a ByteReader, so
every declared length is checked against the buffer before it is used.
"""

from __future__ import annotations

import logging

from ..exceptions import EmptyInputError, InvalidHeaderCountError
from ..models.message import Message
from .layout import HEADER_ENCODING, HEADER_ERRORS, MAX_HEADERS
from .reader import ByteReader

logger = logging.getLogger(__name__)


def decode(data: bytes | bytearray | memoryview) -> Message:
    """Decode wire bytes into a Message.

    Only the header count is range-checked. Header fields longer than 1023
    bytes and payloads longer than 262144 bytes are accepted as long as they
    fit in the buffer; re-check the result if you need encode's limits.

    If a name appears more than once, the last occurrence wins. Header bytes
    that are not valid UTF-8 are kept as lone surrogates (``surrogateescape``),
    so encoding the result reproduces them exactly.

    Args:
        data: One complete encoded message

    Returns:
        Decoded message

    Raises:
        EmptyInputError: If ``data`` is empty
        InvalidHeaderCountError: If the header count byte exceeds 63
        TruncatedInputError: If the size table or header content is cut short

    Examples:
        ```python
        from wiremsg import decode

        msg = decode(b"\\x00")
        assert msg.headers == {} and msg.payload == b""
        ```
    """
    if len(data) == 0:
        raise EmptyInputError("Cannot decode empty data")

    reader = ByteReader(data)

    header_count = reader.read_u8("header count")
    if header_count > MAX_HEADERS:
        raise InvalidHeaderCountError(
            f"Invalid header count {header_count} (maximum {MAX_HEADERS})"
        )

    sizes = [reader.read_u16_le("header size table") for _ in range(header_count * 2)]

    headers: dict[str, str] = {}
    for index in range(header_count):
        name_size = sizes[index * 2]
        value_size = sizes[index * 2 + 1]

        name = _decode_text(reader.read_bytes(name_size, f"header {index} name"))
        value = _decode_text(reader.read_bytes(value_size, f"header {index} value"))

        if name in headers:
            logger.debug("Header %d repeats an earlier name; keeping the later value", index)
        headers[name] = value

    payload = reader.read_rest()

    logger.debug(
        "Decoded message: %d headers, %d payload bytes from %d bytes",
        header_count,
        len(payload),
        len(data),
    )
    # Fields are already typed; skip validation so escaped header bytes are kept as-is
    return Message.model_construct(headers=headers, payload=payload)


def _decode_text(raw: bytes) -> str:
    return raw.decode(HEADER_ENCODING, HEADER_ERRORS)
