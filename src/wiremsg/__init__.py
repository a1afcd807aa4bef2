"""wiremsg: Header/Payload Message Codec

A small binary wire format for messages made of named text headers and an
opaque byte payload, with an encoder and decoder that are exact inverses.

Wire layout:
    [count: 1 byte] [size table: count x (name_len, value_len) as LE uint16]
    [header content: names and values, ascending by name] [payload: the rest]

Limits (fixed by the format):
- At most 63 headers
- At most 1023 bytes per header name or value
- At most 262144 bytes of payload

Quick Start:
    >>> from wiremsg import Message, encode, decode
    >>>
    >>> msg = Message(
    ...     headers={"Content-Type": "application/json", "X-Request-Id": "12345"},
    ...     payload=b'{"key":"value"}',
    ... )
    >>> data = encode(msg)
    >>> decode(data) == msg
    True
"""

from __future__ import annotations

from .codec import (
    MAX_HEADER_FIELD_SIZE,
    MAX_HEADERS,
    MAX_PAYLOAD_SIZE,
    ByteReader,
    decode,
    encode,
)
from .exceptions import (
    DecodeError,
    EmptyInputError,
    EncodeError,
    HeaderFieldTooLargeError,
    InvalidHeaderCountError,
    PayloadTooLargeError,
    TruncatedInputError,
    WiremsgError,
)
from .models import Message
from .utils import encoded_size, header_sizes

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Message",
    "encode",
    "decode",
    "ByteReader",
    # Limits
    "MAX_HEADERS",
    "MAX_HEADER_FIELD_SIZE",
    "MAX_PAYLOAD_SIZE",
    # Exceptions
    "WiremsgError",
    "EncodeError",
    "DecodeError",
    "InvalidHeaderCountError",
    "HeaderFieldTooLargeError",
    "PayloadTooLargeError",
    "EmptyInputError",
    "TruncatedInputError",
    # Sizing
    "encoded_size",
    "header_sizes",
    # Version
    "__version__",
]
