"""Binary message codec for wiremsg.

This package provides the encode/decode pair for the header-plus-payload wire
format, along with the format constants and the bounds-checked reader used by
the decoder.
"""

from __future__ import annotations

from .decoder import decode
from .encoder import encode
from .layout import MAX_HEADER_FIELD_SIZE, MAX_HEADERS, MAX_PAYLOAD_SIZE
from .reader import ByteReader

__all__ = [
    "encode",
    "decode",
    "ByteReader",
    "MAX_HEADERS",
    "MAX_HEADER_FIELD_SIZE",
    "MAX_PAYLOAD_SIZE",
]
