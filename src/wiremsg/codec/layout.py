"""Wire format constants.

Layout of an encoded message::

    +-------+------------------------------+----------------------+---------+
    | Count | Size table                   | Header content       | Payload |
    | 1 B   | count x (name_len, val_len)  | name/value bytes     | rest    |
    |       | little-endian uint16 each    | ascending name order |         |
    +-------+------------------------------+----------------------+---------+

The limits are part of the format and are not configurable.
"""

from __future__ import annotations

MAX_HEADERS = 63
MAX_HEADER_FIELD_SIZE = 1023
MAX_PAYLOAD_SIZE = 256 * 1024

COUNT_SIZE = 1
SIZE_ENTRY_SIZE = 2  # one little-endian uint16
SIZE_TABLE_ENTRY_SIZE = 2 * SIZE_ENTRY_SIZE  # name length + value length

HEADER_ENCODING = "utf-8"
# Undecodable header bytes map to lone surrogates and back, so any buffer that
# fits round-trips byte for byte
HEADER_ERRORS = "surrogateescape"


def header_bytes(text: str) -> bytes:
    """Return the wire bytes of a header name or value."""
    return text.encode(HEADER_ENCODING, HEADER_ERRORS)
