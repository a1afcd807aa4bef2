"""Bounds-checked cursor over an untrusted byte buffer.

Every read validates the requested length against what is left in the buffer
before slicing, so a malformed length field can never push the cursor past
the end of the data.
"""

from __future__ import annotations

import struct

from ..exceptions import TruncatedInputError

_U16_LE = struct.Struct("<H")


class ByteReader:
    """Reads little-endian primitives and byte runs from a buffer.

    On a short read the reader raises TruncatedInputError and leaves its
    position where it was.

    Example:
        >>> reader = ByteReader(b"\\x02\\x05\\x00abc")
        >>> reader.read_u8()
        2
        >>> reader.read_u16_le()
        5
        >>> reader.read_rest()
        b'abc'
    """

    def __init__(self, data: bytes | bytearray | memoryview) -> None:
        """Initialize a reader positioned at the start of ``data``.

        Args:
            data: Buffer to read. A private immutable copy is taken so later
                changes to a caller's bytearray cannot affect reads.
        """
        self._data = bytes(data)
        self._position = 0

    def _advance(self, size: int, what: str) -> int:
        """Reserve ``size`` bytes and return the offset they start at.

        Raises:
            TruncatedInputError: If fewer than ``size`` bytes remain
        """
        if size < 0:
            raise ValueError(f"read size must be non-negative, got {size}")

        remaining = len(self._data) - self._position
        if size > remaining:
            raise TruncatedInputError(
                f"Truncated input while reading {what}: need {size} bytes at offset "
                f"{self._position}, have {remaining}"
            )

        start = self._position
        self._position += size
        return start

    def read_u8(self, what: str = "uint8") -> int:
        """Read one unsigned byte."""
        start = self._advance(1, what)
        return self._data[start]

    def read_u16_le(self, what: str = "uint16") -> int:
        """Read a little-endian unsigned 16-bit integer."""
        start = self._advance(_U16_LE.size, what)
        return _U16_LE.unpack_from(self._data, start)[0]

    def read_bytes(self, size: int, what: str = "bytes") -> bytes:
        """Read exactly ``size`` bytes.

        Args:
            size: Number of bytes to read
            what: Description of the field, used in error messages

        Returns:
            The bytes read

        Raises:
            TruncatedInputError: If fewer than ``size`` bytes remain
        """
        start = self._advance(size, what)
        return self._data[start : start + size]

    def read_rest(self) -> bytes:
        """Read everything from the cursor to the end of the buffer."""
        return self.read_bytes(self.remaining())

    def remaining(self) -> int:
        """Return the number of unread bytes."""
        return len(self._data) - self._position

    def position(self) -> int:
        """Return the current byte offset."""
        return self._position
