"""Exception hierarchy for wiremsg.

All exceptions inherit from WiremsgError so callers can catch any codec
failure with a single ``except`` clause, or catch a stage-level base
(EncodeError / DecodeError) to tell which direction failed.
"""

from __future__ import annotations


class WiremsgError(Exception):
    """Base exception for all wiremsg errors."""

    pass


class EncodeError(WiremsgError):
    """Raised when a message cannot be encoded.

    Examples:
        - Too many headers
        - Header name or value longer than the size table allows
        - Payload larger than the format limit
    """

    pass


class DecodeError(WiremsgError):
    """Raised when a byte buffer cannot be decoded.

    Examples:
        - Empty buffer
        - Header count byte out of range
        - Size table or header content cut short
    """

    pass


class InvalidHeaderCountError(EncodeError, DecodeError):
    """Raised when a header count exceeds the format maximum.

    On encode this means the message has too many headers; on decode it means
    the leading count byte is out of range.
    """

    pass


class HeaderFieldTooLargeError(EncodeError):
    """Raised when a header name or value is too long to encode."""

    pass


class PayloadTooLargeError(EncodeError):
    """Raised when a payload is too long to encode."""

    pass


class EmptyInputError(DecodeError):
    """Raised when decode is handed a zero-length buffer."""

    pass


class TruncatedInputError(DecodeError):
    """Raised when a buffer ends before a declared field is complete."""

    pass
