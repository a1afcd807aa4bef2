"""Message size calculation utilities.

This module provides functions to calculate the encoded size of messages
without actually encoding them.
"""

from __future__ import annotations

from ..codec.layout import COUNT_SIZE, SIZE_TABLE_ENTRY_SIZE, header_bytes
from ..models.message import Message


def header_sizes(message: Message) -> dict[str, tuple[int, int]]:
    """Get the byte lengths recorded in the size table for each header.

    Args:
        message: Message to analyze

    Returns:
        Header name to (name length, value length), in wire order

    Example:
        >>> header_sizes(Message(headers={"B": "22", "A": "1"}))
        {'A': (1, 1), 'B': (1, 2)}
    """
    return {
        name: (len(header_bytes(name)), len(header_bytes(value)))
        for name, value in message.sorted_headers()
    }


def encoded_size(message: Message) -> int:
    """Calculate the encoded size of a message in bytes.

    The result is what ``len(encode(message))`` would return for a message
    within the format limits. Limits are not checked here.

    Args:
        message: Message to size

    Returns:
        Size in bytes

    Example:
        >>> encoded_size(Message())
        1
        >>> encoded_size(Message(headers={"A": "1"}, payload=b"xyz"))
        10
    """
    sizes = header_sizes(message)
    content = sum(name_len + value_len for name_len, value_len in sizes.values())
    return COUNT_SIZE + SIZE_TABLE_ENTRY_SIZE * len(sizes) + content + len(message.payload)
