"""Message inspection and demo CLI commands."""

from __future__ import annotations

from pathlib import Path

from ..codec import decode, encode
from ..codec.layout import HEADER_ENCODING, header_bytes
from ..models.message import Message
from ..utils.sizing import encoded_size, header_sizes


def sample_message() -> Message:
    """Build the sample message used by the demo."""
    return Message(
        headers={"Content-Type": "application/json", "X-Request-Id": "12345"},
        payload=b'{"key":"value"}',
    )


def run_demo() -> bool:
    """Encode then decode the sample message and report the result.

    Returns:
        True if the decoded message equals the original
    """
    message = sample_message()
    encoded = encode(message)
    decoded = decode(encoded)

    print("|" * 7, "wiremsg: Header/Payload Message Codec", "|" * 7)
    print(f"Encoded size: {len(encoded)} bytes")
    print(f"Hex: {encoded.hex()}")
    print()
    print_message(decoded)

    matched = decoded == message
    if matched:
        print("Round-trip successful: messages match")
    else:
        print("Round-trip FAILED: messages differ")
    return matched


def print_message(message: Message) -> None:
    """Print a message's size table, headers and payload summary.

    Args:
        message: Message to describe
    """
    sizes = header_sizes(message)
    total = encoded_size(message)

    print(f"{'-' * 27} Headers {'-' * 27}")
    print(f"{len(sizes)} header{'s' if len(sizes) != 1 else ''}")
    for i, (name, value) in enumerate(message.sorted_headers(), 1):
        name_len, value_len = sizes[name]
        label = f"{_printable(name)}: {_printable(value)}"
        print(f"        {i}. {label}  ({name_len}/{value_len} bytes)")
    print()

    print(f"{'-' * 27} Payload {'-' * 27}")
    print(f"{len(message.payload)} bytes")
    if message.payload:
        preview = message.payload[:64]
        suffix = "..." if len(message.payload) > len(preview) else ""
        print(f"        {preview!r}{suffix}")
    print()

    print(f"Encoded size: {total} bytes")


def _printable(text: str) -> str:
    # Show undecodable header bytes as \xNN escapes
    return header_bytes(text).decode(HEADER_ENCODING, "backslashreplace")


def inspect_file(file_path: Path) -> None:
    """Decode an encoded message file and print it.

    Args:
        file_path: Path to a file holding one encoded message
    """
    message = decode(file_path.read_bytes())
    print_message(message)


def encode_to_file(
    file_path: Path, header_args: list[str], payload_path: Path | None = None
) -> int:
    """Encode a message built from CLI arguments and write it to a file.

    Args:
        file_path: Output path
        header_args: Headers given as ``NAME=VALUE`` strings
        payload_path: Optional file whose bytes become the payload

    Returns:
        Number of bytes written

    Raises:
        ValueError: If a header argument has no ``=``
    """
    headers: dict[str, str] = {}
    for arg in header_args:
        name, sep, value = arg.partition("=")
        if not sep:
            raise ValueError(f"Header must be NAME=VALUE, got {arg!r}")
        headers[name] = value

    payload = payload_path.read_bytes() if payload_path is not None else b""
    data = encode(Message(headers=headers, payload=payload))
    file_path.write_bytes(data)
    return len(data)
