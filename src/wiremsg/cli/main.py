"""Main CLI entry point for wiremsg."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .. import __version__
from ..exceptions import WiremsgError
from .commands import encode_to_file, inspect_file, run_demo


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the wiremsg CLI.

    Args:
        argv: Command-line arguments (defaults to ``sys.argv[1:]``)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        description="wiremsg: Header/Payload Message Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  wiremsg --demo                                  Round-trip a sample message
  wiremsg --encode out.bin -H Content-Type=text/plain --payload-file body.txt
  wiremsg --decode out.bin                        Show headers and payload
        """,
    )

    # One action per invocation
    action = parser.add_mutually_exclusive_group()

    action.add_argument(
        "--demo",
        action="store_true",
        help="Encode and decode a sample message and check the round trip",
    )

    action.add_argument(
        "--decode",
        metavar="FILE",
        type=str,
        help="Decode an encoded message file and print its contents",
    )

    action.add_argument(
        "--encode",
        metavar="OUT",
        type=str,
        help="Encode a message built from -H/--payload-file and write it to OUT",
    )

    parser.add_argument(
        "-H",
        "--header",
        metavar="NAME=VALUE",
        action="append",
        default=[],
        help="Header to include when encoding (repeatable)",
    )

    parser.add_argument(
        "--payload-file",
        metavar="FILE",
        type=str,
        help="File whose bytes become the payload when encoding",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"wiremsg {__version__}",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.demo:
        return 0 if run_demo() else 1

    if args.encode:
        payload_path = Path(args.payload_file) if args.payload_file else None
        if payload_path is not None and not payload_path.exists():
            print(f"Error: File not found: {payload_path}", file=sys.stderr)
            return 1

        try:
            size = encode_to_file(Path(args.encode), args.header, payload_path)
        except (WiremsgError, ValueError, OSError) as e:
            print(f"Error encoding message: {e}", file=sys.stderr)
            return 1

        print(f"Wrote {size} bytes to {args.encode}")
        return 0

    if args.decode:
        file_path = Path(args.decode)
        if not file_path.exists():
            print(f"Error: File not found: {file_path}", file=sys.stderr)
            return 1

        try:
            inspect_file(file_path)
            return 0
        except (WiremsgError, OSError) as e:
            print(f"Error decoding file: {e}", file=sys.stderr)
            return 1

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
