"""Main CLI entry point for pbwire."""

from __future__ import annotations

import argparse
import json
import sys

from .. import __version__
from .._logging import configure_logging
from ..codec import decode_hex, encode_hex
from ..exceptions import PbwireError
from ..hexbridge import prepare_payload, to_jsonable


def main(argv: list[str] | None = None) -> int:
    """Main entry point for the pbwire CLI.

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="pbwire",
        description="pbwire: schema-less Protocol Buffers wire codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  pbwire --decode 082a120568656c6c6f      Decode hex wire data to JSON
  pbwire --encode '{"1": "hex->00ff"}'    Encode a JSON payload to hex
  pbwire --version                        Show version
        """,
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--decode",
        metavar="HEX",
        type=str,
        help="Decode hex wire data and print it as JSON",
    )
    group.add_argument(
        "--encode",
        metavar="JSON",
        type=str,
        help="Encode a JSON object (hex strings bridged to bytes) and print hex",
    )

    parser.add_argument(
        "--always-list",
        action="store_true",
        help="With --decode, map every tag to a list",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging on stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"pbwire {__version__}",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging("DEBUG", json_output=False)

    if args.decode is not None:
        try:
            message = decode_hex(args.decode.strip(), always_list=args.always_list)
        except PbwireError as e:
            print(f"Error decoding data: {e}", file=sys.stderr)
            return 1
        print(json.dumps(to_jsonable(message), ensure_ascii=False, indent=2))
        return 0

    if args.encode is not None:
        try:
            payload = json.loads(args.encode)
        except json.JSONDecodeError as e:
            print(f"Error: invalid JSON: {e}", file=sys.stderr)
            return 1
        try:
            print(encode_hex(prepare_payload(payload)))
        except PbwireError as e:
            print(f"Error encoding payload: {e}", file=sys.stderr)
            return 1
        return 0

    # If no command specified, show help
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
