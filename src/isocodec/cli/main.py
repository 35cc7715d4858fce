"""Main CLI entry point for isocodec."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Optional, Sequence

from .. import __version__
from ..codec.buffer import WIRE_ENCODING
from ..codec.decoder import parse
from ..exceptions import IsoCodecError
from ..models.message import Message
from ..spec.registry import FieldSpecRegistry
from ..utils.log import configure_logging
from .describe import describe_registry


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the isocodec CLI.

    Args:
        argv: Arguments to parse instead of sys.argv

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    parser = argparse.ArgumentParser(
        prog="isocodec",
        description="isocodec: ISO 8583 Message Codec",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  isocodec --spec spec1987.yml --describe                 Show field table
  isocodec --spec spec1987.yml --decode 0200322000...     Decode ASCII message
  isocodec --spec pos.yml --hex --tpdu --decode 6000...   Decode packed message
  isocodec --spec spec1987.yml --encode '{"mti": "0800", "fields": {"11": "000001"}}'
        """,
    )

    parser.add_argument("--spec", metavar="FILE", type=str, help="Field specification (YAML)")
    parser.add_argument("--describe", action="store_true", help="Show the field table")
    parser.add_argument("--decode", metavar="DATA", type=str, help="Decode a message")
    parser.add_argument(
        "--encode",
        metavar="JSON",
        type=str,
        help='Encode a message given as {"mti": ..., "fields": {...}, "tpdu": "<hex>"}',
    )
    parser.add_argument(
        "--hex", action="store_true", help="Message data is hex text of the raw bytes"
    )
    parser.add_argument(
        "--tpdu", action="store_true", help="Message starts with a 5-byte transport header"
    )
    parser.add_argument(
        "--secondary-bitmap",
        action="store_true",
        help="Encode with a 128-bit bitmap",
    )
    parser.add_argument("--log-level", default="WARNING", help="Log level (default WARNING)")
    parser.add_argument("--log-json", action="store_true", help="Log events as JSON")
    parser.add_argument(
        "--version",
        action="version",
        version=f"isocodec {__version__}",
    )

    args = parser.parse_args(argv)

    if not (args.describe or args.decode is not None or args.encode is not None):
        parser.print_help()
        return 0

    if not args.spec:
        print("Error: --spec is required", file=sys.stderr)
        return 1

    spec_path = Path(args.spec)
    if not spec_path.exists():
        print(f"Error: File not found: {spec_path}", file=sys.stderr)
        return 1

    try:
        configure_logging(args.log_level, json_format=args.log_json)
    except ValueError as e:
        print(f"Error: invalid log level: {e}", file=sys.stderr)
        return 1

    try:
        registry = FieldSpecRegistry.from_yaml(spec_path)

        if args.describe:
            describe_registry(registry)

        if args.decode is not None:
            raw = bytes.fromhex(args.decode) if args.hex else args.decode
            msg = parse(registry, raw, transport_header=args.tpdu)
            print(json.dumps(msg.to_dict(), indent=2))

        if args.encode is not None:
            msg = _message_from_json(registry, args.encode, args.secondary_bitmap)
            data = msg.to_bytes()
            print(data.hex() if args.hex else data.decode(WIRE_ENCODING))
    except (IsoCodecError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


def _message_from_json(registry: FieldSpecRegistry, text: str, secondary: bool) -> Message:
    """Build a message from its JSON description.

    Raises:
        ValueError: If the JSON is malformed
        IsoCodecError: If the MTI or a field number is invalid
    """
    spec: Any = json.loads(text)
    if not isinstance(spec, dict):
        raise ValueError("Message JSON must be an object")

    msg = Message.new(registry, secondary_bitmap=secondary)
    msg.set_message_type(str(spec.get("mti", "")))
    fields = spec.get("fields", {})
    if not isinstance(fields, dict):
        raise ValueError("'fields' must be an object of field number to value")
    for key, value in fields.items():
        msg.set_field(int(key), str(value))
    if spec.get("tpdu"):
        msg.set_transport_header(bytes.fromhex(spec["tpdu"]))
    return msg


if __name__ == "__main__":
    sys.exit(main())
