#!/usr/bin/env python3
"""Basic usage example for isocodec.

Demonstrates:
1. Loading a field specification
2. Building and serializing a message
3. Parsing the wire data back
4. Handling a packed-hex message with a transport header
"""

from pathlib import Path

from isocodec import FieldSpecRegistry, Message, parse

HERE = Path(__file__).parent


def main():
    print("=" * 60)
    print("isocodec Basic Usage Example")
    print("=" * 60)
    print()

    # 1. ASCII wire format
    registry = FieldSpecRegistry.from_yaml(HERE / "spec1987.yml")

    msg = Message.new(registry)
    msg.set_message_type("0200")
    msg.set_field(3, "000010")
    msg.set_field(4, "000000001500")
    msg.set_field(7, "1206041200")
    msg.set_field(11, "000001")
    msg.set_field(41, "12340001")
    msg.set_field(49, "840")

    wire = msg.to_string()
    print(f"Encoded ({len(wire)} chars): {wire}")

    decoded = parse(registry, wire)
    print(f"Decoded MTI: {decoded.message_type}")
    for index, value in decoded.fields.items():
        print(f"  Field {index:>3}: {value}")
    print()

    # 2. Packed-hex terminal message behind a TPDU
    pos_registry = FieldSpecRegistry.from_yaml(HERE / "spec1987pos.yml")
    data = bytes.fromhex(
        "6000180000"
        "0800"
        "2020010000800004"
        "920000"
        "000299"
        "0018"
        "3737303030303333"
        "0037"
        "48544c4530333130303130303137373030303033333030303030303037"
        "8ca64de98ca64de9"
    )

    pos_msg = parse(pos_registry, data, transport_header=True)
    print(f"TPDU: {pos_msg.transport_header.hex()}")
    print(f"MTI:  {pos_msg.message_type}")
    for index, value in pos_msg.fields.items():
        print(f"  Field {index:>3}: {value}")

    assert pos_msg.to_bytes() == data
    print()
    print("✓ Round trip reproduced the original bytes")


if __name__ == "__main__":
    main()
