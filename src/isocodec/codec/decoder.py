"""Message decoder.

This module provides the parse() function that turns raw wire data into a
Message. Parsing is a pure transform: the registry and the input are never
modified, and no partial message is returned on failure.
"""

from __future__ import annotations

import logging
from typing import Union

from ..exceptions import TruncatedMessageError
from ..models.message import MTI_LENGTH, TRANSPORT_HEADER_LENGTH, Message, validate_message_type
from ..spec.registry import FieldSpecRegistry
from .bitmap import decode_bitmap, secondary_present
from .buffer import WIRE_ENCODING, ByteReader, to_wire_bytes
from .field import declared_length, extract_field_with_length

logger = logging.getLogger(__name__)

# hex digits of a primary / primary+secondary bitmap
PRIMARY_BITMAP_DIGITS = 16
EXTENDED_BITMAP_DIGITS = 32


def parse(
    registry: FieldSpecRegistry,
    raw: Union[bytes, bytearray, str],
    transport_header: bool = False,
) -> Message:
    """Parse an ISO 8583 message.

    The wire layout is ``[transport header] MTI bitmap fields...``. Whether the
    MTI and bitmap are packed is taken from registry entries 0 and 1; each
    field follows its own descriptor.

    Args:
        registry: Field specification to parse against
        raw: Wire data; text is mapped 1:1 to bytes
        transport_header: If True, the first 5 bytes are an opaque transport header

    Returns:
        Parsed message

    Raises:
        TruncatedMessageError: If the input ends early
        InvalidMessageTypeError: If the MTI is not 4 decimal digits
        InvalidBitmapError: If an ASCII bitmap is not hex text
        UnknownFieldError: If the bitmap marks a field the registry lacks
        InvalidLengthError: If a length prefix is not decimal

    Examples:
        ```python
        registry = FieldSpecRegistry.from_yaml("examples/spec1987.yml")
        msg = parse(registry, "02003220000000808000...")

        # Packed-hex terminal traffic behind a TPDU
        msg = parse(pos_registry, data, transport_header=True)
        print(msg.transport_header.hex())
        ```
    """
    reader = ByteReader(to_wire_bytes(raw))

    header = b""
    if transport_header:
        try:
            header = reader.read_bytes(TRANSPORT_HEADER_LENGTH)
        except TruncatedMessageError as e:
            raise TruncatedMessageError(
                f"Truncated data while reading transport header: {e}"
            ) from e

    message_type = _read_message_type(reader, registry.mti_descriptor.packed_hex)
    validate_message_type(message_type)

    bitmap = _read_bitmap(reader, registry.bitmap_descriptor.packed_hex)

    elements: dict[int, str] = {}
    declared_lengths: dict[int, int] = {}
    for position in range(1, len(bitmap)):
        if not bitmap[position]:
            continue
        index = position + 1
        descriptor = registry.require(index)
        try:
            value, declared = extract_field_with_length(reader, descriptor)
        except TruncatedMessageError as e:
            raise TruncatedMessageError(
                f"Truncated data while reading field {index}: {e}"
            ) from e
        elements[index] = value
        # keep prefixes serialize would otherwise rewrite
        if (
            declared is not None
            and descriptor.packed_hex
            and declared != declared_length(descriptor, value)
        ):
            declared_lengths[index] = declared

    message = Message(
        registry=registry,
        message_type=message_type,
        bitmap=bitmap,
        elements=elements,
        transport_header=header,
        declared_lengths=declared_lengths,
    )
    logger.debug(
        "Parsed message",
        extra={"mti": message_type, "fields": sorted(elements), "size": reader.position()},
    )
    return message


def _read_message_type(reader: ByteReader, packed: bool) -> str:
    try:
        if packed:
            return reader.read_hex(MTI_LENGTH // 2)
        return reader.read_text(MTI_LENGTH)
    except TruncatedMessageError as e:
        raise TruncatedMessageError(f"Truncated data while reading message type: {e}") from e


def _read_bitmap(reader: ByteReader, packed: bool) -> list[bool]:
    try:
        if packed:
            secondary = secondary_present(reader.peek_bytes(1))
        else:
            secondary = secondary_present(reader.peek_bytes(2).decode(WIRE_ENCODING))

        digits = EXTENDED_BITMAP_DIGITS if secondary else PRIMARY_BITMAP_DIGITS
        if packed:
            hex_text = reader.read_hex(digits // 2)
        else:
            hex_text = reader.read_text(digits)
    except TruncatedMessageError as e:
        raise TruncatedMessageError(f"Truncated data while reading bitmap: {e}") from e

    return decode_bitmap(hex_text)
