"""Message encoder.

This module provides the serialize() function that turns a Message into its
wire representation, field by field in ascending field number.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ..exceptions import InvalidFieldValueError
from .bitmap import check_bitmap, encode_bitmap
from .buffer import ByteWriter
from .field import pack_field

if TYPE_CHECKING:
    from ..models.message import Message

logger = logging.getLogger(__name__)


def serialize(message: Message) -> bytes:
    """Encode a message to wire bytes.

    The output is ``[transport header] MTI bitmap fields...``. The MTI and
    bitmap are packed when registry entries 0 and 1 say so; each field follows
    its own descriptor. Stored values are validated against their descriptors
    here, not when they are set.

    Args:
        message: Message to encode

    Returns:
        Wire representation

    Raises:
        InvalidMessageTypeError: If the MTI is unset or malformed
        InvalidBitmapError: If the bitmap length or secondary flag is inconsistent
        UnknownFieldError: If a present field has no descriptor
        InvalidFieldValueError: If a value does not fit its descriptor

    Examples:
        ```python
        msg = Message.new(registry)
        msg.set_message_type("0200")
        msg.set_field(3, "000010")
        data = serialize(msg)
        ```
    """
    from ..models.message import validate_message_type

    registry = message.registry
    validate_message_type(message.message_type)
    check_bitmap(message.bitmap)

    writer = ByteWriter()
    if message.transport_header:
        writer.write_bytes(message.transport_header)

    if registry.mti_descriptor.packed_hex:
        writer.write_hex(message.message_type)
    else:
        writer.write_text(message.message_type)

    bitmap_text = encode_bitmap(message.bitmap)
    if registry.bitmap_descriptor.packed_hex:
        writer.write_hex(bitmap_text)
    else:
        writer.write_text(bitmap_text)

    for index in message.present_fields():
        descriptor = registry.require(index)
        if index not in message.elements:
            raise InvalidFieldValueError(index, "bitmap marks the field but no value is stored")
        pack_field(
            writer,
            index,
            descriptor,
            message.elements[index],
            message.declared_lengths.get(index),
        )

    data = writer.to_bytes()
    logger.debug(
        "Serialized message",
        extra={"mti": message.message_type, "fields": message.present_fields(), "size": len(data)},
    )
    return data
