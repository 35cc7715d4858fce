"""Extraction and packing of a single data field.

Values are kept as text. Non-packed fields store the transmitted characters
verbatim; packed-hex fields store the hex-digit text of their raw bytes.
"""

from __future__ import annotations

import re
from typing import Optional

from ..exceptions import InvalidFieldValueError, InvalidLengthError
from ..spec.descriptor import ContentKind, FieldDescriptor
from .buffer import ByteReader, ByteWriter

_HEX_TEXT = re.compile(r"(?:[0-9a-fA-F]{2})*")


def extract_field(reader: ByteReader, descriptor: FieldDescriptor) -> str:
    """Read one field value from the reader.

    Args:
        reader: Cursor positioned at the start of the field
        descriptor: Wire layout of the field

    Returns:
        The field's value text

    Raises:
        TruncatedMessageError: If the field runs past the end of the input
        InvalidLengthError: If a length prefix is not a decimal number
    """
    value, _ = extract_field_with_length(reader, descriptor)
    return value


def extract_field_with_length(
    reader: ByteReader, descriptor: FieldDescriptor
) -> tuple[str, Optional[int]]:
    """Read one field value and the length its prefix declared.

    Returns:
        ``(value, declared)`` where declared is None for fixed fields
    """
    if descriptor.is_fixed:
        return _extract_value(reader, descriptor, descriptor.max_length), None

    width = descriptor.prefix_width
    if descriptor.packed_hex:
        prefix = reader.read_hex(_half_up(width))
    else:
        prefix = reader.read_text(width)

    if not (prefix.isascii() and prefix.isdigit()):
        raise InvalidLengthError(f"Length prefix {prefix!r} is not a decimal number")

    declared = int(prefix)
    return _extract_value(reader, descriptor, _prefixed_units(descriptor, declared)), declared


def _extract_value(reader: ByteReader, descriptor: FieldDescriptor, length: int) -> str:
    if not descriptor.packed_hex:
        return reader.read_text(length)
    return reader.read_hex(_packed_byte_count(descriptor, length))


def pack_field(
    writer: ByteWriter,
    index: int,
    descriptor: FieldDescriptor,
    value: str,
    declared: Optional[int] = None,
) -> None:
    """Write one field value to the writer.

    Length-prefixed fields that are not packed are written without their
    prefix.

    Args:
        writer: Output buffer
        index: Field number, used in error messages
        descriptor: Wire layout of the field
        value: Stored value text
        declared: Length to put in a packed prefix; by default the one
            ``declared_length`` picks

    Raises:
        InvalidFieldValueError: If the value does not fit the descriptor
    """
    if not descriptor.packed_hex:
        if descriptor.is_fixed and len(value) != descriptor.max_length:
            raise InvalidFieldValueError(
                index, f"expected {descriptor.max_length} characters, got {len(value)}"
            )
        try:
            writer.write_text(value)
        except UnicodeEncodeError as err:
            raise InvalidFieldValueError(index, f"value is not Latin-1 text: {err}") from err
        return

    if not _HEX_TEXT.fullmatch(value):
        raise InvalidFieldValueError(index, f"packed value {value!r} is not even-length hex text")
    value_bytes = len(value) // 2

    if descriptor.is_fixed:
        expected = _packed_byte_count(descriptor, descriptor.max_length)
        if value_bytes != expected:
            raise InvalidFieldValueError(
                index, f"expected {expected} packed bytes, got {value_bytes}"
            )
        writer.write_hex(value)
        return

    if declared is None:
        declared = declared_length(descriptor, value)
    if declared > descriptor.max_length:
        raise InvalidFieldValueError(
            index, f"length {declared} exceeds maximum {descriptor.max_length}"
        )
    if _packed_byte_count(descriptor, _prefixed_units(descriptor, declared)) != value_bytes:
        raise InvalidFieldValueError(
            index, f"{value_bytes} packed bytes cannot be described by a length prefix"
        )

    prefix = str(declared).zfill(2 * _half_up(descriptor.prefix_width))
    writer.write_hex(prefix + value)


def declared_length(descriptor: FieldDescriptor, value: str) -> int:
    """Length a packed prefix carries for ``value`` unless told otherwise.

    Binary content counts hex digits and chip-tag content counts bytes; both
    pad odd counts to a whole byte, so a value of ``n`` units could also have
    been declared as ``n - 1``. The odd count is used only when ``n`` exceeds
    the descriptor's maximum.
    """
    if descriptor.content is ContentKind.ASCII:
        return len(value) // 2
    declared = len(value) if descriptor.content is ContentKind.BINARY else len(value) // 2
    if declared > descriptor.max_length and declared > 0:
        declared -= 1
    return declared


def _prefixed_units(descriptor: FieldDescriptor, declared: int) -> int:
    # string content counts characters, each one packed byte (two hex digits)
    if descriptor.content is ContentKind.ASCII:
        return declared * 2
    return declared


def _packed_byte_count(descriptor: FieldDescriptor, length: int) -> int:
    count = _half_up(length)
    if descriptor.content is ContentKind.CHIP_TAG:
        return count * 2
    return count


def _half_up(value: int) -> int:
    return (value + 1) // 2
