"""isocodec: ISO 8583 Message Codec

A Python library for parsing and building ISO 8583 financial transaction
messages: a message-type identifier, a presence bitmap and data fields laid
out by a field-specification table.

Key Features:
- YAML field specifications validated with Pydantic
- Fixed and LL/LLL/LLLL length-prefixed fields
- ASCII and packed-hex (BCD-style) wire modes, per field
- Primary and secondary bitmaps
- Optional 5-byte transport header (TPDU)

Quick Start:
    >>> from isocodec import FieldSpecRegistry, Message, parse
    >>>
    >>> registry = FieldSpecRegistry.from_yaml("examples/spec1987.yml")
    >>> msg = Message.new(registry)
    >>> msg.set_message_type("0200")
    >>> msg.set_field(3, "000010")
    >>> data = msg.to_bytes()
    >>> decoded = parse(registry, data)
"""

from __future__ import annotations

import logging

from .codec import decode_bitmap, encode_bitmap, parse, secondary_present, serialize
from .config import CodecConfig
from .exceptions import (
    DecodeError,
    EncodeError,
    FieldIndexOutOfRangeError,
    InvalidBitmapError,
    InvalidFieldValueError,
    InvalidLengthError,
    InvalidMessageTypeError,
    InvalidSpecError,
    IsoCodecError,
    TruncatedMessageError,
    UnknownFieldError,
)
from .models import Message
from .spec import ContentKind, FieldDescriptor, FieldSpecRegistry, LengthType
from .utils import configure_logging

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    # Core API
    "Message",
    "parse",
    "serialize",
    # Field specification
    "FieldSpecRegistry",
    "FieldDescriptor",
    "LengthType",
    "ContentKind",
    # Bitmap
    "encode_bitmap",
    "decode_bitmap",
    "secondary_present",
    # Configuration
    "CodecConfig",
    "configure_logging",
    # Exceptions
    "IsoCodecError",
    "DecodeError",
    "EncodeError",
    "TruncatedMessageError",
    "UnknownFieldError",
    "InvalidLengthError",
    "InvalidMessageTypeError",
    "InvalidBitmapError",
    "InvalidFieldValueError",
    "FieldIndexOutOfRangeError",
    "InvalidSpecError",
    # Version
    "__version__",
]
