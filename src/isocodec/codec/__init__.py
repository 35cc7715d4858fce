"""ISO 8583 wire codec for isocodec.

This module provides parsing and serialization of whole messages, plus the
bitmap and single-field codecs they are built from.
"""

from __future__ import annotations

from .bitmap import decode_bitmap, encode_bitmap, secondary_present
from .decoder import parse
from .encoder import serialize
from .field import extract_field, pack_field

__all__ = [
    "parse",
    "serialize",
    "decode_bitmap",
    "encode_bitmap",
    "secondary_present",
    "extract_field",
    "pack_field",
]
