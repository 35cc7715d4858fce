"""Field specifications for isocodec.

This module provides field descriptors and the registry that maps field
indices to them.
"""

from __future__ import annotations

from .descriptor import ContentKind, FieldDescriptor, LengthType
from .registry import FieldSpecRegistry

__all__ = [
    "ContentKind",
    "FieldDescriptor",
    "FieldSpecRegistry",
    "LengthType",
]
