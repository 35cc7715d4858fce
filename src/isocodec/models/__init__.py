"""Message modeling for isocodec.

This module provides the Message class and its builders.
"""

from __future__ import annotations

from .message import Message, validate_message_type

__all__ = [
    "Message",
    "validate_message_type",
]
