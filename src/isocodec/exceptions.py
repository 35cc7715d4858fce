"""Exception hierarchy for isocodec.

This module defines all custom exceptions used throughout the package.
All exceptions inherit from IsoCodecError for easy catching of any isocodec-specific error.
"""

from __future__ import annotations


class IsoCodecError(Exception):
    """Base exception for all isocodec errors."""

    pass


class InvalidSpecError(IsoCodecError):
    """Raised when a field-specification registry cannot be built.

    Examples:
        - Spec file missing or unreadable
        - YAML syntax error
        - Descriptor fails validation (unknown length type, negative length)
        - Reserved entries 0 (message type) or 1 (bitmap) missing
    """

    pass


class DecodeError(IsoCodecError):
    """Base class for failures while parsing a raw message."""

    pass


class EncodeError(IsoCodecError):
    """Base class for failures while serializing a message."""

    pass


class TruncatedMessageError(DecodeError):
    """Raised when the input ends before a header, bitmap or field region."""

    pass


class InvalidLengthError(DecodeError):
    """Raised when a length prefix is not a non-negative decimal integer."""

    pass


class InvalidBitmapError(DecodeError):
    """Raised when bitmap text is not hex or a bit vector has an illegal length."""

    pass


class InvalidMessageTypeError(DecodeError):
    """Raised when a message-type identifier is not exactly 4 ASCII digits."""

    pass


class UnknownFieldError(DecodeError):
    """Raised when a present field has no descriptor in the registry."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(f"Field {index} is not defined in the field specification")


class FieldIndexOutOfRangeError(IsoCodecError):
    """Raised when a mutator is called with an index outside 2..capacity."""

    def __init__(self, index: int, capacity: int) -> None:
        self.index = index
        self.capacity = capacity
        super().__init__(f"Expected field to be between 2 and {capacity}, found {index} instead")


class InvalidFieldValueError(EncodeError):
    """Raised when a stored field value does not fit its descriptor at serialize time.

    Examples:
        - Fixed-length value of the wrong size
        - Packed value that is not valid hex text
        - Length-prefixed value longer than the descriptor allows
    """

    def __init__(self, index: int, reason: str) -> None:
        self.index = index
        self.reason = reason
        super().__init__(f"Field {index}: {reason}")
