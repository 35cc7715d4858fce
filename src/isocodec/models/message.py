"""In-memory ISO 8583 message and its builders.

A Message bundles the registry it is laid out against, the message-type
identifier, the presence bitmap, the element table and an optional transport
header. Builders keep the bitmap and the element table in lock-step: a field
has an entry exactly when its bit is set.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..codec.bitmap import bitmap_capacity, check_bitmap
from ..codec.buffer import WIRE_ENCODING
from ..exceptions import FieldIndexOutOfRangeError, InvalidBitmapError, InvalidMessageTypeError
from ..spec.registry import FieldSpecRegistry

MTI_LENGTH = 4
TRANSPORT_HEADER_LENGTH = 5


def validate_message_type(text: Any) -> str:
    """Check that a message-type identifier is exactly 4 ASCII digits.

    Returns:
        The identifier unchanged

    Raises:
        InvalidMessageTypeError: If the identifier is malformed
    """
    if not isinstance(text, str) or len(text) != MTI_LENGTH or not (
        text.isascii() and text.isdigit()
    ):
        raise InvalidMessageTypeError(
            f"Message type must be {MTI_LENGTH} decimal digits, got {text!r}"
        )
    return text


class Message(BaseModel):
    """An ISO 8583 message.

    Messages are plain values owned by their caller; they are not safe for
    concurrent mutation. The registry is shared and never modified.

    Example:
        >>> msg = Message.new(registry)
        >>> msg.set_message_type("0200")
        >>> msg.set_field(3, "000010")
        >>> msg.to_string()
        '02002000000000000000000010'

    Attributes:
        registry: Field specification the message is laid out against
        message_type: Four-digit message-type identifier ("" until set)
        bitmap: Presence bits, 64 or 128 long
        elements: Field number to value text
        transport_header: Opaque transport prefix (empty, or 5 bytes)
        declared_lengths: Packed prefix lengths read by parse that serialize
            would not pick by itself, such as 17 for a 17-digit PAN
    """

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_assignment=True,
        extra="forbid",
    )

    registry: FieldSpecRegistry
    message_type: str = ""
    bitmap: list[bool] = Field(default_factory=lambda: [False] * bitmap_capacity(False))
    elements: dict[int, str] = Field(default_factory=dict)
    transport_header: bytes = b""
    declared_lengths: dict[int, int] = Field(default_factory=dict)

    @field_validator("message_type")
    @classmethod
    def _check_message_type(cls, value: str) -> str:
        if value:
            validate_message_type(value)
        return value

    @field_validator("bitmap")
    @classmethod
    def _check_bitmap(cls, value: list[bool]) -> list[bool]:
        try:
            check_bitmap(value)
        except InvalidBitmapError as err:
            raise ValueError(str(err)) from err
        return value

    @field_validator("transport_header")
    @classmethod
    def _check_transport_header(cls, value: bytes) -> bytes:
        if value and len(value) != TRANSPORT_HEADER_LENGTH:
            raise ValueError(
                f"Transport header must be {TRANSPORT_HEADER_LENGTH} bytes, got {len(value)}"
            )
        return value

    @model_validator(mode="after")
    def _check_lock_step(self) -> Message:
        for index in self.elements:
            if not 2 <= index <= len(self.bitmap) or not self.bitmap[index - 1]:
                raise ValueError(f"Element {index} is stored but its bitmap bit is not set")
        for position in range(1, len(self.bitmap)):
            if self.bitmap[position] and position + 1 not in self.elements:
                raise ValueError(f"Bitmap marks field {position + 1} but no value is stored")
        for index in self.declared_lengths:
            if index not in self.elements:
                raise ValueError(f"Declared length kept for field {index} without a value")
        return self

    @classmethod
    def new(cls, registry: FieldSpecRegistry, secondary_bitmap: bool = False) -> Message:
        """Create an empty message.

        Args:
            registry: Field specification to lay the message out against
            secondary_bitmap: Allocate 128 bits (with position 0 set) instead of 64

        Returns:
            Message with no type, no fields and no transport header
        """
        bitmap = [False] * bitmap_capacity(secondary_bitmap)
        bitmap[0] = secondary_bitmap
        return cls(registry=registry, bitmap=bitmap)

    @classmethod
    def parse(
        cls,
        registry: FieldSpecRegistry,
        raw: Union[bytes, str],
        transport_header: bool = False,
    ) -> Message:
        """Parse raw wire data; see ``isocodec.codec.decoder.parse``."""
        from ..codec.decoder import parse

        return parse(registry, raw, transport_header=transport_header)

    @property
    def capacity(self) -> int:
        return len(self.bitmap)

    @property
    def has_secondary_bitmap(self) -> bool:
        return self.bitmap[0]

    @property
    def fields(self) -> dict[int, str]:
        """Copy of the element table in ascending field order."""
        return dict(sorted(self.elements.items()))

    def present_fields(self) -> list[int]:
        return [position + 1 for position in range(1, len(self.bitmap)) if self.bitmap[position]]

    def get_field(self, index: int) -> str:
        """Return the value of a field, or empty text if it is absent."""
        return self.elements.get(index, "")

    def set_message_type(self, text: str) -> None:
        """Replace the message-type identifier.

        Raises:
            InvalidMessageTypeError: If text is not 4 decimal digits; the
                message is left unchanged
        """
        self.message_type = validate_message_type(text)

    def set_field(self, index: int, value: str) -> None:
        """Mark a field present and store its value.

        Values are not checked against the field's descriptor here; that
        happens when the message is serialized.

        Raises:
            FieldIndexOutOfRangeError: If index is not within 2..capacity
        """
        self._check_index(index)
        self.bitmap[index - 1] = True
        self.elements[index] = value
        self.declared_lengths.pop(index, None)

    def clear_field(self, index: int) -> None:
        """Mark a field absent and drop its value.

        Raises:
            FieldIndexOutOfRangeError: If index is not within 2..capacity
        """
        self._check_index(index)
        self.bitmap[index - 1] = False
        self.elements.pop(index, None)
        self.declared_lengths.pop(index, None)

    def set_transport_header(self, header: bytes) -> None:
        """Replace the transport header.

        Raises:
            ValidationError: If header is neither empty nor 5 bytes long; the
                message is left unchanged
        """
        self.transport_header = bytes(header)

    def to_bytes(self) -> bytes:
        """Serialize the message; see ``isocodec.codec.encoder.serialize``."""
        from ..codec.encoder import serialize

        return serialize(self)

    def to_string(self) -> str:
        """Serialize the message and return the wire as text, one character per byte."""
        return self.to_bytes().decode(WIRE_ENCODING)

    def to_dict(self) -> dict[str, Any]:
        """JSON-friendly summary of the message."""
        return {
            "mti": self.message_type,
            "tpdu": self.transport_header.hex(),
            "secondary_bitmap": self.has_secondary_bitmap,
            "fields": {str(index): value for index, value in self.fields.items()},
        }

    def _check_index(self, index: int) -> None:
        if not 2 <= index <= len(self.bitmap):
            raise FieldIndexOutOfRangeError(index, len(self.bitmap))
