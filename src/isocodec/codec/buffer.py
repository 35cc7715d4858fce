"""Byte-level reading and writing utilities.

This module provides the cursor used while parsing a message and the buffer
used while serializing one. Non-packed text travels as Latin-1 so that every
character maps to exactly one byte.
"""

from __future__ import annotations

from typing import Union

from ..exceptions import TruncatedMessageError

WIRE_ENCODING = "latin-1"


def to_wire_bytes(data: Union[bytes, bytearray, str]) -> bytes:
    """Convert raw input to bytes, mapping text characters 1:1 to bytes."""
    if isinstance(data, str):
        try:
            return data.encode(WIRE_ENCODING)
        except UnicodeEncodeError as err:
            raise ValueError(f"Message text contains non-Latin-1 characters: {err}") from err
    return bytes(data)


class ByteReader:
    """Reads consecutive regions from a byte buffer.

    Every read advances the cursor; the underlying buffer is never modified.

    Example:
        >>> reader = ByteReader(b"0200rest")
        >>> reader.read_text(4)
        '0200'
        >>> reader.bytes_remaining()
        4
    """

    def __init__(self, data: bytes) -> None:
        """Initialize a reader over the given data.

        Args:
            data: Byte buffer to read
        """
        self._data = bytes(data)
        self._position = 0

    def read_bytes(self, num_bytes: int) -> bytes:
        """Read raw bytes.

        Args:
            num_bytes: Number of bytes to read

        Returns:
            Bytes read from buffer

        Raises:
            TruncatedMessageError: If not enough bytes are available
        """
        if num_bytes < 0:
            raise ValueError(f"num_bytes must be >= 0, got {num_bytes}")
        if num_bytes > self.bytes_remaining():
            raise TruncatedMessageError(
                f"Not enough data: need {num_bytes} bytes, have {self.bytes_remaining()}"
            )

        start = self._position
        self._position += num_bytes
        return self._data[start : self._position]

    def read_text(self, num_chars: int) -> str:
        """Read characters transmitted verbatim (one byte each)."""
        return self.read_bytes(num_chars).decode(WIRE_ENCODING)

    def read_hex(self, num_bytes: int) -> str:
        """Read packed bytes and return their hex-digit text (two digits per byte)."""
        return self.read_bytes(num_bytes).hex()

    def peek_bytes(self, num_bytes: int) -> bytes:
        """Return the next bytes without consuming them.

        Raises:
            TruncatedMessageError: If not enough bytes are available
        """
        if num_bytes > self.bytes_remaining():
            raise TruncatedMessageError(
                f"Not enough data: need {num_bytes} bytes, have {self.bytes_remaining()}"
            )
        return self._data[self._position : self._position + num_bytes]

    def bytes_remaining(self) -> int:
        return len(self._data) - self._position

    def position(self) -> int:
        return self._position


class ByteWriter:
    """Accumulates encoded regions of a message.

    Example:
        >>> writer = ByteWriter()
        >>> writer.write_text("0200")
        >>> writer.write_hex("3220")
        >>> writer.to_bytes()
        b'02002 '
    """

    def __init__(self) -> None:
        """Initialize an empty writer."""
        self._buffer = bytearray()

    def write_bytes(self, data: bytes) -> None:
        self._buffer.extend(data)

    def write_text(self, text: str) -> None:
        """Write characters verbatim.

        Raises:
            ValueError: If text contains characters outside Latin-1
        """
        self._buffer.extend(text.encode(WIRE_ENCODING))

    def write_hex(self, hex_text: str) -> None:
        """Write hex-digit text as packed bytes.

        Raises:
            ValueError: If text is not an even-length run of hex digits
        """
        self._buffer.extend(bytes.fromhex(hex_text))

    def byte_length(self) -> int:
        return len(self._buffer)

    def to_bytes(self) -> bytes:
        return bytes(self._buffer)
