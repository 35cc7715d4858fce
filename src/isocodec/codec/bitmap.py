"""Presence bitmap encoding and decoding.

A bitmap is a list of booleans. Position 0 flags a secondary bitmap, position
``i`` (i >= 1) flags the presence of field ``i + 1``. On the wire each hex
digit carries four positions, most significant bit first.
"""

from __future__ import annotations

from typing import Sequence, Union

from ..exceptions import InvalidBitmapError

PRIMARY_BITS = 64
EXTENDED_BITS = 128
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def decode_bitmap(hex_text: str) -> list[bool]:
    """Expand hex text into a bit vector.

    Args:
        hex_text: Hex digits, case-insensitive

    Returns:
        List of ``4 * len(hex_text)`` booleans in transmission order

    Raises:
        InvalidBitmapError: If hex_text contains a non-hex character

    Example:
        >>> decode_bitmap("a0")
        [True, False, True, False, False, False, False, False]
    """
    bits: list[bool] = []
    for digit in hex_text:
        if digit not in _HEX_DIGITS:
            raise InvalidBitmapError(f"Bitmap contains non-hex character {digit!r}")
        nibble = int(digit, 16)
        for i in range(3, -1, -1):
            bits.append(bool((nibble >> i) & 1))
    return bits


def encode_bitmap(bits: Sequence[bool]) -> str:
    """Pack a bit vector into uppercase hex text.

    Args:
        bits: Bit vector whose length is a multiple of 4

    Returns:
        Hex text, one digit per four bits

    Raises:
        InvalidBitmapError: If the length is not a multiple of 4
    """
    if len(bits) % 4:
        raise InvalidBitmapError(f"Bitmap length must be a multiple of 4, got {len(bits)}")

    digits = []
    for i in range(0, len(bits), 4):
        nibble = 0
        for j in range(4):
            nibble = (nibble << 1) | (1 if bits[i + j] else 0)
        digits.append(format(nibble, "X"))
    return "".join(digits)


def secondary_present(first_unit: Union[int, str, bytes]) -> bool:
    """Check the secondary-bitmap flag of the first transmitted bitmap unit.

    Args:
        first_unit: The first bitmap byte, as an int, a single-byte ``bytes``,
            or the two hex characters that carry it in ASCII mode

    Returns:
        True if the most significant bit is set
    """
    if isinstance(first_unit, str):
        if len(first_unit) != 2 or any(c not in _HEX_DIGITS for c in first_unit):
            raise InvalidBitmapError(f"Expected two hex characters, got {first_unit!r}")
        value = int(first_unit, 16)
    elif isinstance(first_unit, (bytes, bytearray)):
        if len(first_unit) != 1:
            raise InvalidBitmapError(f"Expected a single byte, got {len(first_unit)}")
        value = first_unit[0]
    else:
        value = first_unit
    return bool(value & 0x80)


def bitmap_capacity(secondary: bool) -> int:
    return EXTENDED_BITS if secondary else PRIMARY_BITS


def check_bitmap(bits: Sequence[bool]) -> None:
    """Validate a message bitmap: 64 bits, or 128 with position 0 set.

    Raises:
        InvalidBitmapError: If the length or secondary flag is inconsistent
    """
    if len(bits) not in (PRIMARY_BITS, EXTENDED_BITS):
        raise InvalidBitmapError(f"Bitmap must have 64 or 128 bits, got {len(bits)}")
    if bool(bits[0]) != (len(bits) == EXTENDED_BITS):
        raise InvalidBitmapError(
            f"Secondary bitmap flag is {bool(bits[0])} for a {len(bits)}-bit bitmap"
        )
