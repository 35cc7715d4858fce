"""Unit tests for bitmap encoding/decoding."""

from __future__ import annotations

import pytest

from isocodec import InvalidBitmapError, decode_bitmap, encode_bitmap, secondary_present
from isocodec.codec.bitmap import bitmap_capacity, check_bitmap


def _bits_for_fields(fields: list[int], size: int = 64) -> list[bool]:
    bits = [False] * size
    bits[0] = size == 128
    for field in fields:
        bits[field - 1] = True
    return bits


class TestDecodeBitmap:
    """Test hex text to bit vector conversion."""

    def test_single_byte(self) -> None:
        """Test MSB-first expansion."""
        assert decode_bitmap("a0") == [True, False, True, False, False, False, False, False]

    def test_length(self) -> None:
        """Test each digit yields four bits."""
        assert len(decode_bitmap("0" * 16)) == 64
        assert len(decode_bitmap("8" + "0" * 31)) == 128

    def test_case_insensitive(self) -> None:
        """Test upper and lower case decode identically."""
        assert decode_bitmap("ABCDEF0123456789") == decode_bitmap("abcdef0123456789")

    def test_field_positions(self) -> None:
        """Test position i flags field i + 1."""
        bits = decode_bitmap("3220000000808000")
        present = [i + 1 for i in range(1, 64) if bits[i]]
        assert present == [3, 4, 7, 11, 41, 49]

    def test_invalid_character(self) -> None:
        """Test non-hex text is rejected."""
        with pytest.raises(InvalidBitmapError, match="non-hex"):
            decode_bitmap("32G0000000000000")


class TestEncodeBitmap:
    """Test bit vector to hex text conversion."""

    def test_primary(self) -> None:
        """Test a 64-bit bitmap encodes to 16 digits."""
        bits = _bits_for_fields([3, 4, 7, 11, 41, 49])
        assert encode_bitmap(bits) == "3220000000808000"

    def test_secondary(self) -> None:
        """Test a 128-bit bitmap encodes to 32 digits with the flag set."""
        bits = _bits_for_fields([3, 70], size=128)
        text = encode_bitmap(bits)
        assert len(text) == 32
        assert text == "A0000000000000000400000000000000"

    def test_uppercase_output(self) -> None:
        """Test output case is fixed to upper case."""
        assert encode_bitmap([True] * 8) == "FF"

    def test_invalid_length(self) -> None:
        """Test lengths that are not a multiple of 4 are rejected."""
        with pytest.raises(InvalidBitmapError, match="multiple of 4"):
            encode_bitmap([True, False, True])

    def test_roundtrip(self) -> None:
        """Test decode inverts encode."""
        bits = _bits_for_fields([2, 35, 64, 65, 128], size=128)
        assert decode_bitmap(encode_bitmap(bits)) == bits


class TestSecondaryPresent:
    """Test secondary bitmap detection."""

    @pytest.mark.parametrize(
        "unit,expected",
        [
            (0x80, True),
            (0xF2, True),
            (0x7F, False),
            (0x00, False),
            (b"\xc0", True),
            (b"\x32", False),
            ("80", True),
            ("b2", True),
            ("32", False),
        ],
    )
    def test_first_unit(self, unit: object, expected: bool) -> None:
        """Test the most significant bit decides."""
        assert secondary_present(unit) is expected  # type: ignore[arg-type]

    def test_invalid_text(self) -> None:
        """Test malformed ASCII units are rejected."""
        with pytest.raises(InvalidBitmapError):
            secondary_present("zz")
        with pytest.raises(InvalidBitmapError):
            secondary_present("800")

    def test_invalid_bytes(self) -> None:
        """Test multi-byte units are rejected."""
        with pytest.raises(InvalidBitmapError):
            secondary_present(b"\x80\x00")


class TestCheckBitmap:
    """Test message bitmap validation."""

    def test_capacity(self) -> None:
        """Test capacities for primary and secondary bitmaps."""
        assert bitmap_capacity(False) == 64
        assert bitmap_capacity(True) == 128

    def test_valid(self) -> None:
        """Test well-formed bitmaps pass."""
        check_bitmap(_bits_for_fields([3]))
        check_bitmap(_bits_for_fields([3], size=128))

    def test_bad_length(self) -> None:
        """Test lengths other than 64 and 128 are rejected."""
        with pytest.raises(InvalidBitmapError, match="64 or 128"):
            check_bitmap([False] * 96)

    def test_flag_mismatch(self) -> None:
        """Test the secondary flag must match the length."""
        bits = [False] * 64
        bits[0] = True
        with pytest.raises(InvalidBitmapError, match="Secondary"):
            check_bitmap(bits)

        with pytest.raises(InvalidBitmapError, match="Secondary"):
            check_bitmap([False] * 128)
