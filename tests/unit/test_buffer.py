"""Unit tests for the byte cursor and writer."""

from __future__ import annotations

import pytest

from isocodec import TruncatedMessageError
from isocodec.codec.buffer import ByteReader, ByteWriter, to_wire_bytes


class TestByteReader:
    """Test ByteReader functionality."""

    def test_read_text(self) -> None:
        """Test reading verbatim characters."""
        reader = ByteReader(b"0200rest")
        assert reader.read_text(4) == "0200"
        assert reader.position() == 4
        assert reader.bytes_remaining() == 4

    def test_read_hex(self) -> None:
        """Test packed bytes come back as lowercase hex text."""
        reader = ByteReader(b"\x08\x00\xab")
        assert reader.read_hex(3) == "0800ab"
        assert reader.bytes_remaining() == 0

    def test_read_zero(self) -> None:
        """Test zero-length reads are allowed at the end."""
        reader = ByteReader(b"")
        assert reader.read_bytes(0) == b""

    def test_truncated(self) -> None:
        """Test reading past the end raises."""
        reader = ByteReader(b"020")
        with pytest.raises(TruncatedMessageError, match="need 4 bytes, have 3"):
            reader.read_text(4)
        # failed reads do not advance
        assert reader.position() == 0

    def test_peek(self) -> None:
        """Test peeking does not consume."""
        reader = ByteReader(b"\x80\x00")
        assert reader.peek_bytes(1) == b"\x80"
        assert reader.position() == 0
        with pytest.raises(TruncatedMessageError):
            reader.peek_bytes(3)

    def test_high_bytes_as_text(self) -> None:
        """Test every byte maps to exactly one character."""
        reader = ByteReader(b"\xff\x80")
        assert reader.read_text(2) == "\xff\x80"


class TestByteWriter:
    """Test ByteWriter functionality."""

    def test_write_regions(self) -> None:
        """Test text, hex and raw regions concatenate in order."""
        writer = ByteWriter()
        writer.write_bytes(b"\x60")
        writer.write_text("0200")
        writer.write_hex("3220")

        assert writer.byte_length() == 7
        assert writer.to_bytes() == b"\x6002002 "

    def test_write_hex_invalid(self) -> None:
        """Test malformed hex text is rejected."""
        writer = ByteWriter()
        with pytest.raises(ValueError):
            writer.write_hex("abc")

    def test_write_text_non_latin1(self) -> None:
        """Test characters outside Latin-1 are rejected."""
        writer = ByteWriter()
        with pytest.raises(UnicodeEncodeError):
            writer.write_text("€")


class TestToWireBytes:
    """Test raw input conversion."""

    def test_text(self) -> None:
        assert to_wire_bytes("0200\xff") == b"0200\xff"

    def test_bytes_like(self) -> None:
        assert to_wire_bytes(bytearray(b"\x01\x02")) == b"\x01\x02"

    def test_non_latin1_text(self) -> None:
        with pytest.raises(ValueError, match="non-Latin-1"):
            to_wire_bytes("02€0")
