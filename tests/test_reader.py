from __future__ import annotations

import pytest

from rtpx import ByteReader, ShortReadError


def test_reads_big_endian_integers() -> None:
    reader = ByteReader(b"\x01\x02\x03\x04\x05\x06\x07")
    assert reader.read_u8() == 0x01
    assert reader.read_u16() == 0x0203
    assert reader.read_u32() == 0x04050607
    assert reader.remaining == 0
    assert reader.position == 7


def test_short_read_does_not_advance() -> None:
    reader = ByteReader(b"\x00\x01\x02")
    reader.read_u8()
    with pytest.raises(ShortReadError) as excinfo:
        reader.read_u32()
    assert excinfo.value.needed == 4
    assert excinfo.value.available == 2
    assert reader.position == 1
    assert reader.read_u16() == 0x0102


def test_short_read_is_eof_error() -> None:
    with pytest.raises(EOFError):
        ByteReader(b"").read_u8()


def test_read_raw_bytes() -> None:
    reader = ByteReader(bytearray(b"abcdef"))
    assert reader.read(0) == b""
    assert reader.read(4) == b"abcd"
    assert reader.read(2) == b"ef"


def test_negative_read_size() -> None:
    with pytest.raises(ValueError):
        ByteReader(b"abc").read(-1)
