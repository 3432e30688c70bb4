"""
RTP header decoder.

Turns the leading bytes of a packet into a Header. Fields are read one after
the other and a short buffer is reported at the first field that does not
fit, so no minimum length is checked up front.
"""

from __future__ import annotations

import typing
from collections.abc import Iterable, Iterator

from ._errors import UnexpectedEOFError, UnsupportedVersionError, VersionDecodeError
from ._header import Header
from ._reader import ByteReader, ShortReadError
from ._types import CSRC, SSRC, Version, VersionError, classify_version
from ._utils import (
    CSRC_COUNT_SHIFT,
    EXTENSION_MASK,
    MARKER_MASK,
    PADDING_MASK,
    PAYLOAD_TYPE_SHIFT,
    VERSION_MASK,
    logger,
)

BufferLike = typing.Union[bytes, bytearray, memoryview, ByteReader]


class HeaderDecoder:
    """
    Stateless RTP header decoder.

    All methods are static; the class only groups the decoding entry points.
    """

    @staticmethod
    def decode(buffer: BufferLike) -> Header:
        """
        Decode an RTP header from the start of ``buffer``.

        Bytes after the last CSRC are not inspected. When a ByteReader is
        given, it is advanced past the header.

        Args:
            buffer: Raw packet bytes or a read cursor positioned at a header

        Returns:
            Fully populated Header

        Raises:
            UnexpectedEOFError: If the buffer ends inside any field
            VersionDecodeError: If the version bits are not a known version
            UnsupportedVersionError: If the version is known but not RTP2

        Example:
            >>> h = HeaderDecoder.decode(bytes([0x02, 0, 0, 1, 0, 0, 0, 2, 0, 0, 0, 3]))
            >>> h.sequence_number, h.timestamp, int(h.ssrc)
            (1, 2, 3)
        """
        reader = buffer if isinstance(buffer, ByteReader) else ByteReader(buffer)

        try:
            byte = reader.read_u8()
            try:
                version = classify_version(byte & VERSION_MASK)
            except VersionError as exc:
                raise VersionDecodeError(exc) from exc
            if version is not Version.RTP2:
                raise UnsupportedVersionError(version)

            has_padding = bool(byte & PADDING_MASK)
            has_extension = bool(byte & EXTENSION_MASK)
            csrc_count = byte >> CSRC_COUNT_SHIFT

            byte = reader.read_u8()
            has_marker = bool(byte & MARKER_MASK)
            payload_type = byte >> PAYLOAD_TYPE_SHIFT

            sequence_number = reader.read_u16()
            timestamp = reader.read_u32()
            ssrc = SSRC(reader.read_u32())
            csrcs = tuple(CSRC(reader.read_u32()) for _ in range(csrc_count))
        except ShortReadError as exc:
            raise UnexpectedEOFError() from exc

        header = Header(
            version=version,
            has_padding=has_padding,
            has_extension=has_extension,
            has_marker=has_marker,
            payload_type=payload_type,
            sequence_number=sequence_number,
            timestamp=timestamp,
            ssrc=ssrc,
            csrcs=csrcs,
        )
        logger.debug(
            f"Decoded RTP header seq={sequence_number} ssrc={ssrc} csrcs={csrc_count}"
        )
        return header

    @staticmethod
    def decode_many(buffers: Iterable[BufferLike]) -> Iterator[Header]:
        """
        Decode one header per buffer.

        Raises:
            DecodeError: From the first buffer that fails to decode
        """
        for buffer in buffers:
            yield HeaderDecoder.decode(buffer)


def decode(buffer: BufferLike) -> Header:
    """Decode an RTP header. Shortcut for HeaderDecoder.decode()."""
    return HeaderDecoder.decode(buffer)


__all__ = ["HeaderDecoder", "decode", "BufferLike"]
