from __future__ import annotations

import struct
from typing import Callable, Sequence

import pytest

HeaderBuilder = Callable[..., bytes]


def _build_header(
    *,
    version: int = 2,
    padding: bool = False,
    extension: bool = False,
    marker: bool = False,
    payload_type: int = 0,
    sequence: int = 0,
    timestamp: int = 0,
    ssrc: int = 0,
    csrcs: Sequence[int] = (),
    csrc_count: int | None = None,
) -> bytes:
    """Lay out header bytes in the order the decoder reads them."""
    count = len(csrcs) if csrc_count is None else csrc_count
    b0 = (version & 0x3) | (0x4 if padding else 0) | (0x8 if extension else 0) | (count << 4)
    b1 = (0x1 if marker else 0) | (payload_type << 1)
    raw = bytes([b0, b1]) + struct.pack(">HII", sequence, timestamp, ssrc)
    return raw + b"".join(struct.pack(">I", csrc) for csrc in csrcs)


@pytest.fixture()
def build_header() -> HeaderBuilder:
    return _build_header


@pytest.fixture()
def minimal_packet() -> bytes:
    return bytes(
        [0x02, 0x00, 0x00, 0x01, 0x00, 0x00, 0x00, 0x02, 0x00, 0x00, 0x00, 0x03]
    )
