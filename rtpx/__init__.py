"""rtpx - RTP packet header decoding for Python."""

from __future__ import annotations

# Decoder
from ._decoder import BufferLike, HeaderDecoder, decode

# Errors
from ._errors import (
    DecodeError,
    DecodeErrorKind,
    UnexpectedEOFError,
    UnsupportedVersionError,
    VersionDecodeError,
)

# Header model
from ._header import Header

# Byte reader
from ._reader import ByteReader, ShortReadError

# Types
from ._types import CSRC, SSRC, Version, VersionError, classify_version

# Utilities
from ._utils import (
    CSRC_SIZE,
    FIXED_HEADER_SIZE,
    MAX_CSRC_COUNT,
    RTP_VERSION,
    configure_logging,
    console,
    logger,
)

__version__ = "0.1.0"

__all__ = [
    # Decoder - Main API
    "decode",
    "HeaderDecoder",
    "BufferLike",
    # Header model
    "Header",
    # Errors
    "DecodeError",
    "DecodeErrorKind",
    "UnexpectedEOFError",
    "UnsupportedVersionError",
    "VersionDecodeError",
    # Types
    "Version",
    "VersionError",
    "classify_version",
    "SSRC",
    "CSRC",
    # Reader
    "ByteReader",
    "ShortReadError",
    # Utilities - Console & Logging
    "console",
    "logger",
    "configure_logging",
    # Constants
    "RTP_VERSION",
    "FIXED_HEADER_SIZE",
    "CSRC_SIZE",
    "MAX_CSRC_COUNT",
]
