"""
Decode error hierarchy.

Every failure of the decoder is a DecodeError subclass. The set of
subclasses may grow; callers should keep an ``except DecodeError`` arm
(or a default branch when dispatching on ``kind``) for kinds they do not
know about.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional

from ._types import Version, VersionError


class DecodeErrorKind(Enum):
    """Tag identifying the kind of a DecodeError."""

    UNEXPECTED_EOF = auto()  # Buffer ended inside a field
    UNSUPPORTED_VERSION = auto()  # Known version other than RTP2
    VERSION = auto()  # Version bits rejected by the classifier


class DecodeError(Exception):
    """Base exception for header decode errors."""

    kind: DecodeErrorKind

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DecodeError):
            return NotImplemented
        return type(self) is type(other) and self.args == other.args

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class UnexpectedEOFError(DecodeError):
    """Raised when the buffer is shorter than the field being read."""

    kind = DecodeErrorKind.UNEXPECTED_EOF

    def __str__(self) -> str:
        return "unexpected EOF"


class UnsupportedVersionError(DecodeError):
    """Raised when the version is recognized but not RTP2."""

    kind = DecodeErrorKind.UNSUPPORTED_VERSION

    def __init__(self, version: Optional[Version] = None) -> None:
        super().__init__(version)
        self.version = version

    def __str__(self) -> str:
        return "unsupported version"


class VersionDecodeError(DecodeError):
    """Raised when the version classifier rejects the version bits."""

    kind = DecodeErrorKind.VERSION

    def __init__(self, error: VersionError) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return str(self.error)


__all__ = [
    "DecodeErrorKind",
    "DecodeError",
    "UnexpectedEOFError",
    "UnsupportedVersionError",
    "VersionDecodeError",
]
