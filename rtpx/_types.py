"""
Type definitions for RTP header fields.

This module centralizes the small value types used by the decoder: the
protocol version enumeration with its classifier, and the two source
identifier wrappers.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

_U32_MAX = 0xFFFFFFFF


# =============================================================================
# Protocol Version
# =============================================================================


class Version(IntEnum):
    """
    Known values of the 2-bit version field.

    Only RTP2 is decoded; the older values are recognized so that they can be
    reported as unsupported instead of invalid.
    """

    RTP0 = 0  # vat audio tool
    RTP1 = 1  # first draft of RTP
    RTP2 = 2  # RFC 3550


class VersionError(ValueError):
    """Raised when a version discriminant maps to no known version."""

    def __init__(self, value: int) -> None:
        super().__init__(value)
        self.value = value

    def __str__(self) -> str:
        return f"invalid version: {self.value}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, VersionError):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash((VersionError, self.value))


def classify_version(value: int) -> Version:
    """
    Map a raw version discriminant to a Version.

    Args:
        value: The version bits, normally already masked to 2 bits

    Returns:
        The matching Version member

    Raises:
        VersionError: For the reserved value 3 or anything out of range
    """
    try:
        return Version(value)
    except ValueError:
        raise VersionError(value) from None


# =============================================================================
# Source Identifiers
# =============================================================================


def _check_u32(name: str, value: int) -> None:
    if not isinstance(value, int) or isinstance(value, bool):
        raise TypeError(f"{name} must be int, got {type(value).__name__}")
    if not 0 <= value <= _U32_MAX:
        raise ValueError(f"{name} out of range: {value}")


@dataclass(frozen=True, slots=True)
class SSRC:
    """Synchronization source identifier."""

    value: int

    def __post_init__(self) -> None:
        _check_u32("SSRC", self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"0x{self.value:08x}"


@dataclass(frozen=True, slots=True)
class CSRC:
    """Contributing source identifier."""

    value: int

    def __post_init__(self) -> None:
        _check_u32("CSRC", self.value)

    def __int__(self) -> int:
        return self.value

    def __str__(self) -> str:
        return f"0x{self.value:08x}"


__all__ = [
    "Version",
    "VersionError",
    "classify_version",
    "SSRC",
    "CSRC",
]
