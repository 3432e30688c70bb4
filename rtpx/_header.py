"""Decoded RTP header record."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ._types import CSRC, SSRC, Version
from ._utils import CSRC_SIZE, FIXED_HEADER_SIZE


@dataclass(frozen=True, slots=True)
class Header:
    """
    Fixed RTP header plus its CSRC list.

    Instances are produced by the decoder and never modified afterwards.
    ``csrcs`` keeps the wire order of the contributing sources.

    Examples:
        >>> h = Header(Version.RTP2, False, False, True, 0, 1, 2, SSRC(3))
        >>> h.size
        12
    """

    version: Version
    has_padding: bool
    has_extension: bool
    has_marker: bool
    payload_type: int
    sequence_number: int
    timestamp: int
    ssrc: SSRC
    csrcs: tuple[CSRC, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.csrcs, tuple):
            object.__setattr__(self, "csrcs", tuple(self.csrcs))

    @property
    def csrc_count(self) -> int:
        return len(self.csrcs)

    @property
    def size(self) -> int:
        """Number of bytes the header occupies on the wire."""
        return FIXED_HEADER_SIZE + CSRC_SIZE * len(self.csrcs)

    def to_dict(self) -> dict[str, Any]:
        """Plain representation with identifiers as integers."""
        return {
            "version": int(self.version),
            "has_padding": self.has_padding,
            "has_extension": self.has_extension,
            "has_marker": self.has_marker,
            "payload_type": self.payload_type,
            "sequence_number": self.sequence_number,
            "timestamp": self.timestamp,
            "ssrc": int(self.ssrc),
            "csrcs": [int(csrc) for csrc in self.csrcs],
        }


__all__ = ["Header"]
