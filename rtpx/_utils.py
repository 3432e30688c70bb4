"""Utilities and constants for RTP header decoding."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

# Rich Console for pretty printing
console = Console()

# Get logger for the package
logger = logging.getLogger("rtpx")
logger.addHandler(logging.NullHandler())

RTP_VERSION = 2
FIXED_HEADER_SIZE = 12
CSRC_SIZE = 4
MAX_CSRC_COUNT = 15

# Bit masks of the first two header bytes
VERSION_MASK = 0x03
PADDING_MASK = 0x04
EXTENSION_MASK = 0x08
CSRC_COUNT_SHIFT = 4
MARKER_MASK = 0x01
PAYLOAD_TYPE_SHIFT = 1


def configure_logging(level: int | str = logging.WARNING) -> None:
    """
    Route package logging through a RichHandler on the shared console.

    Library code never calls this; it is meant for command-line entry points.

    Args:
        level: Logging level name or number
    """
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True, show_path=False)],
        force=True,
    )
    logger.setLevel(level)


__all__ = [
    "console",
    "logger",
    "configure_logging",
    "RTP_VERSION",
    "FIXED_HEADER_SIZE",
    "CSRC_SIZE",
    "MAX_CSRC_COUNT",
]
