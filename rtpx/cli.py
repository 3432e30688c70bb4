"""Command-line inspector for RTP headers.

Decodes packets given as hex strings (or one raw binary file) and prints the
header fields as a table or as JSON. Intended for poking at captures by hand.
"""

from __future__ import annotations

import argparse
import json
import logging
import re
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ._decoder import HeaderDecoder
from ._errors import DecodeError
from ._header import Header
from ._utils import configure_logging, console, logger

ERROR_CONSOLE = Console(stderr=True)

EXIT_OK = 0
EXIT_DECODE_ERROR = 1
EXIT_USAGE = 2

_HEX_SEPARATORS = re.compile(r"[\s:,]+")


@dataclass
class InspectConfig:
    """Options collected from the command line."""

    packets: list[str] = field(default_factory=list)
    file: Optional[Path] = None
    as_json: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> InspectConfig:
        return cls(
            packets=list(args.packets),
            file=args.file,
            as_json=args.json,
            log_level=args.log_level,
        )


def parse_hex(text: str) -> bytes:
    """
    Parse a hex dump into bytes.

    Whitespace, colons and commas separate groups, and each group may carry a
    ``0x`` prefix.

    Raises:
        ValueError: If the text is not valid hex
    """
    groups = [group for group in _HEX_SEPARATORS.split(text.strip()) if group]
    cleaned = "".join(
        group[2:] if group.lower().startswith("0x") else group for group in groups
    )
    return bytes.fromhex(cleaned)


def _header_table(header: Header, title: str) -> Table:
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Field")
    table.add_column("Value")
    table.add_row("version", header.version.name)
    table.add_row("padding", str(header.has_padding))
    table.add_row("extension", str(header.has_extension))
    table.add_row("marker", str(header.has_marker))
    table.add_row("payload_type", str(header.payload_type))
    table.add_row("sequence_number", str(header.sequence_number))
    table.add_row("timestamp", str(header.timestamp))
    table.add_row("ssrc", str(header.ssrc))
    table.add_row("csrcs", ", ".join(str(csrc) for csrc in header.csrcs) or "-")
    table.add_row("header_size", str(header.size))
    return table


def _load_packets(config: InspectConfig) -> list[bytes]:
    if config.file is not None:
        with open(config.file, "rb") as fh:
            return [fh.read()]
    return [parse_hex(packet) for packet in config.packets]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Decode and display RTP packet headers")
    parser.add_argument("packets", nargs="*", help="Packets as hex strings")
    parser.add_argument("--file", type=Path, help="Read one raw binary packet from a file")
    parser.add_argument("--json", action="store_true", help="Print headers as JSON")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level",
    )
    return parser


def run(config: InspectConfig) -> int:
    """Decode every configured packet and print the results."""
    configure_logging(getattr(logging, config.log_level))

    try:
        packets = _load_packets(config)
    except ValueError as exc:
        ERROR_CONSOLE.print(f"[red]Invalid hex input:[/red] {escape(str(exc))}")
        return EXIT_USAGE
    except OSError as exc:
        ERROR_CONSOLE.print(f"[red]Cannot read packet file:[/red] {escape(str(exc))}")
        return EXIT_USAGE

    if not packets:
        ERROR_CONSOLE.print("[red]No packets given[/red]")
        return EXIT_USAGE

    status = EXIT_OK
    for index, packet in enumerate(packets, start=1):
        logger.info(f"Packet {index}: {len(packet)} bytes")
        try:
            header = HeaderDecoder.decode(packet)
        except DecodeError as exc:
            ERROR_CONSOLE.print(f"[red]Packet {index}: {exc}[/red]")
            status = EXIT_DECODE_ERROR
            continue

        if config.as_json:
            console.out(json.dumps(header.to_dict()), highlight=False)
        else:
            console.print(_header_table(header, f"Packet {index}"))

    return status


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    return run(InspectConfig.from_args(args))


if __name__ == "__main__":
    sys.exit(main())
