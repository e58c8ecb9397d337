"""Command-line entry point: disassemble a CHIP-8 ROM to standard output."""

import argparse
import sys
from typing import Optional, Sequence

from c8d import __version__
from c8d.constants import PROGRAM_START, ADDRESS_SPACE
from c8d.disassembler import disassemble
from c8d.logging import LEVELS, ConsoleLogger, with_progress
from c8d.memory import (
    AddressRangeError, ImageAccessError, OddBytePolicy, OddLengthImageError, load_rom
)
from c8d.report import format_report


def _address(text: str) -> int:
    """Parse a load base given in decimal or with a 0x prefix."""
    try:
        value = int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid address: {text!r}") from None
    if not 0 <= value < ADDRESS_SPACE:
        raise argparse.ArgumentTypeError(f"address out of range 0..{ADDRESS_SPACE - 1:#x}: {text!r}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="c8d",
        description="Disassemble CHIP-8 ROMs",
    )
    parser.add_argument(
        "rom",
        help="Path to the ROM image to disassemble",
    )
    parser.add_argument(
        "--base",
        type=_address,
        default=PROGRAM_START,
        help=f"Load address of the first byte (default: {PROGRAM_START:#x})",
    )
    parser.add_argument(
        "--odd",
        choices=[policy.value for policy in OddBytePolicy],
        default=OddBytePolicy.PAD.value,
        help="Handling of a trailing unpaired byte (default: pad)",
    )
    parser.add_argument(
        "--progress",
        action="store_true",
        help="Show a progress bar on stderr while decoding",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LEVELS,
        default="WARNING",
        help="Minimum level of diagnostics on stderr (default: WARNING)",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colors in diagnostics",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logger = ConsoleLogger(log_level=args.log_level, use_colors=not args.no_color)

    try:
        program = load_rom(args.rom, base=args.base, policy=OddBytePolicy(args.odd), logger=logger)
    except ImageAccessError as e:
        logger.error(str(e))
        return 1
    except (OddLengthImageError, AddressRangeError) as e:
        logger.error(f"{args.rom}: {e}")
        return 1

    if args.log_level == "DEBUG":
        counts = program.family_counts().tolist()
        logger.debug("Family histogram: " + " ".join(f"{family:X}={count}" for family, count in enumerate(counts)))

    listing = with_progress(disassemble(program), total=len(program), enabled=args.progress)
    for line in format_report(listing):
        print(line)
    logger.info(f"Disassembled {len(program)} instructions from {args.rom}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
