"""CHIP-8 disassembler package."""

__version__ = "0.1.0"

from c8d.fields import Fields, extract_fields
from c8d.mnemonics import Mnemonic
from c8d.decode import DecodedInstruction, decode
from c8d.memory import (
    Program, OddBytePolicy, OddLengthImageError, AddressRangeError, ImageAccessError,
    load_program, load_rom,
)
from c8d.disassembler import Disassembly, disassemble
from c8d.report import HEADER, format_line, format_report
from c8d.constants import PROGRAM_START

__all__ = [
    "Fields",
    "extract_fields",
    "Mnemonic",
    "DecodedInstruction",
    "decode",
    "Program",
    "OddBytePolicy",
    "OddLengthImageError",
    "AddressRangeError",
    "ImageAccessError",
    "load_program",
    "load_rom",
    "Disassembly",
    "disassemble",
    "HEADER",
    "format_line",
    "format_report",
    "PROGRAM_START",
]
