"""Plain-text listing of a disassembly."""

from typing import Iterable, Iterator

from c8d.decode import DecodedInstruction

SEPARATOR = "\t"

COLUMNS = ("ADDR", "OPCODE", "MNEMONIC", "DESCRIPTION", "OPERANDS")

HEADER = (
    SEPARATOR.join(COLUMNS),
    SEPARATOR.join("-" * len(column) for column in COLUMNS),
)


def format_line(address: int, instruction: DecodedInstruction) -> str:
    """One listing row: address, raw opcode, mnemonic, description, operands."""
    return SEPARATOR.join((
        f"0x{address:04X}",
        f"{instruction.opcode:04X}",
        str(instruction.mnemonic),
        instruction.description,
        instruction.operands,
    ))


def format_report(listing: Iterable[tuple[int, DecodedInstruction]], header: bool = True) -> Iterator[str]:
    """Yield the header lines followed by one row per instruction, in order."""
    if header:
        yield from HEADER
    for address, instruction in listing:
        yield format_line(address, instruction)
