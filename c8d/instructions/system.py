"""CHIP-8 system instructions (0x0xxx) and shared rendering helpers."""

from typing import Callable, Mapping

from c8d.fields import Fields
from c8d.mnemonics import Mnemonic

Rendered = tuple[Mnemonic, str]
Renderer = Callable[[Fields], str]


def reg(index: int) -> str:
    return f"V{index:X}"


def byte(value: int) -> str:
    return f"{value:02X}"


def addr(value: int) -> str:
    return f"#{value:03X}"


def no_operands(instruction: Fields) -> str:
    return ""


def unknown(instruction: Fields) -> Rendered:
    """Fallback for any pattern without a defined meaning."""
    return Mnemonic.UNKNOWN, f"{instruction.raw:04X}"


def lookup(table: Mapping[int, tuple[Mnemonic, Renderer]], key: int, instruction: Fields) -> Rendered:
    """Secondary dispatch: resolve ``key`` in ``table`` or fall back to unknown."""
    entry = table.get(key)
    if entry is None:
        return unknown(instruction)
    mnemonic, render = entry
    return mnemonic, render(instruction)


def render_machine_routine(instruction: Fields) -> str:
    """0NNN - Execute machine language routine at NNN."""
    return addr(instruction.nnn)


# Exact low-byte matches are tried before the family-wide 0NNN form.
SYSTEM_TABLE = {
    0xE0: (Mnemonic.CLS, no_operands),
    0xEE: (Mnemonic.RET, no_operands),
}


def render_system_instruction(instruction: Fields) -> Rendered:
    """Dispatch system instructions."""
    if instruction.x == 0 and instruction.nn in SYSTEM_TABLE:
        return lookup(SYSTEM_TABLE, instruction.nn, instruction)
    return Mnemonic.SYS, render_machine_routine(instruction)
