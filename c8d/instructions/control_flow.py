"""CHIP-8 control flow instructions."""

from c8d.fields import Fields
from c8d.mnemonics import Mnemonic
from c8d.instructions.system import Rendered, addr, byte, reg, lookup, unknown


def render_jump(instruction: Fields) -> Rendered:
    """1NNN - Jump to address NNN."""
    return Mnemonic.JP, addr(instruction.nnn)


def render_call(instruction: Fields) -> Rendered:
    """2NNN - Call subroutine at NNN."""
    return Mnemonic.CALL, addr(instruction.nnn)


def make_skip_instruction(mnemonic: Mnemonic, operator: str, register_form: bool = False):
    """Factory for skip instructions.

    Register forms (5XY0, 9XY0) only exist with a zero low nibble.
    """
    def skip_instruction(instruction: Fields) -> Rendered:
        if register_form:
            if instruction.n != 0:
                return unknown(instruction)
            return mnemonic, f"{reg(instruction.x)} {operator} {reg(instruction.y)}"
        return mnemonic, f"{reg(instruction.x)} {operator} {byte(instruction.nn)}"
    return skip_instruction


render_skip_if_equal_immediate = make_skip_instruction(Mnemonic.SE_BYTE, "==")

render_skip_if_not_equal_immediate = make_skip_instruction(Mnemonic.SNE_BYTE, "!=")

render_skip_if_equal_register = make_skip_instruction(Mnemonic.SE_REG, "==", register_form=True)

render_skip_if_not_equal_register = make_skip_instruction(Mnemonic.SNE_REG, "!=", register_form=True)


def render_jump_with_offset(instruction: Fields) -> Rendered:
    """BNNN - Jump to address NNN + V0."""
    return Mnemonic.JP_V0, f"{addr(instruction.nnn)} + V0"


KEY_TABLE = {
    0x9E: (Mnemonic.SKP, lambda inst: reg(inst.x)),
    0xA1: (Mnemonic.SKNP, lambda inst: reg(inst.x)),
}


def render_skip_if_key(instruction: Fields) -> Rendered:
    """EX9E/EXA1 - Skip if key pressed/not pressed."""
    return lookup(KEY_TABLE, instruction.nn, instruction)
