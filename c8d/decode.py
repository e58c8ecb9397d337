"""CHIP-8 instruction decoding."""

from chex import dataclass

from c8d.constants import OPCODE_MASK
from c8d.fields import extract_fields
from c8d.mnemonics import Mnemonic
from c8d.instructions.system import render_system_instruction
from c8d.instructions.control_flow import (
    render_jump, render_call, render_skip_if_equal_immediate,
    render_skip_if_not_equal_immediate, render_skip_if_equal_register,
    render_skip_if_not_equal_register, render_jump_with_offset, render_skip_if_key
)
from c8d.instructions.alu import render_alu_operation
from c8d.instructions.memory import render_set, render_add, render_set_index, render_random
from c8d.instructions.display import render_display
from c8d.instructions.misc import render_misc_instruction


@dataclass(frozen=True)
class DecodedInstruction:
    """Decoded CHIP-8 instruction ready for display."""
    opcode: int
    mnemonic: Mnemonic
    description: str
    operands: str


# Indexed by the top nibble of the opcode.
FAMILY_RENDERERS = (
    render_system_instruction,
    render_jump,
    render_call,
    render_skip_if_equal_immediate,
    render_skip_if_not_equal_immediate,
    render_skip_if_equal_register,
    render_set,
    render_add,
    render_alu_operation,
    render_skip_if_not_equal_register,
    render_set_index,
    render_jump_with_offset,
    render_random,
    render_display,
    render_skip_if_key,
    render_misc_instruction,
)


def decode(opcode: int) -> DecodedInstruction:
    """Decode a 16-bit opcode.

    Total over ``0x0000..0xFFFF``: patterns with no defined meaning decode
    to ``Mnemonic.UNKNOWN`` instead of raising.
    """
    opcode = int(opcode) & OPCODE_MASK
    fields = extract_fields(opcode)
    mnemonic, operands = FAMILY_RENDERERS[fields.family](fields)
    return DecodedInstruction(
        opcode=opcode,
        mnemonic=mnemonic,
        description=mnemonic.description,
        operands=operands
    )
