"""CHIP-8 memory and register operations."""

from c8d.fields import Fields
from c8d.mnemonics import Mnemonic
from c8d.instructions.system import Rendered, addr, byte, reg


def render_set(instruction: Fields) -> Rendered:
    """6XNN - Set VX = NN."""
    return Mnemonic.LD_BYTE, f"{reg(instruction.x)} = {byte(instruction.nn)}"


def render_add(instruction: Fields) -> Rendered:
    """7XNN - Add NN to VX."""
    return Mnemonic.ADD_BYTE, f"{reg(instruction.x)} += {byte(instruction.nn)}"


def render_set_index(instruction: Fields) -> Rendered:
    """ANNN - Set I = NNN."""
    return Mnemonic.LD_I, f"I = {addr(instruction.nnn)}"


def render_random(instruction: Fields) -> Rendered:
    """CXNN - Set VX = random & NN."""
    return Mnemonic.RND, f"{reg(instruction.x)} = RAND & {byte(instruction.nn)}"
