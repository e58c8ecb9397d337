"""CHIP-8 display instructions (Dxxx)."""

from c8d.fields import Fields
from c8d.mnemonics import Mnemonic
from c8d.instructions.system import Rendered, reg


def render_display(instruction: Fields) -> Rendered:
    """DXYN - Draw an N-row sprite from memory at I to (VX, VY)."""
    return Mnemonic.DRW, f"{reg(instruction.x)}, {reg(instruction.y)}, {instruction.n:X}"
