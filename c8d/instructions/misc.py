"""CHIP-8 miscellaneous instructions (Fxxx)."""

from c8d.fields import Fields
from c8d.mnemonics import Mnemonic
from c8d.instructions.system import Rendered, reg, lookup


def _fmt(template: str):
    """Renderer substituting ``{x}`` with the VX register name."""
    def render(instruction: Fields) -> str:
        return template.format(x=reg(instruction.x))
    return render


MISC_TABLE = {
    0x07: (Mnemonic.LD_VX_DT, _fmt("{x} = DT")),
    0x0A: (Mnemonic.LD_VX_K, _fmt("{x} = KEY")),
    0x15: (Mnemonic.LD_DT_VX, _fmt("DT = {x}")),
    0x18: (Mnemonic.LD_ST_VX, _fmt("ST = {x}")),
    0x1E: (Mnemonic.ADD_I_VX, _fmt("I += {x}")),
    0x29: (Mnemonic.LD_F_VX, _fmt("I = FONT({x})")),
    0x33: (Mnemonic.LD_B_VX, _fmt("BCD({x})")),
    0x55: (Mnemonic.LD_I_VX, _fmt("[I] = V0..{x}")),
    0x65: (Mnemonic.LD_VX_I, _fmt("V0..{x} = [I]")),
}


def render_misc_instruction(instruction: Fields) -> Rendered:
    """Dispatch misc instructions on the low byte."""
    return lookup(MISC_TABLE, instruction.nn, instruction)
