"""CHIP-8 ALU operations (8xxx)."""

from c8d.fields import Fields
from c8d.mnemonics import Mnemonic
from c8d.instructions.system import Rendered, reg, lookup


def _binary(operator: str):
    def render(instruction: Fields) -> str:
        return f"{reg(instruction.x)} {operator} {reg(instruction.y)}"
    return render


def _shift(instruction: Fields) -> str:
    """Both registers; which one is shifted depends on the interpreter."""
    return f"{reg(instruction.x)}, {reg(instruction.y)}"


def _sub_yx(instruction: Fields) -> str:
    return f"{reg(instruction.x)} = {reg(instruction.y)} - {reg(instruction.x)}"


# Low nibbles 8-D and F are undefined and fall through to unknown.
ALU_TABLE = {
    0x0: (Mnemonic.LD_REG, _binary("=")),
    0x1: (Mnemonic.OR, _binary("|=")),
    0x2: (Mnemonic.AND, _binary("&=")),
    0x3: (Mnemonic.XOR, _binary("^=")),
    0x4: (Mnemonic.ADD_REG, _binary("+=")),
    0x5: (Mnemonic.SUB, _binary("-=")),
    0x6: (Mnemonic.SHR, _shift),
    0x7: (Mnemonic.SUBN, _sub_yx),
    0xE: (Mnemonic.SHL, _shift),
}


def render_alu_operation(instruction: Fields) -> Rendered:
    """8XYN - ALU operations dispatcher."""
    return lookup(ALU_TABLE, instruction.n, instruction)
