"""CHIP-8 opcode field extraction."""

from chex import dataclass

from c8d.constants import (
    FAMILY_MASK, FAMILY_SHIFT, X_MASK, X_SHIFT, Y_MASK, Y_SHIFT,
    N_MASK, NN_MASK, NNN_MASK,
)


@dataclass(frozen=True)
class Fields:
    """Sub-fields of a 16-bit CHIP-8 opcode."""
    raw: int
    family: int  # First nibble
    x: int       # Second nibble (VX register)
    y: int       # Third nibble (VY register)
    n: int       # Fourth nibble (4-bit immediate)
    nn: int      # Last byte (8-bit immediate)
    nnn: int     # Last 12 bits (12-bit address)


def extract_fields(opcode) -> Fields:
    """Split an opcode into its fields.

    Only bitwise operations are used, so ``opcode`` may be a Python int or
    a ``jax.numpy`` integer array; in the latter case every field is an
    array of the same shape.
    """
    return Fields(
        raw=opcode,
        family=(opcode & FAMILY_MASK) >> FAMILY_SHIFT,
        x=(opcode & X_MASK) >> X_SHIFT,
        y=(opcode & Y_MASK) >> Y_SHIFT,
        n=opcode & N_MASK,
        nn=opcode & NN_MASK,
        nnn=opcode & NNN_MASK
    )
