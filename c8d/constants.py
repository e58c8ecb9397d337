"""CHIP-8 disassembler constants."""

PROGRAM_START = 0x200
WORD_SIZE = 2
OPCODE_MASK = 0xFFFF
ADDRESS_MASK = 0x0FFF

FAMILY_MASK = 0xF000
X_MASK = 0x0F00
Y_MASK = 0x00F0
N_MASK = 0x000F
NN_MASK = 0x00FF
NNN_MASK = ADDRESS_MASK

FAMILY_SHIFT = 12
X_SHIFT = 8
Y_SHIFT = 4

NUM_FAMILIES = 16

# Addresses are shown as four hex digits
ADDRESS_SPACE = 0x10000

# Filler paired with a dangling final byte under OddBytePolicy.PAD
PAD_BYTE = 0x00
