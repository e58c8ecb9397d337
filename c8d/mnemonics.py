"""Closed set of CHIP-8 instruction shapes."""

from enum import Enum


class Mnemonic(str, Enum):
    """Instruction class, named after its reference encoding."""
    CLS = "00E0"
    RET = "00EE"
    SYS = "0NNN"
    JP = "1NNN"
    CALL = "2NNN"
    SE_BYTE = "3XNN"
    SNE_BYTE = "4XNN"
    SE_REG = "5XY0"
    LD_BYTE = "6XNN"
    ADD_BYTE = "7XNN"
    LD_REG = "8XY0"
    OR = "8XY1"
    AND = "8XY2"
    XOR = "8XY3"
    ADD_REG = "8XY4"
    SUB = "8XY5"
    SHR = "8XY6"
    SUBN = "8XY7"
    SHL = "8XYE"
    SNE_REG = "9XY0"
    LD_I = "ANNN"
    JP_V0 = "BNNN"
    RND = "CXNN"
    DRW = "DXYN"
    SKP = "EX9E"
    SKNP = "EXA1"
    LD_VX_DT = "FX07"
    LD_VX_K = "FX0A"
    LD_DT_VX = "FX15"
    LD_ST_VX = "FX18"
    ADD_I_VX = "FX1E"
    LD_F_VX = "FX29"
    LD_B_VX = "FX33"
    LD_I_VX = "FX55"
    LD_VX_I = "FX65"
    UNKNOWN = "????"

    @property
    def description(self) -> str:
        """Fixed human-readable summary of the instruction class."""
        return _DESCRIPTIONS[self]

    def __str__(self) -> str:
        return self.value


_DESCRIPTIONS = {
    Mnemonic.CLS: "CLEAR SCREEN",
    Mnemonic.RET: "RETURN FROM SUBROUTINE",
    Mnemonic.SYS: "EXECUTE MACHINE ROUTINE AT NNN",
    Mnemonic.JP: "JUMP TO NNN",
    Mnemonic.CALL: "CALL SUBROUTINE AT NNN",
    Mnemonic.SE_BYTE: "SKIP IF VX == NN",
    Mnemonic.SNE_BYTE: "SKIP IF VX != NN",
    Mnemonic.SE_REG: "SKIP IF VX == VY",
    Mnemonic.LD_BYTE: "SET VX = NN",
    Mnemonic.ADD_BYTE: "ADD VX = VX + NN",
    Mnemonic.LD_REG: "SET VX = VY",
    Mnemonic.OR: "SET VX = VX OR VY",
    Mnemonic.AND: "SET VX = VX AND VY",
    Mnemonic.XOR: "SET VX = VX XOR VY",
    Mnemonic.ADD_REG: "ADD VX = VX + VY, VF = CARRY",
    Mnemonic.SUB: "SET VX = VX - VY, VF = NOT BORROW",
    Mnemonic.SHR: "SHIFT VX RIGHT, VF = LSB",
    Mnemonic.SUBN: "SET VX = VY - VX, VF = NOT BORROW",
    Mnemonic.SHL: "SHIFT VX LEFT, VF = MSB",
    Mnemonic.SNE_REG: "SKIP IF VX != VY",
    Mnemonic.LD_I: "SET I = NNN",
    Mnemonic.JP_V0: "JUMP TO NNN + V0",
    Mnemonic.RND: "SET VX = RAND() AND NN",
    Mnemonic.DRW: "DRAW SPRITE AT VX, VY, N ROWS",
    Mnemonic.SKP: "SKIP IF KEY VX PRESSED",
    Mnemonic.SKNP: "SKIP IF KEY VX NOT PRESSED",
    Mnemonic.LD_VX_DT: "SET VX = DELAY TIMER",
    Mnemonic.LD_VX_K: "WAIT FOR KEY, STORE IN VX",
    Mnemonic.LD_DT_VX: "SET DELAY TIMER = VX",
    Mnemonic.LD_ST_VX: "SET SOUND TIMER = VX",
    Mnemonic.ADD_I_VX: "ADD I = I + VX",
    Mnemonic.LD_F_VX: "SET I = FONT SPRITE FOR VX",
    Mnemonic.LD_B_VX: "STORE BCD OF VX AT I",
    Mnemonic.LD_I_VX: "STORE V0..VX AT I",
    Mnemonic.LD_VX_I: "LOAD V0..VX FROM I",
    Mnemonic.UNKNOWN: "UNKNOWN OPCODE",
}
