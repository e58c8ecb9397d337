"""Test configuration and fixtures for the disassembler tests."""

import io

import pytest
from c8d import Mnemonic
from c8d.logging import ConsoleLogger


# One encoding per defined instruction shape, in table order.
REFERENCE_TABLE = [
    (0x00E0, Mnemonic.CLS),
    (0x00EE, Mnemonic.RET),
    (0x0123, Mnemonic.SYS),
    (0x1ABC, Mnemonic.JP),
    (0x2ABC, Mnemonic.CALL),
    (0x31AB, Mnemonic.SE_BYTE),
    (0x41AB, Mnemonic.SNE_BYTE),
    (0x5120, Mnemonic.SE_REG),
    (0x61AB, Mnemonic.LD_BYTE),
    (0x71AB, Mnemonic.ADD_BYTE),
    (0x8120, Mnemonic.LD_REG),
    (0x8121, Mnemonic.OR),
    (0x8122, Mnemonic.AND),
    (0x8123, Mnemonic.XOR),
    (0x8124, Mnemonic.ADD_REG),
    (0x8125, Mnemonic.SUB),
    (0x8126, Mnemonic.SHR),
    (0x8127, Mnemonic.SUBN),
    (0x812E, Mnemonic.SHL),
    (0x9120, Mnemonic.SNE_REG),
    (0xAABC, Mnemonic.LD_I),
    (0xBABC, Mnemonic.JP_V0),
    (0xC1AB, Mnemonic.RND),
    (0xD123, Mnemonic.DRW),
    (0xE19E, Mnemonic.SKP),
    (0xE1A1, Mnemonic.SKNP),
    (0xF107, Mnemonic.LD_VX_DT),
    (0xF10A, Mnemonic.LD_VX_K),
    (0xF115, Mnemonic.LD_DT_VX),
    (0xF118, Mnemonic.LD_ST_VX),
    (0xF11E, Mnemonic.ADD_I_VX),
    (0xF129, Mnemonic.LD_F_VX),
    (0xF133, Mnemonic.LD_B_VX),
    (0xF155, Mnemonic.LD_I_VX),
    (0xF165, Mnemonic.LD_VX_I),
]


@pytest.fixture
def log_stream():
    """Capture diagnostics written by the logger."""
    return io.StringIO()


@pytest.fixture
def quiet_logger(log_stream):
    """Logger writing into ``log_stream`` without colors."""
    return ConsoleLogger(log_level="DEBUG", use_colors=False, stream=log_stream)


@pytest.fixture
def reference_image():
    """Program image holding every reference encoding, big-endian."""
    return b"".join(opcode.to_bytes(2, "big") for opcode, _ in REFERENCE_TABLE)


def write_rom(tmp_path, data, name="test.ch8"):
    """Helper to put a ROM file on disk."""
    path = tmp_path / name
    path.write_bytes(bytes(data))
    return path
